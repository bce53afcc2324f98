import timeit
from tabulate import tabulate
from xducers import transduce, compose, arrayOf, sumOf
from xducers import map as xmap, filter as xfilter, take, partitionAll, sort, branch, multiplex, wires
from xducers.util import partial, consume, compare

def isOdd(n):
    return n % 2 == 1

def square(x):
    return x * x

def inc(x):
    return x + 1

# args example: partial(sum_odd_squares_loop, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def sum_odd_squares_loop(ns):
    total = 0
    for n in ns:
        if isOdd(n):
            total += square(n)
    return total

def sum_odd_squares_comprehension(ns):
    return sum([square(n) for n in ns if isOdd(n)])

def sum_odd_squares_builtins(ns):
    return sum(map(square, filter(isOdd, ns)))

def sum_odd_squares_transduce(ns):
    return transduce(compose(xfilter(isOdd), xmap(square)), sumOf, 0, ns)

def first_squares_loop(ns):
    out = []
    for n in ns:
        if len(out) == 10:
            break
        out.append(square(n))
    return out

def first_squares_transduce(ns):
    return transduce(compose(xmap(square), take(10)), arrayOf, [], ns)

def pairs_loop(ns):
    out = []
    part = []
    for n in ns:
        part.append(inc(n))
        if len(part) == 2:
            out.append(part)
            part = []
    if part:
        out.append(part)
    return out

def pairs_transduce(ns):
    return transduce(compose(xmap(inc), partitionAll(2)), arrayOf, [], ns)

def sorted_builtin(ns):
    return sorted(ns, reverse=True)

def sorted_transduce(ns):
    return transduce(sort(lambda a, b: compare(b, a)), arrayOf, [], ns)

def routed_loop(ns):
    out = []
    for n in ns:
        if isOdd(n):
            out.append(square(n))
        else:
            out.append(inc(n))
    return out

def routed_branch(ns):
    return transduce(branch(isOdd, xmap(square), xmap(inc)), arrayOf, [], ns)

def routed_multiplex(ns):
    xf = multiplex(wires(isOdd, xmap(square)), wires(lambda n: True, xmap(inc)))
    return transduce(xf, arrayOf, [], ns)


hundredK = range(100000)

def test_sum_odd_squares():
    performance_compare(sum_odd_squares_loop,
                        sum_odd_squares_comprehension,
                        sum_odd_squares_builtins,
                        sum_odd_squares_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_early_stop():
    performance_compare(first_squares_loop,
                        first_squares_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10000})

def test_partition():
    performance_compare(pairs_loop,
                        pairs_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_sort():
    performance_compare(sorted_builtin,
                        sorted_transduce,
                        case_args=[list(hundredK)],
                        timeit_kwargs={'number': 10})

def test_routing():
    performance_compare(routed_loop,
                        routed_branch,
                        routed_multiplex,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_consume_iterator():
    performance_compare(consume,
                        partial(transduce, xmap(inc), sumOf, 0),
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})
