import pytest
from xducers.core import Completing, Reduced, Reducer, comp2, completing, compose, reduce, reduceSteps, transduce
from xducers.errors import MissingInitialValue
from xducers.transducers import Filtering, Mapping, filter, map, mapcat, partitionAll, partitionBy, take, takeWhile, dedupe
from xducers.accumulate import collect, count, sort
from xducers.routing import branch, multiplex, wires
from xducers.subduce import pairUp
from xducers.into import arrayOf, sumOf
from xducers.taps import LifecycleStats, counting
from xducers.util import compare, identity

one2ten = list(range(1, 10 + 1))
squares = map(lambda x: x * x)
isOdd = lambda x: x % 2 == 1
inc = lambda x: x + 1
double = lambda x: x * 2

def test_reduced():
    reduced = Reduced()
    assert not reduced
    assert reduced.is_set() is False
    reduced.set()
    assert reduced
    reduced.set()
    assert reduced.is_set() is True

def test_completing():
    rf = completing(sumOf)
    assert isinstance(rf, Completing)
    assert completing(rf) is rf
    assert rf.step(1, 2, Reduced()) == 3
    assert rf.completion(3) == 3
    with pytest.raises(MissingInitialValue):
        rf.init()

def test_reduce(recording):
    rf = recording()
    assert reduce(rf, [], [1, 2, 3]) == [1, 2, 3]
    assert rf.completions == 1
    assert rf.inits == 0

def test_reduce_empty(recording):
    rf = recording()
    assert reduce(rf, [], []) == []
    assert rf.completions == 1

class StopAtThree(Reducer):
    def step(self, result, input, reduced):
        result.append(input)
        if input == 3:
            reduced.set()
        return result

def test_reduce_stops_when_reduced():
    reduced = Reduced()
    assert reduce(StopAtThree(), [], range(10), reduced) == [0, 1, 2, 3]
    assert reduced

def test_reduceSteps_does_not_complete(recording):
    rf = recording()
    assert reduceSteps(rf, [], [1, 2], Reduced()) == [1, 2]
    assert rf.completions == 0

squaresOfTheOddNumbers = compose(filter(isOdd), squares)
def test_transduce():
    assert transduce(squaresOfTheOddNumbers, sumOf, 0, one2ten) == 165
    assert transduce(squaresOfTheOddNumbers, arrayOf, [], one2ten) == [1, 9, 25, 49, 81]

def test_transduce_seed_from_init(recording):
    rf = recording()
    assert transduce(map(inc), rf, [1, 2, 3]) == [2, 3, 4]
    assert rf.inits == 1
    assert rf.completions == 1

def test_transduce_missing_initial_value():
    with pytest.raises(MissingInitialValue):
        transduce(map(inc), sumOf, [1, 2])

def test_transduce_arguments():
    with pytest.raises(TypeError):
        transduce(map(inc), sumOf)
    with pytest.raises(TypeError):
        transduce(map(inc), sumOf, 0, [1], [2])

def test_compose_empty_and_single(recording):
    rf = recording()
    assert compose()(rf) is rf
    mapper = map(inc)
    assert compose(mapper) is mapper

def test_compose_order():
    assert transduce(compose(map(inc), map(double)), arrayOf, [], [1]) == [4]
    assert transduce(compose(map(double), map(inc)), arrayOf, [], [1]) == [3]

def test_comp2_nesting():
    rf = comp2(map(inc), filter(isOdd))(completing(arrayOf))
    assert isinstance(rf, Mapping)
    assert isinstance(rf.rf, Filtering)
    assert isinstance(rf.rf.rf, Completing)

def test_compose_associative(recording):
    f = map(inc)
    g = filter(isOdd)
    h = partitionAll(2)
    expected = [[1, 3], [5, 7], [9]]
    for xf in [compose(compose(f, g), h), compose(f, compose(g, h)), compose(f, g, h)]:
        rf = recording()
        assert transduce(xf, rf, [], range(10)) == expected
        assert rf.completions == 1

def test_compose_associative_with_early_stop():
    f = mapcat(lambda x: [x, x])
    g = take(3)
    h = collect()
    left = transduce(compose(compose(f, g), h), arrayOf, [], range(10))
    right = transduce(compose(f, compose(g, h)), arrayOf, [], range(10))
    assert left == right == [[0, 0, 1]]

def test_early_stop_still_completes(recording):
    rf = recording()
    assert transduce(compose(partitionAll(3), take(2)), rf, [], range(100)) == [[0, 1, 2], [3, 4, 5]]
    assert rf.completions == 1
    rf = recording()
    assert transduce(compose(take(4), partitionAll(3)), rf, [], range(100)) == [[0, 1, 2], [3]]
    assert rf.completions == 1

pipelines = [
    identity,
    map(inc),
    take(3),
    takeWhile(lambda x: x < 4),
    dedupe(),
    partitionBy(isOdd),
    partitionAll(4),
    compose(partitionAll(4), take(1)),
    collect(),
    sort(lambda a, b: compare(b, a)),
    count(),
    compose(filter(lambda x: x > 100), count()),
    branch(isOdd, map(inc), collect()),
    multiplex(wires(isOdd, take(2)), wires(lambda x: x > 5, sort(compare)), promiscuous=True),
    pairUp(count(), collect()),
    compose(mapcat(range), take(5), partitionAll(2)),
]

@pytest.mark.parametrize("xf", pipelines)
def test_completion_runs_once(xf):
    stats = LifecycleStats()
    transduce(compose(xf, counting(stats)), arrayOf, [], range(10))
    assert stats.completions == 1
    stats = LifecycleStats()
    transduce(compose(xf, counting(stats)), arrayOf, [], [])
    assert stats.completions == 1
