from random import random as uniform
from typing import TypeVar, Callable, Hashable, Iterable, Mapping as MappingType, Optional
from xducers.core import Reducer, Reduced, Transducing, compose, reduceSteps
from xducers.util import finvert

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

# Marks "no item seen yet" so that None stays a legal item.
_MARK = object()


class Mapping(Transducing):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f

    def step(self, result, input, reduced):
        return self.rf.step(result, self.f(input), reduced)


def map(f: Callable[[A], B]):
    """Transforms each input with f before passing it on."""
    def mapped(rf: Reducer):
        return Mapping(f, rf)
    return mapped


class Filtering(Transducing):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, result, input, reduced):
        if self.pred(input):
            return self.rf.step(result, input, reduced)
        return result


def filter(pred: Callable[[T], bool]):
    """
    pred is (a -> Bool)
    Only inputs which satisfy pred are passed on.
    """
    def filtered(rf: Reducer):
        return Filtering(pred, rf)
    return filtered


def remove(pred: Callable[[T], bool]):
    return filter(finvert(pred))


class Catting(Transducing):

    def step(self, result, input, reduced):
        return reduceSteps(self.rf, result, input, reduced)


def cat():
    """
    Each input is itself an iterable, its items are passed on one at a time.
    The nested iteration shares the outer termination signal.
    """
    def catted(rf: Reducer):
        return Catting(rf)
    return catted


def mapcat(f: Callable[[A], Iterable[B]]):
    return compose(map(f), cat())


class Copying(Transducing):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n

    def step(self, result, input, reduced):
        for _ in range(self.n):
            result = self.rf.step(result, input, reduced)
            if reduced:
                break
        return result


def copy(n: int = 2):
    """Passes each input on n times."""
    def copied(rf: Reducer):
        return Copying(n, rf)
    return copied


class PairCatting(Transducing):

    def step(self, result, input, reduced):
        (key, values) = input
        return reduceSteps(self.rf, result, ((key, value) for value in values), reduced)


def pairCat():
    """Turns (k, [v1, v2...]) into (k, v1), (k, v2)..."""
    def pair_catted(rf: Reducer):
        return PairCatting(rf)
    return pair_catted


class Taking(Transducing):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.taken = 0

    def init(self):
        self.taken = 0
        return self.rf.init()

    def step(self, result, input, reduced):
        if self.taken < self.n:
            self.taken += 1
            return self.rf.step(result, input, reduced)
        reduced.set()
        return result


def take(n: int):
    """Passes on the first n inputs. The next input signals the reduction to stop."""
    def taker(rf: Reducer):
        return Taking(n, rf)
    return taker


class TakingWhile(Transducing):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, result, input, reduced):
        if self.pred(input):
            return self.rf.step(result, input, reduced)
        reduced.set()
        return result


def takeWhile(pred: Callable[[T], bool]):
    def taker(rf: Reducer):
        return TakingWhile(pred, rf)
    return taker


class Dropping(Transducing):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.dropped = 0

    def init(self):
        self.dropped = 0
        return self.rf.init()

    def step(self, result, input, reduced):
        if self.dropped < self.n:
            self.dropped += 1
            return result
        return self.rf.step(result, input, reduced)


def drop(n: int):
    def dropper(rf: Reducer):
        return Dropping(n, rf)
    return dropper


class DroppingWhile(Transducing):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred
        self.dropping = True

    def init(self):
        self.dropping = True
        return self.rf.init()

    def step(self, result, input, reduced):
        if self.dropping and self.pred(input):
            return result
        self.dropping = False
        return self.rf.step(result, input, reduced)


def dropWhile(pred: Callable[[T], bool]):
    def dropper(rf: Reducer):
        return DroppingWhile(pred, rf)
    return dropper


class TakingNth(Transducing):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.nth = 0

    def init(self):
        self.nth = 0
        return self.rf.init()

    def step(self, result, input, reduced):
        nth = self.nth
        self.nth += 1
        if nth % self.n == 0:
            return self.rf.step(result, input, reduced)
        return result


def takeNth(n: int):
    """Passes on every nth input, starting with the first."""
    if n < 1:
        raise ValueError("takeNth needs a positive step, got %s" % n)
    def taker(rf: Reducer):
        return TakingNth(n, rf)
    return taker


def replace(smap: MappingType[T, T]):
    """Inputs found as keys of smap are replaced by their value."""
    def replacement(input):
        try:
            if input in smap:
                return smap[input]
        except TypeError:
            # unhashable inputs can never be keys
            return input
        return input
    return map(replacement)


class Keeping(Transducing):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f

    def step(self, result, input, reduced):
        kept = self.f(input)
        if kept is None:
            return result
        return self.rf.step(result, kept, reduced)


def keep(f: Callable[[A], Optional[B]]):
    """Passes on f(input), unless it is None."""
    def keeper(rf: Reducer):
        return Keeping(f, rf)
    return keeper


class KeepingIndexed(Transducing):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f
        self.index = 0

    def init(self):
        self.index = 0
        return self.rf.init()

    def step(self, result, input, reduced):
        self.index += 1
        kept = self.f(self.index, input)
        if kept is None:
            return result
        return self.rf.step(result, kept, reduced)


def keepIndexed(f: Callable[[int, A], Optional[B]]):
    """Like keep, but f also receives the 1 based position of the input."""
    def keeper(rf: Reducer):
        return KeepingIndexed(f, rf)
    return keeper


class Deduping(Transducing):

    def __init__(self, rf):
        super().__init__(rf)
        self.prior = _MARK

    def init(self):
        self.prior = _MARK
        return self.rf.init()

    def step(self, result, input, reduced):
        if self.prior is not _MARK and self.prior == input:
            return result
        self.prior = input
        return self.rf.step(result, input, reduced)


def dedupe():
    """Drops inputs equal to the input right before them."""
    def deduper(rf: Reducer):
        return Deduping(rf)
    return deduper


class Distincting(Transducing):

    def __init__(self, rf):
        super().__init__(rf)
        self.seen = set()

    def init(self):
        self.seen = set()
        return self.rf.init()

    def step(self, result, input, reduced):
        if input in self.seen:
            return result
        self.seen.add(input)
        return self.rf.step(result, input, reduced)


def distinct():
    """Drops every input which was already passed on. Inputs must be hashable."""
    def distincter(rf: Reducer):
        return Distincting(rf)
    return distincter


def randomSample(prob: float, random: Callable[[], float] = uniform):
    """Passes on each input with probability prob. random draws uniformly from [0, 1)."""
    return filter(lambda _: random() < prob)


class PartitioningBy(Transducing):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f
        self.part = []
        self.prior = _MARK

    def init(self):
        self.part = []
        self.prior = _MARK
        return self.rf.init()

    def step(self, result, input, reduced):
        key = self.f(input)
        if self.prior is _MARK or self.prior == key:
            self.prior = key
            self.part.append(input)
            return result
        flushed = self.part
        self.part = []
        self.prior = key
        result = self.rf.step(result, flushed, reduced)
        if not reduced:
            self.part.append(input)
        return result

    def completion(self, result):
        if self.part:
            flushed = self.part
            self.part = []
            result = self.rf.step(result, flushed, Reduced())
        return self.rf.completion(result)


def partitionBy(f: Callable[[T], Hashable]):
    """
    Gathers runs of inputs for which f returns the same value into lists.
    A list is passed on when f changes value, and the last one on completion.
    """
    def partitioner(rf: Reducer):
        return PartitioningBy(f, rf)
    return partitioner


class PartitioningAll(Transducing):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.part = []

    def init(self):
        self.part = []
        return self.rf.init()

    def step(self, result, input, reduced):
        self.part.append(input)
        if len(self.part) < self.n:
            return result
        flushed = self.part
        self.part = []
        return self.rf.step(result, flushed, reduced)

    def completion(self, result):
        if self.part:
            flushed = self.part
            self.part = []
            result = self.rf.step(result, flushed, Reduced())
        return self.rf.completion(result)


def partitionAll(n: int):
    """Gathers inputs into lists of n. The final short list is passed on at completion."""
    if n < 1:
        raise ValueError("partitionAll needs a positive size, got %s" % n)
    def partitioner(rf: Reducer):
        return PartitioningAll(n, rf)
    return partitioner
