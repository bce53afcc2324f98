from functools import cmp_to_key
from numbers import Number
from xducers.core import Reducer, Reduced, compose
from xducers.errors import ConfigurationError
from xducers.transducers import cat
from xducers.util import appender, constantly, identity


class Collecting(Reducer):
    """
    Holds back every input. On completion the whole container is passed on
    as a single input, then a fresh container is started.
    """

    def __init__(self, collector, comparator, rf):
        self.rf = rf
        self.collector = collector
        self.comparator = comparator
        self.accumulator = collector()

    def init(self):
        self.accumulator = self.collector()
        return self.rf.init()

    def step(self, result, input, reduced):
        appender(self.accumulator)(input)
        return result

    def completion(self, result):
        if len(self.accumulator) == 0:
            return self.rf.completion(result)
        collected = self.accumulator
        if self.comparator is not None:
            collected = sorted(collected, key=cmp_to_key(self.comparator))
        result = self.rf.step(result, collected, Reduced())
        self.accumulator = self.collector()
        return self.rf.completion(result)


def collect(collector=list, comparator=None):
    """
    collector builds the container, anything with append or add.
    comparator is (a -> a -> int), when given the container is released as a sorted list.
    """
    def collected(rf: Reducer):
        return Collecting(collector, comparator, rf)
    return collected


def sort(comparator):
    """Holds back every input, then passes them on one at a time in comparator order."""
    return compose(collect(comparator=comparator), cat())


def _numeric(value):
    if isinstance(value, Number):
        return value
    raise ConfigurationError("sum can't add values of type %s" % type(value).__name__)


class Summing(Reducer):

    def __init__(self, f, rf):
        self.rf = rf
        self.f = f
        self.accumulator = None

    def init(self):
        self.accumulator = None
        return self.rf.init()

    def step(self, result, input, reduced):
        value = _numeric(self.f(input))
        if self.accumulator is None:
            self.accumulator = value
        else:
            try:
                self.accumulator = self.accumulator + value
            except TypeError as e:
                raise ConfigurationError("sum can't add %s to %s" % (type(value).__name__, type(self.accumulator).__name__)) from e
        return result

    def completion(self, result):
        if self.accumulator is None:
            return self.rf.completion(result)
        total = self.accumulator
        self.accumulator = None
        result = self.rf.step(result, total, Reduced())
        return self.rf.completion(result)


def sum(f=identity):
    """
    Adds up f(input) for every input and passes the total on at completion.
    Nothing is passed on when there was no input.
    """
    def summed(rf: Reducer):
        return Summing(f, rf)
    return summed


def count():
    return sum(constantly(1))
