from functools import reduce as fold
from typing import TypeVar, Callable, Generic, Iterable, Optional
from xducers.errors import MissingInitialValue
from xducers.util import identity

R = TypeVar("R")
T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

StepFn = Callable[[R, T], R]


class Reduced:
    """
    Termination signal shared by every step of one reduction.
    Any reducer may set it to ask the driver to stop pulling input.
    The driver checks it after every step. Once set it stays set.
    """
    __slots__ = ('_set',)

    def __init__(self):
        self._set = False

    def set(self):
        self._set = True

    def is_set(self):
        return self._set

    def __bool__(self):
        return self._set

    def __repr__(self):
        return "<Reduced %s>" % self._set


class Reducer(Generic[R, T]):
    """
    A reducing process: init produces an empty result, step folds one input
    into the result, completion finishes the result. completion is called
    exactly once per reduction, even when there was no input.
    """

    def init(self) -> R:
        raise MissingInitialValue("%s has no initial value, a seed is required" % type(self).__name__)

    def step(self, result: R, input: T, reduced: Reduced) -> R:
        raise NotImplementedError()

    def completion(self, result: R) -> R:
        return result


class Completing(Reducer[R, T]):
    """Lifts a plain step function (acc, val) -> acc into a Reducer."""

    def __init__(self, fn: StepFn[R, T]):
        self.fn = fn

    def step(self, result: R, input: T, reduced: Reduced) -> R:
        return self.fn(result, input)

    def __repr__(self):
        return "<Completing %s>" % getattr(self.fn, '__name__', self.fn)


def completing(reducer):
    if isinstance(reducer, Reducer):
        return reducer
    return Completing(reducer)


class Transducing(Reducer[R, B], Generic[R, A, B]):
    """
    Reducer which chains to the downstream reducer rf.
    All three operations delegate to rf, subclasses override the ones they change.
    """

    def __init__(self, rf: Reducer[R, A]):
        self.rf = rf

    def init(self) -> R:
        return self.rf.init()

    def step(self, result: R, input: B, reduced: Reduced) -> R:
        return self.rf.step(result, input, reduced)

    def completion(self, result: R) -> R:
        return self.rf.completion(result)


XForm = Callable[[Reducer[R, A]], Reducer[R, B]]


def comp2(xform1: XForm, xform2: XForm) -> XForm:
    def combined(rf):
        return xform1(xform2(rf))
    return combined


def compose(*xforms):
    """
    compose(f, g)(rf) is f(g(rf)).
    Transducers are listed in the order data flows through them: f sees each input before g.
    """
    if not xforms:
        return identity
    return fold(comp2, xforms)


def reduceSteps(rf: Reducer[R, T], result: R, iterable: Iterable[T], reduced: Reduced) -> R:
    """Steps rf over iterable until it is exhausted or reduced gets set. Does not complete rf."""
    for input in iterable:
        result = rf.step(result, input, reduced)
        if reduced:
            break
    return result


def reduce(rf: Reducer[R, T], result: R, iterable: Iterable[T], reduced: Optional[Reduced] = None) -> R:
    """
    Runs rf over iterable starting from result and returns the completed result.
    rf is (R, T) -> R
    result is R
    iterable is [T]
    """
    if reduced is None:
        reduced = Reduced()
    result = reduceSteps(rf, result, iterable, reduced)
    return rf.completion(result)


_NOTHING = object()


def transduce(xform, reducer, *args):
    """
    transduce(xform, reducer, iterable)
    transduce(xform, reducer, seed, iterable)

    xform is a transducer (Reducer -> Reducer)
    reducer is a Reducer or a step function (b -> a -> b)
    seed is b, when omitted it comes from the transformed reducer's init
    iterable is [a]
    """
    if len(args) == 1:
        seed = _NOTHING
        (iterable,) = args
    elif len(args) == 2:
        (seed, iterable) = args
    else:
        raise TypeError("transduce takes [seed,] iterable, got %d extra arguments" % len(args))
    rf = xform(completing(reducer))
    if seed is _NOTHING:
        seed = rf.init()
    return reduce(rf, seed, iterable)
