from xducers.core import Reducer, Reduced
from xducers.errors import ConfigurationError
from xducers.util import constantly


def subduce(rf: Reducer, input, reduced=None):
    """
    Runs a whole reduction over the single input: init, one step, completion.
    reduced defaults to a fresh signal, independent of any outer reduction.
    """
    if reduced is None:
        reduced = Reduced()
    result = rf.step(rf.init(), input, reduced)
    return rf.completion(result)


class Capturing(Reducer):
    """
    Innermost reducer of a subduction. The result is whatever reached it last,
    or zero() when nothing did.
    """

    def __init__(self, zero):
        self.zero = zero
        self.delivered = False

    def init(self):
        self.delivered = False
        return self.zero()

    def step(self, result, input, reduced):
        return input

    def completion(self, result):
        if self.delivered:
            raise ConfigurationError("subduction completed twice without init")
        self.delivered = True
        return result


def subducing(xform, zero=None):
    """
    Returns a Reducer built from xform for use with subduce.
    zero supplies the result for inputs which xform swallows, None by default.
    """
    if zero is None:
        zero = constantly(None)
    return xform(Capturing(zero))


class PairingUp(Reducer):

    def __init__(self, left, right, rf):
        self.rf = rf
        self.left = left
        self.right = right

    def init(self):
        return self.rf.init()

    def step(self, result, input, reduced):
        pair = (subduce(self.left, input), subduce(self.right, input))
        return self.rf.step(result, pair, reduced)

    def completion(self, result):
        return self.rf.completion(result)


def pairUp(left, right, left_zero=None, right_zero=None):
    """
    Passes on (l, r) for each input, where l and r are computed by subducing
    the input through left and right. Each side runs its own init, step and
    completion per input, so stateful transducers like collect or sum work
    within a single input.
    """
    def paired(rf: Reducer):
        return PairingUp(subducing(left, left_zero),
                         subducing(right, right_zero),
                         rf)
    return paired


mapPair = pairUp
