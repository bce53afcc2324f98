import logging
from collections import namedtuple
from xducers.core import Reducer, Transducing, compose
from xducers.errors import ConfigurationError
from xducers.util import always

logger = logging.getLogger(__name__)

Signal = namedtuple('Signal', ['selector', 'xform'])
Signal.__doc__ = """A route: inputs for which selector returns True go through xform."""


def wires(selector, xform):
    return Signal(selector, xform)


class ResultGate(Transducing):
    """
    Lets completion through to rf only on the count-th call. Likewise init
    reaches rf once per count calls, the other callers share its seed.
    """

    def __init__(self, count, rf):
        super().__init__(rf)
        self.count = count
        self.remaining = count
        self.inits = 0
        self.seed = None

    def init(self):
        if self.inits == 0:
            self.remaining = self.count
            self.seed = self.rf.init()
        self.inits = (self.inits + 1) % self.count
        return self.seed

    def completion(self, result):
        self.remaining -= 1
        if self.remaining == 0:
            return self.rf.completion(result)
        if self.remaining < 0:
            raise ConfigurationError("result gate expected %d completions, got %d" % (self.count, self.count - self.remaining))
        return result


def resultGate(count: int):
    def gated(rf: Reducer):
        return ResultGate(count, rf)
    return gated


class Muxing(Reducer):
    """
    Feeds each input to the routes whose selector matches, in declared order.
    Every route writes into the same downstream rf.
    """

    def __init__(self, signals, promiscuous, rf):
        self.rf = rf
        self.routes = [(signal.selector, signal.xform(rf)) for signal in signals]
        self.promiscuous = promiscuous
        self.dropped = 0

    def init(self):
        # Every route is reset, the gate seeds the shared rf once.
        result = None
        for (_, route) in self.routes:
            result = route.init()
        return result

    def step(self, result, input, reduced):
        routed = False
        for (selector, route) in self.routes:
            if not selector(input):
                continue
            routed = True
            result = route.step(result, input, reduced)
            if reduced or not self.promiscuous:
                break
        if not routed:
            self.dropped += 1
            logger.debug("No route matched %r, dropped %d inputs so far", input, self.dropped)
        return result

    def completion(self, result):
        for (_, route) in self.routes:
            result = route.completion(result)
        return result


def muxing(signals, promiscuous=False):
    def muxed(rf: Reducer):
        return Muxing(signals, promiscuous, rf)
    return muxed


def multiplex(*signals, promiscuous=False):
    """
    Routes each input through the transducer of the first Signal whose selector
    matches it, or of every matching Signal when promiscuous. Inputs which match
    no Signal are dropped.

    All routes share the downstream reducer. It is guarded by a resultGate sized
    to the number of routes, so its completion runs once after every route completed.
    """
    if not signals:
        raise ValueError("multiplex needs at least one route")
    return compose(muxing(signals, promiscuous), resultGate(len(signals)))


mux = multiplex


def branch(test, xfTrue, xfFalse):
    """Routes inputs passing test through xfTrue and all others through xfFalse."""
    return multiplex(wires(test, xfTrue),
                     wires(always, xfFalse))
