from xducers.core import transduce
from xducers.subduce import pairUp
from xducers.util import appender

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Step function which appends to a list in place instead of building a new one
on every step.
"""

unionOf = lambda acc, val: acc.add(val) or acc
unionOf.__doc__ = """Step function which adds to a set in place."""

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Step function which computes a sum"""


def intoList(xf, iterable, init=None):
    if init is None:
        init = []
    return transduce(xf, arrayOf, init, iterable)


def intoSet(xf, iterable, init=None):
    if init is None:
        init = set()
    return transduce(xf, unionOf, init, iterable)


def listOf(xf, iterable):
    return intoList(xf, iterable)


def setOf(xf, iterable):
    return intoSet(xf, iterable)


def _assoc(acc, pair):
    (key, value) = pair
    acc[key] = value
    return acc


def dictOf(xf, iterable):
    """xf produces (key, value) pairs. Later pairs win."""
    return transduce(xf, _assoc, {}, iterable)


def _grouper(collection):
    def group(acc, pair):
        (key, value) = pair
        if key not in acc:
            acc[key] = collection()
        appender(acc[key])(value)
        return acc
    return group


def groupInto(xf, collection, iterable):
    """
    xf produces (key, value) pairs.
    Values are gathered into a container per key, collection builds the containers.
    """
    return transduce(xf, _grouper(collection), {}, iterable)


def dictOfLists(xf, iterable):
    return groupInto(xf, list, iterable)


def dictOfSets(xf, iterable):
    return groupInto(xf, set, iterable)


def dictFrom(k, v, collection, iterable):
    """Keys are computed by k, values by v, both per input. See pairUp."""
    return groupInto(pairUp(k, v), collection, iterable)
