from xducers.errors import ConfigurationError, MissingInitialValue
from xducers.core import Reduced, Reducer, Transducing, Completing, completing, comp2, compose, reduce, reduceSteps, transduce
from xducers.transducers import \
    cat,          \
    copy,         \
    dedupe,       \
    distinct,     \
    drop,         \
    dropWhile,    \
    filter,       \
    keep,         \
    keepIndexed,  \
    map,          \
    mapcat,       \
    pairCat,      \
    partitionAll, \
    partitionBy,  \
    randomSample, \
    remove,       \
    replace,      \
    take,         \
    takeNth,      \
    takeWhile
from xducers.accumulate import collect, count, sort, sum
from xducers.routing import Signal, branch, multiplex, mux, resultGate, wires
from xducers.subduce import mapPair, pairUp, subduce, subducing
from xducers.into import arrayOf, dictFrom, dictOf, dictOfLists, dictOfSets, groupInto, intoList, intoSet, listOf, setOf, sumOf, unionOf
from xducers.taps import LifecycleStats, counting, debug, healthInspector, onceOnly, progress
