from xducers.core import compose
from xducers.transducers import filter, map, take
from xducers.into import \
    arrayOf, dictFrom, dictOf, dictOfLists, dictOfSets, groupInto, \
    intoList, intoSet, listOf, setOf, sumOf, unionOf

def test_step_functions():
    acc = [1]
    assert arrayOf(acc, 2) is acc
    assert acc == [1, 2]
    acc = {1}
    assert unionOf(acc, 2) is acc
    assert acc == {1, 2}
    assert sumOf(1, 2) == 3

def test_listOf():
    assert listOf(map(lambda i: i + 1), range(3)) == [1, 2, 3]
    assert listOf(take(0), range(3)) == []

def test_intoList_appends():
    target = ["a"]
    assert intoList(take(2), "bcd", target) is target
    assert target == ["a", "b", "c"]

def test_setOf():
    assert setOf(map(lambda i: i % 3), range(10)) == {0, 1, 2}

def test_intoSet_adds():
    target = {"x"}
    assert intoSet(map(str), range(2), target) == {"x", "0", "1"}

def test_dictOf():
    assert dictOf(map(lambda i: (i % 2, i)), range(5)) == {0: 4, 1: 3}

def test_dictOfLists():
    assert dictOfLists(map(lambda s: (len(s), s)), ["a", "bb", "c"]) == {1: ["a", "c"], 2: ["bb"]}

def test_dictOfSets():
    assert dictOfSets(map(lambda s: (len(s), s)), ["a", "bb", "a"]) == {1: {"a"}, 2: {"bb"}}

def test_groupInto():
    xf = compose(filter(lambda i: i > 0), map(lambda i: (i % 2 == 0, i)))
    assert groupInto(xf, list, range(5)) == {False: [1, 3], True: [2, 4]}

def test_dictFrom():
    assert dictFrom(map(len), map(str.upper), list, ["a", "bb", "c"]) == {1: ["A", "C"], 2: ["BB"]}
