import pytest
from xducers.core import Reducer


class Recording(Reducer):
    """
    Base reducer which builds a list and remembers its own lifecycle.
    """

    def __init__(self):
        self.inits = 0
        self.completions = 0
        self.seen = []

    def init(self):
        self.inits += 1
        return []

    def step(self, result, input, reduced):
        self.seen.append(input)
        result.append(input)
        return result

    def completion(self, result):
        self.completions += 1
        return result


class FirstOnly(Reducer):
    """Keeps the first input it gets, then asks the reduction to stop."""

    def step(self, result, input, reduced):
        result.append(input)
        reduced.set()
        return result


@pytest.fixture
def recording():
    return Recording


@pytest.fixture
def first_only():
    return FirstOnly
