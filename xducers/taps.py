"""
Taps observe a reduction without changing what flows through it.
"""
import sys
import tqdm
from xducers.core import Reducer, Transducing, compose
from xducers.errors import ConfigurationError


class Debugging(Transducing):

    def __init__(self, column, file, rf):
        super().__init__(rf)
        self.column = column
        self.file = file

    def _print(self, marker, value):
        print(marker, self.column, value, file=self.file or sys.stdout)

    def init(self):
        result = self.rf.init()
        self._print("# ", result)
        return result

    def step(self, result, input, reduced):
        self._print("-", input)
        return self.rf.step(result, input, reduced)

    def completion(self, result):
        result = self.rf.completion(result)
        self._print("!!", result)
        return result


def debug(tag, indent=0, file=None):
    """
    Prints every input, the initial result and the completed result.
    Lines are tagged so that several taps in one pipeline can be told apart.
    """
    column = tag.ljust(15 + indent).replace(' ', '.')
    def debugged(rf: Reducer):
        return Debugging(column, file, rf)
    return debugged


class Progressing(Transducing):

    def __init__(self, tqdmArgs, rf):
        super().__init__(rf)
        self.tqdmArgs = tqdmArgs
        self.pbar = None

    def _pbar(self):
        if self.pbar is None:
            self.pbar = tqdm.tqdm(**self.tqdmArgs)
        return self.pbar

    def init(self):
        self._pbar()
        return self.rf.init()

    def step(self, result, input, reduced):
        self._pbar().update(1)
        return self.rf.step(result, input, reduced)

    def completion(self, result):
        try:
            return self.rf.completion(result)
        finally:
            if self.pbar is not None:
                self.pbar.close()
                self.pbar = None


def progress(label='', quiet=False):
    """Ticks a tqdm progress bar for every input."""
    tqdmArgs = dict(desc=label, unit='item', maxinterval=1, disable=quiet, leave=False, delay=1)
    def progressed(rf: Reducer):
        return Progressing(tqdmArgs, rf)
    return progressed


class LifecycleStats:

    def __init__(self, inits=0, steps=0, completions=0):
        self.inits = inits
        self.steps = steps
        self.completions = completions

    def __eq__(self, other):
        if not isinstance(other, LifecycleStats):
            return NotImplemented
        return (self.inits, self.steps, self.completions) == \
            (other.inits, other.steps, other.completions)

    def __repr__(self):
        return "LifecycleStats(inits=%d, steps=%d, completions=%d)" % \
            (self.inits, self.steps, self.completions)


class Counting(Transducing):

    def __init__(self, stats, rf):
        super().__init__(rf)
        self.stats = stats

    def init(self):
        self.stats.inits += 1
        return self.rf.init()

    def step(self, result, input, reduced):
        self.stats.steps += 1
        return self.rf.step(result, input, reduced)

    def completion(self, result):
        self.stats.completions += 1
        return self.rf.completion(result)


def counting(stats):
    """Records how often init, step and completion pass by into stats."""
    def counted(rf: Reducer):
        return Counting(stats, rf)
    return counted


class OnceOnly(Transducing):

    def __init__(self, prefix, rf):
        super().__init__(rf)
        self.prefix = prefix
        self.completed = False

    def init(self):
        self.completed = False
        return self.rf.init()

    def completion(self, result):
        if self.completed:
            raise ConfigurationError("%scompletion invoked twice, result=%r" % (self.prefix, result))
        self.completed = True
        return self.rf.completion(result)


def onceOnly(tag=''):
    """Raises ConfigurationError when completion reaches this point a second time."""
    prefix = "%s: " % tag if tag else ""
    def guarded(rf: Reducer):
        return OnceOnly(prefix, rf)
    return guarded


def healthInspector(tag=None, indent=0):
    if tag is None:
        return onceOnly()
    return compose(debug(tag, indent), onceOnly(tag))
