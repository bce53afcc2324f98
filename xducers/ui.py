import logging
import sys
from contextlib import closing
from delnone import delnone
from docopt import DocoptExit, docopt
from func_prototypes import typed, returned
from xducers.accumulate import count, sort
from xducers.core import compose, transduce
from xducers.taps import progress
from xducers.transducers import dedupe, distinct, drop, partitionAll, randomSample, take, takeNth
from xducers.util import compare

logger = logging.getLogger(__name__)

UI_USAGE = """
Xducers

Runs lines of text through a pipeline of transducers and prints the result.
Stages apply in the order the options are listed here.

Usage:
  xducers [options] [<file>...]

Options:
  --progress       Show a progress bar on stderr.
  --drop=<n>       Skip the first n lines.
  --take=<n>       Stop after n lines.
  --nth=<n>        Keep every nth line, starting with the first.
  --sample=<p>     Keep each line with probability p.
  --dedupe         Drop lines equal to the line before them.
  --distinct       Drop lines which were seen before.
  --sort           Sort lines.
  --partition=<n>  Print lines in tab separated groups of n.
  --count          Print how many lines (or groups) came out instead.
  --verbose        Log debug output.
"""

@returned(int)
@typed(str)
def count_arg(value):
    n = int(value)
    if n < 0:
        raise ValueError("Expected a count, got %s" % value)
    return n

@returned(int)
@typed(str)
def positive_arg(value):
    n = count_arg(value)
    if n < 1:
        raise ValueError("Expected a positive count, got %s" % value)
    return n

@returned(float)
@typed(str)
def prob_arg(value):
    p = float(value)
    if not 0.0 <= p <= 1.0:
        raise ValueError("Expected a probability between 0 and 1, got %s" % value)
    return p


stages = [
    ('--progress', lambda _: progress('lines')),
    ('--drop', lambda n: drop(count_arg(n))),
    ('--take', lambda n: take(count_arg(n))),
    ('--nth', lambda n: takeNth(positive_arg(n))),
    ('--sample', lambda p: randomSample(prob_arg(p))),
    ('--dedupe', lambda _: dedupe()),
    ('--distinct', lambda _: distinct()),
    ('--sort', lambda _: sort(compare)),
    ('--partition', lambda n: partitionAll(positive_arg(n))),
    ('--count', lambda _: count()),
]

def build_xform(args):
    """Composes a transducer from the docopt args. Options which were not given are skipped."""
    options = delnone(dict(args))
    return compose(*[make(options[opt]) for (opt, make) in stages if options.get(opt)])

def file_lines(paths):
    for path in paths:
        with open(path) as fd:
            for line in fd:
                yield line.rstrip("\n")

def stream_lines(fd):
    for line in fd:
        yield line.rstrip("\n")

def line_printr(printed, value):
    if isinstance(value, list):
        value = "\t".join(value)
    print(value)
    return printed + 1

def ui_main():
    result = xducers_ui(sys.argv[1:], sys.stdin)
    sys.exit(result)

def xducers_ui(argv, stdin):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    logging.basicConfig(level=logging.DEBUG if args['--verbose'] else logging.WARNING)
    try:
        xform = build_xform(args)
    except ValueError as e:
        raise DocoptExit(str(e)) from e
    if args['<file>']:
        lines = file_lines(args['<file>'])
    else:
        lines = stream_lines(stdin)
    with closing(lines):
        printed = transduce(xform, line_printr, 0, lines)
    logger.debug("printed %d values", printed)
    return exitcode
