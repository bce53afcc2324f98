from functools import partial as functools_partial

def identity(x):
    return x

def invert(v):
    return not v

def finvert(f):
    def inverted(*args, **kwargs):
        return invert(f(*args, **kwargs))
    return inverted

def constantly(value):
    """Returns a function which ignores its arguments and returns value."""
    def constant(*args, **kwargs):
        return value
    constant.__name__ = "constantly_%r" % (value,)
    return constant


always = constantly(True)

def partial(fn, *args, **kwargs):
    out = functools_partial(fn, *args, **kwargs)
    out.__name__ = "partial_" + fn.__name__
    return out

def consume(collection):
    for _ in collection:
        pass

def appender(container):
    """
    Returns the method used to put an item into container.
    Sequences grow with append, sets and other bags with add.
    """
    append = getattr(container, 'append', None)
    if append is not None:
        return append
    return container.add

def compare(a, b):
    """Three way comparison, a comparator for natural ordering."""
    return (a > b) - (a < b)
