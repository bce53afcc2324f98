class ConfigurationError(RuntimeError):
    """
    A pipeline was assembled or driven in a way that can never work.
    Raised at the point of failure; nothing is retried.
    """


class MissingInitialValue(ValueError):
    """transduce was called without a seed and the reducer has no init."""
