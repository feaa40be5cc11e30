class LazyError(Exception):
    pass


class ConsumedError(LazyError):
    """Raised when a container is accessed after ``unwrap()``."""


class PoisonedError(LazyError):
    """
    Raised when a poisoning container is accessed after its producer failed.

    The producer's original exception is available as ``__cause__``.
    """


class ReentrantEvaluationError(LazyError):
    """Raised when a producer accesses the container it is producing for."""
