"""
Exceptions raised by mpmetrics.

Both builder errors subclass a builtin so callers that only know the
standard library can still catch them:
- NullArgumentError: a required argument was None (also a ValueError)
- InvalidStateError: the builder cannot produce Metadata yet (also a RuntimeError)
"""


class MetricsError(Exception):
    """Base class for all mpmetrics errors."""


class NullArgumentError(MetricsError, ValueError):
    """A required argument was None."""


class InvalidStateError(MetricsError, RuntimeError):
    """An operation was called before the object was ready for it."""


__all__ = [
    "MetricsError",
    "NullArgumentError",
    "InvalidStateError",
]
