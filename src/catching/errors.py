"""Error types raised by the library itself (never captured into a Result)."""

from __future__ import annotations

__all__ = [
    'CatchingError',
    'EmptyFailureError',
    'UnwrapFailedError',
]


class CatchingError(Exception):
    """Base class for errors raised by catching."""


class UnwrapFailedError(CatchingError):
    """A failure was unwrapped but its error is not an exception.

    Python can only raise BaseException instances, so a failure built from an
    arbitrary object (a string, an error code) surfaces as this error. The
    original object is available as ``error``.
    """

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f'Called get_or_throw on failure: {error!r}')


class EmptyFailureError(CatchingError, TypeError):
    """A failure was constructed without an error."""

    def __init__(self) -> None:
        super().__init__('failure() requires an error, got None')
