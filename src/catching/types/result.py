"""Result type: Success[T] | Failure for explicit, composable error capture."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from traceback import StackSummary
from typing import Any, NoReturn, TypeIs

import msgspec

from catching._config import get_config
from catching._logging import get_logger
from catching.errors import EmptyFailureError, UnwrapFailedError
from catching.types.caught import CaughtException, trace_of

__all__ = [
    'Failure',
    'Result',
    'ResultKind',
    'Success',
    'failure',
    'run_catching',
    'success',
]

logger = get_logger(__name__)


class ResultKind(Enum):
    """Discriminant for the two Result variants."""

    SUCCESS = 'success'
    FAILURE = 'failure'


def _require_callable(name: str, f: object) -> None:
    if not callable(f):
        msg = f'{name} callback is required, got {f!r}'
        raise TypeError(msg)


class Success[T](msgspec.Struct, frozen=True, gc=False, tag='success'):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = success(42)
        >>> ok.get_or_throw()
        42
        >>> ok.map(lambda x: x * 2)
        Success(value=84)
    """

    value: T
    kind = ResultKind.SUCCESS

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure]:
        """Return False since this is Success."""
        return False

    def get_or_null(self) -> T:
        """Return the contained value."""
        return self.value

    def exception_or_null(self) -> None:
        """Return None since there is no captured exception."""
        return None

    def throw_on_failure(self) -> None:
        """Do nothing since this is Success."""

    def get_or_throw(self) -> T:
        """Return the contained value."""
        self.throw_on_failure()
        return self.value

    def get_or_else(self, on_failure: Callable[[CaughtException], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def get_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def fold[R](
        self,
        *,
        on_success: Callable[[T], R],
        on_failure: Callable[[CaughtException], R],
    ) -> R:
        """Return ``on_success(value)``.

        Both callbacks are required; a missing one raises TypeError before
        anything is invoked. Exceptions raised by ``on_success`` propagate.
        """
        _require_callable('on_success', on_success)
        _require_callable('on_failure', on_failure)
        return on_success(self.value)

    def map[U](self, transform: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Exceptions raised by ``transform`` propagate; use map_catching to
        capture them instead.
        """
        return Success(transform(self.value))

    def map_catching[U](self, transform: Callable[[T], U]) -> Success[U] | Failure:
        """Apply a function to the contained value, capturing any exception as Failure."""
        value = self.value
        return run_catching(lambda: transform(value))

    def recover(self, transform: Callable[[CaughtException], T]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def recover_catching(self, transform: Callable[[CaughtException], T]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def on_success(self, action: Callable[[T], Any]) -> Success[T]:
        """Call ``action`` with the value for side effects and return self."""
        action(self.value)
        return self

    def on_failure(self, action: Callable[[CaughtException], Any]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def __str__(self) -> str:
        return f'success({self.value})'


class Failure(msgspec.Struct, frozen=True, tag='failure'):
    """Failure variant of Result containing a CaughtException.

    Transformations short-circuit on Failure and hand back the very same
    object, so the original error and trace survive a chain of ``map`` calls.

    Examples:
        >>> err = failure('something went wrong')
        >>> err.is_failure()
        True
        >>> err.get_or_default(0)
        0
        >>> err.exception_or_null().error
        'something went wrong'
    """

    exception: CaughtException
    kind = ResultKind.FAILURE

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure]:
        """Return True since this is Failure."""
        return True

    def get_or_null(self) -> None:
        """Return None since there is no value."""
        return None

    def exception_or_null(self) -> CaughtException:
        """Return the captured exception."""
        return self.exception

    def throw_on_failure(self) -> NoReturn:
        """Raise the originally captured error.

        The error object itself is raised, so its type and identity are
        preserved and it keeps its own ``__traceback__``. The wrapper's
        ``stack_trace`` is not re-attached; treat it as best-effort context.

        Raising is not free of side effects on the stored error: Python
        appends the re-raise frames to ``error.__traceback__`` on every call,
        and raising inside an ``except`` block sets ``error.__context__``.
        The Failure itself is unchanged; it still holds the same object.

        Raises:
            BaseException: The captured error, when it is an exception.
            UnwrapFailedError: When the captured error is not an exception.
        """
        error = self.exception.error
        if isinstance(error, BaseException):
            raise error
        raise UnwrapFailedError(error)

    def get_or_throw(self) -> NoReturn:
        """Raise the originally captured error (see throw_on_failure)."""
        self.throw_on_failure()

    def get_or_else[T](self, on_failure: Callable[[CaughtException], T]) -> T:
        """Return the result of ``on_failure`` for the captured exception.

        Exceptions raised by ``on_failure`` propagate.
        """
        return on_failure(self.exception)

    def get_or_default[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def fold[R](
        self,
        *,
        on_success: Callable[[Any], R],
        on_failure: Callable[[CaughtException], R],
    ) -> R:
        """Return ``on_failure(exception)``.

        Both callbacks are required; a missing one raises TypeError before
        anything is invoked. Exceptions raised by ``on_failure`` propagate.
        """
        _require_callable('on_success', on_success)
        _require_callable('on_failure', on_failure)
        return on_failure(self.exception)

    def map(self, transform: Callable[[Any], Any]) -> Failure:  # noqa: ARG002
        """Return self unchanged; ``transform`` is never invoked."""
        return self

    def map_catching(self, transform: Callable[[Any], Any]) -> Failure:  # noqa: ARG002
        """Return self unchanged; ``transform`` is never invoked."""
        return self

    def recover[T](self, transform: Callable[[CaughtException], T]) -> Success[T]:
        """Turn the failure into Success with the result of ``transform``.

        Exceptions raised by ``transform`` propagate; use recover_catching to
        capture them instead.
        """
        return Success(transform(self.exception))

    def recover_catching[T](self, transform: Callable[[CaughtException], T]) -> Success[T] | Failure:
        """Turn the failure into Success, capturing any exception from ``transform``."""
        exception = self.exception
        return run_catching(lambda: transform(exception))

    def on_success(self, action: Callable[[Any], Any]) -> Failure:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def on_failure(self, action: Callable[[CaughtException], Any]) -> Failure:
        """Call ``action`` with the captured exception for side effects and return self."""
        action(self.exception)
        return self

    def __str__(self) -> str:
        return f'failure({self.exception})'


type Result[T] = Success[T] | Failure


def success[T](value: T) -> Success[T]:
    """Return a Result that holds ``value`` as its successful outcome."""
    return Success(value)


def failure(error: object, stack_trace: StackSummary | None = None) -> Failure:
    """Return a Result that holds ``error`` as its failed outcome.

    Args:
        error: The captured error. Usually an exception, but any object other
            than None is accepted. A CaughtException is used as-is.
        stack_trace: Trace to associate with the error. When omitted, the
            current call stack is captured. Not allowed together with a
            CaughtException, which already carries its trace.

    Raises:
        EmptyFailureError: If ``error`` is None.
        TypeError: If ``stack_trace`` is given with a CaughtException.
    """
    if error is None:
        raise EmptyFailureError
    if isinstance(error, CaughtException):
        if stack_trace is not None:
            msg = 'stack_trace cannot be combined with a CaughtException, which already has one'
            raise TypeError(msg)
        return Failure(error)
    return Failure(CaughtException(error, stack_trace))


def run_catching[R](block: Callable[[], R]) -> Success[R] | Failure:
    """Call ``block`` and wrap its outcome.

    Returns Success with the return value, or Failure holding the raised
    exception and its traceback. Only the exception types configured in
    ``catch`` (default ``(Exception,)``) are captured; anything else, such as
    KeyboardInterrupt, propagates.

    Examples:
        >>> run_catching(lambda: int('42'))
        Success(value=42)
        >>> run_catching(lambda: int('x')).is_failure()
        True
    """
    config = get_config()
    try:
        value = block()
    except config.catch as e:
        if config.log_level is not None:
            logger.debug('exception_captured', error_type=type(e).__qualname__)
        return Failure(CaughtException(e, trace_of(e)))
    return Success(value)
