"""@catching decorator: the function form of run_catching."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from catching._config import get_config
from catching._logging import get_logger
from catching.types.caught import CaughtException, trace_of
from catching.types.result import Failure, Success

__all__ = ['catching']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)

logger = get_logger(__name__)


@overload
def catching[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure]: ...


@overload
def catching[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure]]: ...


@overload
def catching(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure]]: ...


def catching[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that captures raised exceptions into a Failure.

    Wraps a function so that it returns Success(value) on normal return and
    Failure(CaughtException(exc, trace)) if an exception is raised.

    Can be used with or without arguments:
        @catching
        def risky(): ...

        @catching(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to the
            configured ``catch`` types, ``(Exception,)`` unless changed.

    Returns:
        A wrapped function that returns Result[T] instead of T.

    Example:
        ```python
        @catching
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0).exception_or_null().error
        # ZeroDivisionError('division by zero')
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure:
        config = get_config()
        catch = exceptions if exceptions is not None else config.catch
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            if config.log_level is not None:
                logger.debug(
                    'exception_captured',
                    function=getattr(wrapped, '__qualname__', repr(wrapped)),
                    error_type=type(e).__qualname__,
                )
            return Failure(CaughtException(e, trace_of(e)))
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper
