"""CaughtException: a captured error paired with the stack trace it came from."""

from __future__ import annotations

import os
import traceback
from traceback import StackSummary

import msgspec

from catching._config import get_config

__all__ = ['CaughtException']

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _outside_package(frame: traceback.FrameSummary) -> bool:
    return not os.path.abspath(frame.filename).startswith(_PACKAGE_DIR + os.sep)


def _trim(frames: list[traceback.FrameSummary], limit: int | None) -> StackSummary:
    frames = [frame for frame in frames if _outside_package(frame)]
    if limit is not None:
        frames = frames[-limit:]
    return StackSummary.from_list(frames)


def capture_stack() -> StackSummary:
    """Capture the caller's stack, excluding frames inside this package.

    Honours ``capture_trace`` and ``trace_limit`` from the active config; the
    most recent frames are kept when the stack is truncated.
    """
    config = get_config()
    if not config.capture_trace:
        return StackSummary()
    return _trim(traceback.extract_stack(), config.trace_limit)


def trace_of(error: BaseException) -> StackSummary:
    """Extract the traceback an exception carries, honouring the active config.

    Library frames are dropped and truncation keeps the innermost frames.
    """
    config = get_config()
    if not config.capture_trace:
        return StackSummary()
    return _trim(traceback.extract_tb(error.__traceback__), config.trace_limit)


class CaughtException(msgspec.Struct, frozen=True, eq=False):
    """An error that was caught, with its associated stack trace.

    ``error`` may be any object: usually an exception, but strings and error
    codes are accepted too. When ``stack_trace`` is omitted the current call
    stack is captured at construction time.

    Wrappers compare and hash by identity; compare ``error`` to test whether
    two failures hold the same error.

    Examples:
        >>> caught = CaughtException(ValueError('bad input'))
        >>> caught.error
        ValueError('bad input')
        >>> str(caught).splitlines()[0]
        'ValueError: bad input'
    """

    error: object
    stack_trace: StackSummary | None = None

    def __post_init__(self) -> None:
        if self.stack_trace is None:
            msgspec.structs.force_setattr(self, 'stack_trace', capture_stack())

    def describe(self) -> str:
        """Return a one-line description of the wrapped error."""
        if isinstance(self.error, BaseException):
            return traceback.format_exception_only(self.error)[-1].rstrip('\n')
        return str(self.error)

    def format(self) -> list[str]:
        """Return the rendering as a list of newline-terminated strings."""
        lines = [self.describe() + '\n']
        if self.stack_trace:
            lines.extend(self.stack_trace.format())
        return lines

    def __str__(self) -> str:
        return ''.join(self.format()).rstrip('\n')
