"""Library configuration: CatchingConfig, environment detection and init()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from catching._logging import configure_logging

__all__ = [
    'CatchingConfig',
    'get_config',
    'init',
]

_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})
_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})


@dataclass(frozen=True)
class CatchingConfig:
    """Configuration for result capture.

    Attributes:
        capture_trace: Capture a stack trace for every CaughtException.
        trace_limit: Maximum number of frames kept per trace (None = all).
        catch: Exception types captured by run_catching and the catching variants.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    capture_trace: bool = True
    trace_limit: int | None = None
    catch: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None


# Global configuration (set by init())
_config: CatchingConfig | None = None


def _detect_capture_trace() -> bool:
    """Read CATCHING_CAPTURE_TRACE, defaulting to True."""
    raw = os.environ.get('CATCHING_CAPTURE_TRACE', '').strip().lower()
    if not raw or raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logging.warning("Unknown CATCHING_CAPTURE_TRACE value '%s', defaulting to on", raw)
    return True


def _detect_trace_limit() -> int | None:
    """Read CATCHING_TRACE_LIMIT as a positive frame count."""
    raw = os.environ.get('CATCHING_TRACE_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        logging.warning("Invalid CATCHING_TRACE_LIMIT value '%s', keeping full traces", raw)
        return None
    if limit < 1:
        logging.warning("CATCHING_TRACE_LIMIT must be positive, got %d; keeping full traces", limit)
        return None
    return limit


def _detect_log_level() -> str | None:
    return os.environ.get('CATCHING_LOG_LEVEL') or None


def init(
    capture_trace: bool | None = None,
    trace_limit: int | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
) -> CatchingConfig:
    """Initialize catching with the given configuration.

    Arguments left as None are read from the environment
    (CATCHING_CAPTURE_TRACE, CATCHING_TRACE_LIMIT, CATCHING_LOG_LEVEL).

    Args:
        capture_trace: Capture stack traces for caught exceptions.
        trace_limit: Maximum frames kept per trace.
        catch: Exception types captured by run_catching. Defaults to (Exception,).
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The CatchingConfig that was set.

    Example:
        ```python
        import catching

        catching.init(trace_limit=20, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    _config = _build_config(capture_trace, trace_limit, catch, log_level)

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def _build_config(
    capture_trace: bool | None = None,
    trace_limit: int | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
) -> CatchingConfig:
    """Resolve a CatchingConfig from arguments and the environment, without side effects."""
    if trace_limit is not None and trace_limit < 1:
        msg = f'trace_limit must be positive, got {trace_limit}'
        raise ValueError(msg)

    resolved_catch = catch if catch is not None else (Exception,)
    if not resolved_catch or not all(
        isinstance(t, type) and issubclass(t, BaseException) for t in resolved_catch
    ):
        msg = f'catch must be a non-empty tuple of exception types, got {resolved_catch!r}'
        raise TypeError(msg)

    return CatchingConfig(
        capture_trace=_detect_capture_trace() if capture_trace is None else capture_trace,
        trace_limit=_detect_trace_limit() if trace_limit is None else trace_limit,
        catch=tuple(resolved_catch),
        log_level=_detect_log_level() if log_level is None else log_level,
    )


def get_config() -> CatchingConfig:
    """Get the current configuration.

    Before init() is called, the configuration is read from the environment
    on first use. This path never configures logging; only init() does.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _build_config()
    return _config
