"""Structured logging for catching.

Library loggers are structlog wrappers around stdlib loggers in the
``catching`` namespace. Importing the library changes nothing: events go
through the host's stdlib logging like any other library's records, and
global structlog configuration is never touched. ``configure_logging`` only
installs a handler on the ``catching`` logger itself.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'catching'

# Shared by every logger from get_logger(); configure_logging rebuilds it in place.
_processors: list[Any] = []

# Handler installed by configure_logging, replaced on reconfiguration.
_handler: logging.Handler | None = None


def _build_processors(json_output: bool = True) -> list[Any]:
    """Get the processor chain: level filter, metadata, then a renderer."""
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        renderer,
    ]


_processors[:] = _build_processors()


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Send catching's events to a stream at the given level.

    Only the ``catching`` logger is touched: it gets one handler (replacing
    any earlier one from this function) and stops propagating, so records are
    not duplicated by the host's root handlers.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console key=value output.
        stream: Destination stream. Defaults to stderr.
    """
    global _handler  # noqa: PLW0603

    _processors[:] = _build_processors(json_output)

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Args:
        name: Logger name, normally a module's ``__name__`` inside the package.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
