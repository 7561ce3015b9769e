"""Logging for klaw-option.

Option code logs through the standard library under the ``klaw_option``
namespace, so a library that merely imports it stays silent. ``init()`` (or
``configure_logging()`` directly) attaches one structlog-rendered handler to
that namespace only. Neither the root logger nor structlog's global
configuration is touched, so the host application's logging is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['LIBRARY_LOGGER', 'configure_logging', 'get_logger']

LIBRARY_LOGGER = 'klaw_option'

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def _tag_library(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Mark the event as coming from klaw-option."""
    event_dict.setdefault('library', LIBRARY_LOGGER)
    return event_dict


def _event_processors() -> list[Any]:
    """Processors run for every event, whether it came from stdlib or structlog."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _tag_library,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Render klaw_option.* records through structlog.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit one JSON object per line. If False, use
            structlog's console renderer.
    """
    global _handler  # noqa: PLW0603

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        # Option types log with plain stdlib calls and ``extra=`` fields
        foreign_pre_chain=[*_event_processors(), structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing into the klaw_option namespace.

    Args:
        name: Logger name. Names outside the namespace are nested under it,
            so ``'app'`` becomes ``'klaw_option.app'``. Defaults to the
            namespace itself.

    Returns:
        A structlog BoundLogger whose events reach the handler installed by
        ``configure_logging()``.
    """
    if not name:
        name = LIBRARY_LOGGER
    elif name != LIBRARY_LOGGER and not name.startswith(f'{LIBRARY_LOGGER}.'):
        name = f'{LIBRARY_LOGGER}.{name}'

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_event_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
