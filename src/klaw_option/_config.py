"""Library configuration: LogFormat enum, OptionConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from klaw_option._logging import configure_logging, get_logger

__all__ = [
    'LogFormat',
    'OptionConfig',
    'get_config',
    'init',
    'reset',
]


class LogFormat(Enum):
    """Rendering used once logging is configured."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        log_format: JSON or console rendering for configured logs.
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON


# Global configuration (set by init())
_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_LOG_LEVEL; unset or empty means silent."""
    level = os.environ.get('KLAW_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_log_format() -> LogFormat:
    """Detect log format from environment.

    Priority:
    1. KLAW_LOG_FORMAT environment variable ("json" or "console")
    2. Default to JSON
    """
    env_format = os.environ.get('KLAW_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return LogFormat.CONSOLE
    if env_format and env_format != 'json':
        logging.warning("Unknown KLAW_LOG_FORMAT value '%s', defaulting to json", env_format)
    return LogFormat.JSON


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_LOG_LEVEL if None; silent if neither is set.
        log_format: LogFormat enum or string ("json", "console"). Read from
            KLAW_LOG_FORMAT if None.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        # Environment-driven
        init()

        # Explicit configuration
        init(log_level="DEBUG", log_format="console")
        ```
    """
    global _config  # noqa: PLW0603

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = OptionConfig(log_level=resolved_level, log_format=resolved_format)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_format is LogFormat.JSON)
        get_logger(__name__).debug(
            'klaw_option configured',
            log_level=resolved_level,
            log_format=resolved_format.value,
        )

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw_option not initialized. Call klaw_option.init() first.'
        raise RuntimeError(msg)
    return _config


def reset() -> None:
    """Forget the current configuration (used by tests)."""
    global _config  # noqa: PLW0603
    _config = None
