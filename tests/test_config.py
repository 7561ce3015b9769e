"""Tests for klaw-option configuration and initialization."""

from __future__ import annotations

import json
import logging
import os
from unittest.mock import patch

import pytest
from klaw_option import LogFormat, OptionConfig, get_config, init
from klaw_option._config import _detect_log_format, _detect_log_level, reset


@pytest.fixture(autouse=True)
def clean_state(restore_library_logger) -> None:
    """Reset global configuration and the klaw_option logger around each test."""
    reset()
    yield
    reset()


class TestLogFormatEnum:
    """Tests for the LogFormat enum."""

    def test_values(self) -> None:
        assert LogFormat.JSON.value == 'json'
        assert LogFormat.CONSOLE.value == 'console'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            LogFormat('xml')


class TestOptionConfig:
    """Tests for the OptionConfig dataclass."""

    def test_default_values(self) -> None:
        config = OptionConfig()
        assert config.log_level is None
        assert config.log_format is LogFormat.JSON

    def test_config_is_frozen(self) -> None:
        config = OptionConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetection:
    """Tests for environment detection helpers."""

    def test_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_log_level_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_log_format_console(self) -> None:
        with patch.dict(os.environ, {'KLAW_LOG_FORMAT': 'Console'}):
            assert _detect_log_format() is LogFormat.CONSOLE

    def test_log_format_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_format() is LogFormat.JSON

    def test_log_format_unknown_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_LOG_FORMAT': 'xml'}), caplog.at_level(logging.WARNING):
            assert _detect_log_format() is LogFormat.JSON
        assert "Unknown KLAW_LOG_FORMAT value 'xml'" in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_silent_by_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == OptionConfig()
        assert get_config() is config

    def test_init_explicit(self) -> None:
        config = init(log_level='debug', log_format='console')
        assert config.log_level == 'DEBUG'
        assert config.log_format is LogFormat.CONSOLE

    def test_init_enum_format(self) -> None:
        config = init(log_format=LogFormat.CONSOLE)
        assert config.log_format is LogFormat.CONSOLE

    def test_init_invalid_format_raises(self) -> None:
        with pytest.raises(ValueError):
            init(log_format='xml')

    def test_init_reads_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_LOG_LEVEL': 'info', 'KLAW_LOG_FORMAT': 'console'}):
            config = init()
        assert config.log_level == 'INFO'
        assert config.log_format is LogFormat.CONSOLE

    def test_explicit_wins_over_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_LOG_LEVEL': 'info'}):
            config = init(log_level='ERROR')
        assert config.log_level == 'ERROR'

    def test_init_configures_logging(self, restore_library_logger: logging.Logger) -> None:
        """A resolved level installs one structlog handler on the klaw_option logger."""
        before = len(restore_library_logger.handlers)
        init(log_level='WARNING')
        assert restore_library_logger.level == logging.WARNING
        assert len(restore_library_logger.handlers) == before + 1

    def test_init_without_level_leaves_logging_alone(self, restore_library_logger: logging.Logger) -> None:
        """A silent config installs no handler."""
        handlers = restore_library_logger.handlers[:]
        with patch.dict(os.environ, {}, clear=True):
            init()
        assert restore_library_logger.handlers == handlers

    def test_init_logs_configuration(self, capsys: pytest.CaptureFixture[str]) -> None:
        """init() emits a debug event describing the resolved config."""
        init(log_level='DEBUG', log_format='json')

        lines = capsys.readouterr().err.splitlines()
        events = [json.loads(line) for line in lines if line.startswith('{')]
        entries = [e for e in events if e['event'] == 'klaw_option configured']
        assert len(entries) == 1
        assert entries[0]['logger'] == 'klaw_option._config'
        assert entries[0]['log_level'] == 'DEBUG'
        assert entries[0]['log_format'] == 'json'

    def test_reinit_replaces_config(self) -> None:
        first = init(log_format='json')
        second = init(log_format='console')
        assert first is not second
        assert get_config() is second
