"""Pytest configuration and shared fixtures for klaw-option tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_option import Nothing

    return Nothing


@pytest.fixture
def call_counter():
    """A callable that records every call and returns a fixed value."""

    class Counter:
        def __init__(self) -> None:
            self.calls: list[tuple[object, ...]] = []

        def __call__(self, *args: object) -> str:
            self.calls.append(args)
            return 'called'

        @property
        def count(self) -> int:
            return len(self.calls)

    return Counter()


@pytest.fixture
def restore_library_logger():
    """Put the klaw_option logger back the way the test found it."""
    import logging

    from klaw_option import _logging

    library_logger = logging.getLogger(_logging.LIBRARY_LOGGER)
    handlers, level, propagate = library_logger.handlers[:], library_logger.level, library_logger.propagate
    installed = _logging._handler
    yield library_logger
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate
    _logging._handler = installed
