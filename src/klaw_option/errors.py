"""Option error types: empty extraction and singleton invariant violations."""

from __future__ import annotations

__all__ = [
    'EmptyValueError',
    'InvariantViolation',
    'OptionError',
]


class OptionError(Exception):
    """Base class for errors raised by the option types themselves."""


class EmptyValueError(OptionError):
    """A value was extracted from Nothing.

    Raised by ``unwrap()`` with a fixed message and by ``expect(msg)`` with
    the caller's message. Seeing this means a state check was skipped; prefer
    ``unwrap_or``, ``unwrap_or_else``, ``map_or`` or an explicit ``is_some()``.
    """

    def __init__(self, message: str | None = None) -> None:
        self.message = 'Cannot unwrap empty option' if message is None else message
        super().__init__(self.message)


class InvariantViolation(OptionError):  # noqa: N818
    """An internal invariant of the option types was broken.

    Only raised when code tries to build a second ``NothingType`` instance.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
