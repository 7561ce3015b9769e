"""Factory functions for building options from plain values."""

from __future__ import annotations

from klaw_option.option import Nothing, NothingType, Option, Some

__all__ = ['empty', 'from_', 'from_nullable', 'none', 'some']


none: NothingType = Nothing
"""The shared Nothing instance, typed as the concrete variant."""


def from_[T](value: T) -> Option[T]:
    """Wrap a value in Some, whatever it is.

    None, 0, '' and False all become Some. This is the "I already have a
    value" constructor; use ``from_nullable`` when None means absent.

    Examples:
        >>> from_(0)
        Some(value=0)
        >>> from_(None)
        Some(value=None)
    """
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """Build an Option from a value that may be None.

    Args:
        value: Any value; only None is treated as absent.

    Returns:
        Nothing if value is None, Some(value) otherwise.

    Examples:
        >>> from_nullable(None)
        Nothing
        >>> from_nullable(False)
        Some(value=False)
    """
    if value is None:
        return Nothing
    return Some(value)


def empty[T]() -> Option[T]:
    """Return Nothing, typed as an Option of the caller's choice."""
    return Nothing


def some[T](value: T) -> Some[T]:
    """Wrap a value in Some, keeping the concrete variant type."""
    return Some(value)
