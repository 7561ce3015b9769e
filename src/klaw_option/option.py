"""Option type: Some[T] | Nothing for optional values.

``Option`` is the shared contract. It declares every operation and implements
the ones that can be expressed through others (``map_or``, ``flatten``,
``and_then``, ``zip``, the async helpers, ...). ``Some`` and ``NothingType``
implement only the primitives. ``Nothing`` is the single ``NothingType``
instance for the whole process.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs, final, overload

import msgspec

from klaw_option.errors import EmptyValueError, InvariantViolation

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'is_none', 'is_some']

logger = logging.getLogger(__name__)


def _is_not_none[U](value: U | None) -> TypeIs[U]:
    return value is not None


def _pair[A, B](value: A, other_value: B) -> tuple[A, B]:
    return value, other_value


# The only subclasses Option accepts, both defined below
_VARIANTS = frozenset({'Some', 'NothingType'})


class Option[T](msgspec.Struct, frozen=True, gc=False):
    """An optional value: every Option is either Some and holds a value, or Nothing.

    This is the abstract contract shared by ``Some`` and ``NothingType``.
    It is closed: constructing ``Option()`` or subclassing it anywhere else
    raises TypeError. Use the factories in ``klaw_option.factories`` or the
    variants themselves.

    Options have no truth value. ``if option:`` raises TypeError; ask
    ``is_some()`` / ``is_none()`` instead.

    Examples:
        >>> from klaw_option import from_nullable
        >>> from_nullable(42).map(lambda x: x * 2).unwrap_or(0)
        84
        >>> from_nullable(None).map(lambda x: x * 2).unwrap_or(0)
        0
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            msg = f'Option is closed: {cls.__name__} cannot subclass it, only Some and NothingType can'
            raise TypeError(msg)

    def __post_init__(self) -> None:
        if type(self) is Option:
            msg = 'Option cannot be instantiated directly; use Some(value) or Nothing'
            raise TypeError(msg)

    # --- Primitives (implemented by Some and NothingType) ---

    def is_some(self) -> bool:
        """Return True if the option is Some.

        Use ``isinstance(option, Some)``, a ``match`` statement or the
        ``is_some()`` guard function to narrow the static type.
        """
        raise NotImplementedError('Subclasses must implement is_some')

    def is_some_and(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the option is Some and the value satisfies predicate.

        Args:
            predicate: Boolean or ``TypeIs`` predicate, only called on Some.
        """
        raise NotImplementedError('Subclasses must implement is_some_and')

    def is_none(self) -> bool:
        """Return True if the option is Nothing."""
        raise NotImplementedError('Subclasses must implement is_none')

    def is_none_or(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the option is Nothing, or Some and predicate holds."""
        raise NotImplementedError('Subclasses must implement is_none_or')

    def unwrap(self) -> object:
        """Return the contained Some value.

        The return type is deliberately opaque on ``Option``; narrow to
        ``Some`` first (or use ``expect``) to get the precise type.

        Raises:
            EmptyValueError: If the option is Nothing.
        """
        raise NotImplementedError('Subclasses must implement unwrap')

    def expect(self, msg: str) -> T:
        """Return the contained Some value.

        Args:
            msg: Error message used if the option is Nothing.

        Raises:
            EmptyValueError: With ``msg``, if the option is Nothing.
        """
        raise NotImplementedError('Subclasses must implement expect')

    def unwrap_or[U](self, default: U) -> T | U:
        """Return the contained value, or ``default`` if Nothing."""
        raise NotImplementedError('Subclasses must implement unwrap_or')

    def unwrap_or_none(self) -> T | None:
        """Return the contained value, or None if Nothing."""
        raise NotImplementedError('Subclasses must implement unwrap_or_none')

    def unwrap_or_else[U](self, f: Callable[[], U]) -> T | U:
        """Return the contained value, or compute one with ``f`` if Nothing.

        ``f`` takes no arguments and is never called on Some.
        """
        raise NotImplementedError('Subclasses must implement unwrap_or_else')

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Map Option[T] to Option[U] by applying ``f`` to the contained value.

        Args:
            f: Function applied exactly once, only on Some.

        Returns:
            Some(f(value)) if Some, Nothing otherwise.
        """
        raise NotImplementedError('Subclasses must implement map')

    @overload
    def filter[U](self, predicate: Callable[[T], TypeIs[U]]) -> Option[U]: ...
    @overload
    def filter(self, predicate: Callable[[T], object]) -> Option[T]: ...
    def filter(self, predicate: Callable[[T], object]) -> Option[Any]:
        """Keep the value only if ``predicate`` holds.

        Args:
            predicate: Boolean or ``TypeIs`` predicate, never called on Nothing.

        Returns:
            This option if Some and predicate(value) is truthy, else Nothing.
        """
        raise NotImplementedError('Subclasses must implement filter')

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Call ``f`` with the contained value for its side effect.

        Exceptions raised by ``f`` propagate.

        Returns:
            This option, unchanged.
        """
        raise NotImplementedError('Subclasses must implement inspect')

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` if this option is Some, else Nothing."""
        raise NotImplementedError('Subclasses must implement and_')

    def or_(self, other: Option[T]) -> Option[T]:
        """Return this option if Some, else ``other``."""
        raise NotImplementedError('Subclasses must implement or_')

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return this option if Some, else the option produced by ``f``."""
        raise NotImplementedError('Subclasses must implement or_else')

    def xor(self, other: Option[T]) -> Option[T]:
        """Return the Some one if exactly one of this and ``other`` is Some.

        Both Some or both Nothing gives Nothing.
        """
        raise NotImplementedError('Subclasses must implement xor')

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine two Some values with ``f``.

        Args:
            other: The option to combine with.
            f: Reducer, called at most once and only if both are Some.

        Returns:
            Some(f(value, other_value)) if both are Some, Nothing otherwise.
        """
        raise NotImplementedError('Subclasses must implement zip_with')

    def unzip[A, B](self: Option[tuple[A, B]]) -> tuple[Option[A], Option[B]]:
        """Split an option of a pair into a pair of options.

        Returns:
            (Some(a), Some(b)) if Some, (Nothing, Nothing) otherwise.
        """
        raise NotImplementedError('Subclasses must implement unzip')

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call ``some(value)`` if Some, else ``none()``; return its result.

        The other branch is never called.
        """
        raise NotImplementedError('Subclasses must implement match')

    def as_list(self) -> list[T]:
        """Return ``[value]`` if Some, ``[]`` if Nothing."""
        raise NotImplementedError('Subclasses must implement as_list')

    async def transpose_awaitable[U](self: Option[Awaitable[U]]) -> Option[U]:
        """Turn an Option of an awaitable into an awaitable of an Option.

        Some awaits the held value and wraps the result; anything it raises
        propagates unchanged. Nothing returns Nothing without suspending.
        """
        raise NotImplementedError('Subclasses must implement transpose_awaitable')

    # --- Derived operations ---

    def contains(self, value: T) -> bool:
        """Return True if the option is Some and holds ``value``.

        Equality is strict: the held value must have exactly the type of
        ``value`` and compare equal to it, so ``Some(1).contains(1.0)`` and
        ``Some(True).contains(1)`` are both False.
        """
        return self.is_some_and(lambda held: type(held) is type(value) and held == value)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or return ``default`` if Nothing."""
        return self.map(f).unwrap_or(default)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply ``f`` to the contained value, or compute a default if Nothing.

        Args:
            default: Zero-argument function, only called on Nothing.
            f: Function applied to the value, only called on Some.
        """
        return self.map(f).unwrap_or_else(default)

    def map_or_none[U](self, f: Callable[[T], U]) -> U | None:
        """Apply ``f`` to the contained value, or return None if Nothing."""
        return self.map(f).unwrap_or_none()

    def map_nullable[U](self, f: Callable[[T], U | None]) -> Option[U]:
        """Map with a function that may return None.

        Returns:
            Some(f(value)) if Some and the result is not None, Nothing otherwise.
        """
        return self.map(f).filter(_is_not_none)

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """Flatten Option[Option[U]] into Option[U]."""
        return self.unwrap_or(Nothing)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a function that returns an Option.

        Also known as flatmap or bind. ``f`` is only called on Some.
        """
        return self.map(f).flatten()

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Return Some((value, other_value)) if both are Some, else Nothing."""
        return self.zip_with(other, _pair)

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Option[U]:
        """Map with an async function.

        ``f`` is only called on Some, and only once the returned coroutine is
        awaited; whatever it raises surfaces at that await.

        Returns:
            Some(await f(value)) if Some, Nothing otherwise.
        """
        return await self.map(f).transpose_awaitable()

    async def map_nullable_async[U](self, f: Callable[[T], Awaitable[U | None]]) -> Option[U]:
        """Map with an async function whose result may be None.

        Returns:
            Some(result) if Some and the awaited result is not None, Nothing otherwise.
        """
        resolved = await self.map(f).transpose_awaitable()
        return resolved.filter(_is_not_none)

    async def and_then_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> Option[U]:
        """Chain an async function that returns an Option."""
        return (await self.map_async(f)).flatten()

    def __str__(self) -> str:
        """Return str(value) for Some, the empty string for Nothing."""
        return str(self.unwrap_or(''))

    def __bool__(self) -> NoReturn:
        msg = f'{type(self).__name__} has no truth value; use is_some() or is_none()'
        raise TypeError(msg)


@final
class Some[T](Option[T], frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some accepts any value verbatim, None included. Use ``from_nullable`` to
    turn None into Nothing.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> match some:
        ...     case Some(value):
        ...         print(value)
        42
    """

    value: T

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_some_and(self, predicate: Callable[[T], object]) -> bool:
        """Return whether the value satisfies ``predicate``."""
        return bool(predicate(self.value))

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def is_none_or(self, predicate: Callable[[T], object]) -> bool:
        """Return whether the value satisfies ``predicate``."""
        return bool(predicate(self.value))

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or[U](self, default: U) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_none(self) -> T:
        return self.value

    def unwrap_or_else[U](self, f: Callable[[], U]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    @overload
    def filter[U](self, predicate: Callable[[T], TypeIs[U]]) -> Some[U] | NothingType: ...
    @overload
    def filter(self, predicate: Callable[[T], object]) -> Some[T] | NothingType: ...
    def filter(self, predicate: Callable[[T], object]) -> Some[Any] | NothingType:
        """Return self if the predicate is satisfied, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call ``f`` with the value, then return self unchanged."""
        f(self.value)
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since this is Some."""
        return other

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        """Return self if other is Nothing, else Nothing."""
        return self if other.is_none() else Nothing

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine with other's value through ``f`` if other is Some."""
        return other.map(lambda other_value: f(self.value, other_value))

    def unzip[A, B](self: Some[tuple[A, B]]) -> tuple[Some[A], Some[B]]:
        """Split Some((a, b)) into (Some(a), Some(b))."""
        first, second = self.value
        return Some(first), Some(second)

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        return some(self.value)

    def as_list(self) -> list[T]:
        return [self.value]

    async def transpose_awaitable[U](self: Some[Awaitable[U]]) -> Some[U]:
        """Await the held value and wrap the result in Some."""
        return Some(await self.value)


_nothing_created = False


@final
class NothingType(Option[Any], frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a process-wide singleton - use the ``Nothing`` constant. Calling
    ``NothingType()`` again raises InvariantViolation, and copying or
    pickling ``Nothing`` returns the same instance, so identity checks
    (``option is Nothing``) are always safe.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __post_init__(self) -> None:
        global _nothing_created  # noqa: PLW0603
        super().__post_init__()
        if _nothing_created:
            logger.error('Refusing to construct a second NothingType instance')
            msg = 'Nothing instance already exists'
            raise InvariantViolation(msg)
        _nothing_created = True

    def __repr__(self) -> str:
        return 'Nothing'

    def __copy__(self) -> NothingType:
        return self

    def __deepcopy__(self, _memo: dict[int, Any]) -> NothingType:
        return self

    def __reduce__(self) -> str:
        # Unpickles to the module-level ``Nothing`` instead of a new instance
        return 'Nothing'

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_some_and(self, _predicate: Callable[[Any], object]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def is_none_or(self, _predicate: Callable[[Any], object]) -> bool:
        """Return True without calling the predicate."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            EmptyValueError: Always, since Nothing has no value to unwrap.
        """
        logger.debug('unwrap called on Nothing')
        raise EmptyValueError

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            EmptyValueError: Always, with the custom message.
        """
        logger.debug('expect called on Nothing', extra={'expect_message': msg})
        raise EmptyValueError(msg)

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_none(self) -> None:
        return None

    def unwrap_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map[U](self, _f: Callable[[Any], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def filter(self, _predicate: Callable[[Any], object]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def inspect(self, _f: Callable[[Any], object]) -> NothingType:
        return self

    def and_[U](self, _other: Option[U]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[U](self, other: Option[U]) -> Option[U]:
        """Return other since self is Nothing."""
        return other

    def or_else[U](self, f: Callable[[], Option[U]]) -> Option[U]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[U](self, other: Option[U]) -> Option[U]:
        """Return other, which is Some exactly when the xor holds."""
        return other

    def zip_with[U, R](self, _other: Option[U], _f: Callable[[Any, U], R]) -> NothingType:
        """Return Nothing without calling the reducer."""
        return self

    def unzip(self) -> tuple[NothingType, NothingType]:
        return self, self

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        return none()

    def as_list(self) -> list[Any]:
        return []

    async def transpose_awaitable(self) -> NothingType:
        """Return Nothing; there is nothing to await."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if ``option`` is Some, narrowing it for type checkers.

    Examples:
        >>> opt = from_nullable(lookup())
        >>> if is_some(opt):
        ...     value = opt.unwrap()  # precise type
    """
    return isinstance(option, Some)


def is_none(option: Option[Any]) -> TypeIs[NothingType]:
    """Return True if ``option`` is Nothing, narrowing it for type checkers."""
    return option is Nothing
