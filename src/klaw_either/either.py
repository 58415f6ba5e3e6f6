"""Either[L, R]: a value held in exactly one of two slots, Left or Right.

Either is the foundation for Result and Option. A value is tagged Left or
Right at construction and never changes; every transformation returns a new
instance, taps return the same one.

Example:
    ```python
    from klaw_either import Left, Right

    value = Left(3)
    value.left_or(int)            # 3
    Right('5').left_or(int)       # 5
    Right('5').map_right(len)     # Right(1)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeIs

import msgspec

from klaw_either._guards import discard, resolve, resolve_async
from klaw_either.errors import WrongSideError

__all__ = ['Either', 'Left', 'Right', 'is_instance', 'left', 'right']


class Left[L, R](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either holding a value of type L.

    Attributes:
        value: The left payload.
    """

    value: L

    def is_left(self) -> bool:
        """Return True; this is a Left."""
        return True

    def is_right(self) -> bool:
        """Return False; this is a Left."""
        return False

    def left_or(self, fallback: L | Callable[[R], L]) -> L:  # noqa: ARG002
        """Return the left payload, ignoring the fallback.

        Args:
            fallback: Value (or callable of the right payload) used for Right.

        Returns:
            The left payload.
        """
        return self.value

    async def left_or_async(self, fallback: L | Awaitable[L] | Callable[[R], L | Awaitable[L]]) -> L:
        """Return the left payload; an unused coroutine fallback is closed."""
        discard(fallback)
        return self.value

    def right_or(self, fallback: R | Callable[[L], R]) -> R:
        """Return the fallback, calling it with the left payload if callable.

        Args:
            fallback: A plain value, or a callable taking the left payload.

        Returns:
            The fallback value.
        """
        return resolve(fallback, self.value)

    async def right_or_async(self, fallback: R | Awaitable[R] | Callable[[L], R | Awaitable[R]]) -> R:
        """Async :meth:`right_or`; awaits the fallback when it is pending."""
        return await resolve_async(fallback, self.value)

    def map_left[V](self, mapper: Callable[[L], V]) -> Left[V, R]:
        """Apply ``mapper`` to the left payload.

        Args:
            mapper: Function applied to the left payload.

        Returns:
            A new Left (of the same family) holding the mapped payload.
        """
        return type(self)(mapper(self.value))

    async def map_left_async[V](self, mapper: Callable[[L], V | Awaitable[V]]) -> Left[V, R]:
        """Async :meth:`map_left`; ``mapper`` may be sync or async."""
        return type(self)(await resolve_async(mapper, self.value))

    def map_right[V](self, mapper: Callable[[R], V]) -> Left[L, V]:  # noqa: ARG002
        """Return a new Left with the same payload; ``mapper`` is not called."""
        return type(self)(self.value)

    async def map_right_async[V](self, mapper: Callable[[R], V | Awaitable[V]]) -> Left[L, V]:  # noqa: ARG002
        return type(self)(self.value)

    def tap_left(self, callback: Callable[[L], Any]) -> Left[L, R]:
        """Call ``callback`` with the left payload for side effects.

        Returns:
            This same instance.
        """
        callback(self.value)
        return self

    async def tap_left_async(self, callback: Callable[[L], Any]) -> Left[L, R]:
        await resolve_async(callback, self.value)
        return self

    def tap_right(self, callback: Callable[[R], Any]) -> Left[L, R]:  # noqa: ARG002
        return self

    async def tap_right_async(self, callback: Callable[[R], Any]) -> Left[L, R]:  # noqa: ARG002
        return self

    def match[T](self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:  # noqa: ARG002
        """Call ``on_left`` with the left payload and return its result."""
        return on_left(self.value)

    async def match_async[T](
        self,
        on_left: Callable[[L], T | Awaitable[T]],
        on_right: Callable[[R], T | Awaitable[T]],  # noqa: ARG002
    ) -> T:
        """Async :meth:`match`; awaits ``on_left`` if it returns an awaitable."""
        return await resolve_async(on_left, self.value)

    def get_left_or_raise(self) -> L:
        """Return the left payload.

        Note:
            Unsafe escape hatch intended for tests.
        """
        return self.value

    def get_right_or_raise(self) -> R:
        """Raise, since a Left holds no right payload.

        Raises:
            WrongSideError: Always.
        """
        raise WrongSideError('right')

    def __str__(self) -> str:
        return f'{type(self).__name__}({self.value})'

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.value!r})'


class Right[L, R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either holding a value of type R.

    Attributes:
        value: The right payload.
    """

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def left_or(self, fallback: L | Callable[[R], L]) -> L:
        """Return the fallback, calling it with the right payload if callable."""
        return resolve(fallback, self.value)

    async def left_or_async(self, fallback: L | Awaitable[L] | Callable[[R], L | Awaitable[L]]) -> L:
        """Async :meth:`left_or`; awaits the fallback when it is pending."""
        return await resolve_async(fallback, self.value)

    def right_or(self, fallback: R | Callable[[L], R]) -> R:  # noqa: ARG002
        return self.value

    async def right_or_async(self, fallback: R | Awaitable[R] | Callable[[L], R | Awaitable[R]]) -> R:
        discard(fallback)
        return self.value

    def map_left[V](self, mapper: Callable[[L], V]) -> Right[V, R]:  # noqa: ARG002
        """Return a new Right with the same payload; ``mapper`` is not called."""
        return type(self)(self.value)

    async def map_left_async[V](self, mapper: Callable[[L], V | Awaitable[V]]) -> Right[V, R]:  # noqa: ARG002
        return type(self)(self.value)

    def map_right[V](self, mapper: Callable[[R], V]) -> Right[L, V]:
        """Return a new Right holding ``mapper(value)``."""
        return type(self)(mapper(self.value))

    async def map_right_async[V](self, mapper: Callable[[R], V | Awaitable[V]]) -> Right[L, V]:
        return type(self)(await resolve_async(mapper, self.value))

    def tap_left(self, callback: Callable[[L], Any]) -> Right[L, R]:  # noqa: ARG002
        return self

    async def tap_left_async(self, callback: Callable[[L], Any]) -> Right[L, R]:  # noqa: ARG002
        return self

    def tap_right(self, callback: Callable[[R], Any]) -> Right[L, R]:
        """Call ``callback`` with the right payload; returns this same instance."""
        callback(self.value)
        return self

    async def tap_right_async(self, callback: Callable[[R], Any]) -> Right[L, R]:
        await resolve_async(callback, self.value)
        return self

    def match[T](self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:  # noqa: ARG002
        """Call ``on_right`` with the right payload and return its result."""
        return on_right(self.value)

    async def match_async[T](
        self,
        on_left: Callable[[L], T | Awaitable[T]],  # noqa: ARG002
        on_right: Callable[[R], T | Awaitable[T]],
    ) -> T:
        return await resolve_async(on_right, self.value)

    def get_left_or_raise(self) -> L:
        """Raise, since a Right holds no left payload.

        Raises:
            WrongSideError: Always.
        """
        raise WrongSideError('left')

    def get_right_or_raise(self) -> R:
        return self.value

    def __str__(self) -> str:
        return f'{type(self).__name__}({self.value})'

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.value!r})'


type Either[L, R] = Left[L, R] | Right[L, R]


def left[L](value: L) -> Left[L, Any]:
    """Create a Left holding ``value``."""
    return Left(value)


def right[R](value: R) -> Right[Any, R]:
    """Create a Right holding ``value``."""
    return Right(value)


def is_instance(value: object) -> TypeIs[Left[Any, Any] | Right[Any, Any]]:
    """Return True if ``value`` is any Either variant (including Result/Option)."""
    match value:
        case Left() | Right():
            return True
        case _:
            return False
