"""Result[V, E]: Ok holding a success value, or Err holding an exception.

Result specializes Either: the left slot is success, the right slot is a
failure represented as an exception instance (never raised, always
returned).

Example:
    ```python
    from klaw_either import Err, Ok

    def parse(text: str) -> Result[int, ValueError]:
        if text.isdigit():
            return Ok(int(text))
        return Err(ValueError(f'not a number: {text!r}'))

    parse('21').map(lambda x: x * 2)            # Ok(42)
    parse('abc').map(lambda x: x * 2)           # Err(ValueError("not a number: 'abc'"))
    parse('abc').value_or(0)                    # 0
    parse('21').and_then(lambda x: parse('1'))  # Ok(1)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeIs

from klaw_either._guards import resolve_async
from klaw_either.either import Left, Right
from klaw_either.errors import EitherError

if TYPE_CHECKING:
    from klaw_either.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'err', 'error', 'is_instance', 'ok', 'transpose']


class Ok[V, E: BaseException](Left[V, E], frozen=True, gc=False):
    """Success variant of Result containing a value of type V.

    Examples:
        >>> Ok(21).map(lambda x: x * 2)
        Ok(42)
        >>> Ok(1).is_ok()
        True
    """

    def is_ok(self) -> TypeIs[Ok[V, E]]:
        """Return True; alias of :meth:`is_left`."""
        return True

    def is_err(self) -> TypeIs[Err[V, E]]:
        """Return False; alias of :meth:`is_right`."""
        return False

    def value_or(self, fallback: V | Callable[[E], V]) -> V:
        """Return the success value; alias of :meth:`left_or`."""
        return self.left_or(fallback)

    async def value_or_async(self, fallback: V | Awaitable[V] | Callable[[E], V | Awaitable[V]]) -> V:
        return await self.left_or_async(fallback)

    def map[U](self, mapper: Callable[[V], U]) -> Ok[U, E]:
        """Apply ``mapper`` to the success value.

        Args:
            mapper: Function applied to the value.

        Returns:
            A new Ok holding the mapped value.
        """
        return Ok(mapper(self.value))

    async def map_async[U](self, mapper: Callable[[V], U | Awaitable[U]]) -> Ok[U, E]:
        """Async :meth:`map`; ``mapper`` may be sync or async."""
        return Ok(await resolve_async(mapper, self.value))

    def map_err[F: BaseException](self, mapper: Callable[[E], F]) -> Ok[V, F]:  # noqa: ARG002
        """Return a new Ok with the same value; ``mapper`` is not called."""
        return Ok(self.value)

    async def map_err_async[F: BaseException](self, mapper: Callable[[E], F | Awaitable[F]]) -> Ok[V, F]:  # noqa: ARG002
        return Ok(self.value)

    def and_then[U, F: BaseException](self, mapper: Callable[[V], Result[U, F]]) -> Result[U, E | F]:
        """Chain a computation that may fail.

        The Result returned by ``mapper`` is returned directly (flattened,
        not nested).

        Args:
            mapper: Function taking the value and returning a Result.

        Returns:
            The Result produced by ``mapper``.
        """
        return mapper(self.value)

    async def and_then_async[U, F: BaseException](
        self,
        mapper: Callable[[V], Result[U, F] | Awaitable[Result[U, F]]],
    ) -> Result[U, E | F]:
        """Async :meth:`and_then`; ``mapper`` may be sync or async."""
        return await resolve_async(mapper, self.value)

    def some_or_none(self) -> Some[V] | NothingType:
        """Convert to Option: ``Some(value)``, or ``Nothing`` when the value is None."""
        from klaw_either.option import from_nullable

        return from_nullable(self.value)

    def as_nullable(self) -> Ok[Some[V] | NothingType, E]:
        """Wrap the success value in an Option based on its presence."""
        from klaw_either.option import from_nullable

        return Ok(from_nullable(self.value))


class Err[V, E: BaseException](Right[V, E], frozen=True, gc=False):
    """Failure variant of Result containing an exception of type E.

    Constructing an Err with anything other than an exception instance
    raises TypeError.

    Examples:
        >>> Err(ValueError('boom')).map(lambda x: x * 2)
        Err(ValueError('boom'))
        >>> Err(ValueError('boom')).value_or(0)
        0
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, BaseException):
            msg = f'Err payload must be an exception instance, got {type(self.value).__name__}'
            raise TypeError(msg)

    @property
    def error(self) -> E:
        """The contained exception."""
        return self.value

    def is_ok(self) -> TypeIs[Ok[V, E]]:
        return False

    def is_err(self) -> TypeIs[Err[V, E]]:
        return True

    def value_or(self, fallback: V | Callable[[E], V]) -> V:
        """Return the fallback, calling it with the error if callable."""
        return self.left_or(fallback)

    async def value_or_async(self, fallback: V | Awaitable[V] | Callable[[E], V | Awaitable[V]]) -> V:
        """Async :meth:`value_or`; awaits the fallback when it is pending."""
        return await self.left_or_async(fallback)

    def map[U](self, mapper: Callable[[V], U]) -> Err[U, E]:  # noqa: ARG002
        return Err(self.value)

    async def map_async[U](self, mapper: Callable[[V], U | Awaitable[U]]) -> Err[U, E]:  # noqa: ARG002
        return Err(self.value)

    def map_err[F: BaseException](self, mapper: Callable[[E], F]) -> Err[V, F]:
        """Return a new Err holding ``mapper(error)``.

        Args:
            mapper: Function taking the error and returning a new exception.

        Returns:
            A new Err with the mapped error.
        """
        return Err(mapper(self.value))

    async def map_err_async[F: BaseException](self, mapper: Callable[[E], F | Awaitable[F]]) -> Err[V, F]:
        return Err(await resolve_async(mapper, self.value))

    def and_then[U, F: BaseException](self, mapper: Callable[[V], Result[U, F]]) -> Err[U, E]:  # noqa: ARG002
        """Short-circuit: return a new Err with the same error; ``mapper`` is never called."""
        return Err(self.value)

    async def and_then_async[U, F: BaseException](
        self,
        mapper: Callable[[V], Result[U, F] | Awaitable[Result[U, F]]],  # noqa: ARG002
    ) -> Err[U, E]:
        return Err(self.value)

    def some_or_none(self) -> NothingType:
        """Convert to Option, discarding the error."""
        from klaw_either.option import Nothing

        return Nothing

    def as_nullable(self) -> Err[Any, E]:
        return Err(self.value)


type Result[V, E: BaseException] = Ok[V, E] | Err[V, E]


def ok[V](value: V) -> Ok[V, Any]:
    """Create an Ok holding ``value``."""
    return Ok(value)


def err[E: BaseException](error: E) -> Err[Any, E]:
    """Create an Err holding ``error``."""
    return Err(error)


def error(message: str) -> Err[Any, EitherError]:
    """Create an Err holding a generic :class:`EitherError` built from ``message``."""
    return Err(EitherError(message))


def is_instance(value: object) -> TypeIs[Ok[Any, Any] | Err[Any, Any]]:
    """Return True if ``value`` is an Ok or an Err."""
    match value:
        case Ok() | Err():
            return True
        case _:
            return False


def transpose[V, E: BaseException](result: Result[Some[V] | NothingType, E]) -> Some[Result[V, E]] | NothingType:
    """Turn a Result of an Option into an Option of a Result.

    ``Ok(Some(v))`` becomes ``Some(Ok(v))``, ``Ok(Nothing)`` becomes
    ``Nothing`` and ``Err(e)`` becomes ``Some(Err(e))`` so the failure is
    kept rather than dropped.
    """
    from klaw_either.option import Some

    return result.match(
        lambda option: option.map(Ok),
        lambda exc: Some(Err(exc)),
    )
