"""Option[T]: Some holding a present value, or Nothing.

Option specializes Either: the left slot is a present value, the right slot
is the fixed absent marker. ``from_nullable`` is the bridge from plain
Python values: only ``None`` is absent, falsy values such as ``0`` or ``''``
are present.

Example:
    ```python
    from klaw_either import Nothing, from_nullable

    from_nullable(2).map(lambda x: x * 10)    # Some(20)
    from_nullable(None).map(lambda x: x * 10) # Nothing
    from_nullable(None).value_or(7)           # 7
    Nothing.ok_or(KeyError('missing'))        # Err(KeyError('missing'))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeIs

from klaw_either._guards import discard, resolve, resolve_async
from klaw_either.either import Left, Right
from klaw_either.errors import EitherError

if TYPE_CHECKING:
    from klaw_either.result import Err, Ok, Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'from_nullable',
    'is_instance',
    'none',
    'some',
    'transpose',
]


class Some[T](Left[T, None], frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(84)
        >>> Some(0).is_some()
        True
    """

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def value_or(self, fallback: T | Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    async def value_or_async(self, fallback: T | Awaitable[T] | Callable[[], T | Awaitable[T]]) -> T:
        discard(fallback)
        return self.value

    def map[U](self, mapper: Callable[[T], U]) -> Some[U]:
        """Return a new Some holding ``mapper(value)``."""
        return Some(mapper(self.value))

    async def map_async[U](self, mapper: Callable[[T], U | Awaitable[U]]) -> Some[U]:
        return Some(await resolve_async(mapper, self.value))

    def and_then[U](self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that may produce nothing.

        Args:
            mapper: Function taking the value and returning an Option.

        Returns:
            The Option produced by ``mapper``.
        """
        return mapper(self.value)

    async def and_then_async[U](self, mapper: Callable[[T], Option[U] | Awaitable[Option[U]]]) -> Option[U]:
        return await resolve_async(mapper, self.value)

    def ok_or[E: BaseException](self, failure: E | Callable[[], E]) -> Ok[T, E]:  # noqa: ARG002
        """Convert to ``Ok(value)``; the failure is not produced."""
        from klaw_either.result import Ok

        return Ok(self.value)

    async def ok_or_async[E: BaseException](self, failure: E | Awaitable[E] | Callable[[], E | Awaitable[E]]) -> Ok[T, E]:
        from klaw_either.result import Ok

        discard(failure)
        return Ok(self.value)

    def ok_or_error(self, message: str | Callable[[], str]) -> Ok[T, EitherError]:  # noqa: ARG002
        """Convert to ``Ok(value)``; the message is not produced."""
        from klaw_either.result import Ok

        return Ok(self.value)

    async def ok_or_error_async(
        self,
        message: str | Awaitable[str] | Callable[[], str | Awaitable[str]],
    ) -> Ok[T, EitherError]:
        from klaw_either.result import Ok

        discard(message)
        return Ok(self.value)


class NothingType(Right[Any, None], frozen=True, gc=False):
    """Absent variant of Option.

    Carries no information; its right payload is always None. Use the
    ``Nothing`` singleton or :func:`none` rather than instantiating it.
    """

    value: None = None

    def __post_init__(self) -> None:
        if self.value is not None:
            msg = f'Nothing carries no payload, got {type(self.value).__name__}'
            raise TypeError(msg)

    def is_some(self) -> TypeIs[Some[Any]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def value_or[T](self, fallback: T | Callable[[], T]) -> T:
        """Return the fallback, calling it with no arguments if callable.

        Args:
            fallback: A plain value or a zero-argument producer.

        Returns:
            The fallback value.
        """
        return resolve(fallback)

    async def value_or_async[T](self, fallback: T | Awaitable[T] | Callable[[], T | Awaitable[T]]) -> T:
        """Async :meth:`value_or`; awaits the fallback when it is pending."""
        return await resolve_async(fallback)

    def map_right[V](self, mapper: Callable[[None], V]) -> Right[Any, V]:
        """Map the absent marker; leaves the Option family since Nothing holds no payload."""
        return Right(mapper(None))

    async def map_right_async[V](self, mapper: Callable[[None], V | Awaitable[V]]) -> Right[Any, V]:
        return Right(await resolve_async(mapper, None))

    def map[U](self, mapper: Callable[[Any], U]) -> NothingType:  # noqa: ARG002
        return Nothing

    async def map_async[U](self, mapper: Callable[[Any], U | Awaitable[U]]) -> NothingType:  # noqa: ARG002
        return Nothing

    def and_then[U](self, mapper: Callable[[Any], Option[U]]) -> NothingType:  # noqa: ARG002
        """Short-circuit: return Nothing; ``mapper`` is never called."""
        return Nothing

    async def and_then_async[U](
        self,
        mapper: Callable[[Any], Option[U] | Awaitable[Option[U]]],  # noqa: ARG002
    ) -> NothingType:
        return Nothing

    def ok_or[E: BaseException](self, failure: E | Callable[[], E]) -> Err[Any, E]:
        """Convert to ``Err(failure)``.

        Args:
            failure: An exception instance, or a zero-argument factory (an
                exception class works) producing one.

        Returns:
            An Err holding the supplied or produced exception.
        """
        from klaw_either.result import Err

        return Err(resolve(failure))

    async def ok_or_async[E: BaseException](self, failure: E | Awaitable[E] | Callable[[], E | Awaitable[E]]) -> Err[Any, E]:
        from klaw_either.result import Err

        return Err(await resolve_async(failure))

    def ok_or_error(self, message: str | Callable[[], str]) -> Err[Any, EitherError]:
        """Convert to ``Err(EitherError(message))``; ``message`` may be a producer."""
        from klaw_either.result import Err

        return Err(EitherError(resolve(message)))

    async def ok_or_error_async(
        self,
        message: str | Awaitable[str] | Callable[[], str | Awaitable[str]],
    ) -> Err[Any, EitherError]:
        from klaw_either.result import Err

        return Err(EitherError(await resolve_async(message)))

    def __str__(self) -> str:
        return 'Nothing'

    def __repr__(self) -> str:
        return 'Nothing'


Nothing = NothingType()

type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Create a Some holding ``value``."""
    return Some(value)


def none() -> NothingType:
    """Return the absent Option."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Create an Option from a possibly-None value.

    Only ``None`` is absent; falsy values such as ``0``, ``''`` or ``[]`` are
    present.

    Examples:
        >>> from_nullable(None)
        Nothing
        >>> from_nullable(0)
        Some(0)
    """
    if value is None:
        return Nothing
    return Some(value)


def is_instance(value: object) -> TypeIs[Some[Any] | NothingType]:
    """Return True if ``value`` is a Some or Nothing."""
    match value:
        case Some() | NothingType():
            return True
        case _:
            return False


def transpose[T, E: BaseException](option: Option[Result[T, E]]) -> Result[Option[T], E]:
    """Turn an Option of a Result into a Result of an Option.

    ``Some(Ok(v))`` becomes ``Ok(Some(v))``, ``Some(Err(e))`` becomes
    ``Err(e)`` and ``Nothing`` becomes ``Ok(Nothing)``.
    """
    from klaw_either.result import Ok

    return option.match(
        lambda result: result.map(Some),
        lambda _: Ok(Nothing),
    )
