"""Curried Option combinators for point-free composition."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from klaw_either.errors import EitherError
from klaw_either.option import Option
from klaw_either.result import Result

__all__ = [
    'and_then',
    'and_then_async',
    'is_none',
    'is_some',
    'map',
    'map_async',
    'match',
    'ok_or',
    'ok_or_async',
    'ok_or_error',
    'ok_or_error_async',
    'value_or',
    'value_or_async',
]


def is_some() -> Callable[[Option[Any]], bool]:
    return lambda option: option.is_some()


def is_none() -> Callable[[Option[Any]], bool]:
    return lambda option: option.is_none()


def value_or[T](fallback: T | Callable[[], T]) -> Callable[[Option[T]], T]:
    """Return a function extracting the Some value or the fallback."""
    return lambda option: option.value_or(fallback)


def value_or_async[T](fallback: T | Callable[[], T | Awaitable[T]]) -> Callable[[Option[T]], Coroutine[Any, Any, T]]:
    return lambda option: option.value_or_async(fallback)


def map[T, U](mapper: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:  # noqa: A001
    """Return a function mapping the Some value of an Option."""
    return lambda option: option.map(mapper)


def map_async[T, U](mapper: Callable[[T], U | Awaitable[U]]) -> Callable[[Option[T]], Coroutine[Any, Any, Option[U]]]:
    return lambda option: option.map_async(mapper)


def and_then[T, U](mapper: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Return a function chaining ``mapper`` onto an Option."""
    return lambda option: option.and_then(mapper)


def and_then_async[T, U](
    mapper: Callable[[T], Option[U] | Awaitable[Option[U]]],
) -> Callable[[Option[T]], Coroutine[Any, Any, Option[U]]]:
    return lambda option: option.and_then_async(mapper)


def ok_or[T, E: BaseException](failure: E | Callable[[], E]) -> Callable[[Option[T]], Result[T, E]]:
    """Return a function converting an Option to a Result with ``failure`` on absence.

    Pass a factory (an exception class works) rather than an instance when
    the returned function is applied many times, so each Err gets its own
    exception.
    """
    return lambda option: option.ok_or(failure)


def ok_or_async[T, E: BaseException](
    failure: E | Callable[[], E | Awaitable[E]],
) -> Callable[[Option[T]], Coroutine[Any, Any, Result[T, E]]]:
    return lambda option: option.ok_or_async(failure)


def ok_or_error[T](message: str | Callable[[], str]) -> Callable[[Option[T]], Result[T, EitherError]]:
    return lambda option: option.ok_or_error(message)


def ok_or_error_async[T](
    message: str | Callable[[], str | Awaitable[str]],
) -> Callable[[Option[T]], Coroutine[Any, Any, Result[T, EitherError]]]:
    return lambda option: option.ok_or_error_async(message)


def match[T, U](on_some: Callable[[T], U], on_none: Callable[[None], U]) -> Callable[[Option[T]], U]:
    return lambda option: option.match(on_some, on_none)
