"""Curried Result combinators for point-free composition.

Each factory takes the arguments of the matching Ok/Err method and returns
a function from a Result to that method's output.

Example:
    ```python
    from klaw_either.compose import result as R

    double = R.map(lambda x: x * 2)
    double(Ok(21))                    # Ok(42)
    list(map(R.value_or(0), results)) # success values, 0 for each Err
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from klaw_either.option import Option
from klaw_either.result import Result

__all__ = [
    'and_then',
    'and_then_async',
    'as_nullable',
    'is_err',
    'is_ok',
    'map',
    'map_async',
    'map_err',
    'map_err_async',
    'match',
    'some_or_none',
    'tap_err',
    'tap_ok',
    'value_or',
    'value_or_async',
]


def is_ok() -> Callable[[Result[Any, Any]], bool]:
    """Return a function checking whether a Result is Ok."""
    return lambda result: result.is_ok()


def is_err() -> Callable[[Result[Any, Any]], bool]:
    """Return a function checking whether a Result is Err."""
    return lambda result: result.is_err()


def value_or[V, E: BaseException](fallback: V | Callable[[E], V]) -> Callable[[Result[V, E]], V]:
    """Return a function extracting the Ok value or the fallback."""
    return lambda result: result.value_or(fallback)


def value_or_async[V, E: BaseException](
    fallback: V | Callable[[E], V | Awaitable[V]],
) -> Callable[[Result[V, E]], Coroutine[Any, Any, V]]:
    return lambda result: result.value_or_async(fallback)


def map[V, E: BaseException, U](mapper: Callable[[V], U]) -> Callable[[Result[V, E]], Result[U, E]]:  # noqa: A001
    """Return a function mapping the Ok value of a Result."""
    return lambda result: result.map(mapper)


def map_async[V, E: BaseException, U](
    mapper: Callable[[V], U | Awaitable[U]],
) -> Callable[[Result[V, E]], Coroutine[Any, Any, Result[U, E]]]:
    return lambda result: result.map_async(mapper)


def map_err[V, E: BaseException, F: BaseException](mapper: Callable[[E], F]) -> Callable[[Result[V, E]], Result[V, F]]:
    """Return a function mapping the Err payload of a Result."""
    return lambda result: result.map_err(mapper)


def map_err_async[V, E: BaseException, F: BaseException](
    mapper: Callable[[E], F | Awaitable[F]],
) -> Callable[[Result[V, E]], Coroutine[Any, Any, Result[V, F]]]:
    return lambda result: result.map_err_async(mapper)


def and_then[V, E: BaseException, U](mapper: Callable[[V], Result[U, E]]) -> Callable[[Result[V, E]], Result[U, E]]:
    """Return a function chaining ``mapper`` onto a Result."""
    return lambda result: result.and_then(mapper)


def and_then_async[V, E: BaseException, U](
    mapper: Callable[[V], Result[U, E] | Awaitable[Result[U, E]]],
) -> Callable[[Result[V, E]], Coroutine[Any, Any, Result[U, E]]]:
    return lambda result: result.and_then_async(mapper)


def some_or_none[V, E: BaseException]() -> Callable[[Result[V, E]], Option[V]]:
    return lambda result: result.some_or_none()


def as_nullable[V, E: BaseException]() -> Callable[[Result[V, E]], Result[Option[V], E]]:
    return lambda result: result.as_nullable()


def match[V, E: BaseException, T](on_ok: Callable[[V], T], on_err: Callable[[E], T]) -> Callable[[Result[V, E]], T]:
    return lambda result: result.match(on_ok, on_err)


def tap_ok[V, E: BaseException](callback: Callable[[V], Any]) -> Callable[[Result[V, E]], Result[V, E]]:
    return lambda result: result.tap_left(callback)


def tap_err[V, E: BaseException](callback: Callable[[E], Any]) -> Callable[[Result[V, E]], Result[V, E]]:
    return lambda result: result.tap_right(callback)
