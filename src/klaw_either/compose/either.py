"""Curried Either combinators: each factory returns a function over an Either."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_either.either import Either

__all__ = [
    'is_left',
    'is_right',
    'left_or',
    'map_left',
    'map_right',
    'match',
    'right_or',
    'tap_left',
    'tap_right',
]


def is_left() -> Callable[[Either[Any, Any]], bool]:
    return lambda either: either.is_left()


def is_right() -> Callable[[Either[Any, Any]], bool]:
    return lambda either: either.is_right()


def left_or[L, R](fallback: L | Callable[[R], L]) -> Callable[[Either[L, R]], L]:
    return lambda either: either.left_or(fallback)


def right_or[L, R](fallback: R | Callable[[L], R]) -> Callable[[Either[L, R]], R]:
    return lambda either: either.right_or(fallback)


def map_left[L, R, V](mapper: Callable[[L], V]) -> Callable[[Either[L, R]], Either[V, R]]:
    return lambda either: either.map_left(mapper)


def map_right[L, R, V](mapper: Callable[[R], V]) -> Callable[[Either[L, R]], Either[L, V]]:
    return lambda either: either.map_right(mapper)


def tap_left[L, R](callback: Callable[[L], Any]) -> Callable[[Either[L, R]], Either[L, R]]:
    return lambda either: either.tap_left(callback)


def tap_right[L, R](callback: Callable[[R], Any]) -> Callable[[Either[L, R]], Either[L, R]]:
    return lambda either: either.tap_right(callback)


def match[L, R, T](on_left: Callable[[L], T], on_right: Callable[[R], T]) -> Callable[[Either[L, R]], T]:
    """Curried :meth:`~klaw_either.Left.match`."""
    return lambda either: either.match(on_left, on_right)
