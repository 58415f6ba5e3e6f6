"""pipe() for threading a value through unary functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

__all__ = ['pipe']


@overload
def pipe[T](value: T, /) -> T: ...
@overload
def pipe[T, T1](value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe[T, T1, T2](value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe[T, T1, T2, T3](
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe[T, T1, T2, T3, T4](
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe[T, T1, T2, T3, T4, T5](
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Apply ``fns`` to ``value`` left to right.

    Pairs with the curried factories in :mod:`klaw_either.compose.result`
    and :mod:`klaw_either.compose.option`, whose outputs are unary
    functions over containers. Short-circuiting is left to the containers
    themselves: ``map`` and ``and_then`` pass Err/Nothing through.

    Args:
        value: The initial value.
        *fns: Unary functions to apply in sequence.

    Returns:
        The output of the last function, or ``value`` if none were given.

    Example:
        ```python
        from klaw_either.compose import pipe, result as R

        pipe(Ok(5), R.map(lambda x: x + 1), R.and_then(check), R.value_or(0))
        ```
    """
    for fn in fns:
        value = fn(value)
    return value
