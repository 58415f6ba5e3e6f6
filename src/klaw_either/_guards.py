"""Helpers for fallbacks that may be plain values, callables or awaitables."""

from __future__ import annotations

import inspect
from typing import Any

__all__ = ['discard', 'resolve', 'resolve_async']


def resolve(fallback: Any, *args: Any) -> Any:
    """Call ``fallback`` with ``args`` if it is callable, else return it as-is."""
    if callable(fallback):
        return fallback(*args)
    return fallback


async def resolve_async(fallback: Any, *args: Any) -> Any:
    """Like :func:`resolve`, awaiting the outcome when it is awaitable."""
    value = resolve(fallback, *args)
    if inspect.isawaitable(value):
        return await value
    return value


def discard(fallback: Any) -> None:
    """Close an unused coroutine fallback so it never warns about not being awaited."""
    if inspect.iscoroutine(fallback):
        fallback.close()
