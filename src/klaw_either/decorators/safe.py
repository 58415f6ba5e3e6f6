"""@safe and @safe_async decorators: guarded execution on every call."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_either.result import Result
from klaw_either.try_ import try_catching, try_catching_async

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] = (),
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (),
) -> Any:
    """Decorator running each call under :func:`~klaw_either.try_catching`.

    Bare ``@safe`` captures every ``Exception`` like :func:`~klaw_either.trying`;
    ``@safe(exceptions=(...))`` captures only those classes.

    Args:
        func: The decorated function when applied bare.
        exceptions: Exception classes to capture. Empty (the default)
            captures every ``Exception``; anything unlisted propagates.

    Returns:
        The decorated function, now returning ``Ok(value)`` or ``Err(exc)``.

    Example:
        ```python
        @safe(exceptions=(KeyError,))
        def setting(name: str) -> str:
            return SETTINGS[name]

        setting('region')   # Ok('eu-west-1')
        setting('missing')  # Err(KeyError('missing'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        return try_catching(exceptions, wrapped, *args, **kwargs)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] = (),
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] = (),
) -> Any:
    """Async :func:`safe`, built on :func:`~klaw_either.try_catching_async`.

    Example:
        ```python
        @safe_async(exceptions=(TimeoutError,))
        async def load_manifest(path: str) -> dict:
            return await read_json(path)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        return await try_catching_async(exceptions, wrapped, *args, **kwargs)

    if func is not None:
        return wrapper(func)
    return wrapper
