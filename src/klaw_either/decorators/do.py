"""@do and @do_async decorators: a function body as a sequencing block."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from klaw_either.blocks import doing, doing_async
from klaw_either.result import Result

__all__ = ['do', 'do_async']


def do(
    func: Callable[..., Any] | None = None,
    *,
    catchall: bool = True,
) -> Any:
    """Decorator turning a function whose first parameter is ``bind`` into a :func:`doing` block.

    Callers omit ``bind``; the decorated function returns a Result.

    Args:
        func: The decorated function when applied bare.
        catchall: Passed to :func:`doing`.

    Example:
        ```python
        @do
        def workspace_name(bind, user_id: int) -> str:
            user = bind(get_user(user_id))
            return bind(get_workspace(user.workspace_id)).name

        workspace_name(1)  # Ok('My Workspace') or the first Err
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return doing(lambda bind: wrapped(bind, *args, **kwargs), catchall)

    if func is not None:
        return wrapper(func)
    return wrapper


def do_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    catchall: bool = True,
) -> Any:
    """Async :func:`do`, built on :func:`doing_async`.

    Example:
        ```python
        @do_async
        async def profile_name(bind, user_id: int) -> str:
            user = await bind(fetch_user(user_id))
            return (await bind(fetch_profile(user.id))).name
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return await doing_async(lambda bind: wrapped(bind, *args, **kwargs), catchall)

    if func is not None:
        return wrapper(func)
    return wrapper
