"""Sequencing blocks: imperative chains of Results that stop at the first Err.

The block receives a ``bind`` function. ``bind(Ok(v))`` returns ``v``;
``bind(Err(e))`` unwinds the block immediately and the block's Result
becomes ``Err(e)``. A normal return becomes ``Ok(return_value)``.

Example:
    ```python
    from klaw_either import doing

    def workspace_name(user_id: int) -> Result[str, DatabaseError]:
        def block(bind):
            user = bind(get_user(user_id))
            workspace = bind(get_workspace(user.workspace_id))
            return workspace.name

        return doing(block)

    async def profile_name() -> Result[str, Exception]:
        async def block(bind):
            user = await bind(fetch_user())      # awaitable of a Result
            profile = await bind(fetch_profile(user.id))
            return profile.name

        return await doing_async(block)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn

from klaw_either._config import get_config
from klaw_either._logging import log_fault
from klaw_either.result import Err, Ok, Result
from klaw_either.try_ import try_catching, try_catching_async

__all__ = ['doing', 'doing_async']

type Bind = Callable[[Result[Any, Any]], Any]
type AsyncBind = Callable[[Any], Awaitable[Any]]


class _Propagate(BaseException):  # noqa: N818
    """Carries the Err payload from ``bind`` out to the enclosing block.

    Derives from BaseException so ``except Exception`` inside a block
    cannot swallow it. Never escapes :func:`doing` / :func:`doing_async`.
    """

    __slots__ = ('_error',)

    def __init__(self, error: BaseException) -> None:
        self._error = error
        super().__init__('propagating failure from bound result')

    @property
    def error(self) -> BaseException:
        """The failure being propagated."""
        return self._error


def _propagate(error: BaseException) -> NoReturn:
    raise _Propagate(error)


def _bind[T](result: Result[T, Any]) -> T:
    """Return the Ok value or unwind the block with the Err payload."""
    if not isinstance(result, Ok | Err):
        msg = f'bind() expects a Result, got {type(result).__name__}'
        raise TypeError(msg)
    return result.match(lambda value: value, _propagate)


async def _bind_async(value: Any) -> Any:
    """Resolve a pending value, then bind it if it is a Result.

    Awaitables of raw (non-Result) values are returned as-is once resolved.
    """
    if inspect.isawaitable(value):
        value = await value
    if isinstance(value, Ok | Err):
        return _bind(value)
    return value


def _unwrap(exc: BaseException) -> BaseException:
    """Map the propagation signal back to the failure it carries."""
    if isinstance(exc, _Propagate):
        if get_config().trace_faults:
            log_fault(__name__, 'do_short_circuit', exc.error)
        return exc.error
    return exc


def _catch(catchall: bool) -> tuple[type[BaseException], ...]:
    return (_Propagate, Exception) if catchall else (_Propagate,)


def doing[T](block: Callable[[Bind], T], catchall: bool = True) -> Result[T, Any]:
    """Run ``block`` with a ``bind`` function, stopping at the first Err.

    Args:
        block: Callable receiving ``bind``. Its return value becomes the Ok
            value.
        catchall: If True, any ``Exception`` raised in the block becomes an
            Err. If False, only failures passed to ``bind`` become an Err;
            other exceptions propagate to the caller.

    Returns:
        ``Ok(block_return)`` or ``Err(first_failure)``.

    Example:
        ```python
        doing(lambda bind: bind(Ok(1)) + bind(Ok(2)))   # Ok(3)
        doing(lambda bind: bind(Err(KeyError('k'))))    # Err(KeyError('k'))
        ```
    """
    return try_catching(_catch(catchall), block, _bind).map_err(_unwrap)


async def doing_async[T](block: Callable[[AsyncBind], Awaitable[T]], catchall: bool = True) -> Result[T, Any]:
    """Async :func:`doing`.

    ``bind`` is a coroutine function: ``await bind(x)`` accepts a Result, an
    awaitable of a Result, or an awaitable of a plain value. Binds run
    strictly in sequence.

    Args:
        block: Coroutine function receiving ``bind``.
        catchall: See :func:`doing`.

    Returns:
        ``Ok(block_return)`` or ``Err(first_failure)``.
    """
    result = await try_catching_async(_catch(catchall), block, _bind_async)
    return result.map_err(_unwrap)
