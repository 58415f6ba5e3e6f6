"""Guarded execution: run a block and turn raised exceptions into Err.

``trying`` and ``trying_async`` catch every ``Exception``; ``try_catching``
and ``try_catching_async`` only catch the listed exception classes and
re-raise anything else. ``BaseException`` subclasses outside ``Exception``
(``KeyboardInterrupt``, ``SystemExit``, ``asyncio.CancelledError``) are only
caught when listed explicitly.

Example:
    ```python
    from klaw_either import try_catching, trying

    trying(int, '42')                        # Ok(42)
    trying(int, 'x')                         # Err(ValueError(...))
    try_catching([KeyError], dict().pop, 1)  # Err(KeyError(1))
    try_catching([KeyError], int, 'x')       # raises ValueError
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from klaw_either._config import get_config
from klaw_either._logging import log_fault
from klaw_either.result import Err, Ok, Result

__all__ = ['try_catching', 'try_catching_async', 'trying', 'trying_async']

type ExceptionTypes = type[BaseException] | Iterable[type[BaseException]]


def _trace(event: str, exc: BaseException, block: Callable[..., Any]) -> None:
    """Log a captured or re-raised fault when fault tracing is enabled.

    Only ``Exception`` faults are traced. Control-flow signals such as the
    sequencing-block propagation are reported by the code that unwraps them.
    """
    if isinstance(exc, Exception) and get_config().trace_faults:
        log_fault(__name__, event, exc, block=getattr(block, '__qualname__', repr(block)))


def _normalize(exceptions: ExceptionTypes) -> tuple[type[BaseException], ...]:
    """Turn an exception class or iterable of classes into a tuple for ``except``."""
    catch = (exceptions,) if isinstance(exceptions, type) else tuple(exceptions)
    for kind in catch:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            msg = f'expected exception classes, got {kind!r}'
            raise TypeError(msg)
    return catch


def trying[T](block: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call ``block`` and wrap its outcome in a Result.

    Args:
        block: The callable to run.
        *args: Positional arguments for ``block``.
        **kwargs: Keyword arguments for ``block``.

    Returns:
        ``Ok(return_value)``, or ``Err(exc)`` for any raised ``Exception``.
    """
    try:
        value = block(*args, **kwargs)
    except Exception as exc:
        _trace('fault_captured', exc, block)
        return Err(exc)
    return Ok(value)


async def trying_async[T](block: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Async :func:`trying`: awaits ``block(*args, **kwargs)``."""
    try:
        value = await block(*args, **kwargs)
    except Exception as exc:
        _trace('fault_captured', exc, block)
        return Err(exc)
    return Ok(value)


def try_catching[T, E: BaseException](
    exceptions: ExceptionTypes,
    block: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> Result[T, E]:
    """Call ``block``, turning only the listed exceptions into Err.

    Args:
        exceptions: Exception class or classes to capture. An empty
            collection captures every ``Exception``, like :func:`trying`.
        block: The callable to run.
        *args: Positional arguments for ``block``.
        **kwargs: Keyword arguments for ``block``.

    Returns:
        ``Ok(return_value)``, or ``Err(exc)`` when ``exc`` is an instance
        of one of ``exceptions``.

    Raises:
        BaseException: Any exception not listed in ``exceptions``.
        TypeError: If ``exceptions`` contains something that is not an
            exception class.
    """
    catch = _normalize(exceptions)
    if not catch:
        return trying(block, *args, **kwargs)  # type: ignore[return-value]

    try:
        value = block(*args, **kwargs)
    except catch as exc:
        _trace('fault_captured', exc, block)
        return Err(exc)  # type: ignore[arg-type]
    except Exception as exc:
        _trace('fault_reraised', exc, block)
        raise
    return Ok(value)


async def try_catching_async[T, E: BaseException](
    exceptions: ExceptionTypes,
    block: Callable[..., Awaitable[T]],
    *args: Any,
    **kwargs: Any,
) -> Result[T, E]:
    """Async :func:`try_catching`: awaits ``block(*args, **kwargs)``."""
    catch = _normalize(exceptions)
    if not catch:
        return await trying_async(block, *args, **kwargs)  # type: ignore[return-value]

    try:
        value = await block(*args, **kwargs)
    except catch as exc:
        _trace('fault_captured', exc, block)
        return Err(exc)  # type: ignore[arg-type]
    except Exception as exc:
        _trace('fault_reraised', exc, block)
        raise
    return Ok(value)
