"""Structured logging for klaw-either fault tracing.

The containers never log. ``trying``/``try_catching`` and the sequencing
blocks report faults through :func:`log_fault`, which emits a DEBUG event
on a structlog logger when fault tracing is enabled. structlog is only
configured when :func:`configure_logging` is called (by ``init(log_level=...)``
or by the first ``get_config()`` when ``KLAW_EITHER_LOG_LEVEL`` is set);
otherwise events go wherever the host application's structlog setup
sends them.

Events:
    fault_captured: an exception was turned into an Err.
    fault_reraised: an exception did not match the catch list and propagates.
    do_short_circuit: a failing ``bind`` ended a sequencing block.

Fault hooks receive a copy of every event dict that passes through the
configured processor chain, e.g. to forward faults to an error tracker.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'FaultHook',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'log_fault',
    'remove_log_hook',
]

type FaultHook = Callable[[dict[str, Any]], None]

_hooks: list[FaultHook] = []


def add_log_hook(hook: FaultHook) -> None:
    """Register ``hook`` to receive a copy of each logged event dict."""
    _hooks.append(hook)


def remove_log_hook(hook: FaultHook) -> None:
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()


def _dispatch_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor handing each event to the registered hooks."""
    for hook in tuple(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: S110
            pass  # hooks are observers; they never break the caller
    return event_dict


def _pre_chain() -> list[Any]:
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _dispatch_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Root logging level name ("DEBUG", "INFO", ...). Unknown names
            fall back to INFO.
        json_output: Render JSON lines when True, console output otherwise.
    """
    import structlog

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    import structlog

    return structlog.get_logger(name)


def log_fault(source: str, event: str, fault: BaseException, **context: Any) -> None:
    """Emit a DEBUG fault event.

    Args:
        source: Logger name, usually the emitting module's ``__name__``.
        event: Event name (``fault_captured``, ``fault_reraised``,
            ``do_short_circuit``).
        fault: The exception being reported.
        **context: Extra key/value pairs for the event.
    """
    get_logger(source).debug(event, fault=type(fault).__name__, message=str(fault), **context)
