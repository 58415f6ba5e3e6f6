"""Library configuration: EitherConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_either._logging import configure_logging

__all__ = [
    'EitherConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class EitherConfig:
    """Configuration for klaw-either.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs (True) or colored console output (False).
        trace_faults: Log faults captured or re-raised by guarded execution
            and sequencing blocks at DEBUG level.
    """

    log_level: str | None = None
    json_logs: bool = True
    trace_faults: bool = False


# Process configuration (set by init() or built lazily from the environment)
_config: EitherConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment, warning on unknown values."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _detect_config() -> EitherConfig:
    """Build a configuration from environment variables.

    Reads:
    1. KLAW_EITHER_LOG_LEVEL (e.g. "DEBUG"; unset = leave logging alone)
    2. KLAW_EITHER_LOG_JSON ("1"/"0", default on)
    3. KLAW_EITHER_TRACE_FAULTS ("1"/"0", default off)
    """
    level = os.environ.get('KLAW_EITHER_LOG_LEVEL', '').strip().upper() or None
    return EitherConfig(
        log_level=level,
        json_logs=_env_flag('KLAW_EITHER_LOG_JSON', default=True),
        trace_faults=_env_flag('KLAW_EITHER_TRACE_FAULTS', default=False),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    trace_faults: bool | None = None,
) -> EitherConfig:
    """Initialize klaw-either with the given configuration.

    Arguments left as None fall back to the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from environment.
        json_logs: JSON (True) or console (False) log output.
        trace_faults: Log captured and re-raised faults at DEBUG level.

    Returns:
        The EitherConfig that was set.

    Example:
        ```python
        from klaw_either import init

        init(log_level='DEBUG', trace_faults=True)
        ```
    """
    global _config  # noqa: PLW0603

    detected = _detect_config()
    _config = EitherConfig(
        log_level=log_level.upper() if log_level is not None else detected.log_level,
        json_logs=detected.json_logs if json_logs is None else json_logs,
        trace_faults=detected.trace_faults if trace_faults is None else trace_faults,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> EitherConfig:
    """Get the current configuration, reading the environment on first use.

    A ``KLAW_EITHER_LOG_LEVEL`` found on that first read configures logging
    the same way ``init(log_level=...)`` does.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _detect_config()
        if _config.log_level is not None:
            configure_logging(_config.log_level, json_output=_config.json_logs)
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
