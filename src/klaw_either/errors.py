"""Fault types raised or produced by klaw-either."""

from __future__ import annotations

from typing import Literal

__all__ = ['EitherError', 'WrongSideError']


class EitherError(Exception):
    """Base class for all klaw-either faults.

    Carries a human-readable ``message`` and a classification ``name``
    (the concrete class name). Subclass it for domain-specific failure
    kinds that travel inside ``Err``.
    """

    def __init__(self, message: str = '') -> None:
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        """Classification name of the fault."""
        return type(self).__name__


class WrongSideError(EitherError):
    """Raised when unwrapping the side an Either does not hold.

    Only ``get_left_or_raise()`` / ``get_right_or_raise()`` raise this. It
    signals a programmer error, usually in tests.
    """

    def __init__(self, side: Literal['left', 'right']) -> None:
        self.side = side
        super().__init__(f'Attempted to unwrap a missing {side} value')
