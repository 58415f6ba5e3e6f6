"""Decorators: @safe, @do and their async variants."""

from klaw_either.decorators.do import do, do_async
from klaw_either.decorators.safe import safe, safe_async

__all__ = [
    'do',
    'do_async',
    'safe',
    'safe_async',
]
