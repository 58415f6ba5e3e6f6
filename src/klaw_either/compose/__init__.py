"""Composition utilities: pipe() and curried combinators.

Submodules ``either``, ``result`` and ``option`` hold the curried
factories; import them as namespaces:

    from klaw_either.compose import option as O, pipe, result as R
"""

from klaw_either.compose import either, option, result
from klaw_either.compose.pipe import pipe

__all__ = [
    'either',
    'option',
    'pipe',
    'result',
]
