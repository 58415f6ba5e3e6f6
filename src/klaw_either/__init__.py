"""klaw-either: Either, Result and Option types for Python 3.13+.

Value-or-alternative containers with sync and async combinators, guarded
execution that turns exceptions into Err, and sequencing blocks that stop at
the first Err.

Flat imports (preferred):
    from klaw_either import Ok, Err, Some, Nothing, doing, trying

Submodule imports (for organization):
    from klaw_either.result import Ok, Err, Result
    from klaw_either.option import Some, Nothing, Option
    from klaw_either.compose import result as R, option as O, pipe
"""

# Configuration and logging
from klaw_either._config import EitherConfig, get_config, init

# Decorators
from klaw_either.decorators import do, do_async, safe, safe_async

# Sequencing blocks
from klaw_either.blocks import doing, doing_async

# Types
from klaw_either.either import Either, Left, Right, left, right
from klaw_either.errors import EitherError, WrongSideError
from klaw_either.option import Nothing, NothingType, Option, Some, from_nullable, none, some
from klaw_either.result import Err, Ok, Result, err, error, ok

# Guarded execution
from klaw_either.try_ import try_catching, try_catching_async, trying, trying_async

__all__ = [
    # Types
    'Either',
    # Configuration
    'EitherConfig',
    # Errors
    'EitherError',
    'Err',
    'Left',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Right',
    'Some',
    'WrongSideError',
    # Decorators
    'do',
    'do_async',
    # Sequencing blocks
    'doing',
    'doing_async',
    # Constructors
    'err',
    'error',
    'from_nullable',
    'get_config',
    'init',
    'left',
    'none',
    'ok',
    'right',
    'safe',
    'safe_async',
    'some',
    # Guarded execution
    'try_catching',
    'try_catching_async',
    'trying',
    'trying_async',
]
