"""async-result: Result[T, E] with async-aware combinators for Python 3.13+.

Flat imports (preferred):
    from async_result import Result, Ok, Err, AsyncResult
    from async_result import catching, catching_async, safe, safe_async

Submodule imports (for organization):
    from async_result.result import Ok, Err, Result
    from async_result.combinators import map_result_async, flat_map_error
    from async_result.async_ import AsyncResult
"""

# Configuration
from async_result._config import ResultConfig, get_config, init

# Logging
from async_result._logging import configure_logging, get_logger

# Async
from async_result.async_ import AsyncResult

# Catching
from async_result.catching import catching, catching_async, safe, safe_async

# Free-standing combinators
from async_result.combinators import (
    flat_map,
    flat_map_async,
    flat_map_error,
    flat_map_error_async,
    map_error,
    map_error_async,
    map_result,
    map_result_async,
)

# Errors
from async_result.errors import UnwrapError

# Result types
from async_result.result import Err, Ok, Result

__all__ = [
    # Async
    'AsyncResult',
    # Result types
    'Err',
    'Ok',
    'Result',
    # Configuration
    'ResultConfig',
    # Errors
    'UnwrapError',
    # Catching
    'catching',
    'catching_async',
    # Logging
    'configure_logging',
    # Combinators
    'flat_map',
    'flat_map_async',
    'flat_map_error',
    'flat_map_error_async',
    'get_config',
    'get_logger',
    'init',
    'map_error',
    'map_error_async',
    'map_result',
    'map_result_async',
    'safe',
    'safe_async',
]
