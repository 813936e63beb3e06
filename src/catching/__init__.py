"""catching: a Result type for Python 3.13+ that captures exceptions with their traces.

Flat imports (preferred):
    from catching import Result, Success, Failure, CaughtException
    from catching import success, failure, run_catching, catching

Submodule imports (for organization):
    from catching.types import Result, CaughtException
    from catching.decorators import catching
    from catching.errors import UnwrapFailedError

Example:
    ```python
    from catching import run_catching

    port = (
        run_catching(lambda: int(raw_port))
        .map(lambda p: p + 1)
        .on_failure(lambda e: print(e.describe()))
        .get_or_default(8080)
    )
    ```
"""

# Configuration and logging
from catching._config import CatchingConfig, get_config, init
from catching._logging import configure_logging, get_logger

# Decorators
from catching.decorators import catching

# Errors
from catching.errors import CatchingError, EmptyFailureError, UnwrapFailedError

# Types
from catching.types import (
    CaughtException,
    Failure,
    Result,
    ResultKind,
    Success,
    failure,
    run_catching,
    success,
)

__all__ = [
    'CatchingConfig',
    'CatchingError',
    'CaughtException',
    'EmptyFailureError',
    'Failure',
    'Result',
    'ResultKind',
    'Success',
    'UnwrapFailedError',
    'catching',
    'configure_logging',
    'failure',
    'get_config',
    'get_logger',
    'init',
    'run_catching',
    'success',
]
