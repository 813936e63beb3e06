"""Core types: Result, Success, Failure, CaughtException."""

from catching.types.caught import CaughtException
from catching.types.result import (
    Failure,
    Result,
    ResultKind,
    Success,
    failure,
    run_catching,
    success,
)

__all__ = [
    'CaughtException',
    'Failure',
    'Result',
    'ResultKind',
    'Success',
    'failure',
    'run_catching',
    'success',
]
