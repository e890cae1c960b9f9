"""Monadic Error Handling System

Key components:
- Result[T, E]: ``Ok(value)`` or ``Err(error)``
- AppError: error type with code, message, context and metadata
- ErrorCode: error code taxonomy
- Builder functions: ready-made ``Err`` values per failure kind

Usage:
    from core.errors import Ok, Err

    match parse("V-AIA-3S"):
        case Ok(parsing):
            print(parsing.describe())
        case Err(error):
            log.warning(error.message, **error.metadata)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    collect_results,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    required_field,
    invalid_code,
    missing_code,
    # Resource (E6xxx)
    file_not_found,
    file_read_error,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "collect_results",
    # Validation (E2xxx)
    "validation_error",
    "required_field",
    "invalid_code",
    "missing_code",
    # Resource (E6xxx)
    "file_not_found",
    "file_read_error",
]
