"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, already wrapped in Err.
"""
from pathlib import Path

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def _parsing_error(
    code: ErrorCode,
    message: str,
    category: str,
    value: str,
    part_of_speech: str | None,
    origin: str,
) -> Err[AppError]:
    # "category" and "input" are always present
    meta = {"category": category, "input": value}
    if part_of_speech is not None:
        meta["part_of_speech"] = part_of_speech
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=meta,
    ))


def invalid_code(
    category: str,
    value: str,
    *,
    part_of_speech: str | None = None,
    origin: str = "",
) -> Err[AppError]:
    """A parsing-code field that matches nothing in its category's alphabet."""
    prefix = f"{part_of_speech}: " if part_of_speech else ""
    return _parsing_error(
        ErrorCode.E2030_INVALID_PARSING_CODE,
        f"{prefix}Invalid {category} - '{value}'",
        category,
        value,
        part_of_speech,
        origin,
    )


def missing_code(
    category: str,
    *,
    part_of_speech: str | None = None,
    origin: str = "",
) -> Err[AppError]:
    """A mandatory parsing-code field (or its whole segment) is absent."""
    prefix = f"{part_of_speech}: " if part_of_speech else ""
    return _parsing_error(
        ErrorCode.E2031_MISSING_PARSING_FIELD,
        f"{prefix}{category} is required",
        category,
        "",
        part_of_speech,
        origin,
    )


# =============================================================================
# Resource Errors (E6xxx)
# =============================================================================

def file_not_found(path: Path | str, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E6001_FILE_NOT_FOUND,
        message=f"File not found: {path}",
        context=ErrorContext(origin=origin),
        metadata={"path": str(path)},
    ))


def file_read_error(
    path: Path | str, cause: Exception, origin: str = ""
) -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E6002_FILE_READ_ERROR,
        message=f"Could not read {path}: {cause}",
        context=ErrorContext(origin=origin),
        metadata={"path": str(path)},
        cause=cause,
    ))

