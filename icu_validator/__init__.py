"""Validate strings, objects, JSON files and directories against ICU MessageFormat."""

from icu_validator.api import (
    validate,
    validate_directory,
    validate_directory_async,
    validate_file,
    validate_file_async,
)
from icu_validator.exceptions import (
    FileReadError,
    ICUValidatorError,
    InvalidInputKindError,
    JsonParseError,
    UnsupportedFileTypeError,
)
from icu_validator.validation import (
    ErrorDetail,
    ErrorLocation,
    FileValidationResult,
    ObjectValidationResult,
    ParseOptions,
    StringValidationResult,
    ValidationOptions,
)

__all__ = [
    "ErrorDetail",
    "ErrorLocation",
    "FileReadError",
    "FileValidationResult",
    "ICUValidatorError",
    "InvalidInputKindError",
    "JsonParseError",
    "ObjectValidationResult",
    "ParseOptions",
    "StringValidationResult",
    "UnsupportedFileTypeError",
    "ValidationOptions",
    "validate",
    "validate_directory",
    "validate_directory_async",
    "validate_file",
    "validate_file_async",
]
