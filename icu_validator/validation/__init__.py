"""Validation framework for ICU messages.

Validators check a single message or a nested mapping of messages; the
service loads JSON files and directories and dispatches sources by shape.
"""

from icu_validator.validation.options import ParseOptions, ValidationOptions
from icu_validator.validation.results import (
    ErrorDetail,
    ErrorLocation,
    FileValidationResult,
    ObjectValidationResult,
    StringValidationResult,
)
from icu_validator.validation.service import ValidationService
from icu_validator.validation.validators import MessageValidator, TreeValidator

__all__ = [
    "ErrorDetail",
    "ErrorLocation",
    "FileValidationResult",
    "MessageValidator",
    "ObjectValidationResult",
    "ParseOptions",
    "StringValidationResult",
    "TreeValidator",
    "ValidationOptions",
    "ValidationService",
]
