"""Errors raised for misuse or environment failures.

Grammar violations in a message are not errors at this level; they are
reported through StringValidationResult.
"""


class ICUValidatorError(Exception):
    """Base class for all icu-validator errors."""


class InvalidInputKindError(ICUValidatorError, TypeError):
    """A value that is neither a string nor a mapping reached the tree walker."""

    def __init__(self, path: str | None = None):
        self.path = path
        message = "Translation source must either be string or an object"
        if path:
            message = f"{message} (found at '{path}')"
        super().__init__(message)


class UnsupportedFileTypeError(ICUValidatorError, ValueError):
    """Only .json files can be validated."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Only JSON file can be validated: {path}")


class FileReadError(ICUValidatorError):
    """Reading a file or listing a directory failed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Unable to read {path}: {reason}")


class JsonParseError(ICUValidatorError, ValueError):
    """File content is not valid JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Invalid JSON in {path}: {reason}")
