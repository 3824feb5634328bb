"""Error message formatting for user-friendly exception handling."""

from icu_validator.exceptions import (
    FileReadError,
    InvalidInputKindError,
    JsonParseError,
    UnsupportedFileTypeError,
)


def _format_invalid_input(error: InvalidInputKindError) -> str:
    if error.path:
        return (
            f"Unsupported value at '{error.path}'.\n"
            "Translation values must be strings, or nested objects and lists of strings."
        )
    return "Translation source must be a string or a nested object of strings."


ERROR_TYPES = {
    InvalidInputKindError: _format_invalid_input,
    UnsupportedFileTypeError: lambda e: f"{e}\nRename the file or point to a directory.",
    JsonParseError: lambda e: str(e),
    FileReadError: lambda e: str(e),
    FileNotFoundError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
