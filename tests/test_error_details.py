"""Tests for user-facing error messages."""

from icu_validator.error_details import get_error_human_message
from icu_validator.exceptions import (
    FileReadError,
    InvalidInputKindError,
    JsonParseError,
    UnsupportedFileTypeError,
)


def test_invalid_input_with_path():
    message = get_error_human_message(InvalidInputKindError("menu.count"))

    assert "menu.count" in message
    assert "nested objects and lists of strings" in message


def test_invalid_input_without_path():
    message = get_error_human_message(InvalidInputKindError())

    assert message == "Translation source must be a string or a nested object of strings."


def test_unsupported_file_type():
    message = get_error_human_message(UnsupportedFileTypeError("en.yaml"))

    assert message.startswith("Only JSON file can be validated: en.yaml")


def test_file_errors_use_their_message():
    assert get_error_human_message(JsonParseError("a.json", "Expecting value")) == (
        "Invalid JSON in a.json: Expecting value"
    )
    assert get_error_human_message(FileReadError("a.json", "No such file")) == (
        "Unable to read a.json: No such file"
    )


def test_permission_error():
    message = get_error_human_message(PermissionError("locked"))

    assert message.startswith("Permission denied: locked")


def test_unknown_error_falls_back_to_str():
    assert get_error_human_message(RuntimeError("boom")) == "boom"
