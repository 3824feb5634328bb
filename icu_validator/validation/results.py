"""Validation result types.

This module defines structured result types for validation operations.
A string yields a StringValidationResult, a mapping yields an
ObjectValidationResult with the same keys, and a file yields a
FileValidationResult wrapping either of them.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from icu_validator.const import OBJECT_PATH_SEPARATOR


@dataclass(frozen=True)
class ErrorLocation:
    """Position of a parse error in the text handed to the parser.

    offset is 0-based, line and column are 1-based.
    """

    offset: int
    line: int
    column: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "ErrorLocation":
        offset = max(0, min(offset, len(text)))
        before = text[:offset]
        line = before.count("\n") + 1
        column = offset - (before.rfind("\n") + 1) + 1
        return cls(offset=offset, line=line, column=column)

    def to_dict(self) -> dict[str, int]:
        return {"offset": self.offset, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class ErrorDetail:
    error_message: str
    original_text: str
    location: ErrorLocation | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "errorMessage": self.error_message,
            "originalText": self.original_text,
            "location": self.location.to_dict() if self.location else None,
        }


@dataclass(frozen=True)
class StringValidationResult:
    """Immutable result of validating a single message.

    detail is set if and only if is_error is True.
    """

    is_error: bool
    detail: ErrorDetail | None = None

    def __post_init__(self):
        if self.is_error != (self.detail is not None):
            raise ValueError("detail must be provided exactly when is_error is True")

    @classmethod
    def valid(cls) -> "StringValidationResult":
        return cls(is_error=False)

    @classmethod
    def invalid(cls, detail: ErrorDetail) -> "StringValidationResult":
        return cls(is_error=True, detail=detail)

    @property
    def is_valid(self) -> bool:
        return not self.is_error

    def leaves(
        self, prefix: str = ""
    ) -> Iterator[tuple[str, "StringValidationResult"]]:
        yield prefix, self

    def to_dict(self) -> dict[str, Any]:
        if self.detail is None:
            return {"isError": False}
        return {"isError": True, "result": self.detail.to_dict()}


@dataclass(frozen=True)
class ObjectValidationResult:
    """Result tree mirroring the keys of a validated mapping."""

    entries: dict[str, Union[StringValidationResult, "ObjectValidationResult"]] = (
        field(default_factory=dict)
    )

    def __getitem__(self, key: str):
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def leaves(
        self, prefix: str = ""
    ) -> Iterator[tuple[str, StringValidationResult]]:
        """Walk every string result with its dotted object path.

        Args:
            prefix: Path of this node, empty for the root

        Yields:
            (path, result) pairs, e.g. ("menu.file.open", result)
        """
        for key, value in self.entries.items():
            path = f"{prefix}{OBJECT_PATH_SEPARATOR}{key}" if prefix else str(key)
            yield from value.leaves(path)

    @property
    def is_valid(self) -> bool:
        return all(leaf.is_valid for _, leaf in self.leaves())

    def errors(self) -> list[tuple[str, StringValidationResult]]:
        return [(path, leaf) for path, leaf in self.leaves() if leaf.is_error]

    def to_dict(self) -> dict[str, Any]:
        return {key: value.to_dict() for key, value in self.entries.items()}


ValidationTree = Union[StringValidationResult, ObjectValidationResult]


@dataclass(frozen=True)
class FileValidationResult:
    """Result of validating one JSON file.

    error holds the failure message when the file could not be read or
    loaded during a directory run; validation_result is None in that case.
    """

    file_name: str
    is_valid: bool
    validation_result: ValidationTree | None = None
    error: str | None = None

    @classmethod
    def from_tree(cls, file_name: str, tree: ValidationTree) -> "FileValidationResult":
        return cls(file_name=file_name, is_valid=tree.is_valid, validation_result=tree)

    @classmethod
    def from_error(cls, file_name: str, error: Exception) -> "FileValidationResult":
        return cls(file_name=file_name, is_valid=False, error=str(error))

    @property
    def failed(self) -> bool:
        return not self.is_valid

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"fileName": self.file_name, "isValid": self.is_valid}
        if self.validation_result is not None:
            payload["validationResult"] = self.validation_result.to_dict()
        if self.error is not None:
            payload["error"] = self.error
        return payload


def leaf_count(tree: ValidationTree) -> int:
    return sum(1 for _ in tree.leaves())
