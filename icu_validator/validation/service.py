"""Validation service for strings, mappings, JSON files and directories.

This module provides a service layer that loads sources, runs the
validators and aggregates their results.
"""

import asyncio
import errno
import json
import os
import stat
from collections.abc import Mapping
from typing import Any

from icu_validator.const import JSON_SUFFIX
from icu_validator.exceptions import (
    FileReadError,
    InvalidInputKindError,
    JsonParseError,
    UnsupportedFileTypeError,
)
from icu_validator.utils.list_files import list_json_files
from icu_validator.utils.logging import get_logger
from icu_validator.validation.options import ParseOptions
from icu_validator.validation.results import (
    FileValidationResult,
    ObjectValidationResult,
    StringValidationResult,
    ValidationTree,
    leaf_count,
)
from icu_validator.validation.validators import MessageValidator, TreeValidator

logger = get_logger(__name__)

# Errors from loading a file that are recorded on that file during directory runs
PER_FILE_ERRORS = (FileReadError, JsonParseError, InvalidInputKindError)

# stat failures that just mean "this is not a path"
_NOT_A_PATH_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG}

ValidationOutput = (
    StringValidationResult
    | ObjectValidationResult
    | FileValidationResult
    | list[FileValidationResult]
)


def _ensure_json_path(file_path: str) -> None:
    if not str(file_path).endswith(JSON_SUFFIX):
        raise UnsupportedFileTypeError(str(file_path))


def _read_text(file_path: str) -> str:
    try:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(file_path), str(e)) from e


def _load_json(file_path: str, content: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise JsonParseError(str(file_path), str(e)) from e


def _list_directory(directory_path: str) -> list[str]:
    try:
        return list_json_files(directory_path)
    except OSError as e:
        raise FileReadError(str(directory_path), str(e)) from e


class ValidationService:
    """Orchestrates validation over every supported source shape.

    The service is stateless apart from its options, so a single instance
    can serve concurrent calls.
    """

    def __init__(
        self,
        parse_options: ParseOptions | None = None,
        ignore_trans_tag: bool = False,
    ):
        """Initialize service with parser options.

        Args:
            parse_options: Options forwarded to the ICU parser
            ignore_trans_tag: Rename numeric component tags before parsing
        """
        self.message_validator = MessageValidator(parse_options, ignore_trans_tag)
        self.tree_validator = TreeValidator(self.message_validator)

    def validate_string(self, text: str) -> StringValidationResult:
        return self.message_validator.validate(text)

    def validate_object(self, source: Any) -> ValidationTree:
        return self.tree_validator.validate(source)

    def _file_result(self, file_path: str, content: str) -> FileValidationResult:
        tree = self.tree_validator.validate(_load_json(file_path, content))
        result = FileValidationResult.from_tree(str(file_path), tree)
        logger.info(
            "Validated file",
            validator=self.tree_validator.name,
            file=result.file_name,
            strings=leaf_count(tree),
            valid=result.is_valid,
        )
        return result

    def validate_json_file(self, file_path: str) -> FileValidationResult:
        """Check if all strings in a JSON file conform to ICU standard.

        Args:
            file_path: Path of the JSON file

        Returns:
            FileValidationResult named after file_path as given

        Raises:
            UnsupportedFileTypeError: file_path does not end in .json
            FileReadError: The file could not be read
            JsonParseError: The content is not valid JSON
            InvalidInputKindError: A JSON value is neither string nor object
        """
        _ensure_json_path(file_path)
        return self._file_result(file_path, _read_text(file_path))

    async def validate_json_file_async(self, file_path: str) -> FileValidationResult:
        """Same as validate_json_file, reading the file off the event loop."""
        _ensure_json_path(file_path)
        content = await asyncio.to_thread(_read_text, file_path)
        return self._file_result(file_path, content)

    def validate_directory(self, directory_path: str) -> list[FileValidationResult]:
        """Validate every JSON file of a directory.

        A file that cannot be read or loaded is reported as an invalid
        FileValidationResult with its error; the other files are still
        validated.

        Args:
            directory_path: Directory containing locale JSON files

        Returns:
            One FileValidationResult per JSON file, sorted by name

        Raises:
            FileReadError: The directory could not be listed
        """
        logger.info("Validating directory", directory=directory_path)
        return [self._capture(path) for path in _list_directory(directory_path)]

    async def validate_directory_async(
        self, directory_path: str
    ) -> list[FileValidationResult]:
        """Same as validate_directory, reading all files concurrently."""
        logger.info("Validating directory", directory=directory_path)
        files = await asyncio.to_thread(_list_directory, directory_path)
        return list(
            await asyncio.gather(*(self._capture_async(path) for path in files))
        )

    def _capture(self, file_path: str) -> FileValidationResult:
        try:
            return self.validate_json_file(file_path)
        except PER_FILE_ERRORS as e:
            logger.warning("File could not be validated", file=file_path, error=str(e))
            return FileValidationResult.from_error(file_path, e)

    async def _capture_async(self, file_path: str) -> FileValidationResult:
        try:
            return await self.validate_json_file_async(file_path)
        except PER_FILE_ERRORS as e:
            logger.warning("File could not be validated", file=file_path, error=str(e))
            return FileValidationResult.from_error(file_path, e)

    def validate(self, source: Any) -> ValidationOutput:
        """Validate a source of any supported shape.

        A mapping or list is validated as an object. A string naming a file or a
        directory is validated as JSON file(s); any other string is
        validated as an ICU message.

        Args:
            source: Mapping, list, ICU message, JSON file path or directory path

        Returns:
            The result matching the source shape

        Raises:
            InvalidInputKindError: source is neither string, mapping nor list
        """
        if isinstance(source, (Mapping, list)):
            return self.validate_object(source)

        if not isinstance(source, str):
            raise InvalidInputKindError()

        mode = self._stat_mode(source)
        if mode is not None and stat.S_ISREG(mode):
            return self.validate_json_file(source)
        if mode is not None and stat.S_ISDIR(mode):
            return self.validate_directory(source)

        return self.validate_string(source)

    def _stat_mode(self, source: str) -> int | None:
        """Return the file mode of source, or None when it is not a path."""
        try:
            return os.stat(source).st_mode
        except ValueError:
            return None
        except OSError as e:
            if e.errno not in _NOT_A_PATH_ERRNOS:
                logger.warning(
                    "Path lookup failed, validating source as a message",
                    source=source,
                    error=str(e),
                )
            return None

    @staticmethod
    def has_errors(result: ValidationOutput) -> bool:
        """Check if any string or file failed validation.

        Args:
            result: Result of any validate_* method

        Returns:
            True if anything reported failure
        """
        if isinstance(result, list):
            return any(not r.is_valid for r in result)
        return not result.is_valid
