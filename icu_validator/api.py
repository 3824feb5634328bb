"""Public entry points.

Validate if a data source conforms to ICU standard. The source can be
either:

1. a text
2. an object of keys and texts
3. a JSON file containing keys and ICU texts
4. a directory containing JSON files
"""

from typing import Any

from icu_validator.config import get_settings
from icu_validator.report.printer import (
    print_directory_validation,
    print_file_validation,
    print_validation,
)
from icu_validator.validation.options import ValidationOptions
from icu_validator.validation.results import FileValidationResult
from icu_validator.validation.service import ValidationOutput, ValidationService


def default_options() -> ValidationOptions:
    """Build options from the environment (ICU_VALIDATOR_* and ICU_PARSER_*)."""
    settings = get_settings()
    return ValidationOptions(
        pretty_print=settings.validation.pretty_print,
        verbose=settings.validation.verbose,
        ignore_trans_tag=settings.validation.ignore_trans_tag,
        parse_options=settings.parser.to_parse_options(),
    )


def _service(options: ValidationOptions) -> ValidationService:
    return ValidationService(options.parse_options, options.ignore_trans_tag)


def validate(source: Any, options: ValidationOptions | None = None) -> ValidationOutput:
    """Validate a single ICU string, an object, a JSON file or a directory.

    Args:
        source: ICU string, mapping or list of texts, JSON file path or
            directory path
        options: Output and validation rules; pretty_print prints the
            result before it is returned

    Returns:
        StringValidationResult, ObjectValidationResult, FileValidationResult
        or a list of FileValidationResult, depending on the source
    """
    if options is None:
        options = default_options()
    result = _service(options).validate(source)
    if options.pretty_print:
        print_validation(source, result, options.verbose)
    return result


def validate_file(
    file_path: str, options: ValidationOptions | None = None
) -> FileValidationResult:
    """Check if all strings in a JSON file conform to ICU standard."""
    if options is None:
        options = default_options()
    result = _service(options).validate_json_file(file_path)
    if options.pretty_print:
        print_file_validation(result, options.verbose)
    return result


def validate_directory(
    directory_path: str, options: ValidationOptions | None = None
) -> list[FileValidationResult]:
    """Check if all strings of all JSON files in a directory conform to ICU standard."""
    if options is None:
        options = default_options()
    results = _service(options).validate_directory(directory_path)
    if options.pretty_print:
        print_directory_validation(results, options.verbose)
    return results


async def validate_file_async(
    file_path: str, options: ValidationOptions | None = None
) -> FileValidationResult:
    if options is None:
        options = default_options()
    result = await _service(options).validate_json_file_async(file_path)
    if options.pretty_print:
        print_file_validation(result, options.verbose)
    return result


async def validate_directory_async(
    directory_path: str, options: ValidationOptions | None = None
) -> list[FileValidationResult]:
    if options is None:
        options = default_options()
    results = await _service(options).validate_directory_async(directory_path)
    if options.pretty_print:
        print_directory_validation(results, options.verbose)
    return results
