"""Console rendering of validation results.

Only invalid strings are printed for objects and files; valid files are
skipped unless verbose is set.
"""

import json
from typing import IO, Any

import click

from icu_validator.validation.results import (
    ErrorLocation,
    FileValidationResult,
    ObjectValidationResult,
    StringValidationResult,
)


def _location(location: ErrorLocation | None) -> str:
    return json.dumps(location.to_dict() if location else None)


def print_string_validation(
    text: str, result: StringValidationResult, file: IO[str] | None = None
) -> None:
    if not result.is_error:
        click.secho(f"Valid ICU string :- {text}", fg="green", file=file)
        return

    click.secho(f"Invalid ICU string :- {text}", bg="red", file=file)
    click.echo(f"Error :- {click.style(result.detail.error_message, fg='red')}", file=file)
    click.echo(f"Location :- {_location(result.detail.location)}", file=file)


def _print_leaf_error(
    path: str, result: StringValidationResult, file: IO[str] | None
) -> None:
    detail = result.detail
    click.secho(f"Invalid ICU string :- {detail.original_text}", bg="red", file=file)
    click.secho(f"Object path :- {path}", fg="magenta", file=file)
    click.echo(f"Error :- {click.style(detail.error_message, fg='red')}", file=file)
    click.echo(f"Location :- {_location(detail.location)}\n", file=file)


def print_object_validation(
    result: ObjectValidationResult | StringValidationResult,
    file: IO[str] | None = None,
) -> None:
    """Print every invalid string with its dotted object path."""
    for path, leaf in result.leaves():
        if leaf.is_error:
            _print_leaf_error(path, leaf, file)


def print_file_validation(
    result: FileValidationResult, verbose: bool = False, file: IO[str] | None = None
) -> None:
    if result.is_valid and not verbose:
        return

    click.secho(f"Validating file :- {result.file_name}", fg="black", bg="green", file=file)
    click.echo("\n", file=file)
    if result.error is not None:
        click.secho(f"Error :- {result.error}", fg="red", file=file)
    elif result.validation_result is not None:
        print_object_validation(result.validation_result, file=file)
    click.secho("Done!!!", fg="black", bg="green", file=file)
    click.echo("\n", file=file)


def print_directory_validation(
    results: list[FileValidationResult],
    verbose: bool = False,
    file: IO[str] | None = None,
) -> None:
    for result in results:
        print_file_validation(result, verbose, file=file)


def print_validation(
    source: Any, result: Any, verbose: bool = False, file: IO[str] | None = None
) -> None:
    """Print a result of any shape returned by ValidationService.validate."""
    if isinstance(result, list):
        print_directory_validation(result, verbose, file=file)
    elif isinstance(result, FileValidationResult):
        print_file_validation(result, verbose, file=file)
    elif isinstance(result, ObjectValidationResult):
        print_object_validation(result, file=file)
    else:
        print_string_validation(source, result, file=file)
