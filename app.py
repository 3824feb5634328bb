#!/usr/bin/env python3

import asyncio
import functools
import sys

import click
from dotenv import load_dotenv

from icu_validator.config import get_settings
from icu_validator.error_details import get_error_human_message
from icu_validator.exceptions import ICUValidatorError
from icu_validator.report.printer import (
    print_directory_validation,
    print_file_validation,
    print_validation,
)
from icu_validator.utils.logging import setup_logging
from icu_validator.validation.options import ParseOptions
from icu_validator.validation.service import ValidationService


def validation_options(command):
    """Options shared by every validation command"""
    options = [
        click.option(
            "--ignore-trans-tag/--no-ignore-trans-tag",
            default=lambda: get_settings().validation.ignore_trans_tag,
            help="Special handling for numeric component tags such as <0>...</0>.",
        ),
        click.option(
            "--verbose/--no-verbose",
            default=lambda: get_settings().validation.verbose,
            help="Also print files that passed validation.",
        ),
        click.option(
            "--ignore-tag/--no-ignore-tag",
            default=lambda: get_settings().parser.ignore_tag,
            help="Treat HTML/XML tags as string literals.",
        ),
        click.option(
            "--requires-other-clause/--no-requires-other-clause",
            default=lambda: get_settings().parser.requires_other_clause,
            help="Require an `other` case in select, selectordinal and plural.",
        ),
        click.option(
            "--parse-skeletons/--no-parse-skeletons",
            default=lambda: get_settings().parser.should_parse_skeletons,
            help="Parse number/datetime skeletons.",
        ),
        click.option(
            "--capture-location/--no-capture-location",
            default=lambda: get_settings().parser.capture_location,
            help="Capture location info while parsing.",
        ),
        click.option(
            "--locale",
            default=lambda: get_settings().parser.locale,
            help="Locale used to resolve locale-dependent skeletons.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def build_service(
    ignore_trans_tag,
    ignore_tag,
    requires_other_clause,
    parse_skeletons,
    capture_location,
    locale,
) -> ValidationService:
    parse_options = ParseOptions(
        ignore_tag=ignore_tag,
        requires_other_clause=requires_other_clause,
        should_parse_skeletons=parse_skeletons,
        capture_location=capture_location,
        locale=locale,
    )
    return ValidationService(parse_options, ignore_trans_tag)


def report_errors(func):
    """Turn validator errors into click errors with a readable message"""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ICUValidatorError, OSError) as e:
            raise click.ClickException(get_error_human_message(e)) from e

    return wrapper


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """ICU Validator - check translations against ICU MessageFormat"""
    setup_logging()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("source")
@validation_options
@report_errors
def check(source, verbose, **kwargs) -> None:
    """Validate an ICU string, a JSON file or a directory of JSON files"""
    service = build_service(**kwargs)
    result = service.validate(source)
    print_validation(source, result, verbose)
    sys.exit(1 if service.has_errors(result) else 0)


@cli.command("file")
@click.argument("file_path", type=click.Path(exists=True, file_okay=True, dir_okay=False))
@validation_options
@report_errors
def validate_file(file_path, verbose, **kwargs) -> None:
    """Check if all strings in a JSON file conform to ICU standard"""
    service = build_service(**kwargs)
    result = asyncio.run(service.validate_json_file_async(file_path))
    print_file_validation(result, verbose)
    sys.exit(0 if result.is_valid else 1)


@cli.command("directory")
@click.argument(
    "directory_path", type=click.Path(exists=True, file_okay=False, dir_okay=True)
)
@validation_options
@report_errors
def validate_directory(directory_path, verbose, **kwargs) -> None:
    """Check all JSON files of a directory"""
    service = build_service(**kwargs)
    results = asyncio.run(service.validate_directory_async(directory_path))
    print_directory_validation(results, verbose)
    click.echo(f"{sum(r.is_valid for r in results)}/{len(results)} files valid")
    sys.exit(1 if service.has_errors(results) else 0)


if __name__ == "__main__":
    load_dotenv()
    cli()
