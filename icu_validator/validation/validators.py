"""Concrete validator implementations.

MessageValidator wraps the ICU message parser and translates parse failures
into StringValidationResults. TreeValidator applies it over nested mappings
and lists.
"""

import re
from collections.abc import Mapping
from typing import Any

from pyicumessageformat import Parser

from icu_validator.const import OBJECT_PATH_SEPARATOR
from icu_validator.exceptions import InvalidInputKindError
from icu_validator.utils.logging import get_logger
from icu_validator.utils.text import (
    map_offset_to_input,
    sanitize_input_text,
    sanitize_output_text,
)
from icu_validator.validation.options import ParseOptions
from icu_validator.validation.results import (
    ErrorDetail,
    ErrorLocation,
    ObjectValidationResult,
    StringValidationResult,
    ValidationTree,
)

logger = get_logger(__name__)

# The parser reports positions only inside its message: "... at position 11 ..."
_POSITION_RE = re.compile(r"at position (\d+)")


class MessageValidator:
    """Validates a single message against the ICU MessageFormat grammar.

    A new parser is created for every message, so one validator can be
    shared between threads and tasks.
    """

    name = "icu-message"

    def __init__(
        self,
        parse_options: ParseOptions | None = None,
        ignore_trans_tag: bool = False,
    ):
        self.parse_options = parse_options or ParseOptions()
        self.ignore_trans_tag = ignore_trans_tag
        self._parser_options = self.parse_options.to_parser_options()

    def validate(self, text: str) -> StringValidationResult:
        """Parse the message after sanitizing component tags.

        Args:
            text: The ICU message

        Returns:
            StringValidationResult, with error details when parsing failed.
            Tag names and positions in the details refer to text as given.
        """
        parser_input = sanitize_input_text(text, self.ignore_trans_tag)
        try:
            Parser(self._parser_options).parse(parser_input)
        except (SyntaxError, ValueError) as error:
            return StringValidationResult.invalid(self._error_detail(text, error))
        return StringValidationResult.valid()

    def _error_detail(self, text: str, error: Exception) -> ErrorDetail:
        message = str(error.args[0]) if error.args else error.__class__.__name__
        location = None

        position = _POSITION_RE.search(message)
        if position:
            offset = map_offset_to_input(
                text, int(position.group(1)), self.ignore_trans_tag
            )
            location = ErrorLocation.from_offset(text, offset)
            message = _POSITION_RE.sub(
                f"at position {location.offset}", message, count=1
            )

        message = sanitize_output_text(message, self.ignore_trans_tag)
        logger.debug("Invalid ICU message", validator=self.name, error=message)
        return ErrorDetail(
            error_message=message,
            original_text=sanitize_output_text(text, self.ignore_trans_tag),
            location=location,
        )


class TreeValidator:
    """Validates every string of arbitrarily nested mappings and lists."""

    name = "icu-tree"

    def __init__(self, message_validator: MessageValidator):
        self.message_validator = message_validator

    def validate(self, node: Any, path: str = "") -> ValidationTree:
        """Validate a string or a nested structure of strings.

        Lists are validated like mappings keyed by index: steps.0, steps.1

        Args:
            node: String, mapping or list whose leaves are strings
            path: Dotted path of node, used in error reports

        Returns:
            StringValidationResult for a string, ObjectValidationResult with
            the same keys for a mapping or list

        Raises:
            InvalidInputKindError: When a value is neither string nor mapping
        """
        if isinstance(node, str):
            return self.message_validator.validate(node)

        if isinstance(node, Mapping):
            items = node.items()
        elif isinstance(node, list):
            items = ((str(index), value) for index, value in enumerate(node))
        else:
            logger.debug("Unsupported value", validator=self.name, path=path)
            raise InvalidInputKindError(path or None)

        entries = {}
        for key, value in items:
            child_path = f"{path}{OBJECT_PATH_SEPARATOR}{key}" if path else str(key)
            entries[key] = self.validate(value, child_path)
        return ObjectValidationResult(entries)
