"""Options accepted by the validation entry points."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParseOptions(BaseModel):
    """Options forwarded to the ICU message parser.

    Attributes:
        ignore_tag: Treat HTML/XML tags as string literals
        requires_other_clause: `select`, `selectordinal` and `plural` must have an `other` case
        should_parse_skeletons: Parse number/datetime skeletons
        capture_location: Capture location info while parsing
        locale: Locale used to resolve locale-dependent skeletons
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_tag: bool = False
    requires_other_clause: bool = False
    should_parse_skeletons: bool = False
    capture_location: bool = False
    locale: str | None = None

    def to_parser_options(self) -> dict[str, Any]:
        """Translate into pyicumessageformat.Parser options.

        Skeletons and locale have no counterpart in the parser and are not
        forwarded.
        """
        return {
            "allow_tags": not self.ignore_tag,
            "require_other": self.requires_other_clause,
            "include_indices": self.capture_location,
        }


class ValidationOptions(BaseModel):
    """Options to customize output and validation rules.

    Attributes:
        pretty_print: Print the result on the console
        verbose: Also print valid files, only used with pretty_print
        ignore_trans_tag: Special handling for numeric component tags (<0>...</0>)
        parse_options: Options forwarded to the parser
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pretty_print: bool = False
    verbose: bool = False
    ignore_trans_tag: bool = False
    parse_options: ParseOptions = Field(default_factory=ParseOptions)
