"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all icu-validator settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from icu_validator.validation.options import ParseOptions


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for icu_validator namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class ValidationSettings(BaseSettings):
    """Output and tag handling defaults for validation runs."""

    model_config = SettingsConfigDict(env_prefix="ICU_VALIDATOR_", extra="ignore")

    pretty_print: bool = Field(
        default=False,
        description="Print validation results on the console",
    )
    verbose: bool = Field(
        default=False,
        description="Also print files that passed validation",
    )
    ignore_trans_tag: bool = Field(
        default=False,
        description="Rewrite numeric component tags (<0>...</0>) before parsing",
    )


class ParserSettings(BaseSettings):
    """Defaults forwarded to the ICU message parser."""

    model_config = SettingsConfigDict(env_prefix="ICU_PARSER_", extra="ignore")

    ignore_tag: bool = Field(
        default=False,
        description="Treat HTML/XML tags as string literals",
    )
    requires_other_clause: bool = Field(
        default=False,
        description="Require an `other` clause in select, selectordinal and plural",
    )
    should_parse_skeletons: bool = Field(
        default=False,
        description="Parse number/datetime skeletons",
    )
    capture_location: bool = Field(
        default=False,
        description="Capture location info while parsing",
    )
    locale: str | None = Field(
        default=None,
        description="Locale used to resolve locale-dependent skeletons",
    )

    def to_parse_options(self) -> ParseOptions:
        return ParseOptions(
            ignore_tag=self.ignore_tag,
            requires_other_clause=self.requires_other_clause,
            should_parse_skeletons=self.should_parse_skeletons,
            capture_location=self.capture_location,
            locale=self.locale,
        )


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from icu_validator.config import get_settings

        settings = get_settings()
        verbose = settings.validation.verbose
        parse_options = settings.parser.to_parse_options()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    parser: ParserSettings = Field(default_factory=ParserSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
