"""Configuration module for icu-validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from icu_validator.config import get_settings

    settings = get_settings()

    # Access output settings
    pretty_print = settings.validation.pretty_print

    # Access parser defaults
    parse_options = settings.parser.to_parse_options()
"""

from icu_validator.config.settings import (
    LoggingSettings,
    ParserSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "ParserSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reset_settings",
]
