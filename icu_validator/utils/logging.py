import logging
import sys

import structlog


def get_logger(name: str | None = None):
    """
    Get a logger with icu_validator prefix.

    Args:
        name: Module name (typically __name__). If None, returns root icu_validator logger.

    Returns:
        A structlog logger with icu_validator prefix.
    """
    if name is None:
        return structlog.get_logger("icu_validator")
    if name.startswith("icu_validator"):
        return structlog.get_logger(name)
    return structlog.get_logger(f"icu_validator.{name}")


# Libraries whose loggers can emit while validating
THIRD_PARTY_LOGGERS = (
    "asyncio",
    "click",
    "dotenv",
    "pydantic",
    "pydantic_settings",
    "pyicumessageformat",
)


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, leave the libraries at the root (DEBUG) level.
                   If False, set THIRD_PARTY_LOGGERS to WARNING level.
    """
    level = logging.NOTSET if debug_all else logging.WARNING
    for log_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(log_name).setLevel(level)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for the application.

    Environment variables:
        DEBUG_ALL: If set to "true" (case-insensitive), enable DEBUG logging for all libraries.
                   If not set, icu_validator logs at LOG_LEVEL, third-party libraries at WARNING.
        LOG_LEVEL: Level for the icu_validator namespace (default INFO).
    """
    from icu_validator.config import get_settings

    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger("icu_validator").setLevel(settings.log_level)
