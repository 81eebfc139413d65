"""
Logging configuration.

Structured logging through structlog, rendered as JSON in production and
as coloured console output when ``LOG_JSON`` is off.  Values of keys that
look like credentials are redacted before rendering.
"""

import logging
import sys
from typing import Any

import structlog

from app.core.config import Settings

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "password_hash",
    "token",
    "secret",
    "authorization",
})


def _redact_sensitive_data(logger: logging.Logger, method_name: str, event_dict: dict[str, Any], ) -> dict[str, Any]:
    """Replace the value of any key containing a sensitive word with ``[REDACTED]``."""
    for key in list(event_dict):
        key_lower = key.lower()
        if any(word in key_lower for word in SENSITIVE_KEYS):
            event_dict[key] = "[REDACTED]"
    return event_dict


def _add_service_context(logger: logging.Logger, method_name: str, event_dict: dict[str, Any], ) -> dict[str, Any]:
    event_dict["service"] = "airpass-api"
    return event_dict


def get_processors(json_output: bool) -> list[Any]:
    """Build the structlog processor chain."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_sensitive_data,
        _add_service_context,
    ]

    if json_output:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def configure_logging(settings: Settings) -> None:
    """
    Configure application logging.

    Should be called once during application startup.

    Args:
        settings: Application settings
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=get_processors(settings.LOG_JSON),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    # SQL echo only in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name)
