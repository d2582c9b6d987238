"""Structured logging setup with sensitive data redaction.

SECURITY: Passwords pass through this package on every call. The processor
defined here redacts sensitive fields so a stray ``password=...`` keyword in a
log call never reaches the output.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

# Field names (or fragments of them) whose values are always redacted
SENSITIVE_FIELDS = frozenset(
    {
        "password",
        "passwd",
        "pwd",
        "passphrase",
        "secret",
        "token",
        "credential",
        "forbidden_words",
    }
)

REDACTED = "***REDACTED***"


def _is_sensitive_field(key: str) -> bool:
    """Check if a field name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS)


def _redact_dict(data: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Recursively redact sensitive data from a dictionary (modified in place)."""
    for key in list(data.keys()):
        if key == "event":
            continue
        value = data[key]

        if _is_sensitive_field(key):
            data[key] = REDACTED
        elif isinstance(value, MutableMapping):
            _redact_dict(value)
        elif isinstance(value, list):
            data[key] = [
                _redact_dict(item) if isinstance(item, MutableMapping) else item for item in value
            ]

    return data


def redact_sensitive_data(
    logger: structlog.types.WrappedLogger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor that redacts sensitive data from log events.

    Args:
        logger: The wrapped logger (unused).
        method_name: The logging method name (unused).
        event_dict: The event dictionary to process.

    Returns:
        The processed event dictionary with sensitive data redacted.
    """
    return _redact_dict(event_dict)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog for the package.

    Args:
        level: Minimum log level name, e.g. "DEBUG" or "INFO".
        json_logs: Render JSON lines instead of the colored console format.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_sensitive_data,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
