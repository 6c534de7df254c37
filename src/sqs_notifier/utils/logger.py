"""
Module: logger.py
Description: Structured logging configuration for the SQS notifier.

Configures structlog for JSON output so channel logs line up with the
rest of the notification service. A console renderer is available for
local runs against LocalStack.

Key Components:
- JSON output by default, console output on request
- Timestamp and log level processors
- Level filtering via configure_logging() and configure_logging_from()
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
import structlog
from datetime import datetime, timezone


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add upper-cased log level to the event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """
    Configure structlog for the notifier.

    Args:
        level: Minimum level name to emit (DEBUG, INFO, ...)
        fmt: 'json' for machine-readable output, 'console' for humans
    """
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )


def configure_logging_from(settings) -> None:
    """Apply log_level and log_format from a Settings instance."""
    configure_logging(settings.log_level, settings.log_format)


# Debug lines stay off until the host applies its own settings
configure_logging("INFO")


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent to SQS", queue_url=url, message_id="abc")
        {"event": "Message sent to SQS", "queue_url": "...", "message_id": "abc", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
