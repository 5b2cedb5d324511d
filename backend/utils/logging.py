"""
Structured logging setup using structlog.

This module configures structured logging for the application with JSON output
in production and human-readable format in development.
"""

import logging
import sys
from typing import Any

import structlog


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines; console output otherwise
    """
    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    # Outbound posts to response_url go through httpx
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (optional)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def log_slack_event(event_type: str, channel_id: str = None, user_id: str = None, **kwargs) -> None:
    """
    Log a Slack-related event with structured data.

    Args:
        event_type: Type of Slack event
        channel_id: Slack channel ID (optional)
        user_id: Slack user ID (optional)
        **kwargs: Additional context
    """
    logger = get_logger("slack")
    logger.info(
        f"Slack {event_type}",
        event_type=event_type,
        channel_id=channel_id,
        user_id=user_id,
        **kwargs
    )
