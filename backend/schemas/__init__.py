"""
Pydantic schemas for API validation.

This package contains Pydantic models for the Slack slash command form
and the replies sent back to Slack.
"""

from .slack import ResponseType, SlackCommandSchema, SlackResponseSchema

__all__ = [
    "ResponseType",
    "SlackCommandSchema",
    "SlackResponseSchema",
]
