"""
Pydantic schemas for Slack slash command payloads.

This module contains the inbound slash command form and the JSON reply
we post back to the command's response_url.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ResponseType(StrEnum):
    """Visibility of a slash command reply."""

    IN_CHANNEL = "in_channel"  # visible to everyone in the channel
    EPHEMERAL = "ephemeral"  # visible only to the invoking user


class SlackCommandSchema(BaseModel):
    """
    Schema for Slack slash command form data.

    Slack does not guarantee any of these are present, so every field
    decodes to an empty string when missing. Only `token` and `command`
    are checked; `response_url` is the delivery target and the rest are
    kept for diagnostics.
    """

    model_config = ConfigDict(extra="ignore")

    token: str = Field(default="", description="Slack verification token")
    team_id: str = Field(default="", description="Slack team (workspace) ID")
    team_domain: str = Field(default="", description="Slack team domain")
    channel_id: str = Field(default="", description="Channel where command was issued")
    channel_name: str = Field(default="", description="Channel name")
    user_id: str = Field(default="", description="User who issued the command")
    user_name: str = Field(default="", description="Username who issued the command")
    command: str = Field(default="", description="The slash command (/justin)")
    text: str = Field(default="", description="Text after the command")
    response_url: str = Field(default="", description="URL for delayed responses")


class SlackResponseSchema(BaseModel):
    """Reply posted back to Slack's response_url."""

    response_type: ResponseType = Field(
        default=ResponseType.IN_CHANNEL,
        description="Response type: 'in_channel' or 'ephemeral'"
    )
    text: str = Field(..., description="Main message text")
