"""
Configuration management for the justin backend service.

This module uses Pydantic Settings for environment-based configuration
with validation and type checking.
"""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeliveryMode(StrEnum):
    """How the final reply reaches Slack."""

    SYNC = "sync"
    DEFERRED = "deferred"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    debug: bool = Field(default=False, description="Enable debug mode")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Slash command settings
    justin_command: str = Field(
        default="",
        description="Expected slash command (e.g. /justin), empty to accept any"
    )
    justin_token: str = Field(
        default="",
        description="Expected Slack verification token, empty to accept any"
    )

    # Delivery settings
    delivery_mode: DeliveryMode = Field(
        default=DeliveryMode.DEFERRED,
        description="'sync' posts before responding, 'deferred' acks first"
    )
    deferred_delay_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Wait before the deferred post so Slack renders the ack first"
    )
    response_timeout_seconds: float = Field(
        default=30,
        gt=0,
        description="Timeout for posts to the Slack response_url"
    )
    search_url_template: str = Field(
        default="https://www.google.com/#q={query}",
        description="Search link template; {query} receives the encoded text"
    )


# Global settings instance
settings = Settings()
