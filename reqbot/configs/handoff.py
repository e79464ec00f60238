"""
Hand-off storage configuration settings.

Dependencies: pydantic_settings
System role: Capacity limits for chat-to-report hand-off storage
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HandoffSettings(BaseSettings):
    """Hand-off store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HANDOFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_bytes: int = Field(
        default=5 * 1024 * 1024,
        gt=0,
        description="Total capacity of the hand-off store in bytes (UTF-8 encoded values)",
    )
