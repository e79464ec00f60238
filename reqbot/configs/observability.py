"""
Observability configuration settings.

Settings for Langfuse prompt management and logging.

Dependencies: pydantic_settings
System role: Observability configuration for prompt registry and logging
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class ObservabilitySettings(BaseSettings):
    """Observability configuration for Langfuse."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    langfuse_public_key: str | None = Field(
        default=None,
        description="Langfuse public key",
    )
    langfuse_secret_key: str | None = Field(
        default=None,
        description="Langfuse secret key",
    )
    langfuse_host: str = Field(
        default="http://localhost:3000",
        description="Langfuse server host URL",
    )
    enable_tracing: bool = Field(
        default=True,
        description="Enable Langfuse integration",
    )
