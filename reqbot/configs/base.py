"""
Base configuration settings.

Common settings inherited by the aggregated Settings class: environment,
logging level and the HTTP server surface.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="Bind address for the ReqBot API server",
    )
    api_port: int = Field(
        default=8000,
        gt=0,
        lt=65536,
        description="Port for the ReqBot API server",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (the chat and report UI)",
    )
