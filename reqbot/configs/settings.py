"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from reqbot.configs.base import BaseSettings
from reqbot.configs.handoff import HandoffSettings
from reqbot.configs.llm import LLMSettings
from reqbot.configs.observability import ObservabilitySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    llm: LLMSettings = LLMSettings()
    handoff: HandoffSettings = HandoffSettings()
    observability: ObservabilitySettings = ObservabilitySettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from reqbot.configs import get_settings
        settings = get_settings()
    """
    return Settings()
