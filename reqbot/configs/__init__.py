"""
ReqBot configuration.

Pydantic Settings classes for the oracle model, hand-off storage and
Langfuse, aggregated behind the cached get_settings() factory.
"""

from reqbot.configs.handoff import HandoffSettings
from reqbot.configs.llm import LLMSettings
from reqbot.configs.observability import ObservabilitySettings
from reqbot.configs.settings import Settings, get_settings

__all__ = [
    "HandoffSettings",
    "LLMSettings",
    "ObservabilitySettings",
    "Settings",
    "get_settings",
]
