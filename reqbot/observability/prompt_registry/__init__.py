"""
Langfuse prompt registry module.

Versions flow prompt templates in Langfuse with model configuration tracking.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version management and LangChain integration
"""

from reqbot.observability.prompt_registry.models import ModelConfig
from reqbot.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
