"""Structured generation contract and prompt catalog."""

from reqbot.core.generation.generator import StructuredGenerator, build_chat_model
from reqbot.core.generation.prompt_catalog import PromptCatalog, PromptEntry

__all__ = [
    "PromptCatalog",
    "PromptEntry",
    "StructuredGenerator",
    "build_chat_model",
]
