"""
Observability module.

Provides logging configuration, correlation ID tracking, request middleware,
and prompt version management.
"""

from reqbot.observability.correlation import get_correlation_id, set_correlation_id
from reqbot.observability.logger import CorrelationIdFilter, configure_logging, get_logger
from reqbot.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = [
    "CorrelationIdFilter",
    "ModelConfig",
    "PromptRegistry",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
