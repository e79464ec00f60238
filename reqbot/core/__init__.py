"""
Core business logic module.

Contains the exception hierarchy, the diagram renderer, the structured
generation contract and the ReqBot flows built on it.
"""

from reqbot.core.exceptions import (
    DiagramError,
    EmptyDiagramError,
    GenerationError,
    MalformedDiagramError,
    ReqBotException,
    StorageError,
    ValidationError,
)

__all__ = [
    "DiagramError",
    "EmptyDiagramError",
    "GenerationError",
    "MalformedDiagramError",
    "ReqBotException",
    "StorageError",
    "ValidationError",
]
