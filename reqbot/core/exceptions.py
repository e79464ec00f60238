"""
Exception hierarchy for the ReqBot application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ReqBotException(Exception):
    """Base exception for all ReqBot application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ReqBotException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DiagramError(ReqBotException):
    """Base exception for diagram rendering failures."""

    pass


class EmptyDiagramError(DiagramError):
    """Raised when a diagram has no nodes to render."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Diagram contains no nodes", details)


class MalformedDiagramError(DiagramError):
    """Raised when a diagram violates its structural invariants."""

    def __init__(
        self,
        message: str,
        node_ids: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed diagram error.

        Args:
            message: Error message
            node_ids: Offending node ids, if any
            details: Additional context
        """
        details = details or {}
        if node_ids:
            details["node_ids"] = node_ids
        super().__init__(message, details)


class GenerationError(ReqBotException):
    """Raised when the generation oracle fails to produce schema-conforming output."""

    def __init__(
        self,
        message: str,
        template_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            template_id: Prompt template the call was made with
            details: Additional context
        """
        details = details or {}
        if template_id:
            details["template_id"] = template_id
        super().__init__(message, details)


class StorageError(ReqBotException):
    """Raised when hand-off storage reads or writes fail."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            key: Storage key involved
            operation: Operation that failed (put, get, delete)
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
