"""
Common response models.

Content-or-error result wrapper and error schema shared by every route.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class FlowResult(BaseModel, Generic[T]):
    """
    Outcome of one flow call: either content or an error message.

    Exactly one of the two fields is set. Serialize with exclude_none so
    clients see {"content": ...} or {"error": ...}.
    """

    content: T | None = None
    error: str | None = Field(default=None, description="Human-readable failure message")

    @model_validator(mode="after")
    def _exactly_one(self) -> "FlowResult[T]":
        if (self.content is None) == (self.error is None):
            raise ValueError("exactly one of content or error must be set")
        return self

    @classmethod
    def ok(cls, content: T) -> "FlowResult[T]":
        return cls(content=content)

    @classmethod
    def fail(cls, error: str) -> "FlowResult[T]":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")
