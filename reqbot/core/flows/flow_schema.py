"""
Flow input and output schemas.

Pydantic models for:
- Elicited requirements and chat turns
- Template payloads (rendered into mustache prompts)
- Structured outputs the oracle is constrained to

Dependencies: pydantic
System role: Data contracts shared by flows, services and the API
"""

from enum import Enum

from pydantic import BaseModel, Field


class RequirementType(str, Enum):
    FUNCTIONAL = "Functional"
    NON_FUNCTIONAL = "NonFunctional"
    DOMAIN = "Domain"
    INVERSE = "Inverse"


class Priority(str, Enum):
    LOW = "Low"
    MED = "Med"
    HIGH = "High"


class Requirement(BaseModel):
    """Single elicited project requirement."""

    id: str = Field(description="A unique identifier for the requirement, e.g. FR-1")
    type: RequirementType = Field(
        description="Functional, NonFunctional, Domain, or Inverse (what the system must not do)"
    )
    description: str = Field(description="A detailed description of the requirement")
    priority: Priority = Field(description="Low, Med, or High")
    confidence_score: float = Field(
        ge=0.0,
        le=1.0,
        description="Confidence (0-1) that the requirement reflects what the user asked for",
    )


class ChatSender(str, Enum):
    USER = "user"
    AI = "ai"


class ChatTurn(BaseModel):
    """One message in the elicitation conversation."""

    sender: ChatSender
    text: str


# Template payloads


class ChatReplyInput(BaseModel):
    """Payload for the chat reply template."""

    history: str = Field(default="", description="Formatted transcript of earlier turns")
    message: str = Field(description="The user's latest message")


class TranscriptInput(BaseModel):
    """Payload for templates that read the whole conversation."""

    transcript: str


class RequirementsInput(BaseModel):
    """Payload for templates that iterate over requirements."""

    requirements: list[Requirement]


# Structured outputs


class ChatReply(BaseModel):
    """Assistant reply in the elicitation conversation."""

    response: str = Field(description="The assistant's response to the user")


class ExtractedRequirements(BaseModel):
    """Requirements extracted from a conversation."""

    requirements: list[Requirement] = Field(
        description="Every requirement stated or clearly implied in the conversation"
    )


class ExecutiveSummary(BaseModel):
    summary: str = Field(description="The executive summary as a single HTML string")


class CostEstimation(BaseModel):
    estimation: str = Field(
        description="The cost estimation report, including its table, as a single HTML string"
    )


class References(BaseModel):
    references: str = Field(description="The references section as a single HTML string")
