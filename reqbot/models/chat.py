"""
Chat request and response schemas.

Dependencies: pydantic, reqbot.core.flows
System role: Chat API contracts
"""

from pydantic import BaseModel, Field

from reqbot.core.flows.flow_schema import ChatTurn


class ChatReplyRequest(BaseModel):
    """Request schema for the next assistant turn."""

    history: list[ChatTurn] = Field(default_factory=list, description="Earlier turns, oldest first")
    message: str = Field(description="The user's latest message")


class ConversationRequest(BaseModel):
    """Request schema for operations over a whole conversation."""

    turns: list[ChatTurn] = Field(description="Conversation turns, oldest first")


class HandoffResponse(BaseModel):
    """Identifier of a stored chat-to-report hand-off."""

    handoff_id: str
