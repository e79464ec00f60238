"""
Conversation transcript formatting.

Dependencies: reqbot.core.flows.flow_schema
System role: Turns chat turns into the "<Role>: <text>" transcript prompts read
"""

from collections.abc import Iterable

from reqbot.core.flows.flow_schema import ChatSender, ChatTurn

ROLE_LABELS = {
    ChatSender.USER: "User",
    ChatSender.AI: "AI",
}


def format_transcript(turns: Iterable[ChatTurn]) -> str:
    """
    Format turns as newline-joined "User: text" / "AI: text" lines.

    Args:
        turns: Conversation turns in order

    Returns:
        str: Transcript text, empty when there are no turns
    """
    return "\n".join(f"{ROLE_LABELS[turn.sender]}: {turn.text}" for turn in turns)
