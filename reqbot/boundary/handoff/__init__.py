"""Chat-to-report hand-off storage."""

from reqbot.boundary.handoff.handoff_client import (
    CONVERSATION_KEY,
    REQUIREMENTS_KEY,
    Handoff,
    delete_handoff,
    load_handoff,
    save_handoff,
)
from reqbot.boundary.handoff.handoff_store import HandoffStore, InMemoryHandoffStore

__all__ = [
    "CONVERSATION_KEY",
    "REQUIREMENTS_KEY",
    "Handoff",
    "HandoffStore",
    "InMemoryHandoffStore",
    "delete_handoff",
    "load_handoff",
    "save_handoff",
]
