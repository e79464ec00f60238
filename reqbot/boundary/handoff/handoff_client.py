"""
Hand-off read/write operations.

A hand-off is the extracted requirements plus the conversation transcript,
written by the chat step and read by the report step. Each hand-off is
stored as two entries, "requirements" (JSON array) and
"conversationHistory" (transcript text), under a generated id.

Dependencies: pydantic, reqbot.boundary.handoff.handoff_store
System role: Typed access to the hand-off store
"""

import logging
import uuid

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from reqbot.boundary.handoff.handoff_store import HandoffStore
from reqbot.core.exceptions import StorageError
from reqbot.core.flows.flow_schema import Requirement

logger = logging.getLogger(__name__)

REQUIREMENTS_KEY = "requirements"
CONVERSATION_KEY = "conversationHistory"

_requirements_adapter = TypeAdapter(list[Requirement])


class Handoff(BaseModel):
    """Requirements and transcript carried from chat to report."""

    requirements: list[Requirement] = Field(default_factory=list)
    transcript: str = ""


def _entry_key(handoff_id: str, name: str) -> str:
    return f"{handoff_id}:{name}"


def save_handoff(store: HandoffStore, handoff: Handoff) -> str:
    """
    Persist a hand-off under a new id.

    Args:
        store: Target store
        handoff: Requirements and transcript to persist

    Returns:
        str: Generated hand-off id

    Raises:
        StorageError: If either entry cannot be written; nothing is left behind
    """
    handoff_id = str(uuid.uuid4())
    requirements_json = _requirements_adapter.dump_json(handoff.requirements).decode("utf-8")

    written: list[str] = []
    try:
        for name, value in (
            (REQUIREMENTS_KEY, requirements_json),
            (CONVERSATION_KEY, handoff.transcript),
        ):
            key = _entry_key(handoff_id, name)
            store.put(key, value)
            written.append(key)
    except StorageError:
        for key in written:
            store.delete(key)
        raise

    logger.info(
        f"{__name__}:save_handoff - Saved handoff_id={handoff_id}, "
        f"requirements={len(handoff.requirements)}"
    )
    return handoff_id


def load_handoff(store: HandoffStore, handoff_id: str) -> Handoff:
    """
    Read a hand-off back.

    Args:
        store: Source store
        handoff_id: Id returned by save_handoff

    Returns:
        Handoff: Decoded requirements and transcript

    Raises:
        StorageError: If an entry is missing or the requirements cannot be decoded
    """
    requirements_key = _entry_key(handoff_id, REQUIREMENTS_KEY)
    raw_requirements = store.get(requirements_key)
    transcript = store.get(_entry_key(handoff_id, CONVERSATION_KEY))

    try:
        requirements = _requirements_adapter.validate_json(raw_requirements)
    except PydanticValidationError as e:
        raise StorageError(
            "Stored requirements could not be decoded",
            key=requirements_key,
            operation="get",
        ) from e

    return Handoff(requirements=requirements, transcript=transcript)


def delete_handoff(store: HandoffStore, handoff_id: str) -> None:
    """Remove both entries of a hand-off."""
    for name in (REQUIREMENTS_KEY, CONVERSATION_KEY):
        store.delete(_entry_key(handoff_id, name))
