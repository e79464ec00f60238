"""
Chat service for requirements elicitation.

Orchestrates the conversational side of ReqBot: assistant replies,
requirements extraction and the hand-off to the report step.

Dependencies: reqbot.core.flows, reqbot.boundary.handoff
System role: Chat service orchestration layer
"""

import logging

from reqbot.boundary.handoff import Handoff, HandoffStore, save_handoff
from reqbot.core.exceptions import ValidationError
from reqbot.core.flows.flow_schema import ChatTurn, Requirement
from reqbot.core.flows.flows import ReqBotFlows
from reqbot.core.flows.transcript import format_transcript

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for the elicitation conversation.

    Stateless between calls: the caller owns the conversation and sends
    it with every request.
    """

    def __init__(self, flows: ReqBotFlows, handoff_store: HandoffStore) -> None:
        """
        Initialize chat service.

        Args:
            flows: ReqBot generation flows
            handoff_store: Store receiving chat-to-report hand-offs
        """
        self.flows = flows
        self.handoff_store = handoff_store

    async def reply(self, history: list[ChatTurn], message: str) -> str:
        """
        Generate the assistant's reply to the latest user message.

        Args:
            history: Earlier turns, oldest first
            message: The user's latest message

        Returns:
            str: Assistant reply

        Raises:
            ValidationError: If the message is blank
            GenerationError: If the oracle fails
        """
        if not message.strip():
            raise ValidationError("Message must not be empty", field="message")

        logger.info(f"{__name__}:reply - START history_turns={len(history)}")
        response = await self.flows.chat_reply(format_transcript(history), message)
        logger.info(f"{__name__}:reply - END response_len={len(response)}")
        return response

    async def extract(self, turns: list[ChatTurn]) -> list[Requirement]:
        """
        Extract requirements from the conversation so far.

        Raises:
            ValidationError: If the conversation is empty
            GenerationError: If the oracle fails
        """
        if not turns:
            raise ValidationError("Conversation must not be empty", field="turns")

        logger.info(f"{__name__}:extract - START turns={len(turns)}")
        requirements = await self.flows.extract_requirements(format_transcript(turns))
        logger.info(f"{__name__}:extract - END requirements={len(requirements)}")
        return requirements

    async def prepare_report(self, turns: list[ChatTurn]) -> str:
        """
        Extract requirements and store them with the transcript for reporting.

        Args:
            turns: Full conversation, oldest first

        Returns:
            str: Hand-off id to pass to the report step

        Raises:
            ValidationError: If the conversation is empty
            GenerationError: If extraction fails
            StorageError: If the hand-off cannot be stored
        """
        requirements = await self.extract(turns)
        handoff = Handoff(requirements=requirements, transcript=format_transcript(turns))
        handoff_id = save_handoff(self.handoff_store, handoff)
        logger.info(f"{__name__}:prepare_report - Stored handoff_id={handoff_id}")
        return handoff_id
