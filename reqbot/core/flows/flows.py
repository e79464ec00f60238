"""
ReqBot flows.

Each flow is the generation contract specialized to one template id and
one output schema. The activity diagram flow additionally passes the
generated structure through the deterministic renderer.

Dependencies: reqbot.core.generation, reqbot.core.diagram
System role: Typed entry points for chat, extraction and report sections
"""

import logging

from reqbot.core.diagram.diagram_schema import Diagram, RenderedMarkup
from reqbot.core.diagram.renderer import render
from reqbot.core.exceptions import GenerationError
from reqbot.core.flows.flow_prompts import (
    ACTIVITY_DIAGRAM_ID,
    CHAT_REPLY_ID,
    COST_ESTIMATION_ID,
    EXECUTIVE_SUMMARY_ID,
    EXTRACT_REQUIREMENTS_ID,
    REFERENCES_ID,
)
from reqbot.core.flows.flow_schema import (
    ChatReply,
    ChatReplyInput,
    CostEstimation,
    ExecutiveSummary,
    ExtractedRequirements,
    References,
    Requirement,
    RequirementsInput,
    TranscriptInput,
)
from reqbot.core.generation.generator import StructuredGenerator

logger = logging.getLogger(__name__)


def _require_text(value: str, template_id: str) -> str:
    if not value or not value.strip():
        raise GenerationError("Model returned empty text", template_id=template_id)
    return value


class ReqBotFlows:
    """
    The six ReqBot generation flows over a shared StructuredGenerator.

    Every method raises GenerationError on oracle failure; the diagram
    flow may also raise EmptyDiagramError or MalformedDiagramError.
    """

    def __init__(self, generator: StructuredGenerator) -> None:
        self._generator = generator

    async def chat_reply(self, history: str, message: str) -> str:
        """
        Generate the assistant's next conversational turn.

        Args:
            history: Formatted transcript of earlier turns
            message: The user's latest message

        Returns:
            str: Assistant reply text
        """
        reply = await self._generator.generate(
            CHAT_REPLY_ID,
            ChatReplyInput(history=history, message=message),
            ChatReply,
        )
        return _require_text(reply.response, CHAT_REPLY_ID)

    async def extract_requirements(self, transcript: str) -> list[Requirement]:
        """Extract structured requirements from a conversation transcript."""
        extracted = await self._generator.generate(
            EXTRACT_REQUIREMENTS_ID,
            TranscriptInput(transcript=transcript),
            ExtractedRequirements,
        )
        logger.info(
            f"{__name__}:extract_requirements - Extracted {len(extracted.requirements)} requirements"
        )
        return extracted.requirements

    async def executive_summary(self, requirements: list[Requirement]) -> str:
        summary = await self._generator.generate(
            EXECUTIVE_SUMMARY_ID,
            RequirementsInput(requirements=requirements),
            ExecutiveSummary,
        )
        return _require_text(summary.summary, EXECUTIVE_SUMMARY_ID)

    async def activity_diagram(self, requirements: list[Requirement]) -> RenderedMarkup:
        """
        Generate a structured activity diagram and render it to markup.

        Args:
            requirements: Requirements the flow should cover

        Returns:
            RenderedMarkup: Flowchart markup plus advisory warnings

        Raises:
            GenerationError: If the oracle fails or returns a non-conforming structure
            EmptyDiagramError: If the generated diagram has no nodes
            MalformedDiagramError: If the generated diagram violates its shape invariants
        """
        diagram = await self._generator.generate(
            ACTIVITY_DIAGRAM_ID,
            RequirementsInput(requirements=requirements),
            Diagram,
        )
        return render(diagram)

    async def cost_estimation(self, requirements: list[Requirement]) -> str:
        estimation = await self._generator.generate(
            COST_ESTIMATION_ID,
            RequirementsInput(requirements=requirements),
            CostEstimation,
        )
        return _require_text(estimation.estimation, COST_ESTIMATION_ID)

    async def references(self, transcript: str) -> str:
        references = await self._generator.generate(
            REFERENCES_ID,
            TranscriptInput(transcript=transcript),
            References,
        )
        return _require_text(references.references, REFERENCES_ID)
