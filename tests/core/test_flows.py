"""Tests for ReqBotFlows."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from reqbot.core.diagram import Diagram
from reqbot.core.exceptions import EmptyDiagramError, GenerationError
from reqbot.core.flows import ReqBotFlows, Requirement
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
    RequirementsInput,
    TranscriptInput,
)


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock()
    generator.generate = AsyncMock()
    return generator


@pytest.fixture
def flows(mock_generator: MagicMock) -> ReqBotFlows:
    return ReqBotFlows(mock_generator)


class TestTextFlows:
    """Tests for flows returning text."""

    @pytest.mark.asyncio
    async def test_chat_reply(self, flows: ReqBotFlows, mock_generator: MagicMock) -> None:
        mock_generator.generate.return_value = ChatReply(response="Who are your users?")

        result = await flows.chat_reply("User: hi", "I need an app")

        assert result == "Who are your users?"
        mock_generator.generate.assert_awaited_once_with(
            CHAT_REPLY_ID,
            ChatReplyInput(history="User: hi", message="I need an app"),
            ChatReply,
        )

    @pytest.mark.asyncio
    async def test_report_text_flows(
        self,
        flows: ReqBotFlows,
        mock_generator: MagicMock,
        sample_requirements: list[Requirement],
    ) -> None:
        mock_generator.generate.side_effect = [
            ExecutiveSummary(summary="<p>s</p>"),
            CostEstimation(estimation="<table></table>"),
            References(references="<h3>Source</h3>"),
        ]

        assert await flows.executive_summary(sample_requirements) == "<p>s</p>"
        assert await flows.cost_estimation(sample_requirements) == "<table></table>"
        assert await flows.references("User: hi") == "<h3>Source</h3>"

        calls = mock_generator.generate.await_args_list
        assert calls[0].args == (
            EXECUTIVE_SUMMARY_ID,
            RequirementsInput(requirements=sample_requirements),
            ExecutiveSummary,
        )
        assert calls[1].args[0] == COST_ESTIMATION_ID
        assert calls[2].args == (REFERENCES_ID, TranscriptInput(transcript="User: hi"), References)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   \n"])
    async def test_blank_text_rejected(
        self,
        flows: ReqBotFlows,
        mock_generator: MagicMock,
        sample_requirements: list[Requirement],
        text: str,
    ) -> None:
        mock_generator.generate.return_value = ExecutiveSummary(summary=text)

        with pytest.raises(GenerationError) as exc_info:
            await flows.executive_summary(sample_requirements)

        assert exc_info.value.details["template_id"] == EXECUTIVE_SUMMARY_ID


class TestExtractRequirements:
    """Tests for requirements extraction."""

    @pytest.mark.asyncio
    async def test_returns_requirements(
        self,
        flows: ReqBotFlows,
        mock_generator: MagicMock,
        sample_requirements: list[Requirement],
    ) -> None:
        mock_generator.generate.return_value = ExtractedRequirements(requirements=sample_requirements)

        result = await flows.extract_requirements("User: hi")

        assert result == sample_requirements
        assert mock_generator.generate.await_args.args[0] == EXTRACT_REQUIREMENTS_ID

    @pytest.mark.asyncio
    async def test_empty_list_allowed(self, flows: ReqBotFlows, mock_generator: MagicMock) -> None:
        mock_generator.generate.return_value = ExtractedRequirements(requirements=[])
        assert await flows.extract_requirements("User: hi") == []


class TestActivityDiagram:
    """Tests for the diagram flow."""

    @pytest.mark.asyncio
    async def test_generated_diagram_rendered(
        self,
        flows: ReqBotFlows,
        mock_generator: MagicMock,
        sample_requirements: list[Requirement],
        decision_diagram: Diagram,
    ) -> None:
        mock_generator.generate.return_value = decision_diagram

        result = await flows.activity_diagram(sample_requirements)

        assert result.markup.startswith("flowchart TD\n")
        assert len(result.markup.split("\n")) == 9
        assert mock_generator.generate.await_args.args[0] == ACTIVITY_DIAGRAM_ID
        assert mock_generator.generate.await_args.args[2] is Diagram

    @pytest.mark.asyncio
    async def test_empty_diagram_propagates(
        self,
        flows: ReqBotFlows,
        mock_generator: MagicMock,
        sample_requirements: list[Requirement],
    ) -> None:
        mock_generator.generate.return_value = Diagram()

        with pytest.raises(EmptyDiagramError):
            await flows.activity_diagram(sample_requirements)
