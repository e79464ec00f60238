"""Tests for PromptCatalog and the flow prompts."""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.prompts import ChatPromptTemplate

from reqbot.configs.llm import LLMSettings
from reqbot.core.exceptions import GenerationError
from reqbot.core.flows.flow_prompts import (
    ACTIVITY_DIAGRAM_ID,
    EXECUTIVE_SUMMARY_ID,
    FLOW_PROMPTS,
    REFERENCES_ID,
    build_flow_catalog,
)
from reqbot.core.flows.flow_schema import Requirement, RequirementsInput, TranscriptInput
from reqbot.core.generation import PromptCatalog


@pytest.fixture
def mock_registry() -> MagicMock:
    registry = MagicMock()
    registry.is_enabled = True
    registry.get_chat_template.return_value = None
    return registry


class TestCatalogLookup:
    """Tests for template resolution."""

    def test_local_template_by_default(self) -> None:
        catalog = build_flow_catalog(LLMSettings())
        assert catalog.get(REFERENCES_ID) is FLOW_PROMPTS[REFERENCES_ID].template

    def test_unknown_template_raises(self) -> None:
        with pytest.raises(GenerationError, match="Unknown template id"):
            build_flow_catalog(LLMSettings()).get("nope")

    def test_flow_catalog_lists_every_flow(self) -> None:
        catalog = build_flow_catalog(LLMSettings())

        assert catalog.template_ids == list(FLOW_PROMPTS)
        assert len(catalog.template_ids) == 6
        assert ACTIVITY_DIAGRAM_ID in catalog
        assert "nope" not in catalog

    def test_registry_version_preferred(self, mock_registry: MagicMock) -> None:
        managed = ChatPromptTemplate.from_messages([("human", "managed")])
        mock_registry.get_chat_template.return_value = managed
        catalog = PromptCatalog(FLOW_PROMPTS, use_registry=True, label="production")

        with patch(
            "reqbot.core.generation.prompt_catalog.PromptRegistry", return_value=mock_registry
        ):
            assert catalog.get(REFERENCES_ID) is managed

        mock_registry.get_chat_template.assert_called_once_with(REFERENCES_ID, label="production")

    def test_registry_miss_falls_back(self, mock_registry: MagicMock) -> None:
        catalog = PromptCatalog(FLOW_PROMPTS, use_registry=True)
        with patch(
            "reqbot.core.generation.prompt_catalog.PromptRegistry", return_value=mock_registry
        ):
            assert catalog.get(REFERENCES_ID) is FLOW_PROMPTS[REFERENCES_ID].template

    def test_registry_error_falls_back(self, mock_registry: MagicMock) -> None:
        mock_registry.get_chat_template.side_effect = RuntimeError("not found")
        catalog = PromptCatalog(FLOW_PROMPTS, use_registry=True)
        with patch(
            "reqbot.core.generation.prompt_catalog.PromptRegistry", return_value=mock_registry
        ):
            assert catalog.get(REFERENCES_ID) is FLOW_PROMPTS[REFERENCES_ID].template


class TestRegisterAll:
    """Tests for pushing templates to the registry."""

    def test_registers_every_flow(self, mock_registry: MagicMock) -> None:
        catalog = build_flow_catalog(LLMSettings())
        with patch(
            "reqbot.core.generation.prompt_catalog.PromptRegistry", return_value=mock_registry
        ):
            registered = catalog.register_all(LLMSettings(model_id="gemini-x"), labels=["staging"])

        assert registered == list(FLOW_PROMPTS)
        assert mock_registry.register_prompt.call_count == len(FLOW_PROMPTS)
        diagram_call = next(
            call for call in mock_registry.register_prompt.call_args_list
            if call.kwargs["name"] == ACTIVITY_DIAGRAM_ID
        )
        assert diagram_call.kwargs["config"].output_schema == "Diagram"
        assert diagram_call.kwargs["config"].model == "google_genai:gemini-x"
        assert diagram_call.kwargs["labels"] == ["staging"]

    def test_disabled_registry_skips(self, mock_registry: MagicMock) -> None:
        mock_registry.is_enabled = False
        with patch(
            "reqbot.core.generation.prompt_catalog.PromptRegistry", return_value=mock_registry
        ):
            assert build_flow_catalog(LLMSettings()).register_all(LLMSettings()) == []
        mock_registry.register_prompt.assert_not_called()


class TestFlowPrompts:
    """Tests for rendering the flow templates."""

    def test_requirements_iterated(self, sample_requirements: list[Requirement]) -> None:
        template = FLOW_PROMPTS[EXECUTIVE_SUMMARY_ID].template
        payload = RequirementsInput(requirements=sample_requirements)

        human = template.format_messages(**payload.model_dump(mode="json"))[-1].content

        assert "[FR-1] Users can reset their password by email (Priority: High, Type: Functional)" in human
        assert "[NFR-1] Pages load in under 2 seconds (Priority: Med, Type: NonFunctional)" in human

    def test_transcript_not_escaped(self) -> None:
        template = FLOW_PROMPTS[REFERENCES_ID].template
        transcript = 'User: I need "fast" <pages> & more'

        human = template.format_messages(
            **TranscriptInput(transcript=transcript).model_dump(mode="json")
        )[-1].content

        assert transcript in human

    def test_every_template_is_mustache(self) -> None:
        for entry in FLOW_PROMPTS.values():
            for message in entry.template.messages:
                assert message.prompt.template_format == "mustache"
