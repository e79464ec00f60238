"""Tests for StructuredGenerator."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel

from reqbot.configs.llm import LLMSettings
from reqbot.core.exceptions import GenerationError
from reqbot.core.generation import PromptCatalog, PromptEntry, StructuredGenerator


class Greeting(BaseModel):
    text: str


class Topic(BaseModel):
    topic: str


class Payload(BaseModel):
    name: str


@pytest.fixture
def llm_settings() -> LLMSettings:
    """Non-Gemini provider so no client is constructed."""
    return LLMSettings(provider="openai", model_id="gpt-test")


@pytest.fixture
def catalog() -> PromptCatalog:
    template = ChatPromptTemplate.from_messages(
        [
            ("system", "You greet people."),
            ("human", "Greet {{{name}}}."),
        ],
        template_format="mustache",
    )
    return PromptCatalog({"greet": PromptEntry(template, Greeting)})


@pytest.fixture
def mock_agent() -> MagicMock:
    agent = MagicMock()
    agent.ainvoke = AsyncMock(return_value={"structured_response": Greeting(text="Hello Ada")})
    return agent


class TestGenerate:
    """Tests for the happy path."""

    @pytest.mark.asyncio
    async def test_returns_schema_instance(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        with patch(
            "reqbot.core.generation.generator.create_agent", return_value=mock_agent
        ) as mock_create:
            generator = StructuredGenerator(catalog, llm_settings)
            result = await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert result == Greeting(text="Hello Ada")
        assert mock_create.call_args.kwargs["model"] == "openai:gpt-test"
        assert mock_create.call_args.kwargs["tools"] == []

    @pytest.mark.asyncio
    async def test_payload_rendered_into_messages(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        with patch("reqbot.core.generation.generator.create_agent", return_value=mock_agent):
            generator = StructuredGenerator(catalog, llm_settings)
            await generator.generate(
                "greet", Payload(name="<Ada & Bob>"), Greeting
            )

        messages = mock_agent.ainvoke.call_args.args[0]["messages"]
        assert messages[0].content == "You greet people."
        assert messages[1].content == "Greet <Ada & Bob>."

    @pytest.mark.asyncio
    async def test_dict_output_validated(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        mock_agent.ainvoke.return_value = {"structured_response": {"text": "Hi"}}
        with patch("reqbot.core.generation.generator.create_agent", return_value=mock_agent):
            generator = StructuredGenerator(catalog, llm_settings)
            result = await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert result == Greeting(text="Hi")

    @pytest.mark.asyncio
    async def test_agent_cached_per_schema(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        with patch(
            "reqbot.core.generation.generator.create_agent", return_value=mock_agent
        ) as mock_create:
            generator = StructuredGenerator(catalog, llm_settings)
            await generator.generate("greet", Payload(name="Ada"), Greeting)
            await generator.generate("greet", Payload(name="Bob"), Greeting)
            mock_agent.ainvoke.return_value = {"structured_response": Topic(topic="t")}
            await generator.generate("greet", Payload(name="Cy"), Topic)

        assert mock_create.call_count == 2


class TestGenerateErrors:
    """Tests for GenerationError mapping."""

    @pytest.mark.asyncio
    async def test_unknown_template(
        self, catalog: PromptCatalog, llm_settings: LLMSettings
    ) -> None:
        with patch("reqbot.core.generation.generator.create_agent") as mock_create:
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError) as exc_info:
                await generator.generate("missing", Payload(name="Ada"), Greeting)

        assert exc_info.value.details["template_id"] == "missing"
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_oracle_exception(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        mock_agent.ainvoke.side_effect = RuntimeError("quota exceeded")
        with patch("reqbot.core.generation.generator.create_agent", return_value=mock_agent):
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError) as exc_info:
                await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert "quota exceeded" in exc_info.value.message
        assert exc_info.value.details == {"schema": "Greeting", "template_id": "greet"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("result", [{}, {"structured_response": None}, None])
    async def test_missing_output(
        self,
        catalog: PromptCatalog,
        llm_settings: LLMSettings,
        mock_agent: MagicMock,
        result: object,
    ) -> None:
        mock_agent.ainvoke.return_value = result
        with patch("reqbot.core.generation.generator.create_agent", return_value=mock_agent):
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError, match="no structured output"):
                await generator.generate("greet", Payload(name="Ada"), Greeting)

    @pytest.mark.asyncio
    async def test_schema_mismatch(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        mock_agent.ainvoke.return_value = {"structured_response": {"wrong": 1}}
        with patch("reqbot.core.generation.generator.create_agent", return_value=mock_agent):
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError) as exc_info:
                await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert "does not match Greeting" in exc_info.value.message
        assert exc_info.value.details["errors"]

    @pytest.mark.asyncio
    async def test_model_construction_failure(
        self, catalog: PromptCatalog, llm_settings: LLMSettings
    ) -> None:
        with patch(
            "reqbot.core.generation.generator.build_chat_model",
            side_effect=ValueError("API key required for Gemini Developer API"),
        ), patch("reqbot.core.generation.generator.create_agent") as mock_create:
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError) as exc_info:
                await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert "API key required" in exc_info.value.message
        assert exc_info.value.details == {"schema": "Greeting", "template_id": "greet"}
        assert isinstance(exc_info.value.__cause__, ValueError)
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_agent_construction_failure_not_cached(
        self, catalog: PromptCatalog, llm_settings: LLMSettings, mock_agent: MagicMock
    ) -> None:
        with patch(
            "reqbot.core.generation.generator.create_agent",
            side_effect=[RuntimeError("provider init failed"), mock_agent],
        ):
            generator = StructuredGenerator(catalog, llm_settings)
            with pytest.raises(GenerationError, match="provider init failed"):
                await generator.generate("greet", Payload(name="Ada"), Greeting)

            result = await generator.generate("greet", Payload(name="Ada"), Greeting)

        assert result == Greeting(text="Hello Ada")


class TestBuildChatModel:
    """Tests for chat model selection."""

    def test_gemini_constructed_with_temperature(self) -> None:
        from reqbot.core.generation import build_chat_model

        settings = LLMSettings(provider="google_genai", model_id="gemini-test", temperature=0.3)
        with patch("reqbot.core.generation.generator.ChatGoogleGenerativeAI") as mock_cls:
            model = build_chat_model(settings)

        mock_cls.assert_called_once_with(model="gemini-test", temperature=0.3)
        assert model is mock_cls.return_value

    def test_other_provider_passed_as_string(self) -> None:
        from reqbot.core.generation import build_chat_model

        assert build_chat_model(LLMSettings(provider="openai", model_id="x")) == "openai:x"
