"""
Structured generation contract.

Turns a template id, a typed input payload and an output schema into a
validated instance of that schema, or a GenerationError. The oracle is a
LangChain v1 agent built with create_agent and a ToolStrategy response
format, so the model is constrained to the schema at the tool-call level.

Dependencies: langchain.agents, langchain_google_genai, reqbot.core.generation
System role: Single boundary between ReqBot flows and the language model
"""

import logging
from typing import Any, TypeVar

from langchain.agents import create_agent
from langchain.agents.structured_output import ToolStrategy
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from reqbot.configs.llm import LLMSettings
from reqbot.core.exceptions import GenerationError
from reqbot.core.generation.prompt_catalog import PromptCatalog

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def build_chat_model(settings: LLMSettings) -> BaseChatModel | str:
    """
    Build the chat model handed to create_agent.

    Gemini models are constructed directly so temperature is honored; any
    other provider is passed through as a "provider:model" string.
    """
    if settings.provider == "google_genai":
        return ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
        )
    return settings.model_name


class StructuredGenerator:
    """
    Schema-constrained generation over a prompt catalog.

    One agent is built per output schema on first use and reused for every
    later call with that schema. Results are never cached and failures are
    never retried.
    """

    def __init__(self, catalog: PromptCatalog, settings: LLMSettings) -> None:
        """
        Initialize generator.

        Args:
            catalog: Template lookup
            settings: Model selection for the oracle
        """
        self._catalog = catalog
        self._settings = settings
        self._model: BaseChatModel | str | None = None
        self._agents: dict[type[BaseModel], Any] = {}

    def _get_agent(self, output_schema: type[BaseModel]) -> Any:
        agent = self._agents.get(output_schema)
        if agent is None:
            if self._model is None:
                self._model = build_chat_model(self._settings)
            agent = create_agent(
                model=self._model,
                tools=[],
                response_format=ToolStrategy(output_schema),
            )
            self._agents[output_schema] = agent
            logger.debug(f"{__name__}:_get_agent - Built agent for {output_schema.__name__}")
        return agent

    async def generate(
        self,
        template_id: str,
        payload: BaseModel,
        output_schema: type[SchemaT],
    ) -> SchemaT:
        """
        Invoke the oracle and return a schema-conforming value.

        Args:
            template_id: Catalog template to render
            payload: Input model whose JSON-mode dump fills the template
            output_schema: Pydantic model the response must conform to

        Returns:
            SchemaT: Validated instance of output_schema

        Raises:
            GenerationError: Unknown template, render failure, oracle failure,
                missing output or schema mismatch
        """
        schema_name = output_schema.__name__
        logger.info(f"{__name__}:generate - START template_id={template_id}, schema={schema_name}")

        template = self._catalog.get(template_id)

        try:
            messages = template.format_messages(**payload.model_dump(mode="json"))
        except (KeyError, ValueError) as e:
            raise GenerationError(
                f"Failed to render prompt: {e}",
                template_id=template_id,
                details={"schema": schema_name},
            ) from e

        try:
            agent = self._get_agent(output_schema)
        except Exception as e:
            logger.error(f"{__name__}:generate - Oracle setup failed: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Generation model unavailable: {e}",
                template_id=template_id,
                details={"schema": schema_name},
            ) from e

        try:
            result = await agent.ainvoke({"messages": messages})
        except Exception as e:
            logger.error(f"{__name__}:generate - Oracle failed: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Generation failed: {e}",
                template_id=template_id,
                details={"schema": schema_name},
            ) from e

        structured = result.get("structured_response") if isinstance(result, dict) else None
        if structured is None:
            logger.error(f"{__name__}:generate - No structured response for {template_id}")
            raise GenerationError(
                "Model returned no structured output",
                template_id=template_id,
                details={"schema": schema_name},
            )

        if isinstance(structured, output_schema):
            value = structured
        else:
            try:
                data = structured.model_dump() if isinstance(structured, BaseModel) else structured
                value = output_schema.model_validate(data)
            except PydanticValidationError as e:
                logger.error(f"{__name__}:generate - Schema mismatch for {template_id}: {e}")
                raise GenerationError(
                    f"Model output does not match {schema_name}",
                    template_id=template_id,
                    details={"schema": schema_name, "errors": e.errors(include_url=False)},
                ) from e

        logger.info(f"{__name__}:generate - END template_id={template_id}")
        return value
