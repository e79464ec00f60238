"""
Prompt catalog for structured generation.

Maps template ids to local mustache ChatPromptTemplates. When the Langfuse
prompt registry is enabled, lookups try the managed version first and fall
back to the local template.

Dependencies: langchain_core.prompts, reqbot.observability.prompt_registry
System role: Template lookup for the generation contract
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel

from reqbot.configs.llm import LLMSettings
from reqbot.core.exceptions import GenerationError
from reqbot.observability.prompt_registry import ModelConfig, PromptRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptEntry:
    """Local template plus the output schema it is written against."""

    template: ChatPromptTemplate
    output_schema: type[BaseModel]


class PromptCatalog:
    """
    Template id -> ChatPromptTemplate lookup with optional registry override.

    Args:
        entries: Local prompt entries keyed by template id
        use_registry: Whether to consult Langfuse before the local template
        label: Optional Langfuse label filter
    """

    def __init__(
        self,
        entries: Mapping[str, PromptEntry],
        use_registry: bool = False,
        label: str | None = None,
    ) -> None:
        self._entries = dict(entries)
        self._use_registry = use_registry
        self._label = label

    @property
    def template_ids(self) -> list[str]:
        """Registered ids in insertion order."""
        return list(self._entries)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._entries

    def get(self, template_id: str) -> ChatPromptTemplate:
        """
        Resolve a template id to a chat template.

        Args:
            template_id: Flow template identifier

        Returns:
            ChatPromptTemplate: Registry version when available, else local

        Raises:
            GenerationError: If the template id is not in the catalog
        """
        entry = self._entries.get(template_id)
        if entry is None:
            raise GenerationError(
                f"Unknown template id: {template_id}",
                template_id=template_id,
            )

        if self._use_registry:
            registry = PromptRegistry()
            if registry.is_enabled:
                try:
                    template = registry.get_chat_template(template_id, label=self._label)
                except Exception as e:
                    logger.warning(
                        f"{__name__}:get - Registry fetch failed for {template_id}, "
                        f"using local template: {type(e).__name__}: {e}"
                    )
                    template = None
                if template is not None:
                    logger.debug("Using prompt from registry: name=%s", template_id)
                    return template
                logger.debug("Prompt not found in registry, using local template")

        return entry.template

    def register_all(
        self,
        settings: LLMSettings,
        labels: list[str] | None = None,
    ) -> list[str]:
        """
        Push every local template to the prompt registry.

        Args:
            settings: LLM settings recorded as each prompt's model config
            labels: Optional labels (defaults to ["development"])

        Returns:
            list[str]: Template ids that were registered; empty when disabled
        """
        registry = PromptRegistry()

        if not registry.is_enabled:
            logger.debug("Prompt registry disabled, skipping registration")
            return []

        registered: list[str] = []
        for template_id, entry in self._entries.items():
            config = ModelConfig.from_llm_settings(
                settings,
                output_schema=entry.output_schema.__name__,
            )
            registry.register_prompt(
                name=template_id,
                template=entry.template,
                config=config,
                labels=labels or ["development"],
            )
            registered.append(template_id)

        logger.info(f"{__name__}:register_all - Registered {len(registered)} prompts")
        return registered
