"""
Pydantic models for prompt registry configuration.

Defines model configuration schema for LLM parameters tracked alongside prompts.

Dependencies: pydantic, reqbot.configs.llm
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field

from reqbot.configs.llm import LLMSettings


class ModelConfig(BaseModel):
    """
    LLM model configuration tracked with prompts.

    Stored alongside each flow prompt in Langfuse so a prompt version can be
    traced back to the model it was written for.

    Attributes:
        model: Provider-qualified model identifier (e.g. "google_genai:gemini-2.5-flash")
        temperature: Sampling temperature (0.0-2.0)
        output_schema: Name of the structured output schema the prompt targets
        extra: Additional model-specific parameters
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    output_schema: str | None = Field(
        default=None,
        description="Structured output schema name",
    )
    extra: dict[str, Any] | None = Field(
        default=None,
        description="Additional model-specific parameters",
    )

    @classmethod
    def from_llm_settings(
        cls,
        settings: LLMSettings,
        output_schema: str | None = None,
    ) -> "ModelConfig":
        """Build a config from the active LLM settings."""
        return cls(
            model=settings.model_name,
            temperature=settings.temperature,
            output_schema=output_schema,
        )

    def to_langfuse_config(self) -> dict[str, Any]:
        """
        Convert to Langfuse config dictionary.

        Returns:
            dict: Configuration dict for Langfuse prompt creation
        """
        config: dict[str, Any] = {"model": self.model}

        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.output_schema is not None:
            config["output_schema"] = self.output_schema
        if self.extra:
            config.update(self.extra)

        return config
