"""
Language model configuration settings.

Settings for the generation oracle behind every ReqBot flow.

Dependencies: pydantic_settings
System role: Model selection and prompt source configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Generation oracle configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google_genai",
        description="LangChain model provider prefix",
    )
    model_id: str = Field(
        default="gemini-2.5-flash",
        description="Model identifier passed to the provider",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    use_prompt_registry: bool = Field(
        default=False,
        description="Fetch prompt templates from Langfuse before falling back to local ones",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Optional Langfuse label filter (e.g. production)",
    )

    @property
    def model_name(self) -> str:
        """Provider-qualified model string, e.g. google_genai:gemini-2.5-flash."""
        return f"{self.provider}:{self.model_id}"
