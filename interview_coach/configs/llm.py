"""
Language model provider settings.

Manages Gemini API credentials and model identifiers for the
embedding and generation providers.

Dependencies: pydantic, pydantic_settings
System role: External model provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from interview_coach.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Gemini embedding and generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Google Generative AI API key")
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID; fixes the vector dimensionality of every index",
    )
    generation_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used for questions and transcript feedback",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature for generation")
    max_retries: int = Field(
        default=0,
        description="Provider-level retries; the application itself never retries",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Per-request timeout in seconds (None waits indefinitely)",
    )
