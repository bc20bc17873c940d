"""
Interview behaviour settings.

Chunking, retrieval and conversation-window parameters for the
interview loop, plus document acquisition limits.

Dependencies: pydantic, pydantic_settings
System role: Interview pipeline configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from interview_coach.configs.base import BaseSettings


class InterviewSettings(BaseSettings):
    """Interview pipeline configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INTERVIEW_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, description="Chunk window size in characters")
    chunk_overlap: int = Field(default=100, description="Characters shared by consecutive chunks")
    retrieval_top_k: int = Field(default=3, description="Chunks retrieved per question")
    history_window: int = Field(
        default=4,
        description="Most recent messages supplied to the model as conversation context",
    )
    default_user_email: str = Field(
        default="testuser@example.com",
        description="Owner of every session until authentication exists",
    )
    job_fetch_timeout: float = Field(default=15.0, description="Job page fetch timeout in seconds")
    max_resume_bytes: int = Field(default=10 * 1024 * 1024, description="Resume upload size limit")
