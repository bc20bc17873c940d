"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_analysis_runner,
    get_analysis_service,
    get_embedding_client,
    get_generation_client,
    get_interview_service,
    get_service_cache,
    get_session_factory,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_analysis_runner",
    "get_analysis_service",
    "get_embedding_client",
    "get_generation_client",
    "get_interview_service",
    "get_service_cache",
    "get_session_factory",
    "get_session_service",
    "get_settings_dependency",
]
