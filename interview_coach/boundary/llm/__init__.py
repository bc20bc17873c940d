"""
Language model providers.

Exports: EmbeddingClient, GenerationClient, GenerationRequest, GenerationResult, Turn
"""

from .embedding_client import EmbeddingClient, create_embedding_client
from .generation_client import GenerationClient, create_generation_client
from .llm_schemas import GenerationRequest, GenerationResult, Turn

__all__ = [
    "EmbeddingClient",
    "GenerationClient",
    "GenerationRequest",
    "GenerationResult",
    "Turn",
    "create_embedding_client",
    "create_generation_client",
]
