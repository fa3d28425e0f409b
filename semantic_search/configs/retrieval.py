"""
Retrieval policy settings.

Default top-K and similarity threshold applied when a search request
does not specify them. Both are tuning parameters, not invariants.

Dependencies: pydantic, pydantic_settings
System role: Ranking defaults for the retrieval orchestrator
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from semantic_search.configs.base import BaseSettings


class RetrievalSettings(BaseSettings):
    """Search defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=3, description="Number of chunks returned per search")
    similarity_threshold: float = Field(
        default=0.5,
        description="Minimum cosine similarity for a chunk to be returned",
    )
