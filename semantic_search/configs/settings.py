"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from semantic_search.configs.base import BaseSettings
from semantic_search.configs.chunk_store import ChunkStoreSettings
from semantic_search.configs.database import DatabaseSettings
from semantic_search.configs.embedding import EmbeddingSettings
from semantic_search.configs.ingestion import IngestionSettings
from semantic_search.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    chunk_store: ChunkStoreSettings = Field(default_factory=ChunkStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from semantic_search.configs import get_settings
        settings = get_settings()
    """
    return Settings()
