"""
Ingestion settings.

Chunking and embedding batch parameters for turning raw source text
into stored chunks.

Dependencies: pydantic, pydantic_settings
System role: Ingestion pipeline configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from semantic_search.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Chunking and embedding batch configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGEST_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size_tokens: int = Field(default=350, ge=1, description="Target chunk size in tokens")
    chunk_overlap_tokens: int = Field(default=75, ge=0, description="Overlap between chunks in tokens")
    embed_batch_size: int = Field(default=10, ge=1, description="Chunks per embedding provider call")
    batch_delay_seconds: float = Field(
        default=0.2,
        ge=0.0,
        description="Pause between embedding batches to avoid provider throttling",
    )
