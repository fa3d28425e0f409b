"""
Chunk store settings.

Dependencies: pydantic, pydantic_settings
System role: Write batching for chunk persistence
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from semantic_search.configs.base import BaseSettings


class ChunkStoreSettings(BaseSettings):
    """Chunk persistence configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNK_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    batch_size: int = Field(
        default=10,
        ge=1,
        description="Rows per INSERT statement; all batches share one transaction",
    )
