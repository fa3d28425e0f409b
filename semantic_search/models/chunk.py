"""
Chunk domain models.

ChunkInput is what callers hand to the chunk store; StoredChunk is what
comes back out. chunk_index is assigned by the store, never by callers.

Dependencies: pydantic
System role: Chunk data structures
"""

from typing import Any

from pydantic import Field

from semantic_search.models.common import CamelModel


class ChunkInput(CamelModel):
    """Chunk to persist for a source, in source order."""

    content: str = Field(description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector")
    token_count: int = Field(default=0, description="Estimated token count")
    metadata: dict[str, Any] | None = Field(default=None, description="Opaque chunk metadata")


class StoredChunk(CamelModel):
    """Chunk as persisted by the chunk store."""

    source_id: str = Field(description="Owning source identifier")
    chunk_index: int = Field(description="Zero-based position within the source")
    content: str = Field(description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector")
    token_count: int = Field(description="Estimated token count")
    metadata: dict[str, Any] | None = Field(default=None, description="Opaque chunk metadata")


class ChunkSummary(CamelModel):
    """Stored chunk without its embedding, for listings."""

    chunk_index: int
    content: str
    token_count: int
    metadata: dict[str, Any] | None = None


class ChunkListResponse(CamelModel):
    """Chunks stored for a source."""

    success: bool = True
    source_id: str
    chunks: list[ChunkSummary]
    total: int


class DeleteChunksResponse(CamelModel):
    """Result of deleting a source's chunks."""

    success: bool = True
    source_id: str
    deleted: int = Field(description="Number of chunks removed (0 if none existed)")
