"""Pydantic models for chunks, search, and ingestion."""

from semantic_search.models.chunk import (
    ChunkInput,
    ChunkListResponse,
    ChunkSummary,
    DeleteChunksResponse,
    StoredChunk,
)
from semantic_search.models.common import CamelModel, ErrorResponse
from semantic_search.models.ingest import EmbedRequest, EmbedResponse, IngestionResult
from semantic_search.models.search import (
    SearchOutcome,
    SearchRequest,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "ChunkInput",
    "StoredChunk",
    "ChunkSummary",
    "ChunkListResponse",
    "DeleteChunksResponse",
    "SearchRequest",
    "SearchResult",
    "SearchOutcome",
    "SearchResponse",
    "EmbedRequest",
    "EmbedResponse",
    "IngestionResult",
]
