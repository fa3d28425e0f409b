"""
Search domain models and schemas.

Request/response schemas for semantic search over stored chunks.

Dependencies: pydantic
System role: Search API contracts
"""

from pydantic import Field

from semantic_search.models.common import CamelModel


class SearchRequest(CamelModel):
    """Request schema for semantic search."""

    query: str = Field(description="User query to embed and match")
    source_ids: list[str] = Field(description="Sources whose chunks are searched")
    top_k: int | None = Field(default=None, description="Maximum results (default from settings)")
    similarity_threshold: float | None = Field(
        default=None,
        description="Minimum cosine similarity (default from settings)",
    )


class SearchResult(CamelModel):
    """Single ranked chunk with attribution."""

    content: str
    relevance: float = Field(description="Cosine similarity to the query")
    source_id: str
    chunk_index: int


class SearchOutcome(CamelModel):
    """Structured results plus the prompt-ready context block."""

    results: list[SearchResult]
    formatted_context: str


class SearchResponse(SearchOutcome):
    """Response schema for semantic search."""

    success: bool = True
