"""
Ingestion domain models and schemas.

Request/response schemas for embedding a source's text.

Dependencies: pydantic
System role: Ingestion API contracts
"""

from pydantic import Field

from semantic_search.models.common import CamelModel


class EmbedRequest(CamelModel):
    """Request schema for chunking and embedding a source."""

    source_id: str = Field(description="Source the text belongs to")
    content: str = Field(description="Raw extracted text of the source")


class IngestionResult(CamelModel):
    """Outcome of ingesting one source."""

    source_id: str
    chunks_count: int
    tokens_estimate: int


class EmbedResponse(CamelModel):
    """Response schema for source embedding."""

    success: bool = True
    chunks_count: int
    tokens_estimate: int
