"""
Document chunk ORM model.

One row per contiguous slice of a source's text, with its embedding.
Rows for a source appear and disappear together: they are written in a
single transaction at ingestion and removed in bulk with the source.

Dependencies: sqlalchemy, semantic_search.boundary.db.base
System role: Chunk persistence for retrieval
"""

from typing import Any

from sqlalchemy import JSON, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from semantic_search.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Chunk ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        source_id: Owning source identifier (managed outside this service)
        chunk_index: Zero-based position within the source, gap-free
        content: Chunk text
        embedding: Embedding vector stored as a JSON array of floats
        token_count: Estimated token count (informational)
        chunk_metadata: Optional opaque mapping, stored in the ``metadata`` column
        created_at: Row creation timestamp (UTC)

    Constraints:
        (source_id, chunk_index) is unique
    """

    __tablename__ = "document_chunks"
    __table_args__ = (
        UniqueConstraint("source_id", "chunk_index", name="uq_document_chunks_source_index"),
    )

    source_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    embedding: Mapped[list[float]] = mapped_column(
        JSON,
        nullable=False,
        doc="Embedding vector; JSON floats round-trip exactly",
    )

    token_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    chunk_metadata: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata",
        JSON,
        nullable=True,
    )
