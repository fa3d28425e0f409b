"""
Retrieval service orchestrator.

Coordinates a search request: validate, embed the query, load candidate
chunks, rank them, and format the winners as prompt context.

Dependencies: semantic_search.core, semantic_search.boundary.embeddings,
    semantic_search.application.services.chunk_store_service
System role: Retrieval orchestration
"""

import logging
from typing import Any, Callable

from semantic_search.application.services.chunk_store_service import ChunkStoreService
from semantic_search.boundary.embeddings import Embedder
from semantic_search.configs.retrieval import RetrievalSettings
from semantic_search.core.context_formatter import (
    NO_CONTEXT_SENTINEL,
    NO_DOCUMENTS_SENTINEL,
    format_context,
)
from semantic_search.core.exceptions import EmbeddingError, ValidationError
from semantic_search.core.similarity import Candidate, rank
from semantic_search.models.search import SearchOutcome, SearchResult

logger = logging.getLogger(__name__)

ChunkKey = tuple[str, int]


class RetrievalService:
    """
    Semantic search over stored chunks.

    Each candidate carries its (source_id, chunk_index) through ranking,
    so results are attributed exactly even when two chunks share content.
    """

    def __init__(
        self,
        chunk_store: ChunkStoreService,
        embedder: Embedder | None = None,
        settings: RetrievalSettings | None = None,
        embedder_provider: Callable[[], Embedder] | None = None,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            chunk_store: Chunk store to load candidates from
            embedder: Query embedding capability
            embedder_provider: Builds the embedder on first use; lets searches
                that never embed (no source ids) skip provider setup
            settings: Default top_k / similarity threshold (env defaults if None)
        """
        self.chunk_store = chunk_store
        if embedder is None and embedder_provider is None:
            raise ValueError("Either embedder or embedder_provider is required")
        self.embedder = embedder
        self._embedder_provider = embedder_provider
        self.settings = settings or RetrievalSettings()

    def _get_embedder(self) -> Embedder:
        if self.embedder is None:
            self.embedder = self._embedder_provider()
        return self.embedder

    @staticmethod
    def _validate(query: Any, source_ids: Any) -> list[str]:
        """Check request shape and return de-duplicated, sorted source ids."""
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("Missing or invalid query", field="query")
        if source_ids is None or not isinstance(source_ids, (list, tuple, set, frozenset)):
            raise ValidationError("Missing or invalid sourceIds", field="sourceIds")
        for source_id in source_ids:
            if not isinstance(source_id, str) or not source_id:
                raise ValidationError(
                    "sourceIds must contain non-empty strings",
                    field="sourceIds",
                )
        return sorted(set(source_ids))

    async def search(
        self,
        query: str,
        source_ids: list[str],
        top_k: int | None = None,
        min_threshold: float | None = None,
    ) -> SearchOutcome:
        """
        Find the chunks most relevant to a query.

        Steps:
        1. Validate query and source ids
        2. Short-circuit when no sources are given
        3. Embed the query
        4. Load chunks for the sources in (source_id, chunk_index) order
        5. Short-circuit when the sources have no chunks
        6. Rank by cosine similarity with threshold and top-K
        7. Format the ranked chunks as prompt context

        Args:
            query: User query text
            source_ids: Sources to search
            top_k: Maximum results (settings default if None)
            min_threshold: Minimum similarity (settings default if None)

        Returns:
            SearchOutcome: Attributed results and formatted context

        Raises:
            ValidationError: If query or source_ids are malformed
            EmbeddingError: If the query cannot be embedded
            ChunkStoreError: If chunks cannot be loaded
            DimensionMismatchError: If stored embeddings do not match the query's size
        """
        unique_ids = self._validate(query, source_ids)
        top_k = self.settings.top_k if top_k is None else top_k
        min_threshold = (
            self.settings.similarity_threshold if min_threshold is None else min_threshold
        )

        if not unique_ids:
            return SearchOutcome(results=[], formatted_context=NO_CONTEXT_SENTINEL)

        logger.info(
            f"Search query received for {len(unique_ids)} sources",
            extra={"source_count": len(unique_ids), "top_k": top_k, "threshold": min_threshold},
        )

        embedder = self._get_embedder()
        try:
            query_embedding = await embedder.embed(query)
        except Exception as e:
            logger.error(
                "Failed to embed query",
                extra={"source_ids": unique_ids, "error": str(e)},
            )
            raise EmbeddingError(f"Failed to embed query: {e}", source_ids=unique_ids) from e

        chunks = await self.chunk_store.get_chunks_for_sources(unique_ids)
        if not chunks:
            logger.info("No chunks found for specified sources", extra={"source_ids": unique_ids})
            return SearchOutcome(results=[], formatted_context=NO_DOCUMENTS_SENTINEL)

        chunks.sort(key=lambda c: (c.source_id, c.chunk_index))
        candidates: list[Candidate[ChunkKey]] = [
            Candidate(
                content=chunk.content,
                embedding=chunk.embedding,
                payload=(chunk.source_id, chunk.chunk_index),
            )
            for chunk in chunks
        ]

        ranked = rank(query_embedding, candidates, top_k, min_threshold)
        logger.info(
            f"Found {len(ranked)} relevant chunks out of {len(candidates)} above threshold {min_threshold}",
            extra={"candidates": len(candidates), "matched": len(ranked)},
        )

        results = [
            SearchResult(
                content=item.content,
                relevance=item.similarity,
                source_id=item.payload[0],
                chunk_index=item.payload[1],
            )
            for item in ranked
        ]
        return SearchOutcome(results=results, formatted_context=format_context(ranked))
