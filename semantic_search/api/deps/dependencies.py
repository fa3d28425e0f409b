"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, semantic_search.configs, semantic_search.application, semantic_search.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from semantic_search.application.services import (
    ChunkStoreService,
    IngestionService,
    RetrievalService,
)
from semantic_search.boundary.db import get_async_db
from semantic_search.boundary.embeddings import Embedder, build_embedder
from semantic_search.configs import Settings, get_settings
from semantic_search.core.exceptions import EmbeddingError


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._embedder: Embedder | None = None

    @property
    def embedder(self) -> Embedder:
        """Get cached embedder, building the configured provider on first use."""
        if self._embedder is None:
            try:
                self._embedder = build_embedder(get_settings().embedding)
            except ValueError as e:
                raise EmbeddingError(f"Embedding provider unavailable: {e}") from e
        return self._embedder

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedder = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_embedder() -> Embedder:
    """
    Get the process-wide embedder.

    Returns:
        Embedder: Configured embedding provider adapter
    """
    return get_service_cache().embedder


def get_chunk_store_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> ChunkStoreService:
    """
    Get chunk store service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ChunkStoreService: Chunk store bound to the request's session
    """
    return ChunkStoreService(db=db, batch_size=settings.chunk_store.batch_size)


def get_retrieval_service(
    chunk_store: ChunkStoreService = Depends(get_chunk_store_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RetrievalService:
    """
    Get retrieval service instance.

    The embedder is resolved only when a search actually embeds a query,
    so searches over no sources succeed even without a usable provider.

    Returns:
        RetrievalService: Search orchestrator for the request
    """
    return RetrievalService(
        chunk_store=chunk_store,
        settings=settings.retrieval,
        embedder_provider=get_embedder,
    )


def get_ingestion_service(
    chunk_store: ChunkStoreService = Depends(get_chunk_store_service),
    embedder: Embedder = Depends(get_embedder),
    settings: Settings = Depends(get_settings_dependency),
) -> IngestionService:
    """
    Get ingestion service instance.

    Returns:
        IngestionService: Chunk/embed/store orchestrator for the request
    """
    return IngestionService(
        chunk_store=chunk_store,
        embedder=embedder,
        settings=settings.ingestion,
    )
