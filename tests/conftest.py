"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, deterministic embedder, chunk store
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Sequence
from unittest.mock import AsyncMock

import pytest


class StaticEmbedder:
    """
    Embedder double returning preset vectors.

    Texts without a preset vector get ``default`` (or raise KeyError
    when no default is configured).
    """

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        default: list[float] | None = None,
    ) -> None:
        self.vectors = dict(vectors or {})
        self.default = default
        self.calls: list[str] = []

    def _lookup(self, text: str) -> list[float]:
        self.calls.append(text)
        if text in self.vectors:
            return list(self.vectors[text])
        if self.default is None:
            raise KeyError(text)
        return list(self.default)

    async def embed(self, text: str) -> list[float]:
        return self._lookup(text)

    async def embed_many(self, texts: Sequence[str]) -> list[list[float]]:
        return [self._lookup(text) for text in texts]


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from semantic_search.boundary.db.base import Base
    import semantic_search.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def chunk_store(test_async_db):
    """Provide ChunkStoreService bound to the in-memory database."""
    from semantic_search.application.services.chunk_store_service import ChunkStoreService

    return ChunkStoreService(db=test_async_db, batch_size=10)


@pytest.fixture
def static_embedder() -> StaticEmbedder:
    """Provide an embedder double with no preset vectors."""
    return StaticEmbedder()


@pytest.fixture
def mock_retrieval_service():
    """
    Create mock RetrievalService for router tests.

    Returns:
        AsyncMock: Mocked RetrievalService
    """
    service = AsyncMock()
    service.search = AsyncMock()
    return service


@pytest.fixture
def mock_ingestion_service():
    """
    Create mock IngestionService for router tests.

    Returns:
        AsyncMock: Mocked IngestionService
    """
    service = AsyncMock()
    service.ingest = AsyncMock()
    return service


@pytest.fixture
def mock_chunk_store():
    """
    Create mock ChunkStoreService for router tests.

    Returns:
        AsyncMock: Mocked ChunkStoreService
    """
    service = AsyncMock()
    service.get_chunks = AsyncMock(return_value=[])
    service.delete_chunks = AsyncMock(return_value=0)
    return service
