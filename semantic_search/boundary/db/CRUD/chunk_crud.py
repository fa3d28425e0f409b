"""
Chunk CRUD operations.

Batched inserts and per-source queries for ChunkModel. Ordering is
always (source_id, chunk_index) so downstream ranking sees a
deterministic candidate order.

Dependencies: sqlalchemy, semantic_search.boundary.db.models
System role: Chunk persistence operations
"""

from typing import Any, Collection, Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from semantic_search.boundary.db.CRUD.base_crud import BaseCRUD
from semantic_search.boundary.db.models.chunk_model import ChunkModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """
    CRUD operations for ChunkModel.

    Extends BaseCRUD with source-scoped queries and batched writes.
    """

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def insert_batches(
        self,
        session: AsyncSession,
        rows: Sequence[Mapping[str, Any]],
        batch_size: int,
    ) -> int:
        """
        Insert rows in fixed-size batches on the caller's transaction.

        Batching only bounds statement size. Nothing is committed here, so
        a failure in any batch can be rolled back with the rest.

        Args:
            session: Async database session with an open transaction
            rows: Chunk rows, already carrying source_id and chunk_index
            batch_size: Rows per INSERT statement

        Returns:
            Number of rows inserted
        """
        inserted = 0
        for start in range(0, len(rows), batch_size):
            inserted += await self._insert_batch(session, rows[start:start + batch_size])
        return inserted

    async def _insert_batch(
        self,
        session: AsyncSession,
        batch: Sequence[Mapping[str, Any]],
    ) -> int:
        return await self.insert_many(session, batch)

    async def get_by_source_id(
        self,
        session: AsyncSession,
        source_id: str,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve all chunks for a source ordered by chunk_index.

        Args:
            session: Async database session
            source_id: Owning source identifier

        Returns:
            Sequence of ChunkModels, chunk_index ascending
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.source_id == source_id)
            .order_by(ChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_source_ids(
        self,
        session: AsyncSession,
        source_ids: Collection[str],
    ) -> Sequence[ChunkModel]:
        """
        Retrieve chunks for several sources.

        Args:
            session: Async database session
            source_ids: Source identifiers to load

        Returns:
            Sequence of ChunkModels ordered by (source_id, chunk_index)
        """
        if not source_ids:
            return []
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.source_id.in_(list(source_ids)))
            .order_by(ChunkModel.source_id, ChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_source_id(self, session: AsyncSession, source_id: str) -> int:
        """Count stored chunks for a source."""
        return await self.count_where(session, [ChunkModel.source_id == source_id])

    async def delete_by_source_id(self, session: AsyncSession, source_id: str) -> int:
        """
        Delete every chunk belonging to a source.

        Args:
            session: Async database session
            source_id: Owning source identifier

        Returns:
            Number of deleted chunks (0 if the source had none)
        """
        return await self.delete_where(session, [ChunkModel.source_id == source_id])


chunk_crud = ChunkCRUD()
