"""
Chunk store service.

Owns the transaction boundary for chunk persistence. A store call either
makes its whole chunk set visible or none of it: every batch is written
on one transaction that is committed once at the end and rolled back on
any failure. Writes for the same source are serialized in-process; reads
take no lock.

Dependencies: sqlalchemy, semantic_search.boundary.db, semantic_search.core
System role: Chunk store orchestration
"""

import asyncio
import logging
import weakref
from typing import Collection, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from semantic_search.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from semantic_search.boundary.db.models.chunk_model import ChunkModel
from semantic_search.core.exceptions import ChunkStoreError, ValidationError
from semantic_search.models.chunk import ChunkInput, StoredChunk

logger = logging.getLogger(__name__)

_source_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def _source_lock(source_id: str) -> asyncio.Lock:
    """Return the write lock for a source, creating it on first use."""
    lock = _source_locks.get(source_id)
    if lock is None:
        lock = asyncio.Lock()
        _source_locks[source_id] = lock
    return lock


def _to_stored_chunk(row: ChunkModel) -> StoredChunk:
    return StoredChunk(
        source_id=row.source_id,
        chunk_index=row.chunk_index,
        content=row.content,
        embedding=row.embedding,
        token_count=row.token_count,
        metadata=row.chunk_metadata,
    )


class ChunkStoreService:
    """
    Chunk store with all-or-nothing writes per source.

    Storing a source replaces any chunks it already had, inside the same
    transaction, so chunk indexes stay contiguous and a failed re-store
    leaves the previous set untouched.
    """

    def __init__(
        self,
        db: AsyncSession,
        batch_size: int = 10,
        crud: ChunkCRUD | None = None,
    ) -> None:
        """
        Initialize chunk store service.

        Args:
            db: AsyncSession used for every operation
            batch_size: Rows per INSERT statement
            crud: ChunkCRUD implementation (module singleton if None)
        """
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.db = db
        self.batch_size = batch_size
        self._crud = crud or chunk_crud

    @staticmethod
    def _validate(source_id: str, chunks: Sequence[ChunkInput]) -> None:
        if not isinstance(source_id, str) or not source_id.strip():
            raise ValidationError("Missing or invalid sourceId", field="sourceId")

        dimension: int | None = None
        for position, chunk in enumerate(chunks):
            if not chunk.content:
                raise ValidationError(
                    "Chunk content must not be empty",
                    field="content",
                    details={"position": position},
                )
            if chunk.token_count < 0:
                raise ValidationError(
                    "Chunk token count must be non-negative",
                    field="tokenCount",
                    details={"position": position},
                )
            if not chunk.embedding:
                raise ValidationError(
                    "Chunk embedding must not be empty",
                    field="embedding",
                    details={"position": position},
                )
            if dimension is None:
                dimension = len(chunk.embedding)
            elif len(chunk.embedding) != dimension:
                raise ValidationError(
                    "All chunk embeddings must share one dimensionality",
                    field="embedding",
                    details={"position": position, "expected": dimension, "actual": len(chunk.embedding)},
                )

    async def store_chunks(self, source_id: str, chunks: Sequence[ChunkInput]) -> int:
        """
        Persist a source's chunks, assigning chunk_index by input position.

        Args:
            source_id: Owning source identifier
            chunks: Chunks in source order

        Returns:
            int: Number of chunks stored

        Raises:
            ValidationError: If the source id or any chunk is invalid (nothing written)
            ChunkStoreError: If any write fails (nothing from this call is visible)
        """
        self._validate(source_id, chunks)

        rows = [
            {
                "source_id": source_id,
                "chunk_index": index,
                "content": chunk.content,
                "embedding": list(chunk.embedding),
                "token_count": chunk.token_count,
                "chunk_metadata": chunk.metadata,
            }
            for index, chunk in enumerate(chunks)
        ]

        async with _source_lock(source_id):
            try:
                replaced = await self._crud.delete_by_source_id(self.db, source_id)
                stored = await self._crud.insert_batches(self.db, rows, self.batch_size)
                await self.db.commit()
            except Exception as e:
                await self.db.rollback()
                logger.exception(
                    "Failed to store chunks; transaction rolled back",
                    extra={"source_id": source_id, "chunk_count": len(rows)},
                )
                raise ChunkStoreError(
                    f"Failed to store chunks: {e}",
                    operation="store",
                    source_id=source_id,
                ) from e

        logger.info(
            f"Stored {stored} chunks for source {source_id}",
            extra={"source_id": source_id, "stored": stored, "replaced": replaced},
        )
        return stored

    async def get_chunks(self, source_id: str) -> list[StoredChunk]:
        """
        Load a source's chunks ordered by chunk_index.

        Raises:
            ChunkStoreError: If the read fails
        """
        try:
            rows = await self._crud.get_by_source_id(self.db, source_id)
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                f"Failed to load chunks: {e}", operation="get", source_id=source_id
            ) from e
        return [_to_stored_chunk(row) for row in rows]

    async def get_chunks_for_sources(self, source_ids: Collection[str]) -> list[StoredChunk]:
        """
        Load chunks for several sources, ordered by (source_id, chunk_index).

        Args:
            source_ids: Sources to load; duplicates are ignored

        Returns:
            list[StoredChunk]: Chunks tagged with their source id

        Raises:
            ChunkStoreError: If the read fails
        """
        unique_ids = sorted(set(source_ids))
        if not unique_ids:
            return []
        try:
            rows = await self._crud.get_by_source_ids(self.db, unique_ids)
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                f"Failed to load chunks: {e}",
                operation="get",
                details={"source_ids": unique_ids},
            ) from e
        return [_to_stored_chunk(row) for row in rows]

    async def delete_chunks(self, source_id: str) -> int:
        """
        Delete all chunks of a source.

        Idempotent: a source without chunks returns 0.

        Returns:
            int: Number of chunks deleted

        Raises:
            ChunkStoreError: If the delete fails (nothing is removed)
        """
        async with _source_lock(source_id):
            try:
                deleted = await self._crud.delete_by_source_id(self.db, source_id)
                await self.db.commit()
            except SQLAlchemyError as e:
                await self.db.rollback()
                raise ChunkStoreError(
                    f"Failed to delete chunks: {e}", operation="delete", source_id=source_id
                ) from e

        logger.info(
            f"Deleted {deleted} chunks for source {source_id}",
            extra={"source_id": source_id, "deleted": deleted},
        )
        return deleted
