"""
Test suite for ChunkCRUD source-scoped operations.

Runs against in-memory SQLite to verify batching, ordering, and the
(source_id, chunk_index) uniqueness constraint.

System role: Verification of chunk persistence queries
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from semantic_search.boundary.db.CRUD.chunk_crud import ChunkCRUD
from semantic_search.boundary.db.models.chunk_model import ChunkModel


def _rows(source_id: str, count: int) -> list[dict]:
    return [
        {
            "source_id": source_id,
            "chunk_index": index,
            "content": f"{source_id} chunk {index}",
            "embedding": [0.5, float(index)],
            "token_count": index,
            "chunk_metadata": {"chunkIndex": index},
        }
        for index in range(count)
    ]


class RecordingChunkCRUD(ChunkCRUD):
    """ChunkCRUD that records the size of each inserted batch."""

    def __init__(self) -> None:
        super().__init__()
        self.batch_sizes: list[int] = []

    async def _insert_batch(self, session, batch):
        self.batch_sizes.append(len(batch))
        return await super()._insert_batch(session, batch)


@pytest.fixture
def crud() -> RecordingChunkCRUD:
    """Provide a batch-recording ChunkCRUD."""
    return RecordingChunkCRUD()


class TestChunkCRUDInsertBatches:
    """Test suite for ChunkCRUD.insert_batches()."""

    async def test_insert_batches_should_split_rows_by_batch_size(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test 25 rows with batch size 10 go out as 10, 10, 5."""
        # Act
        inserted = await crud.insert_batches(test_async_db, _rows("s1", 25), batch_size=10)

        # Assert
        assert inserted == 25
        assert crud.batch_sizes == [10, 10, 5]
        assert await crud.count_by_source_id(test_async_db, "s1") == 25

    async def test_insert_batches_should_handle_empty_rows(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test no rows means no statements."""
        assert await crud.insert_batches(test_async_db, [], batch_size=10) == 0
        assert crud.batch_sizes == []

    async def test_duplicate_chunk_index_should_violate_constraint(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test (source_id, chunk_index) cannot be stored twice."""
        await crud.insert_batches(test_async_db, _rows("s1", 2), batch_size=10)

        with pytest.raises(IntegrityError):
            await crud.insert_batches(test_async_db, _rows("s1", 1), batch_size=10)


class TestChunkCRUDQueries:
    """Test suite for ChunkCRUD read and delete operations."""

    async def test_get_by_source_id_should_order_by_chunk_index(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test rows come back in chunk_index order regardless of insert order."""
        # Arrange
        await crud.insert_batches(test_async_db, list(reversed(_rows("s1", 4))), batch_size=2)
        await crud.insert_batches(test_async_db, _rows("s2", 2), batch_size=2)

        # Act
        chunks = await crud.get_by_source_id(test_async_db, "s1")

        # Assert
        assert [c.chunk_index for c in chunks] == [0, 1, 2, 3]
        assert all(c.source_id == "s1" for c in chunks)
        assert chunks[2].embedding == [0.5, 2.0]
        assert chunks[2].chunk_metadata == {"chunkIndex": 2}

    async def test_get_by_source_ids_should_order_by_source_then_index(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test multi-source reads are ordered by (source_id, chunk_index)."""
        # Arrange
        await crud.insert_batches(test_async_db, _rows("b", 2), batch_size=10)
        await crud.insert_batches(test_async_db, _rows("a", 2), batch_size=10)
        await crud.insert_batches(test_async_db, _rows("c", 1), batch_size=10)

        # Act
        chunks = await crud.get_by_source_ids(test_async_db, ["b", "a"])

        # Assert
        assert [(c.source_id, c.chunk_index) for c in chunks] == [
            ("a", 0),
            ("a", 1),
            ("b", 0),
            ("b", 1),
        ]

    async def test_get_by_source_ids_should_return_empty_for_no_ids(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test empty id list short-circuits."""
        assert await crud.get_by_source_ids(test_async_db, []) == []

    async def test_delete_by_source_id_should_only_remove_that_source(
        self, crud: RecordingChunkCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test delete is scoped to one source."""
        # Arrange
        await crud.insert_batches(test_async_db, _rows("s1", 3), batch_size=10)
        await crud.insert_batches(test_async_db, _rows("s2", 2), batch_size=10)

        # Act
        deleted = await crud.delete_by_source_id(test_async_db, "s1")

        # Assert
        assert deleted == 3
        assert await crud.count_by_source_id(test_async_db, "s1") == 0
        assert await crud.count_by_source_id(test_async_db, "s2") == 2


class TestChunkModelSchema:
    """Test suite for the document_chunks table layout."""

    def test_table_should_only_record_creation_time(self) -> None:
        """Test chunks carry created_at and no update timestamp."""
        columns = set(ChunkModel.__table__.columns.keys())

        assert "created_at" in columns
        assert "updated_at" not in columns
