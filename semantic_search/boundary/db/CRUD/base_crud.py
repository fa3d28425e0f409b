"""
Base CRUD operations for SQLAlchemy models.

Provides generic bulk insert, lookup, count, and delete operations that
model-specific CRUD classes build on. Methods never commit: the caller
owns the transaction.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from semantic_search.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def insert_many(
        self,
        session: AsyncSession,
        rows: Sequence[Mapping[str, Any]],
    ) -> int:
        """
        Insert rows with a single executemany INSERT.

        Column defaults (ids, timestamps) are applied per row.

        Args:
            session: Async database session
            rows: Mappings of model attribute name to value

        Returns:
            Number of rows submitted
        """
        if not rows:
            return 0
        await session.execute(insert(self.model), list(rows))
        return len(rows)

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_where(
        self,
        session: AsyncSession,
        criteria: Iterable[ColumnElement[bool]],
    ) -> int:
        """
        Count records matching all criteria.

        Args:
            session: Async database session
            criteria: SQL boolean expressions combined with AND

        Returns:
            Number of matching records
        """
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def delete_where(
        self,
        session: AsyncSession,
        criteria: Iterable[ColumnElement[bool]],
    ) -> int:
        """
        Delete records matching all criteria.

        Args:
            session: Async database session
            criteria: SQL boolean expressions combined with AND

        Returns:
            Number of deleted records (0 when nothing matched)
        """
        stmt = (
            delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0
