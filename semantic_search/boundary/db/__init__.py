"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - ChunkModel: Stored chunk entity
  - BaseCRUD, ChunkCRUD, chunk_crud: CRUD classes and singleton

Dependencies: sqlalchemy, semantic_search.configs
System role: Database adapter providing persistent storage for chunks
"""

from semantic_search.boundary.db.base import Base, TimestampMixin, UUIDMixin
from semantic_search.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from semantic_search.boundary.db.models.chunk_model import ChunkModel
from semantic_search.boundary.db.CRUD import BaseCRUD, ChunkCRUD, chunk_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChunkModel",
    # CRUD
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
]
