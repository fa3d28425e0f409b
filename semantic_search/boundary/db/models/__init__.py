"""
Database models package.

Exports:
  - ChunkModel: Document chunk ORM model

Dependencies: sqlalchemy, semantic_search.boundary.db.base
System role: Database model definitions for domain entities
"""

from semantic_search.boundary.db.models.chunk_model import ChunkModel

__all__ = ["ChunkModel"]
