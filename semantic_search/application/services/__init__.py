"""
Application services.

Exports:
  - ChunkStoreService: Transactional chunk persistence
  - RetrievalService: Search orchestration
  - IngestionService: Chunk/embed/store orchestration
"""

from semantic_search.application.services.chunk_store_service import ChunkStoreService
from semantic_search.application.services.ingestion_service import IngestionService
from semantic_search.application.services.retrieval_service import RetrievalService

__all__ = [
    "ChunkStoreService",
    "IngestionService",
    "RetrievalService",
]
