"""API-specific dependencies."""

from .dependencies import (
    get_chunk_store_service,
    get_embedder,
    get_ingestion_service,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chunk_store_service",
    "get_embedder",
    "get_ingestion_service",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
]
