"""
Core business logic module.

Contains the exception hierarchy, the similarity ranker, the context
formatter, and text preparation. Nothing here performs I/O.
"""

from semantic_search.core.exceptions import (
    ChunkStoreError,
    DimensionMismatchError,
    EmbeddingError,
    IngestionError,
    RetrievalError,
    SemanticSearchException,
    ValidationError,
)
from semantic_search.core.context_formatter import (
    NO_CONTEXT_SENTINEL,
    NO_DOCUMENTS_SENTINEL,
    format_context,
)
from semantic_search.core.similarity import (
    Candidate,
    RankedCandidate,
    cosine_similarity,
    rank,
)

__all__ = [
    # Exceptions
    "SemanticSearchException",
    "ValidationError",
    "DimensionMismatchError",
    "RetrievalError",
    "EmbeddingError",
    "ChunkStoreError",
    "IngestionError",
    # Ranking
    "Candidate",
    "RankedCandidate",
    "cosine_similarity",
    "rank",
    # Formatting
    "NO_CONTEXT_SENTINEL",
    "NO_DOCUMENTS_SENTINEL",
    "format_context",
]
