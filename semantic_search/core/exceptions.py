"""
Exception hierarchy for the semantic retrieval engine.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class SemanticSearchException(Exception):
    """Base exception for all retrieval engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(SemanticSearchException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DimensionMismatchError(SemanticSearchException):
    """Raised when a candidate embedding and the query differ in length."""

    def __init__(
        self,
        expected: int,
        actual: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Query vector dimensionality
            actual: Offending candidate dimensionality
            details: Additional context (e.g. candidate position)
        """
        details = details or {}
        details.update({"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding dimension mismatch: expected {expected}, got {actual}",
            details,
        )


class RetrievalError(SemanticSearchException):
    """Raised when a search request cannot be completed."""

    def __init__(
        self,
        message: str,
        source_ids: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            source_ids: Sources the failed search targeted
            details: Additional context
        """
        details = details or {}
        if source_ids:
            details["source_ids"] = source_ids
        super().__init__(message, details)


class EmbeddingError(RetrievalError):
    """Raised when the embedding provider fails to embed text."""

    pass


class ChunkStoreError(SemanticSearchException):
    """Raised when chunk persistence operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        source_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunk store error.

        Args:
            message: Error message
            operation: Operation that failed (store, get, delete)
            source_id: Source the operation targeted
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if source_id:
            details["source_id"] = source_id
        super().__init__(message, details)


class IngestionError(SemanticSearchException):
    """Raised when source text cannot be chunked, embedded, and stored."""

    def __init__(
        self,
        message: str,
        source_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            source_id: Source being ingested
            details: Additional context
        """
        details = details or {}
        if source_id:
            details["source_id"] = source_id
        super().__init__(message, details)
