"""
Context formatting for language model prompts.

Renders ranked chunks into a single text block with visible chunk
boundaries and relevance percentages.

Dependencies: None
System role: Prompt context assembly
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol, Sequence

NO_CONTEXT_SENTINEL = "No relevant sources found."
NO_DOCUMENTS_SENTINEL = "No documents loaded for search."


class ScoredContent(Protocol):
    """Anything with chunk text and a similarity score."""

    content: str
    similarity: float


def format_chunk(position: int, content: str, similarity: float) -> str:
    """Render one chunk with its 1-based position and relevance percentage."""
    # Halves round away from zero: 0.625 renders as 63%.
    relevance = int(Decimal(similarity * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return (
        f"=== CHUNK {position} (Relevance: {relevance}%) ===\n"
        f"{content}\n"
        f"=== END CHUNK {position} ==="
    )


def format_context(results: Sequence[ScoredContent]) -> str:
    """
    Concatenate ranked results into prompt context.

    Args:
        results: Ranked results, already in the order they should appear

    Returns:
        str: Delimited chunks separated by blank lines, or
        ``NO_CONTEXT_SENTINEL`` when there is nothing to show
    """
    if not results:
        return NO_CONTEXT_SENTINEL

    return "\n\n".join(
        format_chunk(i, result.content, result.similarity)
        for i, result in enumerate(results, start=1)
    )
