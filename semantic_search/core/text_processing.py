"""
Text preparation for ingestion.

Sanitizes raw source text, splits it into overlapping chunks, and
estimates token counts using a 4-characters-per-token heuristic.

Dependencies: langchain_text_splitters
System role: Chunking stage of the ingestion path
"""

import math

from langchain_text_splitters import RecursiveCharacterTextSplitter

CHARS_PER_TOKEN = 4

# Keep tab, newline and carriage return; drop NUL and other control characters.
_ALLOWED_CONTROL = {"\t", "\n", "\r"}


def sanitize_text(text: str) -> str:
    """Strip NUL bytes and control characters, then trim surrounding whitespace."""
    return "".join(
        ch for ch in text if ch in _ALLOWED_CONTROL or ord(ch) >= 32
    ).strip()


def estimate_token_count(text: str) -> int:
    """Rough token estimate: one token per four characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


class TextChunker:
    """Split text into overlapping chunks sized in approximate tokens."""

    def __init__(self, chunk_size_tokens: int = 350, chunk_overlap_tokens: int = 75) -> None:
        """
        Initialize chunker with token-based sizing.

        Args:
            chunk_size_tokens: Target chunk size in tokens
            chunk_overlap_tokens: Overlap between consecutive chunks in tokens

        Raises:
            ValueError: When overlap is not smaller than chunk size
        """
        if chunk_overlap_tokens >= chunk_size_tokens:
            raise ValueError("chunk_overlap_tokens must be smaller than chunk_size_tokens")

        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size_tokens * CHARS_PER_TOKEN,
            chunk_overlap=chunk_overlap_tokens * CHARS_PER_TOKEN,
            separators=["\n\n", "\n", ". ", "! ", "? ", " ", ""],
            keep_separator="end",
            length_function=len,
        )

    def split(self, text: str) -> list[str]:
        """
        Split text into non-empty, trimmed chunks in document order.

        Args:
            text: Sanitized source text

        Returns:
            list[str]: Chunks; empty list for blank input
        """
        if not text or not text.strip():
            return []
        return [chunk.strip() for chunk in self._splitter.split_text(text) if chunk.strip()]
