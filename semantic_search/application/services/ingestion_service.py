"""
Ingestion service orchestrator.

Turns a source's raw text into stored chunks: sanitize, split, embed in
batches, and persist through the chunk store in one all-or-nothing write.

Dependencies: semantic_search.core, semantic_search.boundary.embeddings,
    semantic_search.application.services.chunk_store_service
System role: Ingestion orchestration
"""

import asyncio
import logging

from semantic_search.application.services.chunk_store_service import ChunkStoreService
from semantic_search.boundary.embeddings import Embedder
from semantic_search.configs.ingestion import IngestionSettings
from semantic_search.core.exceptions import IngestionError, ValidationError
from semantic_search.core.text_processing import (
    TextChunker,
    estimate_token_count,
    sanitize_text,
)
from semantic_search.models.chunk import ChunkInput
from semantic_search.models.ingest import IngestionResult

logger = logging.getLogger(__name__)


class IngestionService:
    """Chunk, embed, and store source text."""

    def __init__(
        self,
        chunk_store: ChunkStoreService,
        embedder: Embedder,
        settings: IngestionSettings | None = None,
    ) -> None:
        """
        Initialize ingestion service.

        Args:
            chunk_store: Destination for the embedded chunks
            embedder: Chunk embedding capability
            settings: Chunk sizing and batching (env defaults if None)
        """
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.settings = settings or IngestionSettings()
        self._chunker = TextChunker(
            chunk_size_tokens=self.settings.chunk_size_tokens,
            chunk_overlap_tokens=self.settings.chunk_overlap_tokens,
        )

    async def _embed_all(self, source_id: str, texts: list[str]) -> list[list[float]]:
        """Embed texts batch by batch, pausing between batches."""
        batch_size = self.settings.embed_batch_size
        total_batches = (len(texts) + batch_size - 1) // batch_size
        vectors: list[list[float]] = []

        for batch_number, start in enumerate(range(0, len(texts), batch_size), start=1):
            end = min(start + batch_size, len(texts))
            try:
                vectors.extend(await self.embedder.embed_many(texts[start:end]))
            except Exception as e:
                logger.error(
                    f"Failed to embed chunks {start}-{end - 1}",
                    extra={"source_id": source_id, "error": str(e)},
                )
                raise IngestionError(
                    f"Failed to embed chunks {start}-{end - 1}: {e}",
                    source_id=source_id,
                ) from e

            logger.info(
                f"Processed batch {batch_number}/{total_batches} "
                f"(chunks {start + 1}-{end}/{len(texts)})",
                extra={"source_id": source_id},
            )
            if end < len(texts) and self.settings.batch_delay_seconds > 0:
                await asyncio.sleep(self.settings.batch_delay_seconds)

        return vectors

    async def ingest(self, source_id: str, content: str) -> IngestionResult:
        """
        Chunk, embed, and store a source's text.

        Any previous chunks of the source are replaced only if the whole
        new set is stored successfully.

        Args:
            source_id: Source identifier
            content: Raw extracted text

        Returns:
            IngestionResult: Chunk count and total token estimate

        Raises:
            ValidationError: If source_id/content are missing or the text yields no chunks
            IngestionError: If any chunk fails to embed (nothing is stored)
            ChunkStoreError: If persisting the chunks fails (nothing is stored)
        """
        if not isinstance(source_id, str) or not source_id.strip():
            raise ValidationError("Missing sourceId or content", field="sourceId")
        if not isinstance(content, str) or not content:
            raise ValidationError("Missing sourceId or content", field="content")

        sanitized = sanitize_text(content)
        logger.info(
            f"Starting ingestion for source {source_id}",
            extra={"source_id": source_id, "chars": len(content), "sanitized_chars": len(sanitized)},
        )

        # Chunks are re-sanitized; the splitter can leave stray separators at the edges.
        texts = [sanitize_text(piece) for piece in self._chunker.split(sanitized)]
        texts = [text for text in texts if text]
        if not texts:
            raise ValidationError("Content too short to chunk", field="content")

        vectors = await self._embed_all(source_id, texts)

        chunks = [
            ChunkInput(
                content=text,
                embedding=vector,
                token_count=estimate_token_count(text),
                metadata={"chunkIndex": index, "totalChunks": len(texts)},
            )
            for index, (text, vector) in enumerate(zip(texts, vectors))
        ]
        stored = await self.chunk_store.store_chunks(source_id, chunks)
        tokens = sum(chunk.token_count for chunk in chunks)

        logger.info(
            f"Successfully stored {stored} chunks for source {source_id}",
            extra={"source_id": source_id, "tokens_estimate": tokens},
        )
        return IngestionResult(source_id=source_id, chunks_count=stored, tokens_estimate=tokens)
