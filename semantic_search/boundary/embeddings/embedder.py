"""
Embedding provider adapters.

Defines the Embedder protocol consumed by retrieval and ingestion, a
LangChain adapter that satisfies it, and a factory that builds the
configured provider (Gemini or Bedrock).

Dependencies: langchain_core, langchain_google_genai, langchain_aws, semantic_search.configs
System role: Embedding generation adapter
"""

import logging
from typing import Protocol, Sequence, runtime_checkable

from langchain_core.embeddings import Embeddings

from semantic_search.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class Embedder(Protocol):
    """Async text-to-vector capability with a fixed dimensionality."""

    async def embed(self, text: str) -> list[float]:
        """Embed a single query or chunk."""
        ...

    async def embed_many(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed several texts, preserving order."""
        ...


class LangChainEmbedder:
    """Embedder backed by any LangChain ``Embeddings`` implementation."""

    def __init__(self, embeddings: Embeddings, dimension: int | None = None) -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings model (Gemini, Bedrock, fake, ...)
            dimension: Expected vector length (unchecked when None)
        """
        self._embeddings = embeddings
        self._dimension = dimension

    def _check(self, vector: Sequence[float]) -> list[float]:
        if not vector:
            raise ValueError("Embedding provider returned an empty vector")
        if self._dimension is not None and len(vector) != self._dimension:
            raise ValueError(
                f"Embedding provider returned {len(vector)} dimensions, expected {self._dimension}"
            )
        return [float(v) for v in vector]

    async def embed(self, text: str) -> list[float]:
        """
        Embed query text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            ValueError: When the provider returns an empty or wrongly sized vector
        """
        return self._check(await self._embeddings.aembed_query(text))

    async def embed_many(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed document texts in one provider call.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input text, same order

        Raises:
            ValueError: When the provider returns a different number of vectors
        """
        if not texts:
            return []
        vectors = await self._embeddings.aembed_documents(list(texts))
        if len(vectors) != len(texts):
            raise ValueError(
                f"Embedding provider returned {len(vectors)} vectors for {len(texts)} texts"
            )
        return [self._check(vector) for vector in vectors]


def build_embedder(settings: EmbeddingSettings) -> Embedder:
    """
    Build the configured embedding provider.

    Provider SDKs are imported lazily so only the selected one needs
    credentials at startup.

    Args:
        settings: Embedding configuration

    Returns:
        Embedder: Adapter around the provider's LangChain embeddings class

    Raises:
        ValueError: When the provider is unknown or required credentials are missing
    """
    provider = settings.provider.lower()

    if provider == "google":
        if settings.google_api_key is None:
            raise ValueError("EMBEDDING_GOOGLE_API_KEY is required for the google provider")

        from langchain_google_genai import GoogleGenerativeAIEmbeddings

        embeddings = GoogleGenerativeAIEmbeddings(
            model=settings.model,
            google_api_key=settings.google_api_key.get_secret_value(),
        )
    elif provider == "bedrock":
        from langchain_aws import BedrockEmbeddings

        embeddings = BedrockEmbeddings(
            model_id=settings.model,
            region_name=settings.aws_region,
        )
    else:
        raise ValueError(f"Unknown embedding provider: {settings.provider}")

    logger.info(
        f"{__name__}:build_embedder - Initialized provider={provider}, model={settings.model}"
    )
    return LangChainEmbedder(embeddings, dimension=settings.dimension)
