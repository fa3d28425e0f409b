"""
Embedding boundary.

Exports:
  - Embedder: Protocol consumed by services
  - LangChainEmbedder: Adapter for LangChain embeddings models
  - build_embedder: Factory for the configured provider
"""

from semantic_search.boundary.embeddings.embedder import (
    Embedder,
    LangChainEmbedder,
    build_embedder,
)

__all__ = ["Embedder", "LangChainEmbedder", "build_embedder"]
