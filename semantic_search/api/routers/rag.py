"""
RAG API endpoints.

Routes:
- POST /rag/search - Semantic search over a set of sources
- POST /rag/embed - Chunk, embed, and store a source's text
- GET /rag/sources/{source_id}/chunks - List a source's stored chunks
- DELETE /rag/sources/{source_id}/chunks - Remove a source's chunks

Authentication happens upstream; these routes trust their caller.

Dependencies: fastapi, semantic_search.application.services, semantic_search.models
System role: Retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from semantic_search.api.deps import (
    get_chunk_store_service,
    get_ingestion_service,
    get_retrieval_service,
)
from semantic_search.api.errors import handle_rag_errors
from semantic_search.application.services import (
    ChunkStoreService,
    IngestionService,
    RetrievalService,
)
from semantic_search.models.chunk import (
    ChunkListResponse,
    ChunkSummary,
    DeleteChunksResponse,
)
from semantic_search.models.common import ErrorResponse
from semantic_search.models.ingest import EmbedRequest, EmbedResponse
from semantic_search.models.search import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/rag",
    tags=["rag"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("/search", response_model=SearchResponse)
@handle_rag_errors("Failed to search documents")
async def search_documents(
    request: SearchRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> SearchResponse:
    """
    Rank the chunks of the given sources against a query.

    Args:
        request: Query, source ids, optional topK and similarityThreshold
        retrieval_service: Injected RetrievalService

    Returns:
        SearchResponse: Attributed results and formatted context

    Example Response:
        {
            "results": [
                {"content": "...", "relevance": 0.91, "sourceId": "s1", "chunkIndex": 4}
            ],
            "formattedContext": "=== CHUNK 1 (Relevance: 91%) ===\\n...",
            "success": true
        }
    """
    outcome = await retrieval_service.search(
        query=request.query,
        source_ids=request.source_ids,
        top_k=request.top_k,
        min_threshold=request.similarity_threshold,
    )
    return SearchResponse(
        results=outcome.results,
        formatted_context=outcome.formatted_context,
    )


@router.post("/embed", response_model=EmbedResponse)
@handle_rag_errors("Failed to generate embeddings")
async def embed_source(
    request: EmbedRequest,
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> EmbedResponse:
    """
    Chunk and embed a source's extracted text, replacing its stored chunks.

    Args:
        request: Source id and raw text
        ingestion_service: Injected IngestionService

    Returns:
        EmbedResponse: Number of chunks stored and total token estimate
    """
    result = await ingestion_service.ingest(request.source_id, request.content)
    return EmbedResponse(
        chunks_count=result.chunks_count,
        tokens_estimate=result.tokens_estimate,
    )


@router.get("/sources/{source_id}/chunks", response_model=ChunkListResponse)
@handle_rag_errors("Failed to load chunks")
async def list_source_chunks(
    source_id: str,
    chunk_store: ChunkStoreService = Depends(get_chunk_store_service),
) -> ChunkListResponse:
    """
    List a source's chunks in chunk_index order, without embeddings.

    Args:
        source_id: Source identifier
        chunk_store: Injected ChunkStoreService

    Returns:
        ChunkListResponse: Chunks and total count
    """
    chunks = await chunk_store.get_chunks(source_id)
    return ChunkListResponse(
        source_id=source_id,
        chunks=[
            ChunkSummary(
                chunk_index=chunk.chunk_index,
                content=chunk.content,
                token_count=chunk.token_count,
                metadata=chunk.metadata,
            )
            for chunk in chunks
        ],
        total=len(chunks),
    )


@router.delete("/sources/{source_id}/chunks", response_model=DeleteChunksResponse)
@handle_rag_errors("Failed to delete chunks")
async def delete_source_chunks(
    source_id: str,
    chunk_store: ChunkStoreService = Depends(get_chunk_store_service),
) -> DeleteChunksResponse:
    """
    Delete every chunk of a source (call when the source itself is deleted).

    Idempotent: returns ``deleted: 0`` for a source with no chunks.

    Args:
        source_id: Source identifier
        chunk_store: Injected ChunkStoreService

    Returns:
        DeleteChunksResponse: Number of removed chunks
    """
    deleted = await chunk_store.delete_chunks(source_id)
    return DeleteChunksResponse(source_id=source_id, deleted=deleted)
