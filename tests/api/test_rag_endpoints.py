"""
Test suite for the RAG HTTP endpoints.

Services are replaced through dependency_overrides; these tests check
wire shapes (camelCase), status codes, and the ``{"error": ...}`` body.
"""

import pytest
from fastapi.testclient import TestClient

from semantic_search.api.deps import dependencies
from semantic_search.api.deps.dependencies import (
    get_chunk_store_service,
    get_ingestion_service,
    get_retrieval_service,
)
from semantic_search.api.main import create_app
from semantic_search.configs import Settings
from semantic_search.configs.embedding import EmbeddingSettings
from semantic_search.core.exceptions import (
    ChunkStoreError,
    DimensionMismatchError,
    EmbeddingError,
    IngestionError,
    ValidationError,
)
from semantic_search.models.chunk import StoredChunk
from semantic_search.models.ingest import IngestionResult
from semantic_search.models.search import SearchOutcome, SearchResult


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def search_client(client, mock_retrieval_service):
    client.app.dependency_overrides[get_retrieval_service] = lambda: mock_retrieval_service
    return client


@pytest.fixture
def embed_client(client, mock_ingestion_service):
    client.app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service
    return client


@pytest.fixture
def chunks_client(client, mock_chunk_store):
    client.app.dependency_overrides[get_chunk_store_service] = lambda: mock_chunk_store
    return client


def test_search_returns_results_and_context(search_client, mock_retrieval_service):
    mock_retrieval_service.search.return_value = SearchOutcome(
        results=[SearchResult(content="chunk0", relevance=1.0, source_id="s1", chunk_index=0)],
        formatted_context="=== CHUNK 1 (Relevance: 100%) ===\nchunk0\n=== END CHUNK 1 ===",
    )

    response = search_client.post(
        "/api/v1/rag/search",
        json={"query": "photosynthesis", "sourceIds": ["s1"], "topK": 2, "similarityThreshold": 0.4},
    )

    assert response.status_code == 200
    assert response.json() == {
        "results": [{"content": "chunk0", "relevance": 1.0, "sourceId": "s1", "chunkIndex": 0}],
        "formattedContext": "=== CHUNK 1 (Relevance: 100%) ===\nchunk0\n=== END CHUNK 1 ===",
        "success": True,
    }
    mock_retrieval_service.search.assert_awaited_once_with(
        query="photosynthesis", source_ids=["s1"], top_k=2, min_threshold=0.4
    )


def test_search_passes_none_for_omitted_options(search_client, mock_retrieval_service):
    mock_retrieval_service.search.return_value = SearchOutcome(
        results=[], formatted_context="No relevant sources found."
    )

    response = search_client.post("/api/v1/rag/search", json={"query": "q", "sourceIds": []})

    assert response.status_code == 200
    assert response.json()["formattedContext"] == "No relevant sources found."
    mock_retrieval_service.search.assert_awaited_once_with(
        query="q", source_ids=[], top_k=None, min_threshold=None
    )


def test_search_validation_error_returns_400(search_client, mock_retrieval_service):
    mock_retrieval_service.search.side_effect = ValidationError(
        "Missing or invalid query", field="query"
    )

    response = search_client.post("/api/v1/rag/search", json={"query": " ", "sourceIds": ["s1"]})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing or invalid query"}


@pytest.mark.parametrize(
    "body, field",
    [
        ({"sourceIds": ["s1"]}, "query"),
        ({"query": "q"}, "sourceIds"),
        ({"query": "q", "sourceIds": "s1"}, "sourceIds"),
    ],
)
def test_search_malformed_body_returns_400(search_client, body, field):
    response = search_client.post("/api/v1/rag/search", json=body)

    assert response.status_code == 400
    assert field in response.json()["error"]


@pytest.mark.parametrize(
    "exc",
    [
        EmbeddingError("Failed to embed query: timeout"),
        DimensionMismatchError(expected=768, actual=3),
        ChunkStoreError("Failed to load chunks: gone", operation="get"),
    ],
)
def test_search_domain_failure_returns_500(search_client, mock_retrieval_service, exc):
    mock_retrieval_service.search.side_effect = exc

    response = search_client.post("/api/v1/rag/search", json={"query": "q", "sourceIds": ["s1"]})

    assert response.status_code == 500
    assert response.json() == {"error": exc.message}


def test_search_unexpected_failure_returns_fallback_message(search_client, mock_retrieval_service):
    mock_retrieval_service.search.side_effect = RuntimeError("boom")

    response = search_client.post("/api/v1/rag/search", json={"query": "q", "sourceIds": ["s1"]})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to search documents"}


def test_embed_returns_counts(embed_client, mock_ingestion_service):
    mock_ingestion_service.ingest.return_value = IngestionResult(
        source_id="s1", chunks_count=4, tokens_estimate=1200
    )

    response = embed_client.post("/api/v1/rag/embed", json={"sourceId": "s1", "content": "text"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "chunksCount": 4, "tokensEstimate": 1200}
    mock_ingestion_service.ingest.assert_awaited_once_with("s1", "text")


def test_embed_validation_error_returns_400(embed_client, mock_ingestion_service):
    mock_ingestion_service.ingest.side_effect = ValidationError("Missing sourceId or content")

    response = embed_client.post("/api/v1/rag/embed", json={"sourceId": "s1", "content": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing sourceId or content"}


def test_embed_ingestion_error_returns_500(embed_client, mock_ingestion_service):
    mock_ingestion_service.ingest.side_effect = IngestionError(
        "Failed to embed chunks 0-9: quota", source_id="s1"
    )

    response = embed_client.post("/api/v1/rag/embed", json={"sourceId": "s1", "content": "x"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to embed chunks 0-9: quota"}


def test_embed_unexpected_failure_returns_fallback_message(embed_client, mock_ingestion_service):
    mock_ingestion_service.ingest.side_effect = RuntimeError("boom")

    response = embed_client.post("/api/v1/rag/embed", json={"sourceId": "s1", "content": "x"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate embeddings"}


def test_list_chunks_omits_embeddings(chunks_client, mock_chunk_store):
    mock_chunk_store.get_chunks.return_value = [
        StoredChunk(
            source_id="s1",
            chunk_index=0,
            content="first",
            embedding=[0.1, 0.2],
            token_count=2,
            metadata={"chunkIndex": 0, "totalChunks": 1},
        )
    ]

    response = chunks_client.get("/api/v1/rag/sources/s1/chunks")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "sourceId": "s1",
        "chunks": [
            {
                "chunkIndex": 0,
                "content": "first",
                "tokenCount": 2,
                "metadata": {"chunkIndex": 0, "totalChunks": 1},
            }
        ],
        "total": 1,
    }


def test_delete_chunks_is_idempotent(chunks_client, mock_chunk_store):
    mock_chunk_store.delete_chunks.return_value = 0

    response = chunks_client.delete("/api/v1/rag/sources/missing/chunks")

    assert response.status_code == 200
    assert response.json() == {"success": True, "sourceId": "missing", "deleted": 0}
    mock_chunk_store.delete_chunks.assert_awaited_once_with("missing")


def test_delete_chunks_failure_returns_500(chunks_client, mock_chunk_store):
    mock_chunk_store.delete_chunks.side_effect = ChunkStoreError(
        "Failed to delete chunks: locked", operation="delete", source_id="s1"
    )

    response = chunks_client.delete("/api/v1/rag/sources/s1/chunks")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete chunks: locked"}


def test_correlation_id_is_echoed(search_client, mock_retrieval_service):
    mock_retrieval_service.search.return_value = SearchOutcome(results=[], formatted_context="x")

    response = search_client.post(
        "/api/v1/rag/search",
        json={"query": "q", "sourceIds": []},
        headers={"X-Correlation-ID": "req-123"},
    )

    assert response.headers["X-Correlation-ID"] == "req-123"


@pytest.fixture
def unconfigured_client(client, mock_chunk_store, monkeypatch):
    """Client using the real embedder wiring with no Google API key configured."""
    settings = Settings(
        embedding=EmbeddingSettings(provider="google", google_api_key=None, _env_file=None)
    )
    monkeypatch.setattr(dependencies, "get_settings", lambda: settings)
    monkeypatch.setattr(dependencies, "_service_cache", dependencies.ServiceCache())
    client.app.dependency_overrides[get_chunk_store_service] = lambda: mock_chunk_store
    return client


def test_search_without_sources_succeeds_without_embedding_provider(unconfigured_client):
    response = unconfigured_client.post("/api/v1/rag/search", json={"query": "q", "sourceIds": []})

    assert response.status_code == 200
    assert response.json() == {
        "results": [],
        "formattedContext": "No relevant sources found.",
        "success": True,
    }


def test_search_with_sources_reports_missing_embedding_provider(
    unconfigured_client, mock_chunk_store
):
    response = unconfigured_client.post(
        "/api/v1/rag/search", json={"query": "q", "sourceIds": ["s1"]}
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("Embedding provider unavailable")
    mock_chunk_store.get_chunks_for_sources.assert_not_called()
