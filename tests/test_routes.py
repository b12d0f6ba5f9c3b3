"""HTTP tests for the chunk, embedding, search, setup and health routes."""

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from app.config.settings import get_settings
from app.main import app
from app.repositories.mongodb.base import RepositoryError
from app.services.samples import HANDBOOK_TEXT, SAMPLE_TEXT


class TestChunkRoute:
    def test_missing_text_is_400(self, client):
        resp = client.post("/api/chunks", json={"method": "fixed"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Text is required"

    def test_empty_text_is_400(self, client):
        assert client.post("/api/chunks", json={"text": "", "method": "none"}).status_code == 400

    def test_unknown_method_is_400(self, client, store):
        resp = client.post("/api/chunks", json={"text": "hello", "method": "sentences"})
        assert resp.status_code == 400
        assert store.chunks == {}

    @pytest.mark.parametrize("method", ["none", "fixed", "delimiter", "recursive", "semantic"])
    def test_each_method_returns_and_stores_chunks(self, client, store, method):
        resp = client.post("/api/chunks", json={"text": SAMPLE_TEXT, "method": method})
        assert resp.status_code == 200
        chunks = resp.json()["chunks"]
        assert chunks
        assert all(c["method"] == method and c["id"].startswith("chunk_") for c in chunks)
        assert [c["id"] for c in chunks] == [d["chunk_id"] for d in store.chunks[method]]

    def test_delimiter_scenario(self, client):
        resp = client.post("/api/chunks", json={"text": "a\n\nb\n\nc", "method": "delimiter"})
        assert [c["text"] for c in resp.json()["chunks"]] == ["a", "b", "c"]

    def test_method_defaults_to_fixed(self, client):
        resp = client.post("/api/chunks", json={"text": "x" * 500})
        chunks = resp.json()["chunks"]
        assert [len(c["text"]) for c in chunks] == [200, 200, 200, 50]
        assert {c["method"] for c in chunks} == {"fixed"}

    def test_none_keeps_whole_text(self, client):
        resp = client.post("/api/chunks", json={"text": "  whole doc  ", "method": "none"})
        assert [c["text"] for c in resp.json()["chunks"]] == ["  whole doc  "]

    def test_rechunking_replaces_stored_set(self, client, store):
        client.post("/api/chunks", json={"text": "a\n\nb\n\nc", "method": "delimiter"})
        client.post("/api/chunks", json={"text": "only", "method": "delimiter"})
        assert [d["text"] for d in store.chunks["delimiter"]] == ["only"]

    def test_storage_failure_is_503(self, client, monkeypatch):
        async def failing(method, docs):
            raise RepositoryError("Dependency temporarily unavailable: replace chunks")

        monkeypatch.setattr("app.controllers.routes.chunk.replace_chunks_for_method", failing)
        resp = client.post("/api/chunks", json={"text": "hello", "method": "none"})
        assert resp.status_code == 503

    def test_unexpected_failure_is_500(self, store, monkeypatch):
        def boom(text, config):
            raise RuntimeError("unexpected")

        monkeypatch.setattr("app.controllers.routes.chunk.build_chunk_records", boom)
        resp = TestClient(app, raise_server_exceptions=False).post(
            "/api/chunks", json={"text": "hello", "method": "none"}
        )
        assert resp.status_code == 500
        assert resp.json() == {"detail": "An internal error occurred."}

    def test_list_stored_chunks(self, client):
        client.post("/api/chunks", json={"text": "a\n\nb", "method": "delimiter"})
        resp = client.get("/api/chunks", params={"method": "delimiter"})
        assert resp.status_code == 200
        assert [c["text"] for c in resp.json()["chunks"]] == ["a", "b"]


class TestEmbeddingRoute:
    def test_missing_chunks_is_400(self, client):
        assert client.post("/api/embeddings/generate", json={}).status_code == 400
        assert client.post("/api/embeddings/generate", json={"chunks": []}).status_code == 400

    def test_generates_and_stores(self, client, store, mock_embeddings):
        body = {"chunks": [{"id": "chunk_a", "text": "alpha"}, {"id": "chunk_b", "text": "beta"}]}
        resp = client.post("/api/embeddings/generate", json=body)
        assert resp.status_code == 200
        assert resp.json()["embeddings"] == [
            {"id": "chunk_a", "text": "alpha", "dimensions": 1536},
            {"id": "chunk_b", "text": "beta", "dimensions": 1536},
        ]
        assert [e["chunk_id"] for e in store.embeddings] == ["chunk_a", "chunk_b"]

    def test_config_override(self, client, mock_embeddings):
        body = {"chunks": [{"id": "chunk_a", "text": "alpha"}], "embedding_config": {"dimensions": 16}}
        resp = client.post("/api/embeddings/generate", json=body)
        assert resp.json()["embeddings"][0]["dimensions"] == 16

    @pytest.mark.parametrize(
        "override", [{"strategy": "mock"}, {"api_key": "sk-other"}, {"model": "other"}, {"dimensions": 0}]
    )
    def test_only_dimensions_and_batch_size_are_overridable(self, client, store, mock_embeddings, override):
        body = {"chunks": [{"id": "chunk_a", "text": "alpha"}], "embedding_config": override}
        assert client.post("/api/embeddings/generate", json=body).status_code == 422
        assert store.embeddings == []

    def test_batch_size_override(self, client, store, mock_embeddings):
        body = {"chunks": [{"id": "chunk_a", "text": "alpha"}], "embedding_config": {"batch_size": 1}}
        assert client.post("/api/embeddings/generate", json=body).status_code == 200

    def test_provider_misconfiguration_is_400(self, client, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        get_settings.cache_clear()
        try:
            body = {"chunks": [{"id": "chunk_a", "text": "alpha"}]}
            resp = client.post("/api/embeddings/generate", json=body)
        finally:
            get_settings.cache_clear()
        assert resp.status_code == 400
        assert "API key" in resp.json()["detail"]


class TestSearchRoute:
    def test_missing_query_is_400(self, client):
        assert client.post("/api/search", json={}).status_code == 400

    def test_returns_hits(self, client, store, mock_embeddings):
        store.search_results = [
            {"chunk_id": "chunk_a", "text": "alpha", "score": 0.91},
            {"chunk_id": "chunk_b", "text": "beta", "score": 0.42},
        ]
        resp = client.post("/api/search", json={"query": "alpha?", "limit": 2})
        assert resp.status_code == 200
        assert resp.json()["results"] == store.search_results
        assert store.pipelines[0][0]["$vectorSearch"]["limit"] == 2

    def test_storage_failure_is_503(self, client, store, mock_embeddings, monkeypatch):
        async def failing(pipeline):
            raise RepositoryError("Dependency temporarily unavailable: aggregate embeddings")

        monkeypatch.setattr("app.services.retrieval.vector_search.aggregate_embeddings", failing)
        assert client.post("/api/search", json={"query": "alpha"}).status_code == 503


class TestSetupRoute:
    def test_returns_sample_text(self, client, monkeypatch):
        async def create_indexes(db):
            return None

        async def has_search_index(db, name):
            return True

        monkeypatch.setattr("app.controllers.routes.setup.get_database", lambda: object())
        monkeypatch.setattr("app.controllers.routes.setup.create_indexes", create_indexes)
        monkeypatch.setattr("app.controllers.routes.setup.has_search_index", has_search_index)
        resp = client.get("/api/setup")
        assert resp.status_code == 200
        assert resp.json() == {"text": SAMPLE_TEXT, "vector_index_ready": True}

    def test_storage_errors_do_not_hide_sample_text(self, client, monkeypatch):
        async def create_indexes(db):
            raise OperationFailure("not authorized")

        monkeypatch.setattr("app.controllers.routes.setup.get_database", lambda: object())
        monkeypatch.setattr("app.controllers.routes.setup.create_indexes", create_indexes)
        resp = client.get("/api/setup")
        assert resp.status_code == 200
        assert resp.json()["vector_index_ready"] is False
        assert resp.json()["text"] == SAMPLE_TEXT

    def test_sample_text_serves_handbook_without_storage(self, client, monkeypatch):
        def no_database():
            raise AssertionError("sample text must not touch MongoDB")

        monkeypatch.setattr("app.controllers.routes.setup.get_database", no_database)
        resp = client.get("/api/setup/sampleText")
        assert resp.status_code == 200
        assert resp.json() == {"text": HANDBOOK_TEXT}
        assert resp.json()["text"].startswith("# MongoDB Corporate Policies Handbook")

    def test_handbook_chunks_by_delimiter(self, client):
        text = client.get("/api/setup/sampleText").json()["text"]
        resp = client.post("/api/chunks", json={"text": text, "method": "delimiter"})
        chunks = [c["text"] for c in resp.json()["chunks"]]
        assert chunks[0] == "# MongoDB Corporate Policies Handbook"
        assert chunks[1] == "## Time Off and Leave Policies"


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_ready_reports_degraded_mongo(self, client, monkeypatch):
        async def ping():
            return {"ok": False, "error": "connection_timeout"}

        monkeypatch.setattr("app.main.ping_mongo", ping)
        resp = client.get("/ready")
        assert resp.status_code == 503
        assert resp.json()["mongo"] == {"ok": False, "error": "connection_timeout"}

    def test_connection_errors_map_to_503(self, store, monkeypatch):
        def boom(text, config):
            raise ServerSelectionTimeoutError("no servers")

        monkeypatch.setattr("app.controllers.routes.chunk.build_chunk_records", boom)
        resp = TestClient(app, raise_server_exceptions=False).post(
            "/api/chunks", json={"text": "hello", "method": "none"}
        )
        assert resp.status_code == 503
