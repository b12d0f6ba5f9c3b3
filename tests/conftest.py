"""Shared fixtures: an HTTP client with storage and embedding providers replaced by in-memory fakes."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

import app.config.embedding.static as embedding_static
from app.main import app


class FakeStore:
    """Records what the routes would have written to MongoDB."""

    def __init__(self) -> None:
        self.chunks: dict[str, list[dict[str, Any]]] = {}
        self.embeddings: list[dict[str, Any]] = []
        self.pipelines: list[list[dict[str, Any]]] = []
        self.search_results: list[dict[str, Any]] = []

    async def replace_chunks_for_method(self, method: str, docs: list[dict[str, Any]]) -> tuple[int, int]:
        deleted = len(self.chunks.get(method, []))
        self.chunks[method] = list(docs)
        return deleted, len(docs)

    async def list_chunks(self, method: str | None = None, limit: int = 100) -> list[dict[str, Any]]:
        methods = [method] if method else sorted(self.chunks)
        out = [d for m in methods for d in self.chunks.get(m, [])]
        return out[:limit]

    async def replace_embeddings(self, docs: list[dict[str, Any]]) -> int:
        ids = {d["chunk_id"] for d in docs}
        self.embeddings = [d for d in self.embeddings if d["chunk_id"] not in ids] + list(docs)
        return len(docs)

    async def aggregate_embeddings(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        self.pipelines.append(pipeline)
        return list(self.search_results)


@pytest.fixture
def store(monkeypatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr("app.controllers.routes.chunk.replace_chunks_for_method", fake.replace_chunks_for_method)
    monkeypatch.setattr("app.controllers.routes.chunk.list_chunks", fake.list_chunks)
    monkeypatch.setattr("app.services.embedder.pipeline.replace_embeddings", fake.replace_embeddings)
    monkeypatch.setattr("app.services.retrieval.vector_search.aggregate_embeddings", fake.aggregate_embeddings)
    return fake


@pytest.fixture
def mock_embeddings(monkeypatch) -> None:
    """Make the mock embedding profile the active one."""
    monkeypatch.setattr(embedding_static, "_active_profile", "mock")


@pytest.fixture
def client(store) -> TestClient:
    # No context manager: the lifespan (MongoDB index creation) is not run
    return TestClient(app)
