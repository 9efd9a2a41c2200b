"""Tests for the FastAPI backend endpoints."""

import os
import json

import pytest
from unittest.mock import MagicMock

# Set up environment before importing FastAPI app
os.environ.setdefault("NVIDIA_API_KEY", "test-key")
os.environ.setdefault("VOYAGE_API_KEY", "test-key")

from fastapi.testclient import TestClient

from tests.conftest import FakeLLMClient

ANSWER = "**Article 86A (CGI 2026)** - Taux\n\nSelon l'article 86A, le taux est de 28%.\nSource : CGI 2026"
CHUNKS = ["Selon l'article 86A, ", "le taux est de 28%."]


# ---------------------------------------------------------------------------
# Replace the ServiceContainer so no real DB or API is needed
# ---------------------------------------------------------------------------

@pytest.fixture
def container(search_engine, monkeypatch):
    from execution.cgi_rag import api
    from execution.cgi_rag.conversations import InMemoryConversationStore

    monkeypatch.delenv("CGI_DEFAULT_EDITION", raising=False)

    test_container = api.ServiceContainer()
    test_container._store_failed = True
    test_container._engine = search_engine
    test_container._llm_client = FakeLLMClient(answer=ANSWER, chunks=CHUNKS)
    test_container._conversations = InMemoryConversationStore()

    monkeypatch.setattr(api, "_container", test_container)
    monkeypatch.setattr(api, "_rate_limiter", api.RateLimiter(max_requests=1000))
    return test_container


@pytest.fixture
def client(container):
    from execution.cgi_rag import api
    return TestClient(api.app)


def sse_payloads(body: str) -> list:
    """Data payloads of an SSE body; "[DONE]" is kept as a string."""
    payloads = []
    for block in body.split("\n\n"):
        if not block.startswith("data: "):
            continue
        data = block[len("data: "):]
        payloads.append(data if data == "[DONE]" else json.loads(data))
    return payloads


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "1.0.0"
        assert data["database"] == "disconnected"
        assert data["editions"] == ["2026"]

    def test_health_with_database(self, client, container):
        store = MagicMock()
        store.ping.return_value = True
        container._store = store
        container._store_failed = False
        assert client.get("/api/v1/health").json()["database"] == "connected"


class TestQueryEndpoint:
    def test_query_with_results(self, client, container):
        response = client.post("/api/v1/query", json={"query": "Quel est le taux IS ?"})
        assert response.status_code == 200
        data = response.json()
        assert data["answer"] == "Article 86A (CGI 2026) - Taux\n\nSelon l'article 86A, le taux est de 28%."
        assert data["edition"] == "2026"
        assert data["sources"][0]["numero"] == "Art. 86A"
        assert data["citations"][0]["articleNumber"] == "Art. 86A"
        assert data["metadata"]["is_numeric_question"] is True
        assert container._llm_client.calls[0]["temperature"] == 0.0

    def test_query_highlight_mode(self, client, container):
        container._llm_client = FakeLLMClient(answer="Le taux est de 28%.")
        response = client.post(
            "/api/v1/query",
            json={"query": "Quel est le taux IS ?", "postprocess_mode": "highlight"},
        )
        assert response.json()["answer"] == "Le taux est de **28%**."

    def test_unknown_edition(self, client):
        response = client.post("/api/v1/query", json={"query": "taux", "edition": "2019"})
        assert response.status_code == 400
        assert "2019" in response.json()["detail"]

    def test_edition_from_date(self, client):
        response = client.post("/api/v1/query", json={"query": "Quel est le taux IS ?", "as_of": "2026-03-01"})
        assert response.status_code == 200
        assert response.json()["edition"] == "2026"

    def test_requested_edition(self):
        from execution.cgi_rag import api
        from execution.cgi_rag.api_models import QueryRequest
        assert api._requested_edition(QueryRequest(query="q", as_of="2025-06-01")) == "2025"
        assert api._requested_edition(QueryRequest(query="q", edition="2026", as_of="2025-06-01")) == "2026"
        assert api._requested_edition(QueryRequest(query="q")) is None

    def test_query_validation(self, client):
        assert client.post("/api/v1/query", json={"query": ""}).status_code == 422
        assert client.post("/api/v1/query", json={"query": "x" * 2001}).status_code == 422
        assert client.post(
            "/api/v1/query", json={"query": "taux", "postprocess_mode": "bold"},
        ).status_code == 422

    def test_generation_failure(self, client, container):
        from execution.cgi_rag.text_patterns import LABELS
        container._llm_client = FakeLLMClient(fail=True)
        response = client.post("/api/v1/query", json={"query": "Quel est le taux IS ?"})
        assert response.status_code == 502
        assert response.json()["detail"] == LABELS["server_unreachable"]

    def test_conversation_persisted(self, client, container):
        client.post("/api/v1/query", json={"query": "Quel est le taux IS ?", "conversation_id": "conv-1"})
        messages = container._conversations.get_messages("conv-1")
        assert [m["role"] for m in messages] == ["user", "assistant"]
        assert messages[1]["citations"][0]["articleNumber"] == "Art. 86A"
        assert messages[1]["tokens_used"] == 42

    def test_history_sent_to_model(self, client, container):
        client.post("/api/v1/query", json={"query": "Quel est le taux IS ?", "conversation_id": "conv-2"})
        client.post("/api/v1/query", json={"query": "Et pour les étrangers ?", "conversation_id": "conv-2"})
        messages = container._llm_client.calls[1]["messages"]
        assert [m["role"] for m in messages] == ["user", "assistant", "user"]
        assert messages[-1]["content"] == "Et pour les étrangers ?"

    def test_rate_limit(self, client, monkeypatch):
        from execution.cgi_rag import api
        monkeypatch.setattr(api, "_rate_limiter", api.RateLimiter(max_requests=1))
        assert client.post("/api/v1/query", json={"query": "Quel est le taux IS ?"}).status_code == 200
        assert client.post("/api/v1/query", json={"query": "Quel est le taux IS ?"}).status_code == 429


class TestStreamEndpoint:
    def test_stream_events(self, client):
        response = client.post("/api/v1/query/stream", json={"query": "Quel est le taux IS ?"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")

        payloads = sse_payloads(response.text)
        assert payloads[-1] == "[DONE]"
        assert [p["type"] for p in payloads[:-1]] == ["start", "chunk", "chunk", "citations", "done"]
        assert payloads[0]["edition"] == "2026"
        assert payloads[3]["citations"][0]["articleNumber"] == "Art. 86A"
        assert payloads[4]["metadata"]["cgiVersion"] == "2026"

    def test_stream_persists_both_messages(self, client, container):
        response = client.post(
            "/api/v1/query/stream",
            json={"query": "Quel est le taux IS ?", "conversation_id": "conv-s"},
        )
        assert response.headers["x-conversation-id"] == "conv-s"
        messages = container._conversations.get_messages("conv-s")
        assert [m["role"] for m in messages] == ["user", "assistant"]
        assert messages[1]["content"] == "Selon l'article 86A, le taux est de 28%."
        assert messages[1]["citations"][0]["articleNumber"] == "Art. 86A"

    def test_stream_generates_conversation_id(self, client, container):
        response = client.post("/api/v1/query/stream", json={"query": "Quel est le taux IS ?"})
        conversation_id = response.headers["x-conversation-id"]
        assert conversation_id
        assert len(container._conversations.get_messages(conversation_id)) == 2

    def test_stream_failure_keeps_only_user_message(self, client, container):
        from execution.cgi_rag.text_patterns import LABELS
        container._llm_client = FakeLLMClient(chunks=["L'article ", "86A ", "dispose"], fail_after=2)
        response = client.post(
            "/api/v1/query/stream",
            json={"query": "Quel est le taux IS ?", "conversation_id": "conv-f"},
        )
        payloads = sse_payloads(response.text)
        assert [p if p == "[DONE]" else p["type"] for p in payloads] == [
            "start", "chunk", "chunk", "error", "[DONE]",
        ]
        assert payloads[3]["error"] == LABELS["server_unreachable"]

        messages = container._conversations.get_messages("conv-f")
        assert [m["role"] for m in messages] == ["user"]

    def test_user_message_persisted_before_streaming(self, client, container):
        conversations = MagicMock()
        conversations.history.return_value = []
        conversations.add_message.side_effect = ConnectionError("database down")
        container._conversations = conversations

        response = client.post("/api/v1/query/stream", json={"query": "Quel est le taux IS ?"})
        assert response.status_code == 503
        assert container._llm_client.calls == []

    def test_stream_unknown_edition(self, client):
        response = client.post("/api/v1/query/stream", json={"query": "taux", "edition": "1999"})
        assert response.status_code == 400


class TestConversationEndpoint:
    def test_messages(self, client):
        client.post("/api/v1/query", json={"query": "Quel est le taux IS ?", "conversation_id": "conv-m"})
        response = client.get("/api/v1/conversations/conv-m/messages")
        assert response.status_code == 200
        data = response.json()
        assert data["conversation_id"] == "conv-m"
        assert [m["role"] for m in data["messages"]] == ["user", "assistant"]
        assert data["messages"][0]["content"] == "Quel est le taux IS ?"

    def test_unknown_conversation(self, client):
        data = client.get("/api/v1/conversations/nope/messages").json()
        assert data["messages"] == []


class TestMetricsEndpoint:
    def test_metrics_after_query(self, client):
        client.post("/api/v1/query", json={"query": "Quel est le taux IS ?"})
        data = client.get("/api/v1/metrics").json()
        assert data["queries"]["total"] == 1
        assert data["queries"]["by_edition"] == {"2026": 1}
        assert data["generation"]["citations_emitted"] == 1
        assert "uptime_seconds" in data
