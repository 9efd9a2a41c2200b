"""
Tests for execution/cgi_rag/conversations.py

Covers: in-memory message persistence, history windows, role validation
        and the Postgres backend delegation.
"""

from unittest.mock import MagicMock

import pytest


class TestInMemoryConversationStore:

    def test_add_and_get(self):
        from execution.cgi_rag.conversations import InMemoryConversationStore
        store = InMemoryConversationStore()
        store.add_message("c1", "user", "Quel est le taux de l'IS ?")
        saved = store.add_message(
            "c1", "assistant", "28%.",
            citations=[{"articleNumber": "Art. 86A"}], response_time_ms=812.5, tokens_used=120,
        )

        messages = store.get_messages("c1")
        assert [m["role"] for m in messages] == ["user", "assistant"]
        assert messages[1]["citations"] == [{"articleNumber": "Art. 86A"}]
        assert messages[1]["tokens_used"] == 120
        assert saved["id"] == messages[1]["id"]
        assert saved["created_at"]

    def test_conversations_are_separate(self):
        from execution.cgi_rag.conversations import InMemoryConversationStore
        store = InMemoryConversationStore()
        store.add_message("a", "user", "un")
        store.add_message("b", "user", "deux")
        assert [m["content"] for m in store.get_messages("a")] == ["un"]
        assert store.get_messages("missing") == []

    def test_returned_messages_are_copies(self):
        from execution.cgi_rag.conversations import InMemoryConversationStore
        store = InMemoryConversationStore()
        store.add_message("a", "user", "un")
        store.get_messages("a")[0]["content"] = "modifié"
        assert store.get_messages("a")[0]["content"] == "un"

    def test_history_window(self):
        from execution.cgi_rag.conversations import InMemoryConversationStore
        store = InMemoryConversationStore()
        for i in range(12):
            store.add_message("c", "user" if i % 2 == 0 else "assistant", f"message {i}")

        history = store.history("c")
        assert len(history) == 10
        assert history[0] == {"role": "user", "content": "message 2"}
        assert store.history("c", limit=2) == [
            {"role": "user", "content": "message 10"},
            {"role": "assistant", "content": "message 11"},
        ]

    def test_invalid_role(self):
        from execution.cgi_rag.conversations import InMemoryConversationStore
        with pytest.raises(ValueError):
            InMemoryConversationStore().add_message("c", "system", "x")


class TestPostgresConversationStore:

    def test_delegates_to_vector_store(self):
        from execution.cgi_rag.conversations import PostgresConversationStore
        vector_store = MagicMock()
        vector_store.get_messages.return_value = [{"role": "user", "content": "Bonjour"}]
        store = PostgresConversationStore(vector_store)

        store.add_message("c", "assistant", "Bonjour !", citations=[], tokens_used=5)
        vector_store.add_message.assert_called_once_with(
            "c", "assistant", "Bonjour !", citations=[], response_time_ms=None, tokens_used=5,
        )
        assert store.history("c") == [{"role": "user", "content": "Bonjour"}]

    def test_invalid_role_not_written(self):
        from execution.cgi_rag.conversations import PostgresConversationStore
        vector_store = MagicMock()
        with pytest.raises(ValueError):
            PostgresConversationStore(vector_store).add_message("c", "tool", "x")
        vector_store.add_message.assert_not_called()
