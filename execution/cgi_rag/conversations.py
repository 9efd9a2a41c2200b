"""
Conversation Persistence

Stores the user and assistant messages of a conversation. The HTTP layer
persists the user message before answering and the assistant message only
once the answer is complete, so a failed stream leaves no assistant entry.

Backends:
- InMemoryConversationStore: process-local, for development and tests
- PostgresConversationStore: messages table of the pgvector database
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

ROLES = ("user", "assistant")

# Turns of history passed back to the model
DEFAULT_HISTORY_TURNS = 10


class ConversationStore:
    """Interface shared by the conversation backends."""

    def add_message(
        self,
        conversation_id: str,
        role: str,
        content: str,
        citations: Optional[list] = None,
        response_time_ms: Optional[float] = None,
        tokens_used: Optional[int] = None,
    ) -> dict:
        raise NotImplementedError

    def get_messages(self, conversation_id: str) -> list[dict]:
        raise NotImplementedError

    def history(self, conversation_id: str, limit: int = DEFAULT_HISTORY_TURNS) -> list[dict]:
        """Last ``limit`` messages as chat turns ({role, content})."""
        messages = self.get_messages(conversation_id)
        return [
            {"role": m["role"], "content": m["content"]}
            for m in messages[-limit:]
        ]


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise ValueError(f"Unknown message role '{role}'. Expected one of: {', '.join(ROLES)}")


class InMemoryConversationStore(ConversationStore):
    """Thread-safe in-process message store."""

    def __init__(self):
        self._messages: dict[str, list[dict]] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    def add_message(
        self,
        conversation_id: str,
        role: str,
        content: str,
        citations: Optional[list] = None,
        response_time_ms: Optional[float] = None,
        tokens_used: Optional[int] = None,
    ) -> dict:
        _check_role(role)
        with self._lock:
            message = {
                "id": str(self._next_id),
                "conversation_id": conversation_id,
                "role": role,
                "content": content,
                "citations": citations,
                "response_time_ms": response_time_ms,
                "tokens_used": tokens_used,
                "created_at": datetime.now(timezone.utc).isoformat(),
            }
            self._next_id += 1
            self._messages.setdefault(conversation_id, []).append(message)
        return dict(message)

    def get_messages(self, conversation_id: str) -> list[dict]:
        with self._lock:
            return [dict(m) for m in self._messages.get(conversation_id, [])]


class PostgresConversationStore(ConversationStore):
    """Messages persisted through the VectorStore messages table."""

    def __init__(self, store):
        self.store = store

    def add_message(
        self,
        conversation_id: str,
        role: str,
        content: str,
        citations: Optional[list] = None,
        response_time_ms: Optional[float] = None,
        tokens_used: Optional[int] = None,
    ) -> dict:
        _check_role(role)
        return self.store.add_message(
            conversation_id,
            role,
            content,
            citations=citations,
            response_time_ms=response_time_ms,
            tokens_used=tokens_used,
        )

    def get_messages(self, conversation_id: str) -> list[dict]:
        return self.store.get_messages(conversation_id)
