"""
FastAPI Backend for the CGI RAG System

REST and SSE endpoints for questions on the Congo tax code (CGI), one agent
per edition, plus conversation history, health and metrics.

Run with: uvicorn execution.cgi_rag.api:app --host 0.0.0.0 --port 8000
"""

import os
import time
import uuid
import asyncio
import logging
from typing import Optional
from contextlib import aclosing
from collections import defaultdict

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.responses import StreamingResponse
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .api_models import (
    QueryRequest, QueryResponse, SourceInfo, CitationInfo,
    MessageInfo, MessagesResponse, HealthResponse,
)
from .edition_config import SUPPORTED_EDITIONS, resolve_edition, edition_for_date
from .errors import GenerationError, UnknownEditionError
from .citation import CitationExtractor
from .metrics import get_metrics_collector
from .streaming import ResponseStreamer, StreamResult, SSE_DONE
from .text_patterns import LABELS

# Load environment variables
load_dotenv()
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(
    title="CGI 242 API",
    description="Questions on the Congo Code Général des Impôts, grounded in its articles",
    version=API_VERSION,
)

# Configure CORS: use CORS_ORIGINS env var (comma-separated) or default to localhost
_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:4200,http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Rate Limiting
# =============================================================================

class RateLimiter:
    """Simple in-memory rate limiter using sliding window."""

    def __init__(self, max_requests: int = 60, window_seconds: int = 60):
        self._max_requests = max_requests
        self._window = window_seconds
        self._requests: dict[str, list[float]] = defaultdict(list)

    def is_allowed(self, key: str) -> bool:
        """Check if request is allowed for the given key."""
        now = time.time()
        window_start = now - self._window

        # Clean old entries
        self._requests[key] = [t for t in self._requests[key] if t > window_start]

        if len(self._requests[key]) >= self._max_requests:
            return False

        self._requests[key].append(now)
        return True


_rate_limiter = RateLimiter(
    max_requests=int(os.getenv("RATE_LIMIT_RPM", "60")),
    window_seconds=60,
)


async def check_rate_limit(request: Request):
    """FastAPI dependency that enforces rate limiting per API key or client IP."""
    host = request.client.host if request.client else "anonymous"
    key = request.headers.get("x-api-key", host)
    if not _rate_limiter.is_allowed(key):
        raise HTTPException(status_code=429, detail="Rate limit exceeded. Try again later.")


# =============================================================================
# Service Container - builds the pipeline once per process
# =============================================================================

class ServiceContainer:
    """Composition root: store, search engine, LLM client, agents and conversations."""

    def __init__(self):
        self._store = None
        self._store_failed = False
        self._engine = None
        self._llm_client = None
        self._agents = {}  # keyed by (edition, postprocess_mode)
        self._conversations = None

    def get_store(self):
        """Vector store, or None when the database is unreachable."""
        if self._store is None and not self._store_failed:
            from .vector_store import VectorStore
            store = VectorStore()
            try:
                store.connect()
                store.initialize_schema()
                self._store = store
            except Exception as e:
                logger.warning(f"Vector store unavailable, keyword-only retrieval: {e}")
                self._store_failed = True
        return self._store

    def get_engine(self):
        if self._engine is None:
            from .embeddings import get_embedding_service
            from .retriever import HybridSearchEngine

            store = self.get_store()
            embeddings = get_embedding_service() if store is not None else None
            self._engine = HybridSearchEngine.for_editions(
                SUPPORTED_EDITIONS,
                vector_store=store,
                embedding_service=embeddings,
                corpus_dir=os.getenv("CGI_CORPUS_DIR"),
            )
        return self._engine

    def get_llm_client(self):
        """Get or create the async client for the chat completions provider."""
        if self._llm_client is None:
            from .llm import LLMClient, LLMConfig
            self._llm_client = LLMClient(LLMConfig.from_env())
        return self._llm_client

    def get_agent(self, edition: Optional[str] = None, postprocess_mode: Optional[str] = None):
        """
        Agent for an edition.

        Raises:
            UnknownEditionError: if the edition is not supported
        """
        from .agent import Agent

        key = resolve_edition(edition)
        cache_key = (key, postprocess_mode)
        if cache_key not in self._agents:
            self._agents[cache_key] = Agent.for_edition(
                key, self.get_engine(), self.get_llm_client(), postprocess_mode=postprocess_mode,
            )
        return self._agents[cache_key]

    def get_conversations(self):
        if self._conversations is None:
            from .conversations import InMemoryConversationStore, PostgresConversationStore

            backend = os.getenv("CONVERSATION_BACKEND", "memory").lower()
            store = self.get_store() if backend == "postgres" else None
            if store is not None:
                self._conversations = PostgresConversationStore(store)
            else:
                if backend == "postgres":
                    logger.warning("CONVERSATION_BACKEND=postgres but the database is unavailable; using memory")
                self._conversations = InMemoryConversationStore()
        return self._conversations

    def database_status(self) -> str:
        store = self.get_store()
        if store is None:
            return "disconnected"
        return "connected" if store.ping() else "disconnected"

    def editions(self) -> list[str]:
        return list(self.get_engine().editions)


_container = ServiceContainer()


# =============================================================================
# Helpers
# =============================================================================

def _requested_edition(request: QueryRequest) -> Optional[str]:
    """Explicit edition first, then the edition in force on ``as_of``."""
    if request.edition is None and request.as_of is not None:
        return edition_for_date(request.as_of)
    return request.edition


def _get_agent_or_400(request: QueryRequest):
    try:
        return _container.get_agent(_requested_edition(request), request.postprocess_mode)
    except UnknownEditionError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def _load_history(conversation_id: Optional[str]) -> list[dict]:
    if not conversation_id:
        return []
    conversations = _container.get_conversations()
    return await asyncio.to_thread(conversations.history, conversation_id)


async def _persist_user_message(conversation_id: str, query: str) -> None:
    conversations = _container.get_conversations()
    try:
        await asyncio.to_thread(conversations.add_message, conversation_id, "user", query)
    except Exception as e:
        logger.error(f"Could not persist user message for {conversation_id}: {e}")
        raise HTTPException(status_code=503, detail="Conversation store unavailable.")


async def _persist_assistant_message(
    conversation_id: str,
    content: str,
    citations: list,
    response_time_ms: float,
    tokens_used: int,
) -> None:
    conversations = _container.get_conversations()
    try:
        await asyncio.to_thread(
            conversations.add_message,
            conversation_id,
            "assistant",
            content,
            citations,
            response_time_ms,
            tokens_used,
        )
    except Exception as e:
        logger.error(f"Could not persist assistant message for {conversation_id}: {e}")


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/api/v1/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    db_status = "unknown"
    try:
        db_status = await asyncio.to_thread(_container.database_status)
    except Exception as e:
        logger.warning(f"Health check: database disconnected: {e}")
        db_status = "disconnected"

    return HealthResponse(
        status="ok",
        version=API_VERSION,
        database=db_status,
        editions=_container.editions(),
    )


@app.post("/api/v1/query", response_model=QueryResponse, dependencies=[Depends(check_rate_limit)])
async def query_cgi(request: QueryRequest):
    """Answer a question from the articles of one CGI edition."""
    start_time = time.time()
    agent = _get_agent_or_400(request)
    history = await _load_history(request.conversation_id)
    if request.conversation_id:
        await _persist_user_message(request.conversation_id, request.query)

    metrics = get_metrics_collector()
    try:
        with metrics.track_query(agent.edition, request.query) as tracker:
            response = await agent.process(request.query, history)
            tracker.set_results(len(response.sources), response.metadata.get("tokens_used", 0))
    except GenerationError as e:
        logger.error(f"Query failed for CGI {agent.edition}: {e}")
        raise HTTPException(status_code=502, detail=LABELS["server_unreachable"])

    citations = CitationExtractor().extract(response.answer, response.sources)
    metrics.record_citations(len(citations))
    latency_ms = (time.time() - start_time) * 1000

    if request.conversation_id:
        await _persist_assistant_message(
            request.conversation_id,
            response.answer,
            [c.to_dict() for c in citations],
            latency_ms,
            response.metadata.get("tokens_used"),
        )

    return QueryResponse(
        answer=response.answer,
        sources=[SourceInfo(**s.to_dict()) for s in response.sources],
        citations=[CitationInfo(**c.to_dict()) for c in citations],
        edition=response.edition,
        latency_ms=latency_ms,
        metadata=response.metadata,
    )


@app.post("/api/v1/query/stream", dependencies=[Depends(check_rate_limit)])
async def query_cgi_stream(request: QueryRequest):
    """Streaming answer with SSE.

    Sends ``data: {json}`` events:
      - {"type": "start", "edition": "2026"}
      - {"type": "chunk", "content": "..."}          (during generation)
      - {"type": "citations", "citations": [...]}
      - {"type": "done", "metadata": {...}}
      - {"type": "error", "error": "..."}            (instead of citations/done)
    followed by ``data: [DONE]``.
    """
    agent = _get_agent_or_400(request)
    conversation_id = request.conversation_id or uuid.uuid4().hex
    history = await _load_history(request.conversation_id)

    # The user turn is stored before any event is sent
    await _persist_user_message(conversation_id, request.query)

    streamer = ResponseStreamer(agent)

    async def generate():
        result = StreamResult()
        async with aclosing(streamer.stream(request.query, history, result)) as events:
            async for event in events:
                yield event.to_sse()

        if result.completed:
            await _persist_assistant_message(
                conversation_id,
                result.content,
                [c.to_dict() for c in result.citations],
                result.response_time_ms,
                result.tokens_used,
            )
        yield SSE_DONE

    return StreamingResponse(
        generate(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
            "X-Conversation-Id": conversation_id,
        },
    )


@app.get("/api/v1/conversations/{conversation_id}/messages", response_model=MessagesResponse)
async def get_conversation_messages(conversation_id: str):
    """Persisted messages of a conversation, oldest first."""
    conversations = _container.get_conversations()
    messages = await asyncio.to_thread(conversations.get_messages, conversation_id)
    return MessagesResponse(
        conversation_id=conversation_id,
        messages=[MessageInfo(**m) for m in messages],
    )


@app.get("/api/v1/metrics")
async def get_metrics():
    """Pipeline metrics snapshot."""
    collector = get_metrics_collector()
    metrics = collector.get_metrics_dict()
    metrics["uptime_seconds"] = round(collector.get_uptime().total_seconds(), 1)
    return metrics
