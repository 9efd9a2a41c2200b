"""
Pydantic models for the CGI RAG FastAPI backend.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """Request body for the query endpoints."""
    query: str = Field(..., min_length=1, max_length=2000)
    edition: Optional[str] = None  # "2025", "2026", "current"; CGI_DEFAULT_EDITION if None
    as_of: Optional[date] = None  # picks the edition in force on that date when edition is None
    conversation_id: Optional[str] = Field(None, max_length=200)
    postprocess_mode: Optional[str] = Field(None, pattern=r"^(highlight|strip)$")


class SourceInfo(BaseModel):
    """An article given to the model."""
    numero: str
    titre: Optional[str] = None
    extrait: str
    key_passages: list[str] = []
    full_content_length: int = 0
    version: str
    score: float
    match_type: str


class CitationInfo(BaseModel):
    """An article cited by the answer (camelCase wire keys)."""
    articleNumber: str
    titre: Optional[str] = None
    excerpt: str
    score: float


class QueryResponse(BaseModel):
    """Response body for the synchronous query endpoint."""
    answer: str
    sources: list[SourceInfo]
    citations: list[CitationInfo]
    edition: str
    latency_ms: float
    metadata: dict = {}


class MessageInfo(BaseModel):
    """A persisted conversation message."""
    id: str
    conversation_id: str
    role: str
    content: str
    citations: Optional[list[dict]] = None
    response_time_ms: Optional[float] = None
    tokens_used: Optional[int] = None
    created_at: str


class MessagesResponse(BaseModel):
    conversation_id: str
    messages: list[MessageInfo]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    database: str
    editions: list[str] = []
