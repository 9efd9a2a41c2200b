"""
Streaming Answers as Server-Sent Events

Event order for one question:
    start -> chunk* -> citations -> done
or, when generation fails:
    start -> chunk* -> error

Exactly one terminal event is emitted. Chunks are forwarded as the model
produces them; citations are extracted once from the full raw answer. If the
consumer stops iterating (client disconnect) the upstream LLM stream is
closed, which cancels the HTTP call to the provider.
"""

import json
import time
import asyncio
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, Optional

from .agent import Agent
from .citation import Citation, CitationExtractor
from .metrics import get_metrics_collector
from .text_patterns import LABELS

logger = logging.getLogger(__name__)

EVENT_START = "start"
EVENT_CHUNK = "chunk"
EVENT_CITATIONS = "citations"
EVENT_DONE = "done"
EVENT_ERROR = "error"

SSE_DONE = "data: [DONE]\n\n"


@dataclass
class StreamEvent:
    """One SSE message sent to the client."""
    type: str
    content: Optional[str] = None
    citations: Optional[list[Citation]] = None
    edition: Optional[str] = None
    metadata: Optional[dict] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"type": self.type}
        if self.content is not None:
            data["content"] = self.content
        if self.citations is not None:
            data["citations"] = [c.to_dict() for c in self.citations]
        if self.edition is not None:
            data["edition"] = self.edition
        if self.metadata is not None:
            data["metadata"] = self.metadata
        if self.error is not None:
            data["error"] = self.error
        return data

    def to_sse(self) -> str:
        return f"data: {json.dumps(self.to_dict(), ensure_ascii=False)}\n\n"


@dataclass
class StreamResult:
    """Outcome of a stream, filled in as events are produced."""
    completed: bool = False
    raw_content: str = ""
    content: str = ""
    citations: list[Citation] = field(default_factory=list)
    tokens_used: int = 0
    response_time_ms: float = 0.0
    model: str = ""
    error: Optional[str] = None


class ResponseStreamer:
    """
    Streams an Agent's answer as StreamEvents.

    Usage:
        result = StreamResult()
        async for event in ResponseStreamer(agent).stream(query, history, result):
            yield event.to_sse()
        if result.completed:
            persist(result.content, result.citations)
    """

    def __init__(
        self,
        agent: Agent,
        citation_extractor: Optional[CitationExtractor] = None,
        metrics=None,
    ):
        self.agent = agent
        self.citations = citation_extractor or CitationExtractor()
        self.metrics = metrics or get_metrics_collector()

    async def stream(
        self,
        query: str,
        history: Optional[list[dict]] = None,
        result: Optional[StreamResult] = None,
    ) -> AsyncIterator[StreamEvent]:
        result = result if result is not None else StreamResult()
        rules = self.agent.rules
        start = time.time()
        llm_stream = None

        self.metrics.record_stream_started(rules.edition)
        yield StreamEvent(type=EVENT_START, edition=rules.edition)

        try:
            context = await self.agent.prepare(query, history)
            llm_stream = await self.agent.llm.stream(
                context.system_prompt,
                context.messages,
                model=rules.llm_model,
                temperature=rules.temperature,
                max_tokens=rules.max_tokens,
            )

            chunks = []
            async for delta in llm_stream:
                chunks.append(delta)
                yield StreamEvent(type=EVENT_CHUNK, content=delta)

            result.raw_content = "".join(chunks)
            result.content = self.agent.postprocess(result.raw_content, context.is_numeric)
            result.citations = self.citations.extract(result.raw_content, context.sources)
            result.tokens_used = llm_stream.tokens_used
            result.model = llm_stream.model
        except (asyncio.CancelledError, GeneratorExit):
            logger.info(f"[{self.agent.name}] Client disconnected, closing upstream stream")
            raise
        except Exception as e:
            result.error = f"{type(e).__name__}: {e}"
            logger.error(f"[{self.agent.name}] Stream failed: {result.error}")
            self.metrics.record_stream_failed(type(e).__name__)
            yield StreamEvent(type=EVENT_ERROR, error=LABELS["server_unreachable"])
            return
        finally:
            if llm_stream is not None:
                await llm_stream.aclose()

        yield StreamEvent(type=EVENT_CITATIONS, citations=result.citations)

        result.response_time_ms = (time.time() - start) * 1000
        result.completed = True
        self.metrics.record_stream_completed(result.tokens_used, len(result.citations))
        logger.info(
            f"[{self.agent.name}] Stream done in {result.response_time_ms:.0f}ms "
            f"({result.tokens_used} tokens, {len(result.citations)} citations)"
        )

        yield StreamEvent(
            type=EVENT_DONE,
            metadata={
                "responseTime": round(result.response_time_ms),
                "tokensUsed": result.tokens_used,
                "model": result.model,
                "cgiVersion": rules.edition,
            },
        )
