"""
Tests for execution/cgi_rag/streaming.py

Covers: event order (start -> chunk* -> citations -> done), the single
        error event on failure, StreamResult bookkeeping, upstream stream
        closing on completion, failure and consumer disconnect, and the
        SSE wire format.
"""

import json
import asyncio

import pytest


def collect(streamer, query, history=None, result=None):
    async def _run():
        return [event async for event in streamer.stream(query, history, result)]
    return asyncio.run(_run())


@pytest.fixture
def streamer_factory(agent_factory):
    from execution.cgi_rag.streaming import ResponseStreamer

    def _make(llm, **agent_kwargs):
        return ResponseStreamer(agent_factory(llm, **agent_kwargs))
    return _make


# ---------------------------------------------------------------------------
# Successful streams
# ---------------------------------------------------------------------------

class TestSuccessfulStream:

    CHUNKS = ["Selon l'article 86A, ", "le taux est de **28%**.", "\nSource : CGI 2026"]

    def test_event_order(self, streamer_factory, llm_factory):
        streamer = streamer_factory(llm_factory(chunks=self.CHUNKS))
        events = collect(streamer, "Quel est le taux IS ?")
        assert [e.type for e in events] == ["start", "chunk", "chunk", "chunk", "citations", "done"]
        assert events[0].edition == "2026"
        assert [e.content for e in events[1:4]] == self.CHUNKS

    def test_citations_from_raw_answer(self, streamer_factory, llm_factory):
        streamer = streamer_factory(llm_factory(chunks=self.CHUNKS))
        events = collect(streamer, "Quel est le taux IS ?")
        citations = events[4].citations
        assert [c.article_number for c in citations] == ["Art. 86A"]
        assert citations[0].titre == "Taux de l'IS"

    def test_done_metadata(self, streamer_factory, llm_factory):
        llm = llm_factory(chunks=self.CHUNKS, tokens_used=57)
        streamer = streamer_factory(llm)
        done = collect(streamer, "Quel est le taux IS ?")[-1]
        assert done.metadata["tokensUsed"] == 57
        assert done.metadata["model"] == streamer.agent.rules.llm_model
        assert done.metadata["cgiVersion"] == "2026"
        assert isinstance(done.metadata["responseTime"], int)

    def test_result_filled(self, streamer_factory, llm_factory):
        from execution.cgi_rag.streaming import StreamResult
        llm = llm_factory(chunks=self.CHUNKS)
        result = StreamResult()
        collect(streamer_factory(llm), "Quel est le taux IS ?", result=result)

        assert result.completed
        assert result.raw_content == "".join(self.CHUNKS)
        assert result.content == "Selon l'article 86A, le taux est de 28%."
        assert [c.article_number for c in result.citations] == ["Art. 86A"]
        assert result.tokens_used == 42
        assert result.error is None
        assert llm.last_stream.closed

    def test_highlight_mode_result(self, streamer_factory, llm_factory):
        from execution.cgi_rag.streaming import StreamResult
        result = StreamResult()
        streamer = streamer_factory(llm_factory(chunks=["Le taux est de ", "28%."]), postprocess_mode="highlight")
        collect(streamer, "Quel est le taux IS ?", result=result)
        assert result.content == "Le taux est de **28%**."

    def test_greeting_has_empty_citations(self, streamer_factory, llm_factory):
        streamer = streamer_factory(llm_factory(chunks=["Bonjour ! ", "Comment puis-je vous aider ?"]))
        events = collect(streamer, "Bonjour")
        assert [e.type for e in events] == ["start", "chunk", "chunk", "citations", "done"]
        assert events[3].citations == []

    def test_metrics(self, streamer_factory, llm_factory):
        from execution.cgi_rag.metrics import get_metrics_collector
        collect(streamer_factory(llm_factory(chunks=self.CHUNKS)), "Quel est le taux IS ?")
        streams = get_metrics_collector().get_metrics_dict()["streams"]
        assert streams["started"] == 1
        assert streams["completed"] == 1
        assert streams["failed"] == 0


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailedStream:

    def test_failure_mid_stream(self, streamer_factory, llm_factory):
        from execution.cgi_rag.streaming import StreamResult
        from execution.cgi_rag.text_patterns import LABELS
        llm = llm_factory(chunks=["L'article ", "86A ", "dispose"], fail_after=2)
        result = StreamResult()

        events = collect(streamer_factory(llm), "Quel est le taux IS ?", result=result)
        assert [e.type for e in events] == ["start", "chunk", "chunk", "error"]
        assert events[-1].error == LABELS["server_unreachable"]
        assert not result.completed
        assert "GenerationError" in result.error
        assert llm.last_stream.closed

    def test_failure_before_first_chunk(self, streamer_factory, llm_factory):
        events = collect(streamer_factory(llm_factory(fail=True)), "Quel est le taux IS ?")
        assert [e.type for e in events] == ["start", "error"]

    def test_failure_metrics(self, streamer_factory, llm_factory):
        from execution.cgi_rag.metrics import get_metrics_collector
        llm = llm_factory(chunks=["a", "b"], fail_after=1)
        collect(streamer_factory(llm), "Quel est le taux IS ?")
        metrics = get_metrics_collector().get_metrics_dict()
        assert metrics["streams"]["failed"] == 1
        assert metrics["streams"]["completed"] == 0
        assert metrics["errors"] == {"GenerationError": 1}

    def test_consumer_disconnect_closes_upstream(self, streamer_factory, llm_factory):
        from execution.cgi_rag.streaming import StreamResult
        llm = llm_factory(chunks=["un ", "deux ", "trois"])
        streamer = streamer_factory(llm)
        result = StreamResult()

        async def _run():
            events = []
            stream = streamer.stream("Quel est le taux IS ?", None, result)
            async for event in stream:
                events.append(event)
                if event.type == "chunk":
                    break
            await stream.aclose()
            return events

        events = asyncio.run(_run())
        assert [e.type for e in events] == ["start", "chunk"]
        assert llm.last_stream.closed
        assert not result.completed


# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------

class TestStreamEvent:

    def test_chunk_sse(self):
        from execution.cgi_rag.streaming import StreamEvent
        assert StreamEvent(type="chunk", content="exonéré").to_sse() == (
            'data: {"type": "chunk", "content": "exonéré"}\n\n'
        )

    def test_omits_empty_fields(self):
        from execution.cgi_rag.streaming import StreamEvent
        assert StreamEvent(type="start", edition="2025").to_dict() == {"type": "start", "edition": "2025"}

    def test_citations_serialized(self):
        from execution.cgi_rag.citation import Citation
        from execution.cgi_rag.streaming import StreamEvent
        event = StreamEvent(type="citations", citations=[Citation("Art. 86A", "Taux", "...", 0.9)])
        data = json.loads(event.to_sse()[len("data: "):])
        assert data == {
            "type": "citations",
            "citations": [{"articleNumber": "Art. 86A", "titre": "Taux", "excerpt": "...", "score": 0.9}],
        }

    def test_empty_citations_kept(self):
        from execution.cgi_rag.streaming import StreamEvent
        assert StreamEvent(type="citations", citations=[]).to_dict() == {"type": "citations", "citations": []}
