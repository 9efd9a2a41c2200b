"""
Tests for execution/cgi_rag/llm.py

Covers: LLMConfig, completions with and without provider usage, streamed
        deltas, stream close, and GenerationError wrapping.

The OpenAI client is replaced with AsyncMock -- no network access.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest


def completion_response(text, total_tokens=None):
    usage = SimpleNamespace(total_tokens=total_tokens) if total_tokens else None
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=text))],
        usage=usage,
    )


def stream_chunk(content=None, total_tokens=None):
    choices = [SimpleNamespace(delta=SimpleNamespace(content=content))] if content is not None else []
    usage = SimpleNamespace(total_tokens=total_tokens) if total_tokens else None
    return SimpleNamespace(choices=choices, usage=usage)


class ScriptedStream:
    """Async iterable of chunks standing in for an openai AsyncStream."""

    def __init__(self, chunks, error=None):
        self._chunks = chunks
        self._error = error
        self.close = AsyncMock()

    async def _iterate(self):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    def __aiter__(self):
        return self._iterate()


def make_client(create):
    from execution.cgi_rag.llm import LLMClient, LLMConfig
    openai_client = MagicMock()
    openai_client.chat.completions.create = create
    return LLMClient(LLMConfig(api_key="test-key", model="test-model"), client=openai_client)


async def collect(stream):
    return [delta async for delta in stream]


class TestLLMConfig:

    def test_defaults(self):
        from execution.cgi_rag.llm import LLMConfig, NIM_BASE_URL
        cfg = LLMConfig()
        assert cfg.base_url == NIM_BASE_URL
        assert cfg.api_key is None
        assert cfg.timeout == 60.0

    def test_from_env(self, monkeypatch):
        from execution.cgi_rag.llm import LLMConfig
        monkeypatch.setenv("NVIDIA_API_KEY", "nv-key")
        monkeypatch.setenv("LLM_MODEL", "meta/llama-3.3-70b-instruct")
        monkeypatch.setenv("LLM_TIMEOUT", "15")
        monkeypatch.delenv("LLM_BASE_URL", raising=False)
        cfg = LLMConfig.from_env()
        assert cfg.api_key == "nv-key"
        assert cfg.model == "meta/llama-3.3-70b-instruct"
        assert cfg.timeout == 15.0

    def test_estimate_tokens(self):
        from execution.cgi_rag.llm import estimate_tokens
        assert estimate_tokens("") == 0
        assert estimate_tokens("abc") == 1
        assert estimate_tokens("x" * 400) == 100


class TestComplete:

    def test_answer_and_usage(self):
        create = AsyncMock(return_value=completion_response("Le taux est de 28%.", total_tokens=57))
        client = make_client(create)

        completion = asyncio.run(client.complete("system", [{"role": "user", "content": "taux IS ?"}]))

        assert completion.text == "Le taux est de 28%."
        assert completion.tokens_used == 57
        assert completion.model == "test-model"
        kwargs = create.call_args.kwargs
        assert kwargs["temperature"] == 0.0
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1]["content"] == "taux IS ?"

    def test_token_estimate_without_usage(self):
        create = AsyncMock(return_value=completion_response("x" * 80))
        completion = asyncio.run(make_client(create).complete("s", []))
        assert completion.tokens_used == 20

    def test_model_override(self):
        create = AsyncMock(return_value=completion_response("ok", total_tokens=3))
        completion = asyncio.run(make_client(create).complete("s", [], model="other-model"))
        assert completion.model == "other-model"
        assert create.call_args.kwargs["model"] == "other-model"

    def test_provider_error_wrapped(self):
        from execution.cgi_rag.errors import GenerationError
        create = AsyncMock(side_effect=ConnectionError("reset by peer"))
        with pytest.raises(GenerationError) as exc_info:
            asyncio.run(make_client(create).complete("s", []))
        assert exc_info.value.model == "test-model"
        assert "ConnectionError" in str(exc_info.value)

    def test_no_choices(self):
        from execution.cgi_rag.errors import GenerationError
        create = AsyncMock(return_value=SimpleNamespace(choices=[], usage=None))
        with pytest.raises(GenerationError):
            asyncio.run(make_client(create).complete("s", []))


class TestStream:

    def test_deltas_and_usage(self):
        upstream = ScriptedStream([
            stream_chunk("Selon l'article 86A, "),
            stream_chunk(""),
            stream_chunk("le taux est de 28%."),
            stream_chunk(total_tokens=64),
        ])
        create = AsyncMock(return_value=upstream)
        client = make_client(create)

        async def run():
            stream = await client.stream("s", [{"role": "user", "content": "taux"}])
            deltas = await collect(stream)
            return stream, deltas

        stream, deltas = asyncio.run(run())
        assert deltas == ["Selon l'article 86A, ", "le taux est de 28%."]
        assert stream.tokens_used == 64
        assert create.call_args.kwargs["stream"] is True
        assert create.call_args.kwargs["stream_options"] == {"include_usage": True}

    def test_token_estimate_without_usage(self):
        upstream = ScriptedStream([stream_chunk("x" * 40)])
        client = make_client(AsyncMock(return_value=upstream))

        async def run():
            stream = await client.stream("s", [])
            await collect(stream)
            return stream

        assert asyncio.run(run()).tokens_used == 10

    def test_midstream_error_wrapped(self):
        from execution.cgi_rag.errors import GenerationError
        upstream = ScriptedStream([stream_chunk("L'article ")], error=TimeoutError("read timeout"))
        client = make_client(AsyncMock(return_value=upstream))
        received = []

        async def run():
            stream = await client.stream("s", [])
            async for delta in stream:
                received.append(delta)

        with pytest.raises(GenerationError):
            asyncio.run(run())
        assert received == ["L'article "]

    def test_aclose_once(self):
        upstream = ScriptedStream([stream_chunk("a")])
        client = make_client(AsyncMock(return_value=upstream))

        async def run():
            stream = await client.stream("s", [])
            await stream.aclose()
            await stream.aclose()

        asyncio.run(run())
        upstream.close.assert_awaited_once()

    def test_start_failure(self):
        from execution.cgi_rag.errors import GenerationError
        client = make_client(AsyncMock(side_effect=RuntimeError("503 Service Unavailable")))
        with pytest.raises(GenerationError, match="LLM stream failed"):
            asyncio.run(client.stream("s", []))
