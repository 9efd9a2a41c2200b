"""
LLM Client for Answer Generation

Thin async wrapper over an OpenAI-compatible chat completions API (NVIDIA
NIM by default). Provider failures are raised as GenerationError so the
caller can decide between an HTTP 502 and a stream error event.
"""

import os
import logging
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from .edition_config import DEFAULT_LLM_MODEL
from .errors import GenerationError

logger = logging.getLogger(__name__)

NIM_BASE_URL = "https://integrate.api.nvidia.com/v1"

# Rough chars-per-token ratio for French when the provider reports no usage
CHARS_PER_TOKEN = 4


@dataclass
class LLMConfig:
    """Connection settings for the chat completions provider."""
    base_url: str = NIM_BASE_URL
    api_key: Optional[str] = None
    model: str = DEFAULT_LLM_MODEL
    timeout: float = 60.0

    @classmethod
    def from_env(cls) -> "LLMConfig":
        return cls(
            base_url=os.getenv("LLM_BASE_URL", NIM_BASE_URL),
            api_key=os.getenv("NVIDIA_API_KEY") or os.getenv("LLM_API_KEY"),
            model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
            timeout=float(os.getenv("LLM_TIMEOUT", "60")),
        )


@dataclass
class Completion:
    """A finished, non-streamed answer."""
    text: str
    tokens_used: int
    model: str


def estimate_tokens(text: str) -> int:
    return max(1, len(text) // CHARS_PER_TOKEN) if text else 0


def _describe(e: Exception) -> str:
    from openai import APITimeoutError
    if isinstance(e, APITimeoutError):
        return "timed out"
    return f"{type(e).__name__}: {e}"


class LLMStream:
    """
    Async iterator over the text deltas of a streamed completion.

    ``tokens_used`` is filled once the stream is exhausted. ``aclose()``
    closes the underlying HTTP response; call it when the consumer goes away.
    """

    def __init__(self, stream, model: str):
        self._stream = stream
        self.model = model
        self.tokens_used = 0
        self._text_length = 0
        self._closed = False

    def __aiter__(self) -> AsyncIterator[str]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[str]:
        usage = None
        try:
            async for chunk in self._stream:
                if getattr(chunk, "usage", None):
                    usage = chunk.usage
                if chunk.choices and chunk.choices[0].delta.content:
                    content = chunk.choices[0].delta.content
                    self._text_length += len(content)
                    yield content
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"LLM stream failed ({self.model}): {_describe(e)}")
            raise GenerationError(f"LLM stream failed: {_describe(e)}", model=self.model) from e

        if usage is not None and getattr(usage, "total_tokens", None):
            self.tokens_used = usage.total_tokens
        else:
            self.tokens_used = max(1, self._text_length // CHARS_PER_TOKEN) if self._text_length else 0

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._stream, "close", None)
        if close is not None:
            await close()


class LLMClient:
    """
    Async chat completion client.

    Usage:
        client = LLMClient(LLMConfig.from_env())
        completion = await client.complete(system_prompt, [{"role": "user", "content": q}])
        stream = await client.stream(system_prompt, messages)
        async for delta in stream:
            ...
    """

    def __init__(self, config: Optional[LLMConfig] = None, client=None):
        self.config = config or LLMConfig.from_env()
        self._client = client
        if self._client is None:
            self._init_client()

    def _init_client(self):
        from openai import AsyncOpenAI

        if not self.config.api_key:
            logger.warning("NVIDIA_API_KEY / LLM_API_KEY not set. Generation will fail.")
        self._client = AsyncOpenAI(
            base_url=self.config.base_url,
            api_key=self.config.api_key or "missing",
            timeout=self.config.timeout,
        )

    @staticmethod
    def _messages(system: str, messages: list[dict]) -> list[dict]:
        return [{"role": "system", "content": system}] + list(messages)

    async def complete(
        self,
        system: str,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 2000,
    ) -> Completion:
        """
        Generate a full answer.

        Raises:
            GenerationError: on any provider failure or empty answer
        """
        model = model or self.config.model
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=self._messages(system, messages),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.error(f"LLM generation failed ({model}): {_describe(e)}")
            raise GenerationError(f"LLM generation failed: {_describe(e)}", model=model) from e

        if not response.choices:
            raise GenerationError("LLM returned no choices", model=model)

        text = response.choices[0].message.content or ""
        usage = getattr(response, "usage", None)
        tokens = getattr(usage, "total_tokens", None) or estimate_tokens(text)
        return Completion(text=text, tokens_used=tokens, model=model)

    async def stream(
        self,
        system: str,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 2000,
    ) -> LLMStream:
        """
        Open a streamed completion.

        Raises:
            GenerationError: if the request cannot be started
        """
        model = model or self.config.model
        try:
            stream = await self._client.chat.completions.create(
                model=model,
                messages=self._messages(system, messages),
                temperature=temperature,
                max_tokens=max_tokens,
                stream=True,
                stream_options={"include_usage": True},
            )
        except Exception as e:
            logger.error(f"LLM stream could not start ({model}): {_describe(e)}")
            raise GenerationError(f"LLM stream failed: {_describe(e)}", model=model) from e
        return LLMStream(stream, model)

    async def close(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()
