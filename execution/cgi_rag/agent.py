"""
CGI Answering Agent

One Agent per CGI edition. The edition's EditionRules decide the search
depth, the context window, the system prompt and how the model's answer
is cleaned up; the pipeline itself is shared:

1. Retrieve articles (HybridSearchEngine)
2. Classify the question (numeric or not)
3. Build sources: key passages from the full text, then a truncated excerpt
4. Compose the grounded system prompt with the CONTEXTE CGI block
5. Generate with temperature 0
6. Post-process (highlight numeric values, or strip markdown)

``prepare()`` runs steps 1-4 so the streaming path shares them.
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Optional

from .edition_config import EditionRules
from .errors import UnknownEditionError
from .llm import LLMClient
from .retriever import HybridSearchEngine, SearchResult
from .text_patterns import CONVERSATIONAL_PROMPT, LABELS
from .text_processing import (
    extract_key_passages,
    truncate_text,
    is_numeric_question,
    is_simple_greeting,
    highlight_numeric_values,
    strip_markdown,
    remove_trailing_source_line,
)

logger = logging.getLogger(__name__)

CONFIDENCE_WITH_SOURCES = 0.8
CONFIDENCE_WITHOUT_SOURCES = 0.5


@dataclass
class ArticleSource:
    """An article as given to the model."""
    numero: str
    titre: Optional[str]
    extrait: str
    key_passages: list[str] = field(default_factory=list)
    full_content_length: int = 0
    version: str = ""
    score: float = 0.0
    match_type: str = ""

    def to_dict(self) -> dict:
        return {
            "numero": self.numero,
            "titre": self.titre,
            "extrait": self.extrait,
            "key_passages": list(self.key_passages),
            "full_content_length": self.full_content_length,
            "version": self.version,
            "score": self.score,
            "match_type": self.match_type,
        }


@dataclass
class AgentContext:
    """Everything needed to call the model for one question."""
    query: str
    edition: str
    sources: list[ArticleSource]
    system_prompt: str
    messages: list[dict]
    is_numeric: bool = False
    is_greeting: bool = False
    retrieval_ms: float = 0.0


@dataclass
class AgentResponse:
    """A finished answer with its sources."""
    answer: str
    sources: list[ArticleSource]
    edition: str
    agent_name: str
    confidence: float
    processing_time_ms: float
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "answer": self.answer,
            "sources": [s.to_dict() for s in self.sources],
            "edition": self.edition,
            "agent_name": self.agent_name,
            "confidence": self.confidence,
            "processing_time_ms": self.processing_time_ms,
            "metadata": dict(self.metadata),
        }


class Agent:
    """
    Grounded question answering over one CGI edition.

    Usage:
        agent = Agent(EditionRules.for_edition("2026"), engine, llm)
        response = await agent.process("Quel est le taux de l'IS ?")
    """

    def __init__(
        self,
        rules: EditionRules,
        search_engine: HybridSearchEngine,
        llm_client: LLMClient,
        name: Optional[str] = None,
    ):
        self.rules = rules
        self.search_engine = search_engine
        self.llm = llm_client
        self.name = name or f"cgi-{rules.edition}"

    @property
    def edition(self) -> str:
        return self.rules.edition

    # =========================================================================
    # Steps 1-4
    # =========================================================================

    async def _retrieve(self, query: str) -> list[SearchResult]:
        try:
            return await self.search_engine.search(query, self.rules.search_limit, self.rules.edition)
        except UnknownEditionError:
            raise
        except Exception as e:
            logger.warning(f"[{self.name}] Retrieval failed, answering without sources: {e}")
            return []

    def build_sources(self, results: list[SearchResult]) -> list[ArticleSource]:
        """Top results as sources; key passages come from the untruncated text."""
        sources = []
        for result in results[:self.rules.context_sources]:
            contenu = result.contenu or ""
            passages = extract_key_passages(
                contenu,
                self.rules.key_passage_patterns,
                limit=self.rules.max_key_passages,
            )
            sources.append(ArticleSource(
                numero=result.numero,
                titre=result.titre,
                extrait=truncate_text(contenu, self.rules.excerpt_chars),
                key_passages=passages,
                full_content_length=len(contenu),
                version=result.article.version or self.rules.edition,
                score=result.score,
                match_type=result.match_type,
            ))
        return sources

    def format_context(self, sources: list[ArticleSource]) -> str:
        if not sources:
            return LABELS["no_articles"]

        blocks = []
        for source in sources:
            header = f"---\n**{source.numero}** ({self.rules.display_name})"
            if source.titre:
                header += f" - {source.titre}"
            lines = [header]
            if source.key_passages:
                lines.append(f"**{LABELS['key_passages']}:**")
                lines.extend(f"- {p}" for p in source.key_passages)
                lines.append("")
            lines.append(f"**{LABELS['text']}:**")
            lines.append(source.extrait)
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def build_system_prompt(self, sources: list[ArticleSource], is_numeric: bool) -> str:
        prompt = self.rules.system_prompt
        if is_numeric:
            prompt += self.rules.numeric_instruction
        header = LABELS["context_header"].format(edition=self.rules.edition)
        return f"{prompt}\n\n{header}:\n{self.format_context(sources)}"

    @staticmethod
    def build_messages(query: str, history: Optional[list[dict]] = None) -> list[dict]:
        """Conversation turns for the model; system messages in history are dropped."""
        messages = [
            {"role": m["role"], "content": m["content"]}
            for m in (history or [])
            if m.get("role") in ("user", "assistant") and m.get("content")
        ]
        messages.append({"role": "user", "content": query})
        return messages

    async def prepare(self, query: str, history: Optional[list[dict]] = None) -> AgentContext:
        """Retrieve and build the prompt without calling the model."""
        messages = self.build_messages(query, history)

        if is_simple_greeting(query):
            logger.info(f"[{self.name}] Greeting, skipping retrieval")
            return AgentContext(
                query=query,
                edition=self.rules.edition,
                sources=[],
                system_prompt=CONVERSATIONAL_PROMPT,
                messages=messages,
                is_greeting=True,
            )

        start = time.time()
        results = await self._retrieve(query)
        retrieval_ms = (time.time() - start) * 1000

        numeric = is_numeric_question(query, self.rules.numeric_question_patterns)
        sources = self.build_sources(results)
        logger.info(
            f"[{self.name}] {len(sources)} articles for context"
            f"{' (numeric question)' if numeric else ''}: {', '.join(s.numero for s in sources)}"
        )

        return AgentContext(
            query=query,
            edition=self.rules.edition,
            sources=sources,
            system_prompt=self.build_system_prompt(sources, numeric),
            messages=messages,
            is_numeric=numeric,
            retrieval_ms=retrieval_ms,
        )

    # =========================================================================
    # Steps 5-6
    # =========================================================================

    def postprocess(self, answer: str, is_numeric: bool = False) -> str:
        """Apply the edition's formatting rules to a model answer."""
        if self.rules.highlights_numbers:
            return highlight_numeric_values(answer) if is_numeric else answer
        return remove_trailing_source_line(strip_markdown(answer))

    async def process(self, query: str, history: Optional[list[dict]] = None) -> AgentResponse:
        """
        Answer a question from the edition's articles.

        Raises:
            GenerationError: if the model call fails
        """
        start = time.time()
        context = await self.prepare(query, history)

        completion = await self.llm.complete(
            context.system_prompt,
            context.messages,
            model=self.rules.llm_model,
            temperature=self.rules.temperature,
            max_tokens=self.rules.max_tokens,
        )
        answer = self.postprocess(completion.text, context.is_numeric)

        elapsed = (time.time() - start) * 1000
        logger.info(f"[{self.name}] Answered in {elapsed:.0f}ms ({completion.tokens_used} tokens)")

        return AgentResponse(
            answer=answer,
            sources=context.sources,
            edition=self.rules.edition,
            agent_name=self.name,
            confidence=CONFIDENCE_WITH_SOURCES if context.sources else CONFIDENCE_WITHOUT_SOURCES,
            processing_time_ms=elapsed,
            metadata={
                "articles_consulted": len(context.sources),
                "model": completion.model,
                "temperature": self.rules.temperature,
                "is_numeric_question": context.is_numeric,
                "tokens_used": completion.tokens_used,
            },
        )

    @classmethod
    def for_edition(
        cls,
        edition: str,
        search_engine: HybridSearchEngine,
        llm_client: LLMClient,
        postprocess_mode: Optional[str] = None,
    ) -> "Agent":
        """Factory method building an agent with the edition's rules."""
        rules = EditionRules.for_edition(edition)
        if postprocess_mode:
            rules = rules.with_postprocess(postprocess_mode)
        return cls(rules, search_engine, llm_client)


# CLI for testing
if __name__ == "__main__":
    import sys
    import asyncio
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    engine = HybridSearchEngine.for_editions(["2026"])
    agent = Agent.for_edition("2026", engine, LLMClient())
    question = " ".join(sys.argv[1:]) or "Quel est le taux de l'IS ?"

    response = asyncio.run(agent.process(question))
    print(f"\n{response.answer}\n")
    for source in response.sources:
        print(f"- {source.numero} ({source.match_type}, {source.score:.2f})")
