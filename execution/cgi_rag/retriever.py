"""
Hybrid Search Engine for CGI Articles

Combines curated keyword matching with vector similarity, then applies a
bounded thematic boost and a deterministic ordering.

Pipeline:
1. Lexical candidates from the KeywordIndex (weights in [0, 1])
2. Vector candidates from the edition's pgvector table (cosine, clamped to [0, 1])
3. Linear fusion: keyword_weight * lexical + vector_weight * vector
4. Thematic boost for articles on the priority list of a theme in the query,
   plus a definition bonus for articles defining a concept the query names
5. Sort by score, then defining articles first, then catalog priority, then
   article number

Vector failures (embedding API, database, timeout) are logged and the
engine answers from keyword hits alone.
"""

import os
import time
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

import numpy as np

from .article_metadata import ArticleMetadataCatalog
from .corpus import Article, ArticleCorpus, normalize_article_number, article_sort_key
from .edition_config import SUPPORTED_EDITIONS, resolve_edition
from .errors import UnknownEditionError
from .keyword_index import KeywordIndex
from .metrics import get_metrics_collector

logger = logging.getLogger(__name__)

MATCH_KEYWORD = "keyword"
MATCH_VECTOR = "vector"
MATCH_BOTH = "both"


@dataclass
class SearchConfig:
    """Configuration for hybrid search."""
    keyword_weight: float = 0.5
    vector_weight: float = 0.5

    # Nearest neighbours requested from the vector store
    vector_top_k: int = 20

    # Results returned when the caller gives no limit
    default_limit: int = 8

    # Theme boost: theme_boost * (1 - position / len(list)), capped per article
    theme_boost: float = 0.1
    max_boost: float = 0.15

    # Bonus for articles defining a concept named in the query (within max_boost)
    definition_boost: float = 0.05

    # Seconds allowed for embedding + vector query
    vector_timeout: float = 5.0

    @classmethod
    def from_env(cls) -> "SearchConfig":
        return cls(vector_timeout=float(os.getenv("VECTOR_TIMEOUT", "5.0")))


@dataclass
class SearchResult:
    """One ranked article with its score components."""
    article: Article
    score: float
    match_type: str
    lexical_score: float = 0.0
    vector_score: float = 0.0
    boost: float = 0.0
    priority: int = 3

    @property
    def numero(self) -> str:
        return self.article.numero

    @property
    def titre(self) -> Optional[str]:
        return self.article.titre

    @property
    def contenu(self) -> str:
        return self.article.contenu

    def to_dict(self) -> dict:
        return {
            "numero": self.numero,
            "titre": self.titre,
            "score": self.score,
            "match_type": self.match_type,
            "lexical_score": self.lexical_score,
            "vector_score": self.vector_score,
            "boost": self.boost,
            "priority": self.priority,
        }


@dataclass
class EditionIndex:
    """Static search resources of one edition."""
    edition: str
    keyword_index: KeywordIndex
    catalog: ArticleMetadataCatalog
    corpus: ArticleCorpus = field(default=None)

    def __post_init__(self):
        if self.corpus is None:
            self.corpus = ArticleCorpus(self.edition)

    @classmethod
    def for_edition(cls, edition: str, corpus_dir: Optional[str] = None) -> "EditionIndex":
        """Factory method loading the tables and corpus of an edition."""
        key = resolve_edition(edition)
        catalog = ArticleMetadataCatalog.for_edition(key)
        return cls(
            edition=key,
            keyword_index=KeywordIndex.for_edition(key, catalog=catalog),
            catalog=catalog,
            corpus=ArticleCorpus.for_edition(key, corpus_dir=corpus_dir, catalog=catalog),
        )


def clamp_score(score) -> float:
    """Cosine similarity clamped to [0, 1]; NaN counts as 0."""
    value = float(np.nan_to_num(score, nan=0.0))
    return float(np.clip(value, 0.0, 1.0))


class HybridSearchEngine:
    """
    Keyword + vector article search over one or more CGI editions.

    Usage:
        engine = HybridSearchEngine(
            [EditionIndex.for_edition("2026")],
            vector_store=store,
            embedding_service=embeddings,
        )
        results = await engine.search("quel est le taux de l'IS", limit=8, version="2026")
    """

    def __init__(
        self,
        indexes: Iterable[EditionIndex],
        vector_store=None,
        embedding_service=None,
        config: Optional[SearchConfig] = None,
        metrics=None,
    ):
        self._indexes: Mapping[str, EditionIndex] = {idx.edition: idx for idx in indexes}
        self.store = vector_store
        self.embeddings = embedding_service
        self.config = config or SearchConfig()
        self._metrics = metrics

    @property
    def editions(self) -> tuple:
        return tuple(self._indexes)

    @property
    def metrics(self):
        return self._metrics or get_metrics_collector()

    def index_for(self, version: Optional[str] = None) -> EditionIndex:
        edition = resolve_edition(version)
        index = self._indexes.get(edition)
        if index is None:
            raise UnknownEditionError(edition, self.editions)
        return index

    # =========================================================================
    # Vector side
    # =========================================================================

    def _vector_query(self, query: str, edition: str, top_k: int) -> list:
        embedding = self.embeddings.embed_query(query)
        if not embedding:
            return []
        return self.store.search(edition, embedding, top_k)

    async def _vector_candidates(self, query: str, edition: str) -> Optional[list]:
        """
        Vector hits for the query, or None when the vector side is unavailable.
        """
        if self.store is None or self.embeddings is None:
            return None

        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._vector_query, query, edition, self.config.vector_top_k),
                timeout=self.config.vector_timeout,
            )
        except asyncio.TimeoutError:
            reason = f"timeout after {self.config.vector_timeout}s"
        except Exception as e:
            reason = f"{type(e).__name__}: {e}"

        logger.warning(f"Vector search degraded for CGI {edition} ({reason}); using keyword results only")
        self.metrics.record_degraded_retrieval(edition)
        return None

    async def _fetch_missing(self, edition: str, numbers: list[str]) -> dict:
        """Payloads for keyword hits found neither in the corpus nor in the vector hits."""
        if not numbers or self.store is None:
            return {}
        try:
            rows = await asyncio.wait_for(
                asyncio.to_thread(self.store.fetch_articles, edition, numbers),
                timeout=self.config.vector_timeout,
            )
        except Exception as e:
            logger.warning(f"Could not fetch {len(numbers)} keyword articles for CGI {edition}: {e}")
            return {}
        return {normalize_article_number(row.get("numero", "")): row for row in rows}

    # =========================================================================
    # Fusion
    # =========================================================================

    def _theme_boosts(self, query: str, catalog: ArticleMetadataCatalog) -> dict[str, float]:
        boosts = {}
        for theme in catalog.matching_themes(query):
            articles = catalog.priority_articles_for_theme(theme)
            for position, numero in enumerate(articles):
                gain = self.config.theme_boost * (1 - position / len(articles))
                boosts[numero] = min(boosts.get(numero, 0.0) + gain, self.config.max_boost)
        return boosts

    @staticmethod
    def _article_from_payload(payload: dict, edition: str, catalog: ArticleMetadataCatalog) -> Optional[Article]:
        numero = normalize_article_number(payload.get("numero") or "")
        if not numero:
            return None
        meta = catalog.get(numero)
        return Article(
            numero=numero,
            titre=payload.get("titre") or (meta.titre if meta else None),
            contenu=payload.get("contenu") or "",
            version=edition,
            section=meta.section if meta else "",
            themes=meta.themes if meta else (),
            priority=catalog.priority(numero),
            defined_concepts=meta.defines if meta else (),
            values=meta.values if meta else (),
        )

    async def search(
        self,
        query: str,
        limit: Optional[int] = None,
        version: Optional[str] = None,
    ) -> list[SearchResult]:
        """
        Ranked articles for a question.

        Args:
            query: User question
            limit: Maximum number of results (config.default_limit if None)
            version: Edition key or alias; "current" is the newest edition

        Returns:
            SearchResult list, best first. Backend failures degrade to
            keyword-only results instead of raising.

        Raises:
            UnknownEditionError: if the edition is not loaded
        """
        start = time.time()
        index = self.index_for(version)
        edition = index.edition
        limit = limit or self.config.default_limit

        lexical = index.keyword_index.find_article_scores(query)

        vector_scores = {}
        payloads = {}
        hits = await self._vector_candidates(query, edition)
        for hit in hits or []:
            numero = normalize_article_number(hit.payload.get("numero") or "")
            if not numero:
                continue
            score = clamp_score(hit.score)
            if numero not in vector_scores or score > vector_scores[numero]:
                vector_scores[numero] = score
                payloads[numero] = hit.payload

        missing = [n for n in lexical if n not in index.corpus and n not in payloads]
        if missing:
            payloads.update(await self._fetch_missing(edition, missing))

        boosts = self._theme_boosts(query, index.catalog)
        defining = set(index.catalog.defining_articles(query))
        for numero in defining:
            boosts[numero] = min(boosts.get(numero, 0.0) + self.config.definition_boost, self.config.max_boost)
        results = []
        for numero in set(lexical) | set(vector_scores):
            article = index.corpus.get(numero)
            if article is None and numero in payloads:
                article = self._article_from_payload(payloads[numero], edition, index.catalog)
            if article is None:
                logger.debug(f"{numero} matched but has no text in CGI {edition}; dropped")
                continue

            in_lexical = numero in lexical
            in_vector = numero in vector_scores
            if in_lexical and in_vector:
                match_type = MATCH_BOTH
            elif in_lexical:
                match_type = MATCH_KEYWORD
            else:
                match_type = MATCH_VECTOR

            lex = lexical.get(numero, 0.0)
            vec = vector_scores.get(numero, 0.0)
            boost = boosts.get(numero, 0.0)
            results.append(SearchResult(
                article=article,
                score=self.config.keyword_weight * lex + self.config.vector_weight * vec + boost,
                match_type=match_type,
                lexical_score=lex,
                vector_score=vec,
                boost=boost,
                priority=index.catalog.priority(numero),
            ))

        results.sort(key=lambda r: (-r.score, r.numero not in defining, r.priority, article_sort_key(r.numero)))
        results = results[:limit]

        elapsed = (time.time() - start) * 1000
        logger.info(
            f"Hybrid search CGI {edition}: {len(lexical)} keyword, {len(vector_scores)} vector -> "
            f"{', '.join(f'{r.numero}({r.match_type})' for r in results)} in {elapsed:.0f}ms"
        )
        return results

    @classmethod
    def for_editions(
        cls,
        editions: Optional[Iterable[str]] = None,
        vector_store=None,
        embedding_service=None,
        config: Optional[SearchConfig] = None,
        corpus_dir: Optional[str] = None,
    ) -> "HybridSearchEngine":
        """Factory method loading every requested edition (all by default)."""
        keys = [resolve_edition(e) for e in (editions or SUPPORTED_EDITIONS)]
        return cls(
            [EditionIndex.for_edition(key, corpus_dir=corpus_dir) for key in keys],
            vector_store=vector_store,
            embedding_service=embedding_service,
            config=config or SearchConfig.from_env(),
        )


# CLI for testing
if __name__ == "__main__":
    import sys
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    engine = HybridSearchEngine.for_editions(["2026"])
    query = " ".join(sys.argv[1:]) or "Quel est le taux de l'IS ?"

    print(f"\nSearching for: {query}")
    print("-" * 50)
    for i, result in enumerate(asyncio.run(engine.search(query, version="2026")), 1):
        print(f"{i}. {result.numero} [{result.match_type}] score={result.score:.3f} "
              f"(lex={result.lexical_score:.2f}, vec={result.vector_score:.2f}, boost={result.boost:.2f})")
