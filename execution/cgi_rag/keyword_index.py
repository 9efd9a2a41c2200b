"""
Keyword Index for CGI Articles

Curated keyword -> article tables with weighted synonym expansion.

Scoring:
- A keyword found in the query gives its articles their table weight
- A synonym (or the canonical term itself) gives the canonical term's
  articles weight x 0.9
- Routed articles (direct mappings, contextual rules) get weight 1.0
- Weights aggregate with max, never sum, so scores stay in [0, 1]

Matching is done on normalized text (lowercase, no diacritics); terms of
three characters or fewer ("is", "sa") only match whole words.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .article_metadata import ArticleMetadataCatalog
from .corpus import normalize_article_number, article_sort_key
from .edition_config import resolve_edition
from .routing import Router
from .tables import EDITION_CHAPTERS
from .text_processing import normalize_text, contains_term

logger = logging.getLogger(__name__)

SYNONYM_FACTOR = 0.9
ROUTING_WEIGHT = 1.0

# Weights for plain ordered lists: 1.0, 0.9, 0.8, ... floored at 0.5
POSITION_WEIGHT_STEP = 0.1
MIN_POSITION_WEIGHT = 0.5


@dataclass(frozen=True)
class ArticleWeight:
    """One article of a keyword entry with its relevance weight in [0, 1]."""
    article: str
    weight: float


def position_weight(position: int) -> float:
    return max(1.0 - POSITION_WEIGHT_STEP * position, MIN_POSITION_WEIGHT)


def _to_weights(keyword: str, entries) -> tuple:
    weights = []
    for position, entry in enumerate(entries):
        if isinstance(entry, (tuple, list)):
            article, weight = entry
        else:
            article, weight = entry, position_weight(position)

        numero = normalize_article_number(article)
        if not numero:
            logger.warning(f"Keyword '{keyword}': invalid article {article!r} skipped")
            continue
        if not 0.0 <= weight <= 1.0:
            logger.warning(f"Keyword '{keyword}': weight {weight} for {numero} clamped to [0, 1]")
            weight = min(max(weight, 0.0), 1.0)
        weights.append(ArticleWeight(numero, float(weight)))
    return tuple(weights)


def _merge(existing: tuple, new: tuple) -> tuple:
    """Union of two weight lists, keeping the max weight per article."""
    merged = {aw.article: aw for aw in existing}
    for aw in new:
        current = merged.get(aw.article)
        if current is None or aw.weight > current.weight:
            merged[aw.article] = aw
    return tuple(merged.values())


@dataclass(frozen=True)
class KeywordChapter:
    """Keyword and synonym tables of one CGI chapter, already normalized."""
    name: str
    mappings: Mapping[str, tuple]
    synonyms: Mapping[str, tuple]

    @classmethod
    def from_table(
        cls,
        name: str,
        keywords: Mapping[str, Iterable],
        synonyms: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "KeywordChapter":
        """
        Normalize a raw table.

        Args:
            name: Chapter label for logs
            keywords: keyword -> ordered article list, or list of
                (article, weight) pairs
            synonyms: canonical term -> surface forms

        Entries with no valid article, and synonyms whose canonical term
        has no keyword entry, are logged and skipped.
        """
        mappings = {}
        for keyword, entries in keywords.items():
            key = normalize_text(keyword)
            weights = _to_weights(keyword, entries or ())
            if not key or not weights:
                logger.warning(f"Chapter {name}: keyword '{keyword}' has no article; skipped")
                continue
            mappings[key] = _merge(mappings.get(key, ()), weights)

        normalized_synonyms = {}
        for term, forms in (synonyms or {}).items():
            key = normalize_text(term)
            if key not in mappings:
                logger.warning(f"Chapter {name}: synonym term '{term}' has no keyword entry; skipped")
                continue
            surface = tuple(f for f in (normalize_text(s) for s in forms) if f)
            normalized_synonyms[key] = normalized_synonyms.get(key, ()) + surface

        return cls(
            name=name,
            mappings=MappingProxyType(mappings),
            synonyms=MappingProxyType(normalized_synonyms),
        )

    @classmethod
    def from_module(cls, name: str, module) -> "KeywordChapter":
        return cls.from_table(name, module.KEYWORDS, getattr(module, "SYNONYMS", None))


class KeywordIndex:
    """
    Lexical article lookup over one or more chapters.

    Usage:
        index = KeywordIndex.for_edition("2026")
        index.find_article_scores("taux IS 25%")   # {"Art. 86A": 1.0, ...}
        index.find_articles("taux IS 25%")         # ["Art. 86A", ...]
    """

    def __init__(
        self,
        chapters: Iterable[KeywordChapter],
        catalog=None,
        router=None,
    ):
        self.chapters = tuple(chapters)
        self.catalog = catalog
        self.router = router

    def find_article_scores(self, query: str) -> dict[str, float]:
        """Article -> lexical weight in [0, 1] for every article the query hits."""
        normalized = normalize_text(query)
        if not normalized:
            return {}

        scores = {}

        def _apply(weights, factor=1.0):
            for aw in weights:
                weight = aw.weight * factor
                if weight > scores.get(aw.article, 0.0):
                    scores[aw.article] = weight

        for chapter in self.chapters:
            for keyword, weights in chapter.mappings.items():
                if contains_term(normalized, keyword):
                    _apply(weights)

            for term, forms in chapter.synonyms.items():
                weights = chapter.mappings[term]
                if contains_term(normalized, term) or any(contains_term(normalized, f) for f in forms):
                    _apply(weights, SYNONYM_FACTOR)

        if self.router is not None:
            for article in self.router.route(query):
                scores[article] = ROUTING_WEIGHT

        return scores

    def _priority(self, numero: str) -> int:
        return self.catalog.priority(numero) if self.catalog is not None else 3

    def rank(self, scores: Mapping[str, float]) -> list[str]:
        """Descending weight, then ascending priority, then article number."""
        return sorted(
            scores,
            key=lambda numero: (-scores[numero], self._priority(numero), article_sort_key(numero)),
        )

    def find_articles(self, query: str) -> list[str]:
        scores = self.find_article_scores(query)
        articles = self.rank(scores)
        if articles:
            logger.debug(f"Keyword hits for '{query[:50]}': {articles[:8]}")
        return articles

    @classmethod
    def for_edition(cls, edition: Optional[str] = None, catalog=None, router=None) -> "KeywordIndex":
        """
        Factory method building the index of an edition from its tables.

        Args:
            edition: Edition key or alias
            catalog: ArticleMetadataCatalog for tie-breaks (built if None)
            router: Router for the edition (built if None)
        """
        key = resolve_edition(edition)
        chapters = [KeywordChapter.from_module(name, module) for name, module in EDITION_CHAPTERS.get(key, ())]
        index = cls(
            chapters,
            catalog=catalog if catalog is not None else ArticleMetadataCatalog.for_edition(key),
            router=router if router is not None else Router.for_edition(key),
        )
        logger.info(
            f"Keyword index for CGI {key}: "
            f"{sum(len(c.mappings) for c in chapters)} keywords in {len(chapters)} chapters"
        )
        return index
