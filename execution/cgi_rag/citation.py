"""
Citation Extraction for Generated Answers

Finds the articles a generated answer mentions ("l'article 86A",
"articles 3 et 4", "Art. 126 ter") and resolves them against the sources
that were given to the model. Mentions of articles that were not in the
context are dropped.
"""

import re
import logging
from typing import Iterable, Optional
from dataclasses import dataclass

from .corpus import normalize_article_number, article_sort_key
from .text_patterns import ARTICLE_MENTION_PATTERN, ARTICLE_NUMBER_TOKEN

logger = logging.getLogger(__name__)

EXCERPT_CHARS = 200

_MENTION_RE = re.compile(ARTICLE_MENTION_PATTERN)
_NUMBER_RE = re.compile(ARTICLE_NUMBER_TOKEN)


@dataclass
class Citation:
    """An article cited by an answer."""
    article_number: str
    titre: Optional[str]
    excerpt: str
    score: float

    def short_format(self) -> str:
        if self.titre:
            return f"[{self.article_number} - {self.titre}]"
        return f"[{self.article_number}]"

    def to_dict(self) -> dict:
        return {
            "articleNumber": self.article_number,
            "titre": self.titre,
            "excerpt": self.excerpt,
            "score": self.score,
        }


def find_article_mentions(text: str) -> list[str]:
    """Article numbers mentioned in ``text``, normalized, in order of appearance."""
    if not text:
        return []

    mentions = []
    for match in _MENTION_RE.finditer(text):
        group = match.group(1) or match.group(2) or ""
        for token in _NUMBER_RE.findall(group):
            numero = normalize_article_number(token)
            if numero and numero not in mentions:
                mentions.append(numero)
    return mentions


def _excerpt(source) -> str:
    content = getattr(source, "extrait", None) or getattr(source, "contenu", "") or ""
    return content[:EXCERPT_CHARS] + "..."


class CitationExtractor:
    """
    Resolves article mentions in an answer against its sources.

    Sources are any objects with ``numero``, ``titre``, ``score`` and either
    ``extrait`` or ``contenu`` (ArticleSource, SearchResult).
    """

    def extract(self, text: str, sources: Iterable) -> list[Citation]:
        """
        Citations for the articles ``text`` mentions.

        Returns:
            Citation list sorted by article number, one per article
        """
        by_number = {}
        for source in sources:
            numero = normalize_article_number(source.numero)
            if numero and numero not in by_number:
                by_number[numero] = source

        citations = {}
        for numero in find_article_mentions(text):
            source = by_number.get(numero)
            if source is None:
                logger.info(f"Answer mentions {numero}, which is not among the sources; not cited")
                continue
            citations[numero] = Citation(
                article_number=numero,
                titre=source.titre,
                excerpt=_excerpt(source),
                score=float(source.score),
            )

        return [citations[n] for n in sorted(citations, key=article_sort_key)]


# CLI for testing
if __name__ == "__main__":
    from types import SimpleNamespace

    logging.basicConfig(level=logging.INFO)

    sources = [
        SimpleNamespace(numero="Art. 86A", titre="Taux de l'IS", score=0.91,
                        extrait="Le taux de l'impôt sur les sociétés est fixé à 28%."),
        SimpleNamespace(numero="Art. 86B", titre="Taux réduits", score=0.74,
                        extrait="Un taux de 25% est applicable aux microfinances."),
    ]
    answer = "Selon l'article 86A, le taux est de 28%. Voir aussi les articles 86B et 12."

    for citation in CitationExtractor().extract(answer, sources):
        print(citation.short_format(), citation.to_dict())
