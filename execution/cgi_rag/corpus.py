"""
CGI Article Corpus

Loads the articles of one CGI edition from JSON and keeps them in an
immutable, read-only mapping keyed by canonical article number ("Art. 86A").

Two JSON layouts are accepted:
- Flat: a list of {"numero", "titre", "contenu", ...} objects (or {"articles": [...]})
- Source: {"meta": {...}, "sections": [{"titre", "articles", "sous_sections"}]}
  where each article is {"article", "titre", "texte": [lines]}
"""

import os
import re
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Optional
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_DIR = "data/corpus"

# Latin ordinal suffixes kept lowercase ("126 ter", "185 ter-A")
ORDINAL_WORDS = (
    "bis", "ter", "quater", "quinquies", "sexies",
    "septies", "octies", "nonies", "decies",
)

_PREFIX_RE = re.compile(r"^\s*(?:art(?:icle)?s?\.?)\s*", re.IGNORECASE)
_ORDINAL_RE = re.compile(r"^(\d+)\s*(?:er|ère|ere|ème|eme)(?=\s|$|-)", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^(\d+)")


# =============================================================================
# Article numbers
# =============================================================================

def parse_article_number(raw: str) -> str:
    """
    Strip the "Art."/"Article" prefix and ordinal markers.

    "Art. 1er" -> "1", "Article 86 a" -> "86A", "art. 126 TER a" -> "126 ter A"
    """
    if raw is None:
        return ""
    text = _PREFIX_RE.sub("", str(raw).strip())
    text = _ORDINAL_RE.sub(r"\1", text)
    tokens = text.replace("\u00a0", " ").split()
    if not tokens:
        return str(raw).strip()

    # "86 A" -> "86A"
    if len(tokens) >= 2 and tokens[0].isdigit() and len(tokens[1]) == 1 and tokens[1].isalpha():
        tokens = [tokens[0] + tokens[1]] + tokens[2:]

    normalized = []
    for token in tokens:
        lowered = token.lower()
        head = lowered.split("-", 1)[0]
        if head in ORDINAL_WORDS:
            rest = token[len(head):]
            normalized.append(head + rest.upper())
        else:
            normalized.append(token.upper())
    return " ".join(normalized)


def normalize_article_number(raw: str) -> str:
    """Canonical "Art. X" form used as key everywhere."""
    number = parse_article_number(raw)
    return f"Art. {number}" if number else ""


def article_sort_key(numero: str) -> tuple:
    """Order numerically on the leading integer, then by suffix."""
    number = parse_article_number(numero)
    match = _LEADING_NUMBER_RE.match(number)
    if not match:
        return (float("inf"), number.lower())
    return (int(match.group(1)), number[match.end():].strip().lower())


# =============================================================================
# Article
# =============================================================================

@dataclass(frozen=True)
class Article:
    """One statutory article of a CGI edition."""
    numero: str
    contenu: str
    version: str
    titre: Optional[str] = None
    section: str = ""
    themes: tuple = ()
    priority: int = 3
    defined_concepts: tuple = ()
    values: tuple = ()
    tome: Optional[str] = None
    chapitre: Optional[str] = None

    def to_payload(self) -> dict:
        """Vector store payload ({numero, titre, contenu})."""
        return {
            "numero": self.numero,
            "titre": self.titre,
            "contenu": self.contenu,
        }

    def to_dict(self) -> dict:
        return {
            "numero": self.numero,
            "titre": self.titre,
            "contenu": self.contenu,
            "version": self.version,
            "section": self.section,
            "themes": list(self.themes),
            "priority": self.priority,
            "defined_concepts": list(self.defined_concepts),
            "values": list(self.values),
            "tome": self.tome,
            "chapitre": self.chapitre,
        }


def _content_from_record(record: dict) -> str:
    content = record.get("contenu")
    if content is None:
        content = record.get("texte", record.get("content", ""))
    if isinstance(content, (list, tuple)):
        content = "\n".join(str(line) for line in content)
    chapeau = record.get("chapeau")
    if chapeau and chapeau not in content:
        content = f"{chapeau}\n{content}"
    return content or ""


def article_from_record(record: dict, edition: str) -> Optional[Article]:
    """Build an Article from a JSON record, or None when it has no number."""
    raw_number = record.get("numero") or record.get("article")
    if not raw_number or not isinstance(raw_number, str):
        return None
    return Article(
        numero=normalize_article_number(raw_number),
        titre=record.get("titre"),
        contenu=_content_from_record(record),
        version=str(record.get("version") or edition),
        section=record.get("section") or "",
        themes=tuple(record.get("themes") or ()),
        tome=record.get("tome"),
        chapitre=record.get("chapitre"),
    )


def extract_source_records(source: dict) -> Iterator[dict]:
    """
    Flatten the sectioned source layout into article records.

    Section and sub-section titles are carried down as ``section``.
    """
    meta = source.get("meta") or {}
    chapter = meta.get("chapitre_titre") or (
        f"Chapitre {meta['chapitre']}" if meta.get("chapitre") else None
    )
    tome = str(meta["tome"]) if meta.get("tome") else None

    def _with_section(articles, section_title):
        for art in articles or []:
            record = dict(art)
            if not isinstance(record.get("section"), str):
                record["section"] = section_title or meta.get("section_titre") or ""
            record.setdefault("tome", tome)
            record.setdefault("chapitre", chapter)
            yield record

    yield from _with_section(source.get("articles"), None)

    for section in source.get("sections") or []:
        title = section.get("titre") or (
            f"Section {section['section']}" if section.get("section") else None
        )
        yield from _with_section(section.get("articles"), title)
        for sub in section.get("sous_sections") or []:
            yield from _with_section(sub.get("articles"), sub.get("titre") or title)

    for sub in source.get("sous_sections") or []:
        title = sub.get("titre") or (
            f"Sous-section {sub['sous_section']}" if sub.get("sous_section") else None
        )
        yield from _with_section(sub.get("articles"), title)
        for para in sub.get("paragraphes") or []:
            yield from _with_section(para.get("articles"), para.get("titre") or title)


# =============================================================================
# Corpus
# =============================================================================

class ArticleCorpus:
    """
    Immutable in-memory collection of one edition's articles.

    Keyword-only search hits are materialised from here, so lexical results
    stay available when the vector store is down.
    """

    def __init__(self, edition: str, articles: Iterable[Article] = ()):
        self.edition = edition
        by_number = {}
        for article in articles:
            if article.numero in by_number:
                logger.warning(f"Duplicate article {article.numero} in CGI {edition}; keeping first")
                continue
            by_number[article.numero] = article
        self._articles = MappingProxyType(by_number)

    def get(self, numero: str) -> Optional[Article]:
        return self._articles.get(normalize_article_number(numero))

    def __contains__(self, numero: str) -> bool:
        return normalize_article_number(numero) in self._articles

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(self._articles.values())

    def numbers(self) -> list[str]:
        return sorted(self._articles, key=article_sort_key)

    @classmethod
    def from_records(
        cls,
        edition: str,
        records: Iterable[dict],
        catalog=None,
    ) -> "ArticleCorpus":
        """
        Build a corpus from JSON records.

        Args:
            edition: Edition key ("2025", "2026")
            records: Flat article records
            catalog: Optional ArticleMetadataCatalog used to fill priority,
                themes, defined concepts and values
        """
        articles = []
        skipped = 0
        for record in records:
            article = article_from_record(record, edition)
            if article is None:
                skipped += 1
                continue
            if catalog is not None:
                article = _enrich(article, catalog)
            articles.append(article)

        if skipped:
            logger.warning(f"Skipped {skipped} records without article number (CGI {edition})")
        return cls(edition, articles)

    @classmethod
    def load_json(cls, path, edition: str, catalog=None) -> "ArticleCorpus":
        """Load a corpus file in either the flat or the sectioned layout."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict) and ("sections" in data or "sous_sections" in data or "meta" in data):
            records = list(extract_source_records(data))
        elif isinstance(data, dict):
            records = data.get("articles", [])
        else:
            records = data

        corpus = cls.from_records(edition, records, catalog=catalog)
        logger.info(f"Loaded {len(corpus)} articles for CGI {edition} from {path}")
        return corpus

    @classmethod
    def for_edition(
        cls,
        edition: str,
        corpus_dir: Optional[str] = None,
        catalog=None,
    ) -> "ArticleCorpus":
        """
        Load ``cgi_<edition>.json`` from the corpus directory.

        A missing file gives an empty corpus (vector-only retrieval).
        """
        directory = Path(corpus_dir or os.getenv("CGI_CORPUS_DIR", DEFAULT_CORPUS_DIR))
        path = directory / f"cgi_{edition}.json"
        if not path.exists():
            logger.warning(f"Corpus file not found: {path}. Keyword hits need the vector payload.")
            return cls(edition)
        return cls.load_json(path, edition, catalog=catalog)


def _enrich(article: Article, catalog) -> Article:
    meta = catalog.get(article.numero)
    if meta is None:
        return article
    return replace(
        article,
        titre=article.titre or meta.titre,
        section=article.section or meta.section,
        themes=article.themes or meta.themes,
        priority=meta.priority,
        defined_concepts=meta.defines,
        values=meta.values,
    )
