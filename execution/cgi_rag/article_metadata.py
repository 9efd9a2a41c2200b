"""
Article Metadata Catalog

Static per-article attributes used for ranking: title, section, themes,
priority (1 = most important, 5 = least), defined concepts and key values.
Also holds the theme -> priority articles lists used for the thematic boost.

Built once per edition from the chapter tables and never mutated.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from .corpus import normalize_article_number
from .edition_config import resolve_edition
from .text_processing import normalize_text, contains_term
from .tables import EDITION_CHAPTERS

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 3
MIN_PRIORITY = 1
MAX_PRIORITY = 5


@dataclass(frozen=True)
class ArticleMetadata:
    """Curated attributes of one article."""
    numero: str
    titre: Optional[str] = None
    section: str = ""
    themes: tuple = ()
    priority: int = DEFAULT_PRIORITY
    defines: tuple = ()
    keywords: tuple = ()
    values: tuple = ()


def metadata_from_entry(entry: dict, descending_priority: bool = False) -> Optional[ArticleMetadata]:
    """
    Convert a table entry to ArticleMetadata.

    Args:
        entry: Raw table entry
        descending_priority: True when the table uses 5 = most important

    Returns:
        ArticleMetadata, or None for abrogated or malformed entries
    """
    numero = normalize_article_number(entry.get("numero") or "")
    if not numero:
        logger.warning(f"Metadata entry without article number skipped: {entry.get('titre')!r}")
        return None
    if entry.get("abroge"):
        logger.debug(f"Abrogated article {numero} left out of the catalog")
        return None

    priority = entry.get("priority", DEFAULT_PRIORITY)
    if not isinstance(priority, int) or not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        logger.warning(f"Invalid priority {priority!r} for {numero}; entry skipped")
        return None
    if descending_priority:
        priority = MAX_PRIORITY + 1 - priority

    section = entry.get("section_titre") or entry.get("section") or ""
    values = entry.get("valeurs")
    if values is None and isinstance(entry.get("valeurs_cles"), dict):
        values = [str(v) for v in entry["valeurs_cles"].values()]

    return ArticleMetadata(
        numero=numero,
        titre=entry.get("titre"),
        section=str(section),
        themes=tuple(entry.get("themes") or ()),
        priority=priority,
        defines=tuple(entry.get("defines") or ()),
        keywords=tuple(entry.get("keywords") or entry.get("mots_cles") or ()),
        values=tuple(values or ()),
    )


class ArticleMetadataCatalog:
    """
    Read-only lookup of article metadata for one edition.

    Usage:
        catalog = ArticleMetadataCatalog.for_edition("2026")
        catalog.priority("86A")                       # 1
        catalog.matching_themes("taux de l'IS")       # ["taux"]
        catalog.priority_articles_for_theme("taux")   # ("Art. 86A", ...)
    """

    def __init__(
        self,
        edition: str,
        entries: Iterable[ArticleMetadata] = (),
        theme_priorities: Optional[Mapping[str, Sequence[str]]] = None,
    ):
        self.edition = edition

        by_number = {}
        for meta in entries:
            if meta.numero in by_number:
                logger.warning(f"Duplicate metadata for {meta.numero} in CGI {edition}; keeping first")
                continue
            by_number[meta.numero] = meta
        self._entries = MappingProxyType(by_number)

        definitions = {}
        for meta in by_number.values():
            for concept in meta.defines:
                key = normalize_text(concept)
                if key and meta.numero not in definitions.get(key, ()):
                    definitions[key] = definitions.get(key, ()) + (meta.numero,)
        self._definitions = MappingProxyType(definitions)

        themes = {}
        labels = {}
        for theme, articles in (theme_priorities or {}).items():
            key = normalize_text(theme)
            ordered = list(themes.get(key, ()))
            for article in articles:
                numero = normalize_article_number(article)
                if numero and numero not in ordered:
                    ordered.append(numero)
            if not ordered:
                logger.warning(f"Theme '{theme}' has no priority articles (CGI {edition}); skipped")
                continue
            themes[key] = tuple(ordered)
            labels.setdefault(key, theme)
        self._themes = MappingProxyType(themes)
        self._theme_labels = MappingProxyType(labels)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, numero: str) -> bool:
        return normalize_article_number(numero) in self._entries

    def get(self, numero: str) -> Optional[ArticleMetadata]:
        return self._entries.get(normalize_article_number(numero))

    def priority(self, numero: str) -> int:
        """Curated priority, 3 for articles without metadata."""
        meta = self.get(numero)
        return meta.priority if meta else DEFAULT_PRIORITY

    @property
    def themes(self) -> tuple:
        return tuple(self._theme_labels.values())

    def priority_articles_for_theme(self, theme: str) -> tuple:
        return self._themes.get(normalize_text(theme), ())

    def matching_themes(self, query: str) -> list[str]:
        """Themes whose label occurs in the query, in declaration order."""
        normalized = normalize_text(query)
        return [
            self._theme_labels[key]
            for key in self._themes
            if contains_term(normalized, key)
        ]

    def articles_defining(self, concept: str) -> list[str]:
        """Articles whose ``defines`` list contains the concept."""
        return list(self._definitions.get(normalize_text(concept), ()))

    def defining_articles(self, query: str) -> list[str]:
        """Articles defining a concept named in the query."""
        normalized = normalize_text(query)
        found = []
        for concept, articles in self._definitions.items():
            if contains_term(normalized, concept):
                found.extend(a for a in articles if a not in found)
        return found

    @classmethod
    def from_chapters(cls, edition: str, chapters: Iterable) -> "ArticleMetadataCatalog":
        """
        Build a catalog from chapter table modules.

        Chapters without METADATA contribute nothing; THEME_PRIORITIES of
        several chapters are merged in chapter order.
        """
        entries = []
        theme_priorities = {}
        for chapter in chapters:
            raw_entries = getattr(chapter, "METADATA", None) or ()
            if isinstance(raw_entries, Mapping):
                raw_entries = raw_entries.values()
            descending = getattr(chapter, "METADATA_PRIORITY_DESCENDING", False)
            for raw in raw_entries:
                meta = metadata_from_entry(raw, descending_priority=descending)
                if meta is not None:
                    entries.append(meta)

            for theme, articles in (getattr(chapter, "THEME_PRIORITIES", None) or {}).items():
                theme_priorities.setdefault(theme, []).extend(articles)

        catalog = cls(edition, entries, theme_priorities)
        logger.info(f"Metadata catalog for CGI {edition}: {len(catalog)} articles, {len(catalog.themes)} themes")
        return catalog

    @classmethod
    def for_edition(cls, edition: Optional[str] = None) -> "ArticleMetadataCatalog":
        """Factory method building the catalog of an edition from its tables."""
        key = resolve_edition(edition)
        return cls.from_chapters(key, (module for _, module in EDITION_CHAPTERS.get(key, ())))
