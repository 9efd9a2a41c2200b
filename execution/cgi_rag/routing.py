"""
Query Routing

Forces a specific article for phrasings the keyword tables and embeddings
handle poorly ("22%" -> Art. 92A, "espèces" -> Art. 26).

Two mechanisms, checked in order:
1. Direct mappings: an exact phrase in the query names the article
2. Contextual rules: one required keyword plus, when the rule declares
   them, one context keyword; the first matching rule wins
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .corpus import normalize_article_number
from .edition_config import resolve_edition
from .tables import EDITION_ROUTING
from .text_processing import normalize_text, contains_term

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutingRule:
    """A contextual routing rule."""
    rule_id: str
    required: tuple
    route_to: str
    context: tuple = ()

    def matches(self, normalized_query: str) -> bool:
        if not any(contains_term(normalized_query, kw) for kw in self.required):
            return False
        if not self.context:
            return True
        return any(contains_term(normalized_query, kw) for kw in self.context)


class Router:
    """
    Routes a query to the articles it must surface.

    Keywords are normalized (lowercase, no diacritics) once at construction,
    so "especes" and "espèces" are the same trigger.
    """

    def __init__(
        self,
        direct_mappings: Optional[Mapping[str, str]] = None,
        rules: Iterable[RoutingRule] = (),
    ):
        direct = {}
        for phrase, article in (direct_mappings or {}).items():
            key = normalize_text(phrase)
            numero = normalize_article_number(article)
            if not key or not numero:
                logger.warning(f"Invalid direct mapping {phrase!r} -> {article!r}; skipped")
                continue
            direct.setdefault(key, numero)
        self._direct = tuple(direct.items())

        normalized_rules = []
        for rule in rules:
            required = tuple(normalize_text(kw) for kw in rule.required if kw)
            if not required:
                logger.warning(f"Routing rule {rule.rule_id} has no required keyword; skipped")
                continue
            normalized_rules.append(RoutingRule(
                rule_id=rule.rule_id,
                required=required,
                route_to=normalize_article_number(rule.route_to),
                context=tuple(normalize_text(kw) for kw in rule.context if kw),
            ))
        self.rules = tuple(normalized_rules)

    def direct_match(self, query: str) -> Optional[str]:
        normalized = normalize_text(query)
        for phrase, article in self._direct:
            if contains_term(normalized, phrase):
                logger.info(f"Direct mapping: '{phrase}' -> {article}")
                return article
        return None

    def rule_match(self, query: str) -> Optional[RoutingRule]:
        normalized = normalize_text(query)
        for rule in self.rules:
            if rule.matches(normalized):
                logger.info(f"Routing rule {rule.rule_id} -> {rule.route_to}")
                return rule
        return None

    def route(self, query: str) -> list[str]:
        """Articles routed for the query: direct mapping first, then the rule."""
        routed = []
        direct = self.direct_match(query)
        if direct:
            routed.append(direct)
        rule = self.rule_match(query)
        if rule and rule.route_to not in routed:
            routed.append(rule.route_to)
        return routed

    @classmethod
    def from_table(cls, table) -> "Router":
        """Build from a routing table module (DIRECT_KEYWORD_MAPPINGS, ROUTING_RULES)."""
        rules = [
            RoutingRule(
                rule_id=entry["rule_id"],
                required=tuple(entry.get("required") or ()),
                route_to=entry["route_to"],
                context=tuple(entry.get("context") or ()),
            )
            for entry in getattr(table, "ROUTING_RULES", ())
        ]
        return cls(getattr(table, "DIRECT_KEYWORD_MAPPINGS", None), rules)

    @classmethod
    def for_edition(cls, edition: Optional[str] = None) -> "Router":
        """Router for an edition; editions without routing tables route nothing."""
        key = resolve_edition(edition)
        table = EDITION_ROUTING.get(key)
        if table is None:
            return cls()
        return cls.from_table(table)
