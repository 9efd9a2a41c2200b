"""
Edition Configuration for the CGI RAG Agent

Each CGI edition ("2025", "2026") carries its own grounding prompt, regex
tables, post-processing mode and retrieval limits. These are bundled in an
immutable EditionRules value object injected into the generic Agent.
"""

import os
from dataclasses import dataclass, replace, field
from datetime import date
from typing import Optional, Union

from .errors import UnknownEditionError
from .text_patterns import (
    SYSTEM_PROMPTS,
    NUMERIC_INSTRUCTION,
    NUMERIC_QUESTION_PATTERNS,
    KEY_PASSAGE_PATTERNS,
)
from .text_processing import compile_patterns


# Supported editions with their vector collection and validity window
SUPPORTED_EDITIONS = {
    "2025": {
        "name": "CGI 2025",
        "collection": "cgi_articles_2025",
        "valid_from": "2025-01-01",
        "valid_until": "2025-12-31",
        "postprocess_mode": "highlight",
    },
    "2026": {
        "name": "CGI 2026",
        "collection": "cgi_articles_2026",
        "valid_from": "2026-01-01",
        "valid_until": None,
        "postprocess_mode": "strip",
    },
}

CURRENT_EDITION = "2026"

# Aliases accepted wherever an edition is expected
EDITION_ALIASES = {
    "current": CURRENT_EDITION,
    "latest": CURRENT_EDITION,
}

POSTPROCESS_MODES = frozenset({"highlight", "strip"})

DEFAULT_LLM_MODEL = "meta/llama-3.3-70b-instruct"


def resolve_edition(edition: Optional[str]) -> str:
    """
    Map an edition label (or alias, or None) to a supported edition key.

    Raises:
        UnknownEditionError: if the label is not supported
    """
    if edition is None:
        edition = os.getenv("CGI_DEFAULT_EDITION", CURRENT_EDITION)
    key = str(edition).strip().lower()
    key = EDITION_ALIASES.get(key, key)
    if key not in SUPPORTED_EDITIONS:
        raise UnknownEditionError(str(edition), tuple(SUPPORTED_EDITIONS))
    return key


def _to_date(value: Union[str, date, None]) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value)


@dataclass(frozen=True)
class EditionRules:
    """Per-edition grounding, formatting and retrieval rules."""
    edition: str = CURRENT_EDITION
    display_name: str = "CGI 2026"
    collection_name: str = "cgi_articles_2026"
    system_prompt: str = ""
    numeric_instruction: str = NUMERIC_INSTRUCTION
    numeric_question_patterns: tuple = field(default=(), repr=False)
    key_passage_patterns: tuple = field(default=(), repr=False)
    postprocess_mode: str = "strip"

    # Retrieval and context window
    search_limit: int = 8
    context_sources: int = 6
    max_key_passages: int = 5
    excerpt_chars: int = 1000

    # Generation
    llm_model: str = DEFAULT_LLM_MODEL
    temperature: float = 0.0
    max_tokens: int = 2000

    valid_from: Optional[str] = None
    valid_until: Optional[str] = None

    def __post_init__(self):
        if self.postprocess_mode not in POSTPROCESS_MODES:
            raise ValueError(
                f"Unknown post-processing mode '{self.postprocess_mode}'. "
                f"Expected one of: {', '.join(sorted(POSTPROCESS_MODES))}"
            )

    @classmethod
    def for_edition(
        cls,
        edition: Optional[str] = None,
        postprocess_mode: Optional[str] = None,
    ) -> "EditionRules":
        """
        Factory method returning the rules for a given edition.

        Args:
            edition: Edition key or alias ("2025", "2026", "current")
            postprocess_mode: Override the edition's default ("highlight"/"strip")

        Returns:
            EditionRules with the edition's prompt and pattern tables
        """
        key = resolve_edition(edition)
        info = SUPPORTED_EDITIONS[key]
        mode = postprocess_mode or info["postprocess_mode"]
        if mode not in POSTPROCESS_MODES:
            raise ValueError(f"Unknown post-processing mode '{mode}'")

        return cls(
            edition=key,
            display_name=info["name"],
            collection_name=info["collection"],
            system_prompt=SYSTEM_PROMPTS[key][mode],
            numeric_question_patterns=compile_patterns(NUMERIC_QUESTION_PATTERNS[key]),
            key_passage_patterns=compile_patterns(KEY_PASSAGE_PATTERNS[key]),
            postprocess_mode=mode,
            llm_model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
            valid_from=info["valid_from"],
            valid_until=info["valid_until"],
        )

    def with_postprocess(self, mode: str) -> "EditionRules":
        """Copy of these rules using the other formatting variant."""
        if mode == self.postprocess_mode:
            return self
        if mode not in POSTPROCESS_MODES:
            raise ValueError(f"Unknown post-processing mode '{mode}'")
        return replace(
            self,
            postprocess_mode=mode,
            system_prompt=SYSTEM_PROMPTS[self.edition][mode],
        )

    def is_valid_for(self, when: Union[str, date, None] = None) -> bool:
        """Check whether ``when`` (default: today) falls inside this edition."""
        when = _to_date(when) or date.today()
        start = _to_date(self.valid_from)
        end = _to_date(self.valid_until)
        if start and when < start:
            return False
        if end and when > end:
            return False
        return True

    @property
    def highlights_numbers(self) -> bool:
        return self.postprocess_mode == "highlight"


def edition_for_date(when: Union[str, date, None] = None) -> str:
    """Pick the edition in force on a date, falling back to the current one."""
    for key in SUPPORTED_EDITIONS:
        if EditionRules.for_edition(key).is_valid_for(when):
            return key
    return CURRENT_EDITION
