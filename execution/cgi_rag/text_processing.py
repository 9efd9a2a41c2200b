"""
Text Processing for CGI Articles and Answers

Pure functions with no I/O:
- Query/keyword normalization (lowercase, diacritics stripped)
- Sentence segmentation that protects "Art." and decimal numbers
- Key passage extraction and excerpt truncation
- Numeric question detection
- Answer post-processing (numeric highlighting, markdown stripping)

The post-processors are idempotent: applying them twice gives the same text
as applying them once.
"""

import re
import unicodedata
from functools import lru_cache
from typing import Iterable

from .text_patterns import (
    HIGHLIGHT_PATTERN,
    EMOJI_PATTERN,
    TRAILING_SOURCE_PATTERN,
    GREETINGS,
    GREETING_MAX_LENGTH,
    KEY_PASSAGE_VALUE_PATTERN,
)

# Terms this short only match whole words ("is" must not fire inside "avis")
SHORT_TERM_LENGTH = 3

DEFAULT_MAX_KEY_PASSAGES = 5
DEFAULT_EXCERPT_CHARS = 1000
MIN_SENTENCE_LENGTH = 10

_DECIMAL_MARK = "\u2063DECIMAL\u2063"
_ABBREV_MARK = "\u2063DOT\u2063"

_HIGHLIGHT_RE = re.compile(HIGHLIGHT_PATTERN, re.IGNORECASE)
_WRAPPED_VALUE_RE = re.compile(r"\*\*(" + HIGHLIGHT_PATTERN + r")\*\*", re.IGNORECASE)
_BOLD_SPAN_RE = re.compile(r"(\*\*[^*\n]+?\*\*)")
_EMOJI_RE = re.compile(EMOJI_PATTERN)
_TRAILING_SOURCE_RE = re.compile(TRAILING_SOURCE_PATTERN, re.IGNORECASE)
_VALUE_RE = re.compile(KEY_PASSAGE_VALUE_PATTERN)


# =============================================================================
# Normalization
# =============================================================================

def strip_diacritics(text: str) -> str:
    """Remove accents: "exonération" -> "exoneration"."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_text(text: str) -> str:
    """Lowercase, strip diacritics, unify apostrophes and collapse whitespace."""
    if not text:
        return ""
    text = strip_diacritics(text.lower())
    text = text.replace("\u2019", "'").replace("\u00a0", " ")
    return " ".join(text.split())


@lru_cache(maxsize=4096)
def _whole_word_pattern(term: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)")


def contains_term(normalized_text: str, normalized_term: str) -> bool:
    """
    Check whether a normalized term occurs in a normalized text.

    Long terms match as substrings, short ones only as whole words.
    """
    if not normalized_term:
        return False
    if len(normalized_term) <= SHORT_TERM_LENGTH:
        return _whole_word_pattern(normalized_term).search(normalized_text) is not None
    return normalized_term in normalized_text


# =============================================================================
# Segmentation and Key Passages
# =============================================================================

def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> list[str]:
    """
    Split article text into sentences on "." and ";".

    "Art. 12" and decimals written "1. 5" are not treated as boundaries.
    Fragments of ``min_length`` characters or fewer are dropped.
    """
    if not text:
        return []

    protected = re.sub(r"(\d)\.\s+(\d)", rf"\1{_DECIMAL_MARK}\2", text)
    protected = re.sub(r"\b(Art)\.\s+", rf"\1{_ABBREV_MARK} ", protected, flags=re.IGNORECASE)

    sentences = []
    for part in re.split(r"[.;]\s+", protected):
        sentence = part.replace(_DECIMAL_MARK, ".").replace(_ABBREV_MARK, ".").strip()
        if len(sentence) > min_length:
            sentences.append(sentence)
    return sentences


def compile_patterns(patterns: Iterable[str]) -> tuple[re.Pattern, ...]:
    """Compile a pattern table once."""
    return tuple(re.compile(p) for p in patterns)


def extract_key_passages(
    text: str,
    patterns: Iterable[re.Pattern],
    limit: int = DEFAULT_MAX_KEY_PASSAGES,
) -> list[str]:
    """
    Return up to ``limit`` sentences carrying a number, rate or legal term.

    Sentences stating a value (rate, amount, duration) come first, then
    vocabulary-only ones; text order is kept within each group. Must be
    called on the full article text, before any truncation.
    """
    patterns = tuple(patterns)
    matches = [s for s in split_sentences(text) if any(p.search(s) for p in patterns)]
    with_value = [s for s in matches if _VALUE_RE.search(s)]
    vocabulary_only = [s for s in matches if not _VALUE_RE.search(s)]
    return (with_value + vocabulary_only)[:limit]


def truncate_text(text: str, limit: int = DEFAULT_EXCERPT_CHARS) -> str:
    """Cut text to ``limit`` characters, marking the cut with "..."."""
    if text is None:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


# =============================================================================
# Query Classification
# =============================================================================

def is_numeric_question(query: str, patterns: Iterable[re.Pattern]) -> bool:
    """True when the question asks for a deadline, rate, amount or bracket."""
    return any(p.search(query) for p in patterns)


def is_simple_greeting(query: str) -> bool:
    """Short messages opening with a greeting or thanks."""
    lowered = query.lower().strip()
    if len(lowered) >= GREETING_MAX_LENGTH:
        return False
    return any(lowered.startswith(g) for g in GREETINGS)


# =============================================================================
# Answer Post-processing
# =============================================================================

def _unwrap_values(text: str) -> str:
    while True:
        unwrapped = _WRAPPED_VALUE_RE.sub(r"\1", text)
        if unwrapped == text:
            return text
        text = unwrapped


def highlight_numeric_values(text: str) -> str:
    """
    Wrap durations, percentages and FCFA amounts in ``**``.

    Values already emphasized are unwrapped first and text inside an existing
    bold span is left alone, so emphasis is never nested or doubled.
    """
    if not text:
        return text

    parts = _BOLD_SPAN_RE.split(_unwrap_values(text))
    for i in range(0, len(parts), 2):
        parts[i] = _HIGHLIGHT_RE.sub(lambda m: f"**{m.group(0)}**", parts[i])
    return "".join(parts)


def _strip_markdown_once(text: str) -> str:
    text = re.sub(r"\*\*([^*\n]+)\*\*", r"\1", text)
    text = re.sub(r"(?<!\w)__([^_\n]+)__(?!\w)", r"\1", text)
    text = re.sub(r"\*([^*\n]+)\*", r"\1", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"\1", text)
    text = re.sub(r"^#{1,6}\s+", "", text, flags=re.MULTILINE)
    text = re.sub(r"^[ \t]*[*+][ \t]+", "- ", text, flags=re.MULTILINE)
    text = re.sub(r"-{3,}", "", text)
    text = re.sub(r"`([^`]+)`", r"\1", text)
    text = _EMOJI_RE.sub("", text)
    text = re.sub(r"[^\S\n]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def strip_markdown(text: str) -> str:
    """
    Remove bold, italics, headers, rules, code ticks and emoji.

    Line breaks are kept (lists stay one item per line). Runs until the text
    stops changing so stray markers paired up by a first pass are removed too.
    """
    if not text:
        return text
    while True:
        stripped = _strip_markdown_once(text)
        if stripped == text:
            return text
        text = stripped


def remove_trailing_source_line(text: str) -> str:
    """Drop a final "Source : CGI 2025" line; the UI shows sources itself."""
    if not text:
        return text
    return _TRAILING_SOURCE_RE.sub("", text).rstrip()
