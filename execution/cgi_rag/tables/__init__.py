"""
Static CGI tables, one module per edition and chapter.

EDITION_CHAPTERS lists the chapter modules searched for an edition, in
lookup order. Each chapter module exposes KEYWORDS and SYNONYMS and,
when the chapter has curated metadata, METADATA and THEME_PRIORITIES.
"""

from types import MappingProxyType

from . import (
    dc_2025,
    dd_2025,
    iba_2026,
    il_2025,
    irpp_2025,
    is_2025,
    is_2026,
    pv_2025,
    routing_2026,
    td_2025,
)

EDITION_CHAPTERS = MappingProxyType({
    "2025": (
        ("irpp", irpp_2025),
        ("is", is_2025),
        ("dispositions-communes", dc_2025),
        ("taxes-diverses", td_2025),
        ("dispositions-diverses", dd_2025),
        ("plus-values-btp-reassurance", pv_2025),
        ("impots-locaux", il_2025),
    ),
    "2026": (
        ("is", is_2026),
        ("iba-ircm-its", iba_2026),
    ),
})

EDITION_ROUTING = MappingProxyType({
    "2026": routing_2026,
})
