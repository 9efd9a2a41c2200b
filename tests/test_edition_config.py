"""
Tests for execution/cgi_rag/edition_config.py

Covers: edition resolution and aliases, EditionRules factory defaults,
        post-processing variants and validity windows.
"""

import pytest


class TestResolveEdition:

    def test_supported_keys(self):
        from execution.cgi_rag.edition_config import resolve_edition
        assert resolve_edition("2025") == "2025"
        assert resolve_edition(" 2026 ") == "2026"

    @pytest.mark.parametrize("alias", ["current", "latest", "CURRENT"])
    def test_aliases_map_to_newest(self, alias):
        from execution.cgi_rag.edition_config import resolve_edition
        assert resolve_edition(alias) == "2026"

    def test_none_reads_environment(self, monkeypatch):
        from execution.cgi_rag.edition_config import resolve_edition
        monkeypatch.setenv("CGI_DEFAULT_EDITION", "2025")
        assert resolve_edition(None) == "2025"

    def test_none_defaults_to_current(self, monkeypatch):
        from execution.cgi_rag.edition_config import resolve_edition
        monkeypatch.delenv("CGI_DEFAULT_EDITION", raising=False)
        assert resolve_edition(None) == "2026"

    def test_unknown_edition_raises(self):
        from execution.cgi_rag.edition_config import resolve_edition
        from execution.cgi_rag.errors import UnknownEditionError
        with pytest.raises(UnknownEditionError) as exc_info:
            resolve_edition("2024")
        assert exc_info.value.edition == "2024"
        assert "2025" in str(exc_info.value)


class TestEditionRules:

    def test_retrieval_defaults(self):
        from execution.cgi_rag.edition_config import EditionRules
        rules = EditionRules.for_edition("2026")
        assert rules.search_limit == 8
        assert rules.context_sources == 6
        assert rules.max_key_passages == 5
        assert rules.excerpt_chars == 1000
        assert rules.temperature == 0.0
        assert rules.display_name == "CGI 2026"

    def test_default_postprocess_per_edition(self):
        from execution.cgi_rag.edition_config import EditionRules
        assert EditionRules.for_edition("2025").postprocess_mode == "highlight"
        assert EditionRules.for_edition("2025").highlights_numbers
        assert EditionRules.for_edition("2026").postprocess_mode == "strip"
        assert not EditionRules.for_edition("2026").highlights_numbers

    def test_override_postprocess_selects_prompt(self):
        from execution.cgi_rag.edition_config import EditionRules
        from execution.cgi_rag.text_patterns import SYSTEM_PROMPTS
        rules = EditionRules.for_edition("2026", postprocess_mode="highlight")
        assert rules.postprocess_mode == "highlight"
        assert rules.system_prompt == SYSTEM_PROMPTS["2026"]["highlight"]

    def test_with_postprocess_copies(self):
        from execution.cgi_rag.edition_config import EditionRules
        from execution.cgi_rag.text_patterns import SYSTEM_PROMPTS
        rules = EditionRules.for_edition("2025")
        stripped = rules.with_postprocess("strip")
        assert stripped.system_prompt == SYSTEM_PROMPTS["2025"]["strip"]
        assert rules.postprocess_mode == "highlight"
        assert rules.with_postprocess("highlight") is rules

    def test_invalid_postprocess_rejected(self):
        from execution.cgi_rag.edition_config import EditionRules
        with pytest.raises(ValueError):
            EditionRules.for_edition("2026", postprocess_mode="markdown")
        with pytest.raises(ValueError):
            EditionRules.for_edition("2026").with_postprocess("plain")

    def test_model_from_environment(self, monkeypatch):
        from execution.cgi_rag.edition_config import EditionRules
        monkeypatch.setenv("LLM_MODEL", "meta/llama-3.1-8b-instruct")
        assert EditionRules.for_edition("2026").llm_model == "meta/llama-3.1-8b-instruct"

    def test_rules_are_immutable(self):
        from dataclasses import FrozenInstanceError
        from execution.cgi_rag.edition_config import EditionRules
        rules = EditionRules.for_edition("2026")
        with pytest.raises(FrozenInstanceError):
            rules.search_limit = 20


class TestValidity:

    def test_window(self):
        from execution.cgi_rag.edition_config import EditionRules
        assert EditionRules.for_edition("2025").is_valid_for("2025-06-01")
        assert not EditionRules.for_edition("2025").is_valid_for("2026-02-01")
        assert not EditionRules.for_edition("2026").is_valid_for("2025-06-01")

    def test_open_ended_current_edition(self):
        from execution.cgi_rag.edition_config import EditionRules
        assert EditionRules.for_edition("2026").is_valid_for("2030-01-01")

    def test_edition_for_date(self):
        from execution.cgi_rag.edition_config import edition_for_date
        assert edition_for_date("2025-03-01") == "2025"
        assert edition_for_date("2027-01-01") == "2026"
        assert edition_for_date("2019-01-01") == "2026"
