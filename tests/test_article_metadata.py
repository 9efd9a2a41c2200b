"""
Tests for execution/cgi_rag/article_metadata.py

Covers: metadata entry conversion (abrogated, descending priorities,
        invalid values), catalog lookups, themes and the edition tables.
"""

import pytest


class TestMetadataFromEntry:

    def test_basic_entry(self):
        from execution.cgi_rag.article_metadata import metadata_from_entry
        meta = metadata_from_entry({
            "numero": "86A",
            "titre": "Taux de l'IS",
            "priority": 1,
            "themes": ["taux"],
            "valeurs_cles": {"taux_general": "28%", "taux_etrangers": "33%"},
        })
        assert meta.numero == "Art. 86A"
        assert meta.priority == 1
        assert meta.themes == ("taux",)
        assert meta.values == ("28%", "33%")

    def test_descending_priority_inverted(self):
        from execution.cgi_rag.article_metadata import metadata_from_entry
        assert metadata_from_entry({"numero": "Art. 5", "priority": 5}, descending_priority=True).priority == 1
        assert metadata_from_entry({"numero": "Art. 5", "priority": 2}, descending_priority=True).priority == 4

    def test_abrogated_entry_skipped(self):
        from execution.cgi_rag.article_metadata import metadata_from_entry
        assert metadata_from_entry({"numero": "Art. 7", "abroge": True}) is None

    @pytest.mark.parametrize("priority", [0, 6, "1", None])
    def test_invalid_priority_skipped(self, priority):
        from execution.cgi_rag.article_metadata import metadata_from_entry
        assert metadata_from_entry({"numero": "Art. 7", "priority": priority}) is None

    def test_missing_number_skipped(self):
        from execution.cgi_rag.article_metadata import metadata_from_entry
        assert metadata_from_entry({"titre": "Sans numéro"}) is None


class TestCatalog:

    def test_priority_lookup(self, sample_catalog):
        assert sample_catalog.priority("86A") == 1
        assert sample_catalog.priority("Art. 92A") == 2

    def test_unknown_article_default_priority(self, sample_catalog):
        assert sample_catalog.priority("Art. 999") == 3
        assert sample_catalog.get("Art. 999") is None

    def test_matching_themes(self, sample_catalog):
        assert sample_catalog.matching_themes("Quel est le TAUX de l'IS ?") == ["taux"]
        assert sample_catalog.matching_themes("Qui est imposable ?") == []

    def test_priority_articles_for_theme(self, sample_catalog):
        assert sample_catalog.priority_articles_for_theme("Taux") == ("Art. 86A", "Art. 86B", "Art. 52")
        assert sample_catalog.priority_articles_for_theme("inconnu") == ()

    def test_articles_defining(self, sample_catalog):
        assert sample_catalog.articles_defining("Taux IS") == ["Art. 86A"]

    def test_defining_articles_in_query(self, sample_catalog):
        assert sample_catalog.defining_articles("Quel est le taux IS applicable ?") == ["Art. 86A"]
        assert sample_catalog.defining_articles("Quel est le taux de l'IS ?") == []

    def test_duplicate_entries_keep_first(self):
        from execution.cgi_rag.article_metadata import ArticleMetadata, ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog("2026", [
            ArticleMetadata(numero="Art. 1", priority=1),
            ArticleMetadata(numero="Art. 1", priority=5),
        ])
        assert len(catalog) == 1
        assert catalog.priority("1") == 1

    def test_theme_diacritics_normalized(self):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog("2026", [], {"Exonérations": ["Art. 3", "3A", "Art. 3"]})
        assert catalog.priority_articles_for_theme("exonerations") == ("Art. 3", "Art. 3A")
        assert catalog.themes == ("Exonérations",)


class TestEditionCatalogs:

    def test_2026_tables(self):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog.for_edition("2026")
        assert catalog.edition == "2026"
        assert catalog.priority("Art. 86A") == 1
        assert "taux" in catalog.matching_themes("Quel est le taux de l'IS ?")
        assert catalog.priority_articles_for_theme("taux")[0] == "Art. 86A"

    def test_2025_tables_load(self):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog.for_edition("2025")
        assert len(catalog) > 0
        for theme in catalog.themes:
            assert catalog.priority_articles_for_theme(theme)

    def test_2026_iba_chapter_metadata(self):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog.for_edition("2026")
        assert catalog.priority("Art. 95") == 1
        assert catalog.priority_articles_for_theme("its")[0] == "Art. 114"
        assert catalog.articles_defining("taux IRCM") == ["Art. 110"]

    def test_2025_chapter_metadata(self):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog.for_edition("2025")
        # Descending scale in the plus-values chapter
        assert catalog.priority("Art. 185 quater-A") == 1
        assert catalog.priority("Art. 185 sexies") == 2
        assert catalog.priority("Art. 168") == 1
        assert "Art. 127 bis" not in catalog
        assert "Art. 127" in catalog
