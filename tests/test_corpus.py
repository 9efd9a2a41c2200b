"""
Tests for execution/cgi_rag/corpus.py

Covers: article number normalization and ordering, Article payloads,
        ArticleCorpus loading (flat and sectioned layouts), duplicates,
        metadata enrichment and missing corpus files.
"""

import json

import pytest


# ---------------------------------------------------------------------------
# Article numbers
# ---------------------------------------------------------------------------

class TestArticleNumbers:

    @pytest.mark.parametrize("raw,expected", [
        ("86A", "Art. 86A"),
        ("art 86a", "Art. 86A"),
        ("Article 86 A", "Art. 86A"),
        ("Art. 1er", "Art. 1"),
        ("Art. 126 ter", "Art. 126 ter"),
        ("art. 126 TER a", "Art. 126 ter A"),
        ("Art. 185 ter-a", "Art. 185 ter-A"),
    ])
    def test_normalize(self, raw, expected):
        from execution.cgi_rag.corpus import normalize_article_number
        assert normalize_article_number(raw) == expected

    def test_normalize_empty(self):
        from execution.cgi_rag.corpus import normalize_article_number
        assert normalize_article_number("") == ""
        assert normalize_article_number(None) == ""

    def test_sort_is_numeric_then_suffix(self):
        from execution.cgi_rag.corpus import article_sort_key
        numbers = ["Art. 100", "Art. 86A", "Art. 9", "Art. 86"]
        assert sorted(numbers, key=article_sort_key) == ["Art. 9", "Art. 86", "Art. 86A", "Art. 100"]


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------

class TestArticle:

    def test_payload(self, sample_articles):
        payload = sample_articles[1].to_payload()
        assert payload == {
            "numero": "Art. 86A",
            "titre": "Taux de l'IS",
            "contenu": sample_articles[1].contenu,
        }

    def test_to_dict_lists(self, sample_articles):
        data = sample_articles[0].to_dict()
        assert data["version"] == "2026"
        assert data["themes"] == []
        assert data["priority"] == 1


# ---------------------------------------------------------------------------
# ArticleCorpus
# ---------------------------------------------------------------------------

class TestArticleCorpus:

    def test_lookup_normalizes(self, sample_corpus):
        assert sample_corpus.get("86a").numero == "Art. 86A"
        assert "article 92 A" in sample_corpus
        assert "Art. 999" not in sample_corpus
        assert len(sample_corpus) == 5

    def test_numbers_sorted(self, sample_corpus):
        assert sample_corpus.numbers() == ["Art. 52", "Art. 86", "Art. 86A", "Art. 86B", "Art. 92A"]

    def test_duplicates_keep_first(self):
        from execution.cgi_rag.corpus import Article, ArticleCorpus
        corpus = ArticleCorpus("2026", [
            Article(numero="Art. 3", contenu="premier", version="2026"),
            Article(numero="Art. 3", contenu="second", version="2026"),
        ])
        assert len(corpus) == 1
        assert corpus.get("3").contenu == "premier"

    def test_load_flat_list(self, tmp_path):
        from execution.cgi_rag.corpus import ArticleCorpus
        path = tmp_path / "cgi_2026.json"
        path.write_text(json.dumps([
            {"numero": "Art. 86A", "titre": "Taux", "contenu": "Le taux est fixé à 28%."},
            {"numero": "Art. 86B", "contenu": ["Ligne un", "Ligne deux"]},
            {"titre": "Sans numéro", "contenu": "ignoré"},
        ]), encoding="utf-8")

        corpus = ArticleCorpus.load_json(path, "2026")
        assert len(corpus) == 2
        assert corpus.get("86B").contenu == "Ligne un\nLigne deux"
        assert corpus.get("86A").version == "2026"

    def test_load_articles_key(self, tmp_path):
        from execution.cgi_rag.corpus import ArticleCorpus
        path = tmp_path / "cgi_2025.json"
        path.write_text(json.dumps({"articles": [{"numero": "1", "contenu": "x"}]}), encoding="utf-8")
        assert ArticleCorpus.load_json(path, "2025").numbers() == ["Art. 1"]

    def test_load_sectioned_layout(self, tmp_path):
        from execution.cgi_rag.corpus import ArticleCorpus
        source = {
            "meta": {"tome": 1, "chapitre": 1, "chapitre_titre": "Impôt sur les sociétés"},
            "sections": [
                {
                    "titre": "Section 1 - Champ d'application",
                    "articles": [
                        {"article": "Art. 1er", "titre": "Personnes imposables",
                         "texte": ["Sont passibles de l'impôt", "les sociétés de capitaux."]},
                    ],
                    "sous_sections": [
                        {"titre": "Sous-section A", "articles": [{"article": "Art. 2", "texte": ["Exonérations."]}]},
                    ],
                },
            ],
        }
        path = tmp_path / "cgi_2026.json"
        path.write_text(json.dumps(source, ensure_ascii=False), encoding="utf-8")

        corpus = ArticleCorpus.load_json(path, "2026")
        first = corpus.get("1")
        assert first.contenu == "Sont passibles de l'impôt\nles sociétés de capitaux."
        assert first.section == "Section 1 - Champ d'application"
        assert first.chapitre == "Impôt sur les sociétés"
        assert first.tome == "1"
        assert corpus.get("2").section == "Sous-section A"

    def test_catalog_enrichment(self, tmp_path, sample_catalog):
        from execution.cgi_rag.corpus import ArticleCorpus
        path = tmp_path / "cgi_2026.json"
        path.write_text(json.dumps([{"numero": "86A", "contenu": "Le taux est fixé à 28%."}]), encoding="utf-8")

        article = ArticleCorpus.load_json(path, "2026", catalog=sample_catalog).get("86A")
        assert article.titre == "Taux de l'IS"
        assert article.priority == 1
        assert article.defined_concepts == ("taux IS",)

    def test_missing_file_gives_empty_corpus(self, tmp_path):
        from execution.cgi_rag.corpus import ArticleCorpus
        corpus = ArticleCorpus.for_edition("2026", corpus_dir=str(tmp_path))
        assert len(corpus) == 0
        assert corpus.edition == "2026"

    def test_for_edition_reads_named_file(self, tmp_path):
        from execution.cgi_rag.corpus import ArticleCorpus
        (tmp_path / "cgi_2025.json").write_text(
            json.dumps([{"numero": "Art. 95", "contenu": "Barème"}]), encoding="utf-8"
        )
        assert "Art. 95" in ArticleCorpus.for_edition("2025", corpus_dir=str(tmp_path))
