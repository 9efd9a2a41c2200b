"""Tests for ingest_cgi_articles.py helpers."""

from unittest.mock import MagicMock


class TestIngestHelpers:

    def test_embedding_text(self, sample_articles):
        from ingest_cgi_articles import embedding_text
        text = embedding_text(sample_articles[1])
        assert text.startswith("Art. 86A - Taux de l'IS\n\n")
        assert text.endswith(sample_articles[1].contenu)

    def test_embedding_text_without_title(self):
        from execution.cgi_rag.corpus import Article
        from ingest_cgi_articles import embedding_text
        article = Article(numero="Art. 3", contenu="Texte.", version="2025")
        assert embedding_text(article) == "Art. 3\n\nTexte."

    def test_ingest_batch(self, sample_articles, mock_embedding_service):
        from ingest_cgi_articles import ingest_batch
        store = MagicMock()
        store.upsert_articles.return_value = len(sample_articles)

        written = ingest_batch(sample_articles, mock_embedding_service, store, "2026")

        assert written == 5
        edition, articles, embeddings = store.upsert_articles.call_args.args
        assert edition == "2026"
        assert articles == sample_articles
        assert len(embeddings) == 5
        assert len(embeddings[0]) == 1024
