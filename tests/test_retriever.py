"""
Tests for execution/cgi_rag/retriever.py

Covers: linear fusion of keyword and vector scores, score clamping,
        matchType, thematic boost, deterministic tie-breaks, keyword-only
        fallback when the vector side fails, and edition selection.

Uses the in-memory MockVectorStore and MockEmbeddingService from conftest.
"""

import time
import asyncio

import pytest

from tests.conftest import ART_86, ART_86A, ART_86B, ART_92A, ART_52


def run_search(engine, query, **kwargs):
    return asyncio.run(engine.search(query, **kwargs))


# ---------------------------------------------------------------------------
# Fusion
# ---------------------------------------------------------------------------

class TestFusion:

    def test_theme_boost_reorders_vector_hits(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 86", 0.80, "Assiette de l'IS", ART_86),
            ("Art. 86A", 0.78, "Taux de l'IS", ART_86A),
        ])
        results = run_search(search_engine, "Quel est le taux de l'IS ?", version="2026")

        assert [r.numero for r in results] == ["Art. 86A", "Art. 86"]
        assert results[0].boost == pytest.approx(0.1)
        assert results[0].score == pytest.approx(0.5 * 0.78 + 0.1)
        assert results[1].score == pytest.approx(0.4)
        assert all(r.match_type == "vector" for r in results)

    def test_synonym_hit_is_keyword_match(self, search_engine):
        results = run_search(search_engine, "Quel est l'impôt minimum ?")
        assert [r.numero for r in results] == ["Art. 86B"]
        assert results[0].match_type == "keyword"
        assert results[0].lexical_score == pytest.approx(0.9)
        assert results[0].score == pytest.approx(0.45)
        assert results[0].contenu == ART_86B

    def test_both_sides(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [("Art. 86B", 0.6, "Minimum de perception", ART_86B)])
        results = run_search(search_engine, "minimum de perception")
        assert results[0].numero == "Art. 86B"
        assert results[0].match_type == "both"
        assert results[0].score == pytest.approx(0.8)

    def test_vector_query_uses_top_k(self, search_engine, mock_vector_store):
        run_search(search_engine, "Qui est redevable ?")
        assert mock_vector_store.search_calls == [("2026", 20)]

    def test_limit(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 86", 0.9, None, ART_86),
            ("Art. 52", 0.8, None, ART_52),
            ("Art. 92A", 0.7, None, ART_92A),
        ])
        assert len(run_search(search_engine, "Qui est redevable ?", limit=2)) == 2

    def test_default_limit(self, search_engine):
        assert search_engine.config.default_limit == 8


class TestScoreClamping:

    def test_out_of_range_scores(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 52", -0.3, None, ART_52),
            ("Art. 86", 1.7, None, ART_86),
        ])
        results = {r.numero: r for r in run_search(search_engine, "Qui est redevable ?")}
        assert results["Art. 52"].vector_score == 0.0
        assert results["Art. 86"].vector_score == 1.0

    def test_clamp_score(self):
        from execution.cgi_rag.retriever import clamp_score
        assert clamp_score(float("nan")) == 0.0
        assert clamp_score(-1.0) == 0.0
        assert clamp_score(0.42) == pytest.approx(0.42)
        assert clamp_score(3) == 1.0


class TestThemeBoost:

    def test_position_decay(self, search_engine, sample_catalog):
        boosts = search_engine._theme_boosts("taux", sample_catalog)
        assert boosts["Art. 86A"] == pytest.approx(0.1)
        assert boosts["Art. 86B"] == pytest.approx(0.1 * 2 / 3)
        assert boosts["Art. 52"] == pytest.approx(0.1 / 3)

    def test_boost_capped(self, search_engine):
        from execution.cgi_rag.article_metadata import ArticleMetadataCatalog
        catalog = ArticleMetadataCatalog("2026", [], {"taux": ["Art. 86A"], "impot": ["Art. 86A"]})
        boosts = search_engine._theme_boosts("taux de l'impôt", catalog)
        assert boosts == {"Art. 86A": pytest.approx(0.15)}

    def test_no_theme(self, search_engine, sample_catalog):
        assert search_engine._theme_boosts("Qui est redevable ?", sample_catalog) == {}


class TestTieBreaks:

    def test_equal_score_orders_by_priority(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 92A", 0.5, None, ART_92A),
            ("Art. 86", 0.5, None, ART_86),
        ])
        results = run_search(search_engine, "Qui est redevable ?")
        assert [r.numero for r in results] == ["Art. 86", "Art. 92A"]
        assert [r.priority for r in results] == [1, 2]

    def test_equal_score_and_priority_orders_by_number(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 86B", 0.5, None, ART_86B),
            ("Art. 86", 0.5, None, ART_86),
        ])
        results = run_search(search_engine, "Qui est redevable ?")
        assert [r.numero for r in results] == ["Art. 86", "Art. 86B"]

    def test_repeatable(self, search_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 52", 0.5, None, ART_52),
            ("Art. 86", 0.5, None, ART_86),
            ("Art. 86A", 0.5, None, ART_86A),
        ])
        first = [r.numero for r in run_search(search_engine, "amortissement")]
        second = [r.numero for r in run_search(search_engine, "amortissement")]
        assert first == second


# ---------------------------------------------------------------------------
# Degraded retrieval
# ---------------------------------------------------------------------------

class TestKeywordOnlyFallback:

    def test_store_failure_returns_keyword_results(self, search_engine, mock_vector_store):
        from execution.cgi_rag.metrics import get_metrics_collector
        mock_vector_store.fail = True

        results = run_search(search_engine, "minimum de perception")
        assert [r.numero for r in results] == ["Art. 86B"]
        assert results[0].match_type == "keyword"
        assert results[0].vector_score == 0.0
        assert get_metrics_collector().get_metrics_dict()["retrieval"]["degraded"] == 1

    def test_embedding_failure(self, edition_index, mock_vector_store):
        from tests.conftest import MockEmbeddingService
        from execution.cgi_rag.retriever import HybridSearchEngine
        from execution.cgi_rag.metrics import get_metrics_collector

        engine = HybridSearchEngine(
            [edition_index],
            vector_store=mock_vector_store,
            embedding_service=MockEmbeddingService(fail=True),
        )
        results = run_search(engine, "amortissement")
        assert [r.numero for r in results] == ["Art. 52", "Art. 86"]
        assert mock_vector_store.search_calls == []
        assert get_metrics_collector().metrics.degraded_retrievals == 1

    def test_timeout(self, edition_index, mock_vector_store, mock_embedding_service):
        from execution.cgi_rag.retriever import HybridSearchEngine, SearchConfig

        def slow_search(edition, embedding, limit=10):
            time.sleep(0.5)
            return []

        mock_vector_store.search = slow_search
        engine = HybridSearchEngine(
            [edition_index],
            vector_store=mock_vector_store,
            embedding_service=mock_embedding_service,
            config=SearchConfig(vector_timeout=0.05),
        )
        results = run_search(engine, "minimum de perception")
        assert [r.numero for r in results] == ["Art. 86B"]
        assert engine.metrics.metrics.degraded_retrievals == 1

    def test_no_vector_side_is_not_degraded(self, edition_index):
        from execution.cgi_rag.retriever import HybridSearchEngine
        engine = HybridSearchEngine([edition_index])
        results = run_search(engine, "minimum de perception")
        assert [r.numero for r in results] == ["Art. 86B"]
        assert engine.metrics.metrics.degraded_retrievals == 0

    def test_embedding_failure_without_corpus_reads_store(
        self, sample_keyword_index, sample_catalog, sample_articles, mock_vector_store,
    ):
        from tests.conftest import MockEmbeddingService
        from execution.cgi_rag.retriever import EditionIndex, HybridSearchEngine

        index = EditionIndex(edition="2026", keyword_index=sample_keyword_index, catalog=sample_catalog)
        mock_vector_store.add_articles("2026", sample_articles)
        engine = HybridSearchEngine(
            [index], vector_store=mock_vector_store, embedding_service=MockEmbeddingService(fail=True),
        )

        results = run_search(engine, "minimum de perception")
        assert [r.numero for r in results] == ["Art. 86B"]
        assert results[0].match_type == "keyword"
        assert results[0].contenu == ART_86B
        assert engine.metrics.metrics.degraded_retrievals == 1


class TestMissingText:

    def test_keyword_hit_fetched_from_store(
        self, sample_keyword_index, sample_catalog, sample_articles, mock_vector_store, mock_embedding_service,
    ):
        from execution.cgi_rag.retriever import EditionIndex, HybridSearchEngine
        index = EditionIndex(edition="2026", keyword_index=sample_keyword_index, catalog=sample_catalog)
        mock_vector_store.add_articles("2026", sample_articles)
        engine = HybridSearchEngine(
            [index], vector_store=mock_vector_store, embedding_service=mock_embedding_service,
        )

        results = run_search(engine, "minimum de perception")
        assert results[0].numero == "Art. 86B"
        assert results[0].contenu == ART_86B
        assert results[0].titre == "Minimum de perception"
        assert results[0].article.priority == 1

    def test_hit_without_text_dropped(self, sample_keyword_index, sample_catalog):
        from execution.cgi_rag.retriever import EditionIndex, HybridSearchEngine
        index = EditionIndex(edition="2026", keyword_index=sample_keyword_index, catalog=sample_catalog)
        engine = HybridSearchEngine([index])
        assert run_search(engine, "minimum de perception") == []


# ---------------------------------------------------------------------------
# Editions and configuration
# ---------------------------------------------------------------------------

class TestEditions:

    def test_alias(self, search_engine):
        assert run_search(search_engine, "minimum de perception", version="current")[0].numero == "Art. 86B"

    def test_edition_not_loaded(self, search_engine):
        from execution.cgi_rag.errors import UnknownEditionError
        with pytest.raises(UnknownEditionError):
            run_search(search_engine, "taux", version="2025")

    def test_unknown_edition(self, search_engine):
        from execution.cgi_rag.errors import UnknownEditionError
        with pytest.raises(UnknownEditionError):
            run_search(search_engine, "taux", version="1999")

    def test_for_editions(self, tmp_path):
        from execution.cgi_rag.retriever import HybridSearchEngine
        engine = HybridSearchEngine.for_editions(["2026"], corpus_dir=str(tmp_path))
        assert engine.editions == ("2026",)
        assert len(engine.index_for("2026").corpus) == 0


class TestSearchConfig:

    def test_defaults(self):
        from execution.cgi_rag.retriever import SearchConfig
        cfg = SearchConfig()
        assert cfg.keyword_weight == 0.5
        assert cfg.vector_weight == 0.5
        assert cfg.theme_boost == 0.1
        assert cfg.max_boost == 0.15
        assert cfg.definition_boost == 0.05

    def test_from_env(self, monkeypatch):
        from execution.cgi_rag.retriever import SearchConfig
        monkeypatch.setenv("VECTOR_TIMEOUT", "2.5")
        assert SearchConfig.from_env().vector_timeout == 2.5

    def test_result_to_dict(self, sample_articles):
        from execution.cgi_rag.retriever import SearchResult
        result = SearchResult(article=sample_articles[1], score=0.7, match_type="both", priority=1)
        data = result.to_dict()
        assert data["numero"] == "Art. 86A"
        assert data["match_type"] == "both"
        assert set(data) == {
            "numero", "titre", "score", "match_type",
            "lexical_score", "vector_score", "boost", "priority",
        }


# ---------------------------------------------------------------------------
# Defining articles
# ---------------------------------------------------------------------------

@pytest.fixture
def definition_engine(mock_vector_store, mock_embedding_service):
    """Art. 86 defines "bénéfice imposable"; Art. 92A only refers to it."""
    from execution.cgi_rag.article_metadata import ArticleMetadata, ArticleMetadataCatalog
    from execution.cgi_rag.corpus import Article, ArticleCorpus
    from execution.cgi_rag.keyword_index import KeywordChapter, KeywordIndex
    from execution.cgi_rag.retriever import EditionIndex, HybridSearchEngine

    catalog = ArticleMetadataCatalog("2026", [
        ArticleMetadata(numero="Art. 86", priority=2, defines=("bénéfice imposable",)),
        ArticleMetadata(numero="Art. 92A", priority=1),
    ])
    chapter = KeywordChapter.from_table(
        "is", {"benefice imposable": [("Art. 92A", 1.0), ("Art. 86", 1.0)]}, {},
    )
    corpus = ArticleCorpus("2026", [
        Article(numero="Art. 86", contenu=ART_86, version="2026"),
        Article(numero="Art. 92A", contenu=ART_92A, version="2026"),
    ])
    index = EditionIndex(
        edition="2026",
        keyword_index=KeywordIndex([chapter], catalog=catalog),
        catalog=catalog,
        corpus=corpus,
    )

    def _make(**config):
        from execution.cgi_rag.retriever import SearchConfig
        return HybridSearchEngine(
            [index],
            vector_store=mock_vector_store,
            embedding_service=mock_embedding_service,
            config=SearchConfig(**config),
        )
    return _make


class TestDefiningArticles:

    QUERY = "Comment est déterminé le bénéfice imposable ?"

    def test_defining_article_wins_close_scores(self, definition_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 92A", 0.62, None, ART_92A),
            ("Art. 86", 0.60, None, ART_86),
        ])
        results = run_search(definition_engine(), self.QUERY)

        assert [r.numero for r in results] == ["Art. 86", "Art. 92A"]
        assert all(r.match_type == "both" for r in results)
        assert results[0].boost == pytest.approx(0.05)
        assert results[0].score == pytest.approx(0.5 + 0.30 + 0.05)
        assert results[1].boost == 0.0

    def test_clear_gap_is_kept(self, definition_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 92A", 0.90, None, ART_92A),
            ("Art. 86", 0.60, None, ART_86),
        ])
        results = run_search(definition_engine(), self.QUERY)
        assert [r.numero for r in results] == ["Art. 92A", "Art. 86"]

    def test_tie_prefers_defining_over_priority(self, definition_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 92A", 0.60, None, ART_92A),
            ("Art. 86", 0.60, None, ART_86),
        ])
        results = run_search(definition_engine(definition_boost=0.0), self.QUERY)
        assert results[0].score == pytest.approx(results[1].score)
        assert [r.numero for r in results] == ["Art. 86", "Art. 92A"]

    def test_no_bonus_when_concept_absent(self, definition_engine, mock_vector_store):
        mock_vector_store.set_hits("2026", [
            ("Art. 92A", 0.62, None, ART_92A),
            ("Art. 86", 0.60, None, ART_86),
        ])
        results = run_search(definition_engine(), "Qui est redevable ?")
        assert [r.numero for r in results] == ["Art. 92A", "Art. 86"]
        assert all(r.boost == 0.0 for r in results)
