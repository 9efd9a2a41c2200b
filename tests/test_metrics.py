"""
Tests for execution/cgi_rag/metrics.py

Covers: SystemMetrics aggregates, MetricsCollector singleton, query
        tracking, degraded retrievals and stream outcomes.
"""

import pytest


class TestSystemMetrics:

    def test_empty(self):
        from execution.cgi_rag.metrics import SystemMetrics
        metrics = SystemMetrics()
        assert metrics.avg_latency_ms == 0
        assert metrics.p95_latency_ms == 0
        assert metrics.error_rate == 0
        assert metrics.stream_failure_rate == 0
        assert metrics.to_dict()["latency_ms"]["min"] == 0

    def test_percentiles(self):
        from execution.cgi_rag.metrics import SystemMetrics
        metrics = SystemMetrics(latencies=list(range(1, 101)))
        assert metrics.p95_latency_ms == 96
        assert metrics.p99_latency_ms == 100

    def test_to_dict_sections(self):
        from execution.cgi_rag.metrics import SystemMetrics
        assert set(SystemMetrics().to_dict()) == {
            "queries", "latency_ms", "retrieval", "generation", "streams", "errors",
        }


class TestMetricsCollector:

    def test_singleton(self):
        from execution.cgi_rag.metrics import MetricsCollector, get_metrics_collector
        assert MetricsCollector() is MetricsCollector()
        assert get_metrics_collector() is MetricsCollector()

    def test_track_query(self):
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        with collector.track_query("2026", "Quel est le taux de l'IS ?") as tracker:
            tracker.set_results(3, tokens_used=250)

        data = collector.get_metrics_dict()
        assert data["queries"]["total"] == 1
        assert data["queries"]["successful"] == 1
        assert data["queries"]["by_edition"] == {"2026": 1}
        assert data["generation"]["tokens_used"] == 250
        assert collector.get_recent_queries()[0].sources_count == 3

    def test_track_query_failure(self):
        from execution.cgi_rag.errors import GenerationError
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        with pytest.raises(GenerationError):
            with collector.track_query("2025", "Barème IRPP"):
                raise GenerationError("timed out")

        data = collector.get_metrics_dict()
        assert data["queries"]["failed"] == 1
        assert data["queries"]["error_rate"] == "100.00%"
        assert data["errors"] == {"GenerationError": 1}
        assert collector.get_recent_queries()[0].error == "timed out"

    def test_degraded_retrieval(self):
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        collector.record_degraded_retrieval("2026")
        collector.record_degraded_retrieval("2025")
        assert collector.get_metrics_dict()["retrieval"]["degraded"] == 2

    def test_stream_outcomes(self):
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        collector.record_stream_started("2026")
        collector.record_stream_completed(tokens_used=300, citations=2)
        collector.record_stream_started("2026")
        collector.record_stream_failed("GenerationError")

        data = collector.get_metrics_dict()
        assert data["streams"]["started"] == 2
        assert data["streams"]["completed"] == 1
        assert data["streams"]["failure_rate"] == "50.00%"
        assert data["generation"]["citations_emitted"] == 2
        assert data["queries"]["by_edition"] == {"2026": 2}

    def test_reset(self):
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        collector.record_citations(4)
        collector.reset()
        assert collector.get_metrics_dict()["generation"]["citations_emitted"] == 0

    def test_query_text_truncated(self):
        from execution.cgi_rag.metrics import get_metrics_collector
        collector = get_metrics_collector()
        with collector.track_query("2026", "x" * 500):
            pass
        assert len(collector.get_recent_queries()[0].query_text) == 200
