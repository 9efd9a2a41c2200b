"""
Metrics Collection for the CGI RAG Pipeline

Tracks query latency, retrieval degradation, token usage and streaming
outcomes per process.
"""

import time
import logging
from dataclasses import dataclass, field
from collections import defaultdict
from typing import Optional
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)


@dataclass
class QueryMetrics:
    """Metrics for a single question."""
    query_id: str
    edition: str
    query_text: str
    start_time: float
    end_time: float = 0
    latency_ms: float = 0
    sources_count: int = 0
    tokens_used: int = 0
    error: Optional[str] = None


@dataclass
class SystemMetrics:
    """Aggregated system metrics."""
    # Query metrics
    total_queries: int = 0
    successful_queries: int = 0
    failed_queries: int = 0

    # Latency tracking (in ms)
    total_latency_ms: float = 0
    min_latency_ms: float = float('inf')
    max_latency_ms: float = 0
    latencies: list = field(default_factory=list)

    # Retrieval answered from keywords only
    degraded_retrievals: int = 0

    # Generation
    tokens_used: int = 0
    citations_emitted: int = 0

    # Streaming
    streams_started: int = 0
    streams_completed: int = 0
    streams_failed: int = 0

    # Error tracking
    errors_by_type: dict = field(default_factory=lambda: defaultdict(int))

    # Per-edition tracking
    queries_by_edition: dict = field(default_factory=lambda: defaultdict(int))

    @property
    def avg_latency_ms(self) -> float:
        """Calculate average query latency."""
        if self.total_queries == 0:
            return 0
        return self.total_latency_ms / self.total_queries

    def _percentile(self, fraction: float) -> float:
        if not self.latencies:
            return 0
        sorted_latencies = sorted(self.latencies)
        index = int(len(sorted_latencies) * fraction)
        return sorted_latencies[min(index, len(sorted_latencies) - 1)]

    @property
    def p95_latency_ms(self) -> float:
        """Calculate 95th percentile latency."""
        return self._percentile(0.95)

    @property
    def p99_latency_ms(self) -> float:
        """Calculate 99th percentile latency."""
        return self._percentile(0.99)

    @property
    def error_rate(self) -> float:
        if self.total_queries == 0:
            return 0
        return self.failed_queries / self.total_queries

    @property
    def stream_failure_rate(self) -> float:
        if self.streams_started == 0:
            return 0
        return self.streams_failed / self.streams_started

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            "queries": {
                "total": self.total_queries,
                "successful": self.successful_queries,
                "failed": self.failed_queries,
                "error_rate": f"{self.error_rate:.2%}",
                "by_edition": dict(self.queries_by_edition),
            },
            "latency_ms": {
                "avg": round(self.avg_latency_ms, 2),
                "min": round(self.min_latency_ms, 2) if self.min_latency_ms != float('inf') else 0,
                "max": round(self.max_latency_ms, 2),
                "p95": round(self.p95_latency_ms, 2),
                "p99": round(self.p99_latency_ms, 2),
            },
            "retrieval": {
                "degraded": self.degraded_retrievals,
            },
            "generation": {
                "tokens_used": self.tokens_used,
                "citations_emitted": self.citations_emitted,
            },
            "streams": {
                "started": self.streams_started,
                "completed": self.streams_completed,
                "failed": self.streams_failed,
                "failure_rate": f"{self.stream_failure_rate:.2%}",
            },
            "errors": dict(self.errors_by_type),
        }


class MetricsCollector:
    """
    Collects and aggregates pipeline metrics.

    Usage:
        collector = MetricsCollector()

        with collector.track_query("2026", query_text) as tracker:
            response = await agent.process(query_text)
            tracker.set_results(len(response.sources), response.metadata["tokens_used"])

        metrics = collector.get_metrics_dict()
    """

    _instance = None

    def __new__(cls):
        """Singleton pattern for global metrics collection."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.metrics = SystemMetrics()
        self._query_history: list[QueryMetrics] = []
        self._max_history = 1000  # Keep last 1000 queries
        self._start_time = datetime.now()
        self._initialized = True

    def reset(self):
        """Reset all metrics (for testing)."""
        self.metrics = SystemMetrics()
        self._query_history = []
        self._start_time = datetime.now()

    class QueryTracker:
        """Context manager for tracking query metrics."""

        def __init__(self, collector: 'MetricsCollector', edition: str, query_text: str):
            self.collector = collector
            self.query = QueryMetrics(
                query_id=f"q_{int(time.time() * 1000)}",
                edition=edition,
                query_text=query_text[:200],  # Truncate for storage
                start_time=time.time(),
            )

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            self.query.end_time = time.time()
            self.query.latency_ms = (self.query.end_time - self.query.start_time) * 1000

            if exc_type:
                self.query.error = str(exc_val)
                self.collector._record_error(exc_type.__name__)

            self.collector._record_query(self.query)
            return False  # Don't suppress exceptions

        def set_results(self, sources_count: int, tokens_used: int = 0):
            """Set query result metadata."""
            self.query.sources_count = sources_count
            self.query.tokens_used = tokens_used

    def track_query(self, edition: str, query_text: str) -> QueryTracker:
        """
        Create a query tracker context manager.

        Usage:
            with collector.track_query(edition, query) as tracker:
                response = do_answer()
                tracker.set_results(len(response.sources))
        """
        return self.QueryTracker(self, edition, query_text)

    def _record_query(self, query: QueryMetrics):
        """Record completed query metrics."""
        self.metrics.total_queries += 1

        if query.error:
            self.metrics.failed_queries += 1
        else:
            self.metrics.successful_queries += 1

        # Latency tracking
        self.metrics.total_latency_ms += query.latency_ms
        self.metrics.min_latency_ms = min(self.metrics.min_latency_ms, query.latency_ms)
        self.metrics.max_latency_ms = max(self.metrics.max_latency_ms, query.latency_ms)
        self.metrics.latencies.append(query.latency_ms)

        # Keep latencies list bounded
        if len(self.metrics.latencies) > self._max_history:
            self.metrics.latencies = self.metrics.latencies[-self._max_history:]

        self.metrics.tokens_used += query.tokens_used
        self.metrics.queries_by_edition[query.edition] += 1

        # Query history
        self._query_history.append(query)
        if len(self._query_history) > self._max_history:
            self._query_history = self._query_history[-self._max_history:]

    def _record_error(self, error_type: str):
        """Record an error by type."""
        self.metrics.errors_by_type[error_type] += 1

    def record_degraded_retrieval(self, edition: str):
        """Vector side unavailable; the search answered from keywords only."""
        self.metrics.degraded_retrievals += 1
        logger.debug(f"Degraded retrieval recorded for CGI {edition}")

    def record_stream_started(self, edition: str):
        self.metrics.streams_started += 1
        self.metrics.queries_by_edition[edition] += 1

    def record_stream_completed(self, tokens_used: int, citations: int):
        self.metrics.streams_completed += 1
        self.metrics.tokens_used += tokens_used
        self.metrics.citations_emitted += citations

    def record_stream_failed(self, error_type: str):
        self.metrics.streams_failed += 1
        self._record_error(error_type)

    def record_citations(self, count: int):
        self.metrics.citations_emitted += count

    def get_metrics(self) -> SystemMetrics:
        """Get current metrics."""
        return self.metrics

    def get_metrics_dict(self) -> dict:
        """Get metrics as a dictionary."""
        return self.metrics.to_dict()

    def get_recent_queries(self, limit: int = 10) -> list[QueryMetrics]:
        """Get most recent queries."""
        return self._query_history[-limit:]

    def get_uptime(self) -> timedelta:
        """Get system uptime."""
        return datetime.now() - self._start_time


# Global metrics collector instance
_collector = None


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector instance."""
    global _collector
    if _collector is None:
        _collector = MetricsCollector()
    return _collector


# CLI for testing
if __name__ == "__main__":
    import json
    import random

    collector = get_metrics_collector()

    for i in range(20):
        edition = random.choice(["2025", "2026"])
        with collector.track_query(edition, f"Question {i}") as tracker:
            time.sleep(random.uniform(0.01, 0.05))
            tracker.set_results(random.randint(0, 6), tokens_used=random.randint(200, 900))

    collector.record_degraded_retrieval("2026")

    print("\n=== System Metrics ===")
    print(json.dumps(collector.get_metrics_dict(), indent=2))
    print(f"\n=== Uptime: {collector.get_uptime()} ===")
