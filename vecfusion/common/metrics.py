"""Metrics collection for fusion and engine queries.

A thin wrapper around ``prometheus_client`` so callers record fusion and
engine activity with consistent names and label sets.

Design notes
- Metrics and labels are predeclared to avoid cardinality explosions
- One registry per collector; tests inject a fresh ``CollectorRegistry``
"""

from typing import Optional
from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest


class FusionMetrics:
    """Prometheus metrics for rank fusion.

    Parameters
    - registry: Optional custom ``CollectorRegistry`` (e.g. for testing)
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.fusion_requests = Counter(
            'vf_fusion_requests_total',
            'Total fusion invocations',
            ['algorithm'],
            registry=self.registry
        )

        self.fusion_duration = Histogram(
            'vf_fusion_duration_seconds',
            'Fusion duration',
            ['algorithm'],
            registry=self.registry
        )

        self.fused_items = Histogram(
            'vf_fused_items',
            'Number of items returned by a fusion call',
            ['algorithm'],
            buckets=(0, 1, 5, 10, 25, 50, 100, 250, 1000),
            registry=self.registry
        )

        self.engine_queries = Counter(
            'vf_engine_queries_total',
            'Total engine queries issued for fusion',
            ['status'],
            registry=self.registry
        )

    def record_fusion(self, algorithm: str, duration: float, item_count: int) -> None:
        """Record one fusion call."""
        self.fusion_requests.labels(algorithm=algorithm).inc()
        self.fusion_duration.labels(algorithm=algorithm).observe(duration)
        self.fused_items.labels(algorithm=algorithm).observe(item_count)

    def record_engine_query(self, status: str, count: int = 1) -> None:
        """Record engine queries by outcome (``ok`` or an error status name)."""
        self.engine_queries.labels(status=status).inc(count)

    def get_metrics(self) -> str:
        """Render metrics in Prometheus exposition format."""
        return generate_latest(self.registry).decode("utf-8")
