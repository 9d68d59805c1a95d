"""
Metrics Collection
Prometheus metrics for rendering, delivery and interaction routing
"""

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for reactcord.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

        # Rendering
        self.renders_total = Counter(
            "reactcord_renders_total",
            "Total number of component renders",
            ["component", "outcome"],
        )
        self.render_duration = Histogram(
            "reactcord_render_duration_seconds",
            "Component render duration in seconds",
            ["component"],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )

        # Delivery
        self.deliveries_total = Counter(
            "reactcord_deliveries_total",
            "Total number of payload deliveries",
            ["target", "action"],
        )

        # Interactions
        self.interactions_total = Counter(
            "reactcord_interactions_total",
            "Total number of inbound interactions",
            ["kind", "outcome"],
        )
        self.listeners = Gauge(
            "reactcord_listeners",
            "Number of pending interaction listeners",
        )

    def record_render(self, component: str, outcome: str, duration: float) -> None:
        """Record a component render."""
        if not self.enabled:
            return
        self.renders_total.labels(component=component, outcome=outcome).inc()
        self.render_duration.labels(component=component).observe(duration)

    @contextmanager
    def time_render(self, component: str) -> Iterator[None]:
        """Time a render; outcome is "error" if the block raises."""
        start = time.perf_counter()
        try:
            yield
        except Exception:
            self.record_render(component, "error", time.perf_counter() - start)
            raise
        self.record_render(component, "success", time.perf_counter() - start)

    def record_delivery(self, target: str, action: str) -> None:
        """Record a send, reply, edit or update."""
        if not self.enabled:
            return
        self.deliveries_total.labels(target=target, action=action).inc()

    def record_interaction(self, kind: str, outcome: str) -> None:
        """Record an inbound interaction and what happened to it."""
        if not self.enabled:
            return
        self.interactions_total.labels(kind=kind, outcome=outcome).inc()

    def set_listeners(self, count: int) -> None:
        """Update the pending listener gauge."""
        if not self.enabled:
            return
        self.listeners.set(count)

    def export(self) -> bytes:
        """Export metrics in Prometheus text format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
