"""Prometheus metrics for generation and travel-time estimate calls."""

from prometheus_client import Counter, Histogram

generation_latency_ms = Histogram(
    "generation_latency_ms",
    "External generation call latency in milliseconds",
    ["operation", "outcome"],
    buckets=[100, 250, 500, 1000, 2500, 5000, 10000, 30000],
)

generation_requests_total = Counter(
    "generation_requests_total",
    "Total generation requests by outcome",
    ["outcome"],
)

generation_items_dropped_total = Counter(
    "generation_items_dropped_total",
    "Generated candidate items rejected by itinerary validation",
)

estimate_requests_total = Counter(
    "estimate_requests_total",
    "Total travel-time estimate requests by outcome",
    ["outcome"],
)


class PrometheusGenerationMetrics:
    """Prometheus-based generation metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        generation_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_request(self, outcome: str) -> None:
        generation_requests_total.labels(outcome=outcome).inc()

    def inc_dropped(self, count: int) -> None:
        if count:
            generation_items_dropped_total.inc(count)

    def inc_estimate(self, outcome: str) -> None:
        estimate_requests_total.labels(outcome=outcome).inc()
