"""Prometheus metrics for itinerary generation and admission."""

from prometheus_client import Counter, Histogram

itinerary_generations_total = Counter(
    "itinerary_generations_total",
    "Itineraries returned, by provenance",
    ["source"],
)

upstream_failures_total = Counter(
    "upstream_failures_total",
    "Generative pipeline failures masked by the fallback itinerary",
    ["reason"],
)

generation_latency_ms = Histogram(
    "generation_latency_ms",
    "Itinerary generation latency in milliseconds",
    ["source"],
    buckets=[50, 100, 250, 500, 1000, 2500, 5000, 10000, 30000],
)

rate_limit_denials_total = Counter(
    "rate_limit_denials_total",
    "Requests denied by the rate limiter",
)

validation_failures_total = Counter(
    "validation_failures_total",
    "Trip form submissions rejected by validation",
)


class PrometheusGenerationMetrics:
    """Prometheus-based generation metrics implementation."""

    def record_generation(self, source: str, latency_ms: float) -> None:
        """Count one returned itinerary and record its latency."""
        itinerary_generations_total.labels(source=source).inc()
        generation_latency_ms.labels(source=source).observe(latency_ms)

    def inc_upstream_failure(self, reason: str) -> None:
        """Increment upstream failure counter."""
        upstream_failures_total.labels(reason=reason).inc()
