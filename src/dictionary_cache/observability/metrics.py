"""Observability sinks.

``PrometheusSink`` keeps its metrics in its own ``CollectorRegistry`` so
that several instances (one per app, one per test) never collide.
``NullSink`` is used when no instrumentation is wanted.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest


class PrometheusSink:
    """Prometheus implementation of the ObservabilitySink protocol.

    Example:
        ```python
        sink = PrometheusSink()
        sink.record_hit("resolve")
        body = sink.render()  # exposition format for GET /metrics
        ```
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry | None = None, namespace: str = "dictionary") -> None:
        self._registry = registry or CollectorRegistry()
        self._hits = Counter(
            "cache_hits_total",
            "Total number of cache hits",
            ["operation"],
            namespace=namespace,
            registry=self._registry,
        )
        self._misses = Counter(
            "cache_misses_total",
            "Total number of cache misses",
            ["operation"],
            namespace=namespace,
            registry=self._registry,
        )
        self._errors = Counter(
            "errors_total",
            "Total number of failed operations",
            ["operation"],
            namespace=namespace,
            registry=self._registry,
        )
        self._latency = Histogram(
            "operation_duration_seconds",
            "Time spent on lookup operations",
            ["operation"],
            namespace=namespace,
            registry=self._registry,
        )

    def record_hit(self, operation: str) -> None:
        self._hits.labels(operation=operation).inc()

    def record_miss(self, operation: str) -> None:
        self._misses.labels(operation=operation).inc()

    def record_error(self, operation: str) -> None:
        self._errors.labels(operation=operation).inc()

    def record_latency(self, operation: str, duration: float) -> None:
        self._latency.labels(operation=operation).observe(duration)

    def render(self) -> bytes:
        """Render all metrics in the Prometheus text exposition format."""
        return generate_latest(self._registry)

    @property
    def registry(self) -> CollectorRegistry:
        """Get the underlying registry."""
        return self._registry


class NullSink:
    """Sink that discards every event."""

    def record_hit(self, operation: str) -> None:
        pass

    def record_miss(self, operation: str) -> None:
        pass

    def record_error(self, operation: str) -> None:
        pass

    def record_latency(self, operation: str, duration: float) -> None:
        pass
