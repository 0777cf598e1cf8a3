"""Observability sink protocol.

Services receive a sink at construction and report events to it instead of
touching process-wide metric registries.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ObservabilitySink(Protocol):
    """Protocol for receiving lookup instrumentation events.

    Operation names used by the services:
    ``resolve``, ``resolve_random``, ``cache_get``, ``cache_set``,
    ``upstream_definition``, ``upstream_random``.
    """

    def record_hit(self, operation: str) -> None:
        """Record a cache hit."""
        ...

    def record_miss(self, operation: str) -> None:
        """Record a cache miss."""
        ...

    def record_error(self, operation: str) -> None:
        """Record a failed operation."""
        ...

    def record_latency(self, operation: str, duration: float) -> None:
        """Record how long an operation took, in seconds."""
        ...
