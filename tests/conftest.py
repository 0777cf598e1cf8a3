"""Shared fixtures and in-memory fakes for the dictionary cache tests."""

import pytest

from dictionary_cache.errors import CacheError, NotFound, UpstreamError
from dictionary_cache.services import DefinitionResolver, RandomWordOrchestrator


class FakeCacheStore:
    """Dict-backed CacheStore that counts calls and can be told to fail."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str, int]] = []
        self.fail_get = False
        self.fail_set = False
        self.healthy = True

    def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        if self.fail_get:
            raise CacheError("get", "connection refused")
        return self.data.get(key)

    def set(self, key: str, value: str, ttl: int) -> None:
        self.set_calls.append((key, value, ttl))
        if self.fail_set:
            raise CacheError("set", "connection refused")
        self.data[key] = value
        self.ttls[key] = ttl

    def health_check(self) -> bool:
        return self.healthy


class FakeProvider:
    """DictionaryProvider returning canned answers and counting calls."""

    def __init__(
        self,
        definitions: dict[str, str] | None = None,
        random_words: list[str] | None = None,
    ) -> None:
        self.definitions = definitions or {}
        self.random_words = random_words if random_words is not None else []
        self.definition_calls: list[str] = []
        self.random_calls = 0
        self.definition_error: Exception | None = None
        self.random_error: Exception | None = None
        self.closed = False

    async def fetch_definition(self, word: str) -> str:
        self.definition_calls.append(word)
        if self.definition_error is not None:
            raise self.definition_error
        if word not in self.definitions:
            raise NotFound(word)
        return self.definitions[word]

    async def fetch_random_words(self) -> list[str]:
        self.random_calls += 1
        if self.random_error is not None:
            raise self.random_error
        return list(self.random_words)

    async def close(self) -> None:
        self.closed = True


class RecordingSink:
    """ObservabilitySink that keeps every event for assertions."""

    def __init__(self) -> None:
        self.hits: list[str] = []
        self.misses: list[str] = []
        self.errors: list[str] = []
        self.latencies: list[tuple[str, float]] = []

    def record_hit(self, operation: str) -> None:
        self.hits.append(operation)

    def record_miss(self, operation: str) -> None:
        self.misses.append(operation)

    def record_error(self, operation: str) -> None:
        self.errors.append(operation)

    def record_latency(self, operation: str, duration: float) -> None:
        self.latencies.append((operation, duration))


@pytest.fixture
def cache() -> FakeCacheStore:
    """Empty in-memory cache store."""
    return FakeCacheStore()


@pytest.fixture
def provider() -> FakeProvider:
    """Provider knowing a handful of words."""
    return FakeProvider(
        definitions={
            "apple": "a rounded fruit",
            "zephyr": "a soft gentle breeze",
            "breeze": "a light wind",
        },
        random_words=["zephyr", "breeze"],
    )


@pytest.fixture
def sink() -> RecordingSink:
    """Sink recording all events."""
    return RecordingSink()


@pytest.fixture
def resolver(cache, provider, sink) -> DefinitionResolver:
    """Resolver wired to the fakes with a 60 second TTL."""
    return DefinitionResolver(cache=cache, provider=provider, ttl=60, sink=sink)


@pytest.fixture
def orchestrator(resolver, provider, sink) -> RandomWordOrchestrator:
    """Orchestrator sharing the resolver's provider and sink."""
    return RandomWordOrchestrator(resolver=resolver, provider=provider, sink=sink)


@pytest.fixture
def upstream_failure() -> UpstreamError:
    """A typical provider failure."""
    return UpstreamError("definition", "unexpected status 500", status_code=500)
