"""Cache-aside resolution of a single word.

Reads the cache first. On a miss the dictionary provider is asked, the
answer is written back with the configured TTL and then returned. A
failed cache read counts as a miss; a failed cache write is logged and
does not fail the lookup. Upstream failures always reach the caller and
nothing is written to the cache for them.
"""

import time

from dictionary_cache.entities import WordDefinition
from dictionary_cache.errors import CacheError, ConfigurationError, NotFound, UpstreamError
from dictionary_cache.observability import NullSink, get_logger
from dictionary_cache.protocols import CacheStore, DictionaryProvider, ObservabilitySink
from dictionary_cache.utils import normalize_word

logger = get_logger(__name__)


class DefinitionResolver:
    """Resolve word definitions through the cache.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: Redis in production, an in-memory fake in tests
    - DictionaryProvider: API Ninjas in production
    - ObservabilitySink: Prometheus in production, NullSink by default

    Example:
        ```python
        resolver = DefinitionResolver(
            cache=RedisCacheRepository.create(settings),
            provider=NinjaDictionaryProvider.create(settings),
            ttl=settings.cache_ttl,
        )
        result = await resolver.resolve("apple")
        print(result.definition, result.source)
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        provider: DictionaryProvider,
        ttl: int,
        sink: ObservabilitySink | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            cache: Cache storage backend (required).
            provider: Upstream dictionary provider (required).
            ttl: Time-to-live applied to every cache write, in seconds.
            sink: Receives hit/miss/error/latency events. Defaults to NullSink.
        """
        if ttl <= 0:
            raise ConfigurationError(f"ttl must be positive, got {ttl}")
        self._cache = cache
        self._provider = provider
        self._ttl = ttl
        self._sink = sink or NullSink()

    async def resolve(
        self,
        word: str,
        operation: str = "resolve",
        record_latency: bool = True,
    ) -> WordDefinition:
        """Return the definition of ``word``.

        Business logic:
        1. Normalize the word (rejects blank input before any I/O)
        2. Return the cached definition on a hit
        3. On a miss, fetch from the provider
        4. Write the definition to the cache, then return it

        Args:
            word: The word to look up
            operation: Operation name used to tag observability events
            record_latency: Whether to report the duration under ``operation``.
                Callers that time the whole operation themselves pass False.

        Returns:
            WordDefinition with the normalized word, definition and source

        Raises:
            InvalidInput: If the word is blank
            NotFound: If the provider reports the word does not exist
            UpstreamError: If the provider call fails or returns a bad payload
        """
        key = normalize_word(word)
        start = time.perf_counter()
        try:
            cached = self._read_cache(key)
            if cached is not None:
                self._sink.record_hit(operation)
                logger.debug("cache hit", word=key, operation=operation)
                return WordDefinition(word=key, definition=cached, source="cache")

            self._sink.record_miss(operation)
            logger.debug("cache miss", word=key, operation=operation)

            definition = await self._fetch_upstream(key)
            self._write_cache(key, definition)
            return WordDefinition(word=key, definition=definition, source="upstream")
        finally:
            if record_latency:
                self._sink.record_latency(operation, time.perf_counter() - start)

    def _read_cache(self, key: str) -> str | None:
        try:
            return self._cache.get(key)
        except CacheError as e:
            # Treated as a miss
            self._sink.record_error("cache_get")
            logger.warning("cache read failed, falling back to upstream", word=key, error=str(e))
            return None

    def _write_cache(self, key: str, definition: str) -> None:
        try:
            self._cache.set(key, definition, self._ttl)
        except CacheError as e:
            self._sink.record_error("cache_set")
            logger.warning("cache write failed, returning upstream definition", word=key, error=str(e))

    async def _fetch_upstream(self, key: str) -> str:
        start = time.perf_counter()
        try:
            definition = await self._provider.fetch_definition(key)
        except NotFound:
            logger.info("word not found upstream", word=key)
            raise
        except UpstreamError as e:
            self._sink.record_error("upstream_definition")
            logger.opt(exception=e).error("upstream error", word=key, status_code=e.status_code)
            raise
        finally:
            self._sink.record_latency("upstream_definition", time.perf_counter() - start)

        logger.info("upstream resolved", word=key)
        return definition

    @property
    def ttl(self) -> int:
        """Get the TTL applied to cache writes."""
        return self._ttl

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache store (for health checks and testing)."""
        return self._cache

    @property
    def provider(self) -> DictionaryProvider:
        """Get the underlying provider (for testing)."""
        return self._provider
