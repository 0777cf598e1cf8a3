"""Random word lookup.

Picks a word from the provider's random-word endpoint and resolves its
definition through the DefinitionResolver. One call can cost up to two
upstream requests (random word, then definition on a cache miss) plus one
cache round trip. The candidate word itself is never cached.
"""

import time

from dictionary_cache.entities import RandomWordDefinition
from dictionary_cache.errors import UpstreamError
from dictionary_cache.observability import NullSink, get_logger
from dictionary_cache.protocols import DictionaryProvider, ObservabilitySink

from .definition_resolver import DefinitionResolver

logger = get_logger(__name__)

OPERATION = "resolve_random"


class RandomWordOrchestrator:
    """Compose the random-word call with a cached definition lookup.

    Example:
        ```python
        orchestrator = RandomWordOrchestrator(resolver=resolver, provider=provider)
        result = await orchestrator.resolve_random()
        print(result.word, result.definition)
        ```
    """

    def __init__(
        self,
        resolver: DefinitionResolver,
        provider: DictionaryProvider,
        sink: ObservabilitySink | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            resolver: Resolver used for the definition lookup (required).
            provider: Provider queried for the random candidate (required).
            sink: Receives error/latency events. Defaults to NullSink.
        """
        self._resolver = resolver
        self._provider = provider
        self._sink = sink or NullSink()

    async def resolve_random(self) -> RandomWordDefinition:
        """Pick a random word and return it with its definition.

        Business logic:
        1. Ask the provider for random candidates
        2. Take the first candidate; an empty list is an upstream error
        3. Resolve its definition exactly like a direct lookup

        Returns:
            RandomWordDefinition naming the chosen word and its definition

        Raises:
            UpstreamError: If the random-word call fails or yields no usable candidate
            NotFound: If the provider has no definition for the candidate
        """
        start = time.perf_counter()
        try:
            candidate = await self._pick_candidate()
            resolved = await self._resolver.resolve(candidate, operation=OPERATION, record_latency=False)
        finally:
            self._sink.record_latency(OPERATION, time.perf_counter() - start)

        return RandomWordDefinition(
            word=resolved.word,
            definition=resolved.definition,
            source=resolved.source,
        )

    async def _pick_candidate(self) -> str:
        start = time.perf_counter()
        try:
            candidates = await self._provider.fetch_random_words()
            if not candidates:
                raise UpstreamError("random", "empty candidate list")
            if not candidates[0].strip():
                raise UpstreamError("random", "blank candidate word")
        except UpstreamError as e:
            self._sink.record_error("upstream_random")
            logger.opt(exception=e).error("upstream error", operation=OPERATION, status_code=e.status_code)
            raise
        finally:
            self._sink.record_latency("upstream_random", time.perf_counter() - start)

        logger.debug("random candidate chosen", word=candidates[0], candidates=len(candidates))
        return candidates[0]
