#!/usr/bin/env python3
"""
Demo script for the dictionary cache.

Looks up a few words twice to show the cache-aside flow (first from the
provider, then from Redis) and finishes with a random word. Requires a
running Redis and NINJA_API_KEY in the environment or .env.
"""

import asyncio
import sys

from dictionary_cache import (
    DefinitionResolver,
    DictionaryError,
    NinjaDictionaryProvider,
    PrometheusSink,
    RandomWordOrchestrator,
    RedisCacheRepository,
)
from dictionary_cache.config import get_settings
from dictionary_cache.observability import setup_logging


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def main(words: list[str]) -> None:
    settings = get_settings()
    setup_logging("WARNING", settings.log_format)

    sink = PrometheusSink()
    cache = RedisCacheRepository.create(settings)
    provider = NinjaDictionaryProvider.create(settings)
    resolver = DefinitionResolver(cache=cache, provider=provider, ttl=settings.cache_ttl, sink=sink)
    orchestrator = RandomWordOrchestrator(resolver=resolver, provider=provider, sink=sink)

    try:
        print_section("Definition lookups (second pass should hit the cache)")
        for attempt in (1, 2):
            for word in words:
                try:
                    result = await resolver.resolve(word)
                    print(f"  [{attempt}] {result.word:<12} ({result.source:<8}) {result.definition[:60]}")
                except DictionaryError as e:
                    print(f"  [{attempt}] {word:<12} failed: {e}")

        print_section("Random word")
        try:
            random_result = await orchestrator.resolve_random()
            print(f"  {random_result.word} ({random_result.source}): {random_result.definition[:60]}")
        except DictionaryError as e:
            print(f"  failed: {e}")

        print_section("Metrics")
        print(sink.render().decode())
    finally:
        await provider.close()
        cache.close()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:] or ["apple", "zephyr", "serendipity"]))
