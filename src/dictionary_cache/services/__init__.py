"""Service layer for business logic.

This layer contains the cache-aside lookup and the random word
composition. Services depend on protocols (interfaces), not concrete
implementations, making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from dictionary_cache.services import DefinitionResolver, RandomWordOrchestrator

    resolver = DefinitionResolver(cache=store, provider=provider, ttl=3600)
    orchestrator = RandomWordOrchestrator(resolver=resolver, provider=provider)
    ```
"""

from .definition_resolver import DefinitionResolver
from .random_word_orchestrator import RandomWordOrchestrator

__all__ = [
    "DefinitionResolver",
    "RandomWordOrchestrator",
]
