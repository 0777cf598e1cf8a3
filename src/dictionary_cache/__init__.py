"""Dictionary Cache - word definitions behind a Redis cache-aside layer.

This package provides a layered architecture for dictionary lookups:

Layers:
    - protocols: Interface contracts (CacheStore, DictionaryProvider, ObservabilitySink)
    - repositories: Data access implementations (Redis, API Ninjas)
    - services: Business logic (DefinitionResolver, RandomWordOrchestrator)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts and upstream payloads)
    - entities: Domain models (internal)
    - observability: Logging and metrics

Usage:
    ```python
    from dictionary_cache import DefinitionResolver, RedisCacheRepository, NinjaDictionaryProvider
    from dictionary_cache.config import get_settings

    settings = get_settings()
    resolver = DefinitionResolver(
        cache=RedisCacheRepository.create(settings),
        provider=NinjaDictionaryProvider.create(settings),
        ttl=settings.cache_ttl,
    )
    result = await resolver.resolve("apple")
    ```

For HTTP API:
    ```python
    from dictionary_cache.api.app import app
    ```
"""

from dictionary_cache.config import Settings, get_settings
from dictionary_cache.dto import DefinitionResponse, RandomWordResponse
from dictionary_cache.entities import RandomWordDefinition, WordDefinition
from dictionary_cache.errors import (
    CacheError,
    ConfigurationError,
    DictionaryError,
    InvalidInput,
    NotFound,
    UpstreamError,
)
from dictionary_cache.handlers import WordHandler
from dictionary_cache.observability import NullSink, PrometheusSink
from dictionary_cache.protocols import CacheStore, DictionaryProvider, ObservabilitySink
from dictionary_cache.repositories import NinjaDictionaryProvider, RedisCacheRepository
from dictionary_cache.services import DefinitionResolver, RandomWordOrchestrator

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "CacheStore",
    "DictionaryProvider",
    "ObservabilitySink",
    # Services (business logic)
    "DefinitionResolver",
    "RandomWordOrchestrator",
    # Handlers (HTTP)
    "WordHandler",
    # Repositories (data access)
    "RedisCacheRepository",
    "NinjaDictionaryProvider",
    # Observability
    "PrometheusSink",
    "NullSink",
    # Entities (domain models)
    "WordDefinition",
    "RandomWordDefinition",
    # DTOs (API contracts)
    "DefinitionResponse",
    "RandomWordResponse",
    # Errors
    "DictionaryError",
    "ConfigurationError",
    "InvalidInput",
    "CacheError",
    "UpstreamError",
    "NotFound",
]
