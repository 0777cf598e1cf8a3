"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → Memcached, API Ninjas → another provider)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from dictionary_cache.protocols import CacheStore, DictionaryProvider

    store: CacheStore = RedisCacheRepository.create(settings)
    provider: DictionaryProvider = NinjaDictionaryProvider.create(settings)
    ```
"""

from .cache_store import CacheStore
from .dictionary_provider import DictionaryProvider
from .observability_sink import ObservabilitySink

__all__ = [
    "CacheStore",
    "DictionaryProvider",
    "ObservabilitySink",
]
