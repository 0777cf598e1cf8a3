"""Repository layer for data access.

This layer wraps external dependencies (Redis, the dictionary HTTP API)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from dictionary_cache.protocols import CacheStore, DictionaryProvider

from .ninja_provider import NinjaDictionaryProvider
from .redis_repository import RedisCacheRepository

__all__ = [
    "CacheStore",
    "DictionaryProvider",
    "NinjaDictionaryProvider",
    "RedisCacheRepository",
]
