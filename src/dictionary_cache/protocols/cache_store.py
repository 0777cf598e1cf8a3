"""Cache storage protocol.

Defines the interface for the key-value store that sits in front of the
dictionary provider. Entries expire on their own after their TTL; nothing
in this package deletes them explicitly.

Implementations can include:
- Redis (default)
- Memcached
- An in-process dict (tests)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from dictionary_cache.protocols import CacheStore

        store: CacheStore = RedisCacheRepository.create(settings)
        ```
    """

    def get(self, key: str) -> str | None:
        """Read a cached definition.

        Args:
            key: The normalized word

        Returns:
            The cached definition, or None on a miss

        Raises:
            CacheError: If the store cannot be read
        """
        ...

    def set(self, key: str, value: str, ttl: int) -> None:
        """Write a definition with an expiry.

        Args:
            key: The normalized word
            value: The definition to cache
            ttl: Time-to-live in seconds

        Raises:
            CacheError: If the store cannot be written
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
