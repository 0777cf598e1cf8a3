"""Redis implementation of CacheStore.

Stores one string value per word under a namespaced key with a TTL.
Expiry is left entirely to Redis.
"""

import redis

from dictionary_cache.config import Settings, get_redis_client
from dictionary_cache.errors import CacheError


class RedisCacheRepository:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Keys are stored as ``{key_prefix}:{word}`` so the dictionary entries
    can share a Redis database with other data.
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "dictionary") -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance (expected to decode responses).
            key_prefix: Namespace prepended to every key.
        """
        self._client = redis_client
        self._key_prefix = key_prefix

    @classmethod
    def create(cls, settings: Settings) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository from settings.

        Args:
            settings: Application settings

        Returns:
            Configured RedisCacheRepository
        """
        return cls(
            redis_client=get_redis_client(settings),
            key_prefix=settings.cache_key_prefix,
        )

    def _key(self, word: str) -> str:
        return f"{self._key_prefix}:{word}"

    def get(self, key: str) -> str | None:
        """Read a cached definition.

        Args:
            key: The normalized word

        Returns:
            The cached definition, or None if absent or expired

        Raises:
            CacheError: If Redis cannot be reached or errors
        """
        try:
            value = self._client.get(self._key(key))
        except redis.RedisError as e:
            raise CacheError("get", str(e)) from e

        if isinstance(value, bytes):
            return value.decode()
        return value

    def set(self, key: str, value: str, ttl: int) -> None:
        """Write a definition with an expiry.

        Args:
            key: The normalized word
            value: The definition to cache
            ttl: Time-to-live in seconds

        Raises:
            CacheError: If Redis cannot be reached or errors
        """
        try:
            self._client.set(self._key(key), value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError("set", str(e)) from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def close(self) -> None:
        """Close the Redis connection pool."""
        self._client.close()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
