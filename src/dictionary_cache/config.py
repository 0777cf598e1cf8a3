import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

from dictionary_cache.errors import ConfigurationError

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "2.0"))

    # Cache
    cache_ttl: int = int(os.getenv("CACHE_TTL", "3600"))  # 1 hour default
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "dictionary")

    # Upstream provider (API Ninjas)
    ninja_api_key: str = os.getenv("NINJA_API_KEY", "")
    ninja_dictionary_url: str = os.getenv(
        "NINJA_DICTIONARY_URL", "https://api.api-ninjas.com/v1/dictionary"
    )
    ninja_random_url: str = os.getenv(
        "NINJA_RANDOM_URL", "https://api.api-ninjas.com/v1/randomword"
    )
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.ninja_api_key.strip():
            raise ConfigurationError("NINJA_API_KEY must be set")

        if self.cache_ttl <= 0:
            raise ConfigurationError(f"CACHE_TTL must be positive, got {self.cache_ttl}")

        if self.upstream_timeout <= 0 or self.redis_socket_timeout <= 0:
            raise ConfigurationError("UPSTREAM_TIMEOUT and REDIS_SOCKET_TIMEOUT must be positive")

        for name, url in (
            ("NINJA_DICTIONARY_URL", self.ninja_dictionary_url),
            ("NINJA_RANDOM_URL", self.ninja_random_url),
        ):
            if not url.startswith(("http://", "https://")):
                raise ConfigurationError(f"{name} must be an http(s) URL, got {url!r}")

        if self.log_format not in ("text", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'text' or 'json', got {self.log_format!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If a required setting is missing or invalid
    """
    return Settings()


def get_redis_client(settings: Settings) -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
    )
