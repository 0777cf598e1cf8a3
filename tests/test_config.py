"""
Tests for settings validation.
"""

import pytest

from dictionary_cache.config import Settings
from dictionary_cache.errors import ConfigurationError


def make_settings(**overrides) -> Settings:
    values = {
        "ninja_api_key": "secret-key",
        "ninja_dictionary_url": "https://dict.example.test/v1/dictionary",
        "ninja_random_url": "https://dict.example.test/v1/randomword",
    }
    values.update(overrides)
    return Settings(**values)


def test_valid_settings():
    settings = make_settings(cache_ttl=60)

    assert settings.cache_ttl == 60
    assert settings.ninja_api_key == "secret-key"


@pytest.mark.parametrize("api_key", ["", "   "])
def test_missing_api_key_fails_fast(api_key):
    with pytest.raises(ConfigurationError, match="NINJA_API_KEY"):
        make_settings(ninja_api_key=api_key)


@pytest.mark.parametrize("ttl", [0, -5])
def test_non_positive_ttl_rejected(ttl):
    with pytest.raises(ConfigurationError, match="CACHE_TTL"):
        make_settings(cache_ttl=ttl)


def test_non_positive_timeout_rejected():
    with pytest.raises(ConfigurationError):
        make_settings(upstream_timeout=0)


def test_non_http_url_rejected():
    with pytest.raises(ConfigurationError, match="NINJA_RANDOM_URL"):
        make_settings(ninja_random_url="ftp://dict.example.test/random")


def test_unknown_log_format_rejected():
    with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
        make_settings(log_format="xml")
