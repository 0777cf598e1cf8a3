"""
Tests for the API Ninjas provider.
"""

import httpx
import pytest

from dictionary_cache.errors import NotFound, UpstreamError
from dictionary_cache.repositories import NinjaDictionaryProvider

DICTIONARY_URL = "https://dict.example.test/v1/dictionary"
RANDOM_URL = "https://dict.example.test/v1/randomword"


@pytest.fixture
async def ninja():
    provider = NinjaDictionaryProvider(
        api_key="secret-key",
        dictionary_url=DICTIONARY_URL,
        random_url=RANDOM_URL,
        timeout=5.0,
    )
    yield provider
    await provider.close()


async def test_fetch_definition_sends_word_and_credential(ninja, respx_mock):
    route = respx_mock.get(DICTIONARY_URL).mock(
        return_value=httpx.Response(200, json={"definition": "a rounded fruit", "word": "apple", "valid": True})
    )

    definition = await ninja.fetch_definition("apple")

    assert definition == "a rounded fruit"
    assert route.call_count == 1
    request = route.calls.last.request
    assert request.headers["X-Api-Key"] == "secret-key"
    assert request.url.params["word"] == "apple"


async def test_fetch_definition_accepts_empty_definition(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(200, json={"definition": ""}))

    assert await ninja.fetch_definition("hollow") == ""


async def test_fetch_definition_missing_field_is_malformed(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(200, json={"meaning": "a fruit"}))

    with pytest.raises(UpstreamError, match="malformed payload"):
        await ninja.fetch_definition("apple")


async def test_fetch_definition_invalid_json_is_malformed(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(UpstreamError, match="malformed payload"):
        await ninja.fetch_definition("apple")


async def test_fetch_definition_non_string_definition_is_malformed(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(200, json={"definition": None}))

    with pytest.raises(UpstreamError):
        await ninja.fetch_definition("apple")


@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
async def test_fetch_definition_error_status(ninja, respx_mock, status_code):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(status_code, text="nope"))

    with pytest.raises(UpstreamError) as exc_info:
        await ninja.fetch_definition("apple")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.endpoint == "definition"


async def test_fetch_definition_404_is_not_found(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(return_value=httpx.Response(404))

    with pytest.raises(NotFound) as exc_info:
        await ninja.fetch_definition("qwxyzzy")

    assert exc_info.value.word == "qwxyzzy"


async def test_transport_error_is_upstream_error(ninja, respx_mock):
    respx_mock.get(DICTIONARY_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(UpstreamError, match="request error") as exc_info:
        await ninja.fetch_definition("apple")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_fetch_random_words_returns_ordered_list(ninja, respx_mock):
    route = respx_mock.get(RANDOM_URL).mock(return_value=httpx.Response(200, json={"word": ["zephyr", "breeze"]}))

    words = await ninja.fetch_random_words()

    assert words == ["zephyr", "breeze"]
    assert route.calls.last.request.headers["X-Api-Key"] == "secret-key"


async def test_fetch_random_words_accepts_single_string(ninja, respx_mock):
    respx_mock.get(RANDOM_URL).mock(return_value=httpx.Response(200, json={"word": "zephyr"}))

    assert await ninja.fetch_random_words() == ["zephyr"]


async def test_fetch_random_words_empty_list_is_returned(ninja, respx_mock):
    respx_mock.get(RANDOM_URL).mock(return_value=httpx.Response(200, json={"word": []}))

    assert await ninja.fetch_random_words() == []


async def test_fetch_random_words_bad_status(ninja, respx_mock):
    respx_mock.get(RANDOM_URL).mock(return_value=httpx.Response(500))

    with pytest.raises(UpstreamError) as exc_info:
        await ninja.fetch_random_words()

    assert exc_info.value.endpoint == "random"


async def test_fetch_random_words_404_is_upstream_error(ninja, respx_mock):
    """Only the definition endpoint maps 404 to NotFound."""
    respx_mock.get(RANDOM_URL).mock(return_value=httpx.Response(404))

    with pytest.raises(UpstreamError):
        await ninja.fetch_random_words()


async def test_close_is_idempotent():
    provider = NinjaDictionaryProvider(api_key="k", dictionary_url=DICTIONARY_URL, random_url=RANDOM_URL)
    _ = provider.client

    await provider.close()
    await provider.close()
