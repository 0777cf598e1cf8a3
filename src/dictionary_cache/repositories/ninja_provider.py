"""API Ninjas dictionary provider.

Talks to two endpoints:
- ``GET {dictionary_url}?word=...`` returning ``{"definition": "..."}``
- ``GET {random_url}`` returning ``{"word": ["...", ...]}``

Both requests carry the ``X-Api-Key`` header and go through the same
fetch-and-decode routine.
"""

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from dictionary_cache.config import Settings
from dictionary_cache.dto import DefinitionPayload, RandomWordPayload
from dictionary_cache.errors import NotFound, UpstreamError

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class NinjaDictionaryProvider:
    """API Ninjas implementation of the DictionaryProvider protocol.

    This class satisfies the DictionaryProvider protocol through structural
    typing - no explicit inheritance needed.

    The provider does not retry. Timeouts are those of the underlying
    httpx client.

    Example:
        ```python
        provider = NinjaDictionaryProvider.create(settings)
        definition = await provider.fetch_definition("apple")
        words = await provider.fetch_random_words()
        await provider.close()
        ```
    """

    def __init__(
        self,
        api_key: str,
        dictionary_url: str,
        random_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: Credential sent in the X-Api-Key header.
            dictionary_url: Base URL of the definition endpoint.
            random_url: URL of the random-word endpoint.
            timeout: Request timeout in seconds.
            client: Optional preconfigured httpx client (tests).
        """
        self._api_key = api_key
        self._dictionary_url = dictionary_url
        self._random_url = random_url
        self._timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(cls, settings: Settings) -> "NinjaDictionaryProvider":
        """Factory method to create NinjaDictionaryProvider from settings.

        Args:
            settings: Application settings

        Returns:
            Configured NinjaDictionaryProvider
        """
        return cls(
            api_key=settings.ninja_api_key,
            dictionary_url=settings.ninja_dictionary_url,
            random_url=settings.ninja_random_url,
            timeout=settings.upstream_timeout,
        )

    async def _fetch(
        self,
        endpoint: str,
        url: str,
        payload_model: type[PayloadT],
        params: dict[str, str] | None = None,
    ) -> PayloadT:
        """GET a provider URL and decode the body into ``payload_model``.

        Args:
            endpoint: Endpoint name used in error messages
            url: Full URL to request
            payload_model: Pydantic model describing the expected body
            params: Optional query parameters

        Returns:
            The validated payload

        Raises:
            UpstreamError: On transport failure, non-200 status or malformed body
        """
        try:
            response = await self.client.get(url, params=params, headers={"X-Api-Key": self._api_key})
        except httpx.HTTPError as e:
            raise UpstreamError(endpoint, f"request error: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise UpstreamError(
                endpoint,
                f"unexpected status {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return payload_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(endpoint, f"malformed payload: {e}") from e

    async def fetch_definition(self, word: str) -> str:
        """Fetch the definition of a single word.

        Args:
            word: The normalized word

        Returns:
            The definition text, returned as-is even when empty

        Raises:
            NotFound: If the provider reports the word does not exist
            UpstreamError: On transport failure, bad status or malformed payload
        """
        try:
            payload = await self._fetch(
                "definition",
                self._dictionary_url,
                DefinitionPayload,
                params={"word": word},
            )
        except UpstreamError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                raise NotFound(word) from e
            raise
        return payload.definition

    async def fetch_random_words(self) -> list[str]:
        """Fetch candidate words from the random-word endpoint.

        Returns:
            Ordered list of candidate words (may be empty)

        Raises:
            UpstreamError: On transport failure, bad status or malformed payload
        """
        payload = await self._fetch("random", self._random_url, RandomWordPayload)
        return payload.word

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
