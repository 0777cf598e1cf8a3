"""Dictionary provider protocol.

Defines the interface for the remote service that is the source of truth
for definitions and random words.

Implementations can include:
- API Ninjas (default)
- Any HTTP dictionary exposing a definition and a random-word endpoint
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DictionaryProvider(Protocol):
    """Protocol for upstream dictionary services.

    Example:
        ```python
        from dictionary_cache.protocols import DictionaryProvider

        provider: DictionaryProvider = NinjaDictionaryProvider.create(settings)
        definition = await provider.fetch_definition("apple")
        ```
    """

    async def fetch_definition(self, word: str) -> str:
        """Fetch the definition of a single word.

        Args:
            word: The normalized word

        Returns:
            The definition text (may be empty)

        Raises:
            NotFound: If the provider reports the word does not exist
            UpstreamError: On transport failure, bad status or malformed payload
        """
        ...

    async def fetch_random_words(self) -> list[str]:
        """Fetch candidate words from the random-word endpoint.

        Returns:
            Ordered list of candidate words (may be empty)

        Raises:
            UpstreamError: On transport failure, bad status or malformed payload
        """
        ...

    async def close(self) -> None:
        """Release any network resources."""
        ...
