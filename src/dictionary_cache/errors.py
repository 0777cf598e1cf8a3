"""Error taxonomy for dictionary lookups.

Services raise these; the handler layer converts them to HTTP responses.
Collaborator failures are chained with ``raise ... from exc`` so the
original cause is kept for logging.
"""


class DictionaryError(Exception):
    """Base exception for all lookup failures."""


class ConfigurationError(DictionaryError):
    """Raised at startup when required settings are missing or invalid."""


class InvalidInput(DictionaryError):
    """Raised when the lookup key is empty or malformed.

    No collaborator (cache or upstream) is contacted before this is raised.
    """


class CacheError(DictionaryError):
    """Raised when the cache store fails to read or write.

    Attributes:
        operation: The cache operation that failed ("get" or "set")
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"cache {operation} failed: {message}")


class UpstreamError(DictionaryError):
    """Raised when the dictionary provider fails.

    Covers transport failures, non-success statuses and malformed payloads.

    Attributes:
        endpoint: Which provider endpoint failed ("definition" or "random")
        status_code: HTTP status returned by the provider, if any
    """

    def __init__(self, endpoint: str, message: str, status_code: int | None = None) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"upstream {endpoint} failed: {message}")


class NotFound(DictionaryError):
    """Raised when the provider explicitly reports that a word does not exist."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"no definition found for '{word}'")
