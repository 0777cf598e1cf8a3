"""HTTP handlers for word lookups.

Handlers convert between entities and DTOs and translate the error
taxonomy into HTTP status codes.
"""

from fastapi import HTTPException, status

from dictionary_cache.dto import DefinitionResponse, HealthCheckResponse, RandomWordResponse
from dictionary_cache.errors import (
    CacheError,
    DictionaryError,
    InvalidInput,
    NotFound,
    UpstreamError,
)
from dictionary_cache.observability import get_logger
from dictionary_cache.services import DefinitionResolver, RandomWordOrchestrator

logger = get_logger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DictionaryError], int]] = [
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY),
    (CacheError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: DictionaryError) -> HTTPException:
    """Map a lookup error onto an HTTPException.

    Args:
        error: The error raised by the service layer

    Returns:
        HTTPException with a stable status code and readable detail
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Lookup failed: {error}",
    )


class WordHandler:
    """HTTP handlers for dictionary operations.

    This handler delegates business logic to the resolver and the
    orchestrator and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        handler = WordHandler(resolver=resolver, orchestrator=orchestrator)

        @app.get("/dictionary/{word}", response_model=DefinitionResponse)
        async def define(word: str):
            return await handler.define(word)
        ```
    """

    def __init__(self, resolver: DefinitionResolver, orchestrator: RandomWordOrchestrator) -> None:
        """Initialize the word handler.

        Args:
            resolver: Single-word resolver (required).
            orchestrator: Random word orchestrator (required).
        """
        self._resolver = resolver
        self._orchestrator = orchestrator

    async def define(self, word: str) -> DefinitionResponse:
        """Handle GET /dictionary/{word} requests.

        Args:
            word: The raw path parameter

        Returns:
            DefinitionResponse with the definition and its source

        Raises:
            HTTPException: 400 for blank words, 404 for unknown words,
                502 when the provider fails
        """
        try:
            result = await self._resolver.resolve(word)
        except DictionaryError as e:
            raise to_http_exception(e) from e

        return DefinitionResponse(word=result.word, definition=result.definition, source=result.source)

    async def random(self) -> RandomWordResponse:
        """Handle GET /random requests.

        Returns:
            RandomWordResponse naming the chosen word and its definition

        Raises:
            HTTPException: 404 if the chosen word has no definition,
                502 when the provider fails
        """
        try:
            result = await self._orchestrator.resolve_random()
        except DictionaryError as e:
            raise to_http_exception(e) from e

        return RandomWordResponse(word=result.word, definition=result.definition, source=result.source)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with health status
        """
        cache_healthy = self._resolver.cache.health_check()
        if not cache_healthy:
            logger.warning("health check failed: cache unreachable")

        return HealthCheckResponse(
            status="healthy" if cache_healthy else "unhealthy",
            cache_healthy=cache_healthy,
        )
