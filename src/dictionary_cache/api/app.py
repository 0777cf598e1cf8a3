from typing import Any

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from dictionary_cache.api.dependencies import HandlerDep, SinkDep, lifespan
from dictionary_cache.dto import (
    DefinitionResponse,
    ErrorResponse,
    HealthCheckResponse,
    RandomWordResponse,
)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

app = FastAPI(
    title="Dictionary Cache API",
    description="Word definitions served from Redis with an upstream dictionary as source of truth",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Dictionary Cache API",
        "version": "0.1.0",
        "description": "Word definitions served from Redis with an upstream dictionary as source of truth",
        "endpoints": {
            "dictionary": "/dictionary/{word}",
            "random": "/random",
            "health": "/health",
            "metrics": "/metrics",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Health check endpoint."""
    result = await handler.health_check()
    if not result.cache_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@app.get("/dictionary/{word}", response_model=DefinitionResponse, responses=_ERROR_RESPONSES)
async def define(word: str, handler: HandlerDep) -> DefinitionResponse:
    """
    Look up the definition of a word.

    Args:
        word: The word to define. Matching is case-insensitive and ignores
            surrounding whitespace.

    Returns:
        The definition and whether it came from the cache or the provider.
    """
    return await handler.define(word)


@app.get("/random", response_model=RandomWordResponse, responses=_ERROR_RESPONSES)
async def random_word(handler: HandlerDep) -> RandomWordResponse:
    """Pick a random word and return it with its definition."""
    return await handler.random()


@app.get("/metrics")
async def metrics(sink: SinkDep) -> Response:
    """Prometheus metrics for cache hits, misses, errors and latency."""
    return Response(content=sink.render(), media_type=sink.content_type)


if __name__ == "__main__":
    import uvicorn

    from dictionary_cache.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "dictionary_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
