"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from dictionary_cache.config import get_settings
from dictionary_cache.handlers import WordHandler
from dictionary_cache.observability import PrometheusSink, get_logger, setup_logging
from dictionary_cache.repositories import NinjaDictionaryProvider, RedisCacheRepository
from dictionary_cache.services import DefinitionResolver, RandomWordOrchestrator

logger = get_logger(__name__)


def get_handler(request: Request) -> WordHandler:
    """Dependency injection for WordHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The WordHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "word_handler", None)
    if handler is None:
        raise RuntimeError("WordHandler not initialized. Check lifespan setup.")
    return handler


def get_sink(request: Request) -> PrometheusSink:
    """Dependency injection for the metrics sink from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PrometheusSink instance from app.state

    Raises:
        RuntimeError: If the sink is not initialized
    """
    sink = getattr(request.app.state, "metrics_sink", None)
    if sink is None:
        raise RuntimeError("Metrics sink not initialized. Check lifespan setup.")
    return sink


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Settings - validated here so a missing API key aborts startup
    2. Repositories (Redis store, dictionary provider)
    3. Services (resolver, orchestrator) sharing one metrics sink
    4. Handler (HTTP endpoints) - stored in app.state.word_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes network clients and removes all services from app.state
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    sink = PrometheusSink()
    cache = RedisCacheRepository.create(settings)
    provider = NinjaDictionaryProvider.create(settings)

    resolver = DefinitionResolver(cache=cache, provider=provider, ttl=settings.cache_ttl, sink=sink)
    orchestrator = RandomWordOrchestrator(resolver=resolver, provider=provider, sink=sink)

    app.state.word_handler = WordHandler(resolver=resolver, orchestrator=orchestrator)
    app.state.metrics_sink = sink

    logger.info(
        "dictionary service initialized",
        redis_url=settings.redis_url,
        cache_ttl=settings.cache_ttl,
        cache_healthy=cache.health_check(),
    )

    yield

    await provider.close()
    cache.close()
    del app.state.word_handler
    del app.state.metrics_sink
    logger.info("dictionary service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WordHandler, Depends(get_handler)]
SinkDep = Annotated[PrometheusSink, Depends(get_sink)]
