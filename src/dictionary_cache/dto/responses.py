"""Response DTOs for API endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class DefinitionResponse(BaseModel):
    """Response DTO for a single word lookup."""

    word: str = Field(..., description="The normalized word that was looked up")
    definition: str = Field(..., description="The definition text (may be empty)")
    source: Literal["cache", "upstream"] = Field(
        ..., description="Whether the definition was served from cache or fetched upstream"
    )


class RandomWordResponse(BaseModel):
    """Response DTO for a random word lookup.

    Reports which word was chosen, not only its definition.
    """

    word: str = Field(..., description="The randomly chosen word")
    definition: str = Field(..., description="The definition text (may be empty)")
    source: Literal["cache", "upstream"] = Field(
        ..., description="Whether the definition was served from cache or fetched upstream"
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status (healthy/unhealthy)")
    cache_healthy: bool = Field(..., description="Whether the cache store answered a ping")


class ErrorResponse(BaseModel):
    """Response DTO for failed requests."""

    detail: str = Field(..., description="Human-readable error message")
