"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract and the
upstream provider's wire format. They are used for validation and
serialization.

Internal domain logic should use entities from the entities package.
"""

from .responses import (
    DefinitionResponse,
    ErrorResponse,
    HealthCheckResponse,
    RandomWordResponse,
)
from .upstream import DefinitionPayload, RandomWordPayload

__all__ = [
    "DefinitionResponse",
    "RandomWordResponse",
    "HealthCheckResponse",
    "ErrorResponse",
    "DefinitionPayload",
    "RandomWordPayload",
]
