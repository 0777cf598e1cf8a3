"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services.
They are NOT used for API contracts - use DTOs from the dto package
for that.
"""

from .word_definition import DefinitionSource, RandomWordDefinition, WordDefinition

__all__ = ["DefinitionSource", "RandomWordDefinition", "WordDefinition"]
