"""Word definition domain entities."""

from dataclasses import dataclass
from typing import Literal

DefinitionSource = Literal["cache", "upstream"]


@dataclass(frozen=True)
class WordDefinition:
    """A resolved definition for one word.

    Attributes:
        word: The normalized word used as the cache key
        definition: The definition text, possibly empty
        source: Where the definition came from ("cache" or "upstream")
    """

    word: str
    definition: str
    source: DefinitionSource


@dataclass(frozen=True)
class RandomWordDefinition:
    """A randomly chosen word together with its definition.

    Attributes:
        word: The candidate picked from the random-word endpoint
        definition: The resolved definition
        source: Where the definition came from ("cache" or "upstream")
    """

    word: str
    definition: str
    source: DefinitionSource
