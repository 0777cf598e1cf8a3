"""Wire payloads returned by the dictionary provider.

Only the fields the service relies on are declared; anything else the
provider sends (validity flags, echoes of the word) is ignored.
"""

from pydantic import BaseModel, field_validator


class DefinitionPayload(BaseModel):
    """Body of ``GET {dictionary_url}?word=...``.

    The ``definition`` field is required. An empty string is accepted.
    """

    definition: str

    model_config = {"extra": "ignore"}


class RandomWordPayload(BaseModel):
    """Body of ``GET {random_url}``.

    The provider has returned both ``{"word": ["a", "b"]}`` and
    ``{"word": "a"}``; both are normalized to a list.
    """

    word: list[str]

    model_config = {"extra": "ignore"}

    @field_validator("word", mode="before")
    @classmethod
    def wrap_single_word(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        return value
