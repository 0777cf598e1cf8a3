"""Lookup key normalization."""

from dictionary_cache.errors import InvalidInput


def normalize_word(raw: str) -> str:
    """Normalize a user-supplied word into a lookup key.

    Surrounding whitespace is stripped and the word is case-folded, so
    "Apple", " apple " and "APPLE" share one cache entry.

    Args:
        raw: The word as received from the caller

    Returns:
        The normalized word

    Raises:
        InvalidInput: If the word is not a string or is blank
    """
    if not isinstance(raw, str):
        raise InvalidInput(f"word must be a string, got {type(raw).__name__}")

    word = raw.strip().casefold()
    if not word:
        raise InvalidInput("word must not be empty")
    return word
