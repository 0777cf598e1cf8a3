"""Utility modules for dictionary cache."""

from .keys import normalize_word

__all__ = ["normalize_word"]
