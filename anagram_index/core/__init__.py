"""Core anagram grouping functionality."""

from .index import AnagramIndex
from .normalizer import TextNormalizer, canonical_key

__all__ = [
    "AnagramIndex",
    "TextNormalizer",
    "canonical_key",
]
