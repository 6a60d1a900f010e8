"""Data models for the anagram index."""

from .records import AnagramGroup, IndexStats

__all__ = [
    "AnagramGroup",
    "IndexStats",
]
