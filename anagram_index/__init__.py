"""
Anagram Index - groups words into sets of anagrams.

Words are keyed by their characters sorted in code point order; every key with
two or more distinct words becomes an anagram group. Indexes can be built from
word lists or files, queried, merged, compared and exported to a
key:word1|word2 text format.
"""

__version__ = "1.0.0"

from .core.index import AnagramIndex
from .core.normalizer import TextNormalizer, canonical_key
from .errors import AnagramIndexError, ExportFormatError, IndexReadError, IndexWriteError
from .log_config import configure_logging
from .models.records import AnagramGroup, IndexStats

# Configure structured logging
configure_logging()

__all__ = [
    "AnagramIndex",
    "TextNormalizer",
    "canonical_key",
    "AnagramIndexError",
    "ExportFormatError",
    "IndexReadError",
    "IndexWriteError",
    "configure_logging",
    "AnagramGroup",
    "IndexStats",
]
