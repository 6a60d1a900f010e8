"""Anagram index mapping canonical keys to groups of words."""

from collections import defaultdict
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set

import structlog

from ..config import get_settings
from ..models.records import AnagramGroup, IndexStats
from .io import format_record, read_export, read_words, write_lines
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

MIN_GROUP_SIZE = 2


class AnagramIndex:
    """
    Groups words that are permutations of the same characters.

    Every stored key maps to a set of at least two distinct words. Words with
    no anagram among the input are dropped when the index is built.
    """

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        """
        Initialize the index.

        Args:
            words: Words to build the index from (empty index if omitted)
            normalizer: Normalizer used to compute canonical keys
        """
        self.normalizer = normalizer or TextNormalizer()
        self._index: Dict[str, Set[str]] = {}
        self._last_updated: Optional[datetime] = None

        if words is not None:
            self._build(words)

    @classmethod
    def from_file(cls, path: str, encoding: Optional[str] = None) -> "AnagramIndex":
        """
        Build an index from a file holding one word per line.

        Raises:
            IndexReadError: If the file cannot be read
        """
        index = cls()
        index.init_from_file(path, encoding)
        return index

    @classmethod
    def from_export(cls, path: str, encoding: Optional[str] = None) -> "AnagramIndex":
        """
        Rebuild an index from a file written by export().

        Words are filed under their own canonical key, not the key written in
        the record, so a hand-edited record cannot mix unrelated words. Groups
        left with fewer than two words are dropped.

        Raises:
            IndexReadError: If the file cannot be read
            ExportFormatError: If a line is not a valid record
        """
        encoding = encoding or get_settings().file_encoding
        index = cls()
        groups: Dict[str, Set[str]] = defaultdict(set)
        for _, words in read_export(path, encoding):
            for word in words:
                word = index.normalizer.clean(word)
                groups[index.normalizer.canonical_key(word)].add(word)

        index._replace(groups)
        logger.info("index_loaded_from_export", path=str(path), total_groups=index.size())
        return index

    def init_from_file(self, path: str, encoding: Optional[str] = None) -> None:
        """
        Rebuild this index from a word file, discarding the current groups.

        The index is left untouched if the file cannot be read.

        Args:
            path: Path of the word file
            encoding: Text encoding (settings default if omitted)

        Raises:
            IndexReadError: If the file cannot be read
        """
        encoding = encoding or get_settings().file_encoding
        words = read_words(path, encoding)
        self._build(words)
        logger.info("index_built_from_file", path=str(path), total_groups=self.size())

    def _build(self, words: Iterable[str]) -> None:
        """Group distinct trimmed words by canonical key."""
        distinct = {self.normalizer.clean(word) for word in words}

        groups: Dict[str, Set[str]] = defaultdict(set)
        for word in distinct:
            groups[self.normalizer.canonical_key(word)].add(word)

        self._replace(groups)
        logger.debug(
            "index_built",
            distinct_words=len(distinct),
            candidate_groups=len(groups),
            total_groups=len(self._index)
        )

    def _replace(self, groups: Mapping[str, Set[str]]) -> None:
        self._index = {
            key: set(words)
            for key, words in groups.items()
            if len(words) >= MIN_GROUP_SIZE
        }
        self._touch()

    def _touch(self) -> None:
        self._last_updated = datetime.now(timezone.utc)

    def get_anagrams(self, word: str) -> Optional[FrozenSet[str]]:
        """
        Get the anagram group a word belongs to.

        Args:
            word: Word to look up (trimmed before use)

        Returns:
            Snapshot of the group, or None if no group has this word's key
        """
        words = self._index.get(self.normalizer.canonical_key(word))
        if words is None:
            return None
        return frozenset(words)

    def get_map(self) -> Mapping[str, FrozenSet[str]]:
        """Get a read-only view of every canonical key and its group."""
        return MappingProxyType({key: frozenset(words) for key, words in self._index.items()})

    def get_groups(self) -> List[AnagramGroup]:
        """Get every group as a model, sorted by key with words sorted."""
        return [
            AnagramGroup(key=key, words=sorted(self._index[key]))
            for key in sorted(self._index)
        ]

    def size(self) -> int:
        """Get the number of stored groups."""
        return len(self._index)

    def word_count(self) -> int:
        """Get the number of words across all groups."""
        return sum(len(words) for words in self._index.values())

    def clear(self) -> None:
        """Remove every group."""
        self._index.clear()
        self._touch()

    def merge(self, other: "AnagramIndex") -> "AnagramIndex":
        """
        Merge another index into this one.

        New keys get a copy of the other group; existing keys get the union of
        both groups. The other index is not modified.

        Args:
            other: Index to merge from

        Returns:
            This index
        """
        if not isinstance(other, AnagramIndex):
            raise TypeError(f"Cannot merge {type(other).__name__} into AnagramIndex")

        if other is self:
            return self

        added = 0
        for key, words in other._index.items():
            if key in self._index:
                self._index[key].update(words)
            else:
                self._index[key] = set(words)
                added += 1

        self._touch()
        logger.debug(
            "index_merged",
            incoming_groups=len(other._index),
            new_groups=added,
            total_groups=len(self._index)
        )
        return self

    def equals(self, other: object) -> bool:
        """Check whether other is an index holding exactly the same groups."""
        return isinstance(other, AnagramIndex) and self._index == other._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnagramIndex):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def to_lines(self) -> List[str]:
        """
        Format every group as an export record.

        Lines are sorted by key and words within a line are sorted, but readers
        of the format should not rely on either order.
        """
        return [
            format_record(key, sorted(self._index[key]))
            for key in sorted(self._index)
        ]

    def export(self, path: str, encoding: Optional[str] = None) -> int:
        """
        Write every group to a file, one key:word1|word2|... record per line.

        Args:
            path: Destination path
            encoding: Text encoding (settings default if omitted)

        Returns:
            Number of records written

        Raises:
            IndexWriteError: If the destination cannot be written
        """
        encoding = encoding or get_settings().file_encoding
        count = write_lines(path, self.to_lines(), encoding)
        logger.info("index_exported", path=str(path), total_groups=count)
        return count

    def get_stats(self) -> IndexStats:
        """Get index statistics."""
        return IndexStats(
            total_groups=len(self._index),
            total_words=self.word_count(),
            largest_group=max((len(words) for words in self._index.values()), default=0),
            last_updated=self._last_updated
        )

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._index))

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        cleaned = self.normalizer.clean(word)
        return cleaned in self._index.get(self.normalizer.canonical_key(cleaned), ())

    def __repr__(self) -> str:
        return f"AnagramIndex(groups={len(self._index)}, words={self.word_count()})"
