"""Exceptions raised by the anagram index."""

from typing import Optional


class AnagramIndexError(Exception):
    """Base class for all anagram index errors."""


class IndexReadError(AnagramIndexError):
    """A word file or export file could not be read."""
    
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class IndexWriteError(AnagramIndexError):
    """An export destination could not be written."""
    
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class ExportFormatError(AnagramIndexError):
    """A line of an exported index is not a valid record."""
    
    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Malformed anagram record{where}: {line!r}")
