"""Data models for anagram groups and index statistics."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class AnagramGroup(BaseModel):
    """One stored group of anagrams."""
    
    key: str = Field(..., description="Canonical key shared by every word in the group")
    words: List[str] = Field(..., min_length=2, description="Distinct member words")
    
    def to_record(self) -> str:
        """Render the group as an export record (key:word1|word2|...)."""
        return f"{self.key}:{'|'.join(self.words)}"


class IndexStats(BaseModel):
    """Statistics for an anagram index."""
    
    total_groups: int = Field(..., ge=0, description="Number of stored anagram groups")
    total_words: int = Field(..., ge=0, description="Number of words across all groups")
    largest_group: int = Field(..., ge=0, description="Size of the largest group")
    last_updated: Optional[datetime] = Field(None, description="Time of the last mutation")
