"""Text normalization utilities for computing canonical anagram keys."""


class TextNormalizer:
    """Turns raw words into the canonical keys anagram groups are stored under."""
    
    def clean(self, word: str) -> str:
        """
        Clean a raw word before it is indexed.
        
        Only surrounding whitespace is removed. Case and unicode form are kept,
        so "Listen" and "silent" are not anagrams of each other.
        
        Args:
            word: Raw input word
            
        Returns:
            Trimmed word
        """
        return word.strip()
    
    def canonical_key(self, word: str) -> str:
        """
        Compute the canonical key of a word.
        
        Args:
            word: Raw input word
            
        Returns:
            The characters of the trimmed word sorted by code point
        """
        return "".join(sorted(self.clean(word)))
    
    def is_anagram(self, first: str, second: str) -> bool:
        """Check whether two words are permutations of the same characters."""
        return self.canonical_key(first) == self.canonical_key(second)


_default_normalizer = TextNormalizer()


def canonical_key(word: str) -> str:
    """Compute the canonical key of a word with the shared normalizer."""
    return _default_normalizer.canonical_key(word)
