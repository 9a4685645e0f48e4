"""
Suggestion cache with a per-session cap on suggestion lookups.
"""
from typing import Dict, List, Optional, Sequence


class SuggestionCache:
    """
    Suggestions per normalized word, plus the number of lookups performed.

    An empty list means "checked, no suggestions", which is distinct from a
    word that was never looked up.
    """

    def __init__(self):
        self._entries: Dict[str, List[str]] = {}
        self._count = 0
        self._overflowed = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def count(self) -> int:
        """Suggestion lookups performed so far."""
        return self._count

    @property
    def overflowed(self) -> bool:
        return self._overflowed

    def contains(self, word: str) -> bool:
        return word in self._entries

    def get(self, word: str) -> Optional[List[str]]:
        """Cached suggestions for a word, or None if it was never looked up."""
        suggestions = self._entries.get(word)
        return list(suggestions) if suggestions is not None else None

    def store(self, word: str, suggestions: Sequence[str]) -> None:
        """Record the result of one suggestion lookup."""
        self._entries[word] = list(suggestions)
        self._count += 1

    def is_exhausted(self, limit: int) -> bool:
        return self._count >= limit

    def mark_overflow(self) -> bool:
        """
        Record that the lookup limit was hit.

        Returns:
            True the first time only
        """
        if self._overflowed:
            return False
        self._overflowed = True
        return True
