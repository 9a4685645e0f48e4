"""
Abstract base class for dictionary checkers and spell-check errors.
"""
from abc import ABC, abstractmethod
from typing import List, Optional


class SpellCheckError(Exception):
    """Base exception for spell-check failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SpellConfigurationError(SpellCheckError, TypeError):
    """Raised synchronously when a session is created without a usable dictionary."""


class DictionaryLoadError(SpellCheckError):
    """
    Raised when a dictionary cannot be loaded or turned into a checker.

    Attributes:
        message: Error message
        original: Exception reported by the loader or raised during construction
    """

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class DictionaryChecker(ABC):
    """
    Abstract base class for checkers backed by a loaded dictionary.

    Implementations must not change state while answering queries, so one
    checker can be shared read-only between sessions.
    """

    @abstractmethod
    def correct(self, word: str) -> bool:
        """
        Check whether a word is spelled correctly.

        Args:
            word: Word to check

        Returns:
            True if the dictionary knows the word
        """
        pass

    @abstractmethod
    def suggest(self, word: str) -> List[str]:
        """
        Suggest replacements for a word.

        Args:
            word: Misspelled word

        Returns:
            Suggestions ordered by relevance (possibly empty)
        """
        pass
