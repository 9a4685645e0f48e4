"""
Dictionary checker using SymSpellPy.
"""
import time
from typing import Dict, List, Optional, Set

from symspellpy import SymSpell, Verbosity

from docspell.config import settings
from docspell.schemas.spellcheck import DictionaryData
from docspell.services.spellcheck_base import DictionaryChecker, DictionaryLoadError
from docspell.utils.logger import get_logger


logger = get_logger("services.spellcheck_symspell")


def parse_wordlist(text: str) -> Dict[str, int]:
    """
    Parse a word list into word frequencies.

    Accepts ``word``, ``word count`` and Hunspell ``word/FLAGS`` lines. A
    leading line holding only a number (the Hunspell entry count) is skipped,
    as are blank lines and ``#`` comments.

    Args:
        text: Word list contents

    Returns:
        Mapping of word to frequency (1 when the list has no frequency data)
    """
    words: Dict[str, int] = {}
    lines = text.splitlines()

    if lines and lines[0].strip().isdigit():
        lines = lines[1:]

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        fields = line.split()
        word = fields[0].split("/", 1)[0]
        if not word:
            continue

        count = int(fields[1]) if len(fields) > 1 and fields[1].isdigit() else 1
        words[word] = max(words.get(word, 0), count)

    return words


class SymSpellChecker(DictionaryChecker):
    """
    Checker backed by a SymSpell index built from a word list.

    Correctness is exact membership, with Hunspell-style casing: a Capitalized
    or ALL-CAPS word is also correct when its lowercase or capitalized form is
    listed. Suggestions come from a SymSpell edit-distance lookup on a
    lowercase index, with the casing of the input carried over.
    """

    def __init__(
        self,
        data: DictionaryData,
        max_edit_distance: Optional[int] = None,
        prefix_length: Optional[int] = None,
    ):
        """
        Build the SymSpell index.

        Args:
            data: Dictionary payload with a word list
            max_edit_distance: Maximum edit distance for suggestions (default from config)
            prefix_length: SymSpell optimization parameter (default from config)

        Raises:
            DictionaryLoadError: If the word list is empty or cannot be decoded
        """
        self._max_edit_distance = max_edit_distance or settings.SPELLCHECK_MAX_EDIT_DISTANCE
        self._prefix_length = prefix_length or settings.SPELLCHECK_PREFIX_LENGTH
        self._language = data.language

        start_time = time.time()

        text = data.dic
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DictionaryLoadError(f"Word list is not valid UTF-8: {e}", e) from e

        frequencies = parse_wordlist(text)
        if not frequencies:
            raise DictionaryLoadError("No words loaded from word list")

        self._symspell = SymSpell(
            max_dictionary_edit_distance=self._max_edit_distance,
            prefix_length=self._prefix_length,
        )
        # The index is lowercase; lookups transfer the casing of the input
        index: Dict[str, int] = {}
        for word, count in frequencies.items():
            key = word.lower()
            index[key] = max(index.get(key, 0), count)
        for key, count in index.items():
            self._symspell.create_dictionary_entry(key, count)

        self._words: Set[str] = set(frequencies)

        # Words listed only with capitals, e.g. proper nouns
        self._cased_forms: Dict[str, str] = {
            word.lower(): word for word in frequencies if word.lower() not in frequencies
        }

        logger.info(
            "SymSpell dictionary built from word list",
            word_count=len(self._words),
            language=self._language,
            build_time_seconds=round(time.time() - start_time, 2),
        )

    @property
    def word_count(self) -> int:
        return len(self._words)

    @property
    def language(self) -> Optional[str]:
        return self._language

    def correct(self, word: str) -> bool:
        if word in self._words:
            return True

        if word.isupper() or _is_capitalized(word):
            return word.lower() in self._words or word.capitalize() in self._words

        return False

    def suggest(self, word: str) -> List[str]:
        suggestions = self._lookup(word, Verbosity.CLOSEST)

        # A listed word short-circuits CLOSEST to itself; widen the search
        if suggestions and suggestions[0].distance == 0:
            suggestions = self._lookup(word, Verbosity.ALL)

        lowered = word.lower()
        return [
            self._restore_form(s.term) for s in suggestions if s.term.lower() != lowered
        ]

    def _lookup(self, word: str, verbosity: Verbosity):
        return self._symspell.lookup(
            word,
            verbosity,
            max_edit_distance=self._max_edit_distance,
            transfer_casing=True,
        )

    def _restore_form(self, term: str) -> str:
        listed = self._cased_forms.get(term.lower())
        if listed is not None and term == term.lower():
            return listed
        return term


def _is_capitalized(word: str) -> bool:
    """True for ``Word`` and ``Don't``, unlike ``str.istitle()``."""
    return word[:1].isupper() and word[1:] == word[1:].lower()
