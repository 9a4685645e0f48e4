"""
Personal dictionary support.
"""
from typing import FrozenSet, List, Tuple, Union

from docspell.services.spellcheck_base import DictionaryChecker

FORBID_MARKER = "*"


def parse_personal(data: Union[str, bytes]) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    """
    Parse a personal word list.

    One entry per line: ``word`` adds a word, ``*word`` forbids it and
    ``word/model`` adds ``word``.

    Args:
        data: Personal dictionary contents (UTF-8 when bytes)

    Returns:
        Tuple of (added words, forbidden words)
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")

    added = set()
    forbidden = set()

    for line in data.splitlines():
        line = line.strip()
        if not line:
            continue

        if line.startswith(FORBID_MARKER):
            word = line[len(FORBID_MARKER):].strip()
            if word:
                forbidden.add(word)
                added.discard(word)
            continue

        word = line.split("/", 1)[0]
        if word:
            added.add(word)
            forbidden.discard(word)

    return frozenset(added), frozenset(forbidden)


class PersonalDictionary(DictionaryChecker):
    """
    Overlay of a personal word list over another checker.

    The wrapped checker is never modified: added words are answered here,
    forbidden words are rejected here and filtered out of suggestions.
    """

    def __init__(self, base: DictionaryChecker, data: Union[str, bytes]):
        self._base = base
        self._added, self._forbidden = parse_personal(data)

    @property
    def base(self) -> DictionaryChecker:
        return self._base

    @property
    def added(self) -> FrozenSet[str]:
        return self._added

    @property
    def forbidden(self) -> FrozenSet[str]:
        return self._forbidden

    def correct(self, word: str) -> bool:
        if word in self._forbidden:
            return False
        if word in self._added:
            return True
        return self._base.correct(word)

    def suggest(self, word: str) -> List[str]:
        return [s for s in self._base.suggest(word) if s not in self._forbidden]
