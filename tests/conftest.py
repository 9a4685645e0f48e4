"""
Pytest configuration and fixtures for docspell tests.
"""
import os
import re
from typing import Callable, Dict, Iterable, List, Optional

import pytest

os.environ.setdefault("APP_LOG_LEVEL", "WARNING")

from docspell.schemas.diagnostic import SourceFile
from docspell.schemas.nlcst import (
    PARAGRAPH_NODE,
    PUNCTUATION_NODE,
    ROOT_NODE,
    SENTENCE_NODE,
    TEXT_NODE,
    WHITESPACE_NODE,
    WORD_NODE,
    Node,
    Point,
    Position,
)
from docspell.services.spellcheck_base import DictionaryChecker


# Words, including compounds joined by hyphens, colons or apostrophes
_TOKEN = re.compile(r"(?P<word>[^\W_]+(?:[-:'’][^\W_]+)*)|(?P<space>\s+)|(?P<other>.)", re.DOTALL)
_JOINER = re.compile(r"([-:'’])")


class _Locator:
    """Maps offsets in a text to points."""

    def __init__(self, text: str):
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", text)]

    def point(self, offset: int) -> Point:
        line = 0
        while line + 1 < len(self._line_starts) and self._line_starts[line + 1] <= offset:
            line += 1
        return Point(line=line + 1, column=offset - self._line_starts[line] + 1, offset=offset)

    def position(self, start: int, end: int) -> Position:
        return Position(start=self.point(start), end=self.point(end))


def build_tree(text: str) -> Node:
    """
    Build a single-sentence tree for a fixture text.

    Only meant for tests: real trees come from an upstream parser.
    """
    locate = _Locator(text)
    children: List[Node] = []

    for match in _TOKEN.finditer(text):
        start, end = match.span()
        value = match.group()

        if match.lastgroup == "word":
            segments = []
            offset = start
            for part in _JOINER.split(value):
                if not part:
                    continue
                segment_type = PUNCTUATION_NODE if _JOINER.fullmatch(part) else TEXT_NODE
                segments.append(Node(
                    type=segment_type,
                    value=part,
                    position=locate.position(offset, offset + len(part)),
                ))
                offset += len(part)
            children.append(Node(type=WORD_NODE, children=segments, position=locate.position(start, end)))
        elif match.lastgroup == "space":
            children.append(Node(type=WHITESPACE_NODE, value=value, position=locate.position(start, end)))
        else:
            children.append(Node(type=PUNCTUATION_NODE, value=value, position=locate.position(start, end)))

    whole = locate.position(0, len(text))
    sentence = Node(type=SENTENCE_NODE, children=children, position=whole)
    paragraph = Node(type=PARAGRAPH_NODE, children=[sentence], position=whole)
    return Node(type=ROOT_NODE, children=[paragraph], position=whole)


class StubChecker(DictionaryChecker):
    """Checker with a fixed vocabulary that records suggestion lookups."""

    def __init__(self, words: Iterable[str] = (), suggestions: Optional[Dict[str, List[str]]] = None):
        self.words = set(words)
        self.suggestions = suggestions or {}
        self.suggest_calls: List[str] = []

    def correct(self, word: str) -> bool:
        return word in self.words

    def suggest(self, word: str) -> List[str]:
        self.suggest_calls.append(word)
        return list(self.suggestions.get(word, []))


@pytest.fixture
def parse() -> Callable[[str], Node]:
    """Fixture-text to tree builder."""
    return build_tree


@pytest.fixture
def make_checker() -> Callable[..., StubChecker]:
    """Factory for stub checkers."""
    return StubChecker


@pytest.fixture
def english_checker() -> StubChecker:
    """Small English vocabulary with suggestions for a few misspellings."""
    return StubChecker(
        words={
            "Some", "some", "and", "the", "is", "a", "word", "spelled",
            "random", "hyphenated", "colour", "utilise", "don't", "alpha", "bravo",
        },
        suggestions={
            "color": ["colon", "colour", "Colo"],
            "useles": ["useless", "uses"],
            "mispelt": ["misspelt"],
            "documeant": ["document"],
        },
    )


@pytest.fixture
def source_file() -> SourceFile:
    return SourceFile(path="example.txt")


@pytest.fixture
def wordlist() -> str:
    """Tiny Hunspell-style word list for the SymSpell engine."""
    return "\n".join([
        "8",
        "colour/MS",
        "colon/MS",
        "color",
        "hello",
        "world/M",
        "spelled",
        "word",
        "Paris",
        "",
    ])
