"""
Tree walker: checks every word in a document tree and reports misspellings.
"""
import re
from typing import List, Optional, Sequence

from docspell.config import settings
from docspell.schemas.diagnostic import OVERFLOW_RULE_ID, SourceFile
from docspell.schemas.nlcst import TEXT_NODE, WORD_NODE, Node
from docspell.schemas.options import SpellOptions
from docspell.services.spellcheck_base import DictionaryChecker
from docspell.services.suggestion_cache import SuggestionCache
from docspell.utils.lexical import is_irrelevant, normalize_apostrophes
from docspell.utils.logger import get_logger
from docspell.utils.nlcst import is_literal, to_string, visit

logger = get_logger("services.word_checker")

OVERFLOW_REASON = "Too many misspellings; no further spell suggestions are given"

_NON_WORD = re.compile(r"\W+")


def quote(value: str, mark: str = "`") -> str:
    return f"{mark}{value}{mark}"


def format_reason(word: str, suggestions: Sequence[str]) -> str:
    """
    Human-readable message for a misspelt word.

    >>> format_reason("color", ["colon", "colour"])
    '`color` is misspelt; did you mean `colon`, `colour`?'
    """
    reason = f"{quote(word)} is misspelt"
    if suggestions:
        reason += "; did you mean " + ", ".join(quote(s) for s in suggestions) + "?"
    return reason


def rule_id_for(word: str) -> str:
    """Rule identifier shared by every occurrence of the same misspelling."""
    return _NON_WORD.sub("-", word.lower())


def is_correct(word: str, node: Node, checker: DictionaryChecker, options: SpellOptions) -> bool:
    """
    Check a word, falling back to its parts for compounds.

    A compound such as ``alpha-bravo`` is correct when the checker knows the
    whole word, or when every text segment is either irrelevant or known.
    """
    if checker.correct(word):
        return True

    if len(node.children) <= 1:
        return False

    for child in node.children:
        if child.type != TEXT_NODE or child.value is None:
            continue
        if is_irrelevant(child.value, options.ignore, options.ignore_digits):
            continue
        if not checker.correct(child.value):
            return False

    return True


class WordChecker:
    """
    Checks the words of one tree against a loaded checker.

    Suggestions are looked up at most once per distinct word and at most
    ``options.max`` times per cache, since suggesting is by far the most
    expensive step.
    """

    def __init__(self, checker: DictionaryChecker, cache: SuggestionCache, options: SpellOptions):
        self._checker = checker
        self._cache = cache
        self._options = options
        self._visited = 0
        self._file: Optional[SourceFile] = None

    def check_tree(self, tree: Node, file: SourceFile) -> int:
        """
        Report every misspelt word in a tree on a file.

        Args:
            tree: Document tree
            file: File receiving diagnostics

        Returns:
            Number of diagnostics added
        """
        before = len(file.messages)
        self._visited = 0
        self._file = file

        visit(tree, WORD_NODE, self._visit_word)

        added = len(file.messages) - before
        logger.debug(
            "Checked tree",
            path=file.path,
            words=self._visited,
            diagnostics=added,
            suggestion_lookups=self._cache.count,
        )
        return added

    def _visit_word(self, node: Node, index: Optional[int], parent: Optional[Node]) -> None:
        if parent is None or index is None:
            return

        self._visited += 1
        options = self._options

        if options.ignore_literal and is_literal(parent, index):
            return

        word = to_string(node)

        if options.normalize_apostrophes:
            word = normalize_apostrophes(word)

        if is_irrelevant(word, options.ignore, options.ignore_digits):
            return

        if is_correct(word, node, self._checker, options):
            return

        expected = self._suggestions(word, node)

        self._file.message(
            format_reason(word, expected),
            place=node.position,
            rule_id=rule_id_for(word),
            source=settings.SPELLCHECK_SOURCE,
            actual=word,
            expected=expected,
            url=settings.SPELLCHECK_DOCS_URL,
        )

    def _suggestions(self, word: str, node: Node) -> List[str]:
        """Cached suggestions, a fresh lookup, or nothing once the cap is hit."""
        cached = self._cache.get(word)
        if cached is not None:
            return cached

        if self._cache.is_exhausted(self._options.max):
            if self._cache.mark_overflow():
                logger.info(
                    "Suggestion limit reached, no further suggestions",
                    max=self._options.max,
                    word=word,
                )
                self._file.message(
                    OVERFLOW_REASON,
                    place=node.position,
                    rule_id=OVERFLOW_RULE_ID,
                    source=settings.SPELLCHECK_SOURCE,
                    url=settings.SPELLCHECK_DOCS_URL,
                )
            return []

        expected = list(self._checker.suggest(word))
        self._cache.store(word, expected)
        return expected


def check_tree(
    tree: Node,
    file: SourceFile,
    checker: DictionaryChecker,
    cache: SuggestionCache,
    options: SpellOptions,
) -> int:
    """Check one tree; see WordChecker.check_tree()."""
    return WordChecker(checker, cache, options).check_tree(tree, file)
