"""
Spell-check sessions: one dictionary load, one suggestion cache, many documents.
"""
import asyncio
from typing import Any, Optional

from docspell.schemas.diagnostic import SourceFile
from docspell.schemas.nlcst import Node
from docspell.schemas.options import SpellOptions
from docspell.services.dictionary_loader import DictionaryLoader
from docspell.services.load_gate import CheckCallback, LoadGate, LoadState
from docspell.services.spellcheck_base import DictionaryChecker
from docspell.services.suggestion_cache import SuggestionCache
from docspell.services.word_checker import WordChecker
from docspell.utils.logger import get_logger

logger = get_logger("services.spellcheck")


class SpellSession:
    """
    A configured spell-check session.

    The dictionary starts loading when the session is created. Checks
    submitted before it finishes are queued and replayed in order; later
    checks run immediately. Every document checked by a session shares its
    suggestion cache.

    Usage:
        session = SpellSession({"dictionary": loader, "max": 10})
        session.check(tree, file, callback)
        # or, from a coroutine
        await session.check_async(tree, file)
    """

    def __init__(self, options: Any):
        """
        Initialize the session and start loading the dictionary.

        Args:
            options: SpellOptions, a mapping of options, or a bare dictionary

        Raises:
            SpellConfigurationError: If no usable dictionary was supplied
        """
        self._options = SpellOptions.from_value(options)
        self._cache = SuggestionCache()
        self._gate = LoadGate(self._run)
        self._loader = DictionaryLoader(self._options.dictionary, self._options.personal)

        logger.info(
            "Spell-check session created",
            ignore_count=len(self._options.ignore),
            ignore_literal=self._options.ignore_literal,
            ignore_digits=self._options.ignore_digits,
            normalize_apostrophes=self._options.normalize_apostrophes,
            max=self._options.max,
            personal=self._options.personal is not None,
        )

        self._loader.start(on_ready=self._gate.open, on_error=self._gate.fail)

    @property
    def options(self) -> SpellOptions:
        return self._options

    @property
    def state(self) -> LoadState:
        return self._gate.state

    @property
    def checker(self) -> Optional[DictionaryChecker]:
        return self._gate.checker

    @property
    def error(self) -> Optional[BaseException]:
        return self._gate.error

    @property
    def cache(self) -> SuggestionCache:
        return self._cache

    @property
    def suggestion_count(self) -> int:
        return self._cache.count

    def is_loaded(self) -> bool:
        """Check if the dictionary is loaded and ready."""
        return self._gate.state is LoadState.READY

    def _run(self, tree: Node, file: SourceFile, checker: DictionaryChecker) -> None:
        WordChecker(checker, self._cache, self._options).check_tree(tree, file)

    def check(self, tree: Node, file: SourceFile, callback: CheckCallback) -> None:
        """
        Check a tree, reporting misspellings on a file.

        Returns immediately. ``callback`` receives None once the file holds
        its diagnostics, or the load error if the dictionary failed to load;
        load errors are never added to the file.

        Args:
            tree: Document tree
            file: File receiving diagnostics
            callback: Completion callback
        """
        self._gate.submit(tree, file, callback)

    async def check_async(self, tree: Node, file: Optional[SourceFile] = None) -> SourceFile:
        """
        Check a tree, waiting for the dictionary if needed.

        Args:
            tree: Document tree
            file: File receiving diagnostics (a new one when omitted)

        Returns:
            The file with diagnostics

        Raises:
            Exception: The dictionary load error, if loading failed
        """
        file = file if file is not None else SourceFile()
        future = asyncio.get_running_loop().create_future()

        def done(error: Optional[BaseException]) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(file)

        self.check(tree, file, done)
        return await future

    def process(self, tree: Node, file: Optional[SourceFile] = None) -> SourceFile:
        """
        Check a tree synchronously on a session whose load has resolved.

        Args:
            tree: Document tree
            file: File receiving diagnostics (a new one when omitted)

        Returns:
            The file with diagnostics

        Raises:
            RuntimeError: If the dictionary is still loading
            Exception: The dictionary load error, if loading failed
        """
        if self._gate.state is LoadState.LOADING:
            raise RuntimeError("Dictionary is still loading; use check() or check_async()")

        file = file if file is not None else SourceFile()
        outcome = []
        self.check(tree, file, outcome.append)

        if outcome and outcome[0] is not None:
            raise outcome[0]
        return file


def create_spellcheck_session(options: Any) -> SpellSession:
    """
    Create a spell-check session.

    Args:
        options: SpellOptions, a mapping of options, or a bare dictionary

    Returns:
        SpellSession whose dictionary is loading (or already loaded)
    """
    return SpellSession(options)
