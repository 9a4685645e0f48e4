"""
Dictionary loading: turns the accepted dictionary shapes into a checker.

A loader is a callable taking a single ``onload(error, data)`` callback. It
may call back synchronously or at any later point; the callback must be
invoked once.
"""
import asyncio
import inspect
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Set, Union

from docspell.schemas.spellcheck import DictionaryData
from docspell.services.personal import PersonalDictionary
from docspell.services.spellcheck_base import (
    DictionaryChecker,
    DictionaryLoadError,
    SpellConfigurationError,
)
from docspell.services.spellcheck_symspell import SymSpellChecker
from docspell.utils.logger import get_logger

logger = get_logger("services.dictionary_loader")

OnLoad = Callable[[Optional[BaseException], Any], None]
Loader = Callable[[OnLoad], None]

# Strong references to running load tasks, dropped once they finish
_background_tasks: Set["asyncio.Task[Any]"] = set()


def _static_loader(value: Any) -> Loader:
    """Loader for a dictionary that is already available."""

    def loader(onload: OnLoad) -> None:
        onload(None, value)

    return loader


def _coroutine_loader(load: Callable[[], Awaitable[Any]]) -> Loader:
    """Loader for an ``async def`` function returning dictionary data."""

    def loader(onload: OnLoad) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            try:
                data = asyncio.run(load())
            except Exception as e:
                onload(e, None)
                return
            onload(None, data)
            return

        task = loop.create_task(load())
        _background_tasks.add(task)

        def done(finished: "asyncio.Task[Any]") -> None:
            _background_tasks.discard(finished)
            if finished.cancelled():
                onload(DictionaryLoadError("Dictionary load was cancelled"), None)
                return
            error = finished.exception()
            onload(error, None if error else finished.result())

        task.add_done_callback(done)

    return loader


def as_loader(dictionary: Any) -> Loader:
    """
    Normalize a dictionary option into a callback loader.

    Args:
        dictionary: Callback loader, ``async def`` loader, DictionaryData,
            mapping with a ``dic`` entry, raw word list, or DictionaryChecker

    Returns:
        Loader callable

    Raises:
        SpellConfigurationError: If the value cannot supply a dictionary
    """
    if isinstance(dictionary, (DictionaryChecker, DictionaryData, str, bytes, Mapping)):
        return _static_loader(dictionary)

    if inspect.iscoroutinefunction(dictionary):
        return _coroutine_loader(dictionary)

    if callable(dictionary):
        return dictionary

    raise SpellConfigurationError(
        f"Expected a dictionary loader or dictionary, got `{type(dictionary).__name__}`"
    )


def build_checker(data: Any, personal: Optional[Union[str, bytes]] = None) -> DictionaryChecker:
    """
    Construct a checker from loaded dictionary data.

    Args:
        data: DictionaryChecker (used as-is), DictionaryData, mapping or raw word list
        personal: Optional personal word list to overlay

    Returns:
        Checker ready for queries

    Raises:
        DictionaryLoadError: If the payload cannot be turned into a checker
    """
    try:
        if isinstance(data, DictionaryChecker):
            checker = data
        elif isinstance(data, DictionaryData):
            checker = SymSpellChecker(data)
        elif isinstance(data, Mapping):
            checker = SymSpellChecker(DictionaryData.model_validate(dict(data)))
        elif isinstance(data, (str, bytes)):
            checker = SymSpellChecker(DictionaryData(dic=data))
        else:
            raise DictionaryLoadError(f"Unsupported dictionary payload: `{type(data).__name__}`")

        if personal:
            checker = PersonalDictionary(checker, personal)

    except DictionaryLoadError:
        raise
    except Exception as e:
        raise DictionaryLoadError(f"Failed to build spell checker: {e}", e) from e

    return checker


def wordlist_loader(path: Union[str, Path], language: Optional[str] = None) -> Loader:
    """
    Loader reading a word list file.

    Args:
        path: Word list file (UTF-8)
        language: Language code stored on the payload

    Returns:
        Loader callable reporting OSError through its callback
    """
    path = Path(path)

    def loader(onload: OnLoad) -> None:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            onload(e, None)
            return
        onload(None, DictionaryData(dic=text, language=language))

    return loader


class DictionaryLoader:
    """
    Runs a loader once and reports a checker or an error.

    Usage:
        loader = DictionaryLoader(dictionary, personal=None)
        loader.start(on_ready=gate.open, on_error=gate.fail)
    """

    def __init__(self, dictionary: Any, personal: Optional[Union[str, bytes]] = None):
        """
        Args:
            dictionary: Any shape accepted by as_loader()
            personal: Optional personal word list merged into the checker

        Raises:
            SpellConfigurationError: If the dictionary shape is not supported
        """
        self._loader = as_loader(dictionary)
        self._personal = personal
        self._started = False
        self._completed = False
        self._start_time = 0.0
        self._on_ready: Optional[Callable[[DictionaryChecker], None]] = None
        self._on_error: Optional[Callable[[BaseException], None]] = None

    @property
    def completed(self) -> bool:
        return self._completed

    def start(
        self,
        on_ready: Callable[[DictionaryChecker], None],
        on_error: Callable[[BaseException], None],
    ) -> None:
        """
        Invoke the loader.

        Args:
            on_ready: Called with the checker when loading succeeds
            on_error: Called with the error when loading fails

        Raises:
            RuntimeError: If the load was already started
        """
        if self._started:
            raise RuntimeError("Dictionary load already started")

        self._started = True
        self._on_ready = on_ready
        self._on_error = on_error
        self._start_time = time.time()

        logger.info("Loading dictionary", personal=bool(self._personal))

        try:
            self._loader(self._onload)
        except Exception as e:
            # Raised after completion means a completion callback failed
            if self._completed:
                raise
            self._onload(e, None)

    def _onload(self, error: Optional[BaseException], data: Any = None) -> None:
        """Completion callback handed to the loader."""
        if self._completed:
            logger.warning("Dictionary loader called back more than once, ignoring")
            return

        self._completed = True
        checker: Optional[DictionaryChecker] = None

        if error is None:
            if data is None:
                error = DictionaryLoadError("Dictionary loader returned no dictionary")
            else:
                try:
                    checker = build_checker(data, self._personal)
                except DictionaryLoadError as e:
                    error = e

        if error is not None:
            if not isinstance(error, BaseException):
                error = DictionaryLoadError(str(error))
            logger.error(
                "Dictionary load failed",
                error=str(error),
                load_time_seconds=round(time.time() - self._start_time, 2),
            )
            self._on_error(error)
            return

        logger.info(
            "Dictionary loaded",
            checker=type(checker).__name__,
            load_time_seconds=round(time.time() - self._start_time, 2),
        )
        self._on_ready(checker)
