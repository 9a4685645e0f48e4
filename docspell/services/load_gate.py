"""
Load gate: holds check requests until the dictionary is available.
"""
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from docspell.schemas.diagnostic import SourceFile
from docspell.schemas.nlcst import Node
from docspell.services.spellcheck_base import DictionaryChecker
from docspell.utils.logger import get_logger

logger = get_logger("services.load_gate")

CheckCallback = Callable[[Optional[BaseException]], None]
CheckRunner = Callable[[Node, SourceFile, DictionaryChecker], None]


class LoadState(str, Enum):
    """Dictionary load state of a session."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class PendingRequest(NamedTuple):
    """A check submitted before the dictionary finished loading."""
    tree: Node
    file: SourceFile
    callback: CheckCallback


class LoadGate:
    """
    Three-state gate in front of the tree checker.

    While loading, requests are queued. The first transition to ready or
    failed replays the queue in submission order; afterwards requests are
    serviced immediately.
    """

    def __init__(self, runner: CheckRunner):
        """
        Args:
            runner: Checks one tree against the loaded checker, appending
                diagnostics to the file
        """
        self._runner = runner
        self._state = LoadState.LOADING
        self._checker: Optional[DictionaryChecker] = None
        self._error: Optional[BaseException] = None
        self._queue: List[PendingRequest] = []

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def checker(self) -> Optional[DictionaryChecker]:
        return self._checker

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def submit(self, tree: Node, file: SourceFile, callback: CheckCallback) -> None:
        """
        Check a tree now, or queue it while the dictionary is loading.

        Args:
            tree: Document tree
            file: File receiving diagnostics
            callback: Called with None on success or with the load error
        """
        if self._state is LoadState.FAILED:
            callback(self._error)
        elif self._state is LoadState.READY:
            self._runner(tree, file, self._checker)
            callback(None)
        else:
            self._queue.append(PendingRequest(tree, file, callback))
            logger.debug("Queued check until dictionary loads", pending=len(self._queue))

    def open(self, checker: DictionaryChecker) -> None:
        """Transition to ready and check every queued request."""
        self._transition(LoadState.READY)
        self._checker = checker
        self._flush()

    def fail(self, error: BaseException) -> None:
        """Transition to failed and report the error to every queued request."""
        self._transition(LoadState.FAILED)
        self._error = error
        self._flush()

    def _transition(self, state: LoadState) -> None:
        if self._state is not LoadState.LOADING:
            raise RuntimeError(f"Dictionary load already resolved as {self._state.value}")
        self._state = state

    def _flush(self) -> None:
        """
        Service every queued request in submission order.

        A request whose check or callback raises does not stop the replay:
        the remaining requests are still serviced, then the first exception
        is re-raised.
        """
        # Detach first so requests submitted from callbacks are serviced directly
        queue, self._queue = self._queue, []

        if queue:
            logger.info(
                "Replaying queued checks",
                pending=len(queue),
                outcome=self._state.value,
            )

        first_error: Optional[Exception] = None

        for tree, file, callback in queue:
            try:
                if self._state is LoadState.READY:
                    self._runner(tree, file, self._checker)
                    callback(None)
                else:
                    callback(self._error)
            except Exception as e:
                logger.error("Queued check failed during replay", path=file.path, error=str(e))
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error
