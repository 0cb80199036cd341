"""
Search Worker Module for the State Space Solver

Provides a background QThread worker that runs one puzzle search.
Communicates with the UI via Qt signals for thread-safe status updates.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from statespace.puzzles import create_puzzle
from statespace.search import SearchContext


# Configure module logger
logger = logging.getLogger(__name__)


class SearchWorker(QThread):
    """
    Background worker thread for a single search.

    The search runs to completion on the worker thread; request_stop()
    sets the context's cancel flag, which the engine polls once per
    expanded state.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress_changed(int, str): Emitted every progress interval
        result_ready(object, object): Emitted with (SearchResult, lines)
        error_occurred(str): Emitted when an error occurs

    Example:
        worker = SearchWorker("frogs", order="bfs")
        worker.status_changed.connect(ui.set_status)
        worker.result_ready.connect(ui.show_result)
        worker.start()
        # ...
        worker.request_stop()
        worker.wait()
    """

    # Signals for UI updates (thread-safe)
    status_changed = pyqtSignal(str)
    progress_changed = pyqtSignal(int, str)
    result_ready = pyqtSignal(object, object)
    error_occurred = pyqtSignal(str)

    # Expansions between two progress signals
    PROGRESS_INTERVAL = 500

    def __init__(self, puzzle_name: str, order: Optional[str] = None,
                 cost: Optional[str] = None, frogs: int = 2,
                 timeout_sec: Optional[float] = None,
                 max_states: Optional[int] = None,
                 show_moves: bool = False):
        """
        Initialize the search worker.

        Args:
            puzzle_name: Registered puzzle name
            order: Search order name (None = the puzzle's default)
            cost: Cost function name (None = the puzzle's default)
            frogs: Frogs per colour for the frogs puzzle
            timeout_sec: Search timeout (None = unlimited)
            max_states: Expansion budget (None = unlimited)
            show_moves: Annotate the solution with moves
        """
        super().__init__()
        self.puzzle_name = puzzle_name
        self.order = order
        self.cost = cost
        self.frogs = frogs
        self.show_moves = show_moves
        self._context = SearchContext(
            timeout_sec=timeout_sec,
            max_states=max_states,
            progress_callback=self._on_progress,
            progress_interval=self.PROGRESS_INTERVAL,
        )

    def run(self):
        """
        Worker body. Called when thread starts.

        Builds the puzzle, runs the search and emits the formatted result.
        """
        logger.info(f"Search worker started: {self.puzzle_name}")
        self.status_changed.emit("Running")
        self._context.restart()

        try:
            puzzle = create_puzzle(self.puzzle_name, frogs=self.frogs)
            result = puzzle.solve(self.order, self.cost, self._context)
            lines = puzzle.format_solution(result, show_moves=self.show_moves)
        except Exception as e:
            logger.exception("Error in search worker")
            self.error_occurred.emit(str(e))
            return

        # status first: show_result colours the label by outcome
        self.status_changed.emit(result.status.value.replace("_", " ").capitalize())
        self.result_ready.emit(result, lines)
        logger.info(f"Search worker finished: {result.summary()}")

    def request_stop(self):
        """
        Request the search to stop.

        The engine notices on its next expansion. Use wait() after calling
        this to block until stopped.
        """
        logger.info("Stop requested")
        self._context.cancel()

    def _on_progress(self, states_expanded: int, message: str) -> None:
        """Forward engine progress to the UI thread."""
        self.progress_changed.emit(states_expanded, message)
