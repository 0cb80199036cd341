"""
State Space Solver - Entry Point

Solves a puzzle model on the console, or launches the control window.

Example:
    python main.py frogs
    python main.py frogs --frogs 4 --order dfs
    python main.py family --cost noise --moves
    python main.py --gui
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from statespace.puzzles import available_puzzles, create_puzzle
from statespace.search import SearchContext, SearchOrder
from statespace.settings import load_settings, save_settings


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging - output to both console and file.

    The log file always receives DEBUG records; the console gets `level`.

    Args:
        level: Console log level name
    """
    console = logging.StreamHandler()  # stderr, keeps stdout for the trace
    console.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            console,
            logging.FileHandler("statespace.log", mode='w', encoding='utf-8')
        ]
    )


class Application:
    """
    Main application controller.

    Runs one console search, or manages the lifecycle of the control window
    and its search worker thread, connecting signals between them.
    """

    def __init__(self, args: argparse.Namespace, settings: Dict[str, Any]):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments
            settings: Persistent settings (updated by UI choices)
        """
        self.args = args
        self.settings = settings
        self.window = None
        self.worker = None

    def run(self) -> int:
        """
        Run the console search.

        Returns:
            Exit code: 0 if a solution was found, 1 otherwise
        """
        args = self.args
        puzzle = create_puzzle(args.puzzle, frogs=args.frogs)

        if args.explain:
            if not hasattr(puzzle, "successor_tree"):
                raise ValueError(f"Puzzle {puzzle.name} cannot explain its successors")
            for line in puzzle.successor_tree(puzzle.initial_state()):
                print(line)

        context = SearchContext(timeout_sec=args.timeout, max_states=args.max_states)
        result = puzzle.solve(args.order, args.cost, context)

        for line in puzzle.format_solution(result, show_moves=args.moves):
            print(line)

        return 0 if result.found else 1

    def setup_gui(self):
        """Set up the control window and connect signals."""
        from statespace.control_ui import ControlWindow

        self.window = ControlWindow()

        # Connect UI signals to handlers
        self.window.start_requested.connect(self._on_start)
        self.window.stop_requested.connect(self._on_stop)
        self.window.shutdown_requested.connect(self._on_shutdown)
        self.window.puzzle_changed.connect(lambda name: self._on_setting_changed("puzzle", name))
        self.window.order_changed.connect(lambda name: self._on_setting_changed("search_order", name))
        self.window.cost_changed.connect(lambda name: self._on_setting_changed("cost", name))

        # Initialize UI state from arguments and settings
        self.window.select(self.window.puzzle_combo, self.args.puzzle)
        self.window.select(self.window.order_combo, self.args.order or "")
        self.window.select(self.window.cost_combo, self.args.cost or "")

        logger.info("Control window initialized")
        self.window.show()

    def _on_start(self):
        """Handle solve button click."""
        from statespace.search_worker import SearchWorker

        if self.worker and self.worker.isRunning():
            logger.warning("Worker already running")
            return

        logger.info("Starting search worker")
        self.worker = SearchWorker(
            self.window.puzzle_combo.currentData(),
            order=self.window.order_combo.currentData() or None,
            cost=self.window.cost_combo.currentData() or None,
            frogs=self.args.frogs,
            timeout_sec=self.args.timeout,
            max_states=self.args.max_states,
            show_moves=self.args.moves,
        )

        # Connect worker signals to UI
        self.worker.status_changed.connect(self.window.set_status)
        self.worker.progress_changed.connect(self.window.set_progress)
        self.worker.result_ready.connect(self.window.show_result)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.finished.connect(lambda: self.window.set_running(False))

        self.worker.start()
        self.window.set_running(True)

    def _on_stop(self):
        """Handle stop button click."""
        if not self.worker or not self.worker.isRunning():
            logger.warning("Worker not running")
            return

        logger.info("Stopping search worker")
        self.worker.request_stop()
        self.worker.wait(2000)  # 2 second timeout

        if self.worker.isRunning():
            logger.warning("Worker did not stop gracefully, terminating")
            self.worker.terminate()
            self.worker.wait()

        self.worker = None
        self.window.set_running(False)

    def _on_shutdown(self):
        """Handle window close."""
        logger.info("Shutdown requested")
        if self.worker and self.worker.isRunning():
            self._on_stop()

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        logger.error(f"Worker error: {error_msg}")
        self.window.set_status(f"Error: {error_msg}")

    def _on_setting_changed(self, key: str, value: str):
        """Persist a selector change."""
        logger.info(f"Setting changed: {key}={value or 'default'}")
        self.settings[key] = value or None
        save_settings(self.settings)


def parse_args(settings: Dict[str, Any], argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Defaults come from the settings file.

    Args:
        settings: Loaded settings
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="State Space Solver - Reachability search over puzzle models"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        default=settings["puzzle"],
        choices=available_puzzles(),
        help=f"Puzzle to solve (default: {settings['puzzle']})"
    )
    parser.add_argument(
        "--order", "-o",
        default=settings["search_order"],
        help="Search order: depth_first/dfs, breadth_first/bfs or cost_guided/cost "
             "(default: the puzzle's own)"
    )
    parser.add_argument(
        "--cost", "-c",
        default=settings["cost"],
        help="Cost function name for cost-guided search (default: the puzzle's own)"
    )
    parser.add_argument(
        "--frogs", "-f",
        type=int,
        default=settings["frogs"],
        help=f"Frogs of each colour for the frogs puzzle (default: {settings['frogs']})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings["timeout_sec"],
        help="Give up after this many seconds"
    )
    parser.add_argument(
        "--max-states",
        type=int,
        default=settings["max_states"],
        help="Give up after expanding this many states"
    )
    parser.add_argument(
        "--moves", "-m",
        action="store_true",
        default=settings["show_moves"],
        help="Show the move leading to each state"
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the successor tree of the initial state first (frogs only)"
    )
    parser.add_argument(
        "--gui", "-g",
        action="store_true",
        help="Open the control window"
    )
    parser.add_argument(
        "--log-level",
        default=settings["log_level"],
        help=f"Console log level (default: {settings['log_level']})"
    )
    args = parser.parse_args(argv)

    if args.order:
        try:
            args.order = SearchOrder.parse(args.order).value
        except ValueError as e:
            parser.error(str(e))
    return args


def main():
    """Initialize and run the State Space Solver."""
    settings = load_settings()
    args = parse_args(settings)
    configure_logging(args.log_level)

    application = Application(args, settings)

    if args.gui:
        from PyQt5.QtWidgets import QApplication

        app = QApplication(sys.argv)
        application.setup_gui()
        sys.exit(app.exec_())

    try:
        exit_code = application.run()
    except ValueError as e:
        logger.error(str(e))
        exit_code = 2
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
