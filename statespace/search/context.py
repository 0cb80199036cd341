"""
Search Context Module - Cancellation, limits and progress for one search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class SearchContext:
    """
    Context passed to StateSpace.check() controlling how long it may run.

    The engine itself never stops early; a context lets a caller bound an
    otherwise unbounded exploration or cancel it from another thread.

    Attributes:
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = no limit)
        max_states: Maximum number of states to expand (None = no limit)
        start_time: When computation started
        progress_callback: Optional callback receiving (states_expanded, message)
        progress_interval: Expansions between two progress reports
    """
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_states: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None
    progress_interval: int = 1000

    def restart(self) -> None:
        """Reset the clock, used when a context is reused for a new search."""
        self.start_time = time.time()

    def cancel(self) -> None:
        """Request cancellation of the running search."""
        self.cancel_flag.set()

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if the search should stop
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def limit_reached(self, states_expanded: int) -> bool:
        """
        Check if the expansion budget is used up.

        Args:
            states_expanded: States expanded so far

        Returns:
            True if no further state may be expanded
        """
        return self.max_states is not None and states_expanded >= self.max_states

    def report_progress(self, states_expanded: int, message: str = "") -> None:
        """
        Report progress to the caller every progress_interval expansions.

        Args:
            states_expanded: States expanded so far
            message: Optional status message
        """
        if self.progress_callback is None or self.progress_interval <= 0:
            return
        if states_expanded % self.progress_interval == 0:
            self.progress_callback(states_expanded, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time
