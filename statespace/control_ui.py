"""
Control UI Module for the State Space Solver

Provides a PyQt5-based control window for choosing a puzzle, a search order
and a cost function, running the search and reading the resulting trace.
"""

from typing import List

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QHBoxLayout,
    QComboBox, QPlainTextEdit
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from statespace.puzzles import create_puzzle, get_puzzle_info
from statespace.search import SearchResult, SearchStatus, get_frontier_info


STATUS_COLORS = {
    SearchStatus.FOUND: "#4CAF50",
    SearchStatus.NOT_FOUND: "#d32f2f",
    SearchStatus.CANCELLED: "#f57c00",
    SearchStatus.LIMIT_REACHED: "#f57c00",
}

BUTTON_STYLE = """
    QPushButton {{
        background-color: {normal};
        color: white;
        border: none;
        border-radius: 5px;
        padding: 10px;
    }}
    QPushButton:hover {{
        background-color: {hover};
    }}
    QPushButton:pressed {{
        background-color: {pressed};
    }}
"""


class ControlWindow(QMainWindow):
    """
    Main control window for the state space solver.

    Provides selectors for the puzzle, search order and cost function, a
    solve/stop toggle, search metrics and the solution trace.
    """

    # Signals for worker thread communication
    start_requested = pyqtSignal()
    stop_requested = pyqtSignal()
    shutdown_requested = pyqtSignal()
    puzzle_changed = pyqtSignal(str)  # Emits puzzle name when changed
    order_changed = pyqtSignal(str)   # Emits order name ("" = puzzle default)
    cost_changed = pyqtSignal(str)    # Emits cost name ("" = puzzle default)

    def __init__(self):
        super().__init__()
        self._is_running = False
        self._init_ui()

    def _init_ui(self):
        """Initialize the user interface components."""
        # Window configuration
        self.setWindowTitle("State Space Solver")
        self.resize(640, 560)

        # Central widget and layout
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        central_widget.setLayout(layout)

        # Status label
        self.status_label = QLabel("Status: Idle")
        self.status_label.setAlignment(Qt.AlignCenter)
        status_font = QFont()
        status_font.setPointSize(10)
        status_font.setBold(True)
        self.status_label.setFont(status_font)
        layout.addWidget(self.status_label)

        # Selectors
        self.puzzle_combo = QComboBox()
        for info in get_puzzle_info():
            self.puzzle_combo.addItem(info["description"], info["name"])
        self.puzzle_combo.currentIndexChanged.connect(self._on_puzzle_changed)
        layout.addLayout(self._labelled("Puzzle:", self.puzzle_combo))

        self.order_combo = QComboBox()
        self.order_combo.addItem("Puzzle default", "")
        for info in get_frontier_info():
            self.order_combo.addItem(info["description"], info["name"])
        self.order_combo.currentIndexChanged.connect(self._on_order_changed)
        layout.addLayout(self._labelled("Order:", self.order_combo))

        self.cost_combo = QComboBox()
        self.cost_combo.currentIndexChanged.connect(self._on_cost_changed)
        layout.addLayout(self._labelled("Cost:", self.cost_combo))
        self._fill_costs(self.puzzle_combo.currentData())

        # Solve/Stop button
        self.toggle_button = QPushButton("SOLVE")
        self.toggle_button.setMinimumHeight(45)
        button_font = QFont()
        button_font.setPointSize(11)
        button_font.setBold(True)
        self.toggle_button.setFont(button_font)
        self.toggle_button.clicked.connect(self._on_toggle_clicked)
        layout.addWidget(self.toggle_button)

        # Info labels
        self.expanded_label = QLabel("Expanded:  --")
        self.generated_label = QLabel("Generated: --")
        self.rejected_label = QLabel("Rejected:  --")
        self.time_label = QLabel("Time:      --")

        info_font = QFont("Monospace")
        info_font.setStyleHint(QFont.TypeWriter)
        info_font.setPointSize(9)

        for label in [self.expanded_label, self.generated_label,
                      self.rejected_label, self.time_label]:
            label.setFont(info_font)
            layout.addWidget(label)

        # Solution trace
        self.trace_view = QPlainTextEdit()
        self.trace_view.setReadOnly(True)
        self.trace_view.setFont(info_font)
        layout.addWidget(self.trace_view, 1)  # stretch factor 1

        self._apply_styles()
        self.set_running(False)

    def _labelled(self, text: str, widget: QWidget) -> QHBoxLayout:
        """Put a caption in front of a widget."""
        row = QHBoxLayout()
        label = QLabel(text)
        label.setFont(QFont("", 9))
        label.setMinimumWidth(60)
        row.addWidget(label)
        row.addWidget(widget, 1)
        return row

    def _fill_costs(self, puzzle_name: str):
        """Populate the cost selector for a puzzle."""
        self.cost_combo.blockSignals(True)
        self.cost_combo.clear()
        self.cost_combo.addItem("Puzzle default", "")
        if puzzle_name:
            for name in create_puzzle(puzzle_name).cost_functions():
                self.cost_combo.addItem(name, name)
        self.cost_combo.setEnabled(self.cost_combo.count() > 1 and not self._is_running)
        self.cost_combo.blockSignals(False)

    def _apply_styles(self):
        """Apply clean, minimal styling to the window."""
        style = """
            QMainWindow {
                background-color: #f5f5f5;
            }
            QPushButton:disabled {
                background-color: #cccccc;
                color: #666666;
            }
            QLabel {
                color: #333333;
            }
        """
        self.setStyleSheet(style)

    def _on_toggle_clicked(self):
        """Handle Solve/Stop button click."""
        if self._is_running:
            self.stop_requested.emit()
        else:
            self.start_requested.emit()

    def _on_puzzle_changed(self, index: int):
        """Handle puzzle dropdown selection change."""
        puzzle_name = self.puzzle_combo.itemData(index)
        if puzzle_name:
            self._fill_costs(puzzle_name)
            self.puzzle_changed.emit(puzzle_name)

    def _on_order_changed(self, index: int):
        """Handle order dropdown selection change."""
        self.order_changed.emit(self.order_combo.itemData(index) or "")

    def _on_cost_changed(self, index: int):
        """Handle cost dropdown selection change."""
        self.cost_changed.emit(self.cost_combo.itemData(index) or "")

    def select(self, combo: QComboBox, value: str) -> bool:
        """
        Select the entry of a combo box holding a value.

        Args:
            combo: One of the selector combo boxes
            value: Item data to select

        Returns:
            True if the value was found
        """
        for i in range(combo.count()):
            if combo.itemData(i) == value:
                combo.setCurrentIndex(i)
                return True
        return False

    def set_status(self, status: str):
        """
        Update the status label.

        Args:
            status: Status text to display (e.g., "Idle", "Running", "Error: message")
        """
        self.status_label.setText(f"Status: {status}")

        if status.lower().startswith("error"):
            self.status_label.setStyleSheet("color: #d32f2f;")
        elif status.lower() == "running":
            self.status_label.setStyleSheet("color: #4CAF50;")
        else:
            self.status_label.setStyleSheet("color: #333333;")

    def set_progress(self, states_expanded: int, message: str):
        """
        Show search progress while running.

        Args:
            states_expanded: States expanded so far
            message: Progress message from the engine
        """
        self.expanded_label.setText(f"Expanded:  {states_expanded}")
        self.status_label.setToolTip(message)

    def show_result(self, result: SearchResult, lines: List[str]):
        """
        Display a finished search.

        Args:
            result: Search result
            lines: Formatted solution lines
        """
        m = result.metrics
        self.expanded_label.setText(f"Expanded:  {m.states_expanded} (peak frontier {m.peak_frontier})")
        self.generated_label.setText(f"Generated: {m.states_generated} "
                                     f"({m.duplicates_skipped} duplicates)")
        self.rejected_label.setText(f"Rejected:  {m.rejected_by_invariant}")
        self.time_label.setText(f"Time:      {m.computation_time_ms:.1f} ms ({m.search_order})")
        self.trace_view.setPlainText("\n".join(lines))
        self.status_label.setStyleSheet(f"color: {STATUS_COLORS[result.status]};")

    def set_running(self, is_running: bool):
        """
        Toggle the button state.

        Args:
            is_running: True if a search is running, False if idle
        """
        self._is_running = is_running

        # Selectors are locked while a search runs
        self.puzzle_combo.setEnabled(not is_running)
        self.order_combo.setEnabled(not is_running)
        self.cost_combo.setEnabled(not is_running and self.cost_combo.count() > 1)

        if is_running:
            self.toggle_button.setText("STOP")
            self.toggle_button.setStyleSheet(BUTTON_STYLE.format(
                normal="#f44336", hover="#da190b", pressed="#c41408"))
            self.trace_view.clear()
            self.set_status("Running")
        else:
            self.toggle_button.setText("SOLVE")
            self.toggle_button.setStyleSheet(BUTTON_STYLE.format(
                normal="#4CAF50", hover="#45a049", pressed="#3d8b40"))

    def closeEvent(self, event):
        """
        Handle window close event.

        Emits shutdown_requested signal before closing to allow
        graceful cleanup of worker threads.

        Args:
            event: QCloseEvent object
        """
        self.shutdown_requested.emit()
        event.accept()
