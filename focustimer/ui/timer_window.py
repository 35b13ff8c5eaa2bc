"""Main timer window.

Layout (top → bottom):
    - Status label ("Let's focus!" / "Let's rest!")
    - Remaining time (MM:SS)
    - Progress bar
    - Button row: Start, or Pause/Resume + Stop
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QProgressBar, QMessageBox,
)

from ..timer.engine import SessionController, Phase, RunState, PhaseCompleted

logger = logging.getLogger(__name__)


PHASE_LABELS: dict[Phase, str] = {
    Phase.WORK:  "Let's focus!",
    Phase.BREAK: "Let's rest!",
}

# The bar never draws fully empty; a reset shows a sliver.
PROGRESS_FLOOR = 0.001
PROGRESS_STEPS = 1000


def confirm_reset(parent: QWidget) -> bool:
    """Ask before throwing away the running session."""
    box = QMessageBox(parent)
    box.setWindowTitle("Reset timer?")
    box.setText("Reset timer?")
    box.setInformativeText("Confirm resetting the timer")
    box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
    reset_btn = box.addButton("Reset", QMessageBox.ButtonRole.DestructiveRole)
    box.exec()
    return box.clickedButton() is reset_btn


class TimerWindow(QMainWindow):
    """Single-card window that renders a ``SessionController``."""

    def __init__(
        self,
        controller: SessionController,
        parent: QWidget | None = None,
        *,
        transition_delay_ms: int = 1000,
        confirm: Callable[[QWidget], bool] = confirm_reset,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._transition_delay_ms = max(0, transition_delay_ms)
        self._confirm = confirm
        self._waiting_at_boundary = False

        self.setWindowTitle("Focus Timer")
        self._build_ui()
        self._connect_signals()
        self._refresh_display()
        self._set_status_text(controller.phase)
        self._update_button_visibility(controller.run_state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._status_label = QLabel(central)
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status_label)

        self._time_label = QLabel(central)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setStyleSheet("font-size: 56px; font-weight: 600;")
        layout.addWidget(self._time_label)

        self._progress_bar = QProgressBar(central)
        self._progress_bar.setRange(0, PROGRESS_STEPS)
        self._progress_bar.setTextVisible(False)
        layout.addWidget(self._progress_bar)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", central)
        self._pause_btn = QPushButton("Pause", central)
        self._stop_btn = QPushButton("Stop", central)

        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._pause_btn)
        btn_row.addWidget(self._stop_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._controller.start)
        self._pause_btn.clicked.connect(self._on_pause_toggle)
        self._stop_btn.clicked.connect(self.request_stop)

        self._controller.ticked.connect(self._refresh_display)
        self._controller.run_state_changed.connect(self._on_run_state_changed)
        self._controller.phase_completed.connect(self._on_phase_completed)
        self._controller.stopped.connect(self._on_stopped)

    # ── slots ─────────────────────────────────────────────────────────────

    def request_stop(self) -> None:
        """Stop button: reset only after the user confirms."""
        if self._confirm(self):
            self._controller.stop()
        else:
            logger.debug("Reset cancelled")

    def _on_pause_toggle(self) -> None:
        if self._controller.run_state == RunState.PAUSED:
            self._controller.resume()
        else:
            self._controller.pause()

    def _on_run_state_changed(self, state: RunState) -> None:
        if state != RunState.PAUSED:
            self._waiting_at_boundary = False
        self._pause_btn.setText("Resume" if state == RunState.PAUSED else "Pause")
        self._update_button_visibility(state)
        self._refresh_display()

    def _on_phase_completed(self, event: PhaseCompleted) -> None:
        # Boundary pause: offer Start for the next phase, as from IDLE.
        if self._controller.run_state == RunState.PAUSED:
            self._waiting_at_boundary = True
            self._update_button_visibility(RunState.PAUSED)
        self._refresh_display()
        if self._transition_delay_ms == 0:
            self._set_status_text(event.next_phase)
            return
        QTimer.singleShot(
            self._transition_delay_ms,
            lambda p=event.next_phase: self._set_status_text(p),
        )

    def _on_stopped(self) -> None:
        self._set_status_text(self._controller.phase)
        self._refresh_display()

    # ── display ───────────────────────────────────────────────────────────

    def _update_button_visibility(self, state: RunState) -> None:
        show_start = state == RunState.IDLE or self._waiting_at_boundary
        self._start_btn.setVisible(show_start)
        self._pause_btn.setVisible(not show_start)
        self._stop_btn.setVisible(not show_start)

    def _refresh_display(self, _remaining: int | None = None) -> None:
        self._time_label.setText(self._controller.formatted_remaining)
        pct = max(self._controller.progress, PROGRESS_FLOOR)
        self._progress_bar.setValue(round(pct * PROGRESS_STEPS))

    def _set_status_text(self, phase: Phase) -> None:
        self._status_label.setText(PHASE_LABELS[phase])
