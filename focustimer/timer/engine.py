"""Session state machine for the focus timer.

States
------
IDLE      Not running. Phase is WORK and the clock shows the full work time.
RUNNING   Counting down the current phase, one ``tick()`` per second.
PAUSED    Clock frozen; ``remaining`` is kept.

Transitions
-----------
IDLE → RUNNING          (start)
RUNNING → PAUSED        (pause)
PAUSED → RUNNING        (resume, or start)
RUNNING | PAUSED → IDLE (stop — hard reset to WORK)
WORK ↔ BREAK            (remaining reaches 0 while RUNNING)

The controller does not own the clock.  A tick source (see ``ticks.py``)
calls ``tick()`` and follows ``run_state_changed`` to start and stop
delivery.  Ticks that arrive while not RUNNING are ignored, so a tick
already in flight when pause/stop is requested does no harm.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .permit import BackgroundPermit

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    WORK = "work"
    BREAK = "break"

    @property
    def other(self) -> Phase:
        return Phase.BREAK if self is Phase.WORK else Phase.WORK


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

WORK_SECONDS = 25 * 60
BREAK_SECONDS = 5 * 60


# ── value types ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionConfig:
    """Interval lengths in seconds.  Fixed for the controller's lifetime."""

    work_duration: int = WORK_SECONDS
    break_duration: int = BREAK_SECONDS

    def __post_init__(self) -> None:
        for name in ("work_duration", "break_duration"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def duration_of(self, phase: Phase) -> int:
        if phase is Phase.WORK:
            return self.work_duration
        return self.break_duration


@dataclass(frozen=True)
class PhaseCompleted:
    """Emitted once per boundary crossing."""

    completed_phase: Phase
    next_phase: Phase


def format_remaining(seconds: int) -> str:
    """``65`` → ``"01:05"``.  Minutes are not capped at two digits."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── controller ────────────────────────────────────────────────────────────


class SessionController(QObject):
    """Work/break state machine driven by ticks and four user commands.

    Signals
    -------
    ticked(remaining_seconds: int)
        Emitted after every applied tick (after the reset when the tick
        crossed a phase boundary).
    run_state_changed(new_state: RunState)
        Emitted on every IDLE/RUNNING/PAUSED change.
    phase_completed(event: PhaseCompleted)
        Emitted exactly once when a phase runs out.
    started, paused, resumed, stopped
        Command side effects for collaborators that only care about one.
    """

    ticked = pyqtSignal(int)
    run_state_changed = pyqtSignal(object)
    phase_completed = pyqtSignal(object)
    started = pyqtSignal()
    paused = pyqtSignal()
    resumed = pyqtSignal()
    stopped = pyqtSignal()

    def __init__(
        self,
        config: SessionConfig | None = None,
        parent: QObject | None = None,
        *,
        permit: BackgroundPermit | None = None,
        pause_at_phase_end: bool = False,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._config: SessionConfig = config or SessionConfig()
        self._permit: BackgroundPermit = permit or BackgroundPermit()
        self._pause_at_phase_end: bool = pause_at_phase_end

        # ── session state ─────────────────────────────────────────────
        self._phase: Phase = Phase.WORK
        self._run_state: RunState = RunState.IDLE
        self._remaining: int = self._config.work_duration

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def permit(self) -> BackgroundPermit:
        return self._permit

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def remaining(self) -> int:
        """Seconds left in the current phase."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._run_state == RunState.RUNNING

    @property
    def pause_at_phase_end(self) -> bool:
        return self._pause_at_phase_end

    @pause_at_phase_end.setter
    def pause_at_phase_end(self, value: bool) -> None:
        self._pause_at_phase_end = value

    @property
    def progress(self) -> float:
        """0.0 → 1.0 through the current phase."""
        duration = self.duration_of(self._phase)
        return (duration - self._remaining) / duration

    @property
    def formatted_remaining(self) -> str:
        return format_remaining(self._remaining)

    def duration_of(self, phase: Phase) -> int:
        return self._config.duration_of(phase)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start the current phase from full length, or resume if paused."""
        if self._run_state == RunState.RUNNING:
            return
        if self._run_state == RunState.PAUSED:
            self.resume()
            return
        self._remaining = self.duration_of(self._phase)
        self._permit.acquire()
        logger.info("Started %s phase (%ss)", self._phase.value, self._remaining)
        self._set_run_state(RunState.RUNNING)
        self.started.emit()

    def pause(self) -> None:
        if self._run_state != RunState.RUNNING:
            return
        self._permit.release()
        logger.info("Paused with %ss left", self._remaining)
        self._set_run_state(RunState.PAUSED)
        self.paused.emit()

    def resume(self) -> None:
        """Continue from PAUSED without touching ``remaining``."""
        if self._run_state != RunState.PAUSED:
            return
        self._permit.acquire()
        logger.info("Resumed with %ss left", self._remaining)
        self._set_run_state(RunState.RUNNING)
        self.resumed.emit()

    def stop(self) -> None:
        """Reset to an idle WORK phase.  Callers confirm with the user first."""
        self._permit.release()
        if self._run_state == RunState.IDLE:
            return
        self._phase = Phase.WORK
        self._remaining = self._config.work_duration
        logger.info("Stopped; reset to %s", self.formatted_remaining)
        self._set_run_state(RunState.IDLE)
        self.stopped.emit()

    def tick(self) -> None:
        """Apply one elapsed second.  Ignored unless RUNNING."""
        if self._run_state != RunState.RUNNING:
            logger.debug("Ignoring tick while %s", self._run_state.value)
            return

        self._remaining -= 1
        if self._remaining <= 0:
            self._remaining = 0
            self._finish_phase()
        self.ticked.emit(self._remaining)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _finish_phase(self) -> None:
        completed = self._phase
        self._phase = completed.other
        self._remaining = self.duration_of(self._phase)
        event = PhaseCompleted(completed_phase=completed, next_phase=self._phase)
        logger.info(
            "%s phase complete; next %s (%ss)",
            completed.value, self._phase.value, self._remaining,
        )

        # ── continue, or wait for the user at the boundary ────────────
        if self._pause_at_phase_end:
            self._permit.release()
            self._set_run_state(RunState.PAUSED)
            self.paused.emit()

        self.phase_completed.emit(event)

    def _set_run_state(self, new_state: RunState) -> None:
        self._run_state = new_state
        self.run_state_changed.emit(new_state)
