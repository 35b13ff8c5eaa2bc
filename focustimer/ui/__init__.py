"""UI package."""

from .timer_window import TimerWindow, confirm_reset, PHASE_LABELS, PROGRESS_FLOOR

__all__ = [
    "TimerWindow",
    "confirm_reset",
    "PHASE_LABELS",
    "PROGRESS_FLOOR",
]
