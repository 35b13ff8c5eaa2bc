"""Timer package."""

from .engine import (
    SessionController,
    SessionConfig,
    Phase,
    RunState,
    PhaseCompleted,
    format_remaining,
    WORK_SECONDS,
    BREAK_SECONDS,
)
from .permit import BackgroundPermit
from .ticks import TickSource, TICK_INTERVAL_MS

__all__ = [
    "SessionController",
    "SessionConfig",
    "Phase",
    "RunState",
    "PhaseCompleted",
    "format_remaining",
    "WORK_SECONDS",
    "BREAK_SECONDS",
    "BackgroundPermit",
    "TickSource",
    "TICK_INTERVAL_MS",
]
