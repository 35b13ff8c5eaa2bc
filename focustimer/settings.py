"""Application settings.

Settings live in memory only; every launch starts from these defaults.

Usage::

    settings = Settings.from_mapping({"work_duration": 50 * 60})
    controller = SessionController(settings.session_config())
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .timer.engine import SessionConfig, WORK_SECONDS, BREAK_SECONDS


@dataclass
class Settings:
    """All user-facing preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = WORK_SECONDS       # seconds
    break_duration: int = BREAK_SECONDS
    pause_at_phase_end: bool = False

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                  # 0-100
    sound_delay_ms: int = 1000              # chime after a phase flip

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True
    notification_delay_ms: int = 5000

    # ── window ────────────────────────────────────────────────────────
    transition_delay_ms: int = 1000         # status text swap after a phase flip

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Settings:
        """Build settings from *data*, ignoring keys we don't know."""
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

    def session_config(self) -> SessionConfig:
        """Raises ``ValueError`` for non-positive durations."""
        return SessionConfig(
            work_duration=self.work_duration,
            break_duration=self.break_duration,
        )
