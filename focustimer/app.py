"""Application composition for the focus timer.

Wires one ``SessionController`` to its collaborators:

    TickSource      ── tick() once a second while RUNNING
    BackgroundPermit ── held while RUNNING
    PhaseNotifier   ── sound + tray notification per PhaseCompleted
    TimerWindow     ── renders progress / MM:SS / phase text
"""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QApplication, QStyle, QSystemTrayIcon

from .audio.sounds import SoundManager
from .notify.notifier import PhaseNotifier, SoundPlayer
from .settings import Settings
from .timer.engine import SessionController
from .timer.permit import BackgroundPermit
from .timer.ticks import TickSource, TICK_INTERVAL_MS
from .ui.timer_window import TimerWindow

logger = logging.getLogger(__name__)

START_SOUND = "start"


class FocusTimerApp(QObject):
    """Owns the controller and everything hanging off it."""

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QObject | None = None,
        *,
        sound: SoundPlayer | None = None,
        sounds_dir: Path | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()

        self._permit = BackgroundPermit()
        self._controller = SessionController(
            self._settings.session_config(),
            self,
            permit=self._permit,
            pause_at_phase_end=self._settings.pause_at_phase_end,
        )

        self._ticks = TickSource(self, interval_ms=tick_interval_ms)
        self._ticks.attach(self._controller)

        self._sound = sound if sound is not None else self._make_sound_manager(sounds_dir)
        self._tray = self._make_tray_icon()

        self._notifier = PhaseNotifier(
            self,
            sound=self._sound,
            tray=self._tray,
            sound_delay_ms=self._settings.sound_delay_ms,
            notification_delay_ms=self._settings.notification_delay_ms,
            sound_enabled=self._settings.sound_enabled,
            notifications_enabled=self._settings.notifications_enabled,
        )
        self._controller.phase_completed.connect(self._notifier.on_phase_completed)
        self._controller.started.connect(self._on_started)

        self._window = TimerWindow(
            self._controller,
            transition_delay_ms=self._settings.transition_delay_ms,
        )
        logger.info(
            "Focus timer ready (work %ss, break %ss)",
            self._controller.config.work_duration,
            self._controller.config.break_duration,
        )

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def ticks(self) -> TickSource:
        return self._ticks

    @property
    def permit(self) -> BackgroundPermit:
        return self._permit

    @property
    def notifier(self) -> PhaseNotifier:
        return self._notifier

    @property
    def window(self) -> TimerWindow:
        return self._window

    def show(self) -> None:
        self._window.show()
        if self._tray is not None:
            self._tray.show()

    # ── internal ──────────────────────────────────────────────────────────

    def _on_started(self) -> None:
        if not self._settings.sound_enabled or self._sound is None:
            return
        try:
            self._sound.play(START_SOUND)
        except Exception:
            logger.exception("Could not play %r", START_SOUND)

    def _make_sound_manager(self, sounds_dir: Path | None) -> SoundManager:
        return SoundManager(
            self,
            sounds_dir=sounds_dir,
            volume=self._settings.sound_volume,
            enabled=self._settings.sound_enabled,
        )

    def _make_tray_icon(self) -> QSystemTrayIcon | None:
        if not self._settings.notifications_enabled:
            return None
        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.info("No system tray; notifications disabled")
            return None
        tray = QSystemTrayIcon(self)
        style = QApplication.style()
        if style is not None:
            tray.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_MediaPlay))
        tray.setToolTip("Focus Timer")
        return tray
