"""Sound and system notification at phase boundaries.

The controller flips phase instantly; this collaborator decides what to
tell the user and when.  Delivery failures are logged here and never
reach the controller (an exception escaping a PyQt6 slot aborts the
process).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer

from ..timer.engine import Phase, PhaseCompleted

logger = logging.getLogger(__name__)

DONE_SOUND = "done"
SOUND_DELAY_MS = 1000
NOTIFICATION_DELAY_MS = 5000


class SoundPlayer(Protocol):
    def play(self, name: str) -> None: ...


class MessageSink(Protocol):
    """Anything with ``QSystemTrayIcon.showMessage``'s shape."""

    def showMessage(self, title: str, msg: str) -> None: ...


@dataclass(frozen=True)
class PhaseMessage:
    title: str
    body: str


PHASE_MESSAGES: dict[Phase, PhaseMessage] = {
    Phase.WORK: PhaseMessage("Focus time is done!", "Time to have a rest"),
    Phase.BREAK: PhaseMessage("Rest time is done!", "Let's get back to focus"),
}


def _after(delay_ms: int, fn: Callable[[], None]) -> None:
    if delay_ms == 0:
        fn()
    else:
        QTimer.singleShot(delay_ms, fn)


class PhaseNotifier(QObject):
    """Plays the done sound and posts a notification per ``PhaseCompleted``.

    The chime follows the boundary after ``sound_delay_ms``; the tray
    message lags further behind, after ``notification_delay_ms``.

    Usage::

        notifier = PhaseNotifier(sound=sound_manager, tray=tray_icon)
        controller.phase_completed.connect(notifier.on_phase_completed)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sound: SoundPlayer | None = None,
        tray: MessageSink | None = None,
        sound_delay_ms: int = SOUND_DELAY_MS,
        notification_delay_ms: int = NOTIFICATION_DELAY_MS,
        sound_enabled: bool = True,
        notifications_enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._sound = sound if sound_enabled else None
        self._tray = tray if notifications_enabled else None
        self._sound_delay_ms = max(0, sound_delay_ms)
        self._notification_delay_ms = max(0, notification_delay_ms)

    @property
    def sound_delay_ms(self) -> int:
        return self._sound_delay_ms

    @property
    def notification_delay_ms(self) -> int:
        return self._notification_delay_ms

    def on_phase_completed(self, event: PhaseCompleted) -> None:
        """Slot for ``SessionController.phase_completed``."""
        message = PHASE_MESSAGES[event.completed_phase]
        logger.info("%s phase done; scheduling %r", event.completed_phase.value, message.title)
        _after(self._sound_delay_ms, self.play_sound)
        _after(self._notification_delay_ms, lambda m=message: self.post(m))

    def deliver(self, event: PhaseCompleted) -> PhaseMessage:
        """Play the sound and post the notification right now."""
        message = PHASE_MESSAGES[event.completed_phase]
        self.play_sound()
        self.post(message)
        return message

    def play_sound(self) -> None:
        if self._sound is None:
            return
        try:
            self._sound.play(DONE_SOUND)
        except Exception:
            logger.exception("Could not play %r", DONE_SOUND)

    def post(self, message: PhaseMessage) -> None:
        if self._tray is None:
            return
        try:
            self._tray.showMessage(message.title, message.body)
        except Exception:
            logger.exception("Could not post notification %r", message.title)
