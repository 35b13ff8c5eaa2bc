"""One-second tick source backed by ``QTimer``."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer

from .engine import RunState, SessionController

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickSource(QObject):
    """Delivers ``tick()`` to a controller while it is RUNNING.

    Delivery follows ``run_state_changed``: RUNNING starts the timer,
    PAUSED and IDLE stop it.  A phase flip does not change the run
    state, so delivery carries straight on into the next phase.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._controller: SessionController | None = None
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def attach(self, controller: SessionController) -> None:
        """Drive *controller*.  Replaces any previously attached one."""
        if self._controller is not None:
            self.detach()
        self._controller = controller
        self._qt_timer.timeout.connect(controller.tick)
        controller.run_state_changed.connect(self._on_run_state_changed)
        self._on_run_state_changed(controller.run_state)

    def detach(self) -> None:
        if self._controller is None:
            return
        self._qt_timer.stop()
        self._qt_timer.timeout.disconnect(self._controller.tick)
        self._controller.run_state_changed.disconnect(self._on_run_state_changed)
        self._controller = None

    def _on_run_state_changed(self, state: RunState) -> None:
        if state == RunState.RUNNING:
            if not self._qt_timer.isActive():
                logger.debug("Tick delivery started")
                self._qt_timer.start()
        elif self._qt_timer.isActive():
            logger.debug("Tick delivery stopped (%s)", state.value)
            self._qt_timer.stop()
