"""Background-execution permit.

A single token that keeps the countdown alive while the host would
otherwise throttle or suspend timers (App Nap, screen lock, ...).  The
controller acquires it on start/resume and releases it on pause/stop.
Platform layers plug in through ``on_acquire`` / ``on_release``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class BackgroundPermit:
    """At most one permit is held at a time."""

    def __init__(
        self,
        on_acquire: Optional[Callable[[], None]] = None,
        on_release: Optional[Callable[[], None]] = None,
    ) -> None:
        self._on_acquire = on_acquire
        self._on_release = on_release
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        """Take the permit.  No-op when already held."""
        if self._held:
            return
        self._held = True
        logger.debug("Background permit acquired")
        self._run_hook(self._on_acquire, "acquire")

    def release(self) -> None:
        """Give the permit back.  No-op when not held."""
        if not self._held:
            return
        self._held = False
        logger.debug("Background permit released")
        self._run_hook(self._on_release, "release")

    @staticmethod
    def _run_hook(hook: Optional[Callable[[], None]], action: str) -> None:
        if hook is None:
            return
        try:
            hook()
        except Exception:
            # The timer keeps working without platform help.
            logger.exception("Background permit %s hook failed", action)
