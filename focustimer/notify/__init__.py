"""Notification package."""

from .notifier import PhaseNotifier, PhaseMessage, PHASE_MESSAGES

__all__ = ["PhaseNotifier", "PhaseMessage", "PHASE_MESSAGES"]
