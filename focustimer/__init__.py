"""Focus Timer — a Pomodoro-style work/break timer built on PyQt6."""

__version__ = "0.1.0"
