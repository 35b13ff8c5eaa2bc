"""Shared test helpers for Focus Timer."""

from focustimer.timer.engine import SessionController


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(controller: SessionController, count: int) -> None:
    """Deliver *count* ticks synchronously."""
    for _ in range(count):
        controller.tick()


class FakeSound:
    """Records ``play()`` calls; optionally raises."""

    def __init__(self, error: Exception | None = None):
        self.played: list[str] = []
        self._error = error

    def play(self, name: str) -> None:
        self.played.append(name)
        if self._error is not None:
            raise self._error


class FakeTray:
    """Records ``showMessage()`` calls; optionally raises."""

    def __init__(self, error: Exception | None = None):
        self.messages: list[tuple[str, str]] = []
        self._error = error

    def showMessage(self, title: str, msg: str) -> None:
        self.messages.append((title, msg))
        if self._error is not None:
            raise self._error
