"""Tests for the timer window (presentation layer).

Covers:
- MM:SS label and progress bar track the controller
- Button visibility per run state
- Stop confirmation gate
- Phase text swap after a boundary
"""

from __future__ import annotations

import pytest

from focustimer.timer.engine import Phase, RunState
from focustimer.ui.timer_window import (
    TimerWindow, PHASE_LABELS, PROGRESS_FLOOR, PROGRESS_STEPS,
)

from helpers import run_ticks


class Confirmer:
    """Stands in for the QMessageBox prompt."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.asked = 0

    def __call__(self, parent) -> bool:
        self.asked += 1
        return self.answer


@pytest.fixture
def window(controller):
    return TimerWindow(controller, transition_delay_ms=0, confirm=Confirmer(True))


@pytest.mark.usefixtures("qapp")
class TestDisplay:

    def test_initial_display(self, window):
        assert window._time_label.text() == "00:03"
        assert window._status_label.text() == "Let's focus!"
        assert window._progress_bar.value() == round(PROGRESS_FLOOR * PROGRESS_STEPS)

    def test_tick_updates_label_and_bar(self, window, controller):
        controller.start()
        controller.tick()
        assert window._time_label.text() == "00:02"
        assert window._progress_bar.value() == round(PROGRESS_STEPS / 3)

    def test_phase_flip_updates_status(self, window, controller):
        controller.start()
        run_ticks(controller, 3)
        assert window._status_label.text() == PHASE_LABELS[Phase.BREAK] == "Let's rest!"
        assert window._time_label.text() == "00:02"
        run_ticks(controller, 2)
        assert window._status_label.text() == "Let's focus!"

    def test_delayed_status_swap(self, controller):
        w = TimerWindow(controller, transition_delay_ms=10_000, confirm=Confirmer(True))
        controller.start()
        run_ticks(controller, 3)
        assert controller.phase == Phase.BREAK
        assert w._status_label.text() == "Let's focus!"

    def test_stop_resets_display(self, window, controller):
        controller.start()
        run_ticks(controller, 4)
        window.request_stop()
        assert window._time_label.text() == "00:03"
        assert window._status_label.text() == "Let's focus!"
        assert window._progress_bar.value() == round(PROGRESS_FLOOR * PROGRESS_STEPS)


@pytest.mark.usefixtures("qapp")
class TestButtons:

    def test_idle_shows_start_only(self, window):
        assert not window._start_btn.isHidden()
        assert window._pause_btn.isHidden()
        assert window._stop_btn.isHidden()

    def test_running_shows_pause_and_stop(self, window, controller):
        window._start_btn.click()
        assert controller.run_state == RunState.RUNNING
        assert window._start_btn.isHidden()
        assert not window._pause_btn.isHidden()
        assert not window._stop_btn.isHidden()
        assert window._pause_btn.text() == "Pause"

    def test_pause_button_toggles(self, window, controller):
        window._start_btn.click()
        window._pause_btn.click()
        assert controller.run_state == RunState.PAUSED
        assert window._pause_btn.text() == "Resume"
        window._pause_btn.click()
        assert controller.run_state == RunState.RUNNING
        assert window._pause_btn.text() == "Pause"


@pytest.mark.usefixtures("qapp")
class TestStopConfirmation:

    def test_confirmed_stop_resets(self, controller):
        confirm = Confirmer(True)
        w = TimerWindow(controller, transition_delay_ms=0, confirm=confirm)
        controller.start()
        controller.tick()
        w._stop_btn.click()
        assert confirm.asked == 1
        assert controller.run_state == RunState.IDLE

    def test_cancelled_stop_keeps_running(self, controller):
        confirm = Confirmer(False)
        w = TimerWindow(controller, transition_delay_ms=0, confirm=confirm)
        controller.start()
        controller.tick()
        w._stop_btn.click()
        assert confirm.asked == 1
        assert controller.run_state == RunState.RUNNING
        assert controller.remaining == 2


@pytest.mark.usefixtures("qapp")
class TestBoundaryPause:

    @pytest.fixture
    def pausing_window(self, controller_pausing):
        return TimerWindow(
            controller_pausing, transition_delay_ms=0, confirm=Confirmer(True),
        )

    def test_boundary_offers_start(self, pausing_window, controller_pausing):
        w = pausing_window
        controller_pausing.start()
        run_ticks(controller_pausing, 3)
        assert controller_pausing.run_state == RunState.PAUSED
        assert not w._start_btn.isHidden()
        assert w._pause_btn.isHidden()
        assert w._stop_btn.isHidden()
        assert w._status_label.text() == "Let's rest!"
        assert w._time_label.text() == "00:02"

    def test_start_runs_next_phase(self, pausing_window, controller_pausing):
        w = pausing_window
        controller_pausing.start()
        run_ticks(controller_pausing, 3)
        w._start_btn.click()
        assert controller_pausing.run_state == RunState.RUNNING
        assert controller_pausing.phase == Phase.BREAK
        assert controller_pausing.remaining == 2
        assert w._start_btn.isHidden()
        assert not w._pause_btn.isHidden()
        assert w._pause_btn.text() == "Pause"

    def test_user_pause_still_shows_resume(self, pausing_window, controller_pausing):
        w = pausing_window
        w._start_btn.click()
        w._pause_btn.click()
        assert w._start_btn.isHidden()
        assert not w._pause_btn.isHidden()
        assert w._pause_btn.text() == "Resume"
