"""Shared pytest fixtures for Focus Timer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from focustimer.timer.engine import SessionController, SessionConfig
from focustimer.timer.permit import BackgroundPermit


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def config():
    """Short work=3 s / break=2 s config for scenario tests."""
    return SessionConfig(work_duration=3, break_duration=2)


@pytest.fixture
def permit():
    return BackgroundPermit()


@pytest.fixture
def controller(qapp, config, permit):
    """Fresh controller, continuous across phase boundaries."""
    return SessionController(config, permit=permit)


@pytest.fixture
def controller_pausing(qapp, config, permit):
    """Fresh controller that waits for the user at each boundary."""
    return SessionController(config, permit=permit, pause_at_phase_end=True)


@pytest.fixture
def controller_default(qapp):
    """Controller with the stock 25/5 minute durations."""
    return SessionController()
