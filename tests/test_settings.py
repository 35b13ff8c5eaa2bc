"""Tests for the Settings dataclass and its SessionConfig bridge."""

import pytest

from focustimer.settings import Settings
from focustimer.timer.engine import SessionConfig


class TestSettingsDefaults:

    def test_durations(self):
        s = Settings()
        assert s.work_duration == 25 * 60
        assert s.break_duration == 5 * 60

    def test_continuous_by_default(self):
        assert Settings().pause_at_phase_end is False

    def test_audio(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_notifications(self):
        s = Settings()
        assert s.notifications_enabled is True
        assert s.notification_delay_ms == 5000
        assert s.sound_delay_ms == 1000

    def test_window_and_logging(self):
        s = Settings()
        assert s.transition_delay_ms == 1000
        assert s.log_level == "INFO"


class TestFromMapping:

    def test_known_keys_applied(self):
        s = Settings.from_mapping({"work_duration": 50 * 60, "sound_enabled": False})
        assert s.work_duration == 3000
        assert s.sound_enabled is False
        assert s.break_duration == 5 * 60

    def test_unknown_keys_ignored(self):
        s = Settings.from_mapping({"theme": "neon", "break_duration": 600})
        assert s.break_duration == 600
        assert not hasattr(s, "theme")


class TestSessionConfig:

    def test_builds_config(self):
        cfg = Settings(work_duration=90, break_duration=30).session_config()
        assert cfg == SessionConfig(work_duration=90, break_duration=30)

    def test_invalid_duration_raises(self):
        with pytest.raises(ValueError, match="break_duration"):
            Settings(break_duration=0).session_config()
