"""Tests for environment-driven settings (config.py)."""

from __future__ import annotations

import pytest

from volnotify.config import Settings, load_settings
from volnotify.exceptions import InvalidArgumentsError


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.pactl_binary == "pactl"
        assert settings.notify_send_binary == "notify-send"
        assert settings.notifier_command is None
        assert settings.default_step == 5
        assert settings.notification_timeout_ms == 1000

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLNOTIFY_PACTL_BINARY", "/opt/pactl")
        monkeypatch.setenv("VOLNOTIFY_NOTIFIER_COMMAND", "volume-osd")
        monkeypatch.setenv("VOLNOTIFY_DEFAULT_STEP", "2")

        settings = load_settings()
        assert isinstance(settings, Settings)
        assert settings.pactl_binary == "/opt/pactl"
        assert settings.notifier_command == "volume-osd"
        assert settings.default_step == 2

    @pytest.mark.parametrize("value", ["-1", "five"])
    def test_invalid_step(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("VOLNOTIFY_DEFAULT_STEP", value)
        with pytest.raises(InvalidArgumentsError, match="VOLNOTIFY_DEFAULT_STEP"):
            load_settings()
