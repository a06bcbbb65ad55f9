"""Shared pytest fixtures and configuration for the volnotify test suite.

Guidelines
----------
* No real ``pactl`` or notifier is ever executed.
* Subprocess access is mocked at the infra boundary (an injected runner).
* Core tests run against the in-memory :class:`FakeBackend`.
* Tests must not depend on OS audio state or environment variables.
"""

from __future__ import annotations

import os

import pytest

from volnotify.core.models import DeviceKind, Icon, MuteChange


class FakeBackend:
    """In-memory :class:`AudioBackend` that records every call in order."""

    def __init__(self, *, volume: int = 50, muted: bool = False) -> None:
        self.volume: dict[DeviceKind, int] = {kind: volume for kind in DeviceKind}
        self.muted: dict[DeviceKind, bool] = {kind: muted for kind in DeviceKind}
        self.calls: list[tuple[object, ...]] = []

    def running_device(self, kind: DeviceKind) -> str | None:
        self.calls.append(("running_device", kind))
        return "fake.device"

    def set_volume(self, kind: DeviceKind, percent: int, *, relative: bool) -> None:
        self.calls.append(("set_volume", kind, percent, relative))
        if relative:
            self.volume[kind] = max(0, self.volume[kind] + percent)
        else:
            self.volume[kind] = percent

    def set_mute(self, kind: DeviceKind, change: MuteChange) -> None:
        self.calls.append(("set_mute", kind, change))
        if change is MuteChange.TOGGLE:
            self.muted[kind] = not self.muted[kind]
        else:
            self.muted[kind] = change is MuteChange.ON

    def get_volume(self, kind: DeviceKind) -> int:
        self.calls.append(("get_volume", kind))
        return self.volume[kind]

    def get_mute(self, kind: DeviceKind) -> bool:
        self.calls.append(("get_mute", kind))
        return self.muted[kind]


class RecordingNotifier:
    """:class:`Notifier` double that keeps every ``(icon, progress)`` pair."""

    def __init__(self) -> None:
        self.sent: list[tuple[Icon, float]] = []

    def notify(self, icon: Icon, progress: float) -> None:
        self.sent.append((icon, progress))


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip any ``VOLNOTIFY_*`` variables from the developer's shell."""
    for key in list(os.environ):
        if key.upper().startswith("VOLNOTIFY_"):
            monkeypatch.delenv(key, raising=False)
