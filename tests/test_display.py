"""Tests for icon and progress computation (core/display.py).

Pure function calls only.
"""

from __future__ import annotations

import pytest

from volnotify.core.display import build_notification, progress_fraction, select_icon
from volnotify.core.models import DeviceKind, DeviceState, Icon, Notification


class TestSelectIconOutput:
    @pytest.mark.parametrize(
        ("volume", "icon"),
        [
            (0, Icon.LOW),
            (33, Icon.LOW),
            (34, Icon.MEDIUM),
            (66, Icon.MEDIUM),
            (67, Icon.HIGH),
            (100, Icon.HIGH),
            (150, Icon.HIGH),
        ],
    )
    def test_volume_buckets(self, volume: int, icon: Icon) -> None:
        state = DeviceState(muted=False, volume=volume)
        assert select_icon(DeviceKind.OUTPUT, state) is icon

    @pytest.mark.parametrize("volume", [0, 50, 150])
    def test_muted_wins_over_volume(self, volume: int) -> None:
        state = DeviceState(muted=True, volume=volume)
        assert select_icon(DeviceKind.OUTPUT, state) is Icon.MUTED


class TestSelectIconInput:
    @pytest.mark.parametrize("volume", [0, 20, 50, 100, 150])
    def test_muted(self, volume: int) -> None:
        state = DeviceState(muted=True, volume=volume)
        assert select_icon(DeviceKind.INPUT, state) is Icon.MIC_MUTED

    @pytest.mark.parametrize("volume", [0, 20, 50, 100, 150])
    def test_unmuted(self, volume: int) -> None:
        state = DeviceState(muted=False, volume=volume)
        assert select_icon(DeviceKind.INPUT, state) is Icon.MIC_UNMUTED


class TestProgressFraction:
    @pytest.mark.parametrize(
        ("volume", "expected"),
        [(0, 0.0), (7, 0.07), (50, 0.5), (100, 1.0), (101, 1.0), (150, 1.0)],
    )
    def test_values(self, volume: int, expected: float) -> None:
        assert progress_fraction(volume) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("volume", "text"),
        [(0, "0.00"), (50, "0.50"), (100, "1.00"), (150, "1.00")],
    )
    def test_two_decimal_rendering(self, volume: int, text: str) -> None:
        notification = Notification(icon=Icon.LOW, progress=progress_fraction(volume))
        assert notification.progress_text == text


class TestBuildNotification:
    def test_combines_icon_and_progress(self) -> None:
        result = build_notification(DeviceKind.OUTPUT, DeviceState(muted=False, volume=50))
        assert result == Notification(icon=Icon.MEDIUM, progress=0.5)

    def test_frozen(self) -> None:
        result = build_notification(DeviceKind.INPUT, DeviceState(muted=True, volume=10))
        with pytest.raises(AttributeError):
            result.progress = 0.9  # type: ignore[misc]
