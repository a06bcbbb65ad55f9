"""Domain models for volnotify.

All records are **frozen** dataclasses and all closed sets are enums.
They carry zero I/O and live only for the duration of one invocation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DeviceKind(enum.Enum):
    """Which default device every command targets."""

    OUTPUT = "output"
    INPUT = "input"


class Action(enum.Enum):
    """What a single invocation does to the target device."""

    INCREASE = "increase"
    DECREASE = "decrease"
    SET = "set"
    MUTE = "mute"
    UNMUTE = "unmute"
    TOGGLE_MUTE = "toggle-mute"

    @property
    def affects_volume(self) -> bool:
        """``True`` for the actions that carry a magnitude."""
        return self in _VOLUME_ACTIONS


_VOLUME_ACTIONS: frozenset[Action] = frozenset(
    {Action.INCREASE, Action.DECREASE, Action.SET},
)


class MuteChange(enum.Enum):
    """Requested change to a device's mute flag."""

    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"


class Icon(enum.Enum):
    """Icon selector handed to the notification client."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MUTED = "muted"
    MIC_MUTED = "mic_muted"
    MIC_UNMUTED = "mic_unmuted"


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Options:
    """Flags set once at startup."""

    allow_boost: bool = False
    """Permit volume above 100%."""

    device: DeviceKind = DeviceKind.OUTPUT
    """Target the default sink (output) or source (input)."""

    unmute_on_change: bool = False
    """Unmute unconditionally before any volume change."""


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed action with its magnitude.

    ``magnitude`` is a non-negative percent for volume actions and
    ``None`` for the mute actions.
    """

    action: Action
    magnitude: int | None = None


@dataclass(frozen=True, slots=True)
class DeviceState:
    """Mute flag and volume read back after a mutation."""

    muted: bool
    volume: int


@dataclass(frozen=True, slots=True)
class Notification:
    """What gets shown on screen."""

    icon: Icon
    progress: float

    @property
    def progress_text(self) -> str:
        """Progress rendered with two-decimal precision."""
        return f"{self.progress:.2f}"
