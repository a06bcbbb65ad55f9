"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocess or filesystem I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from volnotify.core.display import build_notification, progress_fraction, select_icon
from volnotify.core.models import (
    Action,
    Command,
    DeviceKind,
    DeviceState,
    Icon,
    MuteChange,
    Notification,
    Options,
)
from volnotify.core.parsing import parse_command
from volnotify.core.protocols import AudioBackend, Notifier
from volnotify.core.volume_service import VolumeService

__all__: list[str] = [
    "Action",
    "AudioBackend",
    "Command",
    "DeviceKind",
    "DeviceState",
    "Icon",
    "MuteChange",
    "Notification",
    "Notifier",
    "Options",
    "VolumeService",
    "build_notification",
    "parse_command",
    "progress_fraction",
    "select_icon",
]
