"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``pactl``, the notification
client and the operating system.  Every raw ``subprocess`` / ``OSError``
failure must be caught here and re-raised as a
:class:`~volnotify.exceptions.VolnotifyError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from volnotify.infra.binary_detector import BinaryStatus, detect_binary, require_binary
from volnotify.infra.notifier import CommandNotifier, NotifySendNotifier
from volnotify.infra.pactl_backend import PactlBackend
from volnotify.infra.process import run_command

__all__: list[str] = [
    "BinaryStatus",
    "CommandNotifier",
    "NotifySendNotifier",
    "PactlBackend",
    "detect_binary",
    "require_binary",
    "run_command",
]
