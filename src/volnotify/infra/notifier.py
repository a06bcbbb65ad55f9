"""Notification adapters satisfying :class:`~volnotify.core.protocols.Notifier`.

Two clients are supported:

* :class:`NotifySendNotifier` — the freedesktop ``notify-send`` bubble,
  with a progress-bar hint understood by dunst, mako and friends.
* :class:`CommandNotifier` — any OSD program that accepts
  ``<icon> <progress>`` as its last two arguments.

Failures are reported as :class:`~volnotify.exceptions.NotifierError`.
"""

from __future__ import annotations

import functools
import shlex
from collections.abc import Sequence

from volnotify.core.models import Icon
from volnotify.exceptions import NotifierError
from volnotify.infra.process import Runner, run_command

_default_runner: Runner = functools.partial(run_command, error_cls=NotifierError)


class CommandNotifier:
    """Run a user-supplied OSD command as ``<cmd...> <icon> <progress>``.

    Parameters
    ----------
    command:
        The command prefix, either as a shell-style string or an argv.
    runner:
        Callable that runs an argv and returns stdout.  Injected in tests.
    """

    def __init__(
        self,
        command: str | Sequence[str],
        runner: Runner = _default_runner,
    ) -> None:
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        if not argv:
            raise NotifierError("Notifier command must not be empty.")
        self._argv: list[str] = argv
        self._runner: Runner = runner

    @property
    def executable(self) -> str:
        return self._argv[0]

    def notify(self, icon: Icon, progress: float) -> None:
        self._runner([*self._argv, icon.value, f"{progress:.2f}"])


class NotifySendNotifier:
    """Show a replaceable ``notify-send`` bubble with a progress bar.

    The synchronous hint makes notification daemons replace the previous
    bubble instead of stacking one per key press.
    """

    APP_NAME: str = "volnotify"
    SYNC_TAG: str = "volnotify"

    _ICON_NAMES: dict[Icon, str] = {
        Icon.LOW: "audio-volume-low",
        Icon.MEDIUM: "audio-volume-medium",
        Icon.HIGH: "audio-volume-high",
        Icon.MUTED: "audio-volume-muted",
        Icon.MIC_MUTED: "microphone-sensitivity-muted",
        Icon.MIC_UNMUTED: "microphone-sensitivity-high",
    }

    _SUMMARIES: dict[Icon, str] = {
        Icon.MUTED: "Muted",
        Icon.MIC_MUTED: "Microphone muted",
        Icon.MIC_UNMUTED: "Microphone",
    }

    def __init__(
        self,
        binary: str = "notify-send",
        *,
        timeout_ms: int = 1000,
        runner: Runner = _default_runner,
    ) -> None:
        self._binary: str = binary
        self._timeout_ms: int = timeout_ms
        self._runner: Runner = runner

    @property
    def executable(self) -> str:
        return self._binary

    def build_argv(self, icon: Icon, progress: float) -> list[str]:
        """Return the ``notify-send`` argv for *icon* and *progress*."""
        percent = round(progress * 100)
        summary = self._SUMMARIES.get(icon, f"Volume {percent}%")
        return [
            self._binary,
            "--app-name", self.APP_NAME,
            "--urgency", "low",
            "--expire-time", str(self._timeout_ms),
            "--icon", self._ICON_NAMES[icon],
            "--hint", f"int:value:{percent}",
            "--hint", f"string:x-canonical-private-synchronous:{self.SYNC_TAG}",
            summary,
        ]

    def notify(self, icon: Icon, progress: float) -> None:
        self._runner(self.build_argv(icon, progress))
