"""``pactl`` backed implementation of :class:`~volnotify.core.protocols.AudioBackend`.

This module is the **only** place in the codebase that knows the
``pactl`` command line and its text output.  Typed values from the core
(:class:`DeviceKind`, :class:`MuteChange`, signed percents) are
serialized here, and everything read back is parsed here.
"""

from __future__ import annotations

import re

from volnotify.core.models import DeviceKind, MuteChange
from volnotify.exceptions import BackendError, UnknownStreamTypeError
from volnotify.infra.process import Runner, run_command


class PactlBackend:
    """Concrete :class:`AudioBackend` driving the ``pactl`` CLI.

    Usage::

        backend = PactlBackend()
        backend.set_volume(DeviceKind.OUTPUT, 5, relative=True)
        backend.get_volume(DeviceKind.OUTPUT)

    This class satisfies the :class:`~volnotify.core.protocols.AudioBackend`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    binary:
        Name or path of the ``pactl`` executable.
    runner:
        Callable that runs an argv and returns stdout.  Injected in tests.
    """

    # kind -> (pactl object noun, default-device placeholder)
    _TARGETS: dict[DeviceKind, tuple[str, str]] = {
        DeviceKind.OUTPUT: ("sink", "@DEFAULT_SINK@"),
        DeviceKind.INPUT: ("source", "@DEFAULT_SOURCE@"),
    }

    _MUTE_VALUES: dict[MuteChange, str] = {
        MuteChange.ON: "true",
        MuteChange.OFF: "false",
        MuteChange.TOGGLE: "toggle",
    }

    _VOLUME_RE = re.compile(r"(\d+)%")
    _MUTE_RE = re.compile(r"Mute:\s*(yes|no)\b", re.IGNORECASE)

    # Preference order when picking the active device.
    _STATES: tuple[str, ...] = ("RUNNING", "IDLE")

    def __init__(self, binary: str = "pactl", runner: Runner = run_command) -> None:
        self._binary: str = binary
        self._runner: Runner = runner

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def running_device(self, kind: DeviceKind) -> str | None:
        """Return the first RUNNING device name, else the first IDLE one.

        Monitor sources (``*.monitor``) are skipped for input devices.
        """
        noun, _ = self._resolve(kind)
        output = self._pactl("list", "short", f"{noun}s")

        by_state: dict[str, str] = {}
        for line in output.splitlines():
            fields = line.split("\t")
            if len(fields) < 5:
                continue
            name, state = fields[1], fields[4].strip().upper()
            if name.endswith(".monitor"):
                continue
            by_state.setdefault(state, name)

        for state in self._STATES:
            if state in by_state:
                return by_state[state]
        return None

    def set_volume(self, kind: DeviceKind, percent: int, *, relative: bool) -> None:
        noun, device = self._resolve(kind)
        value = f"{percent:+d}%" if relative else f"{percent}%"
        self._pactl(f"set-{noun}-volume", device, value)

    def set_mute(self, kind: DeviceKind, change: MuteChange) -> None:
        noun, device = self._resolve(kind)
        self._pactl(f"set-{noun}-mute", device, self._MUTE_VALUES[change])

    def get_volume(self, kind: DeviceKind) -> int:
        """Return the first channel's volume percent.

        Raises
        ------
        BackendError
            When no ``N%`` figure can be found in the output.
        """
        noun, device = self._resolve(kind)
        output = self._pactl(f"get-{noun}-volume", device)
        match = self._VOLUME_RE.search(output)
        if match is None:
            raise BackendError(
                f"Could not read {noun} volume from pactl output: {output.strip()!r}",
            )
        return int(match.group(1))

    def get_mute(self, kind: DeviceKind) -> bool:
        """Search the ``Mute:`` attribute in the pactl output.

        Raises
        ------
        BackendError
            When the attribute is missing or not ``yes``/``no``.
        """
        noun, device = self._resolve(kind)
        output = self._pactl(f"get-{noun}-mute", device)
        match = self._MUTE_RE.search(output)
        if match is None:
            raise BackendError(
                f"Could not read {noun} mute state from pactl output: {output.strip()!r}",
            )
        return match.group(1).lower() == "yes"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @classmethod
    def _resolve(cls, kind: DeviceKind) -> tuple[str, str]:
        """Map *kind* to its pactl noun and default-device placeholder."""
        try:
            return cls._TARGETS[kind]
        except KeyError:
            raise UnknownStreamTypeError(f"Unknown stream type: {kind!r}") from None

    def _pactl(self, *args: str) -> str:
        return self._runner([self._binary, *args])
