"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from volnotify.core.models import DeviceKind, Icon, MuteChange


class AudioBackend(Protocol):
    """Contract for audio-server control backends.

    Every method targets the *default* device of the given kind.
    Implementations own all string (de)serialization and must map
    backend-specific failures to
    :class:`~volnotify.exceptions.VolnotifyError` subclasses.
    """

    def running_device(self, kind: DeviceKind) -> str | None:
        """Return the name of the currently running device, if any."""
        ...  # pragma: no cover

    def set_volume(self, kind: DeviceKind, percent: int, *, relative: bool) -> None:
        """Change the volume.

        Parameters
        ----------
        kind:
            Output (sink) or input (source).
        percent:
            Signed delta when *relative* is true, absolute level otherwise.
        relative:
            Whether *percent* is a delta.

        Raises
        ------
        BackendCommandError
            When the backend command fails.
        UnknownStreamTypeError
            When *kind* cannot be resolved to a backend object.
        """
        ...  # pragma: no cover

    def set_mute(self, kind: DeviceKind, change: MuteChange) -> None:
        """Set, clear or flip the mute flag."""
        ...  # pragma: no cover

    def get_volume(self, kind: DeviceKind) -> int:
        """Return the current volume in percent.

        Raises
        ------
        BackendError
            When the backend reports something that is not a
            non-negative integer percent.
        """
        ...  # pragma: no cover

    def get_mute(self, kind: DeviceKind) -> bool:
        """Return ``True`` when the device is muted."""
        ...  # pragma: no cover


class Notifier(Protocol):
    """Contract for the on-screen notification client."""

    def notify(self, icon: Icon, progress: float) -> None:
        """Show *icon* with a progress bar at *progress* (``0.0``–``1.0``).

        Raises
        ------
        NotifierError
            When the notification client fails.
        """
        ...  # pragma: no cover
