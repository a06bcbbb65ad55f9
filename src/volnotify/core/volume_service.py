"""Core volume service — drives one adjust-and-notify invocation.

This service delegates device access to an
:class:`~volnotify.core.protocols.AudioBackend` and user feedback to a
:class:`~volnotify.core.protocols.Notifier`, both injected at
construction time.  It is responsible for:

* The ordering of backend calls (optional unmute, mutation, re-query,
  optional clamp).
* Turning the resulting state into a :class:`Notification`.
* Ensuring only :class:`~volnotify.exceptions.VolnotifyError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no subprocess, no ``print()``.
* Single linear sequence; any failure aborts the rest with no rollback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from volnotify.core.display import NOMINAL_MAX, build_notification
from volnotify.core.models import (
    Action,
    Command,
    DeviceKind,
    DeviceState,
    MuteChange,
    Notification,
    Options,
)
from volnotify.core.protocols import AudioBackend, Notifier
from volnotify.exceptions import BackendError, NotifierError, VolnotifyError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_MUTE_CHANGES: dict[Action, MuteChange] = {
    Action.MUTE: MuteChange.ON,
    Action.UNMUTE: MuteChange.OFF,
    Action.TOGGLE_MUTE: MuteChange.TOGGLE,
}


class VolumeService:
    """Stateless service that applies a :class:`Command` and notifies.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`AudioBackend` protocol.
    notifier:
        Any object satisfying the :class:`Notifier` protocol.
    """

    def __init__(self, backend: AudioBackend, notifier: Notifier) -> None:
        self._backend: AudioBackend = backend
        self._notifier: Notifier = notifier

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, command: Command, options: Options) -> Notification:
        """Apply *command* to the device selected by *options*.

        Returns
        -------
        Notification
            The icon and progress that were sent to the notifier.

        Raises
        ------
        BackendError
            When a backend call fails or reports unparsable state.
        UnknownStreamTypeError
            When the device kind cannot be resolved.
        NotifierError
            When the notification client fails.
        """
        kind = options.device
        logger.debug("Executing %s with %s", command, options)

        if command.action.affects_volume and options.unmute_on_change:
            self._call(self._backend.set_mute, kind, MuteChange.OFF)

        self._mutate(command, kind)
        state = self.read_state(kind)

        if (
            not options.allow_boost
            and command.action.affects_volume
            and state.volume > NOMINAL_MAX
        ):
            logger.debug("Clamping %d%% down to %d%%", state.volume, NOMINAL_MAX)
            self._call(self._backend.set_volume, kind, NOMINAL_MAX, relative=False)
            state = DeviceState(muted=state.muted, volume=NOMINAL_MAX)

        notification = build_notification(kind, state)
        logger.debug(
            "Notifying icon=%s progress=%s",
            notification.icon.value,
            notification.progress_text,
        )
        try:
            self._notifier.notify(notification.icon, notification.progress)
        except VolnotifyError:
            raise
        except Exception as exc:
            raise NotifierError(f"Unexpected notifier error: {exc}") from exc
        return notification

    def read_state(self, kind: DeviceKind) -> DeviceState:
        """Query mute flag then volume for the default device of *kind*."""
        muted = self._call(self._backend.get_mute, kind)
        volume = self._call(self._backend.get_volume, kind)
        if isinstance(volume, bool) or not isinstance(volume, int) or volume < 0:
            raise BackendError(f"Backend reported an invalid volume: {volume!r}")
        return DeviceState(muted=bool(muted), volume=volume)

    # ------------------------------------------------------------------
    # Backend delegation (safe boundary)
    # ------------------------------------------------------------------

    def _mutate(self, command: Command, kind: DeviceKind) -> None:
        """Issue the primary backend mutation for *command*."""
        action = command.action
        if action in _MUTE_CHANGES:
            self._call(self._backend.set_mute, kind, _MUTE_CHANGES[action])
            return

        magnitude = command.magnitude if command.magnitude is not None else 0
        if action is Action.INCREASE:
            self._call(self._backend.set_volume, kind, magnitude, relative=True)
        elif action is Action.DECREASE:
            self._call(self._backend.set_volume, kind, -magnitude, relative=True)
        else:
            self._call(self._backend.set_volume, kind, magnitude, relative=False)

    @staticmethod
    def _call(func: Callable[..., _T], *args: object, **kwargs: object) -> _T:
        """Call the backend and ensure only our exceptions escape."""
        try:
            return func(*args, **kwargs)
        except VolnotifyError:
            # Already one of ours.
            raise
        except Exception as exc:
            raise BackendError(f"Unexpected backend error: {exc}") from exc
