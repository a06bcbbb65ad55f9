"""Display-value computation: icon selector and progress fraction.

Pure and deterministic.
"""

from __future__ import annotations

from volnotify.core.models import DeviceKind, DeviceState, Icon, Notification

LOW_CEILING: int = 33
MEDIUM_CEILING: int = 66
NOMINAL_MAX: int = 100


def select_icon(kind: DeviceKind, state: DeviceState) -> Icon:
    """Pick the icon for *state* on a device of *kind*.

    Output devices get a volume-bucketed speaker icon (``low`` up to
    33%, ``medium`` up to 66%, ``high`` above); input devices only
    distinguish muted from live.
    """
    if kind is DeviceKind.INPUT:
        return Icon.MIC_MUTED if state.muted else Icon.MIC_UNMUTED
    if state.muted:
        return Icon.MUTED
    if state.volume <= LOW_CEILING:
        return Icon.LOW
    if state.volume <= MEDIUM_CEILING:
        return Icon.MEDIUM
    return Icon.HIGH


def progress_fraction(volume: int) -> float:
    """Map *volume* percent to ``[0.0, 1.0]``; boosted volume pins at 1."""
    if volume > NOMINAL_MAX:
        return 1.0
    return round(volume / 100.0, 2)


def build_notification(kind: DeviceKind, state: DeviceState) -> Notification:
    """Combine :func:`select_icon` and :func:`progress_fraction`."""
    return Notification(
        icon=select_icon(kind, state),
        progress=progress_fraction(state.volume),
    )
