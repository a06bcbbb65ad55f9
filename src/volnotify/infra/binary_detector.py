"""Infrastructure: external-binary detection and platform guidance.

This module locates ``pactl`` / ``notify-send`` on the system PATH and
provides distribution-specific installation guidance when one is
missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from volnotify.exceptions import BinaryNotFoundError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        The executable that was looked up.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the binary.  Empty
        when it is already present.
    """

    name: str
    path: Path | None
    install_commands: tuple[str, ...]

    @property
    def found(self) -> bool:
        return self.path is not None


_PACKAGES: dict[str, tuple[str, ...]] = {
    "pactl": (
        "sudo apt install pulseaudio-utils",
        "sudo dnf install pulseaudio-utils",
        "sudo pacman -S libpulse",
    ),
    "notify-send": (
        "sudo apt install libnotify-bin",
        "sudo dnf install libnotify",
        "sudo pacman -S libnotify",
    ),
}


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def install_commands_for(name: str) -> tuple[str, ...]:
    """Return install commands for *name*, keyed on its basename."""
    return _PACKAGES.get(Path(name).name, ())


def detect_binary(name: str) -> BinaryStatus:
    """Probe PATH for *name*.

    Returns a :class:`BinaryStatus` regardless of whether the binary is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is not None:
        return BinaryStatus(name=name, path=Path(result).resolve(), install_commands=())
    return BinaryStatus(name=name, path=None, install_commands=install_commands_for(name))


def missing_binary_error(name: str) -> BinaryNotFoundError:
    """Build the :class:`BinaryNotFoundError` reported for *name*."""
    commands = install_commands_for(name)
    hint_lines: list[str] = []
    if commands:
        hint_lines.append(f"Install {Path(name).name} using one of:")
        hint_lines.extend(f"  {cmd}" for cmd in commands)
    return BinaryNotFoundError(
        f"{name} is not installed or not on PATH.",
        hint="\n".join(hint_lines) if hint_lines else None,
    )


def require_binary(name: str) -> Path:
    """Locate *name* or raise :class:`BinaryNotFoundError`."""
    status = detect_binary(name)
    if status.path is None:
        raise missing_binary_error(name)
    return status.path
