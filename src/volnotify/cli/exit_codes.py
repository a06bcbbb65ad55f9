"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Volume or mute applied and the notification sent, or help shown."""

GENERAL_ERROR: int = 1
"""Invalid arguments or settings, a pactl failure, a missing binary, or a
failed notifier.  A one-line message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception outside the VolnotifyError hierarchy reached cli()."""
