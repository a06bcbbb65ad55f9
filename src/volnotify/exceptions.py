"""Custom exception hierarchy for volnotify.

All exceptions that cross layer boundaries must inherit from
:class:`VolnotifyError`.  Raw ``subprocess`` / ``OSError`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
VolnotifyError
├── InvalidArgumentsError
├── UnknownStreamTypeError
├── BackendError
│   └── BackendCommandError
├── NotifierError
└── EnvironmentError
    └── BinaryNotFoundError
"""

from __future__ import annotations


class VolnotifyError(Exception):
    """Base exception for all volnotify errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean
    one-line message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidArgumentsError(VolnotifyError):
    """Raised for malformed flags, positional count or magnitude tokens."""


# --- Device resolution -----------------------------------------------------

class UnknownStreamTypeError(VolnotifyError):
    """Raised when a device kind maps to neither a sink nor a source."""


# --- Audio backend ---------------------------------------------------------

class BackendError(VolnotifyError):
    """Raised when the audio backend returns state we cannot interpret."""


class BackendCommandError(BackendError):
    """Raised when a backend command exits with a non-zero status."""


# --- Notification ----------------------------------------------------------

class NotifierError(VolnotifyError):
    """Raised when the notification client fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(VolnotifyError):
    """Raised when a required runtime dependency is not available."""


class BinaryNotFoundError(EnvironmentError):
    """Raised when an external executable cannot be located on PATH."""
