"""Synchronous "run a command, capture stdout" helper.

Every external call in volnotify goes through :func:`run_command`, so
this is the single place where :mod:`subprocess` failures are mapped to
typed :class:`~volnotify.exceptions.VolnotifyError` subclasses.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence

from volnotify.exceptions import BackendCommandError, VolnotifyError
from volnotify.infra.binary_detector import missing_binary_error

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], str]
"""Signature shared by :func:`run_command` and test doubles."""


def run_command(
    argv: Sequence[str],
    *,
    error_cls: type[VolnotifyError] = BackendCommandError,
) -> str:
    """Run *argv*, wait for it, and return its stdout.

    No timeout is applied: a hung command hangs the caller.

    Raises
    ------
    BinaryNotFoundError
        When ``argv[0]`` cannot be executed because it does not exist.
    VolnotifyError
        An instance of *error_cls* for a non-zero exit or any other
        OS-level failure to start the process.
    """
    args = list(argv)
    logger.debug("Running %s", shlex.join(args))
    try:
        completed = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise missing_binary_error(args[0]) from exc
    except OSError as exc:
        raise error_cls(f"Could not run {args[0]}: {exc}") from exc

    logger.debug("%s exited with %d", args[0], completed.returncode)
    if completed.returncode != 0:
        detail = (
            completed.stderr.strip()
            or completed.stdout.strip()
            or f"exit status {completed.returncode}"
        )
        raise error_cls(f"{shlex.join(args)} failed: {detail}")
    return completed.stdout
