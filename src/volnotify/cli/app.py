"""CLI application entry point and command routing for volnotify.

This module is the **sole error boundary** for the entire application.
It catches :class:`~volnotify.exceptions.VolnotifyError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
one-line message on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — token grammar lives in
  :mod:`volnotify.core.parsing`, the adjust/notify sequence in
  :class:`~volnotify.core.volume_service.VolumeService`.
* This module is the only place that wires concrete ``infra`` adapters
  into the core and translates between the domain world and the OS
  process exit code.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import NoReturn

from volnotify.cli import exit_codes
from volnotify.cli.console import configure_logging, console
from volnotify.config import Settings, load_settings
from volnotify.core.models import Command, DeviceKind, Options
from volnotify.core.parsing import parse_command
from volnotify.exceptions import InvalidArgumentsError, VolnotifyError
from volnotify.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "volnotify"

_USAGE_EPILOG = """\
volume forms:
  +N%  -N%           raise / lower the volume by N percent
  =N%  N%            set the volume to N percent

actions (optional N defaults to 5):
  +, up, raise       raise the volume by N
  -, down, lower     lower the volume by N
  =, set             set the volume to N
  x, mute            mute
  u, unmute          unmute
  %, toggle-mute     toggle mute

examples:
  volnotify +5%
  volnotify -u up 10
  volnotify -m toggle-mute
"""

# A leading "-<digit>" token is a volume shorthand, not a flag.
_SHORTHAND_FLAG_RE = re.compile(r"^-\d")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(f"{message} (see -h)")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    The CLI supports:
    * ``volnotify [-bmuv] <+N%|-N%|=N%|N%>``
    * ``volnotify [-bmuv] <action> [N]``
    * ``volnotify -h`` / ``volnotify --version``
    """
    parser = _ArgumentParser(
        prog=PROG,
        description="Adjust audio volume or mute state and show a notification.",
        epilog=_USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-b",
        "--boost",
        action="store_true",
        help="allow volume above 100%%",
    )
    parser.add_argument(
        "-m",
        "--mic",
        action="store_true",
        help="target the default input device instead of the output",
    )
    parser.add_argument(
        "-u",
        "--unmute",
        action="store_true",
        help="unmute before changing the volume",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every backend call to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="ARG",
        help="volume shorthand, or an action keyword with optional percent",
    )
    return parser


def _protect_shorthand(argv: Sequence[str]) -> list[str]:
    """Insert ``--`` before a ``-5%``-style token so it is not read as a flag."""
    args = list(argv)
    for index, token in enumerate(args):
        if token == "--":
            break
        if _SHORTHAND_FLAG_RE.match(token):
            return [*args[:index], "--", *args[index:]]
    return args


def _build_options(args: argparse.Namespace) -> Options:
    return Options(
        allow_boost=args.boost,
        device=DeviceKind.INPUT if args.mic else DeviceKind.OUTPUT,
        unmute_on_change=args.unmute,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_adjust(command: Command, options: Options, settings: Settings) -> int:
    """Wire the adapters and run one adjust-and-notify sequence.

    Both external binaries are located up front so a missing notifier
    fails before any device state is touched.
    """
    from volnotify.core.volume_service import VolumeService
    from volnotify.infra.binary_detector import require_binary
    from volnotify.infra.notifier import CommandNotifier, NotifySendNotifier
    from volnotify.infra.pactl_backend import PactlBackend

    notifier: CommandNotifier | NotifySendNotifier
    if settings.notifier_command:
        notifier = CommandNotifier(settings.notifier_command)
    else:
        notifier = NotifySendNotifier(
            settings.notify_send_binary,
            timeout_ms=settings.notification_timeout_ms,
        )

    require_binary(settings.pactl_binary)
    require_binary(notifier.executable)

    service = VolumeService(PactlBackend(settings.pactl_binary), notifier)
    service.execute(command, options)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the volnotify CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InvalidArgumentsError
        For any malformed flag, token or environment setting.  Raised
        before any backend call is made.
    """
    parser = _build_parser()
    raw = sys.argv[1:] if argv is None else argv
    args = parser.parse_args(_protect_shorthand(raw))

    configure_logging(args.verbose)
    settings = load_settings()

    command = parse_command(args.tokens, default_step=settings.default_step)
    options = _build_options(args)
    logger.debug("Parsed %s with %s", command, options)

    return _handle_adjust(command, options, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except VolnotifyError as exc:
        console.print(f"{PROG}: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print(f"\n{PROG}: aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"{PROG}: unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
