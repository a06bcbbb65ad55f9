"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
the volume-key hot path (and ``--help`` / ``--version``) keeps working
even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from volnotify.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr.

    Soft wrap keeps each message on one line even when stderr is not a
    terminal and Rich would otherwise fold at 80 columns.
    """
    console_class = _load_rich_console_class()
    return console_class(stderr=True, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, style: str | None = None) -> None:
        """Render with Rich when available, else plain stderr print.

        Objects are printed literally (no Rich markup), so messages that
        embed backend output cannot be misread as markup tags.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, style=style, markup=False, highlight=False)


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
    """Return a ``RichHandler`` on stderr, or a plain stream handler."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler
    return RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )


def configure_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the ``volnotify`` logger.

    ``WARNING`` by default, ``DEBUG`` when *verbose* is set.  Calling
    this again replaces the handler rather than stacking another one.
    """
    logger = logging.getLogger("volnotify")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_log_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
