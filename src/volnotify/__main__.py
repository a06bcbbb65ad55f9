"""Allow ``python -m volnotify`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m volnotify`` behaves identically to the ``volnotify``
console script.
"""

from __future__ import annotations

from volnotify.cli.app import cli

if __name__ == "__main__":
    cli()
