"""Positional-token grammar: turn ``+5%`` / ``up 10`` into a :class:`Command`.

Pure functions only, with no knowledge of flags.  The CLI layer
hands over whatever positional tokens remain after flag parsing.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from volnotify.core.models import Action, Command
from volnotify.exceptions import InvalidArgumentsError


DEFAULT_STEP: int = 5
"""Magnitude used when an action keyword is given without one."""

KEYWORDS: dict[str, Action] = {
    "+": Action.INCREASE,
    "up": Action.INCREASE,
    "raise": Action.INCREASE,
    "-": Action.DECREASE,
    "down": Action.DECREASE,
    "lower": Action.DECREASE,
    "=": Action.SET,
    "set": Action.SET,
    "x": Action.MUTE,
    "mute": Action.MUTE,
    "u": Action.UNMUTE,
    "unmute": Action.UNMUTE,
    "%": Action.TOGGLE_MUTE,
    "toggle-mute": Action.TOGGLE_MUTE,
}

_SHORTHAND_RE = re.compile(r"^([=+-]?)(\d+)%$")
_MAGNITUDE_RE = re.compile(r"^(\d+)%?$")

_PREFIX_ACTIONS: dict[str, Action] = {
    "+": Action.INCREASE,
    "-": Action.DECREASE,
    "=": Action.SET,
    "": Action.SET,
}


def is_shorthand(token: str) -> bool:
    """Return ``True`` when *token* is a single-token form like ``-5%``."""
    return _SHORTHAND_RE.match(token) is not None


def parse_magnitude(token: str) -> int:
    """Parse ``"10"`` or ``"10%"`` into ``10``.

    Raises
    ------
    InvalidArgumentsError
        For anything that is not a non-negative integer percent.
    """
    match = _MAGNITUDE_RE.match(token)
    if match is None:
        raise InvalidArgumentsError(
            f"invalid volume '{token}': expected a non-negative integer percent",
        )
    return int(match.group(1))


def parse_command(
    tokens: Sequence[str],
    *,
    default_step: int = DEFAULT_STEP,
) -> Command:
    """Parse one or two positional tokens into a :class:`Command`.

    Accepted forms::

        +5%  -5%  =50%  50%        (single token)
        up [10]  mute  %  ...      (keyword, optional magnitude)

    Raises
    ------
    InvalidArgumentsError
        On a wrong token count, unknown keyword or bad magnitude.
    """
    if not 1 <= len(tokens) <= 2:
        raise InvalidArgumentsError(
            f"expected 1 or 2 arguments, got {len(tokens)} (see -h)",
        )

    head = tokens[0]
    shorthand = _SHORTHAND_RE.match(head)
    if shorthand is not None:
        if len(tokens) == 2:
            raise InvalidArgumentsError(
                f"unexpected argument '{tokens[1]}' after '{head}'",
            )
        prefix, digits = shorthand.groups()
        return Command(action=_PREFIX_ACTIONS[prefix], magnitude=int(digits))

    action = KEYWORDS.get(head)
    if action is None:
        raise InvalidArgumentsError(
            f"unknown action '{head}' (see -h)",
        )

    magnitude = parse_magnitude(tokens[1]) if len(tokens) == 2 else default_step
    if not action.affects_volume:
        # Validated above, but mute actions carry no magnitude.
        return Command(action=action)
    return Command(action=action, magnitude=magnitude)
