"""
IRC casemappings.

Servers advertise in ISUPPORT which characters are upper/lower-case
equivalents of each other; nicknames and channel names must be compared
after folding them with that rule.
"""

import enum
import string
from typing import Dict

from .specifications import Casemapping, CasemappingLike


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"


# (lower, upper), position by position
_FOLD_PAIRS = {
    Casemapping.RFC1459: (
        string.ascii_lowercase + "{}|^",
        string.ascii_uppercase + "[]\\~",
    ),
    Casemapping.STRICT_RFC1459: (
        string.ascii_lowercase + "{}|",
        string.ascii_uppercase + "[]\\",
    ),
    Casemapping.ASCII: (string.ascii_lowercase, string.ascii_uppercase),
}

_TABLES: Dict[Direction, Dict[Casemapping, Dict[int, int]]] = {
    Direction.UP: {
        casemapping: str.maketrans(lower, upper)
        for (casemapping, (lower, upper)) in _FOLD_PAIRS.items()
    },
    Direction.DOWN: {
        casemapping: str.maketrans(upper, lower)
        for (casemapping, (lower, upper)) in _FOLD_PAIRS.items()
    },
}


def fold(text: str, casemapping: CasemappingLike, direction: Direction) -> str:
    """Substitutes each character of ``text`` with its upper-case (or
    lower-case) equivalent under the given casemapping. Never changes the
    length of the string."""
    table = _TABLES[direction][Casemapping.coerce(casemapping)]
    return text.translate(table)


def fold_upper(text: str, casemapping: CasemappingLike = None) -> str:
    return fold(text, casemapping, Direction.UP)


def fold_lower(text: str, casemapping: CasemappingLike = None) -> str:
    return fold(text, casemapping, Direction.DOWN)


def equal_irc(first: str, second: str, casemapping: CasemappingLike = None) -> bool:
    """Returns whether the two strings are the same nick/channel under the
    casemapping."""
    casemapping = Casemapping.coerce(casemapping)
    return fold_lower(first, casemapping) == fold_lower(second, casemapping)
