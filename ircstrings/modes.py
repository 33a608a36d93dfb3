"""
Mode lines: parsing ``+ov-b Bob sue *!*@spam``-like strings, condensing
them, and computing the change between two sets of modes.
"""

from __future__ import annotations

import dataclasses
import logging
import types
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import InvalidProfile

log = logging.getLogger(__name__)

SIGNS = "+-"

DEFAULT_STATUS_MODES: Mapping[str, Optional[str]] = types.MappingProxyType(
    {"o": "@", "h": "%", "v": "+"}
)
"""Channel modes granting a status to a nick, and the matching nick prefix"""

StatusModesLike = Union[Mapping[str, Optional[str]], str, None]


@dataclasses.dataclass(frozen=True)
class ChannelModes:
    """Which channel modes take an argument, in the four groups of the
    ISUPPORT CHANMODES token."""

    list_modes: str = "beI"
    """Type A: list modes, always take an argument"""

    param_modes: str = ""
    """Type B: always take an argument"""

    set_param_modes: str = "kl"
    """Type C: take an argument only when set"""

    flag_modes: str = "imnpstaqr"
    """Type D: never take an argument"""

    @classmethod
    def from_isupport(cls, value: str) -> ChannelModes:
        """Builds from the value of a CHANMODES token, eg. ``beI,k,l,imnpst``.
        Groups past the fourth are ignored, missing ones are empty."""
        groups = value.split(",")
        if len(groups) < 4:
            groups += [""] * (4 - len(groups))
        return cls(*groups[0:4])

    @classmethod
    def coerce(
        cls, value: Union[ChannelModes, str, Sequence[str], None]
    ) -> ChannelModes:
        if value is None:
            return cls()
        elif isinstance(value, cls):
            return value
        elif isinstance(value, str):
            return cls.from_isupport(value)
        elif len(value) == 4 and all(isinstance(group, str) for group in value):
            return cls(*value)
        raise InvalidProfile(f"channel modes must have four groups: {value!r}")

    def takes_argument(self, sign: str, letter: str) -> bool:
        if letter in self.list_modes or letter in self.param_modes:
            return True
        return sign == "+" and letter in self.set_param_modes

    def to_isupport(self) -> str:
        return ",".join(
            [self.list_modes, self.param_modes, self.set_param_modes, self.flag_modes]
        )


def parse_prefix(value: str) -> Dict[str, Optional[str]]:
    """Parses the value of an ISUPPORT PREFIX token.

    >>> parse_prefix("(ohv)@%+")
    {'o': '@', 'h': '%', 'v': '+'}
    """
    if not value:
        return {}
    if not value.startswith("(") or ")" not in value:
        raise InvalidProfile(f"malformed PREFIX: {value!r}")
    (letters, symbols) = value[1:].split(")", 1)
    if len(letters) != len(symbols):
        raise InvalidProfile(f"malformed PREFIX: {value!r}")
    return dict(zip(letters, symbols))


def coerce_status_modes(value: StatusModesLike) -> Mapping[str, Optional[str]]:
    """Accepts a letter->prefix mapping, an ISUPPORT PREFIX value, or a
    plain string of letters (whose prefixes are then unknown)."""
    if value is None:
        return DEFAULT_STATUS_MODES
    elif isinstance(value, str):
        if value.startswith("("):
            return parse_prefix(value)
        return dict.fromkeys(value)
    return value


@dataclasses.dataclass(frozen=True)
class ModeLine:
    """Result of :func:`parse_mode_line`. Each mode is a two-character
    string, sign then letter; ``args`` holds the arguments consumed by
    those modes, in order.

    An empty ModeLine is falsy, and is what malformed lines parse to."""

    modes: List[str] = dataclasses.field(default_factory=list)
    args: List[str] = dataclasses.field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.modes)

    def pairs(
        self,
        channel_modes: Union[ChannelModes, str, Sequence[str], None] = None,
        status_modes: StatusModesLike = None,
    ) -> Iterator[Tuple[str, str, Optional[str]]]:
        """Yields ``(sign, letter, argument)`` triples; argument is None for
        modes that take none. The mode configuration must be the one the line
        was parsed with."""
        channel_modes = ChannelModes.coerce(channel_modes)
        status_modes = coerce_status_modes(status_modes)
        args = iter(self.args)
        for (sign, letter) in self.modes:
            if letter in status_modes or channel_modes.takes_argument(sign, letter):
                yield (sign, letter, next(args))
            else:
                yield (sign, letter, None)

    def as_dict(self) -> Dict[str, List[str]]:
        return {"modes": list(self.modes), "args": list(self.args)}


def parse_mode_line(
    tokens: str,
    args: Sequence[str] = (),
    channel_modes: Union[ChannelModes, str, Sequence[str], None] = None,
    status_modes: StatusModesLike = None,
) -> ModeLine:
    """Parses mode changes, eg. ``parse_mode_line("ov+b-i", ["Bob", "sue",
    "*!*@spam"])``.

    The sign defaults to ``+`` until the first ``+``/``-``. Status modes and
    modes from ``channel_modes`` consume arguments in order; unknown letters
    are kept and take no argument. If an argument is missing, the whole line
    is rejected and an empty ModeLine is returned.

    ``tokens`` may also be a whole line, with its arguments separated by
    spaces, in which case ``args`` should be empty."""
    channel_modes = ChannelModes.coerce(channel_modes)
    status_modes = coerce_status_modes(status_modes)

    if " " in tokens.strip() and not args:
        (tokens, *args) = tokens.split()
    args = list(args)

    sign = "+"
    modes: List[str] = []
    consumed: List[str] = []
    for char in tokens.strip():
        if char in SIGNS:
            sign = char
            continue
        if char in status_modes or channel_modes.takes_argument(sign, char):
            if len(consumed) >= len(args):
                log.debug(
                    "Missing argument for %s%s in mode line %r %r",
                    sign,
                    char,
                    tokens,
                    args,
                )
                return ModeLine()
            consumed.append(args[len(consumed)])
        modes.append(sign + char)

    return ModeLine(modes=modes, args=consumed)


def unparse_mode_line(tokens: str) -> str:
    """Condenses mode changes by merging consecutive ones with the same sign.

    >>> unparse_mode_line("+o+o+o-v+v")
    '+ooo-v+v'

    Arguments following the modes (after a space) are kept as they are."""
    if not tokens:
        return ""
    (tokens, sep, rest) = tokens.strip().partition(" ")

    condensed = []
    sign = "+"
    last_sign = None
    for char in tokens:
        if char in SIGNS:
            sign = char
            continue
        if sign != last_sign:
            condensed.append(sign)
            last_sign = sign
        condensed.append(char)

    if condensed and rest:
        return "".join(condensed) + sep + rest
    return "".join(condensed)


def join_mode_line(mode_line: ModeLine) -> str:
    """Serializes a parsed mode line back to a single string."""
    return " ".join([unparse_mode_line("".join(mode_line.modes)), *mode_line.args])


def gen_mode_change(before: Optional[str], after: Optional[str]) -> str:
    """Returns the mode change turning the set of modes ``before`` into
    ``after``.

    >>> gen_mode_change("abcde", "befmZ")
    '-acd+fmZ'
    """
    before_modes = dict.fromkeys(char for char in before or "" if char not in SIGNS)
    after_modes = dict.fromkeys(char for char in after or "" if char not in SIGNS)

    removed = "".join(char for char in before_modes if char not in after_modes)
    added = "".join(char for char in after_modes if char not in before_modes)

    change = ""
    if removed:
        change += "-" + removed
    if added:
        change += "+" + added
    return change
