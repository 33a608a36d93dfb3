"""Syntax checks for nicknames and channel names."""

import re
from typing import Iterable

DEFAULT_CHANTYPES = frozenset("#&")

MAX_CHANNEL_LENGTH = 200
"""In bytes, as encoded on the wire"""

_NICK_SPECIAL = re.escape("[]\\`_^{|}")
_VALID_NICK = re.compile(
    r"[A-Za-z{special}][A-Za-z0-9{special}-]*".format(special=_NICK_SPECIAL)
)
_CHANNEL_FORBIDDEN = " \x07\x00\r\n,:"


def is_valid_nick_name(nick: str) -> bool:
    """Returns whether ``nick`` is syntactically valid per RFC 2812, except
    that any length is accepted."""
    if not nick or not isinstance(nick, str):
        return False
    return _VALID_NICK.fullmatch(nick) is not None


def is_valid_chan_name(
    channel: str, chantypes: Iterable[str] = DEFAULT_CHANTYPES
) -> bool:
    """Returns whether ``channel`` starts with one of the ``chantypes`` and
    is followed by a non-empty name with no forbidden character."""
    chantypes = frozenset(chantypes)
    if not chantypes or not channel or not isinstance(channel, str):
        return False
    if len(channel.encode("utf-8")) > MAX_CHANNEL_LENGTH:
        return False
    (prefix, name) = (channel[0], channel[1:])
    if prefix not in chantypes or not name:
        return False
    return not any(char in _CHANNEL_FORBIDDEN for char in name)
