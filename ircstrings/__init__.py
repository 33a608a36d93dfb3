"""Manipulation of IRC protocol strings: casemapping, masks, mode lines,
formatting codes, numerics and text decoding."""

from .casemapping import Direction, equal_irc, fold, fold_lower, fold_upper
from .encoding import decode_irc
from .exceptions import InvalidCasemapping, InvalidProfile, IrcStringsException
from .formatting import has_color, has_formatting, strip_color, strip_formatting
from .masks import (
    MaskMatcher,
    compile_mask,
    matches_mask,
    matches_mask_many,
    normalize_mask,
    parse_user,
    parse_user_parts,
)
from .modes import (
    ChannelModes,
    ModeLine,
    gen_mode_change,
    join_mode_line,
    parse_mode_line,
    unparse_mode_line,
)
from .numerics import name_to_numeric, numeric_to_name
from .profile import ServerProfile, load_profile, parse_isupport
from .specifications import Casemapping
from .validators import is_valid_chan_name, is_valid_nick_name

__all__ = [
    "Casemapping",
    "ChannelModes",
    "Direction",
    "InvalidCasemapping",
    "InvalidProfile",
    "IrcStringsException",
    "MaskMatcher",
    "ModeLine",
    "ServerProfile",
    "compile_mask",
    "decode_irc",
    "equal_irc",
    "fold",
    "fold_lower",
    "fold_upper",
    "gen_mode_change",
    "has_color",
    "has_formatting",
    "is_valid_chan_name",
    "is_valid_nick_name",
    "join_mode_line",
    "load_profile",
    "matches_mask",
    "matches_mask_many",
    "name_to_numeric",
    "normalize_mask",
    "numeric_to_name",
    "parse_isupport",
    "parse_mode_line",
    "parse_user",
    "parse_user_parts",
    "strip_color",
    "strip_formatting",
    "unparse_mode_line",
]
