"""IRC formatting helpers: control codes for colors, bold, etc."""

import re

NORMAL = "\x0f"
BOLD = "\x02"
UNDERLINE = "\x1f"
REVERSE = "\x16"
ITALIC = "\x1d"
FIXED = "\x11"
BLINK = "\x06"

COLOR = "\x03"
HEX_COLOR = "\x04"

# mIRC color codes
WHITE = COLOR + "00"
BLACK = COLOR + "01"
BLUE = COLOR + "02"
GREEN = COLOR + "03"
RED = COLOR + "04"
BROWN = COLOR + "05"
PURPLE = COLOR + "06"
ORANGE = COLOR + "07"
YELLOW = COLOR + "08"
LIGHT_GREEN = COLOR + "09"
TEAL = COLOR + "10"
LIGHT_CYAN = COLOR + "11"
LIGHT_BLUE = COLOR + "12"
PINK = COLOR + "13"
GREY = COLOR + "14"
LIGHT_GREY = COLOR + "15"

_FORMATTING_CODES = BOLD + UNDERLINE + REVERSE + ITALIC + FIXED + BLINK

_HAS_COLOR = re.compile("[\x03\x04\x1b]")
_HAS_FORMATTING = re.compile("[" + re.escape(_FORMATTING_CODES) + "]")

_MIRC_COLOR = re.compile(r"\x03(?:,\d{1,2}|\d{1,2}(?:,\d{1,2})?)?")
_HEX_COLOR = re.compile(r"\x04[0-9a-fA-F]{0,6}")
_ANSI_ESCAPE = re.compile(r"\x1b\[.*?[\x00-\x1f\x40-\x7e]", re.DOTALL)


def has_color(s: str) -> bool:
    return _HAS_COLOR.search(s) is not None


def has_formatting(s: str) -> bool:
    return _HAS_FORMATTING.search(s) is not None


def strip_color(s: str) -> str:
    """Removes color codes. The "reset" code is removed too, unless it is
    still needed to end formatting (bold, underline, ...)."""
    s = _MIRC_COLOR.sub("", s)
    s = _HEX_COLOR.sub("", s)
    s = _ANSI_ESCAPE.sub("", s)
    if not has_formatting(s):
        s = s.replace(NORMAL, "")
    return s


def strip_formatting(s: str) -> str:
    """Removes formatting codes. The "reset" code is removed too, unless it
    is still needed to end colors."""
    s = _HAS_FORMATTING.sub("", s)
    if not has_color(s):
        s = s.replace(NORMAL, "")
    return s


def color(s: str, fg: str, bg: str = "") -> str:
    """Wraps ``s`` in a color, eg. ``color("hi", RED)``; ``bg`` is another
    color constant."""
    if bg:
        fg += "," + bg[len(COLOR) :]
    return fg + s + COLOR


def bold(s: str) -> str:
    return BOLD + s + BOLD
