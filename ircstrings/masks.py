"""
Ban/exception/invite masks, ie. ``nick!user@host`` globs.
"""

import dataclasses
import functools
import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .casemapping import fold_upper
from .specifications import Casemapping, CasemappingLike

_STARS = re.compile(r"\*{2,}")


def normalize_mask(mask: str) -> str:
    """Completes a partial mask to the ``nick!user@host`` form.

    >>> normalize_mask("foo")
    'foo!*@*'
    >>> normalize_mask("foo@bar")
    '*!foo@bar'
    >>> normalize_mask("foo!bar")
    'foo!bar@*'

    Only missing parts become wildcards; a part that is present but blank
    stays blank (``!@host``).
    """
    mask = _STARS.sub("*", mask)

    if "!" not in mask and "@" in mask:
        nick = "*"
        remainder: Optional[str] = mask
    else:
        (nick, sep, remainder) = mask.partition("!")
        if not sep:
            remainder = None

    user = host = "*"
    if remainder:
        remainder = remainder.replace("!", "")
        (user, sep, host) = remainder.partition("@")
        if sep:
            host = host.replace("@", "")
        else:
            host = "*"

    return "{}!{}@{}".format(nick, user, host)


def _glob_to_regexp(pattern: str) -> str:
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


@dataclasses.dataclass(frozen=True)
class MaskMatcher:
    """A normalized mask, compiled for a given casemapping."""

    mask: str
    casemapping: Casemapping
    regexp: "re.Pattern[str]"

    def match(self, candidate: Optional[str]) -> bool:
        """Returns whether the candidate (a ``nick!user@host`` string, or a
        partial one) matches the mask. Never raises on malformed input."""
        if not candidate or not isinstance(candidate, str):
            return False
        if "!" not in candidate or "@" not in candidate:
            candidate = normalize_mask(candidate)
        folded = fold_upper(candidate, self.casemapping)
        return self.regexp.fullmatch(folded) is not None

    def filter(self, candidates: Iterable[str]) -> List[str]:
        """Returns the matching candidates, in order, duplicates included."""
        return [candidate for candidate in candidates if self.match(candidate)]


@functools.lru_cache(maxsize=1024)
def _compile(mask: str, casemapping: Casemapping) -> MaskMatcher:
    normalized = normalize_mask(mask)
    regexp = re.compile(
        _glob_to_regexp(fold_upper(normalized, casemapping)), re.DOTALL
    )
    return MaskMatcher(mask=normalized, casemapping=casemapping, regexp=regexp)


def compile_mask(mask: str, casemapping: CasemappingLike = None) -> MaskMatcher:
    return _compile(mask, Casemapping.coerce(casemapping))


def matches_mask(
    mask: str, candidate: Optional[str], casemapping: CasemappingLike = None
) -> bool:
    """Returns whether ``candidate`` matches the (possibly partial) mask.

    Both sides are folded to upper-case with the same casemapping before
    comparing, so ``matches_mask("BOB", "bob!x@y")`` is true under any
    casemapping."""
    casemapping = Casemapping.coerce(casemapping)
    if not mask or not isinstance(mask, str):
        return False
    return compile_mask(mask, casemapping).match(candidate)


def matches_mask_many(
    masks: Iterable[str],
    candidates: Sequence[str],
    casemapping: CasemappingLike = None,
) -> Dict[str, List[str]]:
    """Returns a dict mapping each mask (as given) to the candidates it
    matches. Masks matching nothing are left out of the dict."""
    casemapping = Casemapping.coerce(casemapping)
    candidates = list(candidates)
    result: Dict[str, List[str]] = {}
    for mask in masks:
        if not mask:
            continue
        matched = compile_mask(mask, casemapping).filter(candidates)
        if matched:
            result[mask] = matched
    return result


def parse_user_parts(prefix: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Splits a ``nick!user@host`` message prefix into its three parts;
    missing parts are None.

    >>> parse_user_parts("foo!bar@baz")
    ('foo', 'bar', 'baz')
    >>> parse_user_parts("irc.example.org")
    ('irc.example.org', None, None)
    """
    (nick, sep, remainder) = prefix.partition("!")
    if not sep:
        (nick, sep, host) = nick.partition("@")
        return (nick, None, host if sep else None)
    (user, sep, host) = remainder.partition("@")
    return (nick, user, host if sep else None)


def parse_user(prefix: str) -> str:
    """Returns the nick part of a ``nick!user@host`` message prefix."""
    return parse_user_parts(prefix)[0]
