"""
Server profiles: the per-network settings (casemapping, channel modes,
status modes, channel types) the other modules take as arguments, bundled
in a single immutable value.

They can be built from the ISUPPORT (``005``) tokens a server sends, or
loaded from a YAML file such as::

    casemapping: rfc1459
    chanmodes: beI,k,l,imnpst
    prefix: (ohv)@%+
    chantypes: "#&"
"""

from __future__ import annotations

import dataclasses
import logging
import types
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

import yaml

from . import casemapping as _casemapping
from . import masks as _masks
from . import modes, validators
from .exceptions import InvalidCasemapping, InvalidProfile
from .specifications import Casemapping

log = logging.getLogger(__name__)

FEATURE_DISABLED_PREFIX = "-"


def parse_isupport(tokens: Iterable[str]) -> Dict[str, Union[str, bool, None]]:
    """Turns ISUPPORT tokens into a dict. Tokens without a value map to None,
    and negated tokens (``-FOO``) to False."""
    isupport: Dict[str, Union[str, bool, None]] = {}
    for token in tokens:
        if token.startswith(FEATURE_DISABLED_PREFIX):
            isupport[token[1:].upper()] = False
        elif "=" in token:
            (key, value) = token.split("=", 1)
            isupport[key.upper()] = value
        else:
            isupport[token.upper()] = None
    return isupport


@dataclasses.dataclass(frozen=True)
class ServerProfile:
    casemapping: Casemapping = Casemapping.RFC1459
    channel_modes: modes.ChannelModes = dataclasses.field(
        default_factory=modes.ChannelModes
    )
    status_modes: Mapping[str, Optional[str]] = dataclasses.field(
        default_factory=lambda: modes.DEFAULT_STATUS_MODES
    )
    chantypes: frozenset = validators.DEFAULT_CHANTYPES

    @classmethod
    def from_isupport(
        cls, tokens: Union[Iterable[str], Mapping[str, Union[str, bool, None]]]
    ) -> ServerProfile:
        """Builds a profile from ISUPPORT tokens (as a list of ``KEY=value``
        strings, or as returned by :func:`parse_isupport`). Tokens the server
        did not send keep their default."""
        if not isinstance(tokens, Mapping):
            tokens = parse_isupport(tokens)
        kwargs = {}
        if isinstance(tokens.get("CASEMAPPING"), str):
            try:
                kwargs["casemapping"] = Casemapping.from_name(tokens["CASEMAPPING"])
            except InvalidCasemapping:
                log.warning(
                    "Unsupported CASEMAPPING %r, using rfc1459",
                    tokens["CASEMAPPING"],
                )
        if isinstance(tokens.get("CHANMODES"), str):
            kwargs["chanmodes"] = tokens["CHANMODES"]
        if "PREFIX" in tokens:
            # an empty or valueless PREFIX means no status mode at all
            kwargs["prefix"] = tokens["PREFIX"] or ""
        if isinstance(tokens.get("CHANTYPES"), str):
            kwargs["chantypes"] = tokens["CHANTYPES"]
        return cls.from_dict(kwargs)

    @classmethod
    def from_dict(cls, d: Mapping) -> ServerProfile:
        """Builds a profile from a dict with the keys of the YAML format
        (all optional)."""
        unknown_keys = set(d) - {"casemapping", "chanmodes", "prefix", "chantypes"}
        if unknown_keys:
            raise InvalidProfile(
                "unknown keys: {}".format(", ".join(sorted(map(str, unknown_keys))))
            )
        kwargs = {}
        try:
            if d.get("casemapping") is not None:
                kwargs["casemapping"] = Casemapping.coerce(d["casemapping"])
            if d.get("chanmodes") is not None:
                kwargs["channel_modes"] = modes.ChannelModes.coerce(d["chanmodes"])
            if d.get("prefix") is not None:
                kwargs["status_modes"] = types.MappingProxyType(
                    dict(modes.coerce_status_modes(d["prefix"]))
                )
            if d.get("chantypes") is not None:
                kwargs["chantypes"] = frozenset(d["chantypes"])
        except InvalidProfile:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidProfile(str(e)) from None
        return cls(**kwargs)

    def fold_lower(self, s: str) -> str:
        return _casemapping.fold_lower(s, self.casemapping)

    def fold_upper(self, s: str) -> str:
        return _casemapping.fold_upper(s, self.casemapping)

    def equal(self, first: str, second: str) -> bool:
        return _casemapping.equal_irc(first, second, self.casemapping)

    def matches_mask(self, mask: str, candidate: str) -> bool:
        return _masks.matches_mask(mask, candidate, self.casemapping)

    def matches_mask_many(
        self, masks: Iterable[str], candidates: Sequence[str]
    ) -> Dict[str, List[str]]:
        return _masks.matches_mask_many(masks, candidates, self.casemapping)

    def parse_mode_line(self, tokens: str, args: Sequence[str] = ()) -> modes.ModeLine:
        return modes.parse_mode_line(
            tokens, args, self.channel_modes, self.status_modes
        )

    def is_valid_chan_name(self, channel: str) -> bool:
        return validators.is_valid_chan_name(channel, self.chantypes)


def load_profile(path: str) -> ServerProfile:
    """Reads a server profile from a YAML file."""
    with open(path) as fd:
        try:
            d = yaml.safe_load(fd)
        except yaml.YAMLError as e:
            raise InvalidProfile(f"{path}: {e}") from None
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise InvalidProfile(f"{path}: expected a mapping, got {type(d).__name__}")
    return ServerProfile.from_dict(d)
