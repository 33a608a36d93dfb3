from __future__ import annotations

import enum
from typing import Optional, Union

from .exceptions import InvalidCasemapping


@enum.unique
class Casemapping(enum.Enum):
    RFC1459 = "rfc1459"
    """ASCII letters plus ``{}|^`` as the lower-case forms of ``[]\\~``"""

    STRICT_RFC1459 = "strict-rfc1459"
    """Same as RFC1459, without ``^``/``~``"""

    ASCII = "ascii"

    @classmethod
    def from_name(cls, name: str) -> Casemapping:
        wanted = _squash(name)
        for casemapping in cls:
            if _squash(casemapping.value) == wanted:
                return casemapping
        raise InvalidCasemapping(name)

    @classmethod
    def coerce(cls, value: Union[Casemapping, str, None]) -> Casemapping:
        """Returns the variant designated by ``value``; None means the default,
        RFC1459."""
        if value is None:
            return cls.RFC1459
        elif isinstance(value, cls):
            return value
        elif isinstance(value, str):
            return cls.from_name(value)
        raise InvalidCasemapping(value)


CasemappingLike = Optional[Union[Casemapping, str]]


def _squash(name: str) -> str:
    return name.lower().replace("-", "").replace("_", "")
