import logging
from typing import Union

log = logging.getLogger(__name__)

FALLBACK_ENCODING = "cp1252"


def decode_irc(data: Union[bytes, bytearray, str]) -> str:
    """Decodes text received from an IRC server. IRC has no declared
    encoding; nowadays most clients send UTF-8, and the rest mostly send
    Windows-1252, so this tries the former then falls back to the latter."""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        log.debug("Not valid UTF-8, decoding as %s: %r", FALLBACK_ENCODING, data)
        return bytes(data).decode(FALLBACK_ENCODING, errors="replace")
