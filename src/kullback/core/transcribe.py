from __future__ import annotations

import base64
import binascii
import re
import string
from enum import Enum

from .errors import DecodeError

_HEX_CHARS = set(string.hexdigits)
_WHITESPACE_RE = re.compile(r"\s+")


class Encoding(str, Enum):
    UTF8 = "UTF8"
    HEX = "HEX"
    BASE64 = "BASE64"

    @classmethod
    def parse(cls, tag: "Encoding | str") -> "Encoding":
        """Accept an Encoding or a case-insensitive tag like 'hex', 'utf-8', 'Base64'."""
        if isinstance(tag, Encoding):
            return tag
        key = f"{tag}".strip().upper().replace("-", "")
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(e.value for e in cls)
            raise DecodeError(f"{tag}", f"Unknown encoding. Available: {available}") from None


def _strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def decode_utf8(text: str) -> bytes:
    # One byte per input unit; non-ASCII characters contribute their UTF-8 bytes
    return text.encode("utf-8")


def decode_hex(text: str) -> bytes:
    s = _strip_whitespace(text)
    bad = sorted({ch for ch in s if ch not in _HEX_CHARS})
    if bad:
        raise DecodeError(Encoding.HEX.value, f"Invalid character(s) {''.join(bad)!r}")
    if len(s) % 2 != 0:
        raise DecodeError(Encoding.HEX.value, f"Odd number of hex digits ({len(s)})")
    return bytes.fromhex(s)


def decode_base64(text: str) -> bytes:
    s = _strip_whitespace(text)
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(Encoding.BASE64.value, f"{e}") from e


def transcribe(text: str, encoding: Encoding | str) -> bytes:
    """
    Decode `text` into the byte sequence the statistic runs on.

    Raises DecodeError for malformed input; never returns a partial result.
    """
    enc = Encoding.parse(encoding)
    if enc is Encoding.UTF8:
        return decode_utf8(text)
    if enc is Encoding.HEX:
        return decode_hex(text)
    if enc is Encoding.BASE64:
        return decode_base64(text)
    raise AssertionError(f"Unhandled encoding {enc!r}")
