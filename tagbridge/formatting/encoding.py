# tagbridge/formatting/encoding.py
"""
Encoded tag names.

The encoded name is the kind prefix followed by the percent-encoded UTF-8
tag name. Every byte outside 0x21-0x7E, and '%' itself, becomes %XX
(uppercase hex). Two extra rules keep encoded names unambiguous:

- A leading '!' is always encoded, since '!' starts pseudo-tags when tag
  files are sorted.
- For a kind without a prefix, a name that starts with another kind's
  prefix gets its first character encoded, so "_x" of an unprefixed kind
  cannot be confused with "x" of a kind whose prefix is "_".
"""

from __future__ import annotations

from typing import Iterable

_HEX = "0123456789ABCDEF"


def _is_safe(byte: int) -> bool:
    return 0x21 <= byte <= 0x7E and byte != 0x25


def percent_encode(data: bytes, force: bool = False) -> str:
    """Percent-encode data; with force=True every byte is encoded."""
    out = []
    for byte in data:
        if force or not _is_safe(byte):
            out.append("%" + _HEX[byte >> 4] + _HEX[byte & 0x0F])
        else:
            out.append(chr(byte))
    return "".join(out)


def encode_name(name: str, prefix: str = "", other_prefixes: Iterable[str] = ()) -> str:
    """
    Build the encoded name of a tag.

    Args:
        name: Raw tag name.
        prefix: Prefix of the tag's own kind ("" for none). Emitted verbatim.
        other_prefixes: Prefixes configured for other kinds.

    Example:
        >>> encode_name("_x", "", ["_"])
        '%5Fx'
        >>> encode_name("x", "_", [])
        '_x'
    """
    data = name.encode("utf-8")
    head = b""

    if data.startswith(b"!"):
        head, data = data[:1], data[1:]
    elif not prefix:
        for other in other_prefixes:
            if other and data.startswith(other.encode("utf-8")):
                head, data = data[:1], data[1:]
                break

    return prefix + percent_encode(head, force=True) + percent_encode(data)


__all__ = ["percent_encode", "encode_name"]
