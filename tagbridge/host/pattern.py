# tagbridge/host/pattern.py
"""
Search pattern synthesis from a raw tag name.

The name is wrapped in the search delimiter ('/' or '?' for backward
search). Backslashes and the delimiter are escaped, as are a '^' at the
start and a '$' at the end. CR/LF become a space unless last, where the
pattern stops. With a non-zero length limit the pattern stops once it is
longer than the limit, but a multi-byte UTF-8 character in progress may
add up to 3 more continuation bytes.
"""

from __future__ import annotations

BACKSLASH = 0x5C
DEFAULT_PATTERN_LENGTH_LIMIT = 96


def make_pattern(
    name: str,
    length_limit: int = DEFAULT_PATTERN_LENGTH_LIMIT,
    backward: bool = False,
) -> str:
    """
    Build a search pattern for name.

    Args:
        name: Raw tag name.
        length_limit: Pattern length cap in bytes, 0 for no cap.
        backward: Use '?' instead of '/' as delimiter.
    """
    delimiter = ord("?") if backward else ord("/")
    data = name.encode("utf-8")
    out = bytearray([delimiter])
    extra = 0

    for i, c in enumerate(data):
        is_last = i + 1 == len(data)

        if length_limit and len(out) > length_limit:
            # Only continuation bytes of the current character may go past
            # the limit, at most 3 of them.
            if c & 0xC0 != 0x80:
                break
            extra += 1
            if extra > 3:
                break

        if (
            c == BACKSLASH
            or c == delimiter
            or (c == ord("^") and len(out) == 1)
            or (c == ord("$") and (is_last or len(out) == length_limit))
        ):
            if len(out) == length_limit:
                break
            out.append(BACKSLASH)

        if c in (0x0D, 0x0A):
            if is_last:
                break
            out.append(0x20)
        else:
            out.append(c)

    out.append(delimiter)
    return out.decode("utf-8", errors="replace")


__all__ = ["make_pattern", "DEFAULT_PATTERN_LENGTH_LIMIT"]
