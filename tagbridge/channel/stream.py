# tagbridge/channel/stream.py
"""
Reads concatenated JSON values from a byte stream, one value per call.

The external parser writes one JSON document per request and keeps its
output open, so the end of a document cannot be found by reading to EOF.
JsonStreamReader pushes whatever bytes the pipe has into an ijson
items coroutine (multiple_values mode) and returns as soon as one
top-level value is complete. Values completed in the same chunk are
queued for the next call.

A value is only handed out if all of its strings are valid Unicode, so
a lone surrogate escape such as "\\ud800" counts as undecodable output.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any, BinaryIO, Deque

import ijson

from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import CHANNEL

logger = get_logger(__name__)

CHUNK_SIZE = 65536

# Returned by read_value() when no value could be decoded.
NO_VALUE = object()


def _items_coro(target: list):
    return ijson.items_coro(target, "", multiple_values=True, use_float=True)


def is_valid_unicode(value: Any) -> bool:
    """True if every string in value can be encoded as UTF-8."""
    try:
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class JsonStreamReader:
    """
    Decode one JSON value at a time from a binary stream.

    read_value() returns the decoded value, or NO_VALUE when the stream
    ended before a value completed or the parser output is not valid JSON.
    After invalid output the reader starts over with the next chunk.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = CHUNK_SIZE):
        self._stream = stream
        self._chunk_size = chunk_size
        self._values = ijson.sendable_list()
        self._coro = _items_coro(self._values)
        self._pending: Deque[Any] = deque()
        self._eof = False

    @property
    def at_eof(self) -> bool:
        return self._eof and not self._pending

    def read_value(self) -> Any:
        while not self._pending:
            if self._eof:
                logger.warning(f"{CHANNEL} Parser output ended before a JSON value")
                return NO_VALUE

            try:
                self._feed()
            except (ijson.JSONError, ValueError) as e:
                self._collect()
                self._values = ijson.sendable_list()
                self._coro = _items_coro(self._values)
                logger.warning(f"{CHANNEL} Undecodable parser output: {e}")
                if not self._pending:
                    return NO_VALUE

        value = self._pending.popleft()
        if not is_valid_unicode(value):
            logger.warning(f"{CHANNEL} Undecodable parser output: invalid Unicode in strings")
            return NO_VALUE
        return value

    def _feed(self) -> None:
        """Push one chunk (or end of stream) into the coroutine."""
        read = getattr(self._stream, "read1", None) or self._stream.read
        chunk = read(self._chunk_size)

        if chunk:
            self._coro.send(chunk)
        else:
            self._eof = True
            self._coro.close()
        self._collect()

    def _collect(self) -> None:
        self._pending.extend(self._values)
        del self._values[:]


__all__ = ["JsonStreamReader", "NO_VALUE", "CHUNK_SIZE", "is_valid_unicode"]
