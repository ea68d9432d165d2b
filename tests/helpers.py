# tests/helpers.py
"""Test doubles shared across test modules."""

from __future__ import annotations

import io
from typing import List

from tagbridge.channel.stream import NO_VALUE
from tagbridge.host.input import InputFile


def make_input(text: str, name: str = "sample.c") -> InputFile:
    """InputFile over an in-memory string."""
    return InputFile(name, io.StringIO(text))


class FakeChannel:
    """Stands in for ParserChannel, returning canned responses in order."""

    def __init__(self, responses: List[object]):
        self.responses = list(responses)
        self.requests: List[str] = []

    def request(self, path) -> object:
        self.requests.append(str(path))
        if not self.responses:
            return NO_VALUE
        return self.responses.pop(0)

    def close(self) -> None:
        pass
