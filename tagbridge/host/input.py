# tagbridge/host/input.py
"""
InputFile - forward-only line cursor over one source file.

The bridge advances the cursor to each tag's line before creating the entry,
so the entry can refer to the text of that line (%C, %n).
Bytes that are not valid UTF-8 are kept as surrogate escapes, so they can
be written back out unchanged with errors="surrogateescape".
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union


class InputFile:
    """
    Line cursor over one input file.

    line_number is 0 before the first read_line() call and then the number
    of the line held in current_line.
    """

    def __init__(self, name: str, stream: IO[str]) -> None:
        self.name = name
        self._stream = stream
        self.line_number = 0
        self.current_line = ""
        self.exhausted = False

    @classmethod
    def open(cls, path: Union[str, Path], encoding: str = "utf-8") -> "InputFile":
        stream = open(path, "r", encoding=encoding, errors="surrogateescape", newline="")
        return cls(str(path), stream)

    def read_line(self) -> Optional[str]:
        """Advance one line. Returns None (and keeps the last line) at end of input."""
        if self.exhausted:
            return None

        line = self._stream.readline()
        if not line:
            self.exhausted = True
            return None

        self.line_number += 1
        self.current_line = line
        return line

    def advance_to(self, line: int) -> int:
        """Read forward until line_number >= line or input ends. Never moves back."""
        while self.line_number < line:
            if self.read_line() is None:
                break
        return self.line_number

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "InputFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def compact_line(line: str) -> str:
    """Strip a line and collapse internal whitespace runs to single spaces."""
    return " ".join(line.split())


__all__ = ["InputFile", "compact_line"]
