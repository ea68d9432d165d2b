# tagbridge/channel/process.py
"""
ParserChannel - the long-lived external parser process.

Lifecycle:
    UNOPENED --first request()--> OPEN --close()--> CLOSED

The child is spawned on the first request and then reused for every file in
the run. Each request writes one path line to the child's stdin and reads one
JSON value from its stdout. close() closes both pipes and reaps the child;
it is the only way out of OPEN and must run on every exit path, so the
channel is a context manager.

Usage:
    with ParserChannel("python3 tagger.py") as channel:
        response = channel.request("src/main.c")
"""

from __future__ import annotations

import os
import shlex
import subprocess
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from tagbridge.channel.stream import JsonStreamReader
from tagbridge.core.exceptions import ChannelError
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import CHANNEL

logger = get_logger(__name__)


class ChannelState(str, Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


def request_path(path: Union[str, Path], workdir: Optional[Union[str, Path]] = None) -> str:
    """
    Return the path to send to the parser.

    Absolute paths are made relative to workdir (default: the current
    directory). When no relative form exists the absolute path is kept.
    """
    path = os.fspath(path)
    if not os.path.isabs(path):
        return path

    base = os.fspath(workdir) if workdir is not None else os.getcwd()
    try:
        return os.path.relpath(path, base)
    except ValueError:
        return path


class ParserChannel:
    """
    Owns the external parser process and its two pipes.

    Args:
        command: Parser command line, split with shell-word rules.
        workdir: Base directory for relative request paths.
    """

    def __init__(
        self,
        command: Optional[str],
        workdir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.command = command
        self.workdir = workdir
        self.state = ChannelState.UNOPENED
        self._process: Optional[subprocess.Popen] = None
        self._reader: Optional[JsonStreamReader] = None

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process is not None else None

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode if self._process is not None else None

    def open(self) -> None:
        """
        Spawn the parser process.

        Raises:
            ChannelError: If no command is configured, the channel is not
                UNOPENED, or the process cannot be created.
        """
        if self.state is not ChannelState.UNOPENED:
            raise ChannelError(f"Cannot open a channel that is {self.state.value}", self.command)

        if not self.command:
            raise ChannelError("No parser command")

        try:
            argv = shlex.split(self.command)
        except ValueError as e:
            raise ChannelError(f"Cannot parse parser command: {e}", self.command) from e

        if not argv:
            raise ChannelError("No parser command")

        try:
            self._process = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
            )
        except OSError as e:
            raise ChannelError(f"Cannot execute {self.command} ({e})", self.command) from e

        self._reader = JsonStreamReader(self._process.stdout)
        self.state = ChannelState.OPEN
        logger.debug(f"{CHANNEL} Started parser pid={self._process.pid}: {self.command}")

    def request(self, path: Union[str, Path]) -> Any:
        """
        Send one file path and return the parser's JSON response.

        Opens the channel on first use. Returns stream.NO_VALUE when the
        parser produced no decodable value.

        Raises:
            ChannelError: If the channel is closed or the parser's stdin is gone.
        """
        if self.state is ChannelState.CLOSED:
            raise ChannelError("Parser channel is closed", self.command)

        if self.state is ChannelState.UNOPENED:
            self.open()

        line = request_path(path, self.workdir)
        logger.debug(f"{CHANNEL} Request: {line}")

        try:
            self._process.stdin.write(line.encode("utf-8") + b"\n")
            self._process.stdin.flush()
        except (BrokenPipeError, OSError) as e:
            raise ChannelError(f"Cannot write to parser ({e})", self.command) from e

        return self._reader.read_value()

    def close(self) -> None:
        """Close both pipes and wait for the parser to exit. Only the first call acts."""
        if self.state is ChannelState.CLOSED:
            return

        previous = self.state
        self.state = ChannelState.CLOSED

        if previous is ChannelState.UNOPENED:
            return

        process = self._process
        for pipe in (process.stdin, process.stdout):
            try:
                pipe.close()
            except OSError as e:
                logger.debug(f"{CHANNEL} Ignoring error while closing pipe: {e}")

        while True:
            try:
                returncode = process.wait()
                break
            except InterruptedError:
                continue

        logger.debug(f"{CHANNEL} Parser pid={process.pid} exited with {returncode}")

    def __enter__(self) -> "ParserChannel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["ChannelState", "ParserChannel", "request_path"]
