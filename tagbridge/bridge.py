# tagbridge/bridge.py
"""
TagBridge - wires registry, channel, ingester and formatter from one config.

Usage:
    config = BridgeConfig(parser="python3 tagger.py", kinds="function:f:d")
    with TagBridge(config, output=sys.stdout) as bridge:
        bridge.run(["src/a.c", "src/b.c"])

The parser process lives as long as the bridge; leaving the `with` block
(normally or through an exception) closes it and reaps the child.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from tagbridge.channel.process import ParserChannel
from tagbridge.config.kinds import build_registry
from tagbridge.config.schema import BridgeConfig
from tagbridge.host.base import TagHost
from tagbridge.host.input import InputFile
from tagbridge.host.writer import XrefHost
from tagbridge.ingestion.engine import FileResult, TagIngester
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import INGEST

logger = get_logger(__name__)


class TagBridge:
    """
    One run of the external parser bridge.

    Args:
        config: Run configuration.
        host: Host receiving entries. Defaults to an XrefHost.
        output: Output stream for the default XrefHost.

    Raises:
        ConfigurationError: If the kind configuration is invalid.
    """

    def __init__(
        self,
        config: BridgeConfig,
        host: Optional[TagHost] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.registry = build_registry(config.kinds)
        self.host = host if host is not None else XrefHost(
            output=output, disabled_roles=config.disabled_roles
        )
        self.channel = ParserChannel(config.parser, workdir=config.workdir)
        self.ingester = TagIngester(
            config=config,
            registry=self.registry,
            channel=self.channel,
            host=self.host,
        )

    def tag_file(self, path: Union[str, Path]) -> FileResult:
        """Tag one file."""
        with InputFile.open(path) as source:
            return self.ingester.process(source)

    def run(self, paths: Iterable[Union[str, Path]]) -> List[FileResult]:
        """Tag files in order; stops at the first fatal error."""
        results = [self.tag_file(path) for path in paths]
        logger.info(
            f"{INGEST} Tagged {len(results)} files, "
            f"{sum(r.emitted for r in results)} entries"
        )
        return results

    def close(self) -> None:
        self.channel.close()

    def __enter__(self) -> "TagBridge":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["TagBridge"]
