# tagbridge/ingestion/engine.py
"""
TagIngester - tags one input file through the external parser.

    file path
      -> ParserChannel.request()        (one JSON value)
      -> decode_records()               (array elements -> RawTagRecord)
      -> order_records()                (stable sort by line)
      -> InputFile.advance_to(line)     (host line cursor)
      -> KindRegistry.lookup_by_name()  (unknown kinds dropped)
      -> EntryFormatter.emit()          (entry handed to the host)

A response that is not an array, or whose strings are not valid Unicode,
yields no tags. A malformed array element aborts the run before any entry
of that file is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from tagbridge.channel.process import ParserChannel
from tagbridge.channel.stream import is_valid_unicode
from tagbridge.config.schema import BridgeConfig
from tagbridge.core.models import TagEntry
from tagbridge.core.registry import KindRegistry
from tagbridge.formatting.formatter import EntryFormatter
from tagbridge.host.base import TagHost
from tagbridge.host.input import InputFile
from tagbridge.ingestion.records import decode_records, order_records
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import INGEST

logger = get_logger(__name__)


@dataclass
class FileResult:
    """Outcome of tagging one file."""

    source: str
    received: int = 0
    unknown_kinds: int = 0
    entries: List[TagEntry] = field(default_factory=list)

    @property
    def emitted(self) -> int:
        return len(self.entries)

    @property
    def skipped(self) -> int:
        return self.received - self.unknown_kinds - self.emitted


class TagIngester:
    """
    Per-file tagging driver.

    Args:
        config: Run configuration (xref override, pattern settings).
        registry: Kind registry used to resolve record kinds.
        channel: Parser channel, shared across files.
        host: Host receiving entries.
        formatter: Entry formatter; built from config when omitted.
    """

    def __init__(
        self,
        *,
        config: BridgeConfig,
        registry: KindRegistry,
        channel: ParserChannel,
        host: TagHost,
        formatter: Optional[EntryFormatter] = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.channel = channel
        self.host = host
        self.formatter = formatter or EntryFormatter(
            registry,
            host,
            pattern_length_limit=config.pattern_length_limit,
            backward=config.backward,
        )

    def process(self, source: InputFile) -> FileResult:
        """
        Tag one file.

        Raises:
            ChannelError: If the parser cannot be reached.
            RecordDecodeError: If the response holds a malformed element.
            TemplateError: If an output or summary template fails.
        """
        result = FileResult(source=source.name)

        response = self.channel.request(source.name)
        if not isinstance(response, list):
            logger.debug(f"{INGEST} No tag array for {source.name}")
            return result

        if not is_valid_unicode(response):
            logger.warning(f"{INGEST} Invalid Unicode in tags for {source.name}, skipping file")
            return result

        records = order_records(decode_records(response, source.name))
        result.received = len(records)

        if self.config.xformat is not None:
            self.host.set_output_format(self.config.xformat)

        for record in records:
            source.advance_to(record.line)

            kind = self.registry.lookup_by_name(record.kind)
            if kind is None:
                logger.debug(f"{INGEST} Unknown kind {record.kind!r} for {record.name!r}")
                result.unknown_kinds += 1
                continue

            entry = self.formatter.emit(record, kind, source)
            if entry is not None:
                result.entries.append(entry)

        logger.debug(
            f"{INGEST} {source.name}: {result.received} records, "
            f"{result.emitted} emitted, {result.unknown_kinds} unknown kinds, "
            f"{result.skipped} skipped"
        )
        return result


__all__ = ["TagIngester", "FileResult"]
