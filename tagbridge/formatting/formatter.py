# tagbridge/formatting/formatter.py
"""
EntryFormatter - turns a resolved tag record into a host tag entry.

For each record it:
    1. resolves the role (definition, or the kind's single role)
    2. builds the search pattern from the raw name
    3. attaches the encodedName and summary fields (rendered lazily)
    4. hands the entry to the host
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Set

from tagbridge.core.exceptions import TemplateError
from tagbridge.core.models import KindSpec, TagEntry
from tagbridge.core.registry import KindRegistry
from tagbridge.formatting.encoding import encode_name
from tagbridge.host.base import TagHost
from tagbridge.host.input import InputFile
from tagbridge.host.pattern import DEFAULT_PATTERN_LENGTH_LIMIT, make_pattern
from tagbridge.host.template import TagTemplate
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import FORMAT

if TYPE_CHECKING:
    from tagbridge.ingestion.records import RawTagRecord

logger = get_logger(__name__)

ENCODED_NAME_FIELD = "encodedName"
SUMMARY_FIELD = "summary"
COMPACT_LINE_FORMAT = "%C"


class EntryFormatter:
    """
    Builds and submits host tag entries.

    Args:
        registry: Kind registry, consulted for prefixes at render time.
        host: The host receiving entries.
        pattern_length_limit: Search pattern cap (0 disables).
        backward: Use backward search patterns.
    """

    def __init__(
        self,
        registry: KindRegistry,
        host: TagHost,
        pattern_length_limit: int = DEFAULT_PATTERN_LENGTH_LIMIT,
        backward: bool = False,
    ) -> None:
        self.registry = registry
        self.host = host
        self.pattern_length_limit = pattern_length_limit
        self.backward = backward
        self._templates: Dict[str, TagTemplate] = {}
        self._rendering: Set[int] = set()

    def emit(self, record: RawTagRecord, kind: KindSpec, source: InputFile) -> Optional[TagEntry]:
        """
        Create the entry for record and submit it.

        Returns the entry, or None when the kind's role is disabled.
        """
        role = None
        if kind.has_roles:
            role = kind.roles[0]
            if not self.host.is_role_enabled(kind, role):
                logger.debug(f"{FORMAT} Role {kind.name}.{role.name} disabled, skipping {record.name!r}")
                return None

        entry = TagEntry(
            name=record.name,
            kind=kind,
            pattern=make_pattern(record.name, self.pattern_length_limit, self.backward),
            input_name=source.name,
            line_number=source.line_number,
            input_line=source.current_line,
            role=role,
        )
        entry.attach_field(ENCODED_NAME_FIELD, self.render_encoded_name)
        entry.attach_field(SUMMARY_FIELD, self.render_summary)

        self.host.make_tag_entry(entry)
        return entry

    def render_encoded_name(self, entry: TagEntry) -> str:
        others = [
            prefix
            for name, prefix in self.registry.prefixes().items()
            if name != entry.kind.name
        ]
        return encode_name(entry.name, entry.kind.prefix, others)

    def render_summary(self, entry: TagEntry) -> str:
        """
        Render the kind's summary format, or the compact input line.

        Raises:
            TemplateError: If the format is invalid or refers back to summary.
        """
        fmt = entry.kind.summary_format or COMPACT_LINE_FORMAT

        key = id(entry)
        if key in self._rendering:
            raise TemplateError(f"Recursive field reference in summary of kind {entry.kind.name!r}", fmt)

        self._rendering.add(key)
        try:
            return self._template(fmt).render(entry)
        finally:
            self._rendering.discard(key)

    def _template(self, fmt: str) -> TagTemplate:
        template = self._templates.get(fmt)
        if template is None:
            template = self.host.compile_template(fmt)
            self._templates[fmt] = template
        return template


__all__ = ["EntryFormatter", "ENCODED_NAME_FIELD", "SUMMARY_FIELD"]
