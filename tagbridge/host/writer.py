# tagbridge/host/writer.py
"""
XrefHost - a TagHost that collects entries and writes xref lines.

Each accepted entry is kept in `entries` and, when an output stream is
given, rendered with the current output template and written as one line.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, TextIO

from tagbridge.core.models import KindSpec, RoleDefinition, TagEntry
from tagbridge.host.template import DEFAULT_XREF_FORMAT, TagTemplate
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import FORMAT

logger = get_logger(__name__)


class XrefHost:
    """
    Collecting host with cross-reference output.

    Args:
        output: Stream for rendered lines, or None to only collect.
        disabled_roles: "kind.role" pairs whose tags are not produced.
        fmt: Initial output format.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        disabled_roles: Iterable[str] = (),
        fmt: str = DEFAULT_XREF_FORMAT,
    ) -> None:
        self.output = output
        self.disabled_roles: Set[str] = set(disabled_roles)
        self.template = TagTemplate(fmt)
        self.entries: List[TagEntry] = []

    def is_role_enabled(self, kind: KindSpec, role: RoleDefinition) -> bool:
        return f"{kind.name}.{role.name}" not in self.disabled_roles

    def compile_template(self, fmt: str) -> TagTemplate:
        return TagTemplate(fmt)

    def set_output_format(self, fmt: str) -> None:
        if fmt == self.template.fmt:
            return
        self.template = TagTemplate(fmt)
        logger.debug(f"{FORMAT} Output format set to {fmt!r}")

    def make_tag_entry(self, entry: TagEntry) -> None:
        self.entries.append(entry)
        if self.output is not None:
            self.output.write(self.template.render(entry) + "\n")

    def render(self, entry: TagEntry) -> str:
        return self.template.render(entry)


__all__ = ["XrefHost"]
