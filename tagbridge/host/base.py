# tagbridge/host/base.py
"""
TagHost protocol - what the bridge needs from the indexing host.

Flow: TagIngester → EntryFormatter → TagHost.make_tag_entry()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tagbridge.core.models import KindSpec, RoleDefinition, TagEntry
from tagbridge.host.template import TagTemplate


@runtime_checkable
class TagHost(Protocol):
    """
    Protocol for tag hosts.

    Hosts receive finished tag entries, decide whether roles are enabled,
    and own the templating engine and the output format.
    """

    def is_role_enabled(self, kind: KindSpec, role: RoleDefinition) -> bool:
        """Return False if tags of this kind/role must not be produced."""
        ...

    def compile_template(self, fmt: str) -> TagTemplate:
        """
        Compile a tag template.

        Raises:
            TemplateError: If the format is invalid.
        """
        ...

    def set_output_format(self, fmt: str) -> None:
        """Replace the output format for the rest of the run."""
        ...

    def make_tag_entry(self, entry: TagEntry) -> None:
        """Accept a finished tag entry."""
        ...


__all__ = ["TagHost"]
