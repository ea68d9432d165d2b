# tagbridge/host/__init__.py
"""
Host-side collaborators the bridge talks to.

- InputFile: line cursor over the file being tagged
- make_pattern: search pattern synthesis
- TagTemplate: tag templating engine
- TagHost / XrefHost: the entry sink protocol and a collecting implementation
"""

from tagbridge.host.base import TagHost
from tagbridge.host.input import InputFile, compact_line
from tagbridge.host.pattern import DEFAULT_PATTERN_LENGTH_LIMIT, make_pattern
from tagbridge.host.template import DEFAULT_XREF_FORMAT, TagTemplate
from tagbridge.host.writer import XrefHost

__all__ = [
    "TagHost",
    "InputFile",
    "compact_line",
    "make_pattern",
    "DEFAULT_PATTERN_LENGTH_LIMIT",
    "TagTemplate",
    "DEFAULT_XREF_FORMAT",
    "XrefHost",
]
