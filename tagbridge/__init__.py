"""
tagbridge - tags from the output of an external parser.

tagbridge runs a user-supplied tagging program as a long-lived child process,
sends it one file path per line, reads back one JSON array of tags per file,
and turns those reports into ordered tag entries with an encoded name and a
summary field.

Quick Start:
    >>> from tagbridge import BridgeConfig, TagBridge
    >>> config = BridgeConfig(parser="python3 tagger.py", kinds="function:f:d,call:c:r:@")
    >>> with TagBridge(config) as bridge:
    ...     results = bridge.run(["src/main.c"])

Parser protocol:
    stdin:  src/main.c\\n
    stdout: [{"name": "main", "kind": "function", "line": 3}, ...]

Architecture:
    tagbridge/
    ├── core/         # Exceptions, models, kind registry, config loading
    ├── config/       # BridgeConfig schema and kind strings
    ├── channel/      # Parser process and JSON stream framing
    ├── ingestion/    # Record decoding, ordering, per-file driver
    ├── formatting/   # Encoded names and entry creation
    ├── host/         # Input cursor, patterns, templates, xref sink
    └── cli/          # typer application
"""

__version__ = "0.1.0"

from tagbridge.bridge import TagBridge
from tagbridge.config import BridgeConfig, KindConfig
from tagbridge.core import (
    BridgeError,
    ChannelError,
    ConfigurationError,
    DuplicateKindError,
    KindRegistry,
    KindSpec,
    RecordDecodeError,
    Role,
    TagEntry,
    TemplateError,
)
from tagbridge.ingestion import FileResult, RawTagRecord

__all__ = [
    "__version__",
    "TagBridge",
    "BridgeConfig",
    "KindConfig",
    "BridgeError",
    "ChannelError",
    "ConfigurationError",
    "DuplicateKindError",
    "RecordDecodeError",
    "TemplateError",
    "KindRegistry",
    "KindSpec",
    "Role",
    "TagEntry",
    "FileResult",
    "RawTagRecord",
]
