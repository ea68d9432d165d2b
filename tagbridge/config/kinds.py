# tagbridge/config/kinds.py
"""
Kind configuration strings.

Grammar (comma-separated entries, every field after the name optional):

    kind:letter:role:prefix:summaryFormat[,kind:letter:...]

Each entry is split left to right on the next ':'; the summary format takes
the remainder of the entry and may itself contain ':'. Only the first
character of the letter field is used. An entry without a letter is still
accepted and registers a kind with an empty letter.

Example:
    >>> [k.name for k in parse_kind_spec("function:f:d,call:c:r:@")]
    ['function', 'call']
"""

from __future__ import annotations

from typing import Iterable, List

from tagbridge.config.schema import KindConfig
from tagbridge.core.registry import KindRegistry
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import CONFIG

logger = get_logger(__name__)


def parse_kind_entry(entry: str) -> KindConfig:
    """Parse one `kind:letter:role:prefix:summaryFormat` entry."""
    fields = entry.split(":", 4)
    fields += [None] * (5 - len(fields))
    name, letter, role, prefix, summary = fields

    if not letter:
        logger.warning(f"{CONFIG} Kind {name!r} has no letter")

    return KindConfig(
        name=name,
        letter=(letter or "")[:1],
        role=role or "definition",
        prefix=prefix,
        summary=summary,
    )


def parse_kind_spec(spec: str) -> List[KindConfig]:
    """Parse a comma-separated kind configuration string."""
    kinds = []
    for entry in spec.split(","):
        if not entry:
            continue
        kinds.append(parse_kind_entry(entry))
    return kinds


def build_registry(kinds: Iterable[KindConfig]) -> KindRegistry:
    """
    Register every configured kind and its format settings.

    Raises:
        ConfigurationError: On duplicate kinds or invalid prefixes.
    """
    registry = KindRegistry()
    for kind in kinds:
        registry.register(kind.name, kind.letter, kind.role, allow_empty_letter=True)
        registry.set_format(kind.name, prefix=kind.prefix, summary_format=kind.summary)

    logger.debug(f"{CONFIG} Configured {len(registry)} kinds")
    return registry


__all__ = ["parse_kind_entry", "parse_kind_spec", "build_registry"]
