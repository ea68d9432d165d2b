# tagbridge/core/registry.py
"""
Kind/Format Registry.

Holds the kinds reported by the external parser and their per-kind format
settings (name prefix, summary template). Kinds and formats are kept in two
maps keyed by kind name: a format may be recorded for a name before (or
without) the kind being registered, and its prefix still takes part in
encoded-name collision checks.

Configuration is written once at setup and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from tagbridge.core.exceptions import ConfigurationError, DuplicateKindError
from tagbridge.core.models import KindSpec, Role
from tagbridge.logging.logger import get_logger
from tagbridge.logging.tags import REGISTRY

logger = get_logger(__name__)


def validate_prefix(prefix: str) -> None:
    """Raise ConfigurationError unless prefix is printable 7-bit ASCII without '%'."""
    for char in prefix:
        if not ("\x21" <= char <= "\x7e") or char == "%":
            raise ConfigurationError(
                f"Invalid character {char!r} in prefix {prefix!r}: "
                "prefixes must be printable 7-bit ASCII without '%'"
            )


@dataclass
class TagFormat:
    """Format settings recorded for one kind name."""

    kind: str
    prefix: Optional[str] = None
    summary_format: Optional[str] = None


@dataclass
class _KindDefinition:
    name: str
    letter: str
    role: Role
    index: int


@dataclass
class KindRegistry:
    """
    Registry of kinds and their format settings.

    Example:
        registry = KindRegistry()
        registry.register("function", "f", "definition")
        registry.set_format("function", prefix="fn:")
        spec = registry.lookup_by_name("function")
    """

    _kinds: Dict[str, _KindDefinition] = field(default_factory=dict, repr=False)
    _by_index: List[str] = field(default_factory=list, repr=False)
    _formats: Dict[str, TagFormat] = field(default_factory=dict, repr=False)

    def register(
        self,
        name: Optional[str],
        letter: Optional[str],
        role: Optional[str] = None,
        *,
        allow_empty_letter: bool = False,
    ) -> KindSpec:
        """
        Register a kind.

        Args:
            name: Kind name.
            letter: One-letter code.
            role: Role string, classified by its first letter (d/r/o).
            allow_empty_letter: Accept an empty letter (used when loading
                best-effort configuration strings).

        Raises:
            ConfigurationError: If name is missing or letter is empty.
            DuplicateKindError: If the kind is already registered.
        """
        if name is None:
            raise ConfigurationError("Kind name is required")

        if not letter and not allow_empty_letter:
            raise ConfigurationError(f"Kind {name!r} has no letter")

        if name in self._kinds:
            raise DuplicateKindError(f"Duplicate kind: {name!r}")

        definition = _KindDefinition(
            name=name,
            letter=(letter or "")[:1],
            role=Role.from_string(role),
            index=len(self._by_index),
        )
        self._kinds[name] = definition
        self._by_index.append(name)

        logger.debug(
            f"{REGISTRY} Registered kind {name!r} letter={definition.letter!r} "
            f"role={definition.role.value} index={definition.index}"
        )
        return self._spec(definition)

    def set_format(
        self,
        name: str,
        prefix: Optional[str] = None,
        summary_format: Optional[str] = None,
    ) -> None:
        """
        Attach or update the prefix and/or summary format of a kind name.

        A call supplying neither is a no-op. Values that are None leave the
        previously recorded value untouched.
        """
        if prefix is None and summary_format is None:
            return

        if prefix is not None:
            validate_prefix(prefix)

        fmt = self._formats.get(name)
        if fmt is None:
            fmt = TagFormat(kind=name)
            self._formats[name] = fmt

        if prefix is not None:
            fmt.prefix = prefix
        if summary_format is not None:
            fmt.summary_format = summary_format

        logger.debug(f"{REGISTRY} Format for {name!r}: {fmt}")

    def lookup_by_name(self, name: str) -> Optional[KindSpec]:
        definition = self._kinds.get(name)
        if definition is None:
            return None
        return self._spec(definition)

    def lookup_by_index(self, index: int) -> Optional[KindSpec]:
        if index < 0 or index >= len(self._by_index):
            return None
        return self._spec(self._kinds[self._by_index[index]])

    def get_format(self, name: str) -> Optional[TagFormat]:
        return self._formats.get(name)

    def prefixes(self) -> Dict[str, str]:
        """Non-empty prefixes by kind name, in the order they were first configured."""
        return {name: fmt.prefix for name, fmt in self._formats.items() if fmt.prefix}

    def kinds(self) -> List[KindSpec]:
        """All registered kinds in registration order."""
        return [self._spec(self._kinds[name]) for name in self._by_index]

    def __iter__(self) -> Iterator[KindSpec]:
        return iter(self.kinds())

    def __len__(self) -> int:
        return len(self._by_index)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def _spec(self, definition: _KindDefinition) -> KindSpec:
        fmt = self._formats.get(definition.name)
        return KindSpec(
            name=definition.name,
            letter=definition.letter,
            role=definition.role,
            index=definition.index,
            prefix=(fmt.prefix or "") if fmt else "",
            summary_format=fmt.summary_format if fmt else None,
        )


__all__ = ["KindRegistry", "TagFormat", "validate_prefix"]
