# tagbridge/core/models.py
"""
Core data models shared by the registry, the formatter and the host.

- Role / RoleDefinition: role classification of a kind
- KindSpec: a registered kind with its resolved format settings
- TagEntry: a host tag entry, with lazily rendered parser fields
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple


class Role(str, Enum):
    """Role classification of a kind."""

    DEFINITION = "definition"
    REFERENCE = "reference"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Role":
        """
        Classify a role string by its first letter.

        Anything that does not start with 'r' or 'o' is a definition.
        """
        first = (value or "")[:1]
        if first == "r":
            return cls.REFERENCE
        if first == "o":
            return cls.OTHER
        return cls.DEFINITION


@dataclass(frozen=True)
class RoleDefinition:
    """A role a non-definition kind carries."""

    name: str
    description: str


REFERENCE_ROLE = RoleDefinition(name="ref", description="reference")
OTHER_ROLE = RoleDefinition(name="other", description="other symbol")


def roles_for(role: Role) -> Tuple[RoleDefinition, ...]:
    """Return the role definitions registered for a role classification."""
    if role is Role.REFERENCE:
        return (REFERENCE_ROLE,)
    if role is Role.OTHER:
        return (OTHER_ROLE,)
    return ()


@dataclass(frozen=True)
class KindSpec:
    """
    A registered kind together with its format settings.

    Attributes:
        name: Kind name (unique key).
        letter: One-letter code (may be empty for best-effort configs).
        role: Role classification.
        index: Registration index, used as the kind id in tag entries.
        prefix: Name prefix for the encoded name ("" when unset).
        summary_format: Template for the summary field, None when unset.
    """

    name: str
    letter: str
    role: Role
    index: int
    prefix: str = ""
    summary_format: Optional[str] = None

    @property
    def roles(self) -> Tuple[RoleDefinition, ...]:
        return roles_for(self.role)

    @property
    def has_roles(self) -> bool:
        return len(self.roles) > 0


FieldRenderer = Callable[["TagEntry"], str]


@dataclass
class TagEntry:
    """
    A tag entry as the host sees it.

    Parser fields (encodedName, summary) are attached as renderers and are
    only computed when the host formats the entry.
    """

    name: str
    kind: KindSpec
    pattern: str
    input_name: str
    line_number: int
    input_line: str = ""
    role: Optional[RoleDefinition] = None
    parser_fields: Dict[str, FieldRenderer] = field(default_factory=dict, repr=False)

    @property
    def kind_id(self) -> int:
        return self.kind.index

    @property
    def is_definition(self) -> bool:
        return self.role is None

    def attach_field(self, name: str, renderer: FieldRenderer) -> None:
        self.parser_fields[name] = renderer

    def render_field(self, name: str) -> str:
        """Render an attached parser field. Raises KeyError when not attached."""
        return self.parser_fields[name](self)


__all__ = [
    "Role",
    "RoleDefinition",
    "REFERENCE_ROLE",
    "OTHER_ROLE",
    "roles_for",
    "KindSpec",
    "FieldRenderer",
    "TagEntry",
]
