# tagbridge/host/template.py
"""
TagTemplate - the tag templating engine.

Format specifiers:
    %[-][width]X          single-letter field
    %[-][width]{field}    named field, parser fields may carry the
                          language prefix: %{Extern.encodedName}
    %%                    literal percent

'-' left-aligns, width pads with spaces and never truncates.

Letters:
    N name   F input file   P pattern   C compact input line   n line
    K kind   k kind letter  z kind      R D/R marker           r role

Example:
    >>> TagTemplate("%-16N %4n %C").render(entry)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from tagbridge.core.exceptions import TemplateError
from tagbridge.core.models import TagEntry
from tagbridge.host.input import compact_line

LANGUAGE = "Extern"
PARSER_FIELDS = ("encodedName", "summary")
DEFAULT_XREF_FORMAT = "%-16N %-10K %4n %-16F %C"

FieldGetter = Callable[[TagEntry], str]


def _role_name(entry: TagEntry) -> str:
    return entry.role.name if entry.role is not None else "def"


LETTER_FIELDS: Dict[str, FieldGetter] = {
    "N": lambda e: e.name,
    "F": lambda e: e.input_name,
    "P": lambda e: e.pattern,
    "C": lambda e: compact_line(e.input_line),
    "n": lambda e: str(e.line_number),
    "K": lambda e: e.kind.name,
    "k": lambda e: e.kind.letter,
    "z": lambda e: e.kind.name,
    "R": lambda e: "D" if e.is_definition else "R",
    "r": _role_name,
}

NAMED_FIELDS: Dict[str, FieldGetter] = {
    "name": LETTER_FIELDS["N"],
    "input": LETTER_FIELDS["F"],
    "pattern": LETTER_FIELDS["P"],
    "compact": LETTER_FIELDS["C"],
    "line": LETTER_FIELDS["n"],
    "kind": LETTER_FIELDS["K"],
    "roles": _role_name,
}


def _parser_field(name: str) -> FieldGetter:
    def render(entry: TagEntry) -> str:
        try:
            return entry.render_field(name)
        except KeyError:
            raise TemplateError(f"Field {name!r} is not attached to tag {entry.name!r}")

    return render


@dataclass(frozen=True)
class _Field:
    getter: FieldGetter
    width: int
    left: bool

    def render(self, entry: TagEntry) -> str:
        value = self.getter(entry)
        if self.left:
            return value.ljust(self.width)
        return value.rjust(self.width)


class TagTemplate:
    """A compiled tag template."""

    def __init__(self, fmt: str) -> None:
        self.fmt = fmt
        self._parts: List[Union[str, _Field]] = self._compile(fmt)

    def render(self, entry: TagEntry) -> str:
        out = []
        for part in self._parts:
            if isinstance(part, str):
                out.append(part)
            else:
                out.append(part.render(entry))
        return "".join(out)

    def _compile(self, fmt: str) -> List[Union[str, _Field]]:
        parts: List[Union[str, _Field]] = []
        literal: List[str] = []
        i = 0
        size = len(fmt)

        while i < size:
            char = fmt[i]
            i += 1
            if char != "%":
                literal.append(char)
                continue

            if i < size and fmt[i] == "%":
                literal.append("%")
                i += 1
                continue

            left = False
            if i < size and fmt[i] == "-":
                left = True
                i += 1

            start = i
            while i < size and fmt[i].isdigit():
                i += 1
            width = int(fmt[start:i]) if i > start else 0

            if i >= size:
                raise TemplateError("Incomplete format specifier", fmt)

            if fmt[i] == "{":
                end = fmt.find("}", i)
                if end < 0:
                    raise TemplateError("Unterminated '{' in format", fmt)
                getter = self._named(fmt[i + 1 : end], fmt)
                i = end + 1
            else:
                getter = LETTER_FIELDS.get(fmt[i])
                if getter is None:
                    raise TemplateError(f"Unknown field letter {fmt[i]!r}", fmt)
                i += 1

            if literal:
                parts.append("".join(literal))
                literal = []
            parts.append(_Field(getter=getter, width=width, left=left))

        if literal:
            parts.append("".join(literal))
        return parts

    @staticmethod
    def _named(name: str, fmt: str) -> FieldGetter:
        language, dot, field_name = name.rpartition(".")
        if dot and language != LANGUAGE:
            raise TemplateError(f"Unknown language in field {name!r}", fmt)

        if field_name in PARSER_FIELDS:
            return _parser_field(field_name)
        if not dot and field_name in NAMED_FIELDS:
            return NAMED_FIELDS[field_name]
        raise TemplateError(f"Unknown field {name!r}", fmt)


__all__ = ["TagTemplate", "DEFAULT_XREF_FORMAT", "LANGUAGE", "PARSER_FIELDS"]
