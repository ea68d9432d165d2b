# tagbridge/ingestion/records.py
"""
Raw tag records reported by the external parser.

Each element of a parser response must be an object with a string `name`,
a string `kind` and an integer `line`. Other keys are ignored. Types are
checked strictly: "5", 5.0 and true are not line numbers.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from tagbridge.core.exceptions import RecordDecodeError


class RawTagRecord(BaseModel):
    """One tag as reported by the external parser."""

    name: StrictStr = Field(..., description="Tag name")
    kind: StrictStr = Field(..., description="Kind name")
    line: StrictInt = Field(..., description="1-based source line")

    model_config = ConfigDict(extra="ignore", frozen=True)


def _describe(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "element"
        details.append(f"{location}: {item['msg']}")
    return "; ".join(details)


def decode_records(elements: Sequence[Any], source: str) -> List[RawTagRecord]:
    """
    Decode every element of a response array.

    Raises:
        RecordDecodeError: On the first element that is not a valid record.
    """
    records = []
    for index, element in enumerate(elements):
        if not isinstance(element, dict):
            raise RecordDecodeError(
                f"Expected a JSON object, got {type(element).__name__}", index, source
            )
        try:
            records.append(RawTagRecord.model_validate(element))
        except ValidationError as e:
            raise RecordDecodeError(f"Cannot parse JSON object: {_describe(e)}", index, source) from e
    return records


def order_records(records: Sequence[RawTagRecord]) -> List[RawTagRecord]:
    """Sort by line; records on the same line keep their arrival order."""
    return sorted(records, key=lambda record: record.line)


__all__ = ["RawTagRecord", "decode_records", "order_records"]
