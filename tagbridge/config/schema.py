# tagbridge/config/schema.py
"""
Configuration schemas for the tag bridge.

This module defines Pydantic models for:
- KindConfig: One kind reported by the external parser
- BridgeConfig: Top-level run configuration
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KindConfig(BaseModel):
    """
    Configuration of one parser kind.

    Example:
        >>> KindConfig(name="cite", letter="c", role="reference", prefix="@")
    """

    name: str = Field(..., description="Kind name as reported by the parser")
    letter: str = Field(default="", description="One-letter kind code")
    role: str = Field(
        default="definition",
        description="definition, reference or other (first letter is checked)",
    )
    prefix: Optional[str] = Field(default=None, description="Encoded name prefix")
    summary: Optional[str] = Field(default=None, description="Summary template")

    model_config = ConfigDict(extra="forbid", frozen=True)


class BridgeConfig(BaseModel):
    """
    Central configuration for a tag bridge run.

    Example YAML:
        parser: python3 my_tagger.py
        kinds:
          - name: function
            letter: f
            role: definition
          - name: call
            letter: c
            role: reference
            prefix: "@"
            summary: "%{Extern.encodedName} %C"
        xformat: "%R %-16{Extern.encodedName} %-10z %4n %-16F %{Extern.summary}"
        pattern_length_limit: 96

    `kinds` also accepts the compact string form
    "function:f:d,call:c:r:@:%C".
    """

    parser: Optional[str] = Field(default=None, description="External parser command")
    kinds: List[KindConfig] = Field(default_factory=list, description="Parser kinds")
    xformat: Optional[str] = Field(default=None, description="Xref output format override")
    pattern_length_limit: int = Field(
        default=96, ge=0, description="Search pattern length cap (0 disables)"
    )
    backward: bool = Field(default=False, description="Use backward search patterns")
    disabled_roles: List[str] = Field(
        default_factory=list, description="Disabled roles as kind.role pairs"
    )
    workdir: Optional[Path] = Field(
        default=None, description="Base directory for relative request paths"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("kinds", mode="before")
    @classmethod
    def parse_kind_string(cls, v: Any) -> Any:
        """Accept the comma-separated kind string form."""
        if isinstance(v, str):
            from tagbridge.config.kinds import parse_kind_spec

            return parse_kind_spec(v)
        return v

    @field_validator("disabled_roles")
    @classmethod
    def check_role_pairs(cls, v: List[str]) -> List[str]:
        for item in v:
            kind, _, role = item.rpartition(".")
            if not kind or not role:
                raise ValueError(f"Expected kind.role, got {item!r}")
        return v


__all__ = ["KindConfig", "BridgeConfig"]
