# tagbridge/core/exceptions.py
"""
Exception hierarchy for the tag bridge.

Every error raised by the bridge is fatal for the current run. Recoverable
conditions (unknown kinds, disabled roles, non-array responses) are never
raised; they are logged and skipped where they occur.
"""

from __future__ import annotations

from typing import Optional


class BridgeError(Exception):
    """Base class for all tag bridge errors."""

    pass


class ConfigurationError(BridgeError):
    """Raised when kind or format configuration is invalid."""

    pass


class DuplicateKindError(ConfigurationError):
    """Raised when the same kind name is registered twice."""

    pass


class ChannelError(BridgeError):
    """Raised when the external parser process cannot be used."""

    def __init__(self, message: str, command: Optional[str] = None):
        self.command = command
        super().__init__(message)


class RecordDecodeError(BridgeError):
    """Raised when an element of a parser response is not a valid tag record."""

    def __init__(self, message: str, index: int, source: str):
        self.index = index
        self.source = source
        super().__init__(f"{message} (element {index} of response for {source})")


class TemplateError(BridgeError):
    """Raised when a tag template cannot be compiled or rendered."""

    def __init__(self, message: str, template: Optional[str] = None):
        self.template = template
        if template is not None:
            message = f"{message} (template: {template!r})"
        super().__init__(message)


__all__ = [
    "BridgeError",
    "ConfigurationError",
    "DuplicateKindError",
    "ChannelError",
    "RecordDecodeError",
    "TemplateError",
]
