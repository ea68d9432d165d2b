# tagbridge/core/__init__.py
"""
Core contracts: exceptions, data models and the kind registry.
"""

from tagbridge.core.exceptions import (
    BridgeError,
    ChannelError,
    ConfigurationError,
    DuplicateKindError,
    RecordDecodeError,
    TemplateError,
)
from tagbridge.core.models import KindSpec, Role, RoleDefinition, TagEntry
from tagbridge.core.registry import KindRegistry

__all__ = [
    "BridgeError",
    "ChannelError",
    "ConfigurationError",
    "DuplicateKindError",
    "RecordDecodeError",
    "TemplateError",
    "KindSpec",
    "Role",
    "RoleDefinition",
    "TagEntry",
    "KindRegistry",
]
