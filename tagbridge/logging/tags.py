# tagbridge/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output is searchable per subsystem.
"""

CHANNEL = "[CHANNEL]"
INGEST = "[INGEST]"
FORMAT = "[FORMAT]"
REGISTRY = "[REGISTRY]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
