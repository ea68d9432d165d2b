# tagbridge/logging/logger.py
"""
Unified logging setup for tagbridge.

All modules use:
    from tagbridge.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging(), normally from the CLI.
Logs go to stderr so that tag output on stdout stays machine-readable.
"""

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=None,
):
    """
    Configure the root logging handler.

    Safe to call multiple times; only the level changes on repeated calls.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here.
    """
    return logging.getLogger(name)
