# tagbridge/cli/commands/run.py
"""
Run command: tag files through the external parser.

Usage:
    tagbridge run src/a.c src/b.c -p "python3 tagger.py" -k "function:f:d"
    tagbridge run src/a.c -c tagbridge.yaml -x "%R %-16{Extern.encodedName} %4n %F"
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from tagbridge.bridge import TagBridge
from tagbridge.cli import ui
from tagbridge.cli.config import load_cli_config
from tagbridge.core.exceptions import BridgeError
from tagbridge.logging.logger import configure_logging, get_logger
from tagbridge.logging.tags import CLI

logger = get_logger(__name__)


def command(
    files: List[Path],
    parser: Optional[str] = None,
    kinds: Optional[str] = None,
    xformat: Optional[str] = None,
    config: Optional[Path] = None,
    pattern_length_limit: Optional[int] = None,
    backward: Optional[bool] = None,
    disable_role: Optional[List[str]] = None,
    verbose: bool = False,
) -> None:
    """Tag files and write xref lines to stdout."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    cfg = load_cli_config(
        config,
        {
            "parser": parser,
            "kinds": kinds,
            "xformat": xformat,
            "pattern_length_limit": pattern_length_limit,
            "backward": backward,
            "disabled_roles": list(disable_role) if disable_role else None,
        },
    )
    logger.debug(f"{CLI} Tagging {len(files)} files with {cfg.parser!r}")

    # Input bytes that are not UTF-8 are written back out unchanged.
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    try:
        with TagBridge(cfg, output=sys.stdout) as bridge:
            bridge.run(files)
    except BridgeError as e:
        ui.error(str(e))
        raise typer.Exit(1)
