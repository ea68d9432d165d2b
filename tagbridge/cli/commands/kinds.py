# tagbridge/cli/commands/kinds.py
"""
Kinds command: show the kinds a configuration defines.

Usage:
    tagbridge kinds -k "function:f:d,call:c:r:@"
    tagbridge kinds -c tagbridge.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tagbridge.cli import ui
from tagbridge.cli.config import load_cli_config
from tagbridge.config.kinds import build_registry
from tagbridge.core.exceptions import ConfigurationError


def command(kinds: Optional[str] = None, config: Optional[Path] = None) -> None:
    """Print a table of the configured kinds."""
    cfg = load_cli_config(config, {"kinds": kinds})

    try:
        registry = build_registry(cfg.kinds)
    except ConfigurationError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    if not len(registry):
        ui.info("No kinds configured.")
        return

    ui.console.print(ui.kinds_table(registry.kinds()))
