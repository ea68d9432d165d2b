# tagbridge/cli/config.py
"""
Config resolution for CLI commands: YAML file first, then CLI options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from tagbridge.cli import ui
from tagbridge.config.schema import BridgeConfig
from tagbridge.core.config import ConfigError, load_config


def load_cli_config(config: Optional[Path], overrides: Dict[str, Any]) -> BridgeConfig:
    """Load the config or exit with the loader's message."""
    try:
        return load_config(config, overrides=overrides)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)
