# tagbridge/cli/cli.py
"""
tagbridge CLI - Main application.

Commands:
    tagbridge run      Tag files through an external parser
    tagbridge kinds    Show the configured kinds
    tagbridge version  Show the version

NOTE: Commands import their implementation only when invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="tagbridge",
    help="Generate tags from the output of an external parser.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("run")
def run(
    files: List[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Files to tag."),
    parser: Optional[str] = typer.Option(None, "--parser", "-p", help="External parser command."),
    kinds: Optional[str] = typer.Option(None, "--kinds", "-k", help="Kinds as kind:letter:role:prefix:summary,..."),
    xformat: Optional[str] = typer.Option(None, "--xformat", "-x", help="Xref output format."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    pattern_length_limit: Optional[int] = typer.Option(None, "--pattern-length-limit", help="Search pattern length cap (0 disables)."),
    backward: Optional[bool] = typer.Option(None, "--backward/--forward", help="Search pattern direction."),
    disable_role: Optional[List[str]] = typer.Option(None, "--disable-role", help="Disable a role (kind.role)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Tag files and print xref lines."""
    from tagbridge.cli.commands import run as mod

    mod.command(
        files=files,
        parser=parser,
        kinds=kinds,
        xformat=xformat,
        config=config,
        pattern_length_limit=pattern_length_limit,
        backward=backward,
        disable_role=disable_role,
        verbose=verbose,
    )


@app.command("kinds")
def kinds(
    kinds: Optional[str] = typer.Option(None, "--kinds", "-k", help="Kinds as kind:letter:role:prefix:summary,..."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
) -> None:
    """Show the configured kinds."""
    from tagbridge.cli.commands import kinds as mod

    mod.command(kinds=kinds, config=config)


@app.command("version")
def version() -> None:
    """Show the tagbridge version."""
    from tagbridge import __version__

    typer.echo(f"tagbridge version {__version__}")


if __name__ == "__main__":
    app()
