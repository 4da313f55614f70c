"""
termlaunch CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from termlaunch import __version__
from termlaunch.cli import config, open_cmd, platform
from termlaunch.core.config.env import load_layered_env

logger = logging.getLogger(__name__)

# Help panel names for command grouping
PANEL_LAUNCH = "Launch"
PANEL_SETTINGS = "Settings"

app = typer.Typer(
    name="termlaunch",
    help="Open a terminal in a directory running a command",
    no_args_is_help=True,
    add_completion=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for CLI commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    termlaunch - open a terminal in a directory running a command.

    The terminal is described by a template containing {DIR} and {CMD}
    placeholders, with a sensible default for macOS, Windows and Linux.

    Quick Start:
        termlaunch open                      # Terminal in cwd running the default command
        termlaunch open path/to/CLAUDE.md    # Terminal in the file's directory
        termlaunch open . --dry-run          # Show what would be spawned

    Settings:
        termlaunch config show               # Effective settings
        termlaunch config set --command claude --args "--resume"
        termlaunch templates                 # Example templates for this platform
        termlaunch config reset              # Back to platform defaults
    """
    setup_logging(debug)

    # Precedence: OS env > project .env > user .env
    if loaded := load_layered_env():
        logger.debug("Loaded %s from env files", ", ".join(sorted(loaded)))

    ctx.obj = {"debug": debug}


app.command(name="open", rich_help_panel=PANEL_LAUNCH)(open_cmd.open_terminal)
app.command(name="platform", rich_help_panel=PANEL_SETTINGS)(platform.platform)
app.command(name="templates", rich_help_panel=PANEL_SETTINGS)(platform.templates)
app.add_typer(config.app, name="config", rich_help_panel=PANEL_SETTINGS)


@app.command(rich_help_panel=PANEL_SETTINGS)
def version() -> None:
    """Show termlaunch version and exit."""
    console.print(f"termlaunch version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
