"""
termlaunch CLI - Open command.

Open a new terminal window in a directory running the configured command.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from termlaunch.cli.errors import (
    ExitCode,
    exit_code_for,
    print_config_error,
    print_error,
    print_launch_error,
)
from termlaunch.core.config import load_config
from termlaunch.core.config.models import TermlaunchConfig
from termlaunch.core.launch import LaunchError
from termlaunch.core.services.launch import LaunchService

console = Console()


def _apply_overrides(
    config: TermlaunchConfig,
    template: str | None,
    command: str | None,
    args: str | None,
) -> TermlaunchConfig:
    """Return a copy of config with command-line overrides applied."""
    updates = {
        key: value
        for key, value in (
            ("terminal_template", template),
            ("invocation_command", command),
            ("additional_args", args),
        )
        if value is not None
    }
    if not updates:
        return config
    launcher = config.launcher.model_copy(update=updates)
    return config.model_copy(update={"launcher": launcher})


def open_terminal(
    ctx: typer.Context,
    path: Path | None = typer.Argument(
        None,
        help="Directory to open, or a file whose directory to open (default: cwd)",
    ),
    template: str | None = typer.Option(
        None,
        "--template",
        "-t",
        help="Terminal template for this launch, with {DIR} and {CMD} placeholders",
    ),
    command: str | None = typer.Option(
        None,
        "--command",
        "-c",
        help="Command to run in the new terminal",
    ),
    args: str | None = typer.Option(
        None,
        "--args",
        "-a",
        help="Additional arguments appended to the command",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the resolved command instead of launching it",
    ),
) -> None:
    """
    Open a terminal in a directory and run a command in it.

    The terminal is started detached: it keeps running after termlaunch
    exits. Success means the terminal process started without an
    immediate error.

    Examples:
        termlaunch open
        termlaunch open ~/notes/project/CLAUDE.md
        termlaunch open . --command "claude" --args "--resume"
        termlaunch open . --template 'xterm -e "cd {DIR} && {CMD}"'
        termlaunch open . --dry-run
    """
    debug = bool(ctx.obj.get("debug", False)) if ctx.obj else False

    try:
        config = _apply_overrides(load_config(), template, command, args)
    except ValidationError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    service = LaunchService.from_config(config)

    if dry_run:
        try:
            resolved = service.preview(path)
        except LaunchError as e:
            print_error(str(e), reason=f"error: {e.kind.value}")
            raise typer.Exit(ExitCode.USER_ERROR)

        console.print(f"[bold]executable:[/bold] {escape(resolved.executable)}", soft_wrap=True)
        for arg in resolved.argv:
            console.print(f"[bold]arg:[/bold] {escape(arg)}", highlight=False, soft_wrap=True)
        if resolved.cwd:
            console.print(f"[bold]cwd:[/bold] {escape(resolved.cwd)}", soft_wrap=True)
        raise typer.Exit(ExitCode.SUCCESS)

    result = service.launch_sync(path)
    if not result.success:
        print_launch_error(result)
        raise typer.Exit(exit_code_for(result))

    console.print("[green]✓[/green] Terminal launched")
    if debug:
        console.print(f"[dim]platform: {service.platform.value}[/dim]")
