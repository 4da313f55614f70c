"""
termlaunch CLI - Config commands.

View, change, validate and reset the launcher settings stored in the
user config file.
"""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termlaunch.cli.errors import ExitCode, print_config_error, print_error
from termlaunch.core.config import (
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    load_config,
    reset_user_config,
    save_user_config,
)
from termlaunch.core.launch import TemplateError, validate_template
from termlaunch.core.services.launch import LaunchService

app = typer.Typer(
    name="config",
    help="View and change launcher settings",
    no_args_is_help=True,
)

console = Console()


@app.command()
def show(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output effective settings as JSON",
    ),
) -> None:
    """
    Show the effective settings after merging all config layers.

    Precedence: TERMLAUNCH_* env vars > .termlaunch.json > user config > defaults.
    """
    try:
        config = load_config(use_cache=False)
    except ValidationError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    if json_output:
        console.print_json(config.model_dump_json())
        return

    table = Table(title="termlaunch settings", show_header=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_row("terminal_template", escape(config.launcher.terminal_template))
    table.add_row("invocation_command", escape(config.launcher.invocation_command))
    extra = escape(config.launcher.additional_args) or "[dim](none)[/dim]"
    table.add_row("additional_args", extra)
    if config.grace_window_ms is not None:
        table.add_row("grace_window_ms", str(config.grace_window_ms))
    table.add_row("user config", escape(str(get_user_config_path())))
    table.add_row("project config", escape(str(get_project_config_path())))
    console.print(table)


@app.command(name="set")
def set_(
    template: str | None = typer.Option(
        None,
        "--template",
        "-t",
        help="Terminal template with {DIR} and {CMD} placeholders",
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
    grace_window_ms: int | None = typer.Option(
        None,
        "--grace-window-ms",
        help="Milliseconds to wait for spawn errors before reporting success",
        min=0,
        max=10000,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Save a template even if it fails validation",
    ),
) -> None:
    """
    Save launcher settings to the user config file.

    Examples:
        termlaunch config set --template 'xterm -e "cd {DIR} && {CMD}; exec bash"'
        termlaunch config set --command claude --args "--model sonnet"
    """
    launcher: dict[str, str] = {}
    if template is not None:
        try:
            validate_template(template)
        except TemplateError as e:
            if not force:
                print_error(
                    str(e),
                    reason=f"error: {e.kind.value}",
                    solution="termlaunch templates  # or pass --force to save anyway",
                )
                raise typer.Exit(ExitCode.USER_ERROR)
            console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")
        launcher["terminal_template"] = template
    if command is not None:
        launcher["invocation_command"] = command
    if args is not None:
        launcher["additional_args"] = args

    updates: dict[str, object] = {}
    if launcher:
        updates["launcher"] = launcher
    if grace_window_ms is not None:
        updates["grace_window_ms"] = grace_window_ms

    if not updates:
        print_error("Nothing to set", solution="termlaunch config set --help")
        raise typer.Exit(ExitCode.USER_ERROR)

    try:
        path = save_user_config(updates)
    except ValidationError as e:
        print_error("Invalid settings", reason=str(e))
        raise typer.Exit(ExitCode.USER_ERROR)
    except OSError as e:
        print_error("Failed to write config", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    console.print(f"[green]✓[/green] Saved settings to {escape(str(path))}", soft_wrap=True)


@app.command()
def reset(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation",
    ),
) -> None:
    """Reset launcher settings to the defaults for this platform."""
    if not yes and not typer.confirm("Reset launcher settings to platform defaults?"):
        raise typer.Exit(ExitCode.SUCCESS)

    try:
        path = reset_user_config()
    except OSError as e:
        print_error("Failed to write config", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    console.print(
        f"[green]✓[/green] Settings reset to defaults in {escape(str(path))}", soft_wrap=True
    )


@app.command()
def validate() -> None:
    """Check that the effective terminal template is usable."""
    clear_cache()
    try:
        service = LaunchService.from_config()
    except ValidationError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)
    result = service.validate()
    if not result.success:
        print_error(
            result.message or "Invalid terminal template",
            reason=f"error: {result.error_kind.value}" if result.error_kind else None,
            solution="termlaunch config reset",
        )
        raise typer.Exit(ExitCode.USER_ERROR)

    console.print("[green]✓[/green] Terminal template is valid")


__all__ = ["app"]
