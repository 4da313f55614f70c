"""
termlaunch CLI - Platform and templates commands.

Show the detected platform, its default terminal template, and example
templates for other terminal applications.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termlaunch.core.launch import (
    default_template,
    detect_platform,
    platform_display_name,
    template_examples,
)

console = Console()


def platform() -> None:
    """
    Show the detected platform and its default terminal template.

    Unrecognized platforms use the Linux default.
    """
    kind = detect_platform()
    console.print(f"[bold]Detected platform:[/bold] {platform_display_name(kind)}")
    console.print(
        f"[bold]Default template:[/bold] {escape(default_template(kind))}",
        highlight=False,
        soft_wrap=True,
    )


def templates(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output examples as JSON",
    ),
) -> None:
    """
    List example terminal templates for this platform.

    Use {DIR} for the directory and {CMD} for the command. Pick one and
    save it with `termlaunch config set --template '...'`.
    """
    kind = detect_platform()
    examples = template_examples(kind)

    if json_output:
        import json

        data = [{"name": e.name, "template": e.template} for e in examples]
        console.print_json(json.dumps(data))
        return

    table = Table(title=f"{platform_display_name(kind)} terminal templates")
    table.add_column("Terminal", style="cyan", no_wrap=True)
    table.add_column("Template", overflow="fold")
    for example in examples:
        table.add_row(example.name, escape(example.template))
    console.print(table)
