"""
Standardized error handling and exit codes for the termlaunch CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from termlaunch.core.launch.models import ErrorKind, LaunchResult

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for termlaunch CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Launch failed in the environment (command missing, spawn error)."""

    USER_ERROR = 2
    """Configuration or input error (actionable by user)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


# Failures the user fixes by editing settings or arguments
_USER_ERROR_KINDS = {
    ErrorKind.EMPTY_TEMPLATE,
    ErrorKind.MISSING_PLACEHOLDER,
    ErrorKind.INVALID_DIRECTORY,
}

_SOLUTIONS = {
    ErrorKind.EMPTY_TEMPLATE: "termlaunch config reset  # restore the platform default",
    ErrorKind.MISSING_PLACEHOLDER: "termlaunch templates  # show working examples",
    ErrorKind.INVALID_DIRECTORY: "pass an existing directory without '..' segments",
    ErrorKind.COMMAND_NOT_FOUND: "termlaunch config set --template ...  # pick an installed terminal",
    ErrorKind.PERMISSION_DENIED: "check the terminal application's execute permissions",
}


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Terminal template is empty",
        ...     solution="termlaunch config reset",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}", soft_wrap=True)

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]", soft_wrap=True)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_config_error(error: ValidationError) -> None:
    """Print a config file or env value that failed validation."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )
    print_error(
        "Invalid termlaunch configuration",
        reason=problems,
        solution="fix the value in .termlaunch.json, the user config, or TERMLAUNCH_* env",
    )


def exit_code_for(result: LaunchResult) -> ExitCode:
    """Map a launch result to a process exit code."""
    if result.success:
        return ExitCode.SUCCESS
    if result.error_kind in _USER_ERROR_KINDS:
        return ExitCode.USER_ERROR
    return ExitCode.GENERAL_ERROR


def print_launch_error(result: LaunchResult) -> None:
    """Print a failed launch result."""
    kind = result.error_kind
    print_error(
        result.message or "Failed to launch terminal",
        reason=f"error: {kind.value}" if kind else None,
        solution=_SOLUTIONS.get(kind) if kind else None,
    )


__all__ = [
    "ExitCode",
    "console",
    "exit_code_for",
    "print_config_error",
    "print_error",
    "print_launch_error",
]
