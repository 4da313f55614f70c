"""
Data models for the terminal launch subsystem.

Defines typed inputs and outputs for platform detection, command
resolution and detached process launching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PlatformKind(str, Enum):
    """Closed set of host platforms the launcher distinguishes."""

    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    UNKNOWN = "unknown"  # Handled with the Linux-style fallback


class ErrorKind(str, Enum):
    """Why a launch request failed."""

    EMPTY_TEMPLATE = "empty_template"
    MISSING_PLACEHOLDER = "missing_placeholder"
    INVALID_DIRECTORY = "invalid_directory"
    COMMAND_NOT_FOUND = "command_not_found"
    PERMISSION_DENIED = "permission_denied"
    SPAWN_FAILED = "spawn_failed"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_TEMPLATE: "Terminal template is empty.",
    ErrorKind.MISSING_PLACEHOLDER: (
        "Terminal template must contain {DIR} and {CMD} placeholders."
    ),
    ErrorKind.INVALID_DIRECTORY: "Invalid directory path. Cannot launch terminal.",
    ErrorKind.COMMAND_NOT_FOUND: (
        "Command not found. Ensure it is installed and in your PATH."
    ),
    ErrorKind.PERMISSION_DENIED: (
        "Permission denied. Check your terminal settings and system permissions."
    ),
    ErrorKind.SPAWN_FAILED: "Failed to launch terminal: ",
}


class LaunchError(Exception):
    """Base exception for launch failures, tagged with an ErrorKind."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or ERROR_MESSAGES[kind])


class TemplateError(LaunchError):
    """Terminal template failed validation."""


class InvalidDirectoryError(LaunchError):
    """Working directory is traversing, missing, or not a directory."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            ErrorKind.INVALID_DIRECTORY,
            f"{ERROR_MESSAGES[ErrorKind.INVALID_DIRECTORY]} ({reason}: {path})",
        )


@dataclass(frozen=True)
class LauncherSettings:
    """
    User-facing launcher settings supplied by the host.

    Attributes:
        terminal_template: Template with {DIR} and {CMD} placeholders
        invocation_command: Command to run inside the new terminal
        additional_args: Extra arguments appended to the invocation command
    """

    terminal_template: str
    invocation_command: str
    additional_args: str = ""


@dataclass(frozen=True)
class LaunchContext:
    """
    One launch request, built fresh per call.

    Attributes:
        working_directory: Directory the terminal should open in
        command: Invocation command plus any additional arguments
        terminal_template: Template to substitute into
    """

    working_directory: str
    command: str
    terminal_template: str


@dataclass(frozen=True)
class ResolvedCommand:
    """
    Executable and argument vector ready to be spawned.

    Attributes:
        executable: Interpreter or runner to start
        argv: Arguments after the executable
        cwd: Validated working directory, if resolved from a LaunchContext
    """

    executable: str
    argv: list[str] = field(default_factory=list)
    cwd: str | None = None

    def as_list(self) -> list[str]:
        """Full command line as a list, executable first."""
        return [self.executable, *self.argv]


@dataclass(frozen=True)
class LaunchResult:
    """
    Outcome of a single launch request.

    Attributes:
        success: Whether no error was seen before the grace window elapsed
        error_kind: Failure category when success is False
        message: Human-readable failure description
    """

    success: bool
    error_kind: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def ok(cls) -> LaunchResult:
        return cls(success=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str | None = None) -> LaunchResult:
        return cls(success=False, error_kind=kind, message=message or ERROR_MESSAGES[kind])

    @classmethod
    def from_error(cls, error: LaunchError) -> LaunchResult:
        return cls.failure(error.kind, str(error))


__all__ = [
    "ERROR_MESSAGES",
    "ErrorKind",
    "InvalidDirectoryError",
    "LaunchContext",
    "LaunchError",
    "LaunchResult",
    "LauncherSettings",
    "PlatformKind",
    "ResolvedCommand",
    "TemplateError",
]
