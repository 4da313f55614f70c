"""
Launch request assembly.

Builds a LaunchContext from host settings and composes template
validation, resolution and launching into one LaunchResult.
"""

from __future__ import annotations

import logging

from termlaunch.core.launch.detector import detect_platform
from termlaunch.core.launch.launcher import GRACE_WINDOW_SECONDS, launch
from termlaunch.core.launch.models import (
    LaunchContext,
    LaunchError,
    LaunchResult,
    LauncherSettings,
    PlatformKind,
)
from termlaunch.core.launch.resolver import resolve
from termlaunch.core.launch.templates import validate_template

logger = logging.getLogger(__name__)


def build_command(invocation_command: str, additional_args: str = "") -> str:
    """Join the invocation command and trimmed extra arguments with one space."""
    extra = additional_args.strip()
    if extra:
        return f"{invocation_command} {extra}"
    return invocation_command


def build_launch_context(settings: LauncherSettings, working_directory: str) -> LaunchContext:
    """
    Build a launch request for one working directory.

    Args:
        settings: Launcher settings from the host
        working_directory: Directory the terminal should open in

    Returns:
        Fresh LaunchContext
    """
    return LaunchContext(
        working_directory=working_directory,
        command=build_command(settings.invocation_command, settings.additional_args),
        terminal_template=settings.terminal_template,
    )


async def launch_terminal(
    context: LaunchContext,
    platform: PlatformKind | None = None,
    *,
    grace_window: float = GRACE_WINDOW_SECONDS,
) -> LaunchResult:
    """
    Validate, resolve and launch a terminal for a request.

    Args:
        context: Launch request
        platform: Platform override (detected when None)
        grace_window: Seconds to wait for spawn-time errors

    Returns:
        LaunchResult; failures are returned, never raised
    """
    if platform is None:
        platform = detect_platform()

    try:
        validate_template(context.terminal_template)
        resolved = resolve(context, platform)
    except LaunchError as e:
        logger.debug("Launch request rejected: %s", e.kind.value)
        return LaunchResult.from_error(e)

    return await launch(
        resolved.executable, resolved.argv, cwd=resolved.cwd, grace_window=grace_window
    )


__all__ = [
    "build_command",
    "build_launch_context",
    "launch_terminal",
]
