"""
Detached process launching.

Spawns the resolved terminal command as a fire-and-forget child: it runs
in its own session (process group on Windows), has no inherited stdio,
and is released immediately so the caller may exit without waiting.

Success only means no spawn-time error was reported within a short grace
window. Whether the terminal window appeared, or the command inside it
succeeded, is not observable from here.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import subprocess
import sys
from typing import Any

from termlaunch.core.launch.models import ERROR_MESSAGES, ErrorKind, LaunchResult

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform == "win32"

GRACE_WINDOW_SECONDS = 0.1

_NOT_FOUND_ERRNOS = {errno.ENOENT}
_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}


def classify_spawn_error(error: OSError, cwd: str | None = None) -> ErrorKind:
    """
    Map a spawn-time OSError onto an ErrorKind.

    Args:
        error: Exception raised while starting the process
        cwd: Working directory the child was started in, if any

    Returns:
        INVALID_DIRECTORY when the error names cwd, otherwise
        COMMAND_NOT_FOUND, PERMISSION_DENIED, or SPAWN_FAILED
    """
    if cwd is not None and error.filename == cwd:
        return ErrorKind.INVALID_DIRECTORY
    if isinstance(error, FileNotFoundError) or error.errno in _NOT_FOUND_ERRNOS:
        return ErrorKind.COMMAND_NOT_FOUND
    if isinstance(error, PermissionError) or error.errno in _PERMISSION_ERRNOS:
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.SPAWN_FAILED


def spawn_error_result(error: OSError, cwd: str | None = None) -> LaunchResult:
    """Build the failed LaunchResult for a spawn-time OSError."""
    kind = classify_spawn_error(error, cwd)
    if kind == ErrorKind.INVALID_DIRECTORY:
        detail = error.strerror or str(error)
        return LaunchResult.failure(kind, f"{ERROR_MESSAGES[kind]} ({detail}: {cwd})")
    if kind == ErrorKind.SPAWN_FAILED:
        detail = error.strerror or str(error)
        return LaunchResult.failure(kind, ERROR_MESSAGES[kind] + detail)
    return LaunchResult.failure(kind)


def _detached_popen_kwargs() -> dict[str, Any]:
    """Popen options that detach the child from this process."""
    kwargs: dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
        "shell": False,
    }
    if IS_WINDOWS:
        kwargs["creationflags"] = (
            subprocess.CREATE_NEW_PROCESS_GROUP | subprocess.CREATE_NO_WINDOW
        )
        startupinfo = subprocess.STARTUPINFO()
        startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
        startupinfo.wShowWindow = subprocess.SW_HIDE
        kwargs["startupinfo"] = startupinfo
    else:
        # New session so the child survives our exit and terminal hangups
        kwargs["start_new_session"] = True
    return kwargs


def spawn_detached(executable: str, argv: list[str], *, cwd: str | None = None) -> int:
    """
    Start a detached process and drop the handle.

    Args:
        executable: Program to run
        argv: Arguments after the program name
        cwd: Optional working directory for the child

    Returns:
        PID of the spawned process

    Raises:
        OSError: If the process could not be started
    """
    process = subprocess.Popen([executable, *argv], cwd=cwd, **_detached_popen_kwargs())
    logger.debug("Spawned detached process %d: %s", process.pid, executable)
    return process.pid


async def launch(
    executable: str,
    argv: list[str],
    *,
    cwd: str | None = None,
    grace_window: float = GRACE_WINDOW_SECONDS,
) -> LaunchResult:
    """
    Launch a detached process and report spawn-time failures.

    Never raises: every failure is returned as a LaunchResult.

    Args:
        executable: Program to run
        argv: Arguments after the program name
        cwd: Optional working directory for the child
        grace_window: Seconds to wait before declaring success

    Returns:
        LaunchResult with success=True when no spawn error was seen

    Example:
        >>> result = await launch("/bin/sh", ["-c", "xterm"])
        >>> result.success
        True
    """
    try:
        spawn_detached(executable, argv, cwd=cwd)
    except OSError as e:
        logger.debug("Spawn of %s failed: errno=%s", executable, e.errno)
        return spawn_error_result(e, cwd)
    except (ValueError, TypeError) as e:
        # Popen rejects argv containing NUL bytes and similar
        logger.debug("Spawn of %s rejected: %s", executable, e)
        return LaunchResult.failure(
            ErrorKind.SPAWN_FAILED, ERROR_MESSAGES[ErrorKind.SPAWN_FAILED] + str(e)
        )

    await asyncio.sleep(grace_window)
    return LaunchResult.ok()


__all__ = [
    "GRACE_WINDOW_SECONDS",
    "IS_WINDOWS",
    "classify_spawn_error",
    "launch",
    "spawn_detached",
    "spawn_error_result",
]
