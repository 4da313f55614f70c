"""
Platform detection for the launch subsystem.

Maps the interpreter's platform identifier onto a PlatformKind. Hosts
outside the three supported families classify as UNKNOWN rather than
failing.
"""

from __future__ import annotations

import sys

from termlaunch.core.launch.models import PlatformKind

_DISPLAY_NAMES = {
    PlatformKind.MACOS: "macOS",
    PlatformKind.WINDOWS: "Windows",
    PlatformKind.LINUX: "Linux",
    PlatformKind.UNKNOWN: "Unknown",
}


def detect_platform(system_platform: str | None = None) -> PlatformKind:
    """
    Detect the current platform.

    Args:
        system_platform: Platform identifier to classify (defaults to
            ``sys.platform``)

    Returns:
        PlatformKind for the host

    Examples:
        >>> detect_platform("darwin")
        <PlatformKind.MACOS: 'macos'>
        >>> detect_platform("sunos5")
        <PlatformKind.UNKNOWN: 'unknown'>
    """
    if system_platform is None:
        system_platform = sys.platform

    if system_platform == "darwin":
        return PlatformKind.MACOS
    if system_platform in ("win32", "cygwin"):
        return PlatformKind.WINDOWS
    if system_platform.startswith("linux"):
        return PlatformKind.LINUX
    return PlatformKind.UNKNOWN


def platform_display_name(kind: PlatformKind) -> str:
    """Human-readable name for a platform kind."""
    return _DISPLAY_NAMES[kind]


__all__ = ["detect_platform", "platform_display_name"]
