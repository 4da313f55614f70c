"""
Per-platform launch strategies.

A substituted template mixes a "open a terminal" invocation with embedded
shell syntax, so it cannot be tokenized generically. Each strategy knows
how its platform hands such a line to an interpreter, and which template
is idiomatic there. Strategies are selected once via get_strategy().
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from termlaunch.core.launch.models import PlatformKind, ResolvedCommand
from termlaunch.core.launch.templates import (
    LINUX_DEFAULT_TEMPLATE,
    MACOS_DEFAULT_TEMPLATE,
    WINDOWS_DEFAULT_TEMPLATE,
)

logger = logging.getLogger(__name__)

POSIX_SHELL = "/bin/sh"
WINDOWS_INTERPRETER = "cmd"
OSASCRIPT = "osascript"

# osascript -e '<payload>' ; payload may span lines and contain double quotes
_OSASCRIPT_RE = re.compile(r"osascript\s+-e\s+'(.+)'", re.DOTALL)


class PlatformStrategy(ABC):
    """Platform-specific template defaults and argv extraction."""

    kind: PlatformKind

    @abstractmethod
    def default_template(self) -> str:
        """Canonical terminal template for this platform."""

    @abstractmethod
    def extract_argv(self, substituted: str) -> ResolvedCommand:
        """Turn a fully substituted template into an executable and argv."""


class PosixShellStrategy(PlatformStrategy):
    """Linux and unrecognized hosts: hand the whole line to ``sh -c``."""

    kind = PlatformKind.LINUX

    def default_template(self) -> str:
        return LINUX_DEFAULT_TEMPLATE

    def extract_argv(self, substituted: str) -> ResolvedCommand:
        return ResolvedCommand(POSIX_SHELL, ["-c", substituted])


class UnknownPlatformStrategy(PosixShellStrategy):
    """Explicit fallback: behaves exactly like Linux."""

    kind = PlatformKind.UNKNOWN


class WindowsStrategy(PlatformStrategy):
    """Windows: ``cmd /c <line>``; cmd does its own quoting."""

    kind = PlatformKind.WINDOWS

    def default_template(self) -> str:
        return WINDOWS_DEFAULT_TEMPLATE

    def extract_argv(self, substituted: str) -> ResolvedCommand:
        return ResolvedCommand(WINDOWS_INTERPRETER, ["/c", substituted])


class MacOSStrategy(PlatformStrategy):
    """
    macOS: run AppleScript payloads directly through osascript.

    When the template invokes ``osascript -e '...'`` the text between the
    single quotes is passed as one opaque ``-e`` argument. Templates that
    do not use osascript go through ``sh -c`` like Linux.
    """

    kind = PlatformKind.MACOS

    def default_template(self) -> str:
        return MACOS_DEFAULT_TEMPLATE

    def extract_argv(self, substituted: str) -> ResolvedCommand:
        if OSASCRIPT not in substituted:
            return ResolvedCommand(POSIX_SHELL, ["-c", substituted])

        match = _OSASCRIPT_RE.search(substituted)
        if match:
            payload = match.group(1)
        else:
            logger.debug("osascript template without quoted -e payload, passing remainder")
            payload = substituted.replace("osascript -e ", "", 1)
        return ResolvedCommand(OSASCRIPT, ["-e", payload])


_STRATEGIES: dict[PlatformKind, PlatformStrategy] = {
    PlatformKind.MACOS: MacOSStrategy(),
    PlatformKind.WINDOWS: WindowsStrategy(),
    PlatformKind.LINUX: PosixShellStrategy(),
    PlatformKind.UNKNOWN: UnknownPlatformStrategy(),
}


def get_strategy(platform: PlatformKind) -> PlatformStrategy:
    """
    Return the strategy for a platform.

    Strategies are stateless, so a shared instance per kind is returned.
    """
    return _STRATEGIES[platform]


__all__ = [
    "MacOSStrategy",
    "OSASCRIPT",
    "POSIX_SHELL",
    "PlatformStrategy",
    "PosixShellStrategy",
    "UnknownPlatformStrategy",
    "WINDOWS_INTERPRETER",
    "WindowsStrategy",
    "get_strategy",
]
