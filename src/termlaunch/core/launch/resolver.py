"""
Command resolution for the launch subsystem.

Validates the working directory, substitutes placeholders into the
terminal template and asks the platform strategy for the argv to spawn.

The template is user-configured and locally trusted. The working
directory is checked for traversal and existence only; it is inserted
into the template verbatim and the template's own shell quoting applies.
"""

from __future__ import annotations

import logging
import os
import re

from termlaunch.core.launch.models import (
    InvalidDirectoryError,
    LaunchContext,
    PlatformKind,
    ResolvedCommand,
)
from termlaunch.core.launch.strategies import get_strategy
from termlaunch.core.launch.templates import CMD_PLACEHOLDER, DIR_PLACEHOLDER

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(re.escape(DIR_PLACEHOLDER) + "|" + re.escape(CMD_PLACEHOLDER))
_SEGMENT_SPLIT_RE = re.compile(r"[\\/]+")


def has_parent_traversal(path: str) -> bool:
    """Whether any path segment is ``..``."""
    return ".." in _SEGMENT_SPLIT_RE.split(path)


def validate_directory(working_directory: str) -> str:
    """
    Normalize and validate a working directory.

    Args:
        working_directory: Directory supplied by the host

    Returns:
        Absolute, normalized directory path

    Raises:
        InvalidDirectoryError: If the path contains a ``..`` segment, does
            not exist, or is not a directory

    Examples:
        >>> validate_directory("/tmp/../etc")
        Traceback (most recent call last):
        ...
        InvalidDirectoryError: Invalid directory path. Cannot launch terminal. ...
    """
    if not working_directory or not working_directory.strip():
        raise InvalidDirectoryError(working_directory, "empty path")

    if has_parent_traversal(working_directory):
        raise InvalidDirectoryError(working_directory, "path traversal")

    normalized = os.path.abspath(os.path.normpath(working_directory))
    if has_parent_traversal(normalized):
        raise InvalidDirectoryError(normalized, "path traversal")

    if not os.path.exists(normalized):
        raise InvalidDirectoryError(normalized, "does not exist")
    if not os.path.isdir(normalized):
        raise InvalidDirectoryError(normalized, "not a directory")

    return normalized


def substitute_placeholders(template: str, directory: str, command: str) -> str:
    """
    Replace {DIR} and {CMD} in a single pass.

    Replacement values are inserted literally and never scanned again, so
    a command containing ``{DIR}`` keeps that text.

    Examples:
        >>> substitute_placeholders("{CMD}", "/tmp", "echo {DIR}")
        'echo {DIR}'
    """
    values = {DIR_PLACEHOLDER: directory, CMD_PLACEHOLDER: command}
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(0)], template)


def resolve(context: LaunchContext, platform: PlatformKind) -> ResolvedCommand:
    """
    Resolve a launch context into an executable and argv.

    Args:
        context: Launch request
        platform: Platform whose strategy extracts the argv

    Returns:
        ResolvedCommand ready for the process launcher

    Raises:
        InvalidDirectoryError: If the working directory fails validation
    """
    directory = validate_directory(context.working_directory)
    substituted = substitute_placeholders(context.terminal_template, directory, context.command)

    extracted = get_strategy(platform).extract_argv(substituted)
    resolved = ResolvedCommand(extracted.executable, extracted.argv, cwd=directory)
    logger.debug(
        "Resolved template %r for %s -> %s", context.terminal_template, platform.value,
        resolved.executable,
    )
    return resolved


__all__ = [
    "has_parent_traversal",
    "resolve",
    "substitute_placeholders",
    "validate_directory",
]
