"""
Terminal launch subsystem.

Opens a new terminal session in a working directory, running a command,
from a user-configurable template with {DIR} and {CMD} placeholders.

Modules:
    detector: Platform detection (macOS, Windows, Linux, unknown)
    templates: Default templates, example catalogue, template validation
    strategies: Per-platform argv extraction and defaults
    resolver: Directory validation and single-pass placeholder substitution
    launcher: Detached fire-and-forget spawning with error classification
    context: LaunchContext assembly and the validate/resolve/launch pipeline
    models: Data models (PlatformKind, ErrorKind, LaunchContext, LaunchResult)

Example Usage:
    >>> from termlaunch.core.launch import (
    ...     LauncherSettings, build_launch_context, default_template,
    ...     detect_platform, launch_terminal,
    ... )
    >>> settings = LauncherSettings(
    ...     terminal_template=default_template(detect_platform()),
    ...     invocation_command="claude",
    ... )
    >>> context = build_launch_context(settings, "/path/to/project")
    >>> result = await launch_terminal(context)
    >>> result.success
    True
"""

from termlaunch.core.launch.context import (
    build_command,
    build_launch_context,
    launch_terminal,
)
from termlaunch.core.launch.detector import detect_platform, platform_display_name
from termlaunch.core.launch.launcher import (
    GRACE_WINDOW_SECONDS,
    classify_spawn_error,
    launch,
)
from termlaunch.core.launch.models import (
    ErrorKind,
    InvalidDirectoryError,
    LaunchContext,
    LaunchError,
    LaunchResult,
    LauncherSettings,
    PlatformKind,
    ResolvedCommand,
    TemplateError,
)
from termlaunch.core.launch.resolver import resolve, substitute_placeholders
from termlaunch.core.launch.strategies import PlatformStrategy, get_strategy
from termlaunch.core.launch.templates import (
    CMD_PLACEHOLDER,
    DIR_PLACEHOLDER,
    TemplateExample,
    default_template,
    template_examples,
    validate_template,
)

__all__ = [
    # Detector
    "detect_platform",
    "platform_display_name",
    # Templates
    "CMD_PLACEHOLDER",
    "DIR_PLACEHOLDER",
    "TemplateExample",
    "default_template",
    "template_examples",
    "validate_template",
    # Strategies
    "PlatformStrategy",
    "get_strategy",
    # Resolver
    "resolve",
    "substitute_placeholders",
    # Launcher
    "GRACE_WINDOW_SECONDS",
    "classify_spawn_error",
    "launch",
    # Context
    "build_command",
    "build_launch_context",
    "launch_terminal",
    # Models
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
