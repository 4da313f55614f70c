"""
Launch service: clean API for opening terminals from configured settings.

Provides a service layer wrapper around the launch package: loads the
launcher configuration, turns a file or directory target into a
LaunchContext, and launches it.

Usage:
    >>> from termlaunch.core.services.launch import LaunchService
    >>> service = LaunchService.from_config()
    >>> result = service.launch_sync("notes/CLAUDE.md")
    >>> if not result.success:
    ...     print(result.message)
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from termlaunch.core.config.loader import load_config
from termlaunch.core.config.models import TermlaunchConfig
from termlaunch.core.launch import (
    GRACE_WINDOW_SECONDS,
    LaunchContext,
    LaunchResult,
    LauncherSettings,
    PlatformKind,
    ResolvedCommand,
    TemplateError,
    build_launch_context,
    detect_platform,
    launch_terminal,
    resolve,
    validate_template,
)

logger = logging.getLogger(__name__)


class LaunchService:
    """
    Service for launching terminals with the configured template.

    Example:
        >>> service = LaunchService.from_config()
        >>> service.preview(".").as_list()
        ['/bin/sh', '-c', 'gnome-terminal --working-directory="/project" ...']
    """

    def __init__(
        self,
        config: TermlaunchConfig,
        project_dir: Path,
        platform: PlatformKind | None = None,
    ) -> None:
        """
        Initialize service with dependencies.

        Args:
            config: termlaunch configuration
            project_dir: Base directory for relative targets
            platform: Platform override (detected when None)
        """
        self._config = config
        self._project_dir = project_dir
        self._platform = platform if platform is not None else detect_platform()

    @classmethod
    def from_config(
        cls,
        config: TermlaunchConfig | None = None,
        project_dir: Path | None = None,
    ) -> LaunchService:
        """
        Create service from configuration.

        Args:
            config: Optional configuration (auto-loaded if None)
            project_dir: Base directory for relative targets (defaults to cwd)

        Returns:
            Configured LaunchService instance
        """
        if project_dir is None:
            project_dir = Path.cwd()
        if config is None:
            config = load_config(project_dir=project_dir)

        return cls(config, project_dir)

    @property
    def config(self) -> TermlaunchConfig:
        """The resolved configuration."""
        return self._config

    @property
    def platform(self) -> PlatformKind:
        """Platform used for template defaults and argv extraction."""
        return self._platform

    @property
    def settings(self) -> LauncherSettings:
        """Launcher settings derived from the configuration."""
        return self._config.launcher.to_settings()

    @property
    def grace_window(self) -> float:
        """Grace window in seconds."""
        if self._config.grace_window_ms is None:
            return GRACE_WINDOW_SECONDS
        return self._config.grace_window_ms / 1000

    # ============================================================================
    # Request building
    # ============================================================================

    def target_directory(self, target: str | Path | None = None) -> str:
        """
        Directory to open for a target path.

        A file target opens its containing directory. Relative targets are
        taken relative to the project directory. The result is not
        normalized here; the resolver validates it.

        Args:
            target: File or directory (defaults to the project directory)

        Returns:
            Directory path string
        """
        if target is None:
            return str(self._project_dir)

        path = str(target)
        if not os.path.isabs(path):
            path = os.path.join(str(self._project_dir), path)

        if os.path.isfile(path):
            return os.path.dirname(path)
        return path

    def build_context(self, target: str | Path | None = None) -> LaunchContext:
        """Build the LaunchContext for a target."""
        return build_launch_context(self.settings, self.target_directory(target))

    # ============================================================================
    # Operations
    # ============================================================================

    def validate(self) -> LaunchResult:
        """
        Check the configured template.

        Returns:
            LaunchResult with success=True if the template is usable
        """
        try:
            validate_template(self.settings.terminal_template)
        except TemplateError as e:
            return LaunchResult.from_error(e)
        return LaunchResult.ok()

    def preview(self, target: str | Path | None = None) -> ResolvedCommand:
        """
        Resolve the command that launch() would spawn, without spawning.

        Raises:
            TemplateError: If the configured template is invalid
            InvalidDirectoryError: If the target directory is invalid
        """
        context = self.build_context(target)
        validate_template(context.terminal_template)
        return resolve(context, self._platform)

    async def launch(self, target: str | Path | None = None) -> LaunchResult:
        """
        Open a terminal for a target.

        Args:
            target: File or directory (defaults to the project directory)

        Returns:
            LaunchResult; failures are returned, never raised
        """
        context = self.build_context(target)
        result = await launch_terminal(
            context, self._platform, grace_window=self.grace_window
        )
        if result.success:
            logger.info("Launched terminal in %s", context.working_directory)
        else:
            logger.debug("Launch failed: %s", result.error_kind)
        return result

    def launch_sync(self, target: str | Path | None = None) -> LaunchResult:
        """Blocking wrapper around launch() for synchronous callers."""
        return asyncio.run(self.launch(target))


__all__ = ["LaunchService"]
