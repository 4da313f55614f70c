"""
Configuration data models for termlaunch.

These models define the structure of .termlaunch.json and
~/.config/termlaunch/config.json files, with validation and type safety
via Pydantic.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termlaunch.core.launch.detector import detect_platform
from termlaunch.core.launch.models import LauncherSettings
from termlaunch.core.launch.templates import default_template

DEFAULT_INVOCATION_COMMAND = "claude"
MAX_GRACE_WINDOW_MS = 10000


class LauncherConfig(BaseModel):
    """
    How to open the terminal and what to run in it.

    The template is not validated here: an invalid template is still a
    loadable config and is reported when a launch is attempted.
    """
    terminal_template: str = Field(
        default_factory=lambda: default_template(detect_platform()),
        description="Terminal command with {DIR} and {CMD} placeholders"
    )
    invocation_command: str = Field(
        default=DEFAULT_INVOCATION_COMMAND,
        description="Command to run inside the new terminal"
    )
    additional_args: str = Field(
        default="",
        description="Extra arguments appended to the invocation command"
    )

    def to_settings(self) -> LauncherSettings:
        """Convert to the launch subsystem's settings struct."""
        return LauncherSettings(
            terminal_template=self.terminal_template,
            invocation_command=self.invocation_command,
            additional_args=self.additional_args,
        )


class TermlaunchConfig(BaseModel):
    """
    Top-level termlaunch configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = TermlaunchConfig(
        ...     launcher=LauncherConfig(invocation_command="claude --resume")
        ... )
        >>> config.launcher.invocation_command
        'claude --resume'
    """
    launcher: LauncherConfig = Field(
        default_factory=LauncherConfig,
        description="Terminal launcher settings"
    )
    grace_window_ms: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_GRACE_WINDOW_MS,
        description="Override for the post-spawn error detection window"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,  # Validate on field assignment
    )

    @field_validator('launcher', mode='before')
    @classmethod
    def validate_launcher(
        cls, v: Union[str, dict, LauncherConfig]
    ) -> Union[dict, LauncherConfig]:
        """Accept a bare template string as shorthand for the launcher section."""
        if isinstance(v, str):
            return {"terminal_template": v}
        return v
