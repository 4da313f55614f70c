"""
termlaunch - open a terminal in a directory running a command.

A cross-platform terminal launcher driven by a user-configurable template.
"""

__version__ = "0.3.0"

# Re-export core models for convenience
from termlaunch.core.launch.models import ErrorKind, LaunchResult, PlatformKind

__all__ = ["ErrorKind", "LaunchResult", "PlatformKind", "__version__"]
