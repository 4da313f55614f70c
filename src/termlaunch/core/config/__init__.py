"""
Configuration models and loading.

This module provides Pydantic models for termlaunch configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .loader import (
    clear_cache,
    get_project_config_path,
    get_user_config_dir,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
    reset_user_config,
    save_user_config,
)
from .models import DEFAULT_INVOCATION_COMMAND, LauncherConfig, TermlaunchConfig

__all__ = [
    # Models
    "DEFAULT_INVOCATION_COMMAND",
    "LauncherConfig",
    "TermlaunchConfig",
    # Loader
    "clear_cache",
    "get_project_config_path",
    "get_user_config_dir",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "reset_user_config",
    "save_user_config",
]
