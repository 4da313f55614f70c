"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars

Only the user config is ever written back; project config is read-only
from termlaunch's point of view.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from termlaunch.core.launch.detector import detect_platform
from termlaunch.core.launch.models import PlatformKind
from termlaunch.core.launch.templates import default_template

from .models import DEFAULT_INVOCATION_COMMAND, MAX_GRACE_WINDOW_MS, TermlaunchConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".termlaunch.json"

_config_cache: TermlaunchConfig | None = None


def get_xdg_config_home() -> Path:
    """XDG config home, falling back to ~/.config."""
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_dir() -> Path:
    """Directory holding the user config.json and .env."""
    return get_xdg_config_home() / "termlaunch"


def get_user_config_path() -> Path:
    return get_user_config_dir() / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """Path to .termlaunch.json in cwd (defaults to the current directory)."""
    if cwd is None:
        cwd = Path.cwd()
    return cwd / PROJECT_CONFIG_NAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base; nested dicts merge."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def normalize_layer(layer: dict[str, Any]) -> dict[str, Any]:
    """
    Expand the launcher shorthand in one config layer.

    A bare string under "launcher" is a terminal template. Expanding it
    before merging keeps the other launcher keys from lower layers.

    Example:
        >>> normalize_layer({"launcher": "xterm -e {CMD} {DIR}"})
        {'launcher': {'terminal_template': 'xterm -e {CMD} {DIR}'}}
    """
    launcher = layer.get("launcher")
    if isinstance(launcher, str):
        return {**layer, "launcher": {"terminal_template": launcher}}
    return layer


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON config layer.

    Returns:
        The parsed object, or None if the file is missing, unreadable, or
        not a JSON object
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: expected a JSON object", path)
        return None
    return normalize_layer(data)


def _grace_window_from_env(value: str) -> int | None:
    try:
        grace = int(value)
    except ValueError:
        logger.warning("Invalid TERMLAUNCH_GRACE_WINDOW_MS value '%s', ignoring", value)
        return None
    if not 0 <= grace <= MAX_GRACE_WINDOW_MS:
        logger.warning(
            "TERMLAUNCH_GRACE_WINDOW_MS must be between 0 and %d, got %d, ignoring",
            MAX_GRACE_WINDOW_MS,
            grace,
        )
        return None
    return grace


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply TERMLAUNCH_* environment overrides.

    Supported env vars:
        TERMLAUNCH_TEMPLATE - launcher.terminal_template
        TERMLAUNCH_COMMAND - launcher.invocation_command
        TERMLAUNCH_ARGS - launcher.additional_args (empty clears it)
        TERMLAUNCH_GRACE_WINDOW_MS - grace_window_ms

    Args:
        config_dict: Merged configuration from the file layers

    Returns:
        New configuration dictionary with overrides applied
    """
    result = normalize_layer(config_dict.copy())
    launcher = dict(result.get("launcher") or {})

    if template := os.environ.get("TERMLAUNCH_TEMPLATE"):
        launcher["terminal_template"] = template

    if command := os.environ.get("TERMLAUNCH_COMMAND"):
        launcher["invocation_command"] = command

    if "TERMLAUNCH_ARGS" in os.environ:
        launcher["additional_args"] = os.environ["TERMLAUNCH_ARGS"]

    if launcher:
        result["launcher"] = launcher

    if grace_str := os.environ.get("TERMLAUNCH_GRACE_WINDOW_MS"):
        grace = _grace_window_from_env(grace_str)
        if grace is not None:
            result["grace_window_ms"] = grace

    return result


def get_default_config(platform: PlatformKind | None = None) -> dict[str, Any]:
    """Default launcher settings for a platform (detected when None)."""
    if platform is None:
        platform = detect_platform()
    return {
        "launcher": {
            "terminal_template": default_template(platform),
            "invocation_command": DEFAULT_INVOCATION_COMMAND,
            "additional_args": "",
        },
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> TermlaunchConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (TERMLAUNCH_*)
        2. Project config (.termlaunch.json)
        3. User config (~/.config/termlaunch/config.json)
        4. Platform defaults

    Args:
        project_dir: Project directory to load .termlaunch.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated TermlaunchConfig instance

    Raises:
        ValidationError: If a config file holds an out-of-range or mistyped value
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    config = TermlaunchConfig(**apply_env_overrides(merged))

    _config_cache = config
    return config


def save_user_config(updates: dict[str, Any]) -> Path:
    """
    Merge updates into the user config file and write it.

    Args:
        updates: Partial configuration, e.g. {"launcher": {"additional_args": "-v"}}

    Returns:
        Path of the written config file

    Raises:
        ValidationError: If the resulting user config is invalid
        OSError: If the file cannot be written
    """
    path = get_user_config_path()
    current = load_json_file(path) or {}
    merged = deep_merge(current, normalize_layer(updates))

    # Validate against defaults before persisting anything
    TermlaunchConfig(**deep_merge(get_default_config(), merged))

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(merged, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote user config to %s", path)

    clear_cache()
    return path


def reset_user_config(platform: PlatformKind | None = None) -> Path:
    """
    Reset the user launcher settings to platform defaults.

    Non-launcher keys in the user config are preserved.
    """
    path = get_user_config_path()
    current = load_json_file(path) or {}
    current.update(get_default_config(platform))
    current.pop("grace_window_ms", None)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(current, indent=2) + "\n", encoding="utf-8")

    clear_cache()
    return path


def clear_cache() -> None:
    global _config_cache
    _config_cache = None
