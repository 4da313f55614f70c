"""Seed TERMLAUNCH_* variables from .env files.

Sources, highest precedence first:
- variables already exported in the shell
- project .env.local, then .env
- user ~/.config/termlaunch/.env

Other keys in the files are ignored; termlaunch does not populate the
environment of the terminals it launches.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_user_config_dir

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMLAUNCH_"


def read_termlaunch_env(path: Path) -> dict[str, str]:
    """TERMLAUNCH_* assignments from one env file (empty if missing)."""
    if not path.exists():
        return {}
    return {
        key: value
        for key, value in dotenv_values(path).items()
        if key and key.startswith(ENV_PREFIX) and value is not None
    }


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> set[str]:
    """Export TERMLAUNCH_* settings from user and project env files.

    Args:
        project_dir: Base directory for the default project env files (cwd)
        user_env_paths: Explicit user env files, lowest precedence
        project_env_paths: Explicit project env files, later files win

    Returns:
        Names of the variables set from files
    """
    if project_dir is None:
        project_dir = Path.cwd()
    if user_env_paths is None:
        user_env_paths = [get_user_config_dir() / ".env"]
    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    from_files: dict[str, str] = {}
    for path in [*user_env_paths, *project_env_paths]:
        from_files.update(read_termlaunch_env(Path(path)))

    loaded: set[str] = set()
    for key, value in from_files.items():
        if key in os.environ:
            logger.debug("%s already set in the environment, keeping it", key)
            continue
        os.environ[key] = value
        loaded.add(key)
    return loaded


__all__ = ["ENV_PREFIX", "load_layered_env", "read_termlaunch_env"]
