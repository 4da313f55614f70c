"""
Service layer for termlaunch.

Services compose core operations into clean API surfaces. Interfaces (the
CLI, or an editor plugin host) call service methods instead of reaching
into core packages directly.

Design principles:
- Methods accept typed inputs and return typed outputs.
- No Rich, no sys.exit, no print statements; presentation is the caller's job.
- Services are created via factory methods that accept configuration.

Modules:
    launch: LaunchService opens terminals from the configured template.
"""

from termlaunch.core.services.launch import LaunchService

__all__ = ["LaunchService"]
