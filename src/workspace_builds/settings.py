"""Persisted per-member build settings.

Each build-enabled member keeps its build configuration in
``<member>/.settings/build.json``. The presence of that file is what marks
the member as build-enabled; its content yields the member's BuildDescriptor.
"""

import json
import os
from pathlib import Path
from typing import Any

from .base import IdentityResolver
from .constants import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_SHOW_CONSOLE_VIEW,
    DEFAULT_SHOW_EXECUTIONS_VIEW,
    LOG_PREFIX,
    SETTINGS_DIR,
    SETTINGS_FILE,
)
from .errors import EnumerationError, IdentityError
from .models import BuildDescriptor, Distribution, WorkspaceMember


def settings_path(member: WorkspaceMember) -> Path:
    """Return the location of a member's persisted build settings."""
    return member.path / SETTINGS_DIR / SETTINGS_FILE


def descriptor_from_settings(data: dict[str, Any], base_dir: Path) -> BuildDescriptor:
    """
    Build a descriptor from a settings mapping.

    Relative paths are resolved against base_dir and canonicalised, so that
    members referring to one root from different places agree on it.

    Args:
        data: Parsed settings object
        base_dir: Directory relative paths are resolved against

    Returns:
        The BuildDescriptor described by the settings

    Raises:
        IdentityError: If a required field is missing or a field is ill-typed
    """
    if not data.get("root_dir"):
        raise IdentityError("Missing required setting 'root_dir'")

    def _path(name: str) -> Path | None:
        value = data.get(name)
        if value is None:
            return None
        if not isinstance(value, str) or not value:
            raise IdentityError(f"Setting '{name}' must be a non-empty string")
        try:
            return (base_dir / Path(value).expanduser()).resolve()
        except (OSError, RuntimeError) as e:
            raise IdentityError(f"Cannot resolve setting '{name}': {e}") from e

    def _args(name: str) -> Any:
        value = data.get(name)
        return () if value is None else value

    distribution = data.get("distribution")
    if distribution is None:
        distribution = DEFAULT_DISTRIBUTION

    return BuildDescriptor(
        root_dir=_path("root_dir"),
        distribution=Distribution.from_dict(distribution),
        build_user_home=_path("build_user_home"),
        java_home=_path("java_home"),
        jvm_arguments=_args("jvm_arguments"),
        arguments=_args("arguments"),
        working_dir=_path("working_dir"),
        show_console_view=data.get("show_console_view", DEFAULT_SHOW_CONSOLE_VIEW),
        show_executions_view=data.get("show_executions_view", DEFAULT_SHOW_EXECUTIONS_VIEW),
    )


def write_settings(member: WorkspaceMember, descriptor: BuildDescriptor) -> Path:
    """
    Persist a descriptor as the member's build settings.

    The root directory is canonicalised and stored relative to the member
    when possible.

    Returns:
        Path of the written settings file
    """
    data = descriptor.to_dict()
    root_dir = descriptor.root_dir.resolve()
    data["root_dir"] = str(root_dir)
    try:
        data["root_dir"] = os.path.relpath(root_dir, member.path.resolve())
    except ValueError:
        # Different drive on Windows, keep absolute
        pass

    path = settings_path(member)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return path


class SettingsIdentityResolver(IdentityResolver):
    """Resolve build identity from persisted per-member settings files."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def is_build_enabled(self, member: WorkspaceMember) -> bool:
        path = settings_path(member)
        try:
            return path.is_file()
        except OSError as e:
            raise EnumerationError(f"Cannot check build settings of {member.name}: {e}") from e

    def descriptor_for(self, member: WorkspaceMember) -> BuildDescriptor | None:
        path = settings_path(member)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            # Removed since the enablement check
            if self.verbose:
                print(f"{LOG_PREFIX} Settings of {member.name} disappeared: {path}")
            return None
        except json.JSONDecodeError as e:
            raise IdentityError(f"Invalid settings JSON: {e}", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise IdentityError(f"Cannot read settings: {e}", path) from e

        if not isinstance(data, dict):
            raise IdentityError("Settings must be a JSON object", path)

        try:
            return descriptor_from_settings(data, member.path)
        except IdentityError as e:
            if e.settings_path is None:
                e.settings_path = path
            raise

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(verbose={self.verbose!r})"
