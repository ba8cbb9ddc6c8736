"""Filesystem-backed workspace member enumeration."""

import json
from pathlib import Path

from .base import MemberEnumerator
from .constants import LOG_PREFIX, WORKSPACE_MANIFEST
from .errors import EnumerationError
from .models import WorkspaceMember


class FilesystemWorkspace(MemberEnumerator):
    """
    A workspace rooted at a directory.

    Members come from ``workspace.json`` when the root has one::

        {"projects": [{"name": "app", "project_dir": "modules/app"}]}

    Otherwise every non-hidden immediate subdirectory is a member.
    """

    def __init__(self, root: str | Path, verbose: bool = False):
        self.root = Path(root)
        self.verbose = verbose

    @property
    def manifest_path(self) -> Path:
        return self.root / WORKSPACE_MANIFEST

    def all_members(self) -> set[WorkspaceMember]:
        try:
            if not self.root.is_dir():
                raise EnumerationError(f"Workspace root is not a directory: {self.root}")

            if self.manifest_path.exists():
                members = self._members_from_manifest()
            else:
                members = self._members_from_directories()
        except OSError as e:
            raise EnumerationError(f"Cannot read workspace {self.root}: {e}") from e

        if self.verbose:
            print(f"{LOG_PREFIX} Found {len(members)} members in {self.root}")
        return members

    def _members_from_manifest(self) -> set[WorkspaceMember]:
        try:
            with open(self.manifest_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise EnumerationError(f"Cannot read workspace manifest {self.manifest_path}: {e}") from e

        projects = data.get("projects") if isinstance(data, dict) else None
        if not isinstance(projects, list):
            raise EnumerationError(
                f"Invalid workspace manifest at {self.manifest_path} (expected object with 'projects' list)"
            )

        members = set()
        for entry in projects:
            if (
                not isinstance(entry, dict)
                or not isinstance(entry.get("name"), str)
                or not entry["name"]
                or not isinstance(entry.get("project_dir", ""), (str, type(None)))
            ):
                raise EnumerationError(f"Invalid project entry in {self.manifest_path}: {entry!r}")
            project_dir = Path(entry.get("project_dir") or entry["name"])
            # Absolute paths are kept as-is by the join
            members.add(WorkspaceMember(name=entry["name"], path=self.root / project_dir))
        return members

    def _members_from_directories(self) -> set[WorkspaceMember]:
        children = list(self.root.iterdir())
        return {
            WorkspaceMember(name=child.name, path=child)
            for child in children
            if not child.name.startswith(".") and child.is_dir()
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"
