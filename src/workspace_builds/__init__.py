"""Resolve workspace projects to deduplicated build handles."""

from .base import IdentityResolver, MemberEnumerator
from .build import BuildCollection, BuildHandle
from .errors import EnumerationError, IdentityError, WorkspaceBuildsError
from .models import BuildDescriptor, Distribution, DistributionType, WorkspaceMember
from .registry import WorkspaceBuildRegistry
from .settings import SettingsIdentityResolver, write_settings
from .workspace import FilesystemWorkspace

__version__ = "0.1.0"

__all__ = [
    "BuildCollection",
    "BuildDescriptor",
    "BuildHandle",
    "Distribution",
    "DistributionType",
    "EnumerationError",
    "FilesystemWorkspace",
    "IdentityError",
    "IdentityResolver",
    "MemberEnumerator",
    "SettingsIdentityResolver",
    "WorkspaceBuildRegistry",
    "WorkspaceBuildsError",
    "WorkspaceMember",
    "write_settings",
]
