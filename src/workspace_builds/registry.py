"""Workspace build registry: maps workspace members to deduplicated builds."""

from collections.abc import Iterable

from .base import IdentityResolver, MemberEnumerator
from .build import BuildCollection, BuildHandle
from .constants import LOG_PREFIX
from .errors import EnumerationError, IdentityError
from .models import BuildDescriptor, WorkspaceMember


class WorkspaceBuildRegistry:
    """
    Resolve workspace members to builds.

    Nothing is cached: every call recomputes from the resolver and the
    workspace. Single-member lookups surface IdentityError; bulk lookups skip
    members whose identity cannot be resolved. EnumerationError always
    propagates.
    """

    def __init__(
        self,
        resolver: IdentityResolver,
        workspace: MemberEnumerator | None = None,
        verbose: bool = False,
    ):
        self.resolver = resolver
        self.workspace = workspace
        self.verbose = verbose

    def build_from_descriptor(self, descriptor: BuildDescriptor) -> BuildHandle:
        """Return the build for an already resolved descriptor."""
        return BuildHandle(descriptor)

    def resolve_build(self, member: WorkspaceMember) -> BuildHandle | None:
        """
        Return the build a member belongs to.

        Returns:
            The member's BuildHandle, or None if the member is not build-enabled

        Raises:
            IdentityError: If the member is enabled but has no valid descriptor
        """
        if not self.resolver.is_build_enabled(member):
            return None

        descriptor = self.resolver.descriptor_for(member)
        if descriptor is None:
            raise IdentityError(f"Build-enabled member {member.name} has no build settings")
        return self.build_from_descriptor(descriptor)

    def resolve_builds(self, members: Iterable[WorkspaceMember]) -> BuildCollection:
        """
        Return the distinct builds of a set of members.

        Members that are not build-enabled contribute nothing. Members whose
        descriptor cannot be resolved are skipped.

        Raises:
            EnumerationError: If the enablement check fails
        """
        descriptors: set[BuildDescriptor] = set()
        for member in members:
            if not self.resolver.is_build_enabled(member):
                continue

            try:
                descriptor = self.resolver.descriptor_for(member)
            except IdentityError as e:
                if self.verbose:
                    print(f"{LOG_PREFIX} Skipping {member.name}: {e}")
                continue

            if descriptor is None:
                if self.verbose:
                    print(f"{LOG_PREFIX} Skipping {member.name}: no build identity")
                continue

            if not isinstance(descriptor, BuildDescriptor):
                if self.verbose:
                    print(f"{LOG_PREFIX} Skipping {member.name}: invalid descriptor {descriptor!r}")
                continue

            descriptors.add(descriptor)

        if self.verbose:
            print(f"{LOG_PREFIX} Resolved {len(descriptors)} distinct builds")
        return BuildCollection(self.build_from_descriptor(d) for d in descriptors)

    def resolve_all_builds(self) -> BuildCollection:
        """
        Return the distinct builds of every workspace member.

        Raises:
            EnumerationError: If the workspace cannot be enumerated
        """
        if self.workspace is None:
            raise EnumerationError("No workspace configured for this registry")
        return self.resolve_builds(self.workspace.all_members())
