"""Abstract collaborators consumed by the build registry."""

from abc import ABC, abstractmethod

from .models import BuildDescriptor, WorkspaceMember


class IdentityResolver(ABC):
    """Decides build enablement and build identity for workspace members."""

    @abstractmethod
    def is_build_enabled(self, member: WorkspaceMember) -> bool:
        """
        Check whether a member participates in the build system.

        Must be free of side effects and safe to call repeatedly.

        Raises:
            EnumerationError: If enablement cannot be evaluated
        """
        pass

    @abstractmethod
    def descriptor_for(self, member: WorkspaceMember) -> BuildDescriptor | None:
        """
        Build the descriptor for an enabled member.

        Returns:
            The member's BuildDescriptor, or None if it has no identity

        Raises:
            IdentityError: If the member's settings are malformed or incomplete
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class MemberEnumerator(ABC):
    """Lists the current members of a workspace."""

    @abstractmethod
    def all_members(self) -> set[WorkspaceMember]:
        """
        Enumerate all workspace members.

        Raises:
            EnumerationError: If the workspace cannot be read
        """
        pass
