"""Exceptions raised while resolving workspace builds."""

from pathlib import Path


class WorkspaceBuildsError(Exception):
    """Base class for workspace build resolution errors."""

    pass


class IdentityError(WorkspaceBuildsError):
    """Raised when an enabled member's settings cannot produce a valid descriptor."""

    def __init__(self, message: str, settings_path: Path | None = None):
        super().__init__(message)
        self.settings_path = settings_path

    def __str__(self) -> str:
        message = super().__str__()
        if self.settings_path is not None:
            return f"{message} ({self.settings_path})"
        return message


class EnumerationError(WorkspaceBuildsError):
    """Raised when workspace members or their enablement cannot be determined."""

    pass
