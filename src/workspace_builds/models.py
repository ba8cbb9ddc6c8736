"""Data models for workspace build resolution."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import IdentityError


class DistributionType(str, Enum):
    """How the build tool distribution is obtained."""

    WRAPPER = "wrapper"
    VERSION = "version"
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class Distribution:
    """A build tool distribution pin.

    ``wrapper`` carries no value; ``version`` carries a version string,
    ``local`` an installation directory and ``remote`` a URI.
    """

    type: DistributionType = DistributionType.WRAPPER
    value: str | None = None

    def __post_init__(self) -> None:
        try:
            dist_type = DistributionType(self.type)
        except ValueError:
            raise IdentityError(f"Unknown distribution type: {self.type!r}") from None
        object.__setattr__(self, "type", dist_type)

        if dist_type == DistributionType.WRAPPER:
            if self.value is not None:
                raise IdentityError("Wrapper distribution does not take a value")
        elif not isinstance(self.value, str) or not self.value.strip():
            raise IdentityError(f"Distribution type {dist_type.value!r} requires a value")

    @classmethod
    def parse(cls, text: str) -> "Distribution":
        """Parse ``wrapper``, ``version:<v>``, ``local:<dir>`` or ``remote:<uri>``."""
        kind, sep, value = text.partition(":")
        return cls(type=kind.strip().lower(), value=value if sep else None)

    @classmethod
    def from_dict(cls, data: Any) -> "Distribution":
        if isinstance(data, str):
            return cls.parse(data)
        if not isinstance(data, dict):
            raise IdentityError("'distribution' must be an object or a string")
        return cls(type=data.get("type", DistributionType.WRAPPER.value), value=data.get("value"))

    def to_dict(self) -> dict[str, Any]:
        if self.value is None:
            return {"type": self.type.value}
        return {"type": self.type.value, "value": self.value}

    def __str__(self) -> str:
        if self.value is None:
            return self.type.value
        return f"{self.type.value}:{self.value}"


def _as_path(name: str, value: Any) -> Path | None:
    if value is None:
        return None
    if isinstance(value, (str, os.PathLike)):
        return Path(value)
    raise IdentityError(f"'{name}' must be a path, got {type(value).__name__}")


def _as_args(name: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise IdentityError(f"'{name}' must be a list of strings")
    args = tuple(value)
    for arg in args:
        if not isinstance(arg, str):
            raise IdentityError(f"'{name}' must be a list of strings")
    return args


@dataclass(frozen=True)
class BuildDescriptor:
    """Identity of one build root plus its configuration overrides.

    Two descriptors are equal iff every field is equal, which makes the
    descriptor the deduplication key for builds.
    """

    root_dir: Path
    distribution: Distribution = field(default_factory=Distribution)
    build_user_home: Path | None = None
    java_home: Path | None = None
    jvm_arguments: tuple[str, ...] = ()
    arguments: tuple[str, ...] = ()
    working_dir: Path | None = None
    show_console_view: bool = True
    show_executions_view: bool = True

    def __post_init__(self) -> None:
        root_dir = _as_path("root_dir", self.root_dir)
        if root_dir is None:
            raise IdentityError("'root_dir' is required")
        if not root_dir.is_absolute():
            raise IdentityError(f"'root_dir' must be absolute: {root_dir}")
        object.__setattr__(self, "root_dir", root_dir)

        for name in ("build_user_home", "java_home", "working_dir"):
            object.__setattr__(self, name, _as_path(name, getattr(self, name)))

        for name in ("jvm_arguments", "arguments"):
            object.__setattr__(self, name, _as_args(name, getattr(self, name)))

        if not isinstance(self.distribution, Distribution):
            raise IdentityError("'distribution' must be a Distribution")

        for name in ("show_console_view", "show_executions_view"):
            if not isinstance(getattr(self, name), bool):
                raise IdentityError(f"'{name}' must be a boolean")

    def to_dict(self) -> dict[str, Any]:
        def _str(path: Path | None) -> str | None:
            return str(path) if path is not None else None

        return {
            "root_dir": str(self.root_dir),
            "distribution": self.distribution.to_dict(),
            "build_user_home": _str(self.build_user_home),
            "java_home": _str(self.java_home),
            "jvm_arguments": list(self.jvm_arguments),
            "arguments": list(self.arguments),
            "working_dir": _str(self.working_dir),
            "show_console_view": self.show_console_view,
            "show_executions_view": self.show_executions_view,
        }


@dataclass(frozen=True)
class WorkspaceMember:
    """A project-like container in the workspace."""

    name: str
    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def __str__(self) -> str:
        return self.name
