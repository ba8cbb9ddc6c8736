"""Build handles and collections of builds."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import IdentityError
from .models import BuildDescriptor


@dataclass(frozen=True)
class BuildHandle:
    """The build at one descriptor.

    Handles are not interned: equality and hashing follow the descriptor,
    so handles built from equal descriptors are interchangeable.
    """

    descriptor: BuildDescriptor

    def __post_init__(self) -> None:
        if not isinstance(self.descriptor, BuildDescriptor):
            raise IdentityError(
                f"Expected a BuildDescriptor, got {type(self.descriptor).__name__}"
            )

    @property
    def root_dir(self) -> Path:
        return self.descriptor.root_dir

    def to_dict(self) -> dict[str, Any]:
        return self.descriptor.to_dict()

    def __str__(self) -> str:
        return str(self.root_dir)


class BuildCollection:
    """An unordered set of builds, one per distinct descriptor."""

    def __init__(self, handles: Iterable[BuildHandle] = ()):
        self._handles = frozenset(handles)

    @property
    def descriptors(self) -> frozenset[BuildDescriptor]:
        return frozenset(h.descriptor for h in self._handles)

    def __iter__(self) -> Iterator[BuildHandle]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, item: object) -> bool:
        return item in self._handles

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildCollection):
            return NotImplemented
        return self._handles == other._handles

    def __hash__(self) -> int:
        return hash(self._handles)

    def __repr__(self) -> str:
        roots = sorted(str(h.root_dir) for h in self._handles)
        return f"BuildCollection({roots!r})"
