"""Tests for build handles and collections."""

from pathlib import Path

import pytest

from workspace_builds.build import BuildCollection, BuildHandle
from workspace_builds.errors import IdentityError
from workspace_builds.models import BuildDescriptor


class TestBuildHandle:
    """Tests for BuildHandle."""

    def test_equal_descriptors_give_equal_handles(self):
        """Handles from equal descriptors are interchangeable."""
        h1 = BuildHandle(BuildDescriptor(root_dir="/work/a"))
        h2 = BuildHandle(BuildDescriptor(root_dir="/work/a"))

        assert h1 is not h2
        assert h1 == h2
        assert hash(h1) == hash(h2)
        assert len({h1, h2}) == 1

    def test_different_descriptors_give_different_handles(self):
        """Handles differ when descriptors differ."""
        h1 = BuildHandle(BuildDescriptor(root_dir="/work/a"))
        h2 = BuildHandle(BuildDescriptor(root_dir="/work/a", working_dir="/work/a/sub"))
        assert h1 != h2

    def test_root_dir(self):
        """Handle exposes the descriptor root."""
        handle = BuildHandle(BuildDescriptor(root_dir="/work/a"))
        assert handle.root_dir == Path("/work/a")
        assert str(handle) == str(Path("/work/a"))

    def test_rejects_non_descriptor(self):
        """Only BuildDescriptors can back a handle."""
        with pytest.raises(IdentityError, match="Expected a BuildDescriptor"):
            BuildHandle({"root_dir": "/work/a"})


class TestBuildCollection:
    """Tests for BuildCollection."""

    def test_empty(self):
        """Empty collection has no builds."""
        builds = BuildCollection()
        assert len(builds) == 0
        assert list(builds) == []
        assert not builds

    def test_deduplicates_handles(self):
        """Equal handles collapse into one."""
        builds = BuildCollection([
            BuildHandle(BuildDescriptor(root_dir="/work/a")),
            BuildHandle(BuildDescriptor(root_dir="/work/a")),
            BuildHandle(BuildDescriptor(root_dir="/work/b")),
        ])

        assert len(builds) == 2
        assert BuildHandle(BuildDescriptor(root_dir="/work/a")) in builds
        assert builds.descriptors == {
            BuildDescriptor(root_dir="/work/a"),
            BuildDescriptor(root_dir="/work/b"),
        }

    def test_equality_ignores_order(self):
        """Collections compare as sets."""
        a = BuildHandle(BuildDescriptor(root_dir="/work/a"))
        b = BuildHandle(BuildDescriptor(root_dir="/work/b"))

        assert BuildCollection([a, b]) == BuildCollection([b, a])
        assert BuildCollection([a]) != BuildCollection([b])
        assert hash(BuildCollection([a, b])) == hash(BuildCollection([b, a]))
