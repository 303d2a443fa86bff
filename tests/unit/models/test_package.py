"""Unit tests for package models.

Tests for PackageRecord and IndexEntry.
"""

from dataclasses import FrozenInstanceError

import pytest
from mportctl.models.package import IndexEntry, PackageRecord


class TestPackageRecord:
    """Tests for PackageRecord dataclass."""

    def test_minimal_record(self) -> None:
        """Record can be created with only name and version."""
        record = PackageRecord(name="curl", version="8.5.0")
        assert record.origin == ""
        assert record.locked is False
        assert record.automatic is False
        assert record.depends == ()

    def test_empty_name_rejected(self) -> None:
        """An empty name raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            PackageRecord(name="", version="1.0")

    def test_is_explicit(self) -> None:
        """Packages not pulled in as dependencies are explicit."""
        assert PackageRecord(name="curl", version="1").is_explicit
        assert not PackageRecord(name="curl", version="1", automatic=True).is_explicit

    def test_name_version(self) -> None:
        """name_version joins name and version with a dash."""
        assert PackageRecord(name="curl", version="8.5.0").name_version == "curl-8.5.0"

    def test_immutable(self) -> None:
        """Records cannot be modified after creation."""
        record = PackageRecord(name="curl", version="8.5.0")
        with pytest.raises(FrozenInstanceError):
            record.version = "9.0"  # type: ignore[misc]


class TestIndexEntry:
    """Tests for IndexEntry dataclass."""

    def test_empty_name_rejected(self) -> None:
        """An empty name raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            IndexEntry(pkgname="", version="1.0")

    def test_name_version(self) -> None:
        """name_version joins name and version with a dash."""
        assert IndexEntry(pkgname="vim", version="9.1.0").name_version == "vim-9.1.0"

    def test_equality(self) -> None:
        """Entries compare by value."""
        assert IndexEntry(pkgname="vim", version="9.1.0") == IndexEntry(
            pkgname="vim", version="9.1.0"
        )
