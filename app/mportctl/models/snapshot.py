"""Snapshot models for the local package database file.

This module defines the Pydantic models representing the packages.toml
structure read and written by SnapshotStore.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from mportctl.models.package import IndexEntry, PackageRecord


class SystemSection(BaseModel):
    """System section of the snapshot.

    Attributes:
        os_release: Release tag of the operating system the database
            belongs to. Empty means "detect from the running kernel".
    """

    model_config = ConfigDict(extra="forbid")

    os_release: Annotated[str, Field(description="OS release tag")] = ""


class InstalledEntry(BaseModel):
    """An installed package, keyed by name in the ``installed`` table."""

    model_config = ConfigDict(extra="forbid")

    version: str
    origin: str = ""
    os_release: str = ""
    locked: bool = False
    automatic: bool = False
    comment: str = ""
    cpe: str = ""
    depends: Annotated[list[str], Field(default_factory=list)]
    files: Annotated[list[str], Field(default_factory=list)]

    def to_record(self, name: str) -> PackageRecord:
        """Build the immutable record handed to callers."""
        return PackageRecord(
            name=name,
            version=self.version,
            origin=self.origin,
            os_release=self.os_release,
            locked=self.locked,
            automatic=self.automatic,
            comment=self.comment,
            cpe=self.cpe,
            depends=tuple(self.depends),
        )


class IndexItem(BaseModel):
    """One entry of the ``index`` array."""

    model_config = ConfigDict(extra="forbid")

    pkgname: Annotated[str, Field(min_length=1)]
    version: str
    comment: str = ""
    origin: str = ""
    depends: Annotated[list[str], Field(default_factory=list)]

    def to_entry(self) -> IndexEntry:
        """Build the immutable entry handed to callers."""
        return IndexEntry(
            pkgname=self.pkgname,
            version=self.version,
            comment=self.comment,
            origin=self.origin,
            depends=tuple(self.depends),
        )


class PackageSnapshot(BaseModel):
    """Complete local package database.

    Attributes:
        system: System information.
        installed: Installed packages keyed by name.
        index: Index entries in catalog order.
        settings: Free-form store settings.
    """

    model_config = ConfigDict(extra="forbid")

    system: Annotated[SystemSection, Field(default_factory=SystemSection)]
    installed: Annotated[dict[str, InstalledEntry], Field(default_factory=dict)]
    index: Annotated[list[IndexItem], Field(default_factory=list)]
    settings: Annotated[dict[str, str], Field(default_factory=dict)]
