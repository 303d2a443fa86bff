"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest
from mportctl.models.snapshot import (
    IndexItem,
    InstalledEntry,
    PackageSnapshot,
    SystemSection,
)
from mportctl.store.snapshot import SnapshotStore


@pytest.fixture
def sample_snapshot() -> PackageSnapshot:
    """Small package database with one outdated and one vanished package."""
    return PackageSnapshot(
        system=SystemSection(os_release="3.2"),
        installed={
            "curl": InstalledEntry(
                version="8.5.0",
                origin="ftp/curl",
                os_release="3.2",
                comment="Command line tool for transferring data",
                cpe="cpe:2.3:a:haxx:curl:8.5.0:::::midnightbsd3:x64",
                depends=["libnghttp2"],
                files=["/usr/local/bin/curl"],
            ),
            "libnghttp2": InstalledEntry(
                version="1.58.0",
                origin="www/libnghttp2",
                os_release="3.2",
                automatic=True,
                comment="HTTP/2.0 C Library",
            ),
            "vim": InstalledEntry(
                version="9.0.1",
                origin="editors/vim",
                os_release="3.1",
                locked=True,
                comment="Improved version of the vi editor",
            ),
            "oldpkg": InstalledEntry(
                version="1.0",
                origin="misc/oldpkg",
                os_release="3.2",
                comment="Package dropped from the index",
            ),
        },
        index=[
            IndexItem(
                pkgname="curl",
                version="8.5.0",
                comment="Command line tool for transferring data",
                origin="ftp/curl",
                depends=["libnghttp2"],
            ),
            IndexItem(
                pkgname="curl",
                version="8.6.0",
                comment="Command line tool for transferring data",
                origin="ftp/curl",
                depends=["libnghttp2"],
            ),
            IndexItem(
                pkgname="libnghttp2",
                version="1.58.0",
                comment="HTTP/2.0 C Library",
                origin="www/libnghttp2",
            ),
            IndexItem(
                pkgname="vim",
                version="9.1.0",
                comment="Improved version of the vi editor",
                origin="editors/vim",
            ),
            IndexItem(
                pkgname="python311",
                version="3.11.7",
                comment="Interpreted object-oriented programming language",
                origin="lang/python311",
                depends=["libffi"],
            ),
            IndexItem(
                pkgname="libffi",
                version="3.4.4",
                comment="Foreign Function Interface",
                origin="devel/libffi",
            ),
        ],
        settings={"mirror_region": "us"},
    )


@pytest.fixture
def store(sample_snapshot: PackageSnapshot) -> SnapshotStore:
    """In-memory store over the sample database."""
    return SnapshotStore(sample_snapshot)


@pytest.fixture
def empty_store() -> SnapshotStore:
    """In-memory store with nothing installed and an empty index."""
    return SnapshotStore(PackageSnapshot(system=SystemSection(os_release="3.2")))


@pytest.fixture
def chain_snapshot() -> PackageSnapshot:
    """Installed dependency chain app -> lib -> base, plus a standalone tool."""
    return PackageSnapshot(
        system=SystemSection(os_release="3.2"),
        installed={
            "base": InstalledEntry(version="1.0", automatic=True),
            "lib": InstalledEntry(version="2.0", automatic=True, depends=["base"]),
            "app": InstalledEntry(version="3.0", depends=["lib"]),
            "tool": InstalledEntry(version="0.9"),
        },
    )


@pytest.fixture
def chain_store(chain_snapshot: PackageSnapshot) -> SnapshotStore:
    """In-memory store over the dependency chain database."""
    return SnapshotStore(chain_snapshot)
