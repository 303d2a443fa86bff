"""Abstract base class for package stores.

This module defines the PackageStore interface the command layer talks
to. The store owns the installed-package database, the index cache and
the dependency relation; everything behind it is opaque to mportctl.
"""

from abc import ABC, abstractmethod

from mportctl.core.version import Comparison, compare_versions
from mportctl.models.action import ActionResult
from mportctl.models.package import IndexEntry, PackageRecord


class PackageStore(ABC):
    """Abstract base class for all package stores.

    Query methods raise StoreError when the underlying database cannot be
    read. Mutations report per-call success through ActionResult so that
    bulk operations can count failures and carry on.

    Example:
        >>> store = SnapshotStore.open(path)
        >>> for record in store.list_installed():
        ...     if not store.up_dependents(record):
        ...         store.delete_package(record.name)
    """

    @abstractmethod
    def lookup_by_name(self, name: str) -> list[IndexEntry]:
        """Return index entries whose name is exactly ``name``.

        Args:
            name: Package name to look up.

        Returns:
            Matching entries in index order, possibly empty.

        Raises:
            StoreError: If the index cannot be read.
        """

    @abstractmethod
    def list_installed(self) -> list[PackageRecord]:
        """Return every installed package.

        Raises:
            StoreError: If the package database cannot be read.
        """

    @abstractmethod
    def up_dependents(self, record: PackageRecord) -> list[PackageRecord]:
        """Return installed packages that depend on ``record``.

        An empty list means the package is a removal leaf.

        Raises:
            StoreError: If the dependency data cannot be read.
        """

    @abstractmethod
    def delete_package(self, name: str) -> ActionResult:
        """Remove a single installed package."""

    @abstractmethod
    def install_explicit(self, name: str, version: str) -> ActionResult:
        """Install ``name`` at ``version`` as an explicit (user) install."""

    @abstractmethod
    def current_os_release(self) -> str:
        """Return the release tag of the running operating system."""

    @abstractmethod
    def search(self, term: str) -> list[IndexEntry]:
        """Return index entries whose name or comment glob-matches ``term``.

        Raises:
            StoreError: If the index cannot be read.
        """

    @abstractmethod
    def get_installed(self, name: str) -> PackageRecord | None:
        """Return the installed package called ``name``, if any."""

    @abstractmethod
    def set_locked(self, name: str, locked: bool) -> ActionResult:
        """Lock or unlock an installed package."""

    @abstractmethod
    def get_setting(self, key: str) -> str | None:
        """Return a store setting, or None when undefined."""

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Persist a store setting.

        Raises:
            StoreError: If the setting cannot be saved.
        """

    @abstractmethod
    def owner_of(self, path: str) -> PackageRecord | None:
        """Return the installed package that owns the file at ``path``."""

    @abstractmethod
    def index_size(self) -> int:
        """Return the number of entries in the index."""

    def compare_versions(self, left: str, right: str) -> Comparison:
        """Compare two version strings with the store's ordering."""
        return compare_versions(left, right)
