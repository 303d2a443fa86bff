"""Package models for installed records and index entries.

This module defines the core data structures handed out by a package
store: installed package records and candidate entries from the index.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """An installed package as recorded by the package store.

    Records are immutable snapshots. A store returns fresh records on
    every call, so a list stays valid until the caller drops it.

    Attributes:
        name: Package name, unique among installed packages.
        version: Installed version string (ordered by compare_versions).
        origin: Port origin the package was built from (e.g., 'net/curl').
        os_release: OS release the package was built against (e.g., '3.2').
        locked: Whether the package is protected from upgrade and removal.
        automatic: True if pulled in as a dependency, False if explicit.
        comment: One-line package description.
        cpe: CPE identifier string, empty when unknown.
        depends: Names of packages this package requires.
    """

    name: str
    version: str
    origin: str = ""
    os_release: str = ""
    locked: bool = False
    automatic: bool = False
    comment: str = ""
    cpe: str = ""
    depends: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_explicit(self) -> bool:
        """Check if package was installed at the user's request."""
        return not self.automatic

    @property
    def name_version(self) -> str:
        """Return the conventional 'name-version' label."""
        return f"{self.name}-{self.version}"


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """A candidate package from the remote index.

    Several entries may share a ``pkgname``; only ``(pkgname, version)``
    is unique.

    Attributes:
        pkgname: Package name.
        version: Version available in the index.
        comment: One-line package description.
        origin: Port origin.
        depends: Names of packages required at install time.
    """

    pkgname: str
    version: str
    comment: str = ""
    origin: str = ""
    depends: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.pkgname:
            msg = "Index entry name cannot be empty"
            raise ValueError(msg)

    @property
    def name_version(self) -> str:
        """Return the conventional 'name-version' label."""
        return f"{self.pkgname}-{self.version}"
