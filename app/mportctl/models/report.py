"""Report models for bulk operations.

Bulk removal, staleness scans and multi-term searches accumulate
per-unit outcomes into these structures so commands can print a summary
and pick an exit code.
"""

from dataclasses import dataclass, field

from mportctl.models.package import IndexEntry, PackageRecord


@dataclass(slots=True)
class RemovalReport:
    """Counters accumulated by a bulk removal run.

    Attributes:
        total: Number of delete calls attempted.
        errors: Number of delete calls that reported failure.
        passes: Number of list-and-scan passes performed.
        failed: Names of packages whose delete call failed.
        blocked: Names left installed because their up-dependents
            could not be removed.
        unreadable: Names left installed because their up-dependents
            could not be read.
    """

    total: int = 0
    errors: int = 0
    passes: int = 0
    failed: list[str] = field(default_factory=list)
    blocked: list[str] = field(default_factory=list)
    unreadable: list[str] = field(default_factory=list)

    @property
    def deleted(self) -> int:
        """Number of packages actually removed."""
        return self.total - self.errors

    @property
    def partial_failure(self) -> bool:
        """Check if at least one unit failed."""
        return self.errors > 0 or bool(self.blocked) or bool(self.unreadable)


@dataclass(frozen=True, slots=True)
class StalePackage:
    """One line of a staleness scan.

    Attributes:
        record: The installed package.
        index_version: Version of the index entry that triggered the
            line, or None when the package is no longer in the index.
    """

    record: PackageRecord
    index_version: str | None = None

    @property
    def available(self) -> bool:
        """Check if the package still has an index entry."""
        return self.index_version is not None


@dataclass(slots=True)
class StalenessReport:
    """Result of scanning installed packages against the index.

    Lines keep the installed-package order; a package may contribute
    several outdated lines, one per qualifying index entry.
    """

    items: list[StalePackage] = field(default_factory=list)

    @property
    def outdated(self) -> list[StalePackage]:
        """Lines for packages with a newer or re-released index entry."""
        return [item for item in self.items if item.available]

    @property
    def unavailable(self) -> list[PackageRecord]:
        """Installed packages no longer present in the index."""
        return [item.record for item in self.items if not item.available]

    @property
    def up_to_date(self) -> bool:
        """Check if nothing was reported."""
        return not self.items


@dataclass(slots=True)
class SearchReport:
    """Accumulated search results in term order.

    Attributes:
        entries: Every matched entry, grouped by term in input order.
        failed_terms: Terms whose query raised a store error.
    """

    entries: list[IndexEntry] = field(default_factory=list)
    failed_terms: list[str] = field(default_factory=list)

    @property
    def partial_failure(self) -> bool:
        """Check if any term failed."""
        return bool(self.failed_terms)
