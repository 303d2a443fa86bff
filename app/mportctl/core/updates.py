"""Staleness scan of installed packages against the index.

For every installed package each index entry of the same name is
checked independently. A package is reported once per qualifying entry
when either the entry's version is newer than the installed one, or the
package was built for an older OS release than the running one.

The release check is gated on the installed *version* being set, not on
anything about the index entry, so a package built for an older release
is listed against every index entry, including ones at its own version.
"""

from __future__ import annotations

import logging

from mportctl.models.package import IndexEntry, PackageRecord
from mportctl.models.report import StalePackage, StalenessReport
from mportctl.store.base import PackageStore

logger = logging.getLogger(__name__)


def is_outdated(
    store: PackageStore,
    record: PackageRecord,
    entry: IndexEntry,
    os_release: str,
) -> bool:
    """Evaluate the outdated predicate for one (package, index entry) pair.

    Args:
        store: Store providing the version ordering.
        record: Installed package.
        entry: Index entry with the same name.
        os_release: Release tag of the running system.

    Returns:
        True if the pair should be reported.
    """
    if entry.version and store.compare_versions(record.version, entry.version) < 0:
        return True
    return bool(record.version) and store.compare_versions(record.os_release, os_release) < 0


def find_outdated(store: PackageStore) -> StalenessReport:
    """Scan every installed package for newer index entries.

    Returns:
        StalenessReport with one line per outdated pair and per package
        no longer in the index, in installed order.

    Raises:
        StoreError: If listing packages or any index lookup fails.
    """
    os_release = store.current_os_release()
    report = StalenessReport()

    for record in store.list_installed():
        entries = store.lookup_by_name(record.name)
        if not entries:
            logger.debug("%s is no longer in the index", record.name)
            report.items.append(StalePackage(record=record))
            continue

        for entry in entries:
            if is_outdated(store, record, entry, os_release):
                report.items.append(StalePackage(record=record, index_version=entry.version))

    return report
