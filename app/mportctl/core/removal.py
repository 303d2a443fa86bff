"""Dependency-respecting bulk removal.

The dependency graph is never materialized. Instead the planner lists
the installed packages, deletes every package nobody depends on, and
repeats with a fresh listing until a pass finds nothing left to skip.
Each pass removes at least one package from an acyclic installed set,
so the loop ends after at most n passes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mportctl.core.errors import StoreError
from mportctl.models.action import ActionResult
from mportctl.models.package import PackageRecord
from mportctl.models.report import RemovalReport
from mportctl.store.base import PackageStore

logger = logging.getLogger(__name__)

ResultCallback = Callable[[ActionResult], None]


class BulkRemovalPlanner:
    """Remove installed packages leaves-first.

    Args:
        store: Store providing listings, dependents and deletes.
        on_result: Optional callback invoked after every delete call.
    """

    def __init__(self, store: PackageStore, on_result: ResultCallback | None = None) -> None:
        self._store = store
        self._on_result = on_result

    def remove_all(self) -> RemovalReport:
        """Delete every installed package.

        A package is deleted only once its up-dependent set is empty. A
        failed delete is counted and never retried; packages that stay
        pinned behind it are reported as blocked. A package whose
        up-dependents cannot be read is left installed and reported as
        unreadable.

        Returns:
            RemovalReport with total, errors, blocked and unreadable names.

        Raises:
            StoreError: If listing the installed packages fails.
        """
        return self._run(lambda record: True, report_blocked=True)

    def autoremove(self) -> RemovalReport:
        """Delete automatically installed packages nothing depends on.

        Removing one orphan can orphan its own dependencies, so passes
        repeat until one deletes nothing.

        Raises:
            StoreError: If listing the installed packages fails.
        """
        return self._run(lambda record: record.automatic, report_blocked=False)

    def _run(
        self,
        eligible: Callable[[PackageRecord], bool],
        *,
        report_blocked: bool,
    ) -> RemovalReport:
        report = RemovalReport()
        attempted: set[str] = set()

        while True:
            installed = self._store.list_installed()
            report.passes += 1

            skipped: list[str] = []
            attempts = 0
            for record in installed:
                if record.name in attempted or record.name in report.unreadable:
                    continue
                if not eligible(record):
                    continue

                try:
                    dependents = self._store.up_dependents(record)
                except StoreError as e:
                    logger.warning("Cannot read dependents of %s: %s", record.name, e)
                    report.unreadable.append(record.name)
                    continue

                if dependents:
                    skipped.append(record.name)
                    continue

                attempted.add(record.name)
                attempts += 1
                self._delete(record, report)

            logger.debug(
                "Removal pass %d: %d attempted, %d skipped",
                report.passes,
                attempts,
                len(skipped),
            )

            if not skipped:
                break
            if attempts == 0:
                if report_blocked:
                    report.blocked = skipped
                break

        return report

    def _delete(self, record: PackageRecord, report: RemovalReport) -> None:
        result = self._store.delete_package(record.name)
        report.total += 1
        if result.failed:
            report.errors += 1
            report.failed.append(record.name)
            logger.error("Error deleting %s: %s", record.name, result.error)
        if self._on_result is not None:
            self._on_result(result)
