"""Multi-term index search."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from mportctl.core.errors import InvalidInputError, StoreError
from mportctl.models.package import IndexEntry
from mportctl.models.report import SearchReport
from mportctl.store.base import PackageStore

logger = logging.getLogger(__name__)

EntryCallback = Callable[[IndexEntry], None]


def format_entry(entry: IndexEntry) -> str:
    """Render an index entry as a 'name<TAB>version<TAB>comment' line."""
    return f"{entry.pkgname}\t{entry.version}\t{entry.comment}"


def search_index(
    store: PackageStore,
    terms: Sequence[str],
    on_entry: EntryCallback | None = None,
) -> SearchReport:
    """Query the index once per term, in order.

    Each term is glob-matched against package names and comments. Terms
    with no hits are skipped silently. A term whose query fails is
    recorded and the remaining terms still run.

    Args:
        store: Store to query.
        terms: Search terms in the order given by the user.
        on_entry: Called for every hit as soon as its term is answered.

    Returns:
        SearchReport with all hits and the failed terms.

    Raises:
        InvalidInputError: If no terms were given.
    """
    if not terms:
        raise InvalidInputError("Search terms required")

    report = SearchReport()
    for term in terms:
        try:
            entries = store.search(term)
        except StoreError as e:
            logger.error("Search for %r failed: %s", term, e)
            report.failed_terms.append(term)
            continue

        logger.debug("Term %r matched %d entries", term, len(entries))
        for entry in entries:
            report.entries.append(entry)
            if on_entry is not None:
                on_entry(entry)

    return report
