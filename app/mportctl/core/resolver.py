"""Identifier resolution for install requests.

Turns a user-typed identifier such as ``curl`` or ``curl-8.5.0`` into a
single index entry, asking the user to pick when several entries share
the name, and hands the result to the store as an explicit install.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from mportctl.core.errors import AmbiguousSelectionError, PackageNotFoundError
from mportctl.models.action import ActionResult
from mportctl.models.package import IndexEntry
from mportctl.store.base import PackageStore

logger = logging.getLogger(__name__)


class ChoiceProvider(ABC):
    """Source of interactive answers when an identifier is ambiguous.

    The resolver calls ``present`` once with the candidates, then
    ``read`` until it gets a valid index, calling ``reject`` after every
    unusable answer.
    """

    @abstractmethod
    def present(self, candidates: list[IndexEntry]) -> None:
        """Show the numbered candidates to the user."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the next raw answer, or None when input is exhausted."""

    def reject(self, answer: str, count: int) -> None:
        """Report an answer that is not an index in ``[0, count)``."""
        logger.warning("Rejected selection %r, expected 0 - %d", answer, count - 1)


def parse_selection(answer: str, count: int) -> int | None:
    """Parse a selection answer.

    Args:
        answer: Raw text typed by the user.
        count: Number of candidates offered.

    Returns:
        The selected index, or None if the answer is not an integer in
        ``[0, count)``.
    """
    try:
        choice = int(answer.strip())
    except ValueError:
        return None
    if 0 <= choice < count:
        return choice
    return None


class IdentifierResolver:
    """Resolve identifiers against the index of a package store.

    Args:
        store: Store used for index lookups and installs.
        chooser: Provider consulted when a name matches several entries.
    """

    def __init__(self, store: PackageStore, chooser: ChoiceProvider) -> None:
        self._store = store
        self._chooser = chooser

    def lookup(self, identifier: str) -> list[IndexEntry]:
        """Look an identifier up, falling back to a 'name-version' split.

        When the identifier matches nothing and contains a '-' after its
        first character, everything before the last '-' is looked up
        again and the suffix must equal the version of the first entry
        found. The fallback never substitutes a different version.

        Args:
            identifier: User-supplied package identifier.

        Returns:
            Candidate entries, never empty.

        Raises:
            PackageNotFoundError: If nothing matches.
            StoreError: If the index cannot be read.
        """
        entries = self._store.lookup_by_name(identifier)
        if entries:
            return entries

        name, sep, version = identifier.rpartition("-")
        if not sep or not name:
            raise PackageNotFoundError(identifier)

        logger.debug("Retrying lookup of %s as %s version %s", identifier, name, version)
        entries = self._store.lookup_by_name(name)
        if not entries or entries[0].version != version:
            raise PackageNotFoundError(identifier)
        return entries

    def choose(self, candidates: list[IndexEntry]) -> IndexEntry:
        """Pick one candidate, prompting the user when there are several.

        Raises:
            AmbiguousSelectionError: If input ends before a valid choice.
        """
        if len(candidates) == 1:
            return candidates[0]

        count = len(candidates)
        self._chooser.present(candidates)
        while True:
            answer = self._chooser.read()
            if answer is None:
                msg = f"No package selected among {count} candidates"
                raise AmbiguousSelectionError(msg)
            choice = parse_selection(answer, count)
            if choice is not None:
                return candidates[choice]
            self._chooser.reject(answer, count)

    def resolve(self, identifier: str) -> IndexEntry:
        """Resolve an identifier to exactly one index entry."""
        return self.choose(self.lookup(identifier))

    def install(self, identifier: str) -> ActionResult:
        """Resolve an identifier and install it explicitly.

        Returns:
            The store's result for the install.

        Raises:
            PackageNotFoundError: If the identifier resolves to nothing.
            AmbiguousSelectionError: If no valid selection was made.
            StoreError: If the index cannot be read.
        """
        entry = self.resolve(identifier)
        logger.info("Installing %s-%s", entry.pkgname, entry.version)
        return self._store.install_explicit(entry.pkgname, entry.version)
