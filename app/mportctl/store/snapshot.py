"""TOML-backed package store.

SnapshotStore keeps the installed-package database, the index and the
store settings in a single packages.toml file. The file is loaded once,
queried in memory, and rewritten atomically after every mutation. A
mutation is applied to a copy and only becomes visible once the write
succeeds.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import platform
import subprocess
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from mportctl.core.config import MportConfig
from mportctl.core.errors import StoreError
from mportctl.core.version import compare_versions
from mportctl.models.action import Action, ActionResult, ActionType, failed, succeeded
from mportctl.models.package import IndexEntry, PackageRecord
from mportctl.models.snapshot import IndexItem, InstalledEntry, PackageSnapshot
from mportctl.store.base import PackageStore
from mportctl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


def detect_os_release() -> str:
    """Derive the OS release tag from the running kernel.

    '3.2-RELEASE' becomes '3.2'.
    """
    return platform.release().split("-", 1)[0]


class SnapshotStore(PackageStore):
    """Package store backed by a local TOML snapshot.

    Attributes:
        path: File the snapshot is persisted to, or None to keep it in
            memory only.
    """

    def __init__(
        self,
        snapshot: PackageSnapshot | None = None,
        path: Path | None = None,
        *,
        os_release: str | None = None,
        delete_command: list[str] | None = None,
        delete_timeout: float = 300.0,
    ) -> None:
        """Initialize the store.

        Args:
            snapshot: Database contents. Defaults to an empty database.
            path: Where mutations are written. None disables persistence.
            os_release: Override for the running OS release.
            delete_command: External tool run before a record is dropped;
                the package name is appended to it.
            delete_timeout: Seconds to wait for the delete tool.
        """
        self._snapshot = snapshot if snapshot is not None else PackageSnapshot()
        self._path = path
        self._os_release = os_release
        self._delete_command = delete_command
        self._delete_timeout = delete_timeout

    @classmethod
    def open(cls, path: Path, **kwargs: object) -> SnapshotStore:
        """Load a snapshot file.

        Args:
            path: Path to packages.toml.
            **kwargs: Passed through to the constructor.

        Raises:
            StoreError: If the file is missing, unreadable or invalid.
        """
        if not path.exists():
            raise StoreError(f"Package database not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise StoreError(f"Invalid TOML syntax in {path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Failed to read package database: {e}") from e

        try:
            snapshot = PackageSnapshot.model_validate(data)
        except ValidationError as e:
            raise StoreError(f"Invalid package database content: {e}") from e

        logger.debug(
            "Loaded %d installed packages and %d index entries from %s",
            len(snapshot.installed),
            len(snapshot.index),
            path,
        )
        return cls(snapshot, path, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_config(cls, config: MportConfig) -> SnapshotStore:
        """Open the database named by a configuration."""
        return cls.open(
            config.database_path,
            os_release=config.os_release,
            delete_command=config.delete_command,
            delete_timeout=float(config.delete_timeout),
        )

    @property
    def path(self) -> Path | None:
        """Path the snapshot is persisted to."""
        return self._path

    @property
    def snapshot(self) -> PackageSnapshot:
        """The in-memory database contents."""
        return self._snapshot

    def save(self, snapshot: PackageSnapshot | None = None) -> None:
        """Write a snapshot atomically.

        Args:
            snapshot: Contents to write. Defaults to the current snapshot.

        Raises:
            StoreError: If the file cannot be written.
        """
        if self._path is None:
            return

        if snapshot is None:
            snapshot = self._snapshot
        data = snapshot.model_dump(mode="json")

        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="wb",
                dir=self._path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                tomli_w.dump(data, f)
            os.replace(str(tmp_path), str(self._path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StoreError(f"Failed to write package database: {e}") from e

    def _commit(self, staged: PackageSnapshot) -> None:
        """Write a modified copy of the snapshot, then make it current.

        Raises:
            StoreError: If the file cannot be written. The current
                snapshot is left untouched.
        """
        self.save(staged)
        self._snapshot = staged

    def _stage(self) -> PackageSnapshot:
        return self._snapshot.model_copy(deep=True)

    # -- queries ---------------------------------------------------------

    def lookup_by_name(self, name: str) -> list[IndexEntry]:
        return [item.to_entry() for item in self._snapshot.index if item.pkgname == name]

    def list_installed(self) -> list[PackageRecord]:
        return [entry.to_record(name) for name, entry in self._snapshot.installed.items()]

    def up_dependents(self, record: PackageRecord) -> list[PackageRecord]:
        return [
            entry.to_record(name)
            for name, entry in self._snapshot.installed.items()
            if record.name in entry.depends and name != record.name
        ]

    def get_installed(self, name: str) -> PackageRecord | None:
        entry = self._snapshot.installed.get(name)
        return entry.to_record(name) if entry is not None else None

    def current_os_release(self) -> str:
        return self._os_release or self._snapshot.system.os_release or detect_os_release()

    def search(self, term: str) -> list[IndexEntry]:
        # GLOB semantics: case-sensitive, no implicit wildcards
        return [
            item.to_entry()
            for item in self._snapshot.index
            if fnmatch.fnmatchcase(item.pkgname, term) or fnmatch.fnmatchcase(item.comment, term)
        ]

    def get_setting(self, key: str) -> str | None:
        return self._snapshot.settings.get(key)

    def owner_of(self, path: str) -> PackageRecord | None:
        for name, entry in self._snapshot.installed.items():
            if path in entry.files:
                return entry.to_record(name)
        return None

    def index_size(self) -> int:
        return len(self._snapshot.index)

    # -- mutations -------------------------------------------------------

    def set_setting(self, key: str, value: str) -> None:
        staged = self._stage()
        staged.settings[key] = value
        self._commit(staged)

    def set_locked(self, name: str, locked: bool) -> ActionResult:
        action = Action(ActionType.LOCK if locked else ActionType.UNLOCK, name)
        if name not in self._snapshot.installed:
            return failed(action, f"Package name not found, {name}")

        staged = self._stage()
        staged.installed[name].locked = locked
        try:
            self._commit(staged)
        except StoreError as e:
            return failed(action, str(e))
        return succeeded(action, "Locked" if locked else "Unlocked")

    def delete_package(self, name: str) -> ActionResult:
        action = Action(ActionType.DELETE, name)
        entry = self._snapshot.installed.get(name)
        if entry is None:
            return failed(action, f"{name} is not installed")
        action = Action(ActionType.DELETE, name, entry.version)

        if entry.locked:
            return failed(action, f"{name} is locked")

        if self._delete_command:
            error = self._run_delete_command(self._delete_command, name)
            if error is not None:
                return failed(action, error)

        staged = self._stage()
        del staged.installed[name]
        try:
            self._commit(staged)
        except StoreError as e:
            return failed(action, str(e))

        logger.info("Deleted %s-%s", name, entry.version)
        return succeeded(action, "Deleted")

    def _run_delete_command(self, command: list[str], name: str) -> str | None:
        """Run the external delete tool for one package.

        Returns:
            None on success, otherwise an error message.
        """
        tool = command[0]
        if not command_exists(tool) and not Path(tool).exists():
            return f"Delete command not available: {tool}"

        args = [*command, name]
        logger.debug("Running %s", " ".join(args))
        try:
            result = run_command(args, timeout=self._delete_timeout)
        except subprocess.TimeoutExpired:
            return f"Delete command timed out after {self._delete_timeout:.0f}s"
        except OSError as e:
            return f"Delete command failed to start: {e}"

        if not result.success:
            return result.stderr.strip() or f"Delete command exited with {result.returncode}"
        return None

    def install_explicit(self, name: str, version: str) -> ActionResult:
        action = Action(ActionType.INSTALL, name, version)
        item = self._find_index_item(name, version)
        if item is None:
            return failed(action, f"{name}-{version} is not in the index")

        staged = self._stage()
        existing = staged.installed.get(name)
        if existing is not None and existing.version == version:
            if existing.automatic:
                existing.automatic = False
                message = "Marked as explicitly installed"
            else:
                message = "Already installed"
        else:
            self._install_depends(item, staged.installed, seen={name})
            staged.installed[name] = self._new_entry(item, automatic=False)
            message = "Installed"

        try:
            self._commit(staged)
        except StoreError as e:
            return failed(action, str(e))

        logger.info("%s: %s-%s", message, name, version)
        return succeeded(action, message)

    def _find_index_item(self, name: str, version: str) -> IndexItem | None:
        for item in self._snapshot.index:
            if item.pkgname == name and item.version == version:
                return item
        return None

    def _newest_index_item(self, name: str) -> IndexItem | None:
        newest: IndexItem | None = None
        for item in self._snapshot.index:
            if item.pkgname != name:
                continue
            if newest is None or compare_versions(item.version, newest.version) > 0:
                newest = item
        return newest

    def _install_depends(
        self,
        item: IndexItem,
        installed: dict[str, InstalledEntry],
        seen: set[str],
    ) -> None:
        """Add missing dependencies of ``item`` to installed as automatic packages."""
        for dep in item.depends:
            if dep in seen or dep in installed:
                continue
            seen.add(dep)
            dep_item = self._newest_index_item(dep)
            if dep_item is None:
                logger.warning("Dependency %s of %s is not in the index", dep, item.pkgname)
                continue
            self._install_depends(dep_item, installed, seen)
            installed[dep] = self._new_entry(dep_item, automatic=True)
            logger.debug("Installed dependency %s-%s", dep, dep_item.version)

    def _new_entry(self, item: IndexItem, automatic: bool) -> InstalledEntry:
        return InstalledEntry(
            version=item.version,
            origin=item.origin,
            os_release=self.current_os_release(),
            automatic=automatic,
            comment=item.comment,
            depends=list(item.depends),
        )
