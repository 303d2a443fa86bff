"""Package store interface and implementations."""

from mportctl.store.base import PackageStore
from mportctl.store.snapshot import SnapshotStore

__all__ = ["PackageStore", "SnapshotStore"]
