"""Data models for mportctl.

This module exports the core data structures used throughout the application.
"""

from mportctl.models.action import Action, ActionResult, ActionType
from mportctl.models.package import IndexEntry, PackageRecord
from mportctl.models.report import (
    RemovalReport,
    SearchReport,
    StalenessReport,
    StalePackage,
)

__all__ = [
    "Action",
    "ActionResult",
    "ActionType",
    "IndexEntry",
    "PackageRecord",
    "RemovalReport",
    "SearchReport",
    "StalePackage",
    "StalenessReport",
]
