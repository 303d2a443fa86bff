"""CLI commands for mportctl.

This package contains all subcommand implementations.
"""

from mportctl.cli.commands import (
    autoremove,
    config,
    cpe,
    delete,
    deleteall,
    info,
    install,
    listing,
    lock,
    search,
    stats,
    version,
    which,
)

__all__ = [
    "autoremove",
    "config",
    "cpe",
    "delete",
    "deleteall",
    "info",
    "install",
    "listing",
    "lock",
    "search",
    "stats",
    "version",
    "which",
]
