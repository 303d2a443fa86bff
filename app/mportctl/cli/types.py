"""Shared types and helpers for CLI commands.

This module provides the store factory and interactive helpers used by
several command modules.
"""

import logging
from pathlib import Path
from typing import Any

import typer

from mportctl.core.config import load_config
from mportctl.core.errors import MportError
from mportctl.core.resolver import ChoiceProvider
from mportctl.models.package import IndexEntry
from mportctl.store.base import PackageStore
from mportctl.store.snapshot import SnapshotStore
from mportctl.utils.formatting import console, err_console, print_error

logger = logging.getLogger(__name__)


def _root_obj(ctx: typer.Context) -> dict[str, Any]:
    root = ctx.find_root()
    root.ensure_object(dict)
    return root.obj


def open_store(ctx: typer.Context) -> PackageStore:
    """Return the package store for this invocation.

    The store is opened once per process from the configuration and the
    global ``--config``/``--database`` options, then cached on the root
    context. A store already present in the context object is used as is.

    Raises:
        typer.Exit: If the configuration or the database cannot be loaded.
    """
    obj = _root_obj(ctx)
    store: PackageStore | None = obj.get("store")
    if store is not None:
        return store

    config_path: Path | None = obj.get("config_path")
    database: Path | None = obj.get("database")
    try:
        config = load_config(config_path)
        if database is not None:
            config = config.model_copy(update={"database": database})
        store = SnapshotStore.from_config(config)
    except MportError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    obj["store"] = store
    return store


class ConsoleChoiceProvider(ChoiceProvider):
    """Ask the user on the terminal which candidate to use."""

    def present(self, candidates: list[IndexEntry]) -> None:
        console.print("Multiple packages found. Please select one:")
        for index, entry in enumerate(candidates):
            console.print(f"{index}. {entry.name_version}", highlight=False, markup=False)

    def read(self) -> str | None:
        try:
            return console.input()
        except EOFError:
            return None

    def reject(self, answer: str, count: int) -> None:
        logger.debug("Rejected selection %r", answer)
        err_console.print(f"Please select an entry 0 - {count - 1}")
