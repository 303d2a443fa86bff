"""Stats command implementation."""

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import StoreError
from mportctl.utils.formatting import emit, print_error


def stats(ctx: typer.Context) -> None:
    """Show installed and available package counts."""
    store = open_store(ctx)
    try:
        installed = len(store.list_installed())
        available = store.index_size()
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    emit("Local package database:")
    emit(f"\tInstalled packages: {installed}")
    emit("\nRemote package database:")
    emit(f"\tPackages available: {available}")
