"""List and locks command implementation.

Lists installed packages in several formats, or scans them against the
index for available updates.
"""

from enum import Enum
from typing import Annotated

import typer

from mportctl.cli.display import format_origin_block, format_stale_line, format_verbose_line
from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, StoreError
from mportctl.core.updates import find_outdated
from mportctl.models.package import PackageRecord
from mportctl.store.base import PackageStore
from mportctl.utils.formatting import emit, print_error, print_warning


class ListMode(str, Enum):
    """What the list command shows."""

    INSTALLED = "installed"
    UPDATES = "updates"
    UP = "up"
    PRIME = "prime"


def _format_record(
    record: PackageRecord,
    *,
    quiet: bool,
    origin: bool,
    locks: bool,
    prime: bool,
) -> str | None:
    """Pick the line for one record, or None to skip it."""
    if prime:
        return record.name if record.is_explicit else None
    if quiet and origin:
        return record.origin
    if quiet:
        return record.name
    if origin:
        return format_origin_block(record)
    if locks:
        return record.name_version if record.locked else None
    return format_verbose_line(record)


def _installed_or_exit(store: PackageStore, quiet: bool) -> list[PackageRecord]:
    try:
        records = store.list_installed()
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if not records:
        if not quiet:
            print_warning("No packages installed matching.")
        raise typer.Exit(code=ExitCode.NO_PACKAGES)
    return records


def _list_updates(store: PackageStore, quiet: bool, verbose: bool) -> None:
    _installed_or_exit(store, quiet)
    try:
        report = find_outdated(store)
    except StoreError as e:
        print_error(f"Error looking up package names: {e}")
        raise typer.Exit(code=e.exit_code) from e

    for item in report.items:
        emit(format_stale_line(item, verbose=verbose))


def print_installed(
    store: PackageStore,
    *,
    quiet: bool = False,
    origin: bool = False,
    locks: bool = False,
    prime: bool = False,
) -> None:
    """Print every installed package in the selected format.

    Raises:
        typer.Exit: If the listing fails or nothing is installed.
    """
    for record in _installed_or_exit(store, quiet):
        line = _format_record(record, quiet=quiet, origin=origin, locks=locks, prime=prime)
        if line is not None:
            emit(line)


def list_packages(
    ctx: typer.Context,
    mode: Annotated[
        ListMode,
        typer.Argument(
            help="installed (default), updates (alias: up), or prime.",
            case_sensitive=False,
        ),
    ] = ListMode.INSTALLED,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print package names.",
        ),
    ] = False,
    origin: Annotated[
        bool,
        typer.Option(
            "--origin",
            "-o",
            help="Print package origins.",
        ),
    ] = False,
    locks: Annotated[
        bool,
        typer.Option(
            "--locks",
            "-l",
            help="Only print locked packages.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="With updates, also show the OS release each package was built for.",
        ),
    ] = False,
) -> None:
    """List installed packages.

    Examples:
        mportctl list               # name-version, OS release and comment
        mportctl list --quiet       # Names only
        mportctl list updates       # Packages with newer index versions
        mportctl list prime         # Explicitly installed packages
    """
    store = open_store(ctx)

    if mode in (ListMode.UPDATES, ListMode.UP):
        _list_updates(store, quiet, verbose)
        return

    print_installed(
        store,
        quiet=quiet,
        origin=origin,
        locks=locks,
        prime=mode == ListMode.PRIME,
    )


def list_locks(ctx: typer.Context) -> None:
    """List locked packages."""
    print_installed(open_store(ctx), locks=True)
