"""Info command implementation.

Shows what is known about a package: its installed record if there is
one, and the versions the index offers.
"""

from typing import Annotated

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, PackageNotFoundError, StoreError
from mportctl.models.package import IndexEntry, PackageRecord
from mportctl.utils.formatting import console, print_error


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _print_record(record: PackageRecord) -> None:
    console.print(f"[bold_header]{record.name_version}[/]", highlight=False)
    console.print(f"Origin      : {record.origin or '-'}", highlight=False, markup=False)
    console.print(f"Comment     : {record.comment or '-'}", highlight=False, markup=False)
    console.print(f"OS release  : {record.os_release or '-'}", highlight=False, markup=False)
    console.print(f"CPE         : {record.cpe or '-'}", highlight=False, markup=False)
    console.print(f"Locked      : {_yes_no(record.locked)}", highlight=False)
    console.print(f"Automatic   : {_yes_no(record.automatic)}", highlight=False)
    if record.depends:
        console.print(f"Depends on  : {', '.join(record.depends)}", highlight=False)


def _print_available(entries: list[IndexEntry]) -> None:
    versions = ", ".join(entry.version for entry in entries)
    console.print(f"Available   : {versions}", highlight=False, markup=False)
    if entries[0].comment:
        console.print(f"Index entry : {entries[0].comment}", highlight=False, markup=False)


def info(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Package name.")],
) -> None:
    """Show information about a package."""
    store = open_store(ctx)

    try:
        record = store.get_installed(name)
        entries = store.lookup_by_name(name)
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if record is None and not entries:
        print_error(str(PackageNotFoundError(name, "the index or installed packages")))
        raise typer.Exit(code=ExitCode.NOT_FOUND)

    if record is not None:
        _print_record(record)
    else:
        console.print(f"[bold_header]{name}[/] (not installed)", highlight=False)

    if entries:
        _print_available(entries)
