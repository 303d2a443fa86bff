"""CPE command implementation.

Prints the CPE identifier of every installed package that has one, for
feeding vulnerability scanners.
"""

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, StoreError
from mportctl.utils.formatting import emit, print_error, print_warning


def cpe_list(ctx: typer.Context) -> None:
    """List CPE identifiers of installed packages."""
    store = open_store(ctx)
    try:
        records = store.list_installed()
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if not records:
        print_warning("No packages installed.")
        raise typer.Exit(code=ExitCode.NO_PACKAGES)

    found = 0
    for record in records:
        if record.cpe:
            emit(record.cpe)
            found += 1

    if found == 0:
        print_error("No packages contained CPE information.")
        raise typer.Exit(code=ExitCode.FAILURE)
