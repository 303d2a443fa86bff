"""Which command implementation.

Finds the installed package that owns a file.
"""

from typing import Annotated

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode
from mportctl.utils.formatting import emit, print_error


def which(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Absolute path of an installed file.")],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the package.",
        ),
    ] = False,
    origin: Annotated[
        bool,
        typer.Option(
            "--origin",
            "-o",
            help="Print the package origin instead of name-version.",
        ),
    ] = False,
) -> None:
    """Show which package installed a file."""
    record = open_store(ctx).owner_of(path)
    if record is None:
        print_error(f"{path} does not belong to any installed package")
        raise typer.Exit(code=ExitCode.NOT_FOUND)

    if quiet and origin:
        emit(record.origin)
    elif quiet:
        emit(record.name_version)
    elif origin:
        emit(f"{path} was installed by package {record.origin}")
    else:
        emit(f"{path} was installed by package {record.name_version}")
