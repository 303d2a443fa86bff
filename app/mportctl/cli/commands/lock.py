"""Lock and unlock command implementation.

Locked packages are protected from upgrade and removal.
"""

from typing import Annotated

import typer

from mportctl.cli.display import print_result
from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode

PackageName = Annotated[str, typer.Argument(help="Name of an installed package.")]


def _set_locked(ctx: typer.Context, name: str, locked: bool) -> None:
    result = open_store(ctx).set_locked(name, locked)
    print_result(result)
    if result.failed:
        raise typer.Exit(code=ExitCode.FAILURE)


def lock_package(ctx: typer.Context, name: PackageName) -> None:
    """Lock a package against upgrade and removal."""
    _set_locked(ctx, name, True)


def unlock_package(ctx: typer.Context, name: PackageName) -> None:
    """Unlock a previously locked package."""
    _set_locked(ctx, name, False)
