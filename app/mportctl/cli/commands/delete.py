"""Delete command implementation.

Removes named packages one at a time. A package other installed
packages still depend on is refused.
"""

from typing import Annotated

import typer

from mportctl.cli.display import print_result
from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, MportError, PackageNotFoundError
from mportctl.utils.formatting import print_error


def delete_packages(
    ctx: typer.Context,
    names: Annotated[
        list[str],
        typer.Argument(help="Names of installed packages to delete."),
    ],
) -> None:
    """Delete installed packages.

    Examples:
        mportctl delete curl
        mportctl delete curl libnghttp2
    """
    store = open_store(ctx)

    exit_code = ExitCode.OK
    for name in names:
        try:
            record = store.get_installed(name)
            if record is None:
                raise PackageNotFoundError(name, "the installed packages")

            dependents = store.up_dependents(record)
            if dependents:
                required_by = ", ".join(dep.name for dep in dependents)
                print_error(f"{name} is required by: {required_by}")
                exit_code = ExitCode.FAILURE
                continue
        except MportError as e:
            print_error(str(e))
            exit_code = e.exit_code
            continue

        result = store.delete_package(name)
        print_result(result)
        if result.failed:
            exit_code = ExitCode.FAILURE

    if exit_code != ExitCode.OK:
        raise typer.Exit(code=exit_code)
