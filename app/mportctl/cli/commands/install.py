"""Install command implementation.

Resolves identifiers against the index and installs them explicitly.
"""

from typing import Annotated

import typer

from mportctl.cli.display import print_result
from mportctl.cli.types import ConsoleChoiceProvider, open_store
from mportctl.core.errors import ExitCode, MportError
from mportctl.core.resolver import IdentifierResolver
from mportctl.utils.formatting import print_error


def install_packages(
    ctx: typer.Context,
    identifiers: Annotated[
        list[str],
        typer.Argument(help="Package names, optionally as name-version."),
    ],
) -> None:
    """Install packages from the index.

    Each identifier is resolved on its own. When a name matches several
    index entries you are asked to pick one.

    Examples:
        mportctl install curl           # Install by name
        mportctl install curl-8.5.0     # Install an exact version
    """
    store = open_store(ctx)
    resolver = IdentifierResolver(store, ConsoleChoiceProvider())

    exit_code = ExitCode.OK
    for identifier in identifiers:
        try:
            result = resolver.install(identifier)
        except MportError as e:
            print_error(str(e))
            exit_code = e.exit_code
            continue

        print_result(result)
        if result.failed:
            exit_code = ExitCode.FAILURE

    if exit_code != ExitCode.OK:
        raise typer.Exit(code=exit_code)
