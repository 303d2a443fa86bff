"""Version command implementation.

Compares two version strings with the package version ordering.
"""

from typing import Annotated

import typer

from mportctl.core.errors import ExitCode
from mportctl.core.version import compare_versions, comparison_symbol
from mportctl.utils.formatting import emit, print_error

_USAGE = "Usage: mportctl version -t <v1> <v2>"


def version_compare(
    versions: Annotated[
        list[str] | None,
        typer.Argument(help="The two versions to compare."),
    ] = None,
    test: Annotated[
        bool,
        typer.Option(
            "--test",
            "-t",
            help="Compare two versions and print '<', '=' or '>'.",
        ),
    ] = False,
) -> None:
    """Compare package versions.

    Examples:
        mportctl version -t 1.2 1.3       # prints <
        mportctl version -t 2.0_1 2.0     # prints >
    """
    if not test or versions is None or len(versions) != 2:
        print_error(_USAGE)
        raise typer.Exit(code=ExitCode.INVALID_INPUT)

    left, right = versions
    emit(comparison_symbol(compare_versions(left, right)))
