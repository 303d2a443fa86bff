"""Search command implementation.

Queries the index once per term and prints every hit as
'name<TAB>version<TAB>comment'.
"""

from typing import Annotated

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, InvalidInputError
from mportctl.core.search import format_entry, search_index
from mportctl.utils.formatting import emit, print_error


def search_packages(
    ctx: typer.Context,
    terms: Annotated[
        list[str] | None,
        typer.Argument(help="Glob patterns matched against names and comments."),
    ] = None,
) -> None:
    """Search the index.

    Terms are matched as globs against package names and descriptions.
    Terms without matches are skipped silently.

    Examples:
        mportctl search curl
        mportctl search 'py*' '*editor*'
    """
    store = open_store(ctx)

    try:
        report = search_index(store, terms or [], on_entry=lambda e: emit(format_entry(e)))
    except InvalidInputError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if report.partial_failure:
        print_error(f"Search failed for: {', '.join(report.failed_terms)}")
        raise typer.Exit(code=ExitCode.STORE_ERROR)
