"""Config command implementation.

Reads and writes settings stored in the package database, such as the
mirror region.
"""

from typing import Annotated

import typer

from mportctl.cli.types import open_store
from mportctl.core.errors import StoreError
from mportctl.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Get or set package database settings.",
    no_args_is_help=True,
)


@app.command("get")
def get_setting(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name.")],
) -> None:
    """Show the value of a setting."""
    value = open_store(ctx).get_setting(key)
    if value is not None:
        console.print(f"Setting {key} value is {value}", highlight=False, markup=False)
    else:
        console.print(f"Setting {key} is undefined.", highlight=False, markup=False)


@app.command("set")
def set_setting(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Change the value of a setting."""
    try:
        open_store(ctx).set_setting(key, value)
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    print_success(f"Setting {key} set to {value}")
