"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from mportctl import __version__
from mportctl.cli.commands import (
    autoremove,
    config,
    cpe,
    delete,
    deleteall,
    info,
    install,
    listing,
    lock,
    search,
    stats,
    version,
    which,
)

# Create main Typer app
app = typer.Typer(
    name="mportctl",
    help="Install, remove, search and audit mport packages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mportctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.callback()
def main(
    ctx: typer.Context,
    version_flag: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Configuration file (default: ~/.config/mportctl/config.toml).",
        ),
    ] = None,
    database: Annotated[
        Path | None,
        typer.Option(
            "--database",
            "-d",
            help="Package database file, overriding the configuration.",
        ),
    ] = None,
) -> None:
    """mportctl - command front-end for the mport package manager."""
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    ctx.obj["database"] = database


# Register commands
app.command("install")(install.install_packages)
app.command("delete")(delete.delete_packages)
app.command("deleteall")(deleteall.delete_all)
app.command("autoremove")(autoremove.autoremove)
app.command("list")(listing.list_packages)
app.command("locks")(listing.list_locks)
app.command("lock")(lock.lock_package)
app.command("unlock")(lock.unlock_package)
app.command("search")(search.search_packages)
app.command("version")(version.version_compare)
app.command("info")(info.info)
app.command("which")(which.which)
app.command("stats")(stats.stats)
app.command("cpe")(cpe.cpe_list)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
