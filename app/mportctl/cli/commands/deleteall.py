"""Deleteall command implementation.

Removes every installed package, leaves first.
"""

from typing import Annotated

import typer

from mportctl.cli.display import print_removal_summary
from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, StoreError
from mportctl.core.removal import BulkRemovalPlanner
from mportctl.models.action import ActionResult
from mportctl.utils.formatting import print_error, print_warning


def _report_failure(result: ActionResult) -> None:
    if result.failed:
        print_error(f"Error deleting {result.action.package}: {result.error}")


def delete_all(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Do not ask for confirmation.",
        ),
    ] = False,
) -> None:
    """Delete all installed packages.

    Packages are removed only after everything that depends on them is
    gone. A failed delete does not stop the run; the summary reports it.

    Examples:
        mportctl deleteall          # Ask, then delete everything
        mportctl deleteall --yes    # Delete without asking
    """
    store = open_store(ctx)

    if not yes:
        confirmed = typer.confirm("Delete ALL installed packages?")
        if not confirmed:
            raise typer.Exit(code=ExitCode.OK)

    planner = BulkRemovalPlanner(store, on_result=_report_failure)
    try:
        report = planner.remove_all()
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if report.total == 0 and not report.blocked and not report.unreadable:
        print_warning("No packages installed.")
        raise typer.Exit(code=ExitCode.NO_PACKAGES)

    print_removal_summary(report)

    if report.partial_failure:
        raise typer.Exit(code=ExitCode.FAILURE)
