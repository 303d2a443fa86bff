"""Autoremove command implementation.

Removes automatically installed packages that nothing depends on any more.
"""

import typer

from mportctl.cli.display import print_results_table, print_unreadable
from mportctl.cli.types import open_store
from mportctl.core.errors import ExitCode, StoreError
from mportctl.core.removal import BulkRemovalPlanner
from mportctl.models.action import ActionResult
from mportctl.utils.formatting import print_error, print_info, print_success


def autoremove(ctx: typer.Context) -> None:
    """Delete orphaned dependency packages.

    Removing one orphan may orphan its own dependencies; those are
    removed in the same run.
    """
    store = open_store(ctx)

    results: list[ActionResult] = []
    planner = BulkRemovalPlanner(store, on_result=results.append)
    try:
        report = planner.autoremove()
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    print_unreadable(report)

    if not results:
        if report.unreadable:
            raise typer.Exit(code=ExitCode.FAILURE)
        print_info("No orphaned packages.")
        return

    print_results_table(results, title="Autoremove")

    if report.partial_failure:
        print_error(f"{report.deleted} removed, {report.errors} failed")
        raise typer.Exit(code=ExitCode.FAILURE)

    print_success(f"Removed {report.deleted} package(s).")
