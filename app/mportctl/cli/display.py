"""Shared display functions for records, results and reports.

Plain-text line formats mirror the classic mport tools so that scripts
parsing them keep working; summaries and result tables use Rich.
"""

from mportctl.models.action import ActionResult
from mportctl.models.package import PackageRecord
from mportctl.models.report import RemovalReport, StalePackage
from mportctl.utils.formatting import (
    console,
    create_results_table,
    print_error,
    print_success,
)


def strip_backslashes(text: str) -> str:
    """Remove every backslash from a package comment."""
    return text.replace("\\", "")


def format_verbose_line(record: PackageRecord) -> str:
    """Format a package as 'name-version<TAB>os_release<TAB>comment'.

    The name-version label is cut to 29 characters and padded to 30.
    """
    label = record.name_version[:29]
    return f"{label:<30}\t{record.os_release:>6}\t{strip_backslashes(record.comment)}"


def format_origin_block(record: PackageRecord) -> str:
    """Format the multi-line origin description of a package."""
    return f"Information for {record.name_version}:\n\nOrigin:\n{record.origin}\n"


def format_stale_line(item: StalePackage, verbose: bool = False) -> str:
    """Format one line of a staleness scan.

    Args:
        item: Scan line to format.
        verbose: Include the OS release the package was built for.

    Returns:
        Formatted line without trailing newline.
    """
    record = item.record
    if item.index_version is None:
        return f"{record.name:<15} {record.version:>8} is no longer available."
    if verbose:
        return (
            f"{record.name:<15} {record.version:>8} ({record.os_release})  <  {item.index_version}"
        )
    return f"{record.name:<15} {record.version:>8}  <  {item.index_version:<8}"


def print_result(result: ActionResult) -> None:
    """Print a single action result as a success or error line."""
    action = result.action
    label = f"{action.package}-{action.version}" if action.version else action.package
    if result.success:
        print_success(f"{label}: {result.message or action.action_type.value}")
    else:
        print_error(f"{label}: {result.error or 'Unknown error'}")


def print_results_table(results: list[ActionResult], title: str = "Results") -> None:
    """Print action results as a Rich table.

    Successful results show "OK" status; failed results show "FAIL" with
    the error message.
    """
    table = create_results_table(title)
    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            message = result.message or ""
        else:
            status = "[error]FAIL[/error]"
            message = result.error or "Unknown error"

        table.add_row(
            status,
            result.action.action_type.value,
            result.action.package,
            f"[muted]{message}[/muted]",
        )

    console.print(table)


def print_removal_summary(report: RemovalReport) -> None:
    """Print the counters of a bulk removal run."""
    console.print(f"Packages deleted: {report.deleted}", highlight=False)
    console.print(f"Errors: {report.errors}", highlight=False)
    console.print(f"Total: {report.total}", highlight=False)
    if report.blocked:
        console.print(
            f"[warning]Not removed (still required):[/] {', '.join(report.blocked)}",
            highlight=False,
        )
    print_unreadable(report)


def print_unreadable(report: RemovalReport) -> None:
    """Print one error line per package whose dependents could not be read."""
    for name in report.unreadable:
        print_error(f"Cannot read dependents of {name}, not removed")
