"""Rich display functions for prune reports."""

import json
from typing import Any

from rich.table import Table

from nodeprune.engine import PruneResult
from nodeprune.utils.formatting import console, format_count, format_duration, format_size


def report_to_dict(result: PruneResult) -> dict[str, Any]:
    """Serialize a prune result for JSON output."""
    return {
        "files_total": result.stats.files_total,
        "files_removed": result.stats.files_removed,
        "bytes_removed": result.stats.bytes_removed,
        "duration_seconds": round(result.duration, 3),
        "dry_run": result.dry_run,
        "success": result.success,
        "error": str(result.error) if result.error else None,
    }


def create_report_table(result: PruneResult) -> Table:
    """Create a Rich table summarizing a prune run.

    Args:
        result: Result of the run.

    Returns:
        Two-column table of labelled report values.
    """
    title = "Prune Report (Dry Run)" if result.dry_run else "Prune Report"
    if not result.success:
        title += " - failed"

    table = Table(
        title=title,
        show_header=False,
        border_style="border",
    )
    table.add_column("Metric", style="label", justify="right")
    table.add_column("Value", style="value")

    removed_style = "removed" if result.stats.files_removed else "muted"
    table.add_row("files total", format_count(result.stats.files_total))
    table.add_row(
        "files removed",
        f"[{removed_style}]{format_count(result.stats.files_removed)}[/]",
    )
    table.add_row("size removed", format_size(result.stats.bytes_removed))
    table.add_row("duration", format_duration(result.duration))

    return table


def print_report(result: PruneResult) -> None:
    """Print the report table."""
    console.print()
    console.print(create_report_table(result))
    console.print()


def print_report_json(result: PruneResult) -> None:
    """Print the report as JSON."""
    console.print_json(json.dumps(report_to_dict(result)))
