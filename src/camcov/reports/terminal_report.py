from __future__ import annotations

from rich.console import Console
from rich.table import Table


def print_terminal_summary(result, cameras, console: Console = None) -> None:
    """
    Prints the coverage verdict as a table followed by a coloured verdict line.
    """
    console = console or Console()

    table = Table(title="Camera Coverage Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Cameras", str(len(cameras)))
    table.add_row("Effective cameras", str(result.effective_cameras))
    table.add_row("Stripes checked", str(result.stripes_checked))
    table.add_row("Reason", result.reason)
    if result.failed_stripe is not None:
        table.add_row("Failed stripe", f"[{result.failed_stripe.start}, {result.failed_stripe.end}]")
    for d, lv in result.uncovered_corners:
        table.add_row("Uncovered corner", f"({d:g}, {lv:g})")
    console.print(table)

    for note in result.notes:
        console.print(f"[dim]- {note}[/dim]")

    if result.sufficient:
        console.print("[bold green]Coverage SUFFICIENT[/bold green]")
    else:
        console.print("[bold red]Coverage INSUFFICIENT[/bold red]")


def print_lattice_summary(summary, console: Console = None) -> None:
    """Prints a LatticeSummary (integer lattice points of the requirement)."""
    console = console or Console()

    table = Table(title="Lattice Coverage")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Lattice points", str(summary.points))
    table.add_row("Covered", f"{summary.covered} ({summary.coverage_pct:.2f}%)")
    table.add_row("Single-covered", str(summary.single_covered))
    table.add_row("Blind spots", str(summary.uncovered))
    console.print(table)
