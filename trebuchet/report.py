"""Rich rendering of a document pass.

Shows one row per line with the first digit, last digit and calibration
value found, followed by the total.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trebuchet.models import DocumentReport


def _fmt_digit(d: Optional[int]) -> str:
    """Format a found digit, dimmed placeholder when none."""
    if d is None:
        return "[dim]--[/dim]"
    return str(d)


def render_report(report: DocumentReport, console: Console) -> None:
    """Render a Rich table of per-line calibration values."""
    if not report.lines:
        console.print(f"[yellow]No lines in {report.path}[/yellow]")
        return

    table = Table(
        title=f"Calibration: {report.path} ({report.rule.value} rule)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Line", min_width=20)
    table.add_column("First", justify="right", style="green")
    table.add_column("Last", justify="right", style="cyan")
    table.add_column("Value", justify="right")

    for line in report.lines:
        value = str(line.value) if line.first is not None else "[yellow]0[/yellow]"
        table.add_row(
            str(line.number),
            escape(line.text),
            _fmt_digit(line.first),
            _fmt_digit(line.last),
            value,
        )

    console.print()
    console.print(table)
    console.print(f"[bold]Total:[/bold] {report.total}")
    if report.blank_count:
        console.print(f"[yellow]{report.blank_count} line(s) without a digit contributed 0[/yellow]")
    console.print()
