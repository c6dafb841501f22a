"""CLI for trebuchet.

Usage:
    python -m trebuchet                              # Both parts over input/day1.txt
    python -m trebuchet --input other.txt            # Both parts over another file
    python -m trebuchet total --rule named --json    # One part, JSON breakdown
    python -m trebuchet explain --rule literal       # Per-line table
    python -m trebuchet line xtwone3four             # Value of a single line
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from trebuchet.config import INPUT_ENV_VAR, resolve_input_path
from trebuchet.models import PART_RULES, Rule
from trebuchet.report import render_report
from trebuchet.scanner import extract_value
from trebuchet.summation import DocumentUnreadableError, scan_document, sum_document

app = typer.Typer(
    name="trebuchet",
    help="Sum the calibration values of a trebuchet calibration document",
)
console = Console(stderr=True)

_INPUT_HELP = f"Calibration document (default: ${INPUT_ENV_VAR} or input/day1.txt)"


def _document_path(ctx: typer.Context, input_path: Optional[Path]) -> Path:
    """Subcommand --input, else the one given before the subcommand, else config."""
    return resolve_input_path(input_path if input_path is not None else ctx.obj)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help=_INPUT_HELP),
) -> None:
    """Print the part 1 and part 2 totals when no command is given."""
    # Subcommands fall back to the top-level --input
    ctx.obj = input_path
    if ctx.invoked_subcommand is not None:
        return
    path = resolve_input_path(input_path)
    try:
        for part, rule in PART_RULES:
            total = sum_document(path, rule)
            typer.echo(f"Day 1 part {part} : total from input is {total}.")
    except DocumentUnreadableError as e:
        typer.echo(str(e))
        raise typer.Exit(1)


@app.command("total")
def cmd_total(
    ctx: typer.Context,
    rule: Rule = typer.Option(Rule.NAMED, "--rule", "-r", help="Digit rule: literal or named"),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help=_INPUT_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the per-line breakdown as JSON"),
) -> None:
    """Print the total for a single rule."""
    path = _document_path(ctx, input_path)
    try:
        report = scan_document(path, rule)
    except DocumentUnreadableError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        typer.echo(str(report.total))


@app.command("explain")
def cmd_explain(
    ctx: typer.Context,
    rule: Rule = typer.Option(Rule.NAMED, "--rule", "-r", help="Digit rule: literal or named"),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help=_INPUT_HELP),
) -> None:
    """Show the digits found on every line."""
    path = _document_path(ctx, input_path)
    try:
        report = scan_document(path, rule)
    except DocumentUnreadableError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    render_report(report, console)


@app.command("line")
def cmd_line(
    text: str = typer.Argument(help="A single calibration line (e.g., 'xtwone3four')"),
    rule: Rule = typer.Option(Rule.NAMED, "--rule", "-r", help="Digit rule: literal or named"),
) -> None:
    """Print the calibration value of one line."""
    typer.echo(str(extract_value(text, rule)))


if __name__ == "__main__":
    app()
