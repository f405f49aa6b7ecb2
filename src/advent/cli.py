"""advent CLI — Typer-based entry point.

Commands
--------
solve       Solve one day from its input file.
run         Solve several days and print a report table.
list        List the registered days.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from advent.config.settings import get_settings

app = typer.Typer(
    name="advent",
    help="advent — Advent of Code 2024 puzzle solvers",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _parse_days(days: str) -> list[int]:
    try:
        return [int(d) for d in days.split(",") if d.strip()]
    except ValueError:
        raise typer.BadParameter(f"expected comma-separated day numbers, got {days!r}") from None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def solve(
    day: int = typer.Argument(..., help="Day number (1-16)."),
    part: Optional[int] = typer.Option(None, "--part", "-p", min=1, max=2, help="Only run this part."),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Read the puzzle input from this file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Solve one day and print its answers."""
    _setup_logging(verbose)
    from advent.registry import get_puzzle
    from advent.runner import load_input, solve as solve_day

    try:
        puzzle = get_puzzle(day)
        text = input_file.read_text(encoding="utf-8") if input_file else load_input(day)
    except (KeyError, FileNotFoundError) as exc:
        typer.echo(str(exc).strip("'\""), err=True)
        raise typer.Exit(1)

    result = solve_day(puzzle, text, parts=(part,) if part else (1, 2))
    if not result.ok:
        typer.echo(f"Day {day} failed: {result.error}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Day {day}: {puzzle.title}")
    for number, answer in result.answers.items():
        typer.echo(f"  part {number}: {answer}  ({result.timings_ms[f'part_{number}']:.1f}ms)")


@app.command()
def run(
    days: Optional[str] = typer.Option(None, "--days", "-d", help="Comma-separated days, e.g. 1,2,5."),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", help="Directory holding dayNN.txt inputs."),
    check: bool = typer.Option(False, "--check", help="Compare with the expected answers file."),
    answers: Optional[Path] = typer.Option(None, "--answers", help="Expected answers JSON (implies --check)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Solve several days and print a report."""
    _setup_logging(verbose)
    from advent.runner import check_answers, load_answers, run_days

    try:
        report = run_days(_parse_days(days) if days else None, data_dir)
    except KeyError as exc:
        typer.echo(str(exc).strip("'\""), err=True)
        raise typer.Exit(1)

    answers_file = answers or get_settings().answers_file
    if (check or answers) and answers_file is None:
        typer.echo("No answers file: pass --answers or set ADVENT_ANSWERS_FILE.", err=True)
        raise typer.Exit(1)
    if answers_file is not None and (check or answers):
        try:
            expected = load_answers(answers_file)
        except (FileNotFoundError, ValueError) as exc:
            typer.echo(f"Cannot read answers file {answers_file}: {exc}", err=True)
            raise typer.Exit(1)
        check_answers(report, expected)

    console = Console()
    table = Table(title="Advent of Code 2024", border_style="dim", show_header=True, header_style="bold")
    table.add_column("Day", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Part 1", justify="right")
    table.add_column("Part 2", justify="right")
    table.add_column("Time", justify="right", style="dim")
    for result in report.results:
        if result.ok:
            table.add_row(
                str(result.day),
                result.title,
                str(result.answers.get(1, "")),
                str(result.answers.get(2, "")),
                f"{result.total_ms:.1f}ms",
            )
        else:
            table.add_row(str(result.day), result.title, "[red]error[/red]", "", "")
    console.print(table)

    for result in report.failed:
        console.print(f"day {result.day}: {result.error}", style="red", markup=False, highlight=False)
    for message in report.mismatches:
        console.print(f"mismatch: {message}", style="red", markup=False, highlight=False)
    console.print(f"Total: {report.total_time_ms / 1000:.2f}s", style="dim")
    if report.mismatches:
        raise typer.Exit(1)


@app.command("list")
def list_days() -> None:
    """List the registered days."""
    from advent.registry import list_puzzles

    for puzzle in list_puzzles():
        typer.echo(f"  {puzzle.day:2d}  {puzzle.title}")


def main() -> int:
    """Entry point for the ``advent`` console script."""
    app()
    return 0
