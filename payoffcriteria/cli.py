"""PayoffCriteria CLI — Command-line driver for the decision criteria.

Commands:
    payoffcriteria evaluate   Evaluate Minimax, Savage and Hurwicz for a matrix
    payoffcriteria version    Show the installed version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from payoffcriteria import __version__
from payoffcriteria.exceptions import CriteriaError

if TYPE_CHECKING:
    from payoffcriteria.evaluator.models import CriteriaReport

app = typer.Typer(
    name="payoffcriteria",
    help="📐 PayoffCriteria — Decision criteria for choosing under uncertainty",
    add_completion=False,
)

console = Console()

OUTPUT_FORMATS = ("plain", "table", "json")

_POSTURES = {
    "minimax": "Pessimist: best worst case",
    "savage": "Least worst-case regret",
    "hurwicz": "Weighted worst/best case",
}


# ---------------------------------------------------------------------------
# Evaluate command
# ---------------------------------------------------------------------------


@app.command("evaluate")
def evaluate(
    matrix_path: Optional[Path] = typer.Argument(
        None, help="YAML/JSON profit matrix (defaults to the built-in example)",
    ),
    coefficient: Optional[float] = typer.Option(
        None, "--coefficient", "-c",
        help="Hurwicz pessimism coefficient (0.0–1.0, default 0.8)",
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config",
        help="YAML/JSON evaluation config",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Reject coefficients outside [0, 1]",
    ),
    fmt: str = typer.Option(
        "plain", "--format", "-f",
        help="Output format: 'plain', 'table' or 'json'",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Evaluate the Minimax, Savage and Hurwicz criteria for a profit matrix."""
    from payoffcriteria.config import EvaluationConfig
    from payoffcriteria.evaluator.scorer import CriteriaScorer
    from payoffcriteria.loader import (
        document_coefficient,
        parse_matrix,
        read_document,
        reference_matrix,
    )

    _configure_logging(verbose)

    if fmt not in OUTPUT_FORMATS:
        console.print(
            f"[red]Error:[/] Unknown format '{fmt}'. Use one of: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(1)

    try:
        config = EvaluationConfig.from_file(config_path) if config_path else EvaluationConfig()

        if matrix_path is None:
            matrix = reference_matrix()
            embedded = None
        else:
            data = read_document(matrix_path)
            matrix = parse_matrix(data)
            embedded = document_coefficient(data)

        # Command line beats the matrix file, which beats the config file
        config = config.with_overrides(
            coefficient=coefficient if coefficient is not None else embedded,
            strict_coefficient=True if strict else None,
        )

        report = CriteriaScorer(config).evaluate(matrix)
    except CriteriaError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)

    if fmt == "json":
        typer.echo(report.model_dump_json(indent=2))
    elif fmt == "table":
        _display_report_table(report, config.precision)
    else:
        for result in report.results():
            console.print(f"{result.name.capitalize()}: {format_value(result.value)}")


# ---------------------------------------------------------------------------
# Misc commands
# ---------------------------------------------------------------------------


@app.command("version")
def version() -> None:
    """Show the PayoffCriteria version."""
    console.print(f"PayoffCriteria v{__version__}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def format_value(value: float, precision: int = 6) -> str:
    """Shortest general form: 2.0 -> '2', 4.4000000000000004 -> '4.4'."""
    text = f"{value:.{precision}g}"
    return "0" if text == "-0" else text


def _configure_logging(verbose: bool) -> None:
    """Route package logs through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _display_report_table(report: CriteriaReport, precision: int) -> None:
    """Display a criteria report as a rich table."""
    table = Table(
        title=(
            f"📊 Criteria ({report.rows}×{report.columns}, "
            f"Hurwicz coefficient {format_value(report.coefficient)})"
        ),
        show_header=True,
    )
    table.add_column("Criterion", style="bold cyan")
    table.add_column("Value", justify="right")
    table.add_column("Strategy", style="bold")
    table.add_column("Posture")

    for result in report.results():
        table.add_row(
            result.name.capitalize(),
            format_value(result.value, precision),
            result.strategy_label,
            _POSTURES.get(result.name, ""),
        )
    console.print(table)
