"""Terminal reporter with rich output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clover_check.config import MIN_TABLE_WIDTH
from clover_check.formatting import CheckStatus, format_coverage

if TYPE_CHECKING:
    from clover_check.formatting import CheckOutcome
    from clover_check.models.coverage import CoverageValue
    from clover_check.models.threshold import Threshold

console = Console()

OVERALL_TOTALS = "Overall Totals"


def _coverage_color(percentage: float, threshold: Threshold) -> str:
    """Return a Rich color name for *percentage* judged against *threshold*."""
    return "green" if threshold.is_met_by(percentage) else "red"


def _elements_cell(covered: int, total: int) -> str:
    return f"{covered}/{total}"


class CLIReporter:
    """Rich terminal output for coverage check results."""

    def __init__(self) -> None:
        """Initialize the CLI reporter."""
        self.console = console

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def print_percentage(self, message: str, *, passed: bool) -> None:
        """Print a bare percentage, colored by pass/fail."""
        self.console.print(escape(message), style="green" if passed else "red", highlight=False)

    def print_outcome(self, outcome: CheckOutcome, *, only_percentage: bool = False) -> None:
        """Print the message for a threshold or insufficient-data outcome."""
        if only_percentage and outcome.status is not CheckStatus.INSUFFICIENT_DATA:
            self.print_percentage(outcome.message, passed=outcome.passed)
        elif outcome.passed:
            self.print_success(outcome.message)
        else:
            self.print_error(outcome.message)

    def print_file_table(
        self,
        result: CoverageValue,
        threshold: Threshold,
        *,
        table_width: int = MIN_TABLE_WIDTH,
    ) -> None:
        """Print per-file coverage with an overall totals row.

        Coverage cells below the threshold are red, the rest green. The file
        column wraps at *table_width* characters (never less than 70).
        """
        table = Table()
        table.add_column(
            "File",
            max_width=max(MIN_TABLE_WIDTH, table_width),
            overflow="fold",
        )
        table.add_column("Elements (Covered/Total)")
        table.add_column("Coverage", justify="right")

        for file_cov in result.files or ():
            color = _coverage_color(file_cov.percentage, threshold)
            table.add_row(
                escape(file_cov.name),
                _elements_cell(file_cov.covered_elements, file_cov.elements),
                f"[{color}]{format_coverage(file_cov.percentage)}[/{color}]",
            )

        color = _coverage_color(result.percentage, threshold)
        table.add_section()
        table.add_row(
            f"[bold]{OVERALL_TOTALS}[/bold]",
            _elements_cell(result.covered_elements, result.elements),
            f"[bold {color}]{format_coverage(result.percentage)}[/bold {color}]",
        )

        self.console.print(table)


reporter = CLIReporter()
