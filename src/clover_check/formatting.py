"""Formatting of coverage percentages and pass/fail messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from clover_check.models.coverage import CoverageValue

if TYPE_CHECKING:
    from clover_check.models.coverage import CoverageResult
    from clover_check.models.threshold import Threshold

INSUFFICIENT_DATA = "Insufficient data for calculation. Please add more code."
OK_TOTAL_CODE_COVERAGE = "Total code coverage is {coverage} - OK!"
ERROR_COVERAGE_BELOW_THRESHOLD = (
    "Total code coverage is {coverage} which is below the accepted {threshold}%"
)


class CheckStatus(Enum):
    PASSED = "passed"
    FAILED = "failed"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class CheckOutcome:
    """A coverage result judged against a threshold, with its display message."""

    status: CheckStatus
    message: str
    result: CoverageResult

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASSED


def format_coverage(number: float) -> str:
    """Return *number* rounded to two decimals with a percent sign, e.g. ``90.32%``."""
    return f"{number:.2f}%"


def evaluate(
    result: CoverageResult,
    threshold: Threshold,
    *,
    only_percentage: bool = False,
) -> CheckOutcome:
    """Judge *result* against *threshold* and build the message to show.

    Coverage equal to the threshold passes. With ``only_percentage`` the
    message is just the formatted percentage, whether or not it passes.
    Insufficient data always yields the same message.
    """
    if not isinstance(result, CoverageValue):
        return CheckOutcome(CheckStatus.INSUFFICIENT_DATA, INSUFFICIENT_DATA, result)

    coverage = format_coverage(result.percentage)
    passed = threshold.is_met_by(result.percentage)
    status = CheckStatus.PASSED if passed else CheckStatus.FAILED

    if only_percentage:
        message = coverage
    elif passed:
        message = OK_TOTAL_CODE_COVERAGE.format(coverage=coverage)
    else:
        message = ERROR_COVERAGE_BELOW_THRESHOLD.format(coverage=coverage, threshold=threshold)
    return CheckOutcome(status, message, result)
