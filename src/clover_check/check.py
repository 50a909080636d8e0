"""Coverage check request building and execution.

Typical library use::

    request = (
        CoverageCheckBuilder()
        .set_input_file("build/clover.xml")
        .set_threshold("90")
        .build()
    )
    outcome = CoverageCheck(request).evaluate()
    print(outcome.message)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from clover_check.adapters.clover import (
    MetricsScope,
    extract_file_metrics,
    extract_project_metrics,
    load_clover_document,
)
from clover_check.calculator import compute_file_coverage, compute_project_coverage
from clover_check.exceptions import InvalidInputFileError
from clover_check.formatting import CheckOutcome, evaluate
from clover_check.models.coverage import CoverageResult
from clover_check.models.threshold import MAX_THRESHOLD, Threshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverageCheckRequest:
    """Validated inputs for a single coverage check."""

    clover_file: Path
    threshold: Threshold
    only_percentage: bool = False


class CoverageCheckBuilder:
    """Collects and validates check inputs, then builds a CoverageCheckRequest.

    Each setter validates its argument immediately and returns the builder so
    calls can be chained.
    """

    def __init__(self) -> None:
        self._clover_file: Path | None = None
        self._threshold = Threshold(MAX_THRESHOLD)
        self._only_percentage = False

    def set_input_file(self, clover_file: str | Path) -> CoverageCheckBuilder:
        """Set the Clover report to read.

        Raises:
            InvalidInputFileError: The path is empty or not an existing file.
        """
        if not str(clover_file) or not Path(clover_file).is_file():
            raise InvalidInputFileError(str(clover_file))
        self._clover_file = Path(clover_file)
        return self

    def set_threshold(self, threshold: str | int | float | Threshold) -> CoverageCheckBuilder:
        """Set the minimum acceptable coverage.

        Raises:
            InvalidThresholdError: A string threshold is not numeric.
            ThresholdOutOfBoundsError: The value is outside (0, 100].
        """
        if isinstance(threshold, Threshold):
            self._threshold = threshold
        else:
            self._threshold = Threshold.from_value(threshold)
        return self

    def set_percentage_only_mode(self, enabled: bool = True) -> CoverageCheckBuilder:
        self._only_percentage = enabled
        return self

    def build(self) -> CoverageCheckRequest:
        if self._clover_file is None:
            raise InvalidInputFileError("")
        return CoverageCheckRequest(
            clover_file=self._clover_file,
            threshold=self._threshold,
            only_percentage=self._only_percentage,
        )


class CoverageCheck:
    """Runs a coverage check for one request.

    Every call re-reads the report; nothing is cached between calls.
    """

    def __init__(self, request: CoverageCheckRequest) -> None:
        self.request = request

    def compute_project_coverage(self) -> CoverageResult:
        """Return coverage from the report's project-level metrics."""
        root = load_clover_document(self.request.clover_file)
        return compute_project_coverage(extract_project_metrics(root))

    def compute_file_coverage(self) -> CoverageResult:
        """Return per-file coverage and the element-weighted aggregate."""
        root = load_clover_document(self.request.clover_file)
        return compute_file_coverage(extract_file_metrics(root))

    def compute(self, scope: MetricsScope = MetricsScope.PROJECT) -> CoverageResult:
        if scope is MetricsScope.FILES:
            return self.compute_file_coverage()
        return self.compute_project_coverage()

    def evaluate(self, scope: MetricsScope = MetricsScope.PROJECT) -> CheckOutcome:
        """Compute coverage for *scope* and judge it against the threshold."""
        result = self.compute(scope)
        outcome = evaluate(
            result,
            self.request.threshold,
            only_percentage=self.request.only_percentage,
        )
        logger.debug(
            "Coverage check of %s (%s): %s",
            self.request.clover_file,
            scope.value,
            outcome.status.value,
        )
        return outcome


def check_coverage(
    clover_file: str | Path,
    threshold: str | int | float = MAX_THRESHOLD,
    *,
    only_percentage: bool = False,
    show_files: bool = False,
) -> str:
    """Run a coverage check outside the CLI and return the message it would print.

    Raises the same typed errors as the CLI reports: invalid input file,
    invalid threshold, XML parse failure or invalid Clover document.
    """
    request = (
        CoverageCheckBuilder()
        .set_input_file(clover_file)
        .set_threshold(threshold)
        .set_percentage_only_mode(only_percentage)
        .build()
    )
    scope = MetricsScope.FILES if show_files else MetricsScope.PROJECT
    return CoverageCheck(request).evaluate(scope).message
