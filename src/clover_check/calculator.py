"""Coverage percentage calculation for project and per-file metrics."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clover_check.models.coverage import (
    UNAVAILABLE,
    CoverageResult,
    CoverageValue,
    FileCoverage,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from clover_check.models.coverage import CoverageMetrics, FileMetrics

logger = logging.getLogger(__name__)


def _percentage(covered: int, total: int) -> float:
    return 100.0 * covered / total


def compute_project_coverage(metrics: CoverageMetrics | None) -> CoverageResult:
    """Return the coverage of the project-level metrics node.

    Returns UNAVAILABLE when there are no metrics or no tracked elements.
    """
    if metrics is None or metrics.elements == 0:
        return UNAVAILABLE
    return CoverageValue(
        percentage=_percentage(metrics.covered_elements, metrics.elements),
        covered_elements=metrics.covered_elements,
        elements=metrics.elements,
    )


def compute_file_coverage(file_metrics: Iterable[FileMetrics]) -> CoverageResult:
    """Return per-file coverage plus the element-weighted aggregate.

    Files that track no elements are left out of both the breakdown and the
    aggregate. The aggregate is total covered elements over total elements
    across the remaining files, not the mean of their percentages.
    """
    files: list[FileCoverage] = []
    covered_sum = 0
    total_sum = 0

    for entry in file_metrics:
        total = entry.metrics.elements
        if total == 0:
            logger.debug("Skipping %s: no tracked elements", entry.name)
            continue
        covered = entry.metrics.covered_elements
        files.append(
            FileCoverage(
                name=entry.name,
                covered_elements=covered,
                elements=total,
                percentage=_percentage(covered, total),
            )
        )
        covered_sum += covered
        total_sum += total

    if total_sum == 0:
        return UNAVAILABLE

    return CoverageValue(
        percentage=_percentage(covered_sum, total_sum),
        covered_elements=covered_sum,
        elements=total_sum,
        files=tuple(files),
    )
