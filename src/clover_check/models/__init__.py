"""Data models for coverage metrics, results and thresholds."""

from clover_check.models.coverage import (
    UNAVAILABLE,
    CoverageMetrics,
    CoverageResult,
    CoverageValue,
    FileCoverage,
    FileMetrics,
    Unavailable,
)
from clover_check.models.threshold import MAX_THRESHOLD, Threshold

__all__ = [
    "MAX_THRESHOLD",
    "UNAVAILABLE",
    "CoverageMetrics",
    "CoverageResult",
    "CoverageValue",
    "FileCoverage",
    "FileMetrics",
    "Threshold",
    "Unavailable",
]
