"""Tests for coverage percentage calculation."""

from __future__ import annotations

import pytest

from clover_check.calculator import compute_file_coverage, compute_project_coverage
from clover_check.models.coverage import (
    UNAVAILABLE,
    CoverageMetrics,
    CoverageValue,
    FileMetrics,
    Unavailable,
)


def _file(name: str, covered: int, total: int) -> FileMetrics:
    return FileMetrics(name=name, metrics=CoverageMetrics(statements=total, covered_statements=covered))


# ── Project coverage ─────────────────────────────────────────────


class TestComputeProjectCoverage:
    def test_percentage_over_all_element_kinds(self) -> None:
        metrics = CoverageMetrics(
            statements=44,
            covered_statements=40,
            methods=14,
            covered_methods=12,
            conditionals=4,
            covered_conditionals=4,
        )
        result = compute_project_coverage(metrics)
        assert isinstance(result, CoverageValue)
        assert result.covered_elements == 56
        assert result.elements == 62
        assert result.percentage == pytest.approx(90.3225806)
        assert result.files is None

    def test_full_coverage(self) -> None:
        result = compute_project_coverage(CoverageMetrics(statements=5, covered_statements=5))
        assert isinstance(result, CoverageValue)
        assert result.percentage == 100.0

    def test_zero_covered(self) -> None:
        result = compute_project_coverage(CoverageMetrics(statements=5))
        assert isinstance(result, CoverageValue)
        assert result.percentage == 0.0

    def test_no_elements_is_unavailable(self) -> None:
        assert compute_project_coverage(CoverageMetrics()) is UNAVAILABLE

    def test_missing_metrics_is_unavailable(self) -> None:
        assert isinstance(compute_project_coverage(None), Unavailable)


# ── File coverage ────────────────────────────────────────────────


class TestComputeFileCoverage:
    def test_breakdown_in_input_order(self) -> None:
        result = compute_file_coverage(
            [_file("b.php", 1, 2), _file("a.php", 3, 4), _file("c.php", 0, 1)]
        )
        assert isinstance(result, CoverageValue)
        assert result.files is not None
        assert [f.name for f in result.files] == ["b.php", "a.php", "c.php"]
        assert [f.percentage for f in result.files] == [50.0, 75.0, 0.0]

    def test_aggregate_is_weighted_by_elements(self) -> None:
        # Mean of the two percentages would be about 54.6.
        result = compute_file_coverage([_file("small.php", 1, 1), _file("big.php", 10, 109)])
        assert isinstance(result, CoverageValue)
        assert result.covered_elements == 11
        assert result.elements == 110
        assert result.percentage == pytest.approx(10.0)

    def test_empty_files_skipped(self) -> None:
        result = compute_file_coverage([_file("empty.php", 0, 0), _file("a.php", 1, 2)])
        assert isinstance(result, CoverageValue)
        assert result.files is not None
        assert [f.name for f in result.files] == ["a.php"]
        assert result.percentage == 50.0

    def test_only_empty_files_is_unavailable(self) -> None:
        assert compute_file_coverage([_file("empty.php", 0, 0)]) is UNAVAILABLE

    def test_no_files_is_unavailable(self) -> None:
        assert compute_file_coverage([]) is UNAVAILABLE

    def test_accepts_generator(self) -> None:
        result = compute_file_coverage(_file(f"f{i}.php", i, 10) for i in range(1, 3))
        assert isinstance(result, CoverageValue)
        assert result.covered_elements == 3
        assert result.elements == 20

    def test_mixed_element_kinds_per_file(self) -> None:
        metrics = CoverageMetrics(
            statements=8, covered_statements=6, methods=2, covered_methods=2
        )
        result = compute_file_coverage([FileMetrics("mixed.php", metrics)])
        assert isinstance(result, CoverageValue)
        assert result.files is not None
        assert result.files[0].covered_elements == 8
        assert result.files[0].elements == 10
        assert result.files[0].percentage == 80.0


class TestCoverageMetrics:
    def test_addition_sums_every_count(self) -> None:
        total = CoverageMetrics(1, 1, 2, 1, 3, 0) + CoverageMetrics(4, 2, 0, 0, 1, 1)
        assert total == CoverageMetrics(5, 3, 2, 1, 4, 1)

    def test_elements_and_covered_elements(self) -> None:
        metrics = CoverageMetrics(10, 8, 4, 3, 2, 1)
        assert metrics.elements == 16
        assert metrics.covered_elements == 12
