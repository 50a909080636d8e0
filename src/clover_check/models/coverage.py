"""Coverage metric and result models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoverageMetrics:
    """Element counts read from a single Clover ``<metrics>`` node."""

    statements: int = 0
    covered_statements: int = 0
    methods: int = 0
    covered_methods: int = 0
    conditionals: int = 0
    covered_conditionals: int = 0

    @property
    def elements(self) -> int:
        """Return the number of tracked elements (statements, methods, conditionals)."""
        return self.statements + self.methods + self.conditionals

    @property
    def covered_elements(self) -> int:
        """Return the number of covered elements."""
        return self.covered_statements + self.covered_methods + self.covered_conditionals

    def __add__(self, other: CoverageMetrics) -> CoverageMetrics:
        if not isinstance(other, CoverageMetrics):
            return NotImplemented
        return CoverageMetrics(
            statements=self.statements + other.statements,
            covered_statements=self.covered_statements + other.covered_statements,
            methods=self.methods + other.methods,
            covered_methods=self.covered_methods + other.covered_methods,
            conditionals=self.conditionals + other.conditionals,
            covered_conditionals=self.covered_conditionals + other.covered_conditionals,
        )


@dataclass(frozen=True)
class FileMetrics:
    """Metrics for one ``<file>`` node, keyed by the file name in the report."""

    name: str
    metrics: CoverageMetrics


@dataclass(frozen=True)
class FileCoverage:
    """Computed coverage for a single file."""

    name: str
    """File path as written in the report."""

    covered_elements: int
    elements: int

    percentage: float
    """Coverage percentage (0.0 to 100.0), unrounded."""


@dataclass(frozen=True)
class CoverageValue:
    """A computed coverage percentage.

    ``files`` is ``None`` for project-level results and holds the per-file
    breakdown, in report order, for file-level results.
    """

    percentage: float
    covered_elements: int
    elements: int
    files: tuple[FileCoverage, ...] | None = None


@dataclass(frozen=True)
class Unavailable:
    """Outcome when the report tracks no elements at all."""


UNAVAILABLE = Unavailable()

CoverageResult = CoverageValue | Unavailable
