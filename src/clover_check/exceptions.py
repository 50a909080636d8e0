"""Exception types raised by the coverage check."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clover_check.adapters.clover import XmlDiagnostic


def _format_number(value: float) -> str:
    return repr(value).removesuffix(".0")


class CoverageCheckError(Exception):
    """Base exception for every failure the coverage check can report."""


class InvalidInputFileError(CoverageCheckError):
    """Raised when the clover file path is empty or does not point at a file."""

    def __init__(self, input_file: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid input file provided. Was given: {input_file}")
        self.input_file = input_file


class FileReadError(InvalidInputFileError):
    """Raised when the clover file exists but its contents cannot be read."""

    def __init__(self, input_file: str, reason: str) -> None:
        super().__init__(input_file, f"Failed to get the contents of {input_file}: {reason}")
        self.reason = reason


class InvalidThresholdError(CoverageCheckError, ValueError):
    """Raised when a threshold string is not numeric."""

    def __init__(self, threshold: str) -> None:
        super().__init__(
            f"Invalid threshold provided. Was given: {threshold}, but should be numeric."
        )
        self.threshold = threshold


class ThresholdOutOfBoundsError(CoverageCheckError, ValueError):
    """Raised when a numeric threshold falls outside (0, 100]."""

    def __init__(self, threshold: float) -> None:
        super().__init__(
            "The threshold must be greater than 0 and at most 100, "
            f"{_format_number(threshold)} given"
        )
        self.threshold = threshold


class CloverXmlParseError(CoverageCheckError):
    """Raised when the clover file is not well-formed XML.

    The message lists every diagnostic the parser produced, one per line.
    """

    def __init__(self, diagnostics: list[XmlDiagnostic]) -> None:
        lines = "\n".join(str(diagnostic) for diagnostic in diagnostics)
        super().__init__(f"Unable to load Clover XML data. Parser returned:\n{lines}")
        self.diagnostics = diagnostics


class NotAValidCloverFileError(CoverageCheckError):
    """Raised when well-formed XML lacks the coverage/project/metrics shape."""

    def __init__(self) -> None:
        super().__init__(
            "Clover file appears to be invalid. "
            "Are you sure this is a Clover or OpenClover coverage report?"
        )


class ConfigError(CoverageCheckError):
    """Raised when the configuration file cannot be read or parsed."""
