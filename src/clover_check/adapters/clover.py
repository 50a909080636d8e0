"""Clover / OpenClover XML report loading and metric extraction.

Clover reports are produced by PHPUnit, OpenClover and several JavaScript
tools. The layout this module relies on is::

    <coverage>
      <project>
        <metrics statements=".." coveredstatements=".." .../>
        <file name="..."><metrics .../></file>
        <package name="..."><file name="..."><metrics .../></file></package>
      </project>
    </coverage>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from defusedxml import DefusedXmlException, ElementTree
from defusedxml.ElementTree import ParseError as DefusedParseError

from clover_check.exceptions import (
    CloverXmlParseError,
    FileReadError,
    InvalidInputFileError,
    NotAValidCloverFileError,
)
from clover_check.models.coverage import CoverageMetrics, FileMetrics

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element as XmlElement

logger = logging.getLogger(__name__)

ROOT_TAG = "coverage"
PROJECT_METRICS_PATH = "project/metrics"


class Severity(Enum):
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal Error"


@dataclass(frozen=True)
class XmlDiagnostic:
    """A single problem reported by the XML parser."""

    severity: Severity
    code: int
    message: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        text = f"{self.severity.value} {self.code}: {self.message}."
        if self.line is not None:
            text += f" Line {self.line} Column {self.column or 0}"
        return text


def _diagnostic_from_parse_error(exc: DefusedParseError) -> XmlDiagnostic:
    line, column = getattr(exc, "position", (None, None))
    # ElementTree appends ": line N, column M" to the expat message.
    message = str(exc).rsplit(": line ", 1)[0].strip()
    return XmlDiagnostic(
        severity=Severity.FATAL,
        code=getattr(exc, "code", 0) or 0,
        message=message,
        line=line,
        column=column,
    )


def read_clover_file(clover_file: str | Path) -> bytes:
    """Return the raw bytes of *clover_file*.

    Raises:
        InvalidInputFileError: The path is empty or not an existing file.
        FileReadError: The file exists but could not be read.
    """
    if not str(clover_file):
        raise InvalidInputFileError("")
    path = Path(clover_file)
    if not path.is_file():
        raise InvalidInputFileError(str(clover_file))
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileReadError(str(clover_file), e.strerror or str(e)) from e


def parse_clover_xml(data: bytes | str) -> XmlElement:
    """Parse *data* into an element tree and return its root.

    DTDs, entity declarations and external references are refused by
    ``defusedxml`` and reported like any other parser error.

    Raises:
        CloverXmlParseError: The data is not well-formed XML.
    """
    try:
        return ElementTree.fromstring(data)
    except DefusedParseError as e:
        raise CloverXmlParseError([_diagnostic_from_parse_error(e)]) from e
    except DefusedXmlException as e:
        diagnostic = XmlDiagnostic(severity=Severity.ERROR, code=0, message=str(e))
        raise CloverXmlParseError([diagnostic]) from e


def is_possibly_clover(root: XmlElement) -> bool:
    """Return True if *root* has the coverage/project/metrics shape of a Clover report.

    This is a shallow structural check; the report is not validated against
    the Clover schema and files without metrics still pass.
    """
    if root.tag != ROOT_TAG:
        return False
    project = root.find("project")
    if project is None:
        return False
    metrics = project.find("metrics")
    return metrics is not None and len(metrics.attrib) > 0


def load_clover_document(clover_file: str | Path) -> XmlElement:
    """Read, parse and validate a Clover report, returning the root element.

    Raises:
        InvalidInputFileError: The file is missing or unreadable.
        CloverXmlParseError: The file is not well-formed XML.
        NotAValidCloverFileError: The XML does not look like a Clover report.
    """
    root = parse_clover_xml(read_clover_file(clover_file))
    if not is_possibly_clover(root):
        logger.debug("Rejected %s: root <%s> lacks project metrics", clover_file, root.tag)
        raise NotAValidCloverFileError
    return root


def _int_attr(element: XmlElement, key: str, default: int = 0) -> int:
    value = element.get(key)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        try:
            number = int(float(value))
        except (ValueError, OverflowError):
            return default
    return number if number >= 0 else default


def _counts(element: XmlElement, total_key: str) -> tuple[int, int]:
    total = _int_attr(element, total_key)
    return total, min(_int_attr(element, f"covered{total_key}"), total)


def metrics_from_element(element: XmlElement) -> CoverageMetrics:
    """Build CoverageMetrics from a ``<metrics>`` element's attributes.

    Missing, non-numeric or negative attributes count as 0; decimal values
    are truncated toward zero. A covered count larger than its total is
    capped at the total.
    """
    statements, covered_statements = _counts(element, "statements")
    methods, covered_methods = _counts(element, "methods")
    conditionals, covered_conditionals = _counts(element, "conditionals")
    return CoverageMetrics(
        statements=statements,
        covered_statements=covered_statements,
        methods=methods,
        covered_methods=covered_methods,
        conditionals=conditionals,
        covered_conditionals=covered_conditionals,
    )


class MetricsScope(Enum):
    PROJECT = "project"
    FILES = "files"


def extract_project_metrics(root: XmlElement) -> CoverageMetrics | None:
    """Return the project-level metrics, or None if the report has none."""
    element = root.find(PROJECT_METRICS_PATH)
    if element is None:
        return None
    return metrics_from_element(element)


def extract_file_metrics(root: XmlElement) -> list[FileMetrics]:
    """Return metrics for every ``<file>`` node in document order.

    Files nested in ``<package>`` elements are included. A file listed more
    than once is merged into its first entry.
    """
    merged: dict[str, CoverageMetrics] = {}
    for file_elem in root.iter("file"):
        metrics_elem = file_elem.find("metrics")
        if metrics_elem is None:
            continue
        name = file_elem.get("name") or file_elem.get("path", "")
        metrics = metrics_from_element(metrics_elem)
        if name in merged:
            logger.warning("File %s appears more than once; merging its metrics", name)
            merged[name] = merged[name] + metrics
        else:
            merged[name] = metrics

    logger.debug("Extracted metrics for %d file(s)", len(merged))
    return [FileMetrics(name=name, metrics=metrics) for name, metrics in merged.items()]
