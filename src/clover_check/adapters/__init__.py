"""Report adapters that turn coverage files into metric models."""

from clover_check.adapters.clover import (
    MetricsScope,
    Severity,
    XmlDiagnostic,
    extract_file_metrics,
    extract_project_metrics,
    is_possibly_clover,
    load_clover_document,
    metrics_from_element,
    parse_clover_xml,
    read_clover_file,
)

__all__ = [
    "MetricsScope",
    "Severity",
    "XmlDiagnostic",
    "extract_file_metrics",
    "extract_project_metrics",
    "is_possibly_clover",
    "load_clover_document",
    "metrics_from_element",
    "parse_clover_xml",
    "read_clover_file",
]
