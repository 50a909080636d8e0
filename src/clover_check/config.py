"""Configuration parsing from ``.clover-check.yml``."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from clover_check.exceptions import ConfigError, InvalidThresholdError, ThresholdOutOfBoundsError
from clover_check.models.threshold import MAX_THRESHOLD, Threshold

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".clover-check.yml"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")

MIN_TABLE_WIDTH = 70


def _resolve_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with environment variable values."""

    def _replace(match: re.Match[str]) -> str:
        var = match.group(1)
        resolved = os.environ.get(var)
        if resolved is None:
            logger.warning("Environment variable %s is not set (referenced in config)", var)
            return ""
        return resolved

    return _ENV_VAR_RE.sub(_replace, value)


def _resolve_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively resolve environment variables in a dictionary."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = _resolve_env_vars(value)
        elif isinstance(value, dict):
            result[key] = _resolve_dict(value)
        else:
            result[key] = value
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass
class CoverageConfig:
    """Default check options, overridden by command-line arguments."""

    threshold: float | str = MAX_THRESHOLD
    """Minimum acceptable coverage percentage (default: 100)."""

    only_percentage: bool = False
    """Print only the coverage percentage."""

    show_files: bool = False
    """Print a per-file coverage table."""


@dataclass
class ReportConfig:
    """Terminal output configuration."""

    table_width: int = MIN_TABLE_WIDTH
    """Maximum width of the file column in the per-file table."""


@dataclass
class CloverCheckConfig:
    """Complete resolved configuration."""

    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    source: Path | None = None
    """File the configuration was read from, if any."""


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        return {}
    return section


def _parse_coverage_config(raw: dict[str, Any]) -> CoverageConfig:
    """Parse the coverage section from raw YAML."""
    coverage_raw = _section(raw, "coverage")
    threshold = coverage_raw.get(
        "threshold", os.environ.get("CLOVER_CHECK_THRESHOLD", MAX_THRESHOLD)
    )
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        threshold = str(threshold)
    return CoverageConfig(
        threshold=threshold,
        only_percentage=_as_bool(coverage_raw.get("only_percentage", False)),
        show_files=_as_bool(coverage_raw.get("show_files", False)),
    )


def _parse_report_config(raw: dict[str, Any]) -> ReportConfig:
    """Parse the report section from raw YAML."""
    report_raw = _section(raw, "report")
    try:
        table_width = int(report_raw.get("table_width", MIN_TABLE_WIDTH))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"report.table_width must be an integer: {e}") from e
    return ReportConfig(table_width=table_width)


def _find_config_file(location: str | Path) -> Path | None:
    path = Path(location).resolve()
    if path.is_dir():
        path = path / CONFIG_FILENAME
    return path if path.is_file() else None


def load_config(location: str | Path = ".") -> CloverCheckConfig:
    """Load ``.clover-check.yml`` from a directory, or an explicit config file.

    Falls back to defaults and environment variables when no file exists.

    Raises:
        ConfigError: The file cannot be read or is not valid YAML.
    """
    config_file = _find_config_file(location)

    raw: dict[str, Any] = {}
    if config_file is not None:
        try:
            parsed = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration from {config_file}: {e}") from e
        if isinstance(parsed, dict):
            raw = _resolve_dict(parsed)
        elif parsed is not None:
            logger.warning("Ignoring %s: top level is not a mapping", config_file)

    return CloverCheckConfig(
        coverage=_parse_coverage_config(raw),
        report=_parse_report_config(raw),
        source=config_file,
    )


def _validate_coverage_config(coverage: CoverageConfig) -> list[str]:
    """Validate the default threshold with the rules applied to the CLI argument."""
    try:
        Threshold.from_value(coverage.threshold)
    except (InvalidThresholdError, ThresholdOutOfBoundsError) as e:
        return [f"coverage.threshold: {e}"]
    return []


def _validate_report_config(report: ReportConfig) -> list[str]:
    if report.table_width < MIN_TABLE_WIDTH:
        return [
            f"report.table_width must be at least {MIN_TABLE_WIDTH} (got: {report.table_width})"
        ]
    return []


def validate_config(config: CloverCheckConfig) -> list[str]:
    """Return a list of configuration errors; empty when the config is valid."""
    return _validate_coverage_config(config.coverage) + _validate_report_config(config.report)
