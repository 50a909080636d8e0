"""clover-check CLI: gate a build on Clover report coverage."""

from __future__ import annotations

import logging

import click

from clover_check import __version__
from clover_check.adapters.clover import MetricsScope
from clover_check.check import CoverageCheck, CoverageCheckBuilder
from clover_check.config import CloverCheckConfig, load_config, validate_config
from clover_check.exceptions import ConfigError, CoverageCheckError
from clover_check.formatting import CheckOutcome
from clover_check.logging_config import init_logging
from clover_check.models.coverage import CoverageValue
from clover_check.reporters.terminal import reporter

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def _load_checked_config(config_path: str | None) -> CloverCheckConfig:
    try:
        config = load_config(config_path or ".")
    except ConfigError as e:
        reporter.print_error(str(e))
        raise SystemExit(EXIT_INVALID) from e

    errors = validate_config(config)
    if errors:
        reporter.print_error(f"Found {len(errors)} configuration error(s):")
        for error in errors:
            reporter.print_error(error)
        raise SystemExit(EXIT_INVALID)
    return config


def _exit_code(outcome: CheckOutcome) -> int:
    return EXIT_SUCCESS if outcome.passed else EXIT_FAILURE


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("clover_file", metavar="CLOVERFILE")
@click.argument("threshold", required=False)
@click.option(
    "-O",
    "--only-percentage",
    is_flag=True,
    help="Only print the resulting coverage percentage.",
)
@click.option(
    "-F",
    "--show-files",
    is_flag=True,
    help="Show a breakdown of coverage by file.",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="Configuration file, or a directory containing .clover-check.yml.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
@click.version_option(version=__version__, prog_name="clover-check")
def cli(
    clover_file: str,
    threshold: str | None,
    *,
    only_percentage: bool,
    show_files: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Calculate the coverage score of a Clover XML report.

    THRESHOLD is the minimum acceptable coverage, greater than 0 and at most
    100. When omitted it is read from .clover-check.yml (default: 100).

    Exit status is 0 when coverage meets the threshold, 1 when it is below
    the threshold or the report has no data, and 2 for invalid input.

    Example:
      clover-check build/logs/clover.xml 90
      clover-check build/logs/clover.xml 90 --only-percentage
      clover-check build/logs/clover.xml 90 --show-files
    """
    init_logging(logging.DEBUG if verbose else logging.WARNING)
    config = _load_checked_config(config_path)

    only_percentage = only_percentage or config.coverage.only_percentage
    show_files = show_files or config.coverage.show_files
    scope = MetricsScope.FILES if show_files else MetricsScope.PROJECT

    try:
        request = (
            CoverageCheckBuilder()
            .set_input_file(clover_file)
            .set_threshold(threshold if threshold is not None else config.coverage.threshold)
            .set_percentage_only_mode(only_percentage)
            .build()
        )
        outcome = CoverageCheck(request).evaluate(scope)
    except CoverageCheckError as e:
        logger.debug("Coverage check aborted", exc_info=True)
        reporter.print_error(str(e))
        raise SystemExit(EXIT_INVALID) from e

    if show_files and isinstance(outcome.result, CoverageValue):
        reporter.print_file_table(
            outcome.result,
            request.threshold,
            table_width=config.report.table_width,
        )
    else:
        reporter.print_outcome(outcome, only_percentage=only_percentage)

    code = _exit_code(outcome)
    if code != EXIT_SUCCESS:
        raise SystemExit(code)
