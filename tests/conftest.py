"""Shared Clover report fixtures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

# Two files: String.php 36/38 elements, StringList.php 20/24. Project 56/62 = 90.32%.
CLOVER_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<coverage generated="1700000000">
  <project timestamp="1700000000">
    <package name="Example">
      <file name="/tmp/Example/String.php">
        <class name="Example\\String" namespace="Example">
          <metrics complexity="10" methods="8" coveredmethods="7" conditionals="2" coveredconditionals="2" statements="28" coveredstatements="27" elements="38" coveredelements="36"/>
        </class>
        <line num="10" type="method" name="__construct" count="3"/>
        <metrics loc="120" ncloc="90" classes="1" methods="8" coveredmethods="7" conditionals="2" coveredconditionals="2" statements="28" coveredstatements="27" elements="38" coveredelements="36"/>
      </file>
      <file name="/tmp/Example/StringList.php">
        <metrics loc="80" ncloc="60" classes="1" methods="6" coveredmethods="5" conditionals="2" coveredconditionals="2" statements="16" coveredstatements="13" elements="24" coveredelements="20"/>
      </file>
    </package>
    <metrics files="2" loc="200" ncloc="150" classes="2" methods="14" coveredmethods="12" conditionals="4" coveredconditionals="4" statements="44" coveredstatements="40" elements="62" coveredelements="56"/>
  </project>
</coverage>
"""

EMPTY_CLOVER_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<coverage generated="1700000000">
  <project timestamp="1700000000">
    <file name="/tmp/Example/Empty.php">
      <metrics loc="3" ncloc="3" classes="0" methods="0" coveredmethods="0" conditionals="0" coveredconditionals="0" statements="0" coveredstatements="0" elements="0" coveredelements="0"/>
    </file>
    <metrics files="1" loc="3" ncloc="3" classes="0" methods="0" coveredmethods="0" conditionals="0" coveredconditionals="0" statements="0" coveredstatements="0" elements="0" coveredelements="0"/>
  </project>
</coverage>
"""

FULL_COVERAGE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<coverage generated="1700000000" clover="4.5.2">
  <project timestamp="1700000000" name="All">
    <metrics methods="4" coveredmethods="4" conditionals="0" coveredconditionals="0" statements="16" coveredstatements="16" elements="20" coveredelements="20"/>
    <package name="app">
      <file name="src/App.php" path="/work/src/App.php">
        <metrics methods="4" coveredmethods="4" conditionals="0" coveredconditionals="0" statements="16" coveredstatements="16"/>
      </file>
    </package>
  </project>
</coverage>
"""


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Iterator[None]:
    """Drop handlers installed by init_logging so tests do not leak them."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture()
def write_report(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes XML text to a file under ``tmp_path``."""

    def _write(content: str, name: str = "clover.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def clover_file(write_report: Callable[..., Path]) -> Path:
    """A two-file report with 90.32% coverage."""
    return write_report(CLOVER_XML)


@pytest.fixture()
def empty_clover_file(write_report: Callable[..., Path]) -> Path:
    """A structurally valid report that tracks no elements."""
    return write_report(EMPTY_CLOVER_XML, "empty.xml")


@pytest.fixture()
def full_coverage_file(write_report: Callable[..., Path]) -> Path:
    """An OpenClover-style report with 100% coverage."""
    return write_report(FULL_COVERAGE_XML, "open_clover.xml")
