"""Test configuration ensuring the local package is importable."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


REPORT = (
    "Web Search interest: foo\n"
    "Worldwide; 2004 - present\n"
    "\n"
    "Interest over time\n"
    "Week,foo\n"
    "2004-01-04 - 2004-01-10,64\n"
    "2004-01-11 - 2004-01-17,,\n"
    "\n"
    "Top searches for foo\n"
    "foo bar,100\n"
    "foo baz,45\n"
    "foo qux,10\n"
    "\n"
    "Rising searches for foo\n"
    "foo new,Breakout\n"
)


@pytest.fixture
def report() -> str:
    return REPORT


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    path = tmp_path / "report.csv"
    path.write_text(REPORT, encoding="utf-8")
    return path
