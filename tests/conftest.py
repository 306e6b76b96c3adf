"""Pytest configuration & custom summary hook.

Also ensures the project root is on sys.path so 'import sortbench.*' works
without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

FIXTURES = _root / "tests" / "fixtures"


@pytest.fixture
def movies_csv() -> Path:
    return FIXTURES / "movies.csv"


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a one-line pass/fail count at the end of the session."""
    stats = terminalreporter.stats
    counts = {key: len(stats.get(key, [])) for key in ("passed", "failed", "error", "skipped")}
    terminalreporter.section("sortbench summary", sep="=")
    terminalreporter.write_line(" | ".join(f"{k}: {v}" for k, v in counts.items()))
    for rep in stats.get("failed", []):
        terminalreporter.write_line(f"  - {rep.nodeid}")
