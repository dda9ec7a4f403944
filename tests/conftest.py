from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import HealthCheck, settings

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _register_hypothesis_profiles() -> None:
    """Register the ``dev``, ``ci`` and ``stress`` Hypothesis profiles."""

    suppress_checks = (HealthCheck.filter_too_much,)
    settings.register_profile(
        "dev",
        settings(max_examples=25, deadline=500, suppress_health_check=suppress_checks),
    )
    settings.register_profile(
        "ci",
        settings(
            max_examples=75,
            deadline=750,
            print_blob=True,
            suppress_health_check=suppress_checks,
        ),
    )
    settings.register_profile(
        "stress",
        settings(
            max_examples=150,
            deadline=None,
            print_blob=True,
            suppress_health_check=suppress_checks,
        ),
    )


# Profiles must exist before Hypothesis' pytest plugin loads ``--hypothesis-profile``.
_register_hypothesis_profiles()


def pytest_configure(config: pytest.Config) -> None:
    """Declare pytest markers and pick a Hypothesis profile when none was given."""

    config.addinivalue_line("markers", "duckdb: Tests that read input through DuckDB.")

    if config.getoption("hypothesis_profile", default=None):
        return
    settings.load_profile("ci" if os.getenv("CI") else "dev")


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes ``config.toml`` under ``tmp_path``."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write
