"""Shared test fixtures and configuration."""

from datetime import date, datetime
import io
import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Strip any RECORDKEEPER_* overrides from the developer's shell
for key in [name for name in os.environ if name.startswith("RECORDKEEPER_")]:
    del os.environ[key]


FIXED_NOW = datetime(2024, 3, 15, 9, 30, 0)
FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run each test from an empty directory with no recordkeeper overrides."""
    for key in [name for name in os.environ if name.startswith("RECORDKEEPER_")]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def out() -> io.StringIO:
    """Captured console output for the demos."""
    return io.StringIO()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY
