"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path so geonear and scripts import without install
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _clean_geonear_env(monkeypatch):
    """Keep developer GEONEAR_* variables from leaking into tests."""
    for key in ("GEONEAR_LATITUDE_COLUMN_NAME", "GEONEAR_LONGITUDE_COLUMN_NAME", "GEONEAR_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
