import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from ventpath import GridMap  # noqa: E402

ENV_KEYS = (
    "VENTPATH_MAX_EXPANSIONS",
    "VENTPATH_ENABLE_METRICS",
    "VENTPATH_LOG_LEVEL",
    "VENTPATH_LOG_JSON",
)


@pytest.fixture
def open_grid():
    """Factory for wall-free, vent-free grids."""

    def _make(width=3, height=3):
        return GridMap(width, height)

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without ventpath variables and restore them afterwards.

    setenv+delenv makes monkeypatch remember the key, so values written later
    (e.g. by load_dotenv) are removed again on teardown.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    yield
