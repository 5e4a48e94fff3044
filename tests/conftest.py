"""Shared fixtures for the dashboard test suite."""

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from streamlit.testing.v1 import AppTest

from climate_analytics import generators


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture(params=range(25))
def seeded_rng(request):
    """Many independent seeds for bound checks on the random generators."""
    return np.random.default_rng(request.param)


@pytest.fixture
def correlation_matrix():
    return generators.generate_correlation_matrix()


@pytest.fixture
def regions():
    return generators.generate_region_samples()


@pytest.fixture
def insights():
    return generators.generate_insights()


@pytest.fixture
def predictions(rng):
    return generators.generate_prediction_series(rng)


@pytest.fixture
def empty_frame():
    return pd.DataFrame()


ROOT = Path(__file__).resolve().parent.parent

SETTINGS_ENV = ["LOADING_DELAY_SECONDS", "MAP_TILE_URL", "MAP_TILE_ATTRIBUTION", "RANDOM_SEED", "LOG_LEVEL", "IS_ADMIN"]


@pytest.fixture
def app(monkeypatch):
    """Factory for headless page runs with no loading delay."""
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOADING_DELAY_SECONDS", "0")

    def _make(script: str) -> AppTest:
        return AppTest.from_file(str(ROOT / script), default_timeout=30)

    return _make
