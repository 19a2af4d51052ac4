"""Test configuration for lazyleon."""

from pathlib import Path
import sys

import matplotlib
import numpy as np
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def animals_df() -> pd.DataFrame:
    """Small categorical dataset with a repeated value."""
    return pd.DataFrame(
        {
            "observation": ["bird", "dog", "cat", "dog"],
            "weight": [0.3, 12.0, 4.5, 20.1],
        },
    )


@pytest.fixture
def linear_df() -> pd.DataFrame:
    """Two perfectly linearly related columns (y = 2x + 1)."""
    x = np.arange(10, dtype=float)
    return pd.DataFrame({"x": x, "y": 2 * x + 1})


@pytest.fixture
def time_series_df() -> pd.DataFrame:
    """Ten consecutive days with a cumulative random walk."""
    rng = np.random.default_rng(42)
    return pd.DataFrame(
        {
            "day": pd.date_range("2024-01-01", periods=10, freq="D"),
            "sales": np.cumsum(rng.normal(size=10)),
        },
    )
