"""Test configuration for the EDA toolbox."""

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


@pytest.fixture(autouse=True)
def close_figures():
    """Close every matplotlib figure a test left open."""
    yield
    import matplotlib.pyplot as plt

    plt.close("all")


@pytest.fixture
def abcd_df() -> pd.DataFrame:
    """Single label column with counts A:50, B:30, C:15, D:5 (shuffled)."""
    labels = ["A"] * 50 + ["B"] * 30 + ["C"] * 15 + ["D"] * 5
    rng = np.random.default_rng(0)
    return pd.DataFrame({"grade": rng.permutation(labels), "value": np.arange(100, dtype=float)})


@pytest.fixture
def mixed_df() -> pd.DataFrame:
    """Small table with discrete, boolean and continuous columns."""
    return pd.DataFrame(
        {
            "color": ["red", "blue", "red", None, "green", "red"],
            "size": pd.Categorical(["S", "M", "L", "M", "M", "S"]),
            "flag": [True, False, True, True, False, True],
            "price": [1.0, 2.5, 3.0, 4.5, 5.0, 6.5],
            "qty": [1, 2, 3, 4, 5, 6],
        },
    )


@pytest.fixture
def eleven_discrete_df() -> pd.DataFrame:
    """Eleven discrete columns with three labels each plus one numeric column."""
    data = {f"cat_{i:02d}": ["x", "y", "z", "x"] for i in range(11)}
    data["num"] = [1.0, 2.0, 3.0, 4.0]
    return pd.DataFrame(data)
