import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def matrix() -> np.ndarray:
    return np.arange(12, dtype=float).reshape(3, 4) / 11.0


@pytest.fixture
def rgb() -> np.ndarray:
    base = np.arange(12, dtype=float).reshape(3, 4) / 11.0
    return np.stack([base, 1.0 - base, base / 2.0], axis=2)
