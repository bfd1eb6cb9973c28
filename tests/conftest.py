import os

os.environ.setdefault("MPLBACKEND", "Agg")

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
def variable_coords():
    return np.array([[0.8, 0.5], [0.5, 0.7]])


@pytest.fixture
def individual_coords():
    return np.array([[1.2, 0.5], [0.8, 1.0], [0.3, 0.7]])
