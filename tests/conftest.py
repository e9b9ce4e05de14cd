"""Shared fixtures for geomkit tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from geomkit.model.build import make_linestring


@pytest.fixture
def l_table():
    """L-shaped path: 10 along x, then 10 along y (total length 20)."""
    return np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0]])


@pytest.fixture
def l_path(l_table):
    """`linestring` handle for the L-shaped path."""
    return make_linestring(l_table)


@pytest.fixture
def square_ring():
    """Closed unit-square ring (4 x 4)."""
    return [[0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0], [0.0, 0.0]]
