# -*- coding: utf-8 -*-
# geomkit/coords/convert.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Convert between host tabular coordinate data (rows = points, columns = x, y) and the
read-only (N, 2) float64 coordinate sequences held by geometry values.

Main Tasks
----------
    1. `table_to_coordinates`: validate a 2-column table and return every row, in order.
    2. `coordinates_to_table`: return a fresh, writeable (N, 2) copy.
    3. `coordinate`: validate and freeze a single (x, y) pair.

Notes
-----
- Column 0 is x and column 1 is y; row order is the path order.
- Returned sequences are copies flagged non-writeable, so geometry values never alias
  caller memory.
"""

from typing import Any
import numpy as np
from ._validation import _as_float_array, _assert_xy, _assert_coordinate

__all__ = ["table_to_coordinates", "coordinates_to_table", "coordinate", "freeze"]


def freeze(arr: np.ndarray) -> np.ndarray:
    """Return a contiguous float64 copy of `arr` with writes disabled."""
    out = np.array(arr, dtype=np.float64, copy=True, order="C")
    out.flags.writeable = False
    return out


def table_to_coordinates(table: Any) -> np.ndarray:
    """
    Convert an N x 2 numeric table to an ordered (N, 2) coordinate sequence.

    Args
    ----
    table : array-like
        Numeric table with exactly two columns; N may be 0.

    Returns
    -------
    np.ndarray
        Read-only float64 array with all N rows in input order.

    Raises
    ------
    ShapeError
        If the table is not 2-D with exactly 2 columns, or holds non-finite values.
    """
    arr = _as_float_array(table, "coordinate table")
    if arr.shape in ((0,), (0, 0), (0, 2)):
        return freeze(np.empty((0, 2), dtype=np.float64))
    _assert_xy(arr, check_finite=True)
    return freeze(arr)


def coordinates_to_table(coords: Any) -> np.ndarray:
    """
    Inverse of `table_to_coordinates`: N rows x 2 columns, same order, writeable copy.
    """
    arr = _as_float_array(coords, "coordinates")
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    _assert_xy(arr, check_finite=False)
    return np.array(arr, dtype=np.float64, copy=True)


def coordinate(xy: Any) -> np.ndarray:
    """
    Validate a single (x, y) pair and return it as a read-only (2,) float64 array.

    Raises
    ------
    ShapeError
        If `xy` does not hold exactly two finite numbers.
    """
    arr = _as_float_array(xy, "coordinate")
    _assert_coordinate(arr)
    return freeze(arr)
