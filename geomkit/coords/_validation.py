# -*- coding: utf-8 -*-
# geomkit/coords/_validation.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Centralized validation utilities for coordinate input so that every constructor rejects
malformed tables and coordinates with the same ShapeError messages.

Main Tasks:
   1. Coerce array-likes to float64 and reject non-numeric content.
   2. Validate (N, 2) table structure with optional finite value checking.
   3. Validate single length-2 coordinates.
"""

from typing import Any
import numpy as np
from ..errors import ShapeError


def _as_float_array(data: Any, what: str) -> np.ndarray:
    """
    Convert `data` to a float64 ndarray.

    Raises
    ------
    ShapeError
        If `data` is None or cannot be interpreted as numbers.
    """
    if data is None:
        raise ShapeError("No {} provided (got None).".format(what))
    try:
        return np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ShapeError("Could not interpret {} as numbers.".format(what),
                         {"error": str(exc)}) from exc


def _assert_xy(points: np.ndarray, check_finite: bool = True) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : np.ndarray
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default True

    Raises
    ------
    ShapeError
        If points array fails validation checks
    """
    if points.ndim != 2 or points.shape[1] != 2:
        raise ShapeError("Expected a 2-column (N, 2) table of x, y coordinates.",
                         {"shape": points.shape})

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ShapeError("Non-finite coordinates detected.",
                         {"indices": bad_indices.tolist()})


def _assert_coordinate(xy: np.ndarray) -> None:
    """
    Validate a single coordinate: exactly two finite numbers.
    """
    if xy.ndim != 1 or xy.shape[0] != 2:
        raise ShapeError("Coordinates must be length 2 only.", {"length": int(xy.size)})
    if not np.isfinite(xy).all():
        raise ShapeError("Non-finite coordinate.", {"coordinate": xy.tolist()})
