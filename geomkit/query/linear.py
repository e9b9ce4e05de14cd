# -*- coding: utf-8 -*-
# geomkit/query/linear.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Element-wise queries over `rs_LINESTRING` collections: convexity, point at a fraction of
the length, and fractional position of a point along the line.

Main Tasks
----------
    1. `is_convex`: ring convexity test on the vertex sequence (NumPy cross products).
    2. `line_interpolate_point`: point at a clamped fraction of the length (shapely).
    3. `locate_point_on_line`: normalized projection of a point onto the line (shapely).

Notes
-----
- `is_convex` is False for empty or open linestrings (first coordinate != last). A
  closed one is tested as a ring: the closing duplicate and repeated vertices are
  ignored, collinear turns are allowed, and fewer than 3 distinct vertices count as
  convex.
- Absent inputs give None (objects) or NaN (floats) at their position.
"""

import math
import numbers
from typing import Iterable, List, Optional, Union
import numpy as np
from ..handles import Collection, wrap_points, require_collection, require_same_length
from ..model.types import LineString, Point
from ._shapely import to_shapely, from_shapely_point

__all__ = ["is_convex", "line_interpolate_point", "locate_point_on_line"]


def _drop_consecutive_duplicates(pts: np.ndarray) -> np.ndarray:
    if pts.shape[0] <= 1:
        return pts
    keep = np.ones(pts.shape[0], dtype=bool)
    keep[1:] = np.any(pts[1:] != pts[:-1], axis=1)
    return pts[keep]


def _ring_is_convex(coords: np.ndarray) -> bool:
    if coords.shape[0] == 0 or not np.array_equal(coords[0], coords[-1]):
        return False
    P = _drop_consecutive_duplicates(coords)
    if P.shape[0] >= 2:
        P = P[:-1]
    if P.shape[0] < 3:
        return True
    e = np.roll(P, -1, axis=0) - P
    e_next = np.roll(e, -1, axis=0)
    cross = e[:, 0] * e_next[:, 1] - e[:, 1] * e_next[:, 0]
    turns = cross[cross != 0.0]
    return bool(np.all(turns > 0.0) or np.all(turns < 0.0))


def is_convex(x: Collection) -> np.ndarray:
    """
    Convexity of each closed linestring; open or empty linestrings are not convex.

    Returns
    -------
    np.ndarray
        object array of len(x) holding True/False, or None where absent.
    """
    require_collection(x, "linestring", name="x")
    out = np.empty(len(x), dtype=object)
    for i, h in enumerate(x):
        out[i] = None if h is None else _ring_is_convex(h.geometry.coords)
    return out


def _fraction_or_none(f) -> Optional[float]:
    if f is None or isinstance(f, bool) or not isinstance(f, numbers.Real):
        return None
    f = float(f)
    if not math.isfinite(f):
        return None
    return min(max(f, 0.0), 1.0)


def _interpolate(line: LineString, fraction: float) -> Optional[Point]:
    if len(line) == 0:
        return None
    return from_shapely_point(to_shapely(line).interpolate(fraction, normalized=True))


def line_interpolate_point(x: Collection,
                           fraction: Union[float, Iterable[Optional[float]]]) -> Collection:
    """
    Point at `fraction` of each linestring's length.

    Args
    ----
    x : Collection
        `rs_LINESTRING` collection.
    fraction : float or iterable of float
        One value per line, or one value for all. Values are clamped into [0, 1];
        None, NaN and infinities give an absent result.

    Returns
    -------
    Collection
        `rs_POINT` collection of len(x); absent for absent or empty lines.
    """
    require_collection(x, "linestring", name="x")
    if fraction is None or isinstance(fraction, numbers.Real):
        fractions = [fraction] * len(x)
    else:
        fractions = list(fraction)
    require_same_length(x, fractions, names=("x", "fraction"))

    out: List[Optional[Point]] = []
    for h, f in zip(x, fractions):
        f = _fraction_or_none(f)
        if h is None or f is None:
            out.append(None)
        else:
            out.append(_interpolate(h.geometry, f))
    return wrap_points(out)


def locate_point_on_line(x: Collection, y: Collection) -> np.ndarray:
    """
    Fraction of each line's length at which the paired point projects onto it.

    Returns
    -------
    np.ndarray
        float64 array of len(x) in [0, 1]; NaN where absent or the line has zero length.
    """
    require_collection(x, "linestring", name="x")
    require_collection(y, "point", name="y")
    require_same_length(x, y)
    out = np.full(len(x), np.nan, dtype=np.float64)
    for i, (xi, yi) in enumerate(zip(x, y)):
        if xi is None or yi is None:
            continue
        line = to_shapely(xi.geometry)
        if line.is_empty or line.length == 0.0:
            continue
        out[i] = line.project(to_shapely(yi.geometry), normalized=True)
    return out
