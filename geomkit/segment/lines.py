# -*- coding: utf-8 -*-
# geomkit/segment/lines.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Planar primitives the segmentation walk is built on: per-segment Euclidean lengths,
cumulative arclength along a path, and linear interpolation on a single segment.

Notes
-----
- Pure NumPy; no logging.
- `cumulative_arclength` uses np.cumsum, i.e. a strictly sequential running sum, so
  S[i] + L[i] is exactly the value stored in S[i + 1] and S[-1] is the total length.
"""

from typing import Union
import numpy as np
from ..model.types import Line, LineString

__all__ = ["segment_lengths", "cumulative_arclength", "line_length", "interpolate_segment"]


def segment_lengths(coords: np.ndarray) -> np.ndarray:
    """
    Euclidean length of each consecutive coordinate pair.

    Returns
    -------
    np.ndarray
        Shape (N-1,) for N >= 1 coordinates; empty for N <= 1.
    """
    if coords.shape[0] < 2:
        return np.zeros(0, dtype=np.float64)
    return np.hypot(*(coords[1:] - coords[:-1]).T)


def cumulative_arclength(coords: np.ndarray) -> np.ndarray:
    """
    Cumulative arclength with S[0] = 0 and S[-1] = total length; shape (N,).
    """
    if coords.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)
    return np.concatenate(([0.0], np.cumsum(segment_lengths(coords))))


def line_length(line: Union[LineString, Line]) -> float:
    """Total planar Euclidean length of a LineString (0.0 for fewer than 2 coords) or Line."""
    S = cumulative_arclength(line.coords)
    return float(S[-1]) if S.size else 0.0


def interpolate_segment(start: np.ndarray, end: np.ndarray, t: float) -> np.ndarray:
    """
    Point at parameter t along start -> end.

    t <= 0 returns `start` and t >= 1 returns `end` unchanged (no rounding drift at
    the segment vertices); otherwise start + t * (end - start).
    """
    if t <= 0.0:
        return start.copy()
    if t >= 1.0:
        return end.copy()
    return start + t * (end - start)
