# -*- coding: utf-8 -*-
# geomkit/segment/split.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Length-based segmentation of LineStrings: take the prefix reached after travelling a
fraction of the total length (`split_line`), or partition the whole path into n
consecutive pieces of equal arc length (`segmentize`).

Main Tasks
----------
    1. Locate a target arclength on the path: first segment i with S[i+1] >= target,
       local parameter t = (target - S[i]) / L[i].
    2. `split_linestring` / `split_line`: vertices up to segment i plus the interpolated
       end point.
    3. `segmentize_linestring` / `segmentize`: one forward walk over the segments,
       closing a piece at each of the n-1 boundaries at total * k / n.
    4. `split_lines`: element-wise `split_line` over an `rs_LINESTRING` collection.

Conventions
-----------
- Ties go to the earlier segment: a target equal to S[i+1] ends on vertex i+1 exactly.
- fraction = 0 yields [start, start]; fraction = 1 yields the whole path.
- Adjacent pieces share the same boundary coordinate (C0 continuity, exact equality);
  a vertex that coincides with a boundary is not repeated inside the next piece.
- The last piece takes whatever length is left, so floating-point residue ends there.
- A piece reduced to a single coordinate repeats it, as for fraction = 0.
"""

import logging
import math
import numbers
from typing import Iterable, List, Optional, Tuple, Union
import numpy as np
from ..errors import RangeError, ShapeError
from ..handles import Handle, Collection, collect, require_handle, require_collection
from ..handles import require_same_length
from ..model.types import LineString
from .lines import segment_lengths, cumulative_arclength, interpolate_segment

logger = logging.getLogger(__name__)

__all__ = [
    "split_linestring",
    "segmentize_linestring",
    "split_line",
    "split_lines",
    "segmentize",
]


# --------------------
# Argument guards
# --------------------
def _check_fraction(fraction) -> float:
    if isinstance(fraction, bool) or not isinstance(fraction, numbers.Real):
        raise RangeError("`fraction` must be a real number in [0, 1].", {"fraction": fraction})
    f = float(fraction)
    if not math.isfinite(f) or f < 0.0 or f > 1.0:
        raise RangeError("`fraction` must be within [0, 1].", {"fraction": fraction})
    return f


def _check_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise RangeError("`n` must be a positive integer.", {"n": n})
    if n < 1:
        raise RangeError("`n` must be at least 1.", {"n": n})
    return int(n)


def _path(line: LineString) -> np.ndarray:
    coords = line.coords
    if coords.shape[0] < 2:
        raise ShapeError("Segmentation needs a linestring with at least 2 coordinates.",
                         {"ncoords": int(coords.shape[0])})
    return coords


def _local_parameter(S: np.ndarray, L: np.ndarray, i: int, target: float) -> float:
    """Parameter t on segment i for an arclength target with S[i] < target <= S[i+1]."""
    if S[i + 1] == target:
        return 1.0
    if L[i] <= 0.0:
        return 0.0
    return (target - S[i]) / L[i]


def _locate(S: np.ndarray, L: np.ndarray, target: float) -> Optional[Tuple[int, float]]:
    """
    First segment i with S[i+1] >= target and the local parameter on it, or None if
    the target lies beyond the end of the path.
    """
    i = int(np.searchsorted(S[1:], target, side="left"))
    if i >= L.shape[0]:
        return None
    return i, _local_parameter(S, L, i, target)


# --------------------
# Value level
# --------------------
def split_linestring(line: LineString, fraction: float) -> LineString:
    """
    Prefix of `line` reached after travelling `fraction` x total length.

    Args
    ----
    line : LineString
        Path with at least 2 coordinates.
    fraction : float
        Proportion of the total planar length, in [0, 1].

    Returns
    -------
    LineString
        New value: the first coordinate, every vertex passed, and the interpolated stop.

    Raises
    ------
    RangeError
        If `fraction` is not a finite number in [0, 1].
    ShapeError
        If `line` has fewer than 2 coordinates.
    """
    f = _check_fraction(fraction)
    coords = _path(line)
    if f >= 1.0:
        return LineString(coords)

    L = segment_lengths(coords)
    S = cumulative_arclength(coords)
    target = S[-1] * f

    hit = _locate(S, L, target)
    if hit is None:
        return LineString(coords)
    i, t = hit
    stop = interpolate_segment(coords[i], coords[i + 1], t)
    return LineString(np.vstack((coords[:i + 1], stop[None, :])))


def segmentize_linestring(line: LineString, n: int) -> List[LineString]:
    """
    Partition `line` into `n` consecutive pieces of equal arc length.

    Args
    ----
    line : LineString
        Path with at least 2 coordinates.
    n : int
        Number of pieces, n >= 1.

    Returns
    -------
    List[LineString]
        Exactly `n` new values; concatenated in order they retrace `line`.

    Raises
    ------
    RangeError
        If `n` is not an integer >= 1.
    ShapeError
        If `line` has fewer than 2 coordinates.
    """
    n = _check_n(n)
    coords = _path(line)
    if n == 1:
        return [line]

    L = segment_lengths(coords)
    S = cumulative_arclength(coords)
    targets = S[-1] * np.arange(1, n, dtype=np.float64) / n

    pieces: List[List[np.ndarray]] = []
    buf: List[np.ndarray] = [coords[0]]
    k = 0
    for i in range(L.shape[0]):
        ends_on_boundary = False
        while k < n - 1 and S[i + 1] >= targets[k]:
            t = _local_parameter(S, L, i, targets[k])
            boundary = interpolate_segment(coords[i], coords[i + 1], t)
            buf.append(boundary)
            pieces.append(buf)
            buf = [boundary]
            k += 1
            ends_on_boundary = t >= 1.0
        if not ends_on_boundary:
            buf.append(coords[i + 1])
    pieces.append(buf)

    out = []
    for piece in pieces:
        if len(piece) == 1:
            piece = [piece[0], piece[0]]
        out.append(LineString(np.vstack(piece)))

    logger.debug("[segmentize] %d pieces over total length %.6g (%d segments)",
                 len(out), float(S[-1]), L.shape[0])
    return out


# --------------------
# Handle level
# --------------------
def split_line(line: Handle, fraction: float) -> Handle:
    """
    `split_linestring` on a `linestring` handle; returns a new `linestring` handle.

    Raises
    ------
    TypeTagError
        If `line` is not a `linestring` handle (checked first).
    """
    ls = require_handle(line, "linestring", name="line")
    return Handle(split_linestring(ls, fraction))


def segmentize(line: Handle, n: int) -> Collection:
    """
    `segmentize_linestring` on a `linestring` handle.

    Returns
    -------
    Collection
        `rs_LINESTRING` collection with exactly `n` new handles.
    """
    ls = require_handle(line, "linestring", name="line")
    return collect(segmentize_linestring(ls, n), "linestring")


def _is_absent_number(value) -> bool:
    if value is None:
        return True
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return not math.isfinite(float(value))
    return False


def split_lines(lines: Collection, fractions: Union[float, Iterable[Optional[float]]]) -> Collection:
    """
    Element-wise `split_line` over an `rs_LINESTRING` collection.

    Args
    ----
    lines : Collection
        `rs_LINESTRING` collection (absent entries allowed).
    fractions : float or iterable of float
        One fraction per line, or a single fraction used for every line. None, NaN
        and infinities count as absent.

    Returns
    -------
    Collection
        `rs_LINESTRING` collection of the same length; absent where the line or its
        fraction is absent.

    Raises
    ------
    TypeTagError
        If `lines` is not an `rs_LINESTRING` collection.
    ShapeError
        If `fractions` and `lines` differ in length.
    RangeError
        If a present, finite fraction lies outside [0, 1].
    """
    require_collection(lines, "linestring", name="lines")
    if fractions is None or isinstance(fractions, numbers.Real):
        fractions = [fractions] * len(lines)
    else:
        fractions = list(fractions)
    require_same_length(lines, fractions, names=("lines", "fractions"))

    out = []
    for h, f in zip(lines, fractions):
        if h is None or _is_absent_number(f):
            out.append(None)
        else:
            out.append(split_linestring(h.geometry, f))
    return collect(out, "linestring")
