# -*- coding: utf-8 -*-
# geomkit/model/types.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
The closed set of planar geometry values: Point, MultiPoint, Line, LineString,
MultiLineString and Polygon.

Conventions:
------------
   - Coordinates are float64; a coordinate sequence is an (N, 2) array.
   - Every value is a frozen dataclass and every array it holds is a private,
     non-writeable copy. "Modifying" a geometry means building a new one.
   - No closure, winding or simplicity rules are enforced on polygons.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union
import numpy as np
from ..coords import freeze
from ..errors import ShapeError, TypeTagError

__all__ = [
    "Point",
    "MultiPoint",
    "Line",
    "LineString",
    "MultiLineString",
    "Polygon",
    "Geometry",
    "GEOMETRY_TYPES",
]


def _frozen_xy(arr, rows=None) -> np.ndarray:
    a = np.asarray(arr, dtype=np.float64)
    if a.size == 0:
        a = a.reshape(0, 2)
    if a.ndim != 2 or a.shape[1] != 2:
        raise ShapeError("Expected an (N, 2) coordinate array.", {"shape": a.shape})
    if rows is not None and a.shape[0] != rows:
        raise ShapeError("Expected exactly {} coordinates.".format(rows), {"rows": a.shape[0]})
    return freeze(a)


def _require_all(items, kind, what):
    for i, item in enumerate(items):
        if not isinstance(item, kind):
            raise TypeTagError("{} must hold {} values.".format(what, kind.__name__),
                               {"index": i, "type": type(item).__name__})


@dataclass(frozen=True, eq=False)
class Point:
    """Single (x, y) location."""

    coord: np.ndarray

    def __post_init__(self):
        c = freeze(np.asarray(self.coord, dtype=np.float64))
        if c.shape != (2,):
            raise ShapeError("Point needs exactly one (x, y) coordinate.", {"shape": c.shape})
        object.__setattr__(self, "coord", c)

    @property
    def x(self) -> float:
        return float(self.coord[0])

    @property
    def y(self) -> float:
        return float(self.coord[1])


@dataclass(frozen=True, eq=False)
class MultiPoint:
    """Ordered points; order kept, duplicates kept."""

    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        _require_all(self.points, Point, "MultiPoint")

    @property
    def coords(self) -> np.ndarray:
        if not self.points:
            return _frozen_xy(np.empty((0, 2)))
        return _frozen_xy(np.vstack([p.coord for p in self.points]))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, eq=False)
class Line:
    """Straight segment between `start` and `end` (they may coincide)."""

    start: np.ndarray
    end: np.ndarray

    def __post_init__(self):
        for name in ("start", "end"):
            c = freeze(np.asarray(getattr(self, name), dtype=np.float64))
            if c.shape != (2,):
                raise ShapeError("Line endpoints must be (x, y) pairs.", {name: c.shape})
            object.__setattr__(self, name, c)

    @property
    def coords(self) -> np.ndarray:
        return _frozen_xy(np.vstack((self.start, self.end)), rows=2)


@dataclass(frozen=True, eq=False)
class LineString:
    """
    Ordered path of N >= 0 coordinates. Consecutive duplicates are allowed; the row
    order is the direction of travel.
    """

    coords: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "coords", _frozen_xy(self.coords))

    def __len__(self) -> int:
        return int(self.coords.shape[0])


@dataclass(frozen=True, eq=False)
class MultiLineString:
    """Ordered LineStrings."""

    lines: Tuple[LineString, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "lines", tuple(self.lines))
        _require_all(self.lines, LineString, "MultiLineString")

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True, eq=False)
class Polygon:
    """Exterior ring plus ordered interior rings (holes)."""

    exterior: LineString
    interiors: Tuple[LineString, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "interiors", tuple(self.interiors))
        _require_all(self.rings, LineString, "Polygon")

    @property
    def rings(self) -> Tuple[LineString, ...]:
        return (self.exterior,) + self.interiors


Geometry = Union[Point, MultiPoint, Line, LineString, MultiLineString, Polygon]

GEOMETRY_TYPES = (Point, MultiPoint, Line, LineString, MultiLineString, Polygon)
