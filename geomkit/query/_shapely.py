# -*- coding: utf-8 -*-
# geomkit/query/_shapely.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Bridge between geomkit geometry values and shapely geometries for the planar queries.

Notes:
------
   - A LineString with a single coordinate is passed on as a zero-length line
     (the coordinate repeated); an empty one stays empty.
   - A polygon whose exterior has fewer than 3 coordinates encloses no area and is
     passed on as the linework of its rings. Holes with fewer than 3 coordinates
     remove no area and are skipped. An empty exterior gives an empty polygon.
"""

from typing import Optional
import numpy as np
import shapely.geometry as sg
from shapely.geometry.base import BaseGeometry
from ..errors import TypeTagError
from ..model.types import Geometry, Point, MultiPoint, Line, LineString, MultiLineString, Polygon

_MIN_RING = 3


def _line_coords(coords: np.ndarray) -> np.ndarray:
    if coords.shape[0] == 1:
        return np.vstack((coords, coords))
    return coords


def _polygon(geometry: Polygon) -> BaseGeometry:
    if len(geometry.exterior) == 0:
        return sg.Polygon()
    if len(geometry.exterior) < _MIN_RING:
        return sg.MultiLineString([_line_coords(r.coords) for r in geometry.rings if len(r)])
    holes = [r.coords for r in geometry.interiors if len(r) >= _MIN_RING]
    return sg.Polygon(geometry.exterior.coords, holes)


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Convert a geometry value to the equivalent shapely geometry."""
    if isinstance(geometry, Point):
        return sg.Point(geometry.x, geometry.y)
    if isinstance(geometry, MultiPoint):
        return sg.MultiPoint(geometry.coords) if len(geometry) else sg.MultiPoint()
    if isinstance(geometry, Line):
        return sg.LineString(geometry.coords)
    if isinstance(geometry, LineString):
        return sg.LineString(_line_coords(geometry.coords)) if len(geometry) else sg.LineString()
    if isinstance(geometry, MultiLineString):
        return sg.MultiLineString([_line_coords(ls.coords) for ls in geometry.lines if len(ls)])
    if isinstance(geometry, Polygon):
        return _polygon(geometry)
    raise TypeTagError("Unsupported geometry value.", {"type": type(geometry).__name__})


def from_shapely_point(point: BaseGeometry) -> Optional[Point]:
    """Convert a shapely point result back to a Point; empty results become None."""
    if point is None or point.is_empty:
        return None
    return Point(np.array([point.x, point.y], dtype=np.float64))
