# -*- coding: utf-8 -*-
# geomkit/query/closest.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Closest point on each geometry of a collection to the paired query point.

Main Tasks
----------
    1. `closest_point`: planar closest point via shapely.ops.nearest_points.
    2. `closest_point_haversine`: closest point on the great-circle arcs of the
       geometry, coordinates read as (lon, lat) degrees on the unit sphere.

Notes
-----
- `x` may be a collection of any geometry tag; `y` must be `rs_POINT`.
- A point lying on (or, for polygons, inside) the geometry is its own closest point.
- Absent inputs and empty geometries give absent results.
"""

from typing import List, Optional, Tuple
import numpy as np
from shapely.ops import nearest_points
from ..errors import TypeTagError
from ..handles import Collection, wrap_points, require_collection, require_same_length
from ..model.types import Geometry, Point, MultiPoint, Line, LineString, MultiLineString, Polygon
from ._shapely import to_shapely, from_shapely_point

__all__ = ["closest_point", "closest_point_haversine"]

_EPS = 1e-15


def _pairs(x: Collection, y: Collection):
    require_collection(x, name="x")
    require_collection(y, "point", name="y")
    require_same_length(x, y)
    return zip(x, y)


def closest_point(x: Collection, y: Collection) -> Collection:
    """
    Planar closest point on each x to the paired y point.

    Returns
    -------
    Collection
        `rs_POINT` collection of len(x).
    """
    out: List[Optional[Point]] = []
    for xi, yi in _pairs(x, y):
        if xi is None or yi is None:
            out.append(None)
            continue
        geom = to_shapely(xi.geometry)
        if geom.is_empty:
            out.append(None)
            continue
        on_geom, _ = nearest_points(geom, to_shapely(yi.geometry))
        out.append(from_shapely_point(on_geom))
    return wrap_points(out)


# --------------------
# Unit-sphere helpers
# --------------------
def _to_xyz(lonlat: np.ndarray) -> np.ndarray:
    lon, lat = np.radians(lonlat[..., 0]), np.radians(lonlat[..., 1])
    return np.stack((np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)), axis=-1)


def _to_lonlat(v: np.ndarray) -> np.ndarray:
    lon = np.degrees(np.arctan2(v[1], v[0]))
    lat = np.degrees(np.arctan2(v[2], np.hypot(v[0], v[1])))
    return np.array([lon, lat], dtype=np.float64)


def _angle(u: np.ndarray, v: np.ndarray) -> float:
    """Central angle between unit vectors (stable for small and near-antipodal angles)."""
    return float(np.arctan2(np.linalg.norm(np.cross(u, v)), np.dot(u, v)))


def _closest_on_arc(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Closest point to p on the minor great-circle arc a -> b (unit vectors)."""
    nearer_end = a if _angle(p, a) <= _angle(p, b) else b
    n = np.cross(a, b)
    nn = np.linalg.norm(n)
    if nn < _EPS:
        return nearer_end
    n = n / nn
    c = p - np.dot(p, n) * n
    cn = np.linalg.norm(c)
    if cn < _EPS:
        # p is a pole of the arc's great circle
        return nearer_end
    c = c / cn
    if np.dot(np.cross(a, c), n) >= 0.0 and np.dot(np.cross(c, b), n) >= 0.0:
        return c
    return nearer_end


def _parts(geometry: Geometry) -> Tuple[List[np.ndarray], List[np.ndarray]]:
    """Split a geometry into lone vertices and coordinate paths (lon, lat)."""
    if isinstance(geometry, Point):
        return [geometry.coord], []
    if isinstance(geometry, MultiPoint):
        return [p.coord for p in geometry.points], []
    if isinstance(geometry, Line):
        return [], [geometry.coords]
    if isinstance(geometry, LineString):
        paths = [geometry]
    elif isinstance(geometry, MultiLineString):
        paths = list(geometry.lines)
    elif isinstance(geometry, Polygon):
        paths = list(geometry.rings)
    else:
        raise TypeTagError("Unsupported geometry value.", {"type": type(geometry).__name__})
    vertices = [ls.coords[0] for ls in paths if len(ls) == 1]
    return vertices, [ls.coords for ls in paths if len(ls) >= 2]


def _haversine_closest(geometry: Geometry, query: Point) -> Optional[np.ndarray]:
    if isinstance(geometry, Polygon) and len(geometry.exterior):
        if to_shapely(geometry).intersects(to_shapely(query)):
            return query.coord.copy()

    vertices, paths = _parts(geometry)
    p = _to_xyz(query.coord)
    best, best_angle = None, np.inf
    for v in vertices:
        cand = _to_xyz(v)
        ang = _angle(p, cand)
        if ang < best_angle:
            best, best_angle = cand, ang
    for coords in paths:
        xyz = _to_xyz(coords)
        for a, b in zip(xyz[:-1], xyz[1:]):
            cand = _closest_on_arc(p, a, b)
            ang = _angle(p, cand)
            if ang < best_angle:
                best, best_angle = cand, ang
    if best is None:
        return None
    if best_angle == 0.0:
        return query.coord.copy()
    return _to_lonlat(best)


def closest_point_haversine(x: Collection, y: Collection) -> Collection:
    """
    Closest point on each x to the paired y, measured along great circles.

    Returns
    -------
    Collection
        `rs_POINT` collection of len(x) with (lon, lat) degrees.
    """
    out: List[Optional[np.ndarray]] = []
    for xi, yi in _pairs(x, y):
        if xi is None or yi is None:
            out.append(None)
        else:
            out.append(_haversine_closest(xi.geometry, yi.geometry))
    return wrap_points(out)
