# -*- coding: utf-8 -*-
# geomkit/query/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Query Subfolder:
----------------
Vectorized spatial queries over tagged collections. Element tags are checked before any
work; absent elements propagate as None/NaN.

- bearing:   bearing_haversine (NumPy), bearing_geodesic (pyproj).
- closest:   closest_point (shapely), closest_point_haversine (unit sphere).
- linear:    is_convex, line_interpolate_point, locate_point_on_line.
- _shapely:  conversion between geometry values and shapely geometries.
"""

from .bearing import bearing_haversine, bearing_geodesic
from .closest import closest_point, closest_point_haversine
from .linear import is_convex, line_interpolate_point, locate_point_on_line

__all__ = [
    "bearing_haversine", "bearing_geodesic",
    "closest_point", "closest_point_haversine",
    "is_convex", "line_interpolate_point", "locate_point_on_line",
]
