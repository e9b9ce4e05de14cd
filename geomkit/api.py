# -*- coding: utf-8 -*-
# geomkit/api.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Thin, import-only facade for geomkit workflows: build tagged geometries from coordinate
tables, segment linestrings by length, and run the vectorized spatial queries.

Main Tasks
----------
    1. Constructors  -> make_point ... make_polygons (geomkit.model.build).
    2. Segmentation  -> split_line, split_lines, segmentize (geomkit.segment.split).
    3. Queries       -> bearings, closest points, convexity, interpolation, location.
    4. Conversion    -> table_to_coordinates / coordinates_to_table, wrap_points.

Notes
-----
- Detailed behavior lives in the modules listed above; nothing here adds semantics.
"""

from .coords import table_to_coordinates, coordinates_to_table
from .handles import Handle, Collection, wrap_points
from .model.build import (
    make_point, make_points, make_multipoint, linestring_to_points,
    make_line, make_linestring, make_linestrings,
    make_multilinestring, linestrings_to_multilinestring,
    make_polygon, make_polygons,
)
from .segment import split_line, split_lines, segmentize, line_length
from .query import (
    bearing_haversine, bearing_geodesic,
    closest_point, closest_point_haversine,
    is_convex, line_interpolate_point, locate_point_on_line,
)

__all__ = [
    "table_to_coordinates", "coordinates_to_table",
    "Handle", "Collection", "wrap_points",
    "make_point", "make_points", "make_multipoint", "linestring_to_points",
    "make_line", "make_linestring", "make_linestrings",
    "make_multilinestring", "linestrings_to_multilinestring",
    "make_polygon", "make_polygons",
    "split_line", "split_lines", "segmentize", "line_length",
    "bearing_haversine", "bearing_geodesic",
    "closest_point", "closest_point_haversine",
    "is_convex", "line_interpolate_point", "locate_point_on_line",
]
