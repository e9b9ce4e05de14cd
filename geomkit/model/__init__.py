# -*- coding: utf-8 -*-
# geomkit/model/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Model Subfolder:
----------------
- types: the closed set of immutable geometry values
         (Point, MultiPoint, Line, LineString, MultiLineString, Polygon).
- build: constructors from coordinate tables/handles to tagged handles
         (import as `geomkit.model.build`; it depends on `geomkit.handles`).
"""

from .types import (
    Point, MultiPoint, Line, LineString, MultiLineString, Polygon, Geometry, GEOMETRY_TYPES,
)

__all__ = [
    "Point", "MultiPoint", "Line", "LineString", "MultiLineString", "Polygon",
    "Geometry", "GEOMETRY_TYPES",
]
