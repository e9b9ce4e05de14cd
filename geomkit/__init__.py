# -*- coding: utf-8 -*-
# geomkit/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Modules:
--------
- coords:   Conversion between N x 2 coordinate tables and frozen (N, 2) float64 arrays.

- model:    The closed set of immutable geometry values and their constructors
            (points, lines, linestrings, multi-geometries, polygons).

- handles:  Tag registry, Handle and Collection wrappers, and the tag guards every
            operation applies on entry.

- segment:  Planar length primitives plus split_line / segmentize (equal arc-length
            partition with exact continuity between pieces).

- query:    Vectorized spatial queries backed by shapely and pyproj
            (bearings, closest points, convexity, interpolation, location).

- post:     Text and matplotlib views of handles and collections.

- api:      Import-only facade over the modules above.

- config:   Sectioned defaults, aliases and validation for runtime settings.

- errors:   GeometryError and its typed subclasses.
"""

__all__ = ["coords", "model", "handles", "segment", "query", "post", "api", "config", "errors"]
