# -*- coding: utf-8 -*-
# geomkit/coords/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Coords Subfolder:
-----------------
Conversion between tabular (N, 2) coordinate data and the frozen coordinate arrays used
by geometry values.

- convert:     table_to_coordinates, coordinates_to_table, coordinate, freeze.
- _validation: shared ShapeError guards for tables and single coordinates.
"""

from .convert import table_to_coordinates, coordinates_to_table, coordinate, freeze

__all__ = ["table_to_coordinates", "coordinates_to_table", "coordinate", "freeze"]
