# -*- coding: utf-8 -*-
# geomkit/model/build.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Constructors that turn raw coordinate tables (or existing handles) into tagged geometry
handles and collections. Each constructor validates its declared input shape, allocates
new immutable values, and has no other side effects.

Main Tasks
----------
    1. Points:        make_point, make_points, make_multipoint, linestring_to_points.
    2. Lines:         make_line, make_linestring, make_linestrings.
    3. Multi-lines:   make_multilinestring, linestrings_to_multilinestring.
    4. Polygons:      make_polygon, make_polygons.

Notes
-----
- Every element of every input sequence is used: an N-row table yields N coordinates,
  a list of K tables yields K linestrings, a K-ring list yields 1 exterior + K-1 holes.
- Tags are inspected only to reject wrong-shaped handle input (TypeTagError).
"""

import logging
from typing import Any, Iterable, Sequence, Union
from ..coords import table_to_coordinates, coordinate
from ..errors import ShapeError, TypeTagError
from ..handles import Handle, Collection, collect, require_handle, require_collection
from .types import Point, MultiPoint, Line, LineString, MultiLineString, Polygon

logger = logging.getLogger(__name__)

__all__ = [
    "make_point",
    "make_points",
    "make_multipoint",
    "make_line",
    "make_linestring",
    "make_linestrings",
    "make_multilinestring",
    "linestrings_to_multilinestring",
    "linestring_to_points",
    "make_polygon",
    "make_polygons",
]

TableOrLineString = Union[Any, Handle]


# --------------------
# Points
# --------------------
def make_point(x: float, y: float) -> Handle:
    """Create a single `point` handle from scalar x, y."""
    return Handle(Point(coordinate([x, y])))


def make_points(table: Any) -> Collection:
    """
    Create one `point` handle per table row, in row order.

    Returns
    -------
    Collection
        `rs_POINT` collection with exactly N entries for an N x 2 table.
    """
    coords = table_to_coordinates(table)
    return collect((Point(row) for row in coords), "point")


def _point_values(points) -> list:
    if isinstance(points, Collection):
        require_collection(points, "point", name="points")
    values = []
    for i, h in enumerate(points):
        if h is None:
            raise ShapeError("Cannot build a multipoint from an absent point.", {"index": i})
        values.append(require_handle(h, "point", name="points[{}]".format(i)))
    return values


def make_multipoint(points: Iterable[Handle]) -> Handle:
    """
    Combine `point` handles (an `rs_POINT` collection or any sequence) into one
    `multipoint`, preserving order and duplicates.
    """
    return Handle(MultiPoint(_point_values(points)))


def linestring_to_points(line: Handle) -> Collection:
    """Every vertex of a `linestring` handle as an `rs_POINT` collection."""
    ls = require_handle(line, "linestring")
    return collect((Point(row) for row in ls.coords), "point")


# --------------------
# Lines
# --------------------
def make_line(a: Sequence[float], b: Sequence[float]) -> Handle:
    """
    Create a `line` from two (x, y) coordinates.

    Raises
    ------
    ShapeError
        If either coordinate does not have length 2.
    """
    return Handle(Line(coordinate(a), coordinate(b)))


def make_linestring(table: Any) -> Handle:
    """Create a `linestring` from an N x 2 table (N may be 0)."""
    return Handle(LineString(table_to_coordinates(table)))


def make_linestrings(tables: Iterable[Any]) -> Collection:
    """
    Create an `rs_LINESTRING` collection with one linestring per table.
    None entries stay absent.
    """
    return collect((None if t is None else LineString(table_to_coordinates(t)) for t in tables),
                   "linestring")


def _as_linestring(item: TableOrLineString, index: int) -> LineString:
    if isinstance(item, Handle):
        return require_handle(item, "linestring", name="items[{}]".format(index))
    if isinstance(item, Collection):
        raise TypeTagError("Expected a coordinate table or `linestring` handle, got a collection.",
                           {"index": index, "tag": item.tag})
    return LineString(table_to_coordinates(item))


def make_multilinestring(items: Iterable[TableOrLineString]) -> Handle:
    """
    Create a `multilinestring` from raw tables and/or `linestring` handles (mixed allowed).

    An `rs_LINESTRING` collection is accepted as well and handled by
    `linestrings_to_multilinestring`.
    """
    if isinstance(items, Collection):
        return linestrings_to_multilinestring(items)
    lines = [_as_linestring(item, i) for i, item in enumerate(items)]
    logger.debug("[build] multilinestring from %d linestrings", len(lines))
    return Handle(MultiLineString(lines))


def linestrings_to_multilinestring(lines: Collection) -> Handle:
    """
    Combine every element of an `rs_LINESTRING` collection into one `multilinestring`.

    Raises
    ------
    TypeTagError
        If `lines` is not an `rs_LINESTRING` collection.
    ShapeError
        If any entry is absent.
    """
    require_collection(lines, "linestring", name="lines")
    values = []
    for i, h in enumerate(lines):
        if h is None:
            raise ShapeError("Cannot build a multilinestring from an absent linestring.", {"index": i})
        values.append(h.geometry)
    return Handle(MultiLineString(values))


# --------------------
# Polygons
# --------------------
def make_polygon(rings: Sequence[TableOrLineString]) -> Handle:
    """
    Create a `polygon`: the first ring is the exterior, all remaining rings are holes.

    Rings may be coordinate tables or `linestring` handles. No closure or winding rule
    is applied.

    Raises
    ------
    ShapeError
        If `rings` is empty.
    """
    rings = list(rings) if rings is not None else []
    if not rings:
        raise ShapeError("A polygon needs at least an exterior ring.")
    values = [_as_linestring(r, i) for i, r in enumerate(rings)]
    return Handle(Polygon(values[0], tuple(values[1:])))


def make_polygons(ring_lists: Iterable[Sequence[TableOrLineString]]) -> Collection:
    """Create an `rs_POLYGON` collection, one polygon per ring list."""
    polys = []
    for i, rings in enumerate(ring_lists):
        try:
            polys.append(make_polygon(rings))
        except ShapeError as exc:
            ctx = dict(exc.context or {})
            ctx["polygon"] = i
            raise ShapeError(exc.args[0], ctx) from exc
    return Collection(polys, "polygon")
