# -*- coding: utf-8 -*-
# geomkit/post/printing.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Human-readable text for handles and collections: a header line with the tag and size,
followed by the coordinates of each part.
"""

from typing import List, Optional
import numpy as np
from ..handles import Handle, Collection
from ..model.types import Point, MultiPoint, Line, LineString, MultiLineString, Polygon

__all__ = ["format_handle", "format_collection", "print_handle"]


def _coords_block(coords: np.ndarray, indent: str) -> List[str]:
    if coords.shape[0] == 0:
        return [indent + "(empty)"]
    return [indent + "({:.6g}, {:.6g})".format(x, y) for x, y in coords]


def _body(handle: Handle, indent: str) -> List[str]:
    g = handle.geometry
    if isinstance(g, Point):
        return _coords_block(g.coord[None, :], indent)
    if isinstance(g, (MultiPoint, Line, LineString)):
        return _coords_block(g.coords, indent)
    if isinstance(g, MultiLineString):
        lines = []
        for i, ls in enumerate(g.lines):
            lines.append("{}linestring {}:".format(indent, i))
            lines.extend(_coords_block(ls.coords, indent + "  "))
        return lines
    if isinstance(g, Polygon):
        lines = []
        for i, ring in enumerate(g.rings):
            lines.append("{}{}:".format(indent, "exterior" if i == 0 else "hole {}".format(i)))
            lines.extend(_coords_block(ring.coords, indent + "  "))
        return lines
    return []


def format_handle(handle: Handle, indent: str = "") -> str:
    """Header (`repr(handle)`) plus one line per coordinate."""
    return "\n".join([indent + repr(handle)] + _body(handle, indent + "  "))


def format_collection(collection: Collection) -> str:
    """Header (`repr(collection)`) plus every element, absent ones marked as such."""
    lines = [repr(collection)]
    for i, h in enumerate(collection):
        if h is None:
            lines.append("  [{}] <absent>".format(i))
        else:
            lines.append("  [{}] ".format(i) + format_handle(h, "  ").lstrip())
    return "\n".join(lines)


def print_handle(obj, file: Optional[object] = None) -> None:
    """Print a handle or a collection to stdout (or `file`)."""
    text = format_collection(obj) if isinstance(obj, Collection) else format_handle(obj)
    print(text, file=file)
