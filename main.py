# -*- coding: utf-8 -*-
# geomkit/main.py

"""
End-to-end demo driver:
  1) Build an L-shaped linestring from a coordinate table
  2) Split it at half its length
  3) Segmentize it into equal-length pieces (+ preview)
  4) Run a few spatial queries on point/line collections
"""

import logging
from typing import Any, Dict, Optional

import numpy as np

from geomkit.config import configure_logging
from geomkit.api import (
    make_linestring, make_linestrings, make_points,
    split_line, segmentize, line_length,
    bearing_haversine, closest_point, is_convex, line_interpolate_point,
    coordinates_to_table,
)
from geomkit.post.printing import format_handle, format_collection
from geomkit.post.plot_geo import plot_segments

log = logging.getLogger("geomkit")


def run_demo(show: bool = False, save_path: Optional[str] = None, n_pieces: int = 4) -> Dict[str, Any]:
    """Run the demo pipeline and return its intermediate results."""
    # ------------------------------------------------------------------
    # 1) Geometry from a table
    # ------------------------------------------------------------------
    path = make_linestring(np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0]]))
    log.info("Built %r (length %.3f)", path, line_length(path.geometry))

    # ------------------------------------------------------------------
    # 2) Split at half the length
    # ------------------------------------------------------------------
    half = split_line(path, 0.5)
    log.info("Half-length prefix:\n%s", format_handle(half))

    # ------------------------------------------------------------------
    # 3) Equal arc-length pieces (+ preview)
    # ------------------------------------------------------------------
    pieces = segmentize(path, n_pieces)
    log.info("Pieces:\n%s", format_collection(pieces))
    if show or save_path:
        plot_segments(pieces, name="L-path", show=show, save_path=save_path)

    # ------------------------------------------------------------------
    # 4) Queries
    # ------------------------------------------------------------------
    origins = make_points([[0.0, 0.0], [0.0, 0.0]])
    targets = make_points([[0.0, 1.0], [1.0, 0.0]])
    bearings = bearing_haversine(origins, targets)
    log.info("Bearings (deg): %s", np.array2string(bearings, precision=3))

    lines = make_linestrings([coordinates_to_table(path.geometry.coords),
                              [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]])
    near = closest_point(lines, make_points([[12.0, 5.0], [2.0, 6.0]]))
    mid = line_interpolate_point(lines, 0.5)
    log.info("Closest: %s", [None if h is None else tuple(h.geometry.coord) for h in near])
    log.info("Midpoints: %s", [None if h is None else tuple(h.geometry.coord) for h in mid])
    convex = is_convex(lines)
    log.info("Convex: %s", list(convex))

    return {
        "path": path,
        "half": half,
        "pieces": pieces,
        "bearings": bearings,
        "closest": near,
        "midpoints": mid,
        "convex": convex,
    }


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    configure_logging()
    run_demo(show=True, save_path="segments.png")
