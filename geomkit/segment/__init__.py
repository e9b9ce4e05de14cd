# -*- coding: utf-8 -*-
# geomkit/segment/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Segment Subfolder:
------------------
Length-based segmentation of LineStrings (planar Euclidean length only).

- lines: segment_lengths, cumulative_arclength, line_length, interpolate_segment.
- split: split_linestring/segmentize_linestring on values, and the handle-level
         split_line, split_lines and segmentize.
"""

from .lines import segment_lengths, cumulative_arclength, line_length, interpolate_segment
from .split import split_linestring, segmentize_linestring, split_line, split_lines, segmentize

__all__ = [
    "segment_lengths", "cumulative_arclength", "line_length", "interpolate_segment",
    "split_linestring", "segmentize_linestring", "split_line", "split_lines", "segmentize",
]
