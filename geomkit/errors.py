# -*- coding: utf-8 -*-
# geomkit/errors.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Typed exceptions for the geometry core with compact, context-aware messages so that
construction, tag checks, segmentation and configuration report failures the same way.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ShapeError, TypeTagError, RangeError, ConfigError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- ShapeError/RangeError/ConfigError are also ValueErrors and TypeTagError is also a
  TypeError, so generic callers can keep catching the builtin families.
"""

__all__ = [
    "GeometryError",
    "ShapeError",
    "TypeTagError",
    "RangeError",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(Exception):
    """
    Base class for all errors raised by geomkit.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"ncol": 3}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(GeometryError, self).__init__(message)

    def __str__(self):
        base = super(GeometryError, self).__str__()
        return base + _format_context(self.context)


class ShapeError(GeometryError, ValueError):
    """
    Malformed input dimensionality:
      - a coordinate whose length is not 2
      - a coordinate table without exactly 2 columns, or with non-finite values
      - an empty ring list for a polygon, a line with fewer than 2 coordinates
      - paired collections of different lengths
    """


class TypeTagError(GeometryError, TypeError):
    """
    A handle or collection does not carry the tag an operation requires
    (e.g., a `line` handle passed where a `linestring` is expected).
    """


class RangeError(GeometryError, ValueError):
    """
    Numeric argument outside its domain:
      - fraction outside [0, 1] or not finite
      - number of pieces n < 1 or not an integer
    """


class ConfigError(GeometryError, ValueError):
    """
    Invalid settings passed to `geomkit.config.build_settings`:
      - unknown enum values
      - non-numeric or out-of-range scalars
    """
