# -*- coding: utf-8 -*-
# geomkit/config.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Assemble runtime settings for the query and plotting layers from sectioned defaults and
user overrides. User-friendly keys are canonicalized, categorical values are checked
against enumerations and numeric scalars against ranges, raising `ConfigError` with
actionable messages on violations.

Main Tasks
----------
    1. Flatten curated defaults (stable order preserved).
    2. Canonicalize params via `normalize_keys` using `ALIASES`.
    3. Enforce `ENUMS` (case-insensitive) and `RANGES` (inclusive bounds).
    4. Return a NEW flat dict from `build_settings`; nothing is cached or mutated globally.

Notes
-----
- Unknown keys raise ConfigError.
- Geometry construction and segmentation take no settings; they are pure functions
  of their inputs.
"""

import logging
from typing import Any, Dict, Mapping, Optional
from .errors import ConfigError

__all__ = [
    "build_settings",
    "configure_logging",
    "normalize_keys",
    "validate",
    "ALIASES",
    "ENUMS",
    "RANGES",
]


_DEFAULTS_SECTIONS = [
    ("GEODESIC", {
        "ELLIPSOID": "WGS84",
    }),
    ("PLOT", {
        "PLOT_DPI": 300,
        "PLOT_FIGSIZE": (8, 3),
    }),
    ("LOGGING", {
        "LOG_LEVEL": "INFO",
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


_DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)

ALIASES = {
    "ellps": "ELLIPSOID",
    "ellipsoid": "ELLIPSOID",
    "dpi": "PLOT_DPI",
    "figsize": "PLOT_FIGSIZE",
    "log_level": "LOG_LEVEL",
}

ENUMS = {
    "ELLIPSOID": {"WGS84", "GRS80", "CLRK66", "INTL", "SPHERE"},
    "LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}

# key -> (min, max)
RANGES = {
    "PLOT_DPI": (10, 2400),
}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user-friendly keys to canonical setting names (no value coercion).

    Keys absent from `ALIASES` are upper-cased and passed through.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        can = ALIASES.get(k, str(k).upper())
        out[can] = v
    return out


def validate(params: Mapping[str, Any]) -> None:
    """
    Check canonicalized settings against known keys, `ENUMS` and `RANGES`.

    Raises
    ------
    ConfigError
        On the first unknown key or invalid value.
    """
    for key, value in params.items():
        if key not in _DEFAULTS:
            raise ConfigError("Unknown setting.", {"key": key})

        if key in ENUMS:
            if not isinstance(value, str) or value.upper() not in ENUMS[key]:
                raise ConfigError(
                    "Invalid value for {}; allowed: {}.".format(key, sorted(ENUMS[key])),
                    {"key": key, "value": value},
                )

        if key in RANGES:
            lo, hi = RANGES[key]
            if isinstance(value, bool):
                raise ConfigError("Expected a number.", {"key": key, "value": value})
            try:
                fv = float(value)
            except (TypeError, ValueError):
                raise ConfigError("Expected a number.", {"key": key, "value": value})
            if not (lo <= fv <= hi):
                raise ConfigError(
                    "Value out of range [{}, {}].".format(lo, hi),
                    {"key": key, "value": value},
                )

        if key == "PLOT_FIGSIZE":
            try:
                w, h = value
                ok = float(w) > 0 and float(h) > 0
            except (TypeError, ValueError):
                ok = False
            if not ok:
                raise ConfigError("PLOT_FIGSIZE must be a (width, height) pair of positive numbers.",
                                  {"key": key, "value": value})


def build_settings(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge user params over the defaults and return a new flat settings dict.

    Args
    ----
    params : Mapping[str, Any], optional
        Overrides, canonical (`"ELLIPSOID"`) or aliased (`"ellps"`) keys.

    Returns
    -------
    Dict[str, Any]
        Validated settings; enum values upper-cased.
    """
    settings = dict(_DEFAULTS)
    if params:
        params = normalize_keys(params)
        validate(params)  # may raise ConfigError
        for key in ENUMS:
            if key in params:
                params[key] = params[key].upper()
        settings.update(params)
    return settings


def configure_logging(settings: Optional[Mapping[str, Any]] = None) -> None:
    """
    Configure root logging for scripts using the driver's format.
    """
    level = build_settings(settings)["LOG_LEVEL"]
    logging.basicConfig(level=getattr(logging, level),
                        format="%(levelname)s:%(name)s:%(message)s")
