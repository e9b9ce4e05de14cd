# -*- coding: utf-8 -*-
# geomkit/query/bearing.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose
-------
Element-wise bearings between paired `rs_POINT` collections whose coordinates are
(longitude, latitude) in degrees.

Main Tasks
----------
    1. `bearing_haversine`: initial great-circle bearing on a sphere (NumPy).
    2. `bearing_geodesic`: forward azimuth on an ellipsoid via pyproj.Geod.

Notes
-----
- Bearings are degrees clockwise from north in (-180, 180].
- Absent entries on either side give NaN at that position.
"""

import logging
from typing import Any, Mapping, Optional, Tuple
import numpy as np
from pyproj import Geod
from ..config import build_settings
from ..handles import Collection, require_collection, require_same_length

logger = logging.getLogger(__name__)

__all__ = ["bearing_haversine", "bearing_geodesic"]

# config ELLIPSOID value -> pyproj ellps name
_PYPROJ_ELLPS = {
    "WGS84": "WGS84",
    "GRS80": "GRS80",
    "CLRK66": "clrk66",
    "INTL": "intl",
    "SPHERE": "sphere",
}


def _paired_lonlat(x: Collection, y: Collection) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Validate the two point collections and return (mask, lonlat_x, lonlat_y) for the
    positions where both entries are present.
    """
    require_collection(x, "point", name="x")
    require_collection(y, "point", name="y")
    require_same_length(x, y)
    mask = ~(x.absent() | y.absent())
    idx = np.flatnonzero(mask)
    a = np.array([x[i].geometry.coord for i in idx], dtype=np.float64).reshape(-1, 2)
    b = np.array([y[i].geometry.coord for i in idx], dtype=np.float64).reshape(-1, 2)
    return mask, a, b


def bearing_haversine(x: Collection, y: Collection) -> np.ndarray:
    """
    Initial bearing of the great circle from each x to the paired y.

    Returns
    -------
    np.ndarray
        float64 array of len(x); NaN where either input is absent.
    """
    mask, a, b = _paired_lonlat(x, y)
    out = np.full(len(x), np.nan, dtype=np.float64)
    if not mask.any():
        return out
    lon_a, lat_a = np.radians(a[:, 0]), np.radians(a[:, 1])
    lon_b, lat_b = np.radians(b[:, 0]), np.radians(b[:, 1])
    d_lon = lon_b - lon_a
    s = np.cos(lat_b) * np.sin(d_lon)
    c = np.cos(lat_a) * np.sin(lat_b) - np.sin(lat_a) * np.cos(lat_b) * np.cos(d_lon)
    out[mask] = np.degrees(np.arctan2(s, c))
    return out


def bearing_geodesic(x: Collection, y: Collection,
                     settings: Optional[Mapping[str, Any]] = None) -> np.ndarray:
    """
    Forward geodesic azimuth from each x to the paired y on the configured ellipsoid.

    Args
    ----
    x, y : Collection
        Paired `rs_POINT` collections of (lon, lat) degrees.
    settings : Mapping, optional
        Overrides for `geomkit.config.build_settings` (e.g. {"ellps": "GRS80"}).

    Returns
    -------
    np.ndarray
        float64 array of len(x); NaN where either input is absent.
    """
    mask, a, b = _paired_lonlat(x, y)
    out = np.full(len(x), np.nan, dtype=np.float64)
    if not mask.any():
        return out
    ellps = _PYPROJ_ELLPS[build_settings(settings)["ELLIPSOID"]]
    geod = Geod(ellps=ellps)
    az12, _az21, _dist = geod.inv(a[:, 0], a[:, 1], b[:, 0], b[:, 1])
    out[mask] = np.asarray(az12, dtype=np.float64)
    logger.debug("[bearing] geodesic azimuths for %d pairs on %s", int(mask.sum()), ellps)
    return out
