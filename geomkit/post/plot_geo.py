# -*- coding: utf-8 -*-
# geomkit/post/plot_geo.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Quick matplotlib views of geometry handles: points as markers, lines and linestrings as
polylines, polygons as their rings. `plot_segments` colours the consecutive pieces of a
`segmentize` result and marks the shared boundary coordinates.
"""

from typing import Any, Iterable, Mapping, Optional, Union
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import colormaps
from matplotlib.axes import Axes
from ..config import build_settings
from ..handles import Handle, Collection
from ..model.types import Point, MultiPoint, Line, LineString, MultiLineString, Polygon

__all__ = ["plot_handles", "plot_segments"]

HandleOrCollection = Union[Handle, Collection]


def _flatten(items: Union[HandleOrCollection, Iterable[HandleOrCollection]]):
    if isinstance(items, Handle):
        return [items]
    out = []
    for it in items:
        if it is None:
            continue
        if isinstance(it, Collection):
            out.extend(h for h in it if h is not None)
        elif isinstance(it, Handle):
            out.append(it)
        else:
            raise ValueError("Expected handles or collections to plot.")
    return out


def _draw(ax: Axes, handle: Handle, **style) -> None:
    g = handle.geometry
    if isinstance(g, Point):
        ax.plot([g.x], [g.y], "o", ms=4, **style)
    elif isinstance(g, MultiPoint):
        c = g.coords
        ax.plot(c[:, 0], c[:, 1], "o", ms=4, **style)
    elif isinstance(g, (Line, LineString)):
        c = g.coords
        ax.plot(c[:, 0], c[:, 1], lw=1.5, **style)
    elif isinstance(g, MultiLineString):
        for ls in g.lines:
            ax.plot(ls.coords[:, 0], ls.coords[:, 1], lw=1.5, **style)
    elif isinstance(g, Polygon):
        for i, ring in enumerate(g.rings):
            c = ring.coords
            if c.shape[0] and not np.array_equal(c[0], c[-1]):
                c = np.vstack((c, c[:1]))
            ax.plot(c[:, 0], c[:, 1], "-" if i == 0 else "--", lw=1.2, **style)


def _new_axes(settings: Mapping[str, Any]) -> Axes:
    plt.figure(figsize=tuple(settings["PLOT_FIGSIZE"]))
    return plt.gca()


def _finish(ax: Axes, created_fig: bool, title: str, show: bool,
            save_path: Optional[str], dpi: int) -> None:
    ax.set_aspect("equal", adjustable="box")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    if save_path:
        ax.figure.savefig(save_path, dpi=dpi)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def plot_handles(items: Union[HandleOrCollection, Iterable[HandleOrCollection]],
                 *,
                 name: str = "geometry",
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None,
                 settings: Optional[Mapping[str, Any]] = None) -> Axes:
    """
        Plot one handle, a collection, or a mix of both.

        Parameters
        ----------
        items : Handle | Collection | iterable of those
            Geometries to draw; absent collection entries are skipped.
        name : str
            Title label for the figure.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path (PLOT_DPI).
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure of PLOT_FIGSIZE is created.
        settings : Mapping, optional
            Overrides for `geomkit.config.build_settings`.
        """
    settings = build_settings(settings)
    handles = _flatten(items)
    created_fig = False
    if ax is None:
        ax = _new_axes(settings)
        created_fig = True
    for h in handles:
        _draw(ax, h)
    _finish(ax, created_fig, "Geometry: {}".format(name), show, save_path, settings["PLOT_DPI"])
    return ax


def plot_segments(pieces: Collection,
                  *,
                  name: str = "segments",
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax: Optional[Axes] = None,
                  settings: Optional[Mapping[str, Any]] = None) -> Axes:
    """
        Plot the pieces of a `segmentize` result, one colour per piece, with the
        boundary coordinates between pieces marked.

        Parameters
        ----------
        pieces : Collection
            `rs_LINESTRING` collection.
        name, show, save_path, ax, settings
            Same semantics as `plot_handles`.
        """
    if not isinstance(pieces, Collection) or pieces.element_tag != "linestring":
        raise ValueError("Expected an rs_LINESTRING collection of pieces.")
    settings = build_settings(settings)
    created_fig = False
    if ax is None:
        ax = _new_axes(settings)
        created_fig = True

    cmap = colormaps["viridis"]
    n = max(len(pieces), 1)
    for k, h in enumerate(pieces):
        if h is None:
            continue
        _draw(ax, h, color=cmap(k / max(n - 1, 1)), label="piece {}".format(k + 1))
        if k < len(pieces) - 1 and len(h.geometry):
            end = h.geometry.coords[-1]
            ax.plot([end[0]], [end[1]], "k|", ms=10)
    if len(pieces) <= 10:
        ax.legend()
    _finish(ax, created_fig, "Segments: {} ({} pieces)".format(name, len(pieces)),
            show, save_path, settings["PLOT_DPI"])
    return ax
