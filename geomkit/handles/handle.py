# -*- coding: utf-8 -*-
# geomkit/handles/handle.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Opaque, tagged wrappers that carry geometry values across component boundaries:

   - Handle:     owns exactly one geometry value plus its registered tag.
   - Collection: ordered, immutable sequence of handles sharing one element tag,
                 with None standing for an absent (missing) element.

Conventions:
------------
   - Tags are derived from the geometry variant; callers never pass them in.
   - Operations check tags on entry (`require_handle`, `require_collection`) and
     raise TypeTagError before doing any work.
   - Every transform builds new handles; existing ones are never modified.
"""

from dataclasses import dataclass, field
from collections.abc import Sequence, Sized
from typing import Iterable, Iterator, List, Optional, Union, overload
import numpy as np
from ..errors import ShapeError, TypeTagError
from ..model.types import Geometry, Point, LineString, MultiPoint, MultiLineString, Polygon, Line
from .registry import tag_of, spec_for

__all__ = [
    "Handle",
    "Collection",
    "wrap",
    "collect",
    "wrap_points",
    "require_handle",
    "require_collection",
    "require_same_length",
]


def _summary(geometry: Geometry) -> str:
    """Short one-line description used by reprs."""
    if isinstance(geometry, Point):
        return "({:g}, {:g})".format(geometry.x, geometry.y)
    if isinstance(geometry, Line):
        return "({:g}, {:g}) -> ({:g}, {:g})".format(*geometry.start, *geometry.end)
    if isinstance(geometry, LineString):
        return "{} coords".format(len(geometry))
    if isinstance(geometry, MultiPoint):
        return "{} points".format(len(geometry))
    if isinstance(geometry, MultiLineString):
        return "{} linestrings".format(len(geometry))
    if isinstance(geometry, Polygon):
        return "{} exterior coords, {} holes".format(len(geometry.exterior), len(geometry.interiors))
    raise TypeTagError("Not a geometry value.", {"type": type(geometry).__name__})


@dataclass(frozen=True, eq=False)
class Handle:
    """
    Immutable, tagged owner of one geometry value.

    Attributes
    ----------
    geometry : Geometry
        The wrapped value (read-only).
    tag : str
        Registered tag of the value's variant (e.g. "linestring").
    """

    geometry: Geometry
    tag: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "tag", tag_of(self.geometry))

    def __repr__(self) -> str:
        return "<{} {}>".format(self.tag, _summary(self.geometry))


class Collection(Sequence):
    """
    Ordered, immutable sequence of `Optional[Handle]` with a single element tag.

    Parameters
    ----------
    items : Iterable[Optional[Handle]]
        Handles (or None for absent entries), kept in order.
    element_tag : str
        Registered tag every present handle must carry.

    Raises
    ------
    TypeTagError
        If the element tag is unknown or a present item carries a different tag.
    """

    __slots__ = ("_items", "_element_tag")

    def __init__(self, items: Iterable[Optional[Handle]], element_tag: str):
        spec = spec_for(element_tag)
        items = tuple(items)
        for i, item in enumerate(items):
            if item is None:
                continue
            if not isinstance(item, Handle):
                raise TypeTagError("Collection entries must be handles or None.",
                                   {"index": i, "type": type(item).__name__})
            if item.tag != spec.tag:
                raise TypeTagError(
                    f"Collection of '{spec.tag}' cannot hold a '{item.tag}' handle.",
                    {"index": i},
                )
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_element_tag", spec.tag)

    def __setattr__(self, name, value):
        raise AttributeError("Collection is immutable")

    @property
    def element_tag(self) -> str:
        return self._element_tag

    @property
    def tag(self) -> str:
        return spec_for(self._element_tag).collection_tag

    @overload
    def __getitem__(self, index: int) -> Optional[Handle]: ...

    @overload
    def __getitem__(self, index: slice) -> "Collection": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Collection(self._items[index], self._element_tag)
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Optional[Handle]]:
        return iter(self._items)

    def geometries(self) -> List[Optional[Geometry]]:
        """Wrapped values in order, None where absent."""
        return [None if h is None else h.geometry for h in self._items]

    def absent(self) -> np.ndarray:
        """Boolean mask, True where the entry is absent."""
        return np.array([h is None for h in self._items], dtype=bool)

    def __repr__(self) -> str:
        n_abs = int(self.absent().sum())
        return "<{} [{}]{}>".format(
            self.tag, len(self), " ({} absent)".format(n_abs) if n_abs else "")


def wrap(geometry: Geometry) -> Handle:
    """Wrap a geometry value in a new tagged handle."""
    return Handle(geometry)


def collect(geometries: Iterable[Optional[Geometry]], element_tag: str) -> Collection:
    """Wrap each geometry (None stays absent) and return a tagged collection."""
    return Collection((None if g is None else Handle(g) for g in geometries), element_tag)


def wrap_points(points: Iterable) -> Collection:
    """
    Wrap external results back into an `rs_POINT` collection.

    Each entry may be a `Point`, an (x, y) pair, or None (absent).
    """
    out = []
    for p in points:
        if p is None:
            out.append(None)
        elif isinstance(p, Point):
            out.append(Handle(p))
        else:
            out.append(Handle(Point(np.asarray(p, dtype=np.float64))))
    return Collection(out, "point")


def require_handle(obj, tag: str, name: str = "x") -> Geometry:
    """
    Return the geometry of `obj` if it is a handle tagged `tag`; TypeTagError otherwise.
    """
    if not isinstance(obj, Handle):
        raise TypeTagError(f"`{name}` must be a '{tag}' handle.", {"type": type(obj).__name__})
    if obj.tag != tag:
        raise TypeTagError(f"`{name}` must be a '{tag}' handle, got '{obj.tag}'.")
    return obj.geometry


def require_collection(obj, element_tag: Optional[str] = None, name: str = "x") -> Collection:
    """
    Check that `obj` is a Collection (of `element_tag` when given) and return it.
    """
    if not isinstance(obj, Collection):
        want = spec_for(element_tag).collection_tag if element_tag else "collection"
        raise TypeTagError(f"`{name}` must be a `{want}`.", {"type": type(obj).__name__})
    if element_tag is not None and obj.element_tag != element_tag:
        want = spec_for(element_tag).collection_tag
        raise TypeTagError(f"`{name}` must be a `{want}`, got `{obj.tag}`.")
    return obj


def require_same_length(x: Sized, y: Sized, names=("x", "y")) -> None:
    """Paired inputs of element-wise operations must have equal length."""
    if len(x) != len(y):
        raise ShapeError("`{}` and `{}` must have the same length.".format(*names),
                         {names[0]: len(x), names[1]: len(y)})
