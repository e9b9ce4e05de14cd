# -*- coding: utf-8 -*-
# geomkit/handles/registry.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Purpose:
--------
Central registry of geometry tags. Each geometry variant is registered once here with
its host-facing tag and the conventional tag of a collection of that variant, giving a
single source of truth for tagging handles and checking tags at operation boundaries.

Main Tasks:
-----------
   - Bind each geometry class to a `TagSpec` (tag, kind, collection_tag).
   - Populate `REGISTRY` (tag -> spec) and `TAGS_ORDER` (deterministic ordering).
   - Resolve the tag of a geometry value and the spec of a tag.

Notes:
------
   - The variant set is closed: a value whose class is not registered has no tag.
   - Collection tags follow the "rs_" + TAG convention (e.g. "rs_LINESTRING").
   - Duplicates are disallowed: adding a spec with an existing tag raises ValueError.
"""

from dataclasses import dataclass
from typing import Dict, List
from ..errors import TypeTagError
from ..model.types import Point, MultiPoint, Line, LineString, MultiLineString, Polygon

__all__ = [
    "TagSpec",
    "REGISTRY",
    "TAGS_ORDER",
    "tag_of",
    "spec_for",
    "collection_tag",
    "COLLECTION_PREFIX",
]

COLLECTION_PREFIX = "rs_"


@dataclass(frozen=True)
class TagSpec:
    tag: str
    kind: type
    collection_tag: str


REGISTRY: Dict[str, TagSpec] = {}
_BY_KIND: Dict[type, TagSpec] = {}


def _add(tag: str, kind: type) -> None:
    if tag in REGISTRY:
        raise ValueError(f"Duplicate tag in registry: {tag}")
    spec = TagSpec(tag, kind, COLLECTION_PREFIX + tag.upper())
    REGISTRY[tag] = spec
    _BY_KIND[kind] = spec


_add("point",           Point)
_add("multipoint",      MultiPoint)
_add("line",            Line)
_add("linestring",      LineString)
_add("multilinestring", MultiLineString)
_add("polygon",         Polygon)

TAGS_ORDER: List[str] = list(REGISTRY)


def tag_of(geometry) -> str:
    """
    Return the host-facing tag of a geometry value.

    Raises
    ------
    TypeTagError
        If `geometry` is not one of the registered variants.
    """
    spec = _BY_KIND.get(type(geometry))
    if spec is None:
        raise TypeTagError("Not a geometry value.", {"type": type(geometry).__name__})
    return spec.tag


def spec_for(tag: str) -> TagSpec:
    """Return the registered spec for `tag` (TypeTagError if unknown)."""
    try:
        return REGISTRY[tag]
    except (KeyError, TypeError):
        raise TypeTagError(f"Unknown geometry tag: {tag!r}", {"known": TAGS_ORDER}) from None


def collection_tag(tag: str) -> str:
    """Collection tag for elements tagged `tag`, e.g. 'point' -> 'rs_POINT'."""
    return spec_for(tag).collection_tag
