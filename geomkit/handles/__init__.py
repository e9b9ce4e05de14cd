# -*- coding: utf-8 -*-
# geomkit/handles/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Handles Subfolder:
------------------
Tagged, immutable wrappers used for all cross-component traffic.

- registry: TagSpec registry (tag <-> geometry variant, collection tags).
- handle:   Handle, Collection and the tag guards used by operations.
"""

from .registry import REGISTRY, TAGS_ORDER, TagSpec, tag_of, spec_for, collection_tag
from .handle import (
    Handle, Collection, wrap, collect, wrap_points,
    require_handle, require_collection, require_same_length,
)

__all__ = [
    "REGISTRY", "TAGS_ORDER", "TagSpec", "tag_of", "spec_for", "collection_tag",
    "Handle", "Collection", "wrap", "collect", "wrap_points",
    "require_handle", "require_collection", "require_same_length",
]
