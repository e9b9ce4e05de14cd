# -*- coding: utf-8 -*-
# geomkit/post/__init__.py

"""
Project: geomkit
Author: geomkit developers
Date: 10/19/2026

Modules:
--------
- printing:  Text forms of handles and collections (format_handle, format_collection,
             print_handle).

- plot_geo:  matplotlib views of handles and collections; plot_segments colours the
             pieces of a segmentize result.
"""

__all__ = ["printing", "plot_geo"]
