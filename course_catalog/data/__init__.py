"""
Data loading module.

This package handles all catalog file I/O.
"""

from .loader import CatalogLoader, split_fields, strip_terminator

__all__ = ["CatalogLoader", "split_fields", "strip_terminator"]
