"""
Validation and query engines.

This package contains the logic that works on a loaded catalog.
"""

from .validation import CatalogValidator
from .query import CatalogQuery

__all__ = [
    "CatalogValidator",
    "CatalogQuery",
]
