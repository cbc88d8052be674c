"""
==============================================================================
Core Package
==============================================================================

Error taxonomy shared by the catalog and its callers.

==============================================================================
"""

from .exceptions import CatalogError, ErrorCode

__all__ = [
    "CatalogError",
    "ErrorCode",
]
