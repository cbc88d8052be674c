"""
==============================================================================
Inventory Catalog
==============================================================================

In-memory inventory catalog tracking products by ID and by category.

==============================================================================
"""

# Catalog must load before schemas; schemas.common depends on catalog.models
from inventory.catalog import Catalog, Product
from inventory.core.exceptions import CatalogError, ErrorCode
from inventory.schemas.common import OperationResult, ResultStatus

__all__ = [
    "Catalog",
    "Product",
    "CatalogError",
    "ErrorCode",
    "OperationResult",
    "ResultStatus",
]
