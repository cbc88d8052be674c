"""
==============================================================================
Catalog Package - Inventory Management
==============================================================================

In-memory inventory catalog indexed by product ID and by category.

Classes:
--------
- Product: Pydantic model for products
- Catalog: Catalog manager keeping both indexes consistent

==============================================================================
"""

from .models import Product
from .catalog import Catalog

__all__ = [
    "Product",
    "Catalog",
]
