"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.
    
    Instances are frozen; the catalog replaces a stored product on update.
    
    Attributes:
        id: Unique product identifier
        name: Product display name
        category: Category the product is listed under
        stock: Quantity on hand
    """
    
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Category name")
    stock: int = Field(..., ge=0, strict=True, description="Quantity on hand")
    
    def is_low_stock(self, reorder_level: int) -> bool:
        """Check whether stock has fallen below the reorder level."""
        return self.stock < reorder_level
    
    def __str__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, "
            f"category={self.category!r}, stock={self.stock})"
        )
