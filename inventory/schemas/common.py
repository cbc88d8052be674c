"""
==============================================================================
Common Schemas Module
==============================================================================

Result schema shared by every catalog operation.

==============================================================================
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from inventory.catalog.models import Product
from inventory.core.exceptions import CatalogError, ErrorCode


class ResultStatus(str, Enum):
    """Outcome of a catalog operation."""
    
    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"
    FOUND = "found"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    MERGED = "merged"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_NAME = "invalid_name"
    INVALID_CATEGORY = "invalid_category"
    INVALID_STOCK = "invalid_stock"
    INVALID_ARGUMENT = "invalid_argument"


ERROR_STATUSES = {
    ErrorCode.INVALID_IDENTIFIER: ResultStatus.INVALID_IDENTIFIER,
    ErrorCode.INVALID_NAME: ResultStatus.INVALID_NAME,
    ErrorCode.INVALID_CATEGORY: ResultStatus.INVALID_CATEGORY,
    ErrorCode.INVALID_STOCK: ResultStatus.INVALID_STOCK,
    ErrorCode.INVALID_ARGUMENT: ResultStatus.INVALID_ARGUMENT,
    ErrorCode.NOT_FOUND: ResultStatus.NOT_FOUND,
}


class OperationResult(BaseModel):
    """
    Structured outcome of a catalog operation.
    
    Attributes:
        status: What happened
        message: Human-readable status line
        products: Copies of the products the operation returned or touched
        alerts: Low-stock alert lines raised by the operation
        events: Per-product lines in the order they happened, alerts included (used by merges)
        error: Dictionary form of the validation error, if any
    """
    
    status: ResultStatus
    message: str
    products: List[Product] = Field(default_factory=list)
    alerts: List[str] = Field(default_factory=list)
    events: List[str] = Field(default_factory=list)
    error: Optional[Dict[str, Any]] = Field(default=None)
    
    @property
    def is_error(self) -> bool:
        """True for validation failures."""
        return self.error is not None and self.status != ResultStatus.NOT_FOUND
    
    @property
    def success(self) -> bool:
        """True when the operation ran; empty and not-found outcomes included."""
        return not self.is_error
    
    @classmethod
    def failure(cls, exc: CatalogError) -> "OperationResult":
        """Create a failed result from a catalog error."""
        return cls(
            status=ERROR_STATUSES[exc.code],
            message=exc.message,
            error=exc.to_dict()
        )
    
    def raise_for_error(self) -> "OperationResult":
        """
        Raise the carried error for validation failures.
        
        Returns:
            self, so the call can be chained
            
        Raises:
            CatalogError: If the result is a validation failure
        """
        if self.is_error:
            raise CatalogError(
                self.error["message"],
                ErrorCode(self.error["code"]),
                self.error.get("details")
            )
        return self
