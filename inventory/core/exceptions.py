"""
Catalog Exception Handling

Single CatalogError class for all catalog validation failures.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes."""
    
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_NAME = "INVALID_NAME"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_STOCK = "INVALID_STOCK"
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class CatalogError(Exception):
    """
    Unified catalog exception for all error scenarios.
    
    Raised internally by validation and turned into a failed
    ``OperationResult`` by the public catalog operations. Callers only see
    it when they ask for it via ``OperationResult.raise_for_error()``.
    
    Usage:
        raise CatalogError("Invalid product ID.", ErrorCode.INVALID_IDENTIFIER)
        raise CatalogError("Stock cannot be negative.", ErrorCode.INVALID_STOCK, {"stock": -1})
    
    Error Codes:
        Input:
            - INVALID_IDENTIFIER
            - INVALID_NAME
            - INVALID_CATEGORY
            - INVALID_STOCK
            - INVALID_ARGUMENT
        
        Lookup:
            - NOT_FOUND (normal empty outcome, never raised by the catalog)
    """
    
    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize catalog exception.
        
        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a plain dictionary."""
        error_dict = {
            "code": self.code.value,
            "message": self.message,
            "timestamp": self.timestamp
        }
        
        if self.details:
            error_dict["details"] = self.details
        
        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_identifier(product_id: Any = None) -> CatalogError:
    """Create invalid product ID exception."""
    return CatalogError(
        "Invalid product ID.",
        ErrorCode.INVALID_IDENTIFIER,
        {"product_id": repr(product_id)}
    )


def invalid_name(name: Any = None) -> CatalogError:
    """Create invalid product name exception."""
    return CatalogError(
        "Invalid product name.",
        ErrorCode.INVALID_NAME,
        {"name": repr(name)}
    )


def invalid_category(category: Any = None) -> CatalogError:
    """Create invalid category name exception."""
    return CatalogError(
        "Invalid category name.",
        ErrorCode.INVALID_CATEGORY,
        {"category": repr(category)}
    )


def invalid_stock(stock: Any, reason: str = "Stock cannot be negative.") -> CatalogError:
    """Create invalid stock exception."""
    return CatalogError(reason, ErrorCode.INVALID_STOCK, {"stock": repr(stock)})


def not_found(message: str, **details: Any) -> CatalogError:
    """Create not found exception."""
    return CatalogError(message, ErrorCode.NOT_FOUND, details)


def invalid_argument(message: str, **details: Any) -> CatalogError:
    """Create invalid argument exception."""
    return CatalogError(message, ErrorCode.INVALID_ARGUMENT, details)
