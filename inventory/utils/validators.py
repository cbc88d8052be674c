"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for catalog input data.

This module implements:
- TextFieldValidator: Validates product ids, names and category names
- QuantityValidator: Validates stock levels and top-K counts

Validation Rules for Text Fields:
--------------------------------
- Must be a string
- Must not be empty (whitespace-only values are accepted)
- Valid values are kept exactly as given (no normalization)

==============================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class TextFieldValidator:
    """
    Validator for required text fields.
    
    Example:
        >>> validator = TextFieldValidator("Product ID")
        >>> validator.validate("")
        (False, 'Product ID is required')
        >>> validator.validate("42")
        (True, None)
    """
    
    def __init__(self, label: str) -> None:
        self.label = label
    
    def validate(self, value: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a text field value.
        
        Args:
            value: Raw field value
            
        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            return False, f"{self.label} is required"
        
        if not isinstance(value, str):
            return False, f"{self.label} must be a string"
        
        if not value:
            return False, f"{self.label} is required"
        
        return True, None
    
    def is_valid(self, value: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(value)
        return is_valid


class QuantityValidator:
    """
    Validator for integer quantities.
    
    ``bool`` is rejected even though it subclasses ``int``.
    """
    
    def __init__(self, minimum: int = 0) -> None:
        self.minimum = minimum
    
    def validate(self, qty: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate a quantity value.
        
        Args:
            qty: Quantity to validate
            
        Returns:
            Tuple of (is_valid, error_message)
        """
        if isinstance(qty, bool) or not isinstance(qty, int):
            return False, "Quantity must be an integer"
        
        if qty < self.minimum:
            if self.minimum == 0:
                return False, "Quantity cannot be negative"
            return False, f"Quantity must be at least {self.minimum}"
        
        return True, None
    
    def is_valid(self, qty: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(qty)
        return is_valid
