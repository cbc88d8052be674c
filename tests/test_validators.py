"""
==============================================================================
Validator Tests
==============================================================================

Tests for input validation helpers.

==============================================================================
"""

import pytest

from inventory.utils.validators import QuantityValidator, TextFieldValidator


class TestTextFieldValidator:
    """Tests for required text fields."""
    
    @pytest.mark.parametrize("value", ["1", "Laptop", " padded ", " "])
    def test_valid(self, value):
        assert TextFieldValidator("Name").validate(value) == (True, None)
    
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        assert TextFieldValidator("Name").validate(value) == (False, "Name is required")
    
    def test_wrong_type(self):
        assert TextFieldValidator("Name").validate(5) == (False, "Name must be a string")


class TestQuantityValidator:
    """Tests for integer quantities."""
    
    def test_non_negative(self):
        validator = QuantityValidator()
        
        assert validator.is_valid(0)
        assert validator.validate(-1) == (False, "Quantity cannot be negative")
    
    def test_minimum(self):
        validator = QuantityValidator(minimum=1)
        
        assert validator.is_valid(1)
        assert validator.validate(0) == (False, "Quantity must be at least 1")
    
    @pytest.mark.parametrize("qty", [True, 1.0, "3", None])
    def test_rejects_non_integers(self, qty):
        assert QuantityValidator().validate(qty) == (False, "Quantity must be an integer")
