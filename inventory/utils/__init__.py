"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the inventory catalog.

Modules:
--------
- validators: Product input validation

==============================================================================
"""

from .validators import TextFieldValidator, QuantityValidator

__all__ = [
    "TextFieldValidator",
    "QuantityValidator",
]
