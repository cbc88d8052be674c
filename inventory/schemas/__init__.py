"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Structured results returned by catalog operations.

==============================================================================
"""

from .common import OperationResult, ResultStatus

__all__ = [
    "OperationResult",
    "ResultStatus",
]
