"""
Utility functions for tensor construction.

This module provides helper functions for:
- Index specification validation (names vs sizes)
- Single-index name checks used by the linear functional builders
"""

from multilinear.utils.validation import (
    is_single_index_name,
    is_valid_index_spec,
)

__all__ = [
    "is_single_index_name",
    "is_valid_index_spec",
]
