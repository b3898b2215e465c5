"""
GUI-specific utilities for the input validator.
"""

from .styling import AccessiblePalette, StyleSheets, apply_validation_style

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_validation_style",
]
