"""
Reusable widgets for validated forms.
"""

from .validated_field import ValidatedField

__all__ = ["ValidatedField"]
