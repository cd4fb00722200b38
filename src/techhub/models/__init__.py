"""
Central import point for the domain models.

    from techhub.models import Framework, FrameworkInput, Category, Language
"""

from .enums import Category, Language
from .framework import Framework, FrameworkInput
from .review import Review

__all__ = [
    "Category",
    "Language",
    "Framework",
    "FrameworkInput",
    "Review",
]
