"""
Repository layer.

    from techhub.repositories import FrameworkRepository, UniquenessPolicy
"""

from .base_repository import BaseRepository, IdSequence
from .framework_repository import FrameworkRepository, UniquenessPolicy

__all__ = [
    "BaseRepository",
    "IdSequence",
    "FrameworkRepository",
    "UniquenessPolicy",
]
