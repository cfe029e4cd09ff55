"""
Repository pattern implementation for data access abstraction.
"""

from .base_repository import BaseRepository
from .material_repository import MaterialRepository

__all__ = [
    "BaseRepository",
    "MaterialRepository",
]
