"""
Material Repository implementation with material-specific lookups.
"""

from typing import Optional

from ..schemas import MaterialSchema
from .base_repository import BaseRepository


class MaterialRepository(BaseRepository[MaterialSchema]):
    """Repository for Material-specific operations."""

    def find_by_barcode(
        self, barcode: str, exclude_id: Optional[int] = None
    ) -> Optional[MaterialSchema]:
        """Find material by exact (already trimmed) barcode."""
        return self.find_one_by(
            lambda m: m.barcode == barcode and m.id != exclude_id
        )
