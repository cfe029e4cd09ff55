"""
Business logic service layer.
"""
from flask import current_app

from .material_service import MaterialStore, coerce_id

STORE_EXTENSION = "material_store"


def get_store() -> MaterialStore:
    """The material store bound to the current application."""
    return current_app.extensions[STORE_EXTENSION]


__all__ = [
    'MaterialStore',
    'STORE_EXTENSION',
    'coerce_id',
    'get_store',
]
