"""
Pydantic schemas for data validation and serialization.
"""
from .material_schemas import (
    FIELD_ALIASES,
    MaterialPayloadSchema,
    MaterialSchema,
    field_value,
    missing_fields,
)

__all__ = [
    'FIELD_ALIASES',
    'MaterialPayloadSchema',
    'MaterialSchema',
    'field_value',
    'missing_fields',
]
