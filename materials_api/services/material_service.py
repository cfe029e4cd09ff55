"""
Material Store - Business Logic Layer
Owns the material collection: validation, barcode uniqueness, id assignment
and the create/list/update/delete operations.
"""

import random
import threading
from typing import Any, Dict, List, Mapping, Optional, Set

from pydantic import ValidationError as SchemaValidationError

from ..errors import ConflictError, NotFoundError, ValidationError
from ..repositories import MaterialRepository
from ..schemas import (
    FIELD_ALIASES,
    MaterialPayloadSchema,
    MaterialSchema,
    field_value,
    missing_fields,
)
from ..utils.logging_utils import audit_logger, get_logger

logger = get_logger("store")

ID_STRATEGIES = ("sequential", "random")


def coerce_id(value: Any) -> Optional[int]:
    """Convert a lookup key to the stored id type; None when it cannot match.

    ``"5"``, ``" 5 "``, ``5.0`` and ``5`` all map to ``5``.
    """
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else None


class MaterialStore:
    """In-memory store of material records.

    Every public operation runs under a single lock, so the store can be
    shared by the threads of a WSGI server. Operations either succeed or
    leave the collection untouched.

    Required fields are checked by truthiness on create *and* update, so zero
    quantities and values are rejected. Updates re-check barcode uniqueness
    against the other records.
    """

    def __init__(
        self,
        id_strategy: str = "sequential",
        random_id_max: int = 1_000_000,
        rng: Optional[random.Random] = None,
    ):
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(f"id_strategy must be one of {ID_STRATEGIES}, got {id_strategy!r}")
        if random_id_max < 1:
            raise ValueError("random_id_max must be positive")
        self.id_strategy = id_strategy
        self.random_id_max = random_id_max
        self.material_repo = MaterialRepository()
        self._rng = rng or random.Random()
        # ids already handed out, deleted ones included; never reissued
        self._last_id = 0
        self._issued_ids: Set[int] = set()
        self._lock = threading.Lock()

    def create(self, payload: Mapping[str, Any]) -> MaterialSchema:
        """Validate, normalize and append a new material."""
        with self._lock:
            data = self._validate(payload)

            if self.material_repo.find_by_barcode(data.barcode):
                logger.warning(f"Create rejected: barcode {data.barcode!r} already registered")
                raise ConflictError()

            material = MaterialSchema(id=self._next_id(), **data.model_dump())
            self.material_repo.create(material)

        audit_logger.log_material_action("created", material.id, material.barcode)
        return material

    def list(self) -> List[MaterialSchema]:
        """All materials in insertion order."""
        with self._lock:
            return self.material_repo.get_all()

    def update(self, material_id: Any, payload: Mapping[str, Any]) -> MaterialSchema:
        """Replace every field of an existing material, keeping its position."""
        with self._lock:
            key, index = self._locate(material_id)
            data = self._validate(payload)

            if self.material_repo.find_by_barcode(data.barcode, exclude_id=key):
                logger.warning(
                    f"Update of material {key} rejected: barcode {data.barcode!r} already registered"
                )
                raise ConflictError()

            material = MaterialSchema(id=key, **data.model_dump())
            self.material_repo.replace(index, material)

        audit_logger.log_material_action("updated", material.id, material.barcode)
        return material

    def delete(self, material_id: Any) -> None:
        """Remove a material; the others keep their relative order."""
        with self._lock:
            key, _ = self._locate(material_id)
            self.material_repo.delete_by_id(key)

        audit_logger.log_material_action("deleted", key)

    def count(self) -> int:
        with self._lock:
            return self.material_repo.count()

    def _locate(self, material_id: Any):
        key = coerce_id(material_id)
        index = self.material_repo.index_of(key) if key is not None else None
        if index is None:
            logger.warning(f"Material {material_id!r} not found")
            raise NotFoundError()
        return key, index

    def _validate(self, payload: Mapping[str, Any]) -> MaterialPayloadSchema:
        if not isinstance(payload, Mapping):
            raise ValidationError("Corpo da requisição deve ser um objeto JSON.")

        missing = missing_fields(payload)
        if missing:
            logger.warning(f"Missing required fields: {', '.join(missing)}")
            raise ValidationError(fields=missing)

        values: Dict[str, Any] = {
            alias: field_value(payload, name) for name, alias in FIELD_ALIASES.items()
        }
        try:
            return MaterialPayloadSchema.model_validate(values)
        except SchemaValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            logger.warning(f"Invalid field values: {', '.join(fields)}")
            raise ValidationError(
                f"Valor inválido para o(s) campo(s): {', '.join(fields)}.", fields=fields
            ) from e

    def _next_id(self) -> int:
        if self.id_strategy == "sequential":
            candidate = self._last_id + 1
        else:
            if len(self._issued_ids) >= self.random_id_max:
                raise RuntimeError("No free material id left in the random id range")
            candidate = self._rng.randint(1, self.random_id_max)
            while candidate in self._issued_ids:
                candidate = self._rng.randint(1, self.random_id_max)

        self._last_id = max(self._last_id, candidate)
        self._issued_ids.add(candidate)
        return candidate
