"""
Pydantic schemas for material records.

Attributes use English snake_case names; the wire format keeps the
Portuguese camelCase names of the public API (``nomeProduto`` etc.).
"""

from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MaterialPayloadSchema(BaseModel):
    """The nine business fields of a material, as sent by API clients."""

    product_name: str = Field(..., alias="nomeProduto", description="Product name")
    quantity_per_box: int = Field(..., alias="quantidadePorCaixa", description="Quantity per box")
    unit_quantity: int = Field(..., alias="quantidadeUnitaria", description="Unit quantity")
    barcode: str = Field(..., alias="codigoBarras", description="Unique barcode")
    supplier_name: str = Field(..., alias="nomeFornecedor", description="Supplier name")
    recipient_name: str = Field(..., alias="nomeRecebedor", description="Recipient name")
    destination_sector: str = Field(..., alias="setorDestino", description="Destination sector")
    unit_value: float = Field(
        ..., alias="valorUnitario", allow_inf_nan=False, description="Unit value"
    )
    total_value: float = Field(
        ..., alias="valorTotal", allow_inf_nan=False, description="Total value"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("barcode")
    @classmethod
    def normalize_barcode(cls, v):
        return v.strip()


class MaterialSchema(MaterialPayloadSchema):
    """A stored material: the business fields plus the store-assigned id."""

    id: int

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, id first."""
        return {"id": self.id, **self.model_dump(by_alias=True, exclude={"id"})}


# attribute name -> wire name, in declaration order
FIELD_ALIASES: Dict[str, str] = {
    name: field.alias for name, field in MaterialPayloadSchema.model_fields.items()
}


def field_value(payload: Mapping[str, Any], name: str) -> Any:
    """Look a field up by wire name, falling back to the attribute name."""
    alias = FIELD_ALIASES[name]
    if alias in payload:
        return payload[alias]
    return payload.get(name)


def missing_fields(payload: Mapping[str, Any]) -> List[str]:
    """Wire names of the fields that are absent or falsy.

    Zero quantities and values count as missing. A barcode made only of
    whitespace is missing too, since it is empty once trimmed.
    """
    missing = []
    for name, alias in FIELD_ALIASES.items():
        value = field_value(payload, name)
        if name == "barcode" and isinstance(value, str):
            value = value.strip()
        if not value:
            missing.append(alias)
    return missing
