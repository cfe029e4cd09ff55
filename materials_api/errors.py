"""
Domain errors raised by the material store.
Each error carries the HTTP status the API layer answers with.
"""
from __future__ import annotations

from typing import Sequence


class MaterialError(Exception):
    """Base class for recoverable material store errors."""

    status_code: int = 400
    default_message: str = "Requisição inválida."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"erro": self.message}


class ValidationError(MaterialError):
    """Required field missing/falsy, or a value of the wrong type."""

    status_code = 400
    default_message = "Todos os campos são obrigatórios."

    def __init__(self, message: str | None = None, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = list(fields)


class ConflictError(MaterialError):
    status_code = 409
    default_message = "Código de barras já cadastrado."


class NotFoundError(MaterialError):
    status_code = 404
    default_message = "Material não encontrado."
