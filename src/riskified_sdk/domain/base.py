"""Base dos modelos de wire do SDK.

Cada modelo declara, como dados de classe:
- required_fields: campos obrigatórios quando a validação é ALL
- field_formats: regra de formato aplicada a cada campo presente

A construção do modelo é permissiva (apenas tipos); regras de formato e
obrigatoriedade ficam com riskified_sdk.validators, para que o modo NONE
envie exatamente o que o chamador montou.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from riskified_sdk.validators import FieldError, ValidationMode


class WireModel(BaseModel):
    """Modelo serializável no formato snake_case do wire."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    required_fields: ClassVar[tuple[str, ...]] = ()
    field_formats: ClassVar[dict[str, str]] = {}

    def field_errors(self, mode: ValidationMode) -> list[FieldError]:
        """Retorna os erros de campo deste payload no modo informado."""
        # Import local para evitar dependência circular
        from riskified_sdk.validators import validate

        return validate(self, mode)
