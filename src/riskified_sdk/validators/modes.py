"""Modos de validação de payloads outbound."""

from __future__ import annotations

from enum import Enum


class ValidationMode(str, Enum):
    """Nível de validação aplicado antes do envio.

    - NONE: nenhuma validação
    - IGNORE_MISSING: valida apenas o formato dos campos presentes
    - ALL: formato dos presentes + obrigatoriedade dos campos requeridos
    """

    NONE = "NONE"
    IGNORE_MISSING = "IGNORE_MISSING"
    ALL = "ALL"


def parse_validation_mode(value: str | ValidationMode) -> ValidationMode:
    """Converte string (case-insensitive) em ValidationMode.

    Raises:
        ValueError: Se o valor não corresponde a nenhum modo
    """
    if isinstance(value, ValidationMode):
        return value
    try:
        return ValidationMode(value.strip().upper())
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in ValidationMode)
        raise ValueError(f"Modo de validação inválido: {value}. Válidos: {valid}") from exc
