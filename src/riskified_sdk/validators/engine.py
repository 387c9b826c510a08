"""Validação de payloads outbound guiada pelos metadados de cada modelo.

Cada WireModel declara required_fields e field_formats; este módulo
percorre o modelo (e os modelos aninhados presentes) aplicando:
- formato de todo campo presente (IGNORE_MISSING e ALL)
- obrigatoriedade dos campos requeridos (apenas ALL)
"""

from __future__ import annotations

import logging
from typing import Any

from riskified_sdk.domain.base import WireModel
from riskified_sdk.validators.errors import FieldBadFormatError, FieldError
from riskified_sdk.validators.modes import ValidationMode, parse_validation_mode
from riskified_sdk.validators.rules import FORMAT_RULES

logger = logging.getLogger(__name__)

MISSING_REASON = "required field is missing"


def validate(payload: Any, mode: ValidationMode | str) -> list[FieldError]:
    """Valida payload no modo informado.

    Args:
        payload: Pedido (qualquer variante de WireModel)
        mode: Modo de validação

    Returns:
        Lista de erros de campo (vazia = OK)
    """
    mode = parse_validation_mode(mode)
    if mode is ValidationMode.NONE:
        return []

    if not isinstance(payload, WireModel):
        return [FieldError("payload", f"unsupported payload type {type(payload).__name__}")]

    return _validate_model(payload, mode, prefix="")


def validate_or_raise(payload: Any, mode: ValidationMode | str) -> None:
    """Valida payload e levanta erro agregado com todos os campos inválidos.

    Raises:
        FieldBadFormatError: Se algum campo falhar
    """
    errors = validate(payload, mode)
    if errors:
        logger.info(
            "riskified_validation_failed",
            extra={
                "payload_type": type(payload).__name__,
                "fields": [error.field for error in errors],
            },
        )
        raise FieldBadFormatError(errors)


def _validate_model(model: WireModel, mode: ValidationMode, prefix: str) -> list[FieldError]:
    model_cls = type(model)
    errors: list[FieldError] = []

    for name in model_cls.model_fields:
        value = getattr(model, name)
        path = f"{prefix}{name}"

        if _is_missing(value):
            if mode is ValidationMode.ALL and name in model_cls.required_fields:
                errors.append(FieldError(path, MISSING_REASON))
            continue

        rule_name = model_cls.field_formats.get(name)
        if rule_name:
            reason = FORMAT_RULES[rule_name](value)
            if reason:
                errors.append(FieldError(path, reason))

        errors.extend(_validate_nested(value, mode, path))

    return errors


def _validate_nested(value: Any, mode: ValidationMode, path: str) -> list[FieldError]:
    if isinstance(value, WireModel):
        return _validate_model(value, mode, prefix=f"{path}.")

    errors: list[FieldError] = []
    if isinstance(value, list):
        for index, item in enumerate(value):
            if isinstance(item, WireModel):
                errors.extend(_validate_model(item, mode, prefix=f"{path}[{index}]."))
    return errors


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return not value
    return False
