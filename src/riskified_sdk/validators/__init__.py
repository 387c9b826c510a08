"""Validação de payloads outbound por modo.

Uso:
    from riskified_sdk.validators import ValidationMode, validate_or_raise

    validate_or_raise(order, ValidationMode.ALL)
"""

from riskified_sdk.validators.engine import MISSING_REASON, validate, validate_or_raise
from riskified_sdk.validators.errors import FieldBadFormatError, FieldError, ValidationError
from riskified_sdk.validators.modes import ValidationMode, parse_validation_mode

__all__ = [
    "MISSING_REASON",
    "FieldBadFormatError",
    "FieldError",
    "ValidationError",
    "ValidationMode",
    "parse_validation_mode",
    "validate",
    "validate_or_raise",
]
