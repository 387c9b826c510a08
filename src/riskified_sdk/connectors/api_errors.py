"""Classificação de respostas não-200 da API Riskified.

- 400, 401, 404: erro do cliente, mensagem vinda do corpo
- 504: erro temporário, único caso em que o chamador deve considerar retry
- demais: erro inesperado, reportado como 500 "contact support"
"""

from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from riskified_sdk.domain.responses import ResponseError
from riskified_sdk.utils.errors import RiskifiedError

TEMPORARY_ERROR_MESSAGE = "temporary error, retry"
CONTACT_SUPPORT_MESSAGE = "contact support"
UNKNOWN_ERROR_MESSAGE = "unknown error"

CLIENT_ERROR_STATUSES = frozenset({400, 401, 404})
TEMPORARY_ERROR_STATUS = 504
FALLBACK_ERROR_STATUS = 500

_MAX_FALLBACK_TEXT = 500


class HttpResponseError(RiskifiedError):
    """Servidor respondeu com status diferente de 200.

    Attributes:
        status_code: Status reportado (500 para status não mapeados)
        message: Mensagem do servidor ou texto fixo de fallback
        is_retryable: True apenas para 504
        response_status: Status HTTP efetivamente recebido
        field_codes: Códigos de erro por campo enviados pelo servidor
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        is_retryable: bool = False,
        response_status: int | None = None,
        field_codes: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.is_retryable = is_retryable
        self.response_status = response_status if response_status is not None else status_code
        self.field_codes = field_codes or {}


def parse_error_body(body: bytes | str) -> ResponseError | None:
    """Decodifica o objeto `error` de um corpo `{"error": {...}}`.

    Returns:
        ResponseError, ou None se o corpo não trouxer um objeto de erro
    """
    try:
        data = json.loads(body or b"")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None

    if not isinstance(data, dict):
        return None

    error_obj = data.get("error")
    if not isinstance(error_obj, dict):
        return None

    try:
        return ResponseError.model_validate(error_obj)
    except PydanticValidationError:
        return None


def parse_error_message(body: bytes | str) -> str | None:
    """Extrai error.message de um corpo `{"error": {"message": ...}}`."""
    error = parse_error_body(body)
    if error is None or not error.message:
        return None
    return error.message


def _fallback_text(body: bytes | str) -> str:
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    text = text.strip()
    if not text:
        return UNKNOWN_ERROR_MESSAGE
    return text[:_MAX_FALLBACK_TEXT]


def build_http_error(status_code: int, body: bytes | str) -> HttpResponseError:
    """Converte status + corpo em HttpResponseError tipado."""
    if status_code in CLIENT_ERROR_STATUSES:
        error = parse_error_body(body)
        message = (error.message if error else None) or _fallback_text(body)
        field_codes = error.field_codes if error else None
        return HttpResponseError(status_code, message, field_codes=field_codes)

    if status_code == TEMPORARY_ERROR_STATUS:
        return HttpResponseError(status_code, TEMPORARY_ERROR_MESSAGE, is_retryable=True)

    return HttpResponseError(
        FALLBACK_ERROR_STATUS,
        CONTACT_SUPPORT_MESSAGE,
        response_status=status_code,
    )
