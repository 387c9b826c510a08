"""Formatters de logging estruturado.

Todo log JSON emitido pelo SDK (quando configure_logging é usado) traz:
- asctime, level, logger, message
- correlation_id, service
- os campos de `extra` de cada evento (operation, url, status_code...)
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa: define a ordem das chaves no JSON emitido
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos padronizados do SDK.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "riskified_sdk.connectors.api_logging",
            "message": "riskified_response_error",
            "correlation_id": "abc-123",
            "service": "minha_loja",
            "operation": "create_order",
            "status_code": 400
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
