"""Configuração centralizada de logging.

O SDK apenas emite logs via `logging.getLogger(__name__)`; quem embute o
SDK decide se chama configure_logging() ou integra aos próprios handlers.
Para ajustar só a verbosidade do SDK sem mexer no logger raiz, use
set_sdk_log_level().

Uso:
    from riskified_sdk.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_loja")
    logger = get_logger(__name__)
    logger.info("riskified_request_sent", extra={"operation": "create_order"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from riskified_sdk.config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from riskified_sdk.config.logging.formatters import create_json_formatter
from riskified_sdk.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "riskified_sdk"

# Logger pai de todos os módulos do pacote
SDK_LOGGER_NAME = "riskified_sdk"


def _normalize_level(level: str) -> str:
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_upper


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Indicado para serviços pequenos (ex: o endpoint de notificações)
    que não têm configuração de logging própria.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Padrão: ContextVar de riskified_sdk.observability.

    Raises:
        ValueError: Se o nível de log for inválido.

    Exemplo:
        configure_logging(level="DEBUG", service_name="checkout_api")
    """
    level_upper = _normalize_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def set_sdk_log_level(level: str) -> logging.Logger:
    """Ajusta o nível apenas dos loggers do SDK.

    Os eventos riskified_request_sent / riskified_response_success são
    DEBUG; este ajuste permite vê-los sem tornar a aplicação inteira verbosa.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        Logger "riskified_sdk" ajustado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(_normalize_level(level))
    return sdk_logger


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    Args:
        name: Nome do logger (geralmente __name__).

    Returns:
        Logger; service e correlation_id são injetados pelo handler.
    """
    return logging.getLogger(name)
