"""Filters de logging: contexto da requisição e mascaramento de secrets.

Campos injetados:
- correlation_id: ID de rastreamento da chamada à Riskified
- service: Nome do serviço que embute o SDK

Nunca registrar auth key, assinaturas HMAC ou corpos de pedidos; o
SensitiveFieldFilter mascara esses campos se chegarem via `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Nomes de `extra` que nunca podem sair em claro
SENSITIVE_FIELDS = frozenset(
    {
        "auth_key",
        "signature",
        "hmac",
        "password",
        "proxy_password",
        "authorization",
    }
)

MASK = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.

        Args:
            record: LogRecord a ser enriquecido.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara campos sensíveis passados via `extra`.

    Cobre o caso de um chamador logar a config do cliente ou headers
    assinados: auth key, assinatura e senha do proxy viram MASK.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Substitui valores sensíveis presentes no record.

        Args:
            record: LogRecord a ser sanitizado.

        Returns:
            True sempre (o record é emitido, já mascarado).
        """
        for name in SENSITIVE_FIELDS:
            if getattr(record, name, None):
                setattr(record, name, MASK)
        return True
