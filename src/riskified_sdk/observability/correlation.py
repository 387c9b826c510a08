"""Correlation id por requisição, propagado para os logs.

Usado pelo endpoint de notificações (header x-correlation-id) e
disponível para quem chama o RiskifiedClient agrupar os eventos
riskified_* de uma mesma operação. Usa ContextVar para ser thread/async-safe.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        client.create_order(order)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("riskified_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual.

    Returns:
        correlation_id ou string vazia se não definido.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior.

    Args:
        token: Token retornado por set_correlation_id().
    """
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
