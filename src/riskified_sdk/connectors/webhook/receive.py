"""Recebimento de notificações de status (webhook) da Riskified.

A assinatura é sempre verificada sobre o corpo bruto ANTES de qualquer
parsing; conteúdo não autenticado nunca é decodificado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from riskified_sdk.connectors.codec import decode
from riskified_sdk.connectors.signature import SIGNATURE_HEADER, verify
from riskified_sdk.domain.responses import Notification
from riskified_sdk.utils.errors import RiskifiedError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class WebhookRequestError(RiskifiedError):
    """Erro base para falhas de webhook."""


class AuthenticationError(WebhookRequestError):
    """Assinatura ausente ou inválida; o payload deve ser descartado."""


def _normalize_header_name(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def find_signature_header(headers: Mapping[str, str]) -> str | None:
    """Localiza o header de assinatura (case-insensitive, `_` ou `-`)."""
    expected = _normalize_header_name(SIGNATURE_HEADER)
    for name, value in headers.items():
        if _normalize_header_name(name) == expected:
            return value
    return None


def parse_notification_request(
    raw_body: bytes,
    signature: str | None,
    secret: str,
) -> Notification:
    """Valida assinatura e decodifica a notificação.

    Args:
        raw_body: Corpo bruto do request
        signature: Valor do header X_RISKIFIED_HMAC_SHA256
        secret: Auth key da loja

    Raises:
        AuthenticationError: Se assinatura for ausente ou inválida
        DecodeError: Se o JSON for inválido ou fora do formato

    Returns:
        Notification decodificada
    """
    if not signature:
        raise AuthenticationError("missing_signature")

    if not verify(secret, raw_body, signature):
        raise AuthenticationError("invalid_signature")

    return decode(raw_body, Notification)


class NotificationHandler:
    """Receptor de notificações vinculado à auth key da loja.

    Uso:
        handler = NotificationHandler(auth_key="...")
        notification = handler.receive_from_headers(body, request.headers)
    """

    def __init__(self, auth_key: str) -> None:
        if not auth_key:
            raise ValueError("auth_key é obrigatória para validar notificações")
        self._auth_key = auth_key

    def receive(self, raw_body: bytes, signature: str | None) -> Notification:
        try:
            notification = parse_notification_request(raw_body, signature, self._auth_key)
        except AuthenticationError as exc:
            logger.warning(
                "riskified_notification_signature_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            raise

        logger.info(
            "riskified_notification_received",
            extra={
                "order_id": notification.id,
                "status": notification.status,
                "old_status": notification.old_status,
            },
        )
        return notification

    def receive_from_headers(
        self,
        raw_body: bytes,
        headers: Mapping[str, str],
    ) -> Notification:
        return self.receive(raw_body, find_signature_header(headers))
