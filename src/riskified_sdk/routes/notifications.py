"""Endpoint de notificações de status da Riskified.

Endpoint:
- POST /: recebe a notificação, valida assinatura e confirma recebimento

Fluxo:
1. Lê o corpo bruto (a assinatura é calculada sobre os bytes exatos)
2. Valida X_RISKIFIED_HMAC_SHA256 e decodifica a Notification
3. Entrega ao callback do merchant (opcional)
4. Responde 200 com confirmação em texto; qualquer erro tipado vira 500
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from riskified_sdk.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from riskified_sdk.utils.errors import RiskifiedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from riskified_sdk.connectors.webhook import NotificationHandler
    from riskified_sdk.domain import Notification

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Merchant couldn't parse notification message"


def format_acknowledgement(notification: Notification) -> str:
    """Texto de confirmação devolvido à Riskified."""
    return (
        f"Merchant Received Notification For Order {notification.id}"
        f" with status {notification.status}"
        f" and description {notification.description}"
        f" and app_dom_id {notification.app_dom_id}"
        f" Old Status was {notification.old_status}"
    )


def create_notifications_router(
    handler: NotificationHandler,
    on_notification: Callable[[Notification], None] | None = None,
) -> APIRouter:
    """Cria router FastAPI para receber notificações.

    Args:
        handler: NotificationHandler com a auth key da loja
        on_notification: Callback chamado com cada notificação válida

    Uso:
        app.include_router(
            create_notifications_router(NotificationHandler(auth_key)),
            prefix="/riskified/notifications",
        )
    """
    router = APIRouter()

    @router.post("/")
    async def receive_notification(request: Request) -> Response:
        correlation_id = request.headers.get("x-correlation-id")
        token = set_correlation_id(correlation_id)

        try:
            raw_body = await request.body()

            try:
                notification = handler.receive_from_headers(raw_body, request.headers)
            except RiskifiedError as exc:
                logger.warning(
                    "riskified_notification_rejected",
                    extra={
                        "correlation_id": get_correlation_id(),
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                return Response(
                    content=PARSE_FAILURE_MESSAGE,
                    media_type="text/plain",
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

            if on_notification is not None:
                on_notification(notification)

            return Response(
                content=format_acknowledgement(notification),
                media_type="text/plain",
                status_code=status.HTTP_200_OK,
            )

        finally:
            reset_correlation_id(token)

    return router
