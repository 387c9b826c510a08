"""Webhook Riskified: assinatura e parsing seguro de notificações."""

from .receive import (
    AuthenticationError,
    NotificationHandler,
    WebhookRequestError,
    find_signature_header,
    parse_notification_request,
)

__all__ = [
    "AuthenticationError",
    "NotificationHandler",
    "WebhookRequestError",
    "find_signature_header",
    "parse_notification_request",
]
