"""Conector Riskified - único ponto de IO do SDK.

Responsabilidades:
- Assinatura HMAC-SHA256 (requests e notificações)
- Codec JSON canônico e envelopes
- Cliente HTTP e classificação de respostas
- Recebimento de notificações (webhook)
"""

from .api_errors import (
    HttpResponseError,
    build_http_error,
    parse_error_body,
    parse_error_message,
)
from .client import OPERATIONS, Operation, RiskifiedClient, resolve_validation_mode
from .codec import Envelope, decode, decode_checkout_response, decode_response, encode, wrap
from .signature import SIGNATURE_HEADER, SignatureHandler, sign, verify
from .webhook import AuthenticationError, NotificationHandler, parse_notification_request

__all__ = [
    "OPERATIONS",
    "SIGNATURE_HEADER",
    "AuthenticationError",
    "Envelope",
    "HttpResponseError",
    "NotificationHandler",
    "Operation",
    "RiskifiedClient",
    "SignatureHandler",
    "build_http_error",
    "decode",
    "decode_checkout_response",
    "decode_response",
    "encode",
    "parse_error_body",
    "parse_error_message",
    "parse_notification_request",
    "resolve_validation_mode",
    "sign",
    "verify",
    "wrap",
]
