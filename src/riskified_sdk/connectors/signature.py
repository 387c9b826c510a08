"""Assinatura HMAC-SHA256 compartilhada entre requests e notificações.

A assinatura é calculada sobre os bytes exatos do corpo (JSON UTF-8),
usando a auth key da loja como chave. O mesmo cálculo é usado para
assinar requests outbound e para validar notificações inbound.
"""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_HEADER = "X_RISKIFIED_HMAC_SHA256"


def _to_bytes(value: bytes | str) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def sign(secret: str, payload: bytes | str) -> str:
    """Calcula o digest HMAC-SHA256 em hexadecimal.

    Args:
        secret: Auth key da loja
        payload: Corpo exato a ser assinado

    Returns:
        Digest hexadecimal (minúsculo)
    """
    return hmac.new(_to_bytes(secret), _to_bytes(payload), hashlib.sha256).hexdigest()


def verify(secret: str, payload: bytes | str, signature: str | None) -> bool:
    """Valida assinatura HMAC-SHA256 em tempo constante.

    Args:
        secret: Auth key da loja
        payload: Corpo bruto recebido
        signature: Valor do header de assinatura

    Returns:
        True se assinatura válida
    """
    if not signature:
        return False
    computed = sign(secret, payload).encode("ascii")
    # Header pode trazer bytes não-ASCII; compare_digest só aceita str ASCII
    received = signature.strip().lower().encode("utf-8")
    return hmac.compare_digest(computed, received)


class SignatureHandler:
    """Assinador vinculado a uma auth key."""

    def __init__(self, auth_key: str) -> None:
        if not auth_key:
            raise ValueError("auth_key é obrigatória para assinar payloads")
        self._auth_key = auth_key

    def sign(self, payload: bytes | str) -> str:
        return sign(self._auth_key, payload)

    def verify(self, payload: bytes | str, signature: str | None) -> bool:
        return verify(self._auth_key, payload, signature)
