"""Rotas HTTP opcionais (FastAPI) para o lado inbound do SDK."""

from .notifications import create_notifications_router, format_acknowledgement

__all__ = ["create_notifications_router", "format_acknowledgement"]
