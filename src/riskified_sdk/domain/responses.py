"""Modelos de resposta da API e de notificações inbound."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from riskified_sdk.domain.orders import OrderId  # noqa: TC001 - usado em runtime pelo schema do Pydantic


class ResponseOrder(BaseModel):
    """Estado do pedido devolvido pela API."""

    model_config = ConfigDict(extra="ignore")

    id: OrderId | None = None
    status: str | None = None
    description: str | None = None
    old_status: str | None = None
    category: str | None = None
    decision_code: str | None = None


class ResponseError(BaseModel):
    """Erro devolvido no corpo de respostas não-200.

    Attributes:
        message: Texto do erro
        code: Código geral do erro, quando enviado
        field_codes: Códigos por campo, chave "fields" no wire
            (ex: {"email": ["invalid_format"]})
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message: str | None = None
    code: str | None = None
    field_codes: dict[str, list[str]] | None = Field(default=None, alias="fields")

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("field_codes", mode="before")
    @classmethod
    def _codes_as_lists(cls, value: Any) -> Any:
        # Servidor pode mandar um único código como string
        if isinstance(value, dict):
            return {
                name: [codes] if isinstance(codes, str) else codes
                for name, codes in value.items()
            }
        return value


class Response(BaseModel):
    """Resposta decodificada de uma chamada à API."""

    model_config = ConfigDict(extra="ignore")

    order: ResponseOrder | None = None
    error: ResponseError | None = None
    warnings: list[str] | None = None

    @property
    def error_message(self) -> str | None:
        """Mensagem de erro enviada pelo servidor, se houver."""
        if self.error is None:
            return None
        return self.error.message

    @property
    def error_field_codes(self) -> dict[str, list[str]]:
        """Códigos de erro por campo enviados pelo servidor (vazio se ausentes)."""
        if self.error is None or self.error.field_codes is None:
            return {}
        return self.error.field_codes


class NotificationCustom(BaseModel):
    model_config = ConfigDict(extra="ignore")

    app_dom_id: OrderId | None = None


class NotificationOrder(BaseModel):
    """Pedido contido em uma notificação de mudança de status."""

    model_config = ConfigDict(extra="ignore")

    id: OrderId | None = None
    status: str | None = None
    old_status: str | None = None
    description: str | None = None
    custom: NotificationCustom = Field(default_factory=NotificationCustom)


class Notification(BaseModel):
    """Notificação de status enviada pela Riskified ao merchant."""

    model_config = ConfigDict(extra="ignore")

    order: NotificationOrder

    @property
    def id(self) -> OrderId | None:
        return self.order.id

    @property
    def status(self) -> str | None:
        return self.order.status

    @property
    def old_status(self) -> str | None:
        return self.order.old_status

    @property
    def description(self) -> str | None:
        return self.order.description

    @property
    def app_dom_id(self) -> OrderId | None:
        return self.order.custom.app_dom_id


__all__ = [
    "Notification",
    "NotificationCustom",
    "NotificationOrder",
    "Response",
    "ResponseError",
    "ResponseOrder",
]
