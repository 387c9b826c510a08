"""Codec JSON canônico para o wire da Riskified.

Regras de encoding (a assinatura depende dos bytes exatos):
- campos não definidos são omitidos (nunca `null`)
- nomes de campo em snake_case, na ordem de declaração do modelo
- separadores compactos, UTF-8 sem escape de não-ASCII
- datas em ISO 8601
"""

from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from riskified_sdk.domain.responses import Response
from riskified_sdk.utils.errors import DecodeError

PayloadT = TypeVar("PayloadT", bound=BaseModel)
ModelT = TypeVar("ModelT", bound=BaseModel)

ORDER_ENVELOPE_KEY = "order"
CHECKOUT_ENVELOPE_KEY = "checkout"


class Envelope(Generic[PayloadT]):
    """Envelope do wire: um único payload sob uma chave fixa.

    Exemplo: Envelope("checkout", order) -> {"checkout": {...}}
    """

    __slots__ = ("key", "payload")

    def __init__(self, key: str, payload: PayloadT) -> None:
        self.key = key
        self.payload = payload

    def to_wire(self) -> dict[str, Any]:
        return {self.key: to_wire_dict(self.payload)}

    def __repr__(self) -> str:
        return f"Envelope(key={self.key!r}, payload={type(self.payload).__name__})"


def wrap(key: str | None, payload: PayloadT) -> Envelope[PayloadT] | PayloadT:
    """Envolve payload na chave informada; None envia o payload sem envelope."""
    if key is None:
        return payload
    return Envelope(key, payload)


def to_wire_dict(model: BaseModel) -> dict[str, Any]:
    """Converte modelo em dict do wire, sem campos nulos."""
    return model.model_dump(mode="json", exclude_none=True, by_alias=True)


def encode(data: Envelope[Any] | BaseModel) -> bytes:
    """Serializa envelope ou modelo em bytes JSON canônicos.

    Args:
        data: Envelope ou modelo (ex: ArrayOrders, que vai sem envelope)

    Returns:
        Corpo UTF-8 a ser assinado e enviado
    """
    wire = data.to_wire() if isinstance(data, Envelope) else to_wire_dict(data)
    return json.dumps(wire, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _load_object(raw: bytes | str) -> dict[str, Any]:
    try:
        data = json.loads(raw or b"")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError("invalid_json") from exc

    if not isinstance(data, dict):
        raise DecodeError("payload_not_object")
    return data


def decode(raw: bytes | str, target: type[ModelT]) -> ModelT:
    """Decodifica JSON no modelo alvo.

    Raises:
        DecodeError: JSON inválido, não-objeto ou fora do formato do alvo
    """
    data = _load_object(raw)
    return _validate(data, target)


def decode_response(raw: bytes | str) -> Response:
    return decode(raw, Response)


def decode_checkout_response(raw: bytes | str) -> Response:
    """Decodifica resposta de endpoints de checkout.

    O servidor responde `{"checkout": {...}}`; o conteúdo é exposto em
    `Response.order`, como nas demais respostas.
    """
    data = _load_object(raw)
    checkout = data.pop(CHECKOUT_ENVELOPE_KEY, None)
    if checkout is not None:
        data[ORDER_ENVELOPE_KEY] = checkout
    return _validate(data, Response)


def _validate(data: dict[str, Any], target: type[ModelT]) -> ModelT:
    try:
        return target.model_validate(data)
    except PydanticValidationError as exc:
        raise DecodeError(f"unexpected_shape: {target.__name__}") from exc
