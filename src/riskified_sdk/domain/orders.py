"""Família de pedidos enviada à API Riskified.

Variantes:
- CheckoutOrder / CheckoutDeniedOrder: checkout (todos os campos opcionais)
- Order: criação, submit, update e análise síncrona
- CancelOrder, RefundOrder, FulfillmentOrder, DecisionOrder, ChargebackOrder
- ArrayOrders: lote de pedidos históricos

Os nomes de campo seguem o wire (snake_case).
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import ClassVar

from riskified_sdk.domain.base import WireModel

OrderId = str | int


class Address(WireModel):
    """Endereço de cobrança ou entrega."""

    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    province_code: str | None = None
    country: str | None = None
    country_code: str | None = None
    zip: str | None = None
    phone: str | None = None

    field_formats: ClassVar[dict[str, str]] = {"country_code": "country_code"}


class LineItem(WireModel):
    """Item do pedido."""

    title: str | None = None
    price: float | None = None
    quantity: int | None = None
    product_id: str | None = None
    sku: str | None = None
    variant_id: str | None = None
    variant_title: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    brand: str | None = None
    category: str | None = None
    requires_shipping: bool | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("title", "price", "quantity")
    field_formats: ClassVar[dict[str, str]] = {
        "title": "non_empty",
        "price": "amount",
        "quantity": "positive_int",
    }


class DiscountCode(WireModel):
    code: str | None = None
    amount: float | None = None

    field_formats: ClassVar[dict[str, str]] = {"amount": "amount"}


class ShippingLine(WireModel):
    title: str | None = None
    price: float | None = None
    code: str | None = None

    field_formats: ClassVar[dict[str, str]] = {"price": "amount"}


class Customer(WireModel):
    """Cliente final que fez o pedido."""

    id: OrderId | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    verified_email: bool | None = None
    created_at: datetime | None = None
    orders_count: int | None = None
    account_type: str | None = None

    field_formats: ClassVar[dict[str, str]] = {"email": "email"}


class ClientDetails(WireModel):
    accept_language: str | None = None
    browser_ip: str | None = None
    user_agent: str | None = None

    field_formats: ClassVar[dict[str, str]] = {"browser_ip": "ip"}


class AuthorizationError(WireModel):
    """Erro de autorização do gateway (checkout negado)."""

    created_at: datetime | None = None
    error_code: str | None = None
    message: str | None = None


class PaymentDetails(WireModel):
    credit_card_bin: str | None = None
    credit_card_number: str | None = None
    credit_card_company: str | None = None
    avs_result_code: str | None = None
    cvv_result_code: str | None = None
    authorization_id: str | None = None
    payer_email: str | None = None
    payer_status: str | None = None
    payment_status: str | None = None
    authorization_error: AuthorizationError | None = None

    field_formats: ClassVar[dict[str, str]] = {"payer_email": "email"}


class _OrderFields(WireModel):
    """Campos comuns a pedidos e checkouts."""

    id: OrderId | None = None
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    currency: str | None = None
    gateway: str | None = None
    browser_ip: str | None = None
    total_price: float | None = None
    total_discounts: float | None = None
    cart_token: str | None = None
    note: str | None = None
    referring_site: str | None = None
    landing_site: str | None = None
    source: str | None = None
    vendor_id: str | None = None
    vendor_name: str | None = None
    customer: Customer | None = None
    line_items: list[LineItem] | None = None
    shipping_lines: list[ShippingLine] | None = None
    discount_codes: list[DiscountCode] | None = None
    payment_details: PaymentDetails | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    client_details: ClientDetails | None = None

    field_formats: ClassVar[dict[str, str]] = {
        "email": "email",
        "currency": "currency",
        "browser_ip": "ip",
        "total_price": "amount",
        "total_discounts": "amount",
    }


class Order(_OrderFields):
    """Pedido completo (create, submit, update, analyze)."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "id",
        "email",
        "currency",
        "total_price",
        "line_items",
    )


class CheckoutOrder(_OrderFields):
    """Checkout em andamento; envio parcial é legítimo."""


class CheckoutDeniedOrder(WireModel):
    """Checkout recusado pelo gateway de pagamento."""

    id: OrderId | None = None
    payment_details: PaymentDetails | None = None


class CancelOrder(WireModel):
    id: OrderId | None = None
    cancel_reason: str | None = None
    cancelled_at: datetime | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("id", "cancel_reason")
    field_formats: ClassVar[dict[str, str]] = {"cancel_reason": "non_empty"}


class PartialRefund(WireModel):
    refund_id: str | None = None
    amount: float | None = None
    currency: str | None = None
    refunded_at: datetime | None = None
    reason: str | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("refund_id", "amount", "currency")
    field_formats: ClassVar[dict[str, str]] = {"amount": "amount", "currency": "currency"}


class RefundOrder(WireModel):
    id: OrderId | None = None
    refunds: list[PartialRefund] | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("id", "refunds")


class Fulfillment(WireModel):
    fulfillment_id: str | None = None
    created_at: datetime | None = None
    status: str | None = None
    tracking_company: str | None = None
    tracking_numbers: str | None = None
    tracking_urls: str | None = None
    message: str | None = None
    receipt: str | None = None
    line_items: list[LineItem] | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("fulfillment_id", "created_at", "status")
    field_formats: ClassVar[dict[str, str]] = {"status": "non_empty"}


class FulfillmentOrder(WireModel):
    id: OrderId | None = None
    fulfillments: list[Fulfillment] | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("id", "fulfillments")


class DecisionDetails(WireModel):
    """Decisão tomada pelo merchant sobre o pedido."""

    external_status: str | None = None
    decided_at: datetime | None = None
    reason: str | None = None
    amount: float | None = None
    currency: str | None = None
    notes: str | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("external_status", "decided_at")
    field_formats: ClassVar[dict[str, str]] = {
        "external_status": "non_empty",
        "amount": "amount",
        "currency": "currency",
    }


class DecisionOrder(WireModel):
    id: OrderId | None = None
    decision: DecisionDetails | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("id", "decision")


class ChargebackDetails(WireModel):
    id: str | None = None
    chargeback_at: datetime | None = None
    chargeback_currency: str | None = None
    chargeback_amount: float | None = None
    reason_code: str | None = None
    reason_description: str | None = None
    type: str | None = None
    gateway: str | None = None
    mid: str | None = None
    arn: str | None = None
    credit_card_company: str | None = None
    card_issuer: str | None = None
    respond_by: datetime | None = None

    required_fields: ClassVar[tuple[str, ...]] = (
        "id",
        "chargeback_at",
        "chargeback_currency",
        "chargeback_amount",
    )
    field_formats: ClassVar[dict[str, str]] = {
        "chargeback_currency": "currency",
        "chargeback_amount": "amount",
    }


class DisputeDetails(WireModel):
    case_id: str | None = None
    status: str | None = None
    dispute_type: str | None = None
    disputed_at: datetime | None = None
    expected_resolution_date: datetime | None = None
    issuer_poc_phone_number: str | None = None


class ChargebackOrder(WireModel):
    id: OrderId | None = None
    chargeback_details: ChargebackDetails | None = None
    fulfillment: Fulfillment | None = None
    dispute_details: DisputeDetails | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("id", "chargeback_details")


class ArrayOrders(WireModel):
    """Lote de pedidos históricos (enviado sem envelope)."""

    orders: list[Order] | None = None

    required_fields: ClassVar[tuple[str, ...]] = ("orders",)


__all__ = [
    "Address",
    "ArrayOrders",
    "AuthorizationError",
    "CancelOrder",
    "ChargebackDetails",
    "ChargebackOrder",
    "CheckoutDeniedOrder",
    "CheckoutOrder",
    "ClientDetails",
    "Customer",
    "DecisionDetails",
    "DecisionOrder",
    "DiscountCode",
    "DisputeDetails",
    "Fulfillment",
    "FulfillmentOrder",
    "LineItem",
    "Order",
    "OrderId",
    "PartialRefund",
    "PaymentDetails",
    "ShippingLine",
]
