"""Modelos de domínio: pedidos enviados, respostas e notificações."""

from .base import WireModel
from .orders import (
    Address,
    ArrayOrders,
    AuthorizationError,
    CancelOrder,
    ChargebackDetails,
    ChargebackOrder,
    CheckoutDeniedOrder,
    CheckoutOrder,
    ClientDetails,
    Customer,
    DecisionDetails,
    DecisionOrder,
    DiscountCode,
    DisputeDetails,
    Fulfillment,
    FulfillmentOrder,
    LineItem,
    Order,
    PartialRefund,
    PaymentDetails,
    RefundOrder,
    ShippingLine,
)
from .responses import (
    Notification,
    NotificationCustom,
    NotificationOrder,
    Response,
    ResponseError,
    ResponseOrder,
)

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
    "Notification",
    "NotificationCustom",
    "NotificationOrder",
    "Order",
    "PartialRefund",
    "PaymentDetails",
    "RefundOrder",
    "Response",
    "ResponseError",
    "ResponseOrder",
    "ShippingLine",
    "WireModel",
]
