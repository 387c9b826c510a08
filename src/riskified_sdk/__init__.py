"""SDK Python para a API de revisão de fraude da Riskified.

Uso:
    from riskified_sdk import ClientConfig, Environment, RiskifiedClient

    client = RiskifiedClient(
        ClientConfig(shop_url="loja.com", auth_key="...", environment=Environment.SANDBOX)
    )
    response = client.create_order(order)

O endpoint FastAPI de notificações fica em `riskified_sdk.routes`.
"""

from httpx import TransportError

from riskified_sdk._version import __version__
from riskified_sdk.config.settings import (
    ClientConfig,
    Environment,
    ProxySettings,
    get_client_config,
    load_client_config_from_env,
)
from riskified_sdk.connectors import (
    AuthenticationError,
    Envelope,
    HttpResponseError,
    NotificationHandler,
    RiskifiedClient,
    SignatureHandler,
    decode,
    encode,
    parse_notification_request,
    wrap,
)
from riskified_sdk.domain import (
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
    Notification,
    Order,
    PartialRefund,
    PaymentDetails,
    RefundOrder,
    Response,
    ShippingLine,
)
from riskified_sdk.utils.errors import ConfigurationError, DecodeError, RiskifiedError
from riskified_sdk.validators import (
    FieldBadFormatError,
    FieldError,
    ValidationError,
    ValidationMode,
)

__all__ = [
    "Address",
    "ArrayOrders",
    "AuthenticationError",
    "AuthorizationError",
    "CancelOrder",
    "ChargebackDetails",
    "ChargebackOrder",
    "CheckoutDeniedOrder",
    "CheckoutOrder",
    "ClientConfig",
    "ClientDetails",
    "ConfigurationError",
    "Customer",
    "DecisionDetails",
    "DecisionOrder",
    "DecodeError",
    "DiscountCode",
    "DisputeDetails",
    "Envelope",
    "Environment",
    "FieldBadFormatError",
    "FieldError",
    "Fulfillment",
    "FulfillmentOrder",
    "HttpResponseError",
    "LineItem",
    "Notification",
    "NotificationHandler",
    "Order",
    "PartialRefund",
    "PaymentDetails",
    "ProxySettings",
    "RefundOrder",
    "Response",
    "RiskifiedClient",
    "RiskifiedError",
    "ShippingLine",
    "SignatureHandler",
    "TransportError",
    "ValidationError",
    "ValidationMode",
    "__version__",
    "decode",
    "encode",
    "get_client_config",
    "load_client_config_from_env",
    "parse_notification_request",
    "wrap",
]
