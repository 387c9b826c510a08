"""Cliente da API Riskified.

Fluxo de toda operação:
1. Resolve o modo de validação efetivo (tabela OPERATIONS)
2. Valida o payload (falha rápida, sem IO)
3. Envolve no envelope do wire e serializa em JSON canônico
4. Assina o corpo (HMAC-SHA256) e monta headers
5. Um único POST síncrono
6. Classifica o status e decodifica Response ou levanta erro tipado

Não há retry automático: HttpResponseError.is_retryable sinaliza o 504.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from riskified_sdk._version import __version__
from riskified_sdk.connectors.api_errors import build_http_error
from riskified_sdk.connectors.api_logging import log_api_error, log_request, log_success
from riskified_sdk.connectors.codec import (
    CHECKOUT_ENVELOPE_KEY,
    ORDER_ENVELOPE_KEY,
    decode_checkout_response,
    decode_response,
    encode,
    wrap,
)
from riskified_sdk.connectors.http_base import HttpClient, HttpClientConfig
from riskified_sdk.connectors.signature import SIGNATURE_HEADER, SignatureHandler
from riskified_sdk.utils.errors import ConfigurationError
from riskified_sdk.validators import ValidationMode, parse_validation_mode, validate_or_raise

if TYPE_CHECKING:
    import httpx

    from riskified_sdk.config.settings import ClientConfig
    from riskified_sdk.domain import (
        ArrayOrders,
        CancelOrder,
        ChargebackOrder,
        CheckoutDeniedOrder,
        CheckoutOrder,
        DecisionOrder,
        FulfillmentOrder,
        Order,
        RefundOrder,
        Response,
        WireModel,
    )

logger: logging.Logger = logging.getLogger(__name__)

ACCEPT_HEADER_VALUE = "application/vnd.riskified.com; version=2"
CONTENT_TYPE_HEADER_VALUE = "application/json; charset=UTF-8"
SHOP_DOMAIN_HEADER = "X_RISKIFIED_SHOP_DOMAIN"
USER_AGENT = f"riskified_python_sdk/{__version__}"

_STRICTNESS = {
    ValidationMode.NONE: 0,
    ValidationMode.IGNORE_MISSING: 1,
    ValidationMode.ALL: 2,
}


@dataclass(frozen=True, slots=True)
class Operation:
    """Definição de uma operação da API.

    Attributes:
        name: Nome da operação
        path: Caminho sob a URL base
        envelope_key: Chave do envelope (None = payload sem envelope)
        sync_analyze: Usa a URL base de análise síncrona
        default_mode_cap: Teto aplicado ao modo padrão do cliente
    """

    name: str
    path: str
    envelope_key: str | None = ORDER_ENVELOPE_KEY
    sync_analyze: bool = False
    default_mode_cap: ValidationMode | None = None

    @property
    def is_checkout(self) -> bool:
        return self.envelope_key == CHECKOUT_ENVELOPE_KEY


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        # Checkout e update aceitam envio parcial
        Operation(
            "checkout_order",
            "/api/checkout_create",
            envelope_key=CHECKOUT_ENVELOPE_KEY,
            default_mode_cap=ValidationMode.IGNORE_MISSING,
        ),
        Operation(
            "checkout_denied_order",
            "/api/checkout_denied",
            envelope_key=CHECKOUT_ENVELOPE_KEY,
        ),
        Operation("create_order", "/api/create"),
        Operation("submit_order", "/api/submit"),
        Operation(
            "update_order",
            "/api/update",
            default_mode_cap=ValidationMode.IGNORE_MISSING,
        ),
        Operation("cancel_order", "/api/cancel"),
        Operation("refund_order", "/api/refund"),
        Operation("fulfill_order", "/api/fulfill"),
        Operation("decision_order", "/api/decision"),
        Operation("analyze_order", "/api/decide", sync_analyze=True),
        Operation("chargeback_order", "/api/chargeback"),
        Operation("historical_orders", "/api/historical", envelope_key=None),
    )
}


def resolve_validation_mode(
    operation: Operation,
    default: ValidationMode | str,
    override: ValidationMode | str | None = None,
) -> ValidationMode:
    """Resolve o modo de validação efetivo de uma chamada.

    Um modo explícito na chamada é usado como veio. O modo padrão do
    cliente é limitado pelo teto da operação (NONE continua NONE).
    """
    if override is not None:
        return parse_validation_mode(override)

    default = parse_validation_mode(default)
    cap = operation.default_mode_cap
    if cap is not None and _STRICTNESS[default] > _STRICTNESS[cap]:
        return cap
    return default


class RiskifiedClient:
    """Cliente síncrono para a API de revisão de fraude da Riskified.

    Uso:
        config = ClientConfig(shop_url="loja.com", auth_key="...")
        client = RiskifiedClient(config)
        response = client.create_order(order)
        print(response.order.status)

    Seguro para uso concorrente: a configuração é imutável e cada chamada
    monta sua própria requisição.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Inicializa cliente.

        Args:
            config: Configuração imutável do cliente
            transport: Transport httpx alternativo (ex: httpx.MockTransport)

        Raises:
            ConfigurationError: Se a configuração for inválida
        """
        errors = config.validate()
        if errors:
            logger.error("riskified_client_config_invalid", extra={"errors": errors})
            raise ConfigurationError("; ".join(errors))

        self._config = config
        self._signer = SignatureHandler(config.auth_key)
        self._http = HttpClient(
            HttpClientConfig(
                connect_timeout_seconds=config.connect_timeout_seconds,
                request_timeout_seconds=config.request_timeout_seconds,
                proxy=config.proxy,
            ),
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def checkout_order(
        self, order: CheckoutOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("checkout_order", order, validation)

    def checkout_denied_order(
        self, order: CheckoutDeniedOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("checkout_denied_order", order, validation)

    def create_order(self, order: Order, validation: ValidationMode | None = None) -> Response:
        return self._send("create_order", order, validation)

    def submit_order(self, order: Order, validation: ValidationMode | None = None) -> Response:
        return self._send("submit_order", order, validation)

    def update_order(self, order: Order, validation: ValidationMode | None = None) -> Response:
        return self._send("update_order", order, validation)

    def cancel_order(
        self, order: CancelOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("cancel_order", order, validation)

    def refund_order(
        self, order: RefundOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("refund_order", order, validation)

    def fulfill_order(
        self, order: FulfillmentOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("fulfill_order", order, validation)

    def decision_order(
        self, order: DecisionOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("decision_order", order, validation)

    def analyze_order(self, order: Order, validation: ValidationMode | None = None) -> Response:
        """Análise síncrona: devolve a decisão na própria resposta."""
        return self._send("analyze_order", order, validation)

    def chargeback_order(
        self, order: ChargebackOrder, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("chargeback_order", order, validation)

    def historical_orders(
        self, orders: ArrayOrders, validation: ValidationMode | None = None
    ) -> Response:
        return self._send("historical_orders", orders, validation)

    def url_for(self, operation: Operation) -> str:
        base = self._config.sync_analyze_base_url if operation.sync_analyze else self._config.base_url
        return f"{base}{operation.path}"

    def build_headers(self, body: bytes) -> dict[str, str]:
        """Monta headers do wire, incluindo a assinatura do corpo."""
        return {
            "Accept": ACCEPT_HEADER_VALUE,
            "Content-Type": CONTENT_TYPE_HEADER_VALUE,
            "User-Agent": USER_AGENT,
            SHOP_DOMAIN_HEADER: self._config.shop_url,
            SIGNATURE_HEADER: self._signer.sign(body),
        }

    def _send(
        self,
        operation_name: str,
        payload: WireModel,
        validation: ValidationMode | None,
    ) -> Response:
        operation = OPERATIONS[operation_name]
        mode = resolve_validation_mode(operation, self._config.validation, validation)
        validate_or_raise(payload, mode)

        body = encode(wrap(operation.envelope_key, payload))
        url = self.url_for(operation)
        log_request(operation.name, url, mode.value, len(body))

        response = self._http.post(url, content=body, headers=self.build_headers(body))
        return self._process_response(operation, url, response)

    def _process_response(
        self,
        operation: Operation,
        url: str,
        response: httpx.Response,
    ) -> Response:
        if response.status_code == 200:
            decoder = decode_checkout_response if operation.is_checkout else decode_response
            result = decoder(response.content)
            log_success(operation.name, url, response.status_code)
            return result

        error = build_http_error(response.status_code, response.content)
        log_api_error(error, operation.name, url)
        raise error
