"""Cliente HTTP síncrono usado pelo RiskifiedClient.

Cada chamada abre seu próprio httpx.Client (um round trip bloqueante por
operação). O único estado compartilhado é o descritor de proxy, criado de
forma preguiçosa uma única vez e depois apenas lido.
"""

from __future__ import annotations

import base64
import logging
import threading
from dataclasses import dataclass, field

import httpx

from riskified_sdk.config.settings import ProxySettings  # noqa: TC001 - usado em runtime
from riskified_sdk.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    connect_timeout_seconds: float = 5.0
    request_timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    proxy: ProxySettings | None = None
    verify_ssl: bool = True

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.request_timeout_seconds,
            connect=self.connect_timeout_seconds,
        )


class HttpClient:
    """Cliente HTTP simples: um POST por chamada, sem retries."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._proxy: httpx.Proxy | None = None
        self._proxy_lock = threading.Lock()

    def post(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST e devolve a resposta, qualquer que seja o status.

        Raises:
            httpx.TransportError: Falhas de conexão, DNS ou timeout (propagadas)
            ConfigurationError: Proxy configurado com dados inválidos
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            with httpx.Client(
                timeout=self._config.timeout,
                proxy=self.get_proxy(),
                transport=self._transport,
                verify=self._config.verify_ssl,
            ) as client:
                return client.post(url, content=content, headers=merged_headers)
        except httpx.TransportError as exc:
            logger.warning(
                "riskified_transport_error",
                extra={"url": url, "error_type": type(exc).__name__},
            )
            raise

    def get_proxy(self) -> httpx.Proxy | None:
        """Retorna o proxy com autenticação básica preemptiva.

        Construído no primeiro uso, uma única vez, mesmo com chamadas
        concorrentes; depois disso é somente leitura.
        """
        settings = self._config.proxy
        if settings is None:
            return None

        if self._proxy is None:
            with self._proxy_lock:
                if self._proxy is None:
                    self._proxy = build_proxy(settings)
        return self._proxy


def basic_proxy_authorization(username: str, password: str) -> str:
    """Valor do header Proxy-Authorization (Basic)."""
    credentials = f"{username}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def build_proxy(settings: ProxySettings) -> httpx.Proxy:
    """Monta o descritor de proxy com header Proxy-Authorization preemptivo.

    O header vai em toda requisição, sem esperar o desafio 407 do proxy.

    Raises:
        ConfigurationError: Se os dados do proxy forem inválidos
    """
    errors = settings.validate()
    if errors:
        logger.error(
            "riskified_proxy_config_invalid",
            extra={"proxy_host": settings.host, "errors": errors},
        )
        raise ConfigurationError("; ".join(errors))

    if not settings.has_credentials:
        return httpx.Proxy(settings.url)

    authorization = basic_proxy_authorization(settings.username or "", settings.password or "")
    return httpx.Proxy(settings.url, headers={"Proxy-Authorization": authorization})
