"""Settings do cliente Riskified.

Um único registro imutável (ClientConfig) carrega tudo que o cliente
precisa: loja, auth key, ambiente, modo de validação, timeouts e proxy.
O carregamento via variáveis de ambiente é apenas conveniência.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from riskified_sdk.validators import ValidationMode, parse_validation_mode

SANDBOX_BASE_URL: str = "https://sandbox.riskified.com"
PRODUCTION_BASE_URL: str = "https://wh.riskified.com"
PRODUCTION_SYNC_ANALYZE_BASE_URL: str = "https://wh-sync.riskified.com"
DEFAULT_DEBUG_HOST: str = "http://localhost:3000"


class Environment(str, Enum):
    """Ambiente de destino das requisições."""

    SANDBOX = "SANDBOX"
    DEBUG = "DEBUG"
    PRODUCTION = "PRODUCTION"


def parse_environment(value: str | Environment) -> Environment:
    """Converte string (case-insensitive) em Environment."""
    if isinstance(value, Environment):
        return value
    try:
        return Environment(value.strip().upper())
    except ValueError as exc:
        valid = ", ".join(env.value for env in Environment)
        raise ValueError(f"Ambiente inválido: {value}. Válidos: {valid}") from exc


@dataclass(frozen=True)
class ProxySettings:
    """Proxy HTTP com autenticação básica opcional.

    Attributes:
        host: Host do proxy (sem esquema)
        port: Porta do proxy
        username: Usuário para autenticação básica
        password: Senha para autenticação básica
    """

    host: str
    port: int
    username: str | None = None
    password: str | None = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def has_credentials(self) -> bool:
        return bool(self.username)

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.host or "://" in self.host:
            errors.append("RISKIFIED_PROXY_HOST deve ser um host sem esquema")

        if not 0 < self.port < 65536:
            errors.append("RISKIFIED_PROXY_PORT deve estar entre 1 e 65535")

        if self.password and not self.username:
            errors.append("RISKIFIED_PROXY_USERNAME é obrigatório quando há senha")

        if self.username and ":" in self.username:
            errors.append("RISKIFIED_PROXY_USERNAME não pode conter ':'")

        return errors


@dataclass(frozen=True)
class ClientConfig:
    """Configuração do RiskifiedClient.

    Attributes:
        shop_url: Domínio da loja (identifica a conta)
        auth_key: Secret compartilhado usado no HMAC
        environment: SANDBOX, DEBUG ou PRODUCTION
        validation: Modo de validação padrão das operações
        connect_timeout_seconds: Timeout de conexão
        request_timeout_seconds: Timeout total da requisição
        debug_host: URL base usada no ambiente DEBUG
        proxy: Proxy opcional
    """

    shop_url: str
    auth_key: str
    environment: Environment = Environment.SANDBOX
    validation: ValidationMode = ValidationMode.ALL
    connect_timeout_seconds: float = 5.0
    request_timeout_seconds: float = 10.0
    debug_host: str = DEFAULT_DEBUG_HOST
    proxy: ProxySettings | None = None

    def __post_init__(self) -> None:
        """Aceita strings (ex: "production") para ambiente e modo de validação.

        Raises:
            ValueError: Se o ambiente ou o modo não forem reconhecidos
        """
        object.__setattr__(self, "environment", parse_environment(self.environment))
        object.__setattr__(self, "validation", parse_validation_mode(self.validation))

    @property
    def base_url(self) -> str:
        """URL base da API principal."""
        if self.environment is Environment.PRODUCTION:
            return PRODUCTION_BASE_URL
        if self.environment is Environment.DEBUG:
            return self.debug_host.rstrip("/")
        return SANDBOX_BASE_URL

    @property
    def sync_analyze_base_url(self) -> str:
        """URL base do endpoint de análise síncrona."""
        if self.environment is Environment.PRODUCTION:
            return PRODUCTION_SYNC_ANALYZE_BASE_URL
        if self.environment is Environment.DEBUG:
            return self.debug_host.rstrip("/")
        return SANDBOX_BASE_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas do cliente.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.shop_url:
            errors.append("RISKIFIED_SHOP_URL não configurado")

        if not self.auth_key:
            errors.append("RISKIFIED_AUTH_KEY não configurado")

        if self.connect_timeout_seconds <= 0:
            errors.append("RISKIFIED_CONNECT_TIMEOUT_SECONDS deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("RISKIFIED_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.environment is Environment.DEBUG and not self.debug_host.startswith(
            ("http://", "https://")
        ):
            errors.append("RISKIFIED_DEBUG_HOST deve começar com http:// ou https://")

        if self.proxy is not None:
            errors.extend(self.proxy.validate())

        return errors


def _load_proxy_from_env() -> ProxySettings | None:
    host = os.getenv("RISKIFIED_PROXY_HOST", "")
    if not host:
        return None
    return ProxySettings(
        host=host,
        port=int(os.getenv("RISKIFIED_PROXY_PORT", "8080")),
        username=os.getenv("RISKIFIED_PROXY_USERNAME") or None,
        password=os.getenv("RISKIFIED_PROXY_PASSWORD") or None,
    )


def _load_from_env() -> ClientConfig:
    """Carrega ClientConfig a partir de variáveis de ambiente."""
    return ClientConfig(
        shop_url=os.getenv("RISKIFIED_SHOP_URL", ""),
        auth_key=os.getenv("RISKIFIED_AUTH_KEY", ""),
        environment=parse_environment(os.getenv("RISKIFIED_ENVIRONMENT", "SANDBOX")),
        validation=parse_validation_mode(os.getenv("RISKIFIED_VALIDATION", "ALL")),
        connect_timeout_seconds=float(os.getenv("RISKIFIED_CONNECT_TIMEOUT_SECONDS", "5")),
        request_timeout_seconds=float(os.getenv("RISKIFIED_REQUEST_TIMEOUT_SECONDS", "10")),
        debug_host=os.getenv("RISKIFIED_DEBUG_HOST", DEFAULT_DEBUG_HOST),
        proxy=_load_proxy_from_env(),
    )


def load_client_config_from_env() -> ClientConfig:
    """Carrega ClientConfig do ambiente (sem cache)."""
    return _load_from_env()


@lru_cache(maxsize=1)
def get_client_config() -> ClientConfig:
    """Retorna instância cacheada de ClientConfig.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
