"""Testes para riskified_sdk.config.settings."""

from __future__ import annotations

import pytest

from riskified_sdk.config.settings import (
    PRODUCTION_BASE_URL,
    PRODUCTION_SYNC_ANALYZE_BASE_URL,
    SANDBOX_BASE_URL,
    ClientConfig,
    Environment,
    ProxySettings,
    get_client_config,
    load_client_config_from_env,
    parse_environment,
)
from riskified_sdk.validators import ValidationMode

ENV_VARS = (
    "RISKIFIED_SHOP_URL",
    "RISKIFIED_AUTH_KEY",
    "RISKIFIED_ENVIRONMENT",
    "RISKIFIED_VALIDATION",
    "RISKIFIED_DEBUG_HOST",
    "RISKIFIED_CONNECT_TIMEOUT_SECONDS",
    "RISKIFIED_REQUEST_TIMEOUT_SECONDS",
    "RISKIFIED_PROXY_HOST",
    "RISKIFIED_PROXY_PORT",
    "RISKIFIED_PROXY_USERNAME",
    "RISKIFIED_PROXY_PASSWORD",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_client_config.cache_clear()


class TestClientConfig:
    """Testes para ClientConfig."""

    def test_default_values(self) -> None:
        config = ClientConfig(shop_url="loja.com", auth_key="secret")

        assert config.environment is Environment.SANDBOX
        assert config.validation is ValidationMode.ALL
        assert config.connect_timeout_seconds == 5.0
        assert config.request_timeout_seconds == 10.0
        assert config.proxy is None
        assert config.validate() == []

    def test_immutable(self) -> None:
        config = ClientConfig(shop_url="loja.com", auth_key="secret")

        with pytest.raises(AttributeError):
            config.auth_key = "outra"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("environment", "base", "sync_base"),
        [
            (Environment.SANDBOX, SANDBOX_BASE_URL, SANDBOX_BASE_URL),
            (Environment.PRODUCTION, PRODUCTION_BASE_URL, PRODUCTION_SYNC_ANALYZE_BASE_URL),
            (Environment.DEBUG, "http://localhost:3000", "http://localhost:3000"),
        ],
    )
    def test_base_urls(self, environment: Environment, base: str, sync_base: str) -> None:
        config = ClientConfig(shop_url="loja.com", auth_key="secret", environment=environment)

        assert config.base_url == base
        assert config.sync_analyze_base_url == sync_base

    def test_string_environment_is_normalized(self) -> None:
        config = ClientConfig(shop_url="loja.com", auth_key="secret", environment="production")

        assert config.environment is Environment.PRODUCTION
        assert config.base_url == PRODUCTION_BASE_URL
        assert config.sync_analyze_base_url == PRODUCTION_SYNC_ANALYZE_BASE_URL

    def test_string_validation_is_normalized(self) -> None:
        config = ClientConfig(shop_url="loja.com", auth_key="secret", validation="none")

        assert config.validation is ValidationMode.NONE

    @pytest.mark.parametrize(
        ("field", "value"), [("environment", "staging"), ("validation", "STRICT")]
    )
    def test_unknown_string_raises(self, field: str, value: str) -> None:
        with pytest.raises(ValueError):
            ClientConfig(shop_url="loja.com", auth_key="secret", **{field: value})

    def test_validate_reports_missing_values(self) -> None:
        errors = ClientConfig(shop_url="", auth_key="").validate()

        assert "RISKIFIED_SHOP_URL não configurado" in errors
        assert "RISKIFIED_AUTH_KEY não configurado" in errors

    def test_validate_timeouts(self) -> None:
        config = ClientConfig(
            shop_url="loja.com",
            auth_key="secret",
            connect_timeout_seconds=0,
            request_timeout_seconds=-1,
        )

        assert len(config.validate()) == 2

    def test_validate_debug_host_scheme(self) -> None:
        config = ClientConfig(
            shop_url="loja.com",
            auth_key="secret",
            environment=Environment.DEBUG,
            debug_host="localhost:3000",
        )

        assert config.validate() == ["RISKIFIED_DEBUG_HOST deve começar com http:// ou https://"]


class TestProxySettings:
    """Testes para ProxySettings."""

    def test_url(self) -> None:
        assert ProxySettings(host="proxy.local", port=3128).url == "http://proxy.local:3128"

    def test_valid(self) -> None:
        proxy = ProxySettings(host="proxy.local", port=3128, username="u", password="p")

        assert proxy.validate() == []
        assert proxy.has_credentials is True

    def test_password_without_username(self) -> None:
        errors = ProxySettings(host="proxy.local", port=3128, password="p").validate()

        assert errors == ["RISKIFIED_PROXY_USERNAME é obrigatório quando há senha"]

    def test_username_with_colon(self) -> None:
        errors = ProxySettings(host="proxy.local", port=3128, username="a:b").validate()

        assert errors == ["RISKIFIED_PROXY_USERNAME não pode conter ':'"]


class TestParseEnvironment:
    """Testes para parse_environment."""

    def test_case_insensitive(self) -> None:
        assert parse_environment("production") is Environment.PRODUCTION

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Ambiente inválido"):
            parse_environment("staging")


class TestLoadFromEnv:
    """Testes do carregamento via variáveis de ambiente."""

    def test_defaults(self) -> None:
        config = load_client_config_from_env()

        assert config.shop_url == ""
        assert config.environment is Environment.SANDBOX
        assert config.proxy is None

    def test_custom_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RISKIFIED_SHOP_URL", "loja.com")
        monkeypatch.setenv("RISKIFIED_AUTH_KEY", "secret")
        monkeypatch.setenv("RISKIFIED_ENVIRONMENT", "production")
        monkeypatch.setenv("RISKIFIED_VALIDATION", "ignore_missing")
        monkeypatch.setenv("RISKIFIED_REQUEST_TIMEOUT_SECONDS", "30")
        monkeypatch.setenv("RISKIFIED_PROXY_HOST", "proxy.local")
        monkeypatch.setenv("RISKIFIED_PROXY_PORT", "3128")
        monkeypatch.setenv("RISKIFIED_PROXY_USERNAME", "user")
        monkeypatch.setenv("RISKIFIED_PROXY_PASSWORD", "pass")

        config = load_client_config_from_env()

        assert config.shop_url == "loja.com"
        assert config.environment is Environment.PRODUCTION
        assert config.validation is ValidationMode.IGNORE_MISSING
        assert config.request_timeout_seconds == 30.0
        assert config.proxy == ProxySettings(
            host="proxy.local", port=3128, username="user", password="pass"
        )
        assert config.validate() == []

    def test_get_client_config_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RISKIFIED_SHOP_URL", "loja.com")

        first = get_client_config()
        monkeypatch.setenv("RISKIFIED_SHOP_URL", "outra.com")

        assert get_client_config() is first
        assert first.shop_url == "loja.com"
