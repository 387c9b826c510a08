"""Testes para o cliente HTTP base e o descritor de proxy."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from riskified_sdk.config.settings import ProxySettings
from riskified_sdk.connectors import http_base
from riskified_sdk.connectors.http_base import (
    HttpClient,
    HttpClientConfig,
    basic_proxy_authorization,
    build_proxy,
)
from riskified_sdk.utils.errors import ConfigurationError


class TestHttpClientConfig:
    """Testes para HttpClientConfig."""

    def test_timeout_split(self) -> None:
        config = HttpClientConfig(connect_timeout_seconds=2.0, request_timeout_seconds=7.0)

        assert config.timeout.connect == 2.0
        assert config.timeout.read == 7.0
        assert config.timeout.write == 7.0


class TestHttpClientPost:
    """Testes para HttpClient.post."""

    def test_posts_body_and_headers(self) -> None:
        captured: dict[str, httpx.Request] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, content=b"{}")

        client = HttpClient(
            HttpClientConfig(default_headers={"X-Default": "1"}),
            transport=httpx.MockTransport(handler),
        )
        response = client.post("https://example.com/api", content=b"abc", headers={"X-Call": "2"})

        request = captured["request"]
        assert response.status_code == 200
        assert request.method == "POST"
        assert request.content == b"abc"
        assert request.headers["X-Default"] == "1"
        assert request.headers["X-Call"] == "2"

    def test_non_200_is_returned_not_raised(self) -> None:
        client = HttpClient(transport=httpx.MockTransport(lambda _: httpx.Response(503)))

        assert client.post("https://example.com", content=b"").status_code == 503

    def test_transport_error_propagates_unchanged(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpClient(transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.ConnectError, match="connection refused"):
            client.post("https://example.com", content=b"")

    def test_timeout_propagates_as_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = HttpClient(transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.TransportError):
            client.post("https://example.com", content=b"")


class TestProxy:
    """Testes do proxy com autenticação preemptiva."""

    def test_no_proxy_configured(self) -> None:
        assert HttpClient().get_proxy() is None

    def test_proxy_without_credentials(self) -> None:
        proxy = build_proxy(ProxySettings(host="proxy.local", port=3128))

        assert proxy.url.host == "proxy.local"
        assert proxy.url.port == 3128
        assert "Proxy-Authorization" not in proxy.headers

    def test_proxy_with_credentials_sends_preemptive_header(self) -> None:
        proxy = build_proxy(
            ProxySettings(host="proxy.local", port=3128, username="user", password="pass")
        )

        assert proxy.headers["Proxy-Authorization"] == "Basic dXNlcjpwYXNz"

    def test_username_without_password(self) -> None:
        assert basic_proxy_authorization("user", "") == "Basic dXNlcjo="

    def test_invalid_proxy_is_hard_failure(self) -> None:
        with pytest.raises(ConfigurationError, match="RISKIFIED_PROXY_PORT"):
            build_proxy(ProxySettings(host="proxy.local", port=0))

    def test_invalid_proxy_fails_on_first_use(self) -> None:
        client = HttpClient(
            HttpClientConfig(proxy=ProxySettings(host="http://proxy.local", port=3128))
        )

        with pytest.raises(ConfigurationError, match="RISKIFIED_PROXY_HOST"):
            client.get_proxy()

    def test_proxy_built_once(self) -> None:
        client = HttpClient(HttpClientConfig(proxy=ProxySettings(host="proxy.local", port=3128)))

        first = client.get_proxy()
        second = client.get_proxy()

        assert first is not None
        assert first is second

    def test_concurrent_first_use_builds_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = 0
        calls_lock = threading.Lock()
        original = http_base.build_proxy

        def slow_build(settings: ProxySettings) -> httpx.Proxy:
            nonlocal calls
            with calls_lock:
                calls += 1
            time.sleep(0.05)
            return original(settings)

        monkeypatch.setattr(http_base, "build_proxy", slow_build)
        client = HttpClient(HttpClientConfig(proxy=ProxySettings(host="proxy.local", port=3128)))

        with ThreadPoolExecutor(max_workers=8) as executor:
            proxies = list(executor.map(lambda _: client.get_proxy(), range(8)))

        assert calls == 1
        assert all(proxy is proxies[0] for proxy in proxies)
