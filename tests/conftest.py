"""Configuração do pytest para o riskified-sdk."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from riskified_sdk.config.settings import ClientConfig  # noqa: E402
from riskified_sdk.domain import LineItem, Order  # noqa: E402

AUTH_KEY = "secret"
SHOP_URL = "loja.example.com"


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(shop_url=SHOP_URL, auth_key=AUTH_KEY)


@pytest.fixture
def complete_order() -> Order:
    """Pedido que passa na validação ALL."""
    return Order(
        id="1001",
        email="comprador@example.com",
        currency="USD",
        total_price=120.5,
        browser_ip="203.0.113.7",
        line_items=[LineItem(title="Camiseta", price=60.25, quantity=2)],
    )
