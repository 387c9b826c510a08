"""Settings do SDK Riskified.

Re-exporta o registro de configuração do cliente e seus loaders.
"""

from __future__ import annotations

from riskified_sdk.config.settings.riskified import (
    DEFAULT_DEBUG_HOST,
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

__all__ = [
    "DEFAULT_DEBUG_HOST",
    "PRODUCTION_BASE_URL",
    "PRODUCTION_SYNC_ANALYZE_BASE_URL",
    "SANDBOX_BASE_URL",
    "ClientConfig",
    "Environment",
    "ProxySettings",
    "get_client_config",
    "load_client_config_from_env",
    "parse_environment",
]
