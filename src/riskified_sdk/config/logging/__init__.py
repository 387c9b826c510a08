"""Logging estruturado do SDK.

Uso:
    from riskified_sdk.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_loja")
    logger = get_logger(__name__)
"""

from riskified_sdk.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    SDK_LOGGER_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
    set_sdk_log_level,
)
from riskified_sdk.config.logging.filters import (
    MASK,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from riskified_sdk.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "MASK",
    "REQUIRED_LOG_FIELDS",
    "SDK_LOGGER_NAME",
    "SENSITIVE_FIELDS",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "set_sdk_log_level",
]
