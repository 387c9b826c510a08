"""Helpers de logging para a API Riskified (sem auth key nem payloads)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import HttpResponseError

logger = logging.getLogger(__name__)


def log_request(operation: str, url: str, mode: str, body_size: int) -> None:
    logger.debug(
        "riskified_request_sent",
        extra={
            "operation": operation,
            "url": url,
            "validation": mode,
            "body_size": body_size,
        },
    )


def log_api_error(error: HttpResponseError, operation: str, url: str) -> None:
    """Loga resposta de erro sem expor dados sensíveis."""
    logger.warning(
        "riskified_response_error",
        extra={
            "operation": operation,
            "url": url,
            "status_code": error.status_code,
            "response_status": error.response_status,
            "is_retryable": error.is_retryable,
        },
    )


def log_success(operation: str, url: str, status_code: int) -> None:
    logger.debug(
        "riskified_response_success",
        extra={
            "operation": operation,
            "url": url,
            "status_code": status_code,
        },
    )
