"""Regras de formato aplicadas a campos presentes.

Cada regra recebe o valor e retorna o motivo da falha, ou None se válido.
"""

from __future__ import annotations

import ipaddress
import math
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_COUNTRY_CODE_REGEX = re.compile(r"^[A-Za-z]{2}$")
_CURRENCY_REGEX = re.compile(r"^[A-Za-z]{3}$")


def check_email(value: Any) -> str | None:
    if not isinstance(value, str) or not _EMAIL_REGEX.match(value):
        return "invalid email address"
    return None


def check_country_code(value: Any) -> str | None:
    if not isinstance(value, str) or not _COUNTRY_CODE_REGEX.match(value):
        return "must be a two-letter country code"
    return None


def check_currency(value: Any) -> str | None:
    if not isinstance(value, str) or not _CURRENCY_REGEX.match(value):
        return "must be a three-letter currency code"
    return None


def check_amount(value: Any) -> str | None:
    # bool é subclasse de int
    if isinstance(value, bool) or not isinstance(value, int | float):
        return "must be a number"
    if not math.isfinite(value) or value < 0:
        return "must be a non-negative amount"
    return None


def check_ip(value: Any) -> str | None:
    if not isinstance(value, str):
        return "invalid ip address"
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return "invalid ip address"
    return None


def check_positive_int(value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return "must be a positive integer"
    return None


def check_non_empty(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return "must not be blank"
    return None


FORMAT_RULES: dict[str, Callable[[Any], str | None]] = {
    "email": check_email,
    "country_code": check_country_code,
    "currency": check_currency,
    "amount": check_amount,
    "ip": check_ip,
    "positive_int": check_positive_int,
    "non_empty": check_non_empty,
}
