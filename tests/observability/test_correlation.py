"""Testes para riskified_sdk.observability."""

from __future__ import annotations

import uuid

from riskified_sdk.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_and_reset() -> None:
    token = set_correlation_id("abc")
    assert get_correlation_id() == "abc"

    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_uuid() -> None:
    token = set_correlation_id()
    try:
        uuid.UUID(get_correlation_id())
    finally:
        reset_correlation_id(token)


def test_generate_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()
