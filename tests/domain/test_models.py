"""Testes para os modelos de domínio."""

from __future__ import annotations

from riskified_sdk.domain import (
    CheckoutOrder,
    Notification,
    Order,
    Response,
    ResponseError,
)


class TestOrderModels:
    """Construção permissiva dos pedidos."""

    def test_all_fields_optional(self) -> None:
        order = Order()

        assert order.id is None
        assert order.line_items is None

    def test_numeric_and_string_ids(self) -> None:
        assert Order(id=10).id == 10
        assert Order(id="10").id == "10"

    def test_unknown_fields_ignored(self) -> None:
        order = CheckoutOrder.model_validate({"id": "1", "campo_desconhecido": True})

        assert order.model_dump(exclude_none=True) == {"id": "1"}

    def test_required_fields_metadata(self) -> None:
        assert Order.required_fields == ("id", "email", "currency", "total_price", "line_items")
        assert CheckoutOrder.required_fields == ()


class TestResponse:
    """Testes para Response."""

    def test_error_message(self) -> None:
        response = Response(error=ResponseError(message="bad field"))

        assert response.error_message == "bad field"

    def test_error_message_absent(self) -> None:
        assert Response().error_message is None

    def test_error_code_and_field_codes_decoded(self) -> None:
        response = Response.model_validate(
            {
                "error": {
                    "message": "bad",
                    "code": 422,
                    "fields": {"email": "invalid_format", "id": ["missing"]},
                }
            }
        )

        assert response.error is not None
        assert response.error.code == "422"
        assert response.error_field_codes == {"email": ["invalid_format"], "id": ["missing"]}

    def test_error_field_codes_absent(self) -> None:
        assert Response().error_field_codes == {}
        assert Response(error=ResponseError(message="x")).error_field_codes == {}

    def test_field_codes_by_attribute_name(self) -> None:
        error = ResponseError(field_codes={"email": ["invalid_format"]})

        assert error.field_codes == {"email": ["invalid_format"]}


class TestNotification:
    """Testes para Notification."""

    def test_convenience_properties(self) -> None:
        notification = Notification.model_validate(
            {
                "order": {
                    "id": 1,
                    "status": "declined",
                    "old_status": "submitted",
                    "description": "fraude",
                    "custom": {"app_dom_id": 77},
                }
            }
        )

        assert notification.id == 1
        assert notification.status == "declined"
        assert notification.old_status == "submitted"
        assert notification.description == "fraude"
        assert notification.app_dom_id == 77
