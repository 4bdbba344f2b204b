"""
Unit tests for order service DTOs.
"""
import pytest
from pydantic import ValidationError
from order_client.models.dto.order_dto import OrderListResponse, OrderResponse, ProcessingStatusResponse


class TestOrderDTO:
    """Test order DTO models."""

    def test_order_list_response_from_wire_payload(self, orders_25):
        """Test the camelCase listing payload is parsed."""
        response = OrderListResponse.model_validate({
            "orders": orders_25[:10],
            "page": 1,
            "totalNumberOfPages": 3
        })

        assert len(response.orders) == 10
        assert isinstance(response.orders[0], OrderResponse)
        assert response.orders[0].product_name == "Product 1"
        assert response.total_number_of_pages == 3

    def test_order_list_response_by_field_name(self):
        """Test the snake_case field name is accepted too."""
        response = OrderListResponse(orders=[], page=1, total_number_of_pages=1)

        assert response.total_number_of_pages == 1

    def test_order_list_response_rejects_page_zero(self):
        """Test the service cannot report page 0."""
        with pytest.raises(ValidationError):
            OrderListResponse.model_validate({"orders": [], "page": 0, "totalNumberOfPages": 1})

    def test_order_requires_all_columns(self, orders_25):
        """Test an order missing a column is rejected."""
        order = dict(orders_25[0])
        del order["category"]

        with pytest.raises(ValidationError):
            OrderResponse.model_validate(order)

    def test_processing_status_defaults(self):
        """Test counters default to zero while processing has not started."""
        response = ProcessingStatusResponse.model_validate({"status": "PENDING"})

        assert response.status == "PENDING"
        assert response.total_orders == 0
        assert response.duplicate_orders_count == 0
        assert response.validation_failed_orders_count == 0
        assert response.successfully_processed_count == 0

    def test_processing_status_unknown_value_kept(self):
        """Test status values outside the known set are kept verbatim."""
        response = ProcessingStatusResponse.model_validate({"status": "VALIDATING", "totalOrders": 4})

        assert response.status == "VALIDATING"
        assert response.total_orders == 4
