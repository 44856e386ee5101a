import pytest
from datetime import datetime, timezone
from decimal import Decimal

from foodhub.core.enums import ApplicationKind, ApplicationStatus, OrderStatus
from foodhub.core.response_builders import (
    application_payload,
    build_application_response,
    build_order_response,
    build_tracking_response,
)
from foodhub.models.application import ReviewApplication, VendorApplication
from foodhub.models.order import Order
from foodhub.models.tracking import OrderTracking


NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def make_order(status):
    return Order(
        id=12,
        user_id=3,
        vendor_id=4,
        order_number="FH-000012",
        status=status,
        subtotal=Decimal("8000.00"),
        delivery_fee=Decimal("500.00"),
        tax=Decimal("0.00"),
        total=Decimal("8500.00"),
        delivery_address="Rue des Jardins 12",
        delivery_city="Abidjan",
        customer_name="Awa",
        customer_phone="+225 07 11 22 33",
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.mark.unit
class TestOrderResponse:

    def test_derived_fields(self):
        response = build_order_response(make_order(OrderStatus.PREPARING))

        assert response.status == OrderStatus.PREPARING
        assert response.status_label == "En préparation"
        assert response.status_color == "orange"
        assert response.next_possible_statuses == [OrderStatus.READY, OrderStatus.CANCELLED]
        assert response.can_be_cancelled is True
        assert response.total == Decimal("8500.00")

    def test_terminal_order(self):
        response = build_order_response(make_order(OrderStatus.REFUNDED))

        assert response.next_possible_statuses == []
        assert response.can_be_cancelled is False

    def test_serializes_status_as_value(self):
        data = build_order_response(make_order(OrderStatus.OUT_FOR_DELIVERY)).model_dump(mode="json")

        assert data["status"] == "out_for_delivery"
        assert data["next_possible_statuses"] == ["delivered", "cancelled"]


@pytest.mark.unit
class TestTrackingResponse:

    def test_label_from_status(self):
        tracking = OrderTracking(
            id=1,
            order_id=12,
            status=OrderStatus.DELIVERED,
            notes="Remis au client",
            updated_by=5,
            created_at=NOW,
        )

        response = build_tracking_response(tracking)

        assert response.status_label == "Livrée"
        assert response.notes == "Remis au client"
        assert response.latitude is None


@pytest.mark.unit
class TestApplicationResponse:

    def test_payload_excludes_workflow_columns(self):
        application = VendorApplication(
            id=9,
            user_id=3,
            restaurant_name="Chez Koffi",
            city="Abidjan",
            status=ApplicationStatus.PENDING,
            created_at=NOW,
        )

        payload = application_payload(application)

        assert payload["restaurant_name"] == "Chez Koffi"
        assert payload["user_id"] == 3
        for field in ("id", "status", "admin_notes", "reviewed_at", "reviewed_by", "created_at", "updated_at"):
            assert field not in payload

    def test_application_response(self):
        application = ReviewApplication(
            id=2,
            user_id=3,
            dish_id=7,
            order_id=12,
            rating=5,
            comment="Parfait",
            status=ApplicationStatus.REJECTED,
            admin_notes="Langage inapproprié",
            reviewed_by=1,
            reviewed_at=NOW,
            created_at=NOW,
        )

        response = build_application_response(application)

        assert response.kind == ApplicationKind.REVIEW
        assert response.status == ApplicationStatus.REJECTED
        assert response.admin_notes == "Langage inapproprié"
        assert response.payload["rating"] == 5
        assert response.payload["comment"] == "Parfait"
