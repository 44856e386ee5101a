from typing import Any, Dict
from sqlalchemy import inspect
from foodhub.models.order import Order
from foodhub.models.tracking import OrderTracking
from foodhub.schemas.order import OrderOut, TrackingOut
from foodhub.schemas.application import ApplicationOut
from foodhub.core import order_states

# Workflow and bookkeeping columns shared by every application table
APPLICATION_META_FIELDS = {"id", "status", "admin_notes", "reviewed_at", "reviewed_by", "created_at", "updated_at"}


def build_order_response(order: Order) -> OrderOut:
    return OrderOut(
        id=order.id,
        order_number=order.order_number,
        user_id=order.user_id,
        vendor_id=order.vendor_id,
        status=order.status,
        status_label=order.status_label,
        status_color=order.status_color,
        next_possible_statuses=order.next_possible_statuses,
        can_be_cancelled=order.can_be_cancelled(),
        subtotal=order.subtotal,
        delivery_fee=order.delivery_fee,
        tax=order.tax,
        total=order.total,
        delivery_address=order.delivery_address,
        delivery_city=order.delivery_city,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        payment_method=order.payment_method,
        payment_status=order.payment_status,
        estimated_delivery_time=order.estimated_delivery_time,
        delivered_at=order.delivered_at,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def build_tracking_response(tracking: OrderTracking) -> TrackingOut:
    return TrackingOut(
        id=tracking.id,
        order_id=tracking.order_id,
        status=tracking.status,
        status_label=order_states.status_label(tracking.status),
        notes=tracking.notes,
        latitude=tracking.latitude,
        longitude=tracking.longitude,
        location_address=tracking.location_address,
        estimated_arrival=tracking.estimated_arrival,
        updated_by=tracking.updated_by,
        created_at=tracking.created_at,
    )


def application_payload(application) -> Dict[str, Any]:
    mapper = inspect(type(application))
    return {
        column.key: getattr(application, column.key)
        for column in mapper.column_attrs
        if column.key not in APPLICATION_META_FIELDS
    }


def build_application_response(application) -> ApplicationOut:
    return ApplicationOut(
        id=application.id,
        kind=application.kind,
        status=application.status,
        admin_notes=application.admin_notes,
        reviewed_at=application.reviewed_at,
        reviewed_by=application.reviewed_by,
        created_at=application.created_at,
        updated_at=application.updated_at,
        payload=application_payload(application),
    )
