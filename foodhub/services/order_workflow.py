"""Order lifecycle: validated status changes, tracking log and courier pings."""
import logging
from datetime import datetime
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from foodhub.core import order_states
from foodhub.core.enums import OrderStatus
from foodhub.core.exceptions import (
    InvalidTransition,
    OrderNotCancellable,
    OrderNotInDelivery,
    ResourceNotFound,
)
from foodhub.core.metrics import record_transition, track_db_operation
from foodhub.models.base import utcnow
from foodhub.models.order import Order
from foodhub.models.tracking import OrderTracking, DeliveryLocation
from foodhub.schemas.order import OrderStatusUpdate

logger = logging.getLogger(__name__)


async def get_order(db: AsyncSession, order_id: int) -> Order:
    res = await db.execute(select(Order).where(Order.id == order_id))
    order = res.scalars().first()
    if order is None:
        raise ResourceNotFound("Order", order_id)
    return order


async def list_orders(
    db: AsyncSession,
    status: Optional[Union[OrderStatus, str]] = None,
    vendor_id: Optional[int] = None,
    limit: int = 20,
    offset: int = 0,
) -> List[Order]:
    q = select(Order)

    if status:
        q = q.where(Order.status == OrderStatus(status))

    if vendor_id is not None:
        q = q.where(Order.vendor_id == vendor_id)

    q = q.order_by(Order.created_at.desc(), Order.id.desc()).limit(limit).offset(offset)
    res = await db.execute(q)
    return list(res.scalars().all())


@track_db_operation("update", "orders")
async def request_transition(
    db: AsyncSession,
    order: Order,
    target_status: Union[OrderStatus, str],
    actor_id: int,
    notes: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    location_address: Optional[str] = None,
    estimated_arrival: Optional[datetime] = None,
) -> OrderTracking:
    """Move ``order`` to ``target_status`` and append a tracking entry.

    Raises InvalidTransition, without writing anything, when the target is
    not one of the order's next possible statuses. The status change, the
    tracking row and the optional courier ping commit together.
    """
    order_id = order.id
    old_status = order.status
    allowed = order_states.next_possible_statuses(old_status)

    if not order_states.is_valid_transition(old_status, target_status):
        record_transition(old_status, target_status, "rejected")
        logger.warning(
            f"Rejected status change for order {order_id}: {old_status} -> {target_status} "
            f"(allowed: {[str(s) for s in allowed]})"
        )
        raise InvalidTransition(old_status, target_status, allowed)

    new_status = OrderStatus(target_status)

    try:
        order.status = new_status
        if new_status == OrderStatus.DELIVERED:
            order.delivered_at = utcnow()
        db.add(order)

        tracking = OrderTracking(
            order_id=order_id,
            status=new_status,
            notes=notes,
            latitude=latitude,
            longitude=longitude,
            location_address=location_address,
            estimated_arrival=estimated_arrival,
            updated_by=actor_id,
        )
        db.add(tracking)

        if new_status == OrderStatus.OUT_FOR_DELIVERY and latitude is not None and longitude is not None:
            db.add(DeliveryLocation(
                order_id=order_id,
                delivery_user_id=actor_id,
                latitude=latitude,
                longitude=longitude,
                location_address=location_address,
                recorded_at=utcnow(),
            ))

        await db.commit()
    except Exception:
        await db.rollback()
        logger.error(f"Status change for order {order_id} rolled back ({old_status} -> {new_status})")
        raise

    await db.refresh(order)
    await db.refresh(tracking)

    record_transition(old_status, new_status, "applied")
    logger.info(
        f"Order {order.order_number} status changed: {old_status} -> {new_status} "
        f"by user {actor_id}"
    )
    return tracking


async def update_order_status(
    db: AsyncSession,
    order_id: int,
    update: OrderStatusUpdate,
    actor_id: int,
) -> OrderTracking:
    order = await get_order(db, order_id)
    return await request_transition(
        db,
        order,
        update.status,
        actor_id,
        notes=update.notes,
        latitude=update.latitude,
        longitude=update.longitude,
        location_address=update.location_address,
        estimated_arrival=update.estimated_arrival,
    )


@track_db_operation("insert", "delivery_locations")
async def record_delivery_location(
    db: AsyncSession,
    order_id: int,
    actor_id: int,
    latitude: float,
    longitude: float,
    location_address: Optional[str] = None,
) -> DeliveryLocation:
    order = await get_order(db, order_id)

    if order.status != OrderStatus.OUT_FOR_DELIVERY:
        raise OrderNotInDelivery(order_id, order.status)

    try:
        location = DeliveryLocation(
            order_id=order_id,
            delivery_user_id=actor_id,
            latitude=latitude,
            longitude=longitude,
            location_address=location_address,
            recorded_at=utcnow(),
        )
        db.add(location)
        await db.commit()
    except Exception:
        await db.rollback()
        logger.error(f"Courier position for order {order_id} rolled back")
        raise

    await db.refresh(location)
    return location


async def cancel_order(
    db: AsyncSession,
    order_id: int,
    customer_id: int,
    notes: Optional[str] = None,
) -> OrderTracking:
    """Customer-initiated cancellation.

    Only the customer who placed the order can cancel it, and only while
    ``can_be_cancelled()`` holds (pending, confirmed or preparing). Staff
    cancellations from later statuses go through ``request_transition``.
    """
    res = await db.execute(
        select(Order).where(Order.id == order_id, Order.user_id == customer_id)
    )
    order = res.scalars().first()
    if order is None:
        raise ResourceNotFound("Order", order_id)

    if not order.can_be_cancelled():
        logger.warning(f"Customer {customer_id} tried to cancel order {order_id} while {order.status}")
        raise OrderNotCancellable(order_id, order.status)

    return await request_transition(db, order, OrderStatus.CANCELLED, customer_id, notes=notes)


async def get_tracking_history(db: AsyncSession, order_id: int) -> List[OrderTracking]:
    """Tracking entries for an order, newest first."""
    await get_order(db, order_id)
    res = await db.execute(
        select(OrderTracking)
        .where(OrderTracking.order_id == order_id)
        .order_by(OrderTracking.created_at.desc(), OrderTracking.id.desc())
    )
    return list(res.scalars().all())


async def get_latest_delivery_location(db: AsyncSession, order_id: int) -> Optional[DeliveryLocation]:
    res = await db.execute(
        select(DeliveryLocation)
        .where(DeliveryLocation.order_id == order_id)
        .order_by(DeliveryLocation.recorded_at.desc(), DeliveryLocation.id.desc())
        .limit(1)
    )
    return res.scalars().first()
