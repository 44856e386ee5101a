"""Order lifecycle state table and the display values derived from it."""
from typing import List, Optional, Union

from foodhub.core.enums import OrderStatus

NEXT_STATUSES = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    OrderStatus.PREPARING: (OrderStatus.READY, OrderStatus.CANCELLED),
    OrderStatus.READY: (OrderStatus.OUT_FOR_DELIVERY, OrderStatus.CANCELLED),
    OrderStatus.OUT_FOR_DELIVERY: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
    OrderStatus.DELIVERED: (OrderStatus.REFUNDED,),
    OrderStatus.CANCELLED: (),
    OrderStatus.REFUNDED: (),
}

# Narrower than NEXT_STATUSES: ready and out_for_delivery orders still have a
# cancelled edge in the table but are not customer-cancellable.
CANCELLABLE_STATUSES = frozenset({
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
})

STATUS_LABELS = {
    OrderStatus.PENDING: "En attente",
    OrderStatus.CONFIRMED: "Confirmée",
    OrderStatus.PREPARING: "En préparation",
    OrderStatus.READY: "Prête",
    OrderStatus.OUT_FOR_DELIVERY: "En livraison",
    OrderStatus.DELIVERED: "Livrée",
    OrderStatus.CANCELLED: "Annulée",
    OrderStatus.REFUNDED: "Remboursée",
}

STATUS_COLORS = {
    OrderStatus.PENDING: "yellow",
    OrderStatus.CONFIRMED: "blue",
    OrderStatus.PREPARING: "orange",
    OrderStatus.READY: "green",
    OrderStatus.OUT_FOR_DELIVERY: "purple",
    OrderStatus.DELIVERED: "green",
    OrderStatus.CANCELLED: "red",
    OrderStatus.REFUNDED: "gray",
}

DEFAULT_STATUS_COLOR = "gray"


def coerce_status(status: Union[OrderStatus, str, None]) -> Optional[OrderStatus]:
    if status is None:
        return None
    try:
        return OrderStatus(status)
    except ValueError:
        return None


def next_possible_statuses(status: Union[OrderStatus, str, None]) -> List[OrderStatus]:
    current = coerce_status(status)
    if current is None:
        return []
    return list(NEXT_STATUSES[current])


def is_valid_transition(current: Union[OrderStatus, str, None], target: Union[OrderStatus, str, None]) -> bool:
    target_status = coerce_status(target)
    if target_status is None:
        return False
    return target_status in next_possible_statuses(current)


def can_be_cancelled(status: Union[OrderStatus, str, None]) -> bool:
    return coerce_status(status) in CANCELLABLE_STATUSES


def is_terminal(status: Union[OrderStatus, str, None]) -> bool:
    current = coerce_status(status)
    return current is not None and not NEXT_STATUSES[current]


def status_label(status: Union[OrderStatus, str, None]) -> str:
    """French display label; unknown values are returned unchanged."""
    current = coerce_status(status)
    if current is None:
        return "" if status is None else str(status)
    return STATUS_LABELS[current]


def status_color(status: Union[OrderStatus, str, None]) -> str:
    current = coerce_status(status)
    if current is None:
        return DEFAULT_STATUS_COLOR
    return STATUS_COLORS[current]
