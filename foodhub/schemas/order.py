from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from foodhub.core.config import settings
from foodhub.core.enums import OrderStatus, PaymentMethod, PaymentStatus


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
    notes: Optional[str] = Field(None, max_length=settings.ORDER_NOTES_MAX_LENGTH)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    location_address: Optional[str] = Field(None, max_length=255)
    estimated_arrival: Optional[datetime] = None


class OrderOut(BaseModel):
    id: int
    order_number: str
    user_id: int
    vendor_id: int
    status: OrderStatus
    status_label: str
    status_color: str
    next_possible_statuses: List[OrderStatus]
    can_be_cancelled: bool
    subtotal: Decimal
    delivery_fee: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    total: Decimal
    delivery_address: str
    delivery_city: str
    customer_name: str
    customer_phone: str
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None
    estimated_delivery_time: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class TrackingOut(BaseModel):
    id: int
    order_id: int
    status: OrderStatus
    status_label: str
    notes: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    location_address: Optional[str] = None
    estimated_arrival: Optional[datetime] = None
    updated_by: int
    created_at: datetime
