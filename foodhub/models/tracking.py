from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from foodhub.models.base import BaseModel, utcnow
from foodhub.core.enums import OrderStatus, enum_values


class OrderTracking(BaseModel):
    """One row per accepted order status change."""
    __tablename__ = "order_tracking"

    order_id = Column(ForeignKey("orders.id"), nullable=False, index=True)
    updated_by = Column(ForeignKey("users.id"), nullable=False)

    order = relationship("Order", backref="tracking")

    status = Column(Enum(OrderStatus, values_callable=enum_values), nullable=False)
    notes = Column(Text, nullable=True)
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)
    location_address = Column(String(255), nullable=True)
    estimated_arrival = Column(DateTime(timezone=True), nullable=True)


class DeliveryLocation(BaseModel):
    """Courier position ping recorded while an order is out for delivery."""
    __tablename__ = "delivery_locations"

    order_id = Column(ForeignKey("orders.id"), nullable=False, index=True)
    delivery_user_id = Column(ForeignKey("users.id"), nullable=True)

    order = relationship("Order", backref="delivery_locations")

    latitude = Column(Numeric(10, 8), nullable=False)
    longitude = Column(Numeric(11, 8), nullable=False)
    location_address = Column(String(255), nullable=True)
    recorded_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
