from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship
from foodhub.models.base import BaseModel
from foodhub.core.enums import OrderStatus, PaymentMethod, PaymentStatus, enum_values
from foodhub.core import order_states


class Order(BaseModel):
    __tablename__ = "orders"
    
    user_id = Column(ForeignKey("users.id"), nullable=False)
    vendor_id = Column(ForeignKey("vendors.id"), nullable=False)
    
    customer = relationship("User", backref="orders")
    vendor = relationship("Vendor", backref="orders")
    
    order_number = Column(String(64), unique=True, nullable=False)
    status = Column(
        Enum(OrderStatus, values_callable=enum_values),
        default=OrderStatus.PENDING,
        nullable=False,
    )

    subtotal = Column(Numeric(10, 2), nullable=False)
    delivery_fee = Column(Numeric(8, 2), default=0)
    tax = Column(Numeric(8, 2), default=0)
    total = Column(Numeric(10, 2), nullable=False)

    delivery_address = Column(String(255), nullable=False)
    delivery_city = Column(String(120), nullable=False)
    delivery_postal_code = Column(String(20), nullable=True)
    delivery_latitude = Column(Numeric(10, 8), nullable=True)
    delivery_longitude = Column(Numeric(11, 8), nullable=True)

    customer_name = Column(String(120), nullable=False)
    customer_phone = Column(String(40), nullable=False)
    special_instructions = Column(Text, nullable=True)

    payment_method = Column(Enum(PaymentMethod, values_callable=enum_values), default=PaymentMethod.CASH)
    payment_status = Column(Enum(PaymentStatus, values_callable=enum_values), default=PaymentStatus.PENDING)

    estimated_delivery_time = Column(DateTime(timezone=True), nullable=True)
    delivered_at = Column(DateTime(timezone=True), nullable=True)

    # Derived from status on every read, never stored
    @property
    def status_label(self) -> str:
        return order_states.status_label(self.status)

    @property
    def status_color(self) -> str:
        return order_states.status_color(self.status)

    @property
    def next_possible_statuses(self) -> list:
        return order_states.next_possible_statuses(self.status)

    def can_be_cancelled(self) -> bool:
        return order_states.can_be_cancelled(self.status)

    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def is_confirmed(self) -> bool:
        return self.status == OrderStatus.CONFIRMED

    def is_preparing(self) -> bool:
        return self.status == OrderStatus.PREPARING

    def is_ready(self) -> bool:
        return self.status == OrderStatus.READY

    def is_out_for_delivery(self) -> bool:
        return self.status == OrderStatus.OUT_FOR_DELIVERY

    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def is_refunded(self) -> bool:
        return self.status == OrderStatus.REFUNDED


class OrderItem(BaseModel):
    __tablename__ = "order_items"

    order_id = Column(ForeignKey("orders.id"), nullable=False)
    dish_id = Column(ForeignKey("dishes.id"), nullable=True)

    order = relationship("Order", backref="items")

    dish_name = Column(String(255), nullable=False)
    dish_price = Column(Numeric(8, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    total_price = Column(Numeric(10, 2), nullable=False)
    customizations = Column(JSON, nullable=True)
