from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from foodhub.models.base import BaseModel


class Vendor(BaseModel):
    __tablename__ = "vendors"

    user_id = Column(ForeignKey("users.id"), nullable=False)
    owner = relationship("User", backref="vendors")

    name = Column(String(255), nullable=False)
    description = Column(Text)
    email = Column(String(120))
    phone = Column(String(40))
    address = Column(Text)
    city = Column(String(120))
    postal_code = Column(String(20))
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)
    cuisine_type = Column(String(120))
    opening_hours = Column(String(255))
    delivery_radius = Column(Integer, default=5)  # km
    delivery_fee = Column(Numeric(8, 2), default=0)
    delivery_time = Column(Integer, default=30)  # minutes
    minimum_order = Column(Numeric(8, 2), default=0)
    logo = Column(Text, nullable=True)
    cover_image = Column(Text, nullable=True)

    is_open = Column(Boolean, default=True)
    is_verified = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    rating = Column(Numeric(3, 2), default=0)
    review_count = Column(Integer, default=0)
