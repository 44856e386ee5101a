from sqlalchemy import Column, Text, Integer, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from foodhub.models.base import BaseModel


class Review(BaseModel):
    __tablename__ = "reviews"

    user_id = Column(ForeignKey("users.id"), nullable=False)
    dish_id = Column(ForeignKey("dishes.id"), nullable=False)
    vendor_id = Column(ForeignKey("vendors.id"), nullable=True)
    order_id = Column(ForeignKey("orders.id"), nullable=False)

    author = relationship("User", backref="reviews")
    dish = relationship("Dish", backref="reviews")

    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    images = Column(JSON, nullable=True)
    is_verified = Column(Boolean, default=False)
    is_helpful = Column(Boolean, default=False)
    helpful_count = Column(Integer, default=0)
