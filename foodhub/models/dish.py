from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship
from foodhub.models.base import BaseModel
from foodhub.core.enums import SpiceLevel, enum_values


class Category(BaseModel):
    __tablename__ = "categories"
    name = Column(String(120), unique=True, nullable=False)
    description = Column(Text)


class Dish(BaseModel):
    __tablename__ = "dishes"

    vendor_id = Column(ForeignKey("vendors.id"), nullable=False)
    category_id = Column(ForeignKey("categories.id"), nullable=True)

    vendor = relationship("Vendor", backref="dishes")
    category = relationship("Category", backref="dishes")

    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(8, 2), nullable=False)
    discount_price = Column(Numeric(8, 2), nullable=True)
    image = Column(Text, nullable=True)
    ingredients = Column(JSON, nullable=True)
    allergens = Column(JSON, nullable=True)
    nutritional_info = Column(JSON, nullable=True)

    is_vegetarian = Column(Boolean, default=False)
    is_vegan = Column(Boolean, default=False)
    is_gluten_free = Column(Boolean, default=False)
    is_halal = Column(Boolean, default=False)
    is_kosher = Column(Boolean, default=False)
    preparation_time = Column(Integer, default=15)  # minutes
    spice_level = Column(Enum(SpiceLevel, values_callable=enum_values), default=SpiceLevel.MILD)

    is_available = Column(Boolean, default=True)
    is_popular = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    rating = Column(Numeric(3, 2), default=0)
    review_count = Column(Integer, default=0)
    order_count = Column(Integer, default=0)
