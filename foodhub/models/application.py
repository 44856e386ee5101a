"""Vendor, dish and review applications awaiting an admin decision.

Approving an application copies its payload into a brand new live record
(Vendor, Dish or Review); the application row stays behind as the audit
trail. ``build_entity`` only constructs that record, persisting it is the
service's job.
"""
from sqlalchemy import Column, String, Text, Integer, Numeric, Boolean, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship, declared_attr
from foodhub.models.base import BaseModel
from foodhub.models.vendor import Vendor
from foodhub.models.dish import Dish
from foodhub.models.review import Review
from foodhub.core.enums import ApplicationKind, ApplicationStatus, SpiceLevel, enum_values


class ApplicationMixin:
    kind = None
    supports_under_review = False

    status = Column(
        Enum(ApplicationStatus, values_callable=enum_values),
        default=ApplicationStatus.PENDING,
        nullable=False,
        index=True,
    )
    admin_notes = Column(Text, nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)

    @declared_attr
    def reviewed_by(cls):
        return Column(ForeignKey("users.id"), nullable=True)

    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def is_approved(self) -> bool:
        return self.status == ApplicationStatus.APPROVED

    def is_rejected(self) -> bool:
        return self.status == ApplicationStatus.REJECTED

    def is_under_review(self) -> bool:
        return self.status == ApplicationStatus.UNDER_REVIEW

    def build_entity(self):
        raise NotImplementedError


class VendorApplication(ApplicationMixin, BaseModel):
    __tablename__ = "vendor_applications"
    kind = ApplicationKind.VENDOR
    supports_under_review = True

    user_id = Column(ForeignKey("users.id"), nullable=False)
    applicant = relationship("User", foreign_keys=[user_id], backref="vendor_applications")

    restaurant_name = Column(String(255), nullable=False)
    description = Column(Text)
    phone = Column(String(40))
    address = Column(Text)
    city = Column(String(120))
    postal_code = Column(String(20))
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)
    cuisine_type = Column(String(120))
    opening_hours = Column(String(255))
    delivery_radius = Column(Integer, default=5)
    delivery_fee = Column(Numeric(8, 2), default=0)
    delivery_time = Column(Integer, default=30)
    logo = Column(Text, nullable=True)
    cover_image = Column(Text, nullable=True)
    documents = Column(JSON, nullable=True)

    def build_entity(self) -> Vendor:
        return Vendor(
            user_id=self.user_id,
            name=self.restaurant_name,
            description=self.description,
            phone=self.phone,
            address=self.address,
            city=self.city,
            postal_code=self.postal_code,
            latitude=self.latitude,
            longitude=self.longitude,
            cuisine_type=self.cuisine_type,
            opening_hours=self.opening_hours,
            delivery_radius=self.delivery_radius,
            delivery_fee=self.delivery_fee,
            delivery_time=self.delivery_time,
            logo=self.logo,
            cover_image=self.cover_image,
            is_verified=True,
            is_featured=False,
            rating=0,
            review_count=0,
        )


class DishApplication(ApplicationMixin, BaseModel):
    __tablename__ = "dish_applications"
    kind = ApplicationKind.DISH

    vendor_id = Column(ForeignKey("vendors.id"), nullable=False)
    category_id = Column(ForeignKey("categories.id"), nullable=True)

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
    preparation_time = Column(Integer, default=15)
    spice_level = Column(Enum(SpiceLevel, values_callable=enum_values), default=SpiceLevel.MILD)

    def build_entity(self) -> Dish:
        return Dish(
            vendor_id=self.vendor_id,
            category_id=self.category_id,
            name=self.name,
            description=self.description,
            price=self.price,
            discount_price=self.discount_price,
            image=self.image,
            ingredients=self.ingredients,
            allergens=self.allergens,
            nutritional_info=self.nutritional_info,
            is_vegetarian=self.is_vegetarian,
            is_vegan=self.is_vegan,
            is_gluten_free=self.is_gluten_free,
            is_halal=self.is_halal,
            is_kosher=self.is_kosher,
            preparation_time=self.preparation_time,
            spice_level=self.spice_level,
            is_available=True,
            is_popular=False,
            is_featured=False,
            rating=0,
            review_count=0,
        )


class ReviewApplication(ApplicationMixin, BaseModel):
    __tablename__ = "review_applications"
    kind = ApplicationKind.REVIEW

    user_id = Column(ForeignKey("users.id"), nullable=False)
    dish_id = Column(ForeignKey("dishes.id"), nullable=False)
    order_id = Column(ForeignKey("orders.id"), nullable=False)

    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    images = Column(JSON, nullable=True)

    def build_entity(self) -> Review:
        return Review(
            user_id=self.user_id,
            dish_id=self.dish_id,
            order_id=self.order_id,
            rating=self.rating,
            comment=self.comment,
            images=self.images,
            is_verified=True,
            is_helpful=False,
            helpful_count=0,
        )


APPLICATION_MODELS = {
    ApplicationKind.VENDOR: VendorApplication,
    ApplicationKind.DISH: DishApplication,
    ApplicationKind.REVIEW: ReviewApplication,
}
