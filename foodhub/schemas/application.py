from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from decimal import Decimal
from foodhub.core.enums import ApplicationKind, ApplicationStatus, SpiceLevel


class VendorApplicationCreate(BaseModel):
    kind: ApplicationKind = ApplicationKind.VENDOR
    user_id: int
    restaurant_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    cuisine_type: Optional[str] = None
    opening_hours: Optional[str] = None
    delivery_radius: int = 5
    delivery_fee: Decimal = Decimal("0")
    delivery_time: int = 30
    logo: Optional[str] = None
    cover_image: Optional[str] = None
    documents: Optional[List[str]] = None


class DishApplicationCreate(BaseModel):
    kind: ApplicationKind = ApplicationKind.DISH
    vendor_id: int
    category_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    discount_price: Optional[Decimal] = Field(None, ge=0)
    image: Optional[str] = None
    ingredients: Optional[List[str]] = None
    allergens: Optional[List[str]] = None
    nutritional_info: Optional[Dict[str, Any]] = None
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    is_halal: bool = False
    is_kosher: bool = False
    preparation_time: int = 15
    spice_level: SpiceLevel = SpiceLevel.MILD


class ReviewApplicationCreate(BaseModel):
    kind: ApplicationKind = ApplicationKind.REVIEW
    user_id: int
    dish_id: int
    order_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str
    images: Optional[List[str]] = None


class ApplicationOut(BaseModel):
    id: int
    kind: ApplicationKind
    status: ApplicationStatus
    admin_notes: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    payload: Dict[str, Any]
