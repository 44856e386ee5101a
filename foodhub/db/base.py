"""Import every model so ``Base.metadata`` and relationship strings resolve."""
from foodhub.models.base import Base  # noqa: F401
from foodhub.models.user import User  # noqa: F401
from foodhub.models.vendor import Vendor  # noqa: F401
from foodhub.models.dish import Category, Dish  # noqa: F401
from foodhub.models.review import Review  # noqa: F401
from foodhub.models.order import Order, OrderItem  # noqa: F401
from foodhub.models.tracking import OrderTracking, DeliveryLocation  # noqa: F401
from foodhub.models.application import VendorApplication, DishApplication, ReviewApplication  # noqa: F401
from foodhub.models.audit import Audit  # noqa: F401
