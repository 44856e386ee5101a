import pytest
import os
from decimal import Decimal
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from foodhub.main import app
from foodhub.db.session import get_db
from foodhub.db.base import Base
from foodhub.core.config import settings
from foodhub.core.enums import AccountType, OrderStatus
from foodhub.models.user import User
from foodhub.models.vendor import Vendor
from foodhub.models.dish import Dish
from foodhub.models.order import Order
from foodhub.services import applications
from foodhub.schemas.application import (
    VendorApplicationCreate,
    DishApplicationCreate,
    ReviewApplicationCreate,
)


@pytest.fixture
async def test_engine(tmp_path):
    database_url = os.getenv(
        "TEST_DATABASE_URL",
        f"sqlite+aiosqlite:///{tmp_path / 'foodhub_test.db'}"
    )
    engine = create_async_engine(database_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        future=True
    )


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def test_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def strict_decisions(monkeypatch):
    monkeypatch.setattr(settings, "ENFORCE_PENDING_DECISIONS", True)


@pytest.fixture
def legacy_decisions(monkeypatch):
    """Reproduce the unguarded behaviour: decisions ignore the current status."""
    monkeypatch.setattr(settings, "ENFORCE_PENDING_DECISIONS", False)


@pytest.fixture
def create_user_factory(db):
    counter = {"n": 0}

    async def _create_user(name="Test User", account_type=AccountType.CLIENT, **kwargs):
        counter["n"] += 1
        user = User(
            name=name,
            email=kwargs.pop("email", f"user{counter['n']}@example.com"),
            phone=kwargs.pop("phone", "+225 07 00 00 00"),
            account_type=account_type,
            **kwargs
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user

    return _create_user


@pytest.fixture
async def admin_user(create_user_factory):
    return await create_user_factory(name="Admin", account_type=AccountType.ADMIN)


@pytest.fixture
async def customer(create_user_factory):
    return await create_user_factory(name="Awa Customer")


@pytest.fixture
async def vendor(db, create_user_factory):
    owner = await create_user_factory(name="Vendor Owner", account_type=AccountType.VENDOR)
    vendor = Vendor(
        user_id=owner.id,
        name="Maquis Le Bon Goût",
        city="Abidjan",
        is_verified=True,
    )
    db.add(vendor)
    await db.commit()
    await db.refresh(vendor)
    return vendor


@pytest.fixture
def create_order_factory(db, customer, vendor):
    counter = {"n": 0}

    async def _create_order(status=OrderStatus.PENDING, **kwargs):
        counter["n"] += 1
        data = {
            "user_id": customer.id,
            "vendor_id": vendor.id,
            "order_number": f"FH-{counter['n']:06d}",
            "status": status,
            "subtotal": Decimal("5000.00"),
            "delivery_fee": Decimal("500.00"),
            "tax": Decimal("0.00"),
            "total": Decimal("5500.00"),
            "delivery_address": "Rue des Jardins 12",
            "delivery_city": "Abidjan",
            "customer_name": customer.name,
            "customer_phone": "+225 07 11 22 33",
        }
        data.update(kwargs)

        order = Order(**data)
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    return _create_order


@pytest.fixture
def vendor_application_data(customer):
    return {
        "user_id": customer.id,
        "restaurant_name": "Chez Koffi",
        "description": "Cuisine ivoirienne traditionnelle",
        "phone": "+225 05 44 33 22",
        "address": "Boulevard Latrille",
        "city": "Abidjan",
        "postal_code": "01 BP 1234",
        "cuisine_type": "ivoirienne",
        "opening_hours": "10:00-22:00",
        "delivery_radius": 7,
        "delivery_fee": Decimal("750.00"),
        "delivery_time": 40,
        "documents": ["registre_commerce.pdf"],
    }


@pytest.fixture
def dish_application_data(vendor):
    return {
        "vendor_id": vendor.id,
        "name": "Garba",
        "description": "Attiéké et thon frit",
        "price": Decimal("2500"),
        "discount_price": None,
        "ingredients": ["attiéké", "thon", "piment", "oignon"],
        "allergens": ["poisson"],
        "is_halal": True,
        "preparation_time": 20,
        "spice_level": "hot",
    }


@pytest.fixture
def create_vendor_application_factory(db, vendor_application_data):
    async def _create(**kwargs):
        data = dict(vendor_application_data)
        data.update(kwargs)
        return await applications.submit_application(db, VendorApplicationCreate(**data))

    return _create


@pytest.fixture
def create_dish_application_factory(db, dish_application_data):
    async def _create(**kwargs):
        data = dict(dish_application_data)
        data.update(kwargs)
        return await applications.submit_application(db, DishApplicationCreate(**data))

    return _create


@pytest.fixture
async def dish(db, vendor):
    dish = Dish(vendor_id=vendor.id, name="Alloco poisson", price=Decimal("3000.00"))
    db.add(dish)
    await db.commit()
    await db.refresh(dish)
    return dish


@pytest.fixture
def create_review_application_factory(db, customer, dish, create_order_factory):
    async def _create(**kwargs):
        order = await create_order_factory(status=OrderStatus.DELIVERED)
        data = {
            "user_id": customer.id,
            "dish_id": dish.id,
            "order_id": order.id,
            "rating": 4,
            "comment": "Très bon garba, livré chaud.",
            "images": ["garba.jpg"],
        }
        data.update(kwargs)
        return await applications.submit_application(db, ReviewApplicationCreate(**data))

    return _create


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "orders: marks tests related to the order lifecycle"
    )
    config.addinivalue_line(
        "markers", "applications: marks tests related to application approval"
    )
    config.addinivalue_line(
        "markers", "monitoring: marks tests related to health and metrics"
    )
    config.addinivalue_line(
        "markers", "legacy: marks tests pinning behaviour kept for compatibility"
    )
