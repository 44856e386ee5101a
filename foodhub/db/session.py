from typing import AsyncIterator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from foodhub.core.config import settings
import foodhub.db.base  # noqa: F401  registers every mapped model

engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, future=True)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    future=True
)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session
