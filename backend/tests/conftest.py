"""
Shared test fixtures.

Every test gets a fresh SQLite file database; API tests talk to the app
through httpx with the session dependency pointed at that database.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_URL"] = "https://catalog.test"
os.environ["ENVIRONMENT"] = "development"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from catalog.core.database import Base, get_db_session
from catalog.main import app
from catalog.models import Shop, ShopCategory, ShopItem


@pytest.fixture
async def engine(tmp_path):
    """Engine bound to a throwaway database file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def shop(db_session) -> Shop:
    shop = Shop(name="Acme & Co", slug="acme", website="https://acme.example")
    db_session.add(shop)
    await db_session.flush()
    return shop


@pytest.fixture
async def category(db_session) -> ShopCategory:
    category = ShopCategory(name="Pet Supplies", slug="pet-supplies")
    db_session.add(category)
    await db_session.flush()
    return category


@pytest.fixture
async def catalog_data(session_factory) -> dict:
    """Committed shop with two items, for API tests."""
    async with session_factory() as session:
        shop = Shop(name="Acme & Co", slug="acme", website="https://acme.example")
        category = ShopCategory(name="Pet Supplies", slug="pet-supplies")
        chew_toy = ShopItem(
            shop=shop,
            category=category,
            name="Chew Toy",
            original_name="Chew Toy (Large)",
            slug="chew-toy",
            url="https://prf.hn/click/camref:1100l/destination:https%3A%2F%2Fwww.chewy.com%2Fdp%2F1",
            description="Tough & squeaky.\nDishwasher safe.",
            weight=1,
        )
        book = ShopItem(
            shop=shop,
            name="Dog Training Book",
            slug="dog-training-book",
            url="https://www.barnesandnoble.com/w/book",
            weight=2,
        )
        session.add_all([shop, category, chew_toy, book])
        await session.commit()
        return {"shop": shop, "category": category, "chew_toy": chew_toy, "book": book}


@pytest.fixture
async def async_client(session_factory):
    """Async HTTP client against the app, using the test database."""

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
