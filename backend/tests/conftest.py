"""
Shared fixtures.

The application engine is pointed at an in-memory SQLite database before the
package is imported. Each ``client`` fixture runs the app lifespan, so every
test starts from a freshly created and seeded schema.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_MEMBERS"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator, Generator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from cartshop.core.database import Base, seed_members  # noqa: E402
from cartshop.main import app  # noqa: E402
from cartshop.models import member, shop  # noqa: E402,F401
from cartshop.repositories import (  # noqa: E402
    CartRepository,
    MemberRepository,
    ProductRepository,
)


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """Client running the full application against a fresh database."""
    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Session bound to a private in-memory database with default members."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as db:
        await seed_members(db)
        await db.commit()
        try:
            yield db
        finally:
            await db.rollback()

    await engine.dispose()


@pytest.fixture
def product_repo(session: AsyncSession) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def member_repo(session: AsyncSession) -> MemberRepository:
    return MemberRepository(session)


@pytest.fixture
def cart_repo(session: AsyncSession) -> CartRepository:
    return CartRepository(session)


@pytest.fixture
def make_product(test_client: TestClient):
    """Factory creating a product through the API and returning its listing entry."""

    def _make(name: str = "치킨", price: int = 10_000, image: str = "치킨 사진") -> dict:
        response = test_client.post(
            "/products", json={"name": name, "price": price, "image": image}
        )
        assert response.status_code == 201
        return test_client.get("/products").json()[-1]

    return _make
