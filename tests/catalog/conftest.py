"""Fixtures for catalog service tests."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.catalog.category_service import CategoryService
from giftshop.catalog.dto import OptionAddRequest, ProductAddRequest
from giftshop.catalog.models import Category
from giftshop.catalog.service import (
    ProductService,
    get_category_service,
    get_product_service,
)
from giftshop.infrastructure.database import (
    async_session_factory,
    create_schema,
    drop_schema,
)


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a freshly created schema."""
    await drop_schema()
    await create_schema()
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def service(session: AsyncSession) -> ProductService:
    """Product service bound to the test session."""
    return get_product_service(session)


@pytest.fixture
def category_service(session: AsyncSession) -> CategoryService:
    """Category service bound to the test session."""
    return get_category_service(session)


async def _make_category(session: AsyncSession, name: str) -> Category:
    category = Category(
        name=name,
        color="#6c95d1",
        image_url=f"https://example.com/{name}.png",
    )
    session.add(category)
    await session.flush()
    return category


@pytest.fixture
async def category(session: AsyncSession) -> Category:
    """A persisted category."""
    return await _make_category(session, "교환권")


@pytest.fixture
async def other_category(session: AsyncSession) -> Category:
    """A second persisted category."""
    return await _make_category(session, "뷰티")


@pytest.fixture
def make_request(category: Category):
    """Factory for product add requests in the default category."""

    def _make(
        name: str = "아메리카노",
        price: int = 4500,
        image_url: str = "https://example.com/americano.jpg",
        category_id: int | None = None,
        options: list[tuple[str, int]] | None = None,
    ) -> ProductAddRequest:
        if options is None:
            options = [("Tall", 10)]
        return ProductAddRequest(
            name=name,
            price=price,
            image_url=image_url,
            category_id=category.id if category_id is None else category_id,
            options=[OptionAddRequest(name=n, quantity=q) for n, q in options],
        )

    return _make
