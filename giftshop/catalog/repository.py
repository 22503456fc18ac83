"""Catalog repositories for database operations.

Provide CRUD operations for products, categories and options.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.catalog.dto import ProductAddRequest
from giftshop.catalog.models import Category, Option, Product
from giftshop.catalog.sorting import SortSpec


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all_by_category(
                category,
                SortSpec(field="price", direction=SortDirection.DESC),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product with its id assigned.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def find_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        result = await self.session.execute(
            select(Product).where(Product.id == product_id)
        )
        return result.scalar_one_or_none()

    async def find_all_by_category(
        self,
        category: Category | None,
        sort: SortSpec,
    ) -> Sequence[Product]:
        """Find products of a category in the requested order.

        Args:
            category: Category to filter by; None returns every product.
            sort: Validated sort field and direction.

        Returns:
            Sequence of matching products.
        """
        query = select(Product)

        if category is not None:
            query = query.where(Product.category_id == category.id)

        sort_column = self._get_sort_column(sort.field)
        if sort.descending:
            query = query.order_by(sort_column.desc(), Product.id.desc())
        else:
            query = query.order_by(sort_column.asc(), Product.id.asc())

        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_by_contents(self, request: ProductAddRequest) -> Product | None:
        """Find a product whose content fields all equal the request's.

        Args:
            request: Product being added.

        Returns:
            First content-equivalent product, if any.
        """
        query = (
            select(Product)
            .where(
                and_(
                    Product.name == request.name,
                    Product.price == request.price,
                    Product.image_url == request.image_url,
                    Product.category_id == request.category_id,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def count_by_category(self, category_id: int) -> int:
        """Count products attached to a category."""
        result = await self.session.execute(
            select(func.count(Product.id)).where(Product.category_id == category_id)
        )
        return result.scalar_one()

    async def delete(self, product: Product) -> None:
        """Delete a product and, by cascade, its options."""
        await self.session.delete(product)
        await self.session.flush()

    def _get_sort_column(self, field: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            field: Product attribute name.

        Returns:
            SQLAlchemy column.
        """
        columns = {
            "id": Product.id,
            "name": Product.name,
            "price": Product.price,
            "image_url": Product.image_url,
            "category": Product.category_id,
            "category_id": Product.category_id,
        }
        return columns[field]


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        return category

    async def find_by_id(self, category_id: int) -> Category | None:
        result = await self.session.execute(
            select(Category).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()

    async def find_by_name(self, name: str) -> Category | None:
        result = await self.session.execute(
            select(Category).where(Category.name == name)
        )
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[Category]:
        result = await self.session.execute(select(Category).order_by(Category.id))
        return result.scalars().all()

    async def delete(self, category: Category) -> None:
        await self.session.delete(category)
        await self.session.flush()


class OptionRepository:
    """Repository for Option database operations.

    Options are always reached through their product; this repository
    only writes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save_all(self, options: list[Option]) -> list[Option]:
        """Save multiple options to database.

        Args:
            options: Options to save.

        Returns:
            Saved options.
        """
        self.session.add_all(options)
        await self.session.flush()
        return options

    async def flush(self) -> None:
        """Write pending changes, e.g. after an in-place update or removal."""
        await self.session.flush()
