"""Category service.

Resolves category references for products and manages the categories
themselves.
"""

import structlog

from giftshop.catalog.dto import CategoryRequest, CategorySummary
from giftshop.catalog.models import Category
from giftshop.catalog.repository import CategoryRepository, ProductRepository
from giftshop.domain.exceptions import CatalogError, ErrorCode

logger = structlog.get_logger()


class CategoryService:
    """Service for category lookup and maintenance."""

    def __init__(
        self,
        repository: CategoryRepository,
        product_repository: ProductRepository,
    ) -> None:
        """Initialize service with its repositories.

        Args:
            repository: Category persistence.
            product_repository: Used to refuse deleting categories in use.
        """
        self.repository = repository
        self.product_repository = product_repository

    async def find_by_id(self, category_id: int | None) -> Category | None:
        """Resolve a category id.

        Args:
            category_id: Category to resolve. None stands for "no filter"
                and resolves to None.

        Returns:
            The category, or None when no id was given.

        Raises:
            CatalogError: CATEGORY_NOT_FOUND for an unknown id.
        """
        if category_id is None:
            return None
        category = await self.repository.find_by_id(category_id)
        if category is None:
            raise CatalogError(
                ErrorCode.CATEGORY_NOT_FOUND,
                details={"category_id": category_id},
            )
        return category

    async def get_all_categories(self) -> list[CategorySummary]:
        """List every category by id."""
        categories = await self.repository.find_all()
        return [CategorySummary.of(c) for c in categories]

    async def add_category(self, request: CategoryRequest) -> CategorySummary:
        """Create a category with a unique name.

        Raises:
            CatalogError: CATEGORY_ALREADY_EXISTS if the name is taken.
        """
        if await self.repository.find_by_name(request.name) is not None:
            raise CatalogError(
                ErrorCode.CATEGORY_ALREADY_EXISTS,
                details={"name": request.name},
            )

        category = await self.repository.save(
            Category(
                name=request.name,
                color=request.color,
                image_url=request.image_url,
                description=request.description,
            )
        )
        logger.info("Category created", category_id=category.id, name=category.name)
        return CategorySummary.of(category)

    async def update_category_by_id(
        self,
        category_id: int,
        request: CategoryRequest,
    ) -> CategorySummary:
        """Replace a category's fields.

        Raises:
            CatalogError: CATEGORY_NOT_FOUND, or CATEGORY_ALREADY_EXISTS if
                the new name belongs to another category.
        """
        category = await self.find_by_id(category_id)
        other = await self.repository.find_by_name(request.name)
        if other is not None and other.id != category.id:
            raise CatalogError(
                ErrorCode.CATEGORY_ALREADY_EXISTS,
                details={"name": request.name},
            )

        category.update(
            name=request.name,
            color=request.color,
            image_url=request.image_url,
            description=request.description,
        )
        await self.repository.save(category)
        logger.info("Category updated", category_id=category.id)
        return CategorySummary.of(category)

    async def delete_category(self, category_id: int) -> None:
        """Delete a category no product refers to.

        Raises:
            CatalogError: CATEGORY_NOT_FOUND or CATEGORY_HAS_PRODUCTS.
        """
        category = await self.find_by_id(category_id)
        product_count = await self.product_repository.count_by_category(category.id)
        if product_count:
            raise CatalogError(
                ErrorCode.CATEGORY_HAS_PRODUCTS,
                details={"category_id": category.id, "product_count": product_count},
            )
        await self.repository.delete(category)
        logger.info("Category deleted", category_id=category_id)
