"""Product service for catalog operations.

Validates product requests, enforces the catalog's business rules and
delegates persistence to the repository, category lookup to
CategoryService and option handling to OptionService.

The service never commits. Callers run each operation inside one
session transaction (see ``get_session``), which makes multi-step writes
such as ``add_product`` atomic.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.catalog.category_service import CategoryService
from giftshop.catalog.dto import (
    OptionAddRequest,
    OptionSummary,
    OptionUpdateRequest,
    ProductAddRequest,
    ProductSummary,
    ProductUpdateRequest,
    ProductWithCategorySummary,
)
from giftshop.catalog.models import Product
from giftshop.catalog.option_service import OptionService
from giftshop.catalog.repository import (
    CategoryRepository,
    OptionRepository,
    ProductRepository,
)
from giftshop.catalog.sorting import parse_sort
from giftshop.domain.exceptions import CatalogError, ErrorCode

logger = structlog.get_logger()


class ProductService:
    """Service for product and product option operations.

    Example usage:
        async with async_session_factory() as session:
            service = get_product_service(session)
            products = await service.get_all_products("price,desc", category_id=1)
            await session.commit()
    """

    def __init__(
        self,
        repository: ProductRepository,
        category_service: CategoryService,
        option_service: OptionService,
    ) -> None:
        """Initialize service with its collaborators.

        Args:
            repository: Product persistence.
            category_service: Resolves category ids.
            option_service: Manages product options.
        """
        self.repository = repository
        self.category_service = category_service
        self.option_service = option_service
        self.field_names = Product.FIELD_NAMES

    async def get_product_by_id(self, product_id: int) -> Product:
        """Get product by ID.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND if no such product exists.
        """
        product = await self.repository.find_by_id(product_id)
        if product is None:
            raise CatalogError(
                ErrorCode.PRODUCT_NOT_FOUND,
                details={"product_id": product_id},
            )
        return product

    async def get_all_products(
        self,
        sort: str,
        category_id: int | None,
    ) -> list[ProductSummary]:
        """List a category's products in the requested order.

        Args:
            sort: ``"<field>,<direction>"``, e.g. ``"price,desc"``.
            category_id: Category filter; None lists every category.

        Returns:
            Product summaries in store order.

        Raises:
            CatalogError: INVALID_SORT_DIRECTION, INVALID_SORT_FIELD or
                CATEGORY_NOT_FOUND.
        """
        sort_spec = parse_sort(sort, self.field_names)
        category = await self.category_service.find_by_id(category_id)
        products = await self.repository.find_all_by_category(category, sort_spec)
        return [ProductSummary.of(p) for p in products]

    async def get_options_by_product_id(self, product_id: int) -> list[OptionSummary]:
        """List a product's options in insertion order."""
        product = await self.get_product_by_id(product_id)
        return [OptionSummary.of(o) for o in product.options]

    async def add_product(self, request: ProductAddRequest) -> ProductWithCategorySummary:
        """Create a product with its initial options.

        Both checks run before anything is written. The product is saved
        before its options are created.

        Raises:
            CatalogError: PRODUCT_ALREADY_EXISTS, PRODUCT_OPTIONS_EMPTY,
                CATEGORY_NOT_FOUND or OPTION_ALREADY_EXISTS.
        """
        if await self.repository.find_by_contents(request) is not None:
            raise CatalogError(
                ErrorCode.PRODUCT_ALREADY_EXISTS,
                details={"name": request.name},
            )

        if not request.options:
            raise CatalogError(ErrorCode.PRODUCT_OPTIONS_EMPTY)

        product = await Product.create(
            name=request.name,
            price=request.price,
            image_url=request.image_url,
            category_id=request.category_id,
            category_service=self.category_service,
        )
        product = await self.repository.save(product)
        await self.option_service.add_options(product, request.options)

        logger.info(
            "Product created",
            product_id=product.id,
            category_id=product.category_id,
            option_count=len(request.options),
        )
        return ProductWithCategorySummary.of(product)

    async def add_product_option(
        self,
        product_id: int,
        request: OptionAddRequest,
    ) -> OptionSummary:
        """Add one option to an existing product."""
        product = await self.get_product_by_id(product_id)
        option = await self.option_service.add_option(product, request)
        return OptionSummary.of(option)

    async def update_product_by_id(
        self,
        product_id: int,
        request: ProductUpdateRequest,
    ) -> ProductSummary:
        """Replace a product's fields in place.

        The new contents are not checked against other products.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND or CATEGORY_NOT_FOUND.
        """
        product = await self.get_product_by_id(product_id)
        await product.update(
            name=request.name,
            price=request.price,
            image_url=request.image_url,
            category_id=request.category_id,
            category_service=self.category_service,
        )
        await self.repository.save(product)
        logger.info("Product updated", product_id=product.id)
        return ProductSummary.of(product)

    async def update_product_option_by_id(
        self,
        product_id: int,
        option_id: int,
        request: OptionUpdateRequest,
    ) -> OptionSummary:
        """Replace one option of a product."""
        product = await self.get_product_by_id(product_id)
        option = await self.option_service.update_option_by_id(product, option_id, request)
        return OptionSummary.of(option)

    async def delete_product(self, product_id: int) -> None:
        """Delete a product together with its options."""
        product = await self.get_product_by_id(product_id)
        await self.repository.delete(product)
        logger.info("Product deleted", product_id=product_id)

    async def delete_product_option(self, product_id: int, option_id: int) -> None:
        """Delete one option of a product."""
        product = await self.get_product_by_id(product_id)
        await self.option_service.delete_option_by_id(product, option_id)


# ============================================================================
# Service Factories
# ============================================================================


def get_category_service(session: AsyncSession) -> CategoryService:
    """Build a category service bound to a session."""
    return CategoryService(CategoryRepository(session), ProductRepository(session))


def get_product_service(session: AsyncSession) -> ProductService:
    """Build a product service and its collaborators bound to a session.

    Args:
        session: Session whose transaction the operations join.

    Returns:
        ProductService instance.
    """
    return ProductService(
        repository=ProductRepository(session),
        category_service=get_category_service(session),
        option_service=OptionService(OptionRepository(session)),
    )
