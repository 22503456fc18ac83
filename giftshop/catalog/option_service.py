"""Option service.

Adds, updates and removes the options of a product. Option names are
unique within one product.
"""

import structlog

from giftshop.catalog.dto import OptionAddRequest, OptionUpdateRequest
from giftshop.catalog.models import Option, Product
from giftshop.catalog.repository import OptionRepository
from giftshop.domain.exceptions import CatalogError, ErrorCode

logger = structlog.get_logger()


class OptionService:
    """Service for a product's options."""

    def __init__(self, repository: OptionRepository) -> None:
        self.repository = repository

    async def add_options(
        self,
        product: Product,
        requests: list[OptionAddRequest],
    ) -> list[Option]:
        """Attach several options to a product.

        Args:
            product: Owning product.
            requests: Options to create.

        Returns:
            Created options in request order.

        Raises:
            CatalogError: OPTION_ALREADY_EXISTS if a name repeats, either
                within the request or against the product's options.
        """
        seen: set[str] = set()
        for request in requests:
            if request.name in seen or product.has_option_named(request.name):
                raise CatalogError(
                    ErrorCode.OPTION_ALREADY_EXISTS,
                    details={"product_id": product.id, "name": request.name},
                )
            seen.add(request.name)

        options = [Option(name=r.name, quantity=r.quantity) for r in requests]
        product.options.extend(options)
        await self.repository.save_all(options)
        logger.info(
            "Options added",
            product_id=product.id,
            option_ids=[o.id for o in options],
        )
        return options

    async def add_option(self, product: Product, request: OptionAddRequest) -> Option:
        """Attach one option to a product.

        Raises:
            CatalogError: OPTION_ALREADY_EXISTS if the name is taken.
        """
        options = await self.add_options(product, [request])
        return options[0]

    async def update_option_by_id(
        self,
        product: Product,
        option_id: int,
        request: OptionUpdateRequest,
    ) -> Option:
        """Replace one of the product's options.

        Raises:
            CatalogError: OPTION_NOT_FOUND if the option is not the
                product's, OPTION_ALREADY_EXISTS if the new name is taken.
        """
        option = self._get_option(product, option_id)
        if product.has_option_named(request.name, exclude=option):
            raise CatalogError(
                ErrorCode.OPTION_ALREADY_EXISTS,
                details={"product_id": product.id, "name": request.name},
            )

        option.update(name=request.name, quantity=request.quantity)
        await self.repository.flush()
        logger.info("Option updated", product_id=product.id, option_id=option.id)
        return option

    async def delete_option_by_id(self, product: Product, option_id: int) -> None:
        """Remove one of the product's options.

        Raises:
            CatalogError: OPTION_NOT_FOUND if the option is not the product's.
        """
        option = self._get_option(product, option_id)
        product.options.remove(option)
        await self.repository.flush()
        logger.info("Option deleted", product_id=product.id, option_id=option_id)

    def _get_option(self, product: Product, option_id: int) -> Option:
        option = product.find_option(option_id)
        if option is None:
            raise CatalogError(
                ErrorCode.OPTION_NOT_FOUND,
                details={"product_id": product.id, "option_id": option_id},
            )
        return option
