"""Tests for the option service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.catalog.dto import OptionAddRequest, OptionUpdateRequest
from giftshop.catalog.models import Category, Product
from giftshop.catalog.option_service import OptionService
from giftshop.catalog.repository import OptionRepository, ProductRepository
from giftshop.domain.exceptions import CatalogError, ErrorCode


@pytest.fixture
def option_service(session: AsyncSession) -> OptionService:
    return OptionService(OptionRepository(session))


async def _make_product(session: AsyncSession, category: Category, name: str) -> Product:
    product = Product(
        name=name,
        price=1000,
        image_url="https://example.com/p.jpg",
        category=category,
        category_id=category.id,
        options=[],
    )
    return await ProductRepository(session).save(product)


@pytest.fixture
async def product(session: AsyncSession, category: Category) -> Product:
    return await _make_product(session, category, "머그컵")


class TestAddOptions:
    """Tests for adding options."""

    async def test_add_options_in_order(
        self, option_service: OptionService, product: Product
    ) -> None:
        options = await option_service.add_options(
            product,
            [OptionAddRequest(name="Red", quantity=3), OptionAddRequest(name="Blue", quantity=4)],
        )

        assert [o.name for o in options] == ["Red", "Blue"]
        assert all(o.id is not None for o in options)
        assert all(o.product_id == product.id for o in options)
        assert product.options == options

    async def test_repeated_name_in_request(
        self, option_service: OptionService, product: Product
    ) -> None:
        with pytest.raises(CatalogError) as exc_info:
            await option_service.add_options(
                product,
                [OptionAddRequest(name="Red", quantity=1), OptionAddRequest(name="Red", quantity=2)],
            )
        assert exc_info.value.code is ErrorCode.OPTION_ALREADY_EXISTS
        assert product.options == []

    async def test_name_taken_on_product(
        self, option_service: OptionService, product: Product
    ) -> None:
        await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))

        with pytest.raises(CatalogError) as exc_info:
            await option_service.add_option(product, OptionAddRequest(name="Red", quantity=9))
        assert exc_info.value.code is ErrorCode.OPTION_ALREADY_EXISTS

    async def test_same_name_on_other_product(
        self,
        option_service: OptionService,
        product: Product,
        session: AsyncSession,
        category: Category,
    ) -> None:
        other = await _make_product(session, category, "텀블러")
        await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))

        option = await option_service.add_option(other, OptionAddRequest(name="Red", quantity=1))

        assert option.product_id == other.id


class TestUpdateOption:
    """Tests for updating options."""

    async def test_update(self, option_service: OptionService, product: Product) -> None:
        option = await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))

        updated = await option_service.update_option_by_id(
            product, option.id, OptionUpdateRequest(name="Crimson", quantity=5)
        )

        assert updated is option
        assert (option.name, option.quantity) == ("Crimson", 5)

    async def test_keep_own_name(self, option_service: OptionService, product: Product) -> None:
        option = await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))

        updated = await option_service.update_option_by_id(
            product, option.id, OptionUpdateRequest(name="Red", quantity=2)
        )

        assert updated.quantity == 2

    async def test_rename_to_taken_name(
        self, option_service: OptionService, product: Product
    ) -> None:
        await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))
        blue = await option_service.add_option(product, OptionAddRequest(name="Blue", quantity=1))

        with pytest.raises(CatalogError) as exc_info:
            await option_service.update_option_by_id(
                product, blue.id, OptionUpdateRequest(name="Red", quantity=1)
            )
        assert exc_info.value.code is ErrorCode.OPTION_ALREADY_EXISTS

    async def test_option_of_other_product(
        self,
        option_service: OptionService,
        product: Product,
        session: AsyncSession,
        category: Category,
    ) -> None:
        other = await _make_product(session, category, "텀블러")
        foreign = await option_service.add_option(other, OptionAddRequest(name="Red", quantity=1))

        with pytest.raises(CatalogError) as exc_info:
            await option_service.update_option_by_id(
                product, foreign.id, OptionUpdateRequest(name="Blue", quantity=1)
            )
        assert exc_info.value.code is ErrorCode.OPTION_NOT_FOUND


class TestDeleteOption:
    """Tests for deleting options."""

    async def test_delete(self, option_service: OptionService, product: Product) -> None:
        red = await option_service.add_option(product, OptionAddRequest(name="Red", quantity=1))
        blue = await option_service.add_option(product, OptionAddRequest(name="Blue", quantity=1))

        await option_service.delete_option_by_id(product, red.id)

        assert product.options == [blue]

    async def test_delete_missing(self, option_service: OptionService, product: Product) -> None:
        with pytest.raises(CatalogError) as exc_info:
            await option_service.delete_option_by_id(product, 31337)
        assert exc_info.value.code is ErrorCode.OPTION_NOT_FOUND
