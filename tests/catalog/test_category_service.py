"""Tests for the category service."""

import pytest

from giftshop.catalog.category_service import CategoryService
from giftshop.catalog.dto import CategoryRequest
from giftshop.catalog.models import Category
from giftshop.catalog.service import ProductService
from giftshop.domain.exceptions import CatalogError, ErrorCode


def make_category_request(name: str = "상품권", **overrides) -> CategoryRequest:
    """Create a test category request."""
    fields = {
        "name": name,
        "color": "#ff8a65",
        "image_url": "https://example.com/gift.png",
        "description": None,
    }
    fields.update(overrides)
    return CategoryRequest(**fields)


class TestFindById:
    """Tests for category resolution."""

    async def test_none_means_no_filter(self, category_service: CategoryService) -> None:
        assert await category_service.find_by_id(None) is None

    async def test_existing(self, category_service: CategoryService, category: Category) -> None:
        assert await category_service.find_by_id(category.id) is category

    async def test_unknown(self, category_service: CategoryService) -> None:
        with pytest.raises(CatalogError) as exc_info:
            await category_service.find_by_id(12)
        assert exc_info.value.code is ErrorCode.CATEGORY_NOT_FOUND


class TestCategoryMaintenance:
    """Tests for category create, update and delete."""

    async def test_add_and_list(self, category_service: CategoryService) -> None:
        created = await category_service.add_category(
            make_category_request(description="Mobile vouchers")
        )

        categories = await category_service.get_all_categories()

        assert [c.id for c in categories] == [created.id]
        assert categories[0].description == "Mobile vouchers"

    async def test_duplicate_name(
        self, category_service: CategoryService, category: Category
    ) -> None:
        with pytest.raises(CatalogError) as exc_info:
            await category_service.add_category(make_category_request(name=category.name))
        assert exc_info.value.code is ErrorCode.CATEGORY_ALREADY_EXISTS

    async def test_update(self, category_service: CategoryService, category: Category) -> None:
        updated = await category_service.update_category_by_id(
            category.id, make_category_request(name="기프티콘", color="#000000")
        )

        assert updated.name == "기프티콘"
        assert category.color == "#000000"

    async def test_update_keeps_own_name(
        self, category_service: CategoryService, category: Category
    ) -> None:
        updated = await category_service.update_category_by_id(
            category.id, make_category_request(name=category.name)
        )
        assert updated.name == category.name

    async def test_update_to_taken_name(
        self,
        category_service: CategoryService,
        category: Category,
        other_category: Category,
    ) -> None:
        with pytest.raises(CatalogError) as exc_info:
            await category_service.update_category_by_id(
                other_category.id, make_category_request(name=category.name)
            )
        assert exc_info.value.code is ErrorCode.CATEGORY_ALREADY_EXISTS

    async def test_delete_unused(
        self, category_service: CategoryService, category: Category
    ) -> None:
        await category_service.delete_category(category.id)

        with pytest.raises(CatalogError) as exc_info:
            await category_service.find_by_id(category.id)
        assert exc_info.value.code is ErrorCode.CATEGORY_NOT_FOUND

    async def test_delete_in_use(
        self,
        category_service: CategoryService,
        service: ProductService,
        make_request,
        category: Category,
    ) -> None:
        await service.add_product(make_request())

        with pytest.raises(CatalogError) as exc_info:
            await category_service.delete_category(category.id)
        assert exc_info.value.code is ErrorCode.CATEGORY_HAS_PRODUCTS
        assert exc_info.value.details["product_count"] == 1
