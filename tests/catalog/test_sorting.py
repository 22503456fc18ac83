"""Tests for sort parameter parsing."""

import pytest

from giftshop.catalog.models import Product
from giftshop.catalog.sorting import (
    SortDirection,
    SortSpec,
    parse_direction,
    parse_sort,
    to_attribute_name,
)
from giftshop.domain.exceptions import CatalogError, ErrorCode

FIELDS = Product.FIELD_NAMES


class TestToAttributeName:
    """Tests for field token normalization."""

    def test_plain_token_unchanged(self) -> None:
        assert to_attribute_name("price") == "price"

    def test_snake_case_token_kept(self) -> None:
        assert to_attribute_name("image_url") == "image_url"

    def test_words_are_lower_cased(self) -> None:
        assert to_attribute_name("Image_URL") == "image_url"
        assert to_attribute_name("NAME") == "name"

    def test_camel_case_is_not_split(self) -> None:
        """camelCase is not the wire convention and stays one word."""
        assert to_attribute_name("imageUrl") == "imageurl"


class TestParseDirection:
    """Tests for direction matching."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("asc", SortDirection.ASC), ("desc", SortDirection.DESC)],
    )
    def test_valid_directions(self, token: str, expected: SortDirection) -> None:
        assert parse_direction(token) is expected

    @pytest.mark.parametrize("token", ["ASC", "Desc", "sideways", "", " asc"])
    def test_invalid_directions(self, token: str) -> None:
        """Matching is exact and case-sensitive."""
        with pytest.raises(CatalogError) as exc_info:
            parse_direction(token)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_DIRECTION


class TestParseSort:
    """Tests for full sort string parsing."""

    def test_parse_ascending(self) -> None:
        spec = parse_sort("name,asc", FIELDS)
        assert spec == SortSpec(field="name", direction=SortDirection.ASC)
        assert not spec.descending

    def test_parse_descending_snake_case_field(self) -> None:
        spec = parse_sort("image_url,desc", FIELDS)
        assert spec.field == "image_url"
        assert spec.descending

    def test_category_is_sortable(self) -> None:
        spec = parse_sort("category,asc", FIELDS)
        assert spec.field == "category"

    def test_unknown_field(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("bogus_field,asc", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_FIELD
        assert exc_info.value.details == {"field": "bogus_field"}

    def test_relationship_is_not_sortable(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("options,asc", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_FIELD

    def test_invalid_direction(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("name,sideways", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_DIRECTION

    def test_missing_direction(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("name", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_DIRECTION

    def test_direction_checked_before_field(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("bogus,sideways", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_DIRECTION

    def test_splits_on_first_comma_only(self) -> None:
        """Everything after the first comma is the direction token."""
        with pytest.raises(CatalogError) as exc_info:
            parse_sort("name,asc,extra", FIELDS)
        assert exc_info.value.code is ErrorCode.INVALID_SORT_DIRECTION
