"""Sort parameter parsing for product listings.

Clients send ``"<field>,<direction>"`` with the field in lower_snake_case,
e.g. ``"price,desc"``.
"""

from dataclasses import dataclass
from enum import Enum

from giftshop.domain.exceptions import CatalogError, ErrorCode


class SortDirection(str, Enum):
    """Allowed sort directions."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Validated sort field and direction.

    Attributes:
        field: Product attribute name.
        direction: Sort direction.
    """

    field: str
    direction: SortDirection

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


def to_attribute_name(token: str) -> str:
    """Normalize a lower_snake_case token to an attribute name.

    Every underscore-separated word is lower-cased, so ``Image_URL``
    becomes ``image_url``.
    """
    return "_".join(word.lower() for word in token.split("_"))


def parse_direction(token: str) -> SortDirection:
    """Match a direction token exactly; matching is case-sensitive.

    Raises:
        CatalogError: INVALID_SORT_DIRECTION for anything but asc/desc.
    """
    if token == SortDirection.ASC.value:
        return SortDirection.ASC
    if token == SortDirection.DESC.value:
        return SortDirection.DESC
    raise CatalogError(
        ErrorCode.INVALID_SORT_DIRECTION,
        details={"direction": token},
    )


def parse_sort(raw: str, valid_fields: frozenset[str]) -> SortSpec:
    """Parse ``"<field>,<direction>"`` into a SortSpec.

    The string is split on its first comma. The direction is checked
    before the field.

    Args:
        raw: Raw sort parameter.
        valid_fields: Attribute names that may be sorted on.

    Returns:
        Validated sort spec.

    Raises:
        CatalogError: INVALID_SORT_DIRECTION or INVALID_SORT_FIELD.
    """
    field_token, _, direction_token = raw.partition(",")
    direction = parse_direction(direction_token)

    field = to_attribute_name(field_token)
    if field not in valid_fields:
        raise CatalogError(
            ErrorCode.INVALID_SORT_FIELD,
            details={"field": field_token},
        )
    return SortSpec(field=field, direction=direction)
