"""Domain layer - business rule violations shared by the catalog.

Example usage:
    from giftshop.domain import CatalogError, ErrorCode

    try:
        await service.get_product_by_id(42)
    except CatalogError as e:
        if e.code is ErrorCode.PRODUCT_NOT_FOUND:
            ...
"""

from giftshop.domain.exceptions import CatalogError, DomainError, ErrorCode

__all__ = [
    "CatalogError",
    "DomainError",
    "ErrorCode",
]
