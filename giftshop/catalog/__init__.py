"""Gift Product Catalog.

Provides products, their options and categories, with the services
that enforce the catalog's business rules.
"""

from giftshop.catalog.category_service import CategoryService
from giftshop.catalog.models import Category, Option, Product
from giftshop.catalog.option_service import OptionService
from giftshop.catalog.repository import (
    CategoryRepository,
    OptionRepository,
    ProductRepository,
)
from giftshop.catalog.service import (
    ProductService,
    get_category_service,
    get_product_service,
)
from giftshop.catalog.sorting import SortDirection, SortSpec, parse_sort

__all__ = [
    # Models
    "Category",
    "Option",
    "Product",
    # Repositories
    "CategoryRepository",
    "OptionRepository",
    "ProductRepository",
    # Sorting
    "SortDirection",
    "SortSpec",
    "parse_sort",
    # Services
    "CategoryService",
    "OptionService",
    "ProductService",
    "get_category_service",
    "get_product_service",
]
