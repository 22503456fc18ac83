"""Catalog data transfer objects.

Requests carry validated input into the services; summaries are the
read-only views the services hand back.
"""

from dataclasses import dataclass, field

from giftshop.catalog.models import Category, Option, Product


# ============================================================================
# Requests
# ============================================================================


@dataclass
class OptionAddRequest:
    """Option to create."""

    name: str
    quantity: int


@dataclass
class OptionUpdateRequest:
    """New values for an existing option."""

    name: str
    quantity: int


@dataclass
class ProductAddRequest:
    """Product to create together with its initial options."""

    name: str
    price: int
    image_url: str
    category_id: int
    options: list[OptionAddRequest] = field(default_factory=list)


@dataclass
class ProductUpdateRequest:
    """New values for an existing product."""

    name: str
    price: int
    image_url: str
    category_id: int


@dataclass
class CategoryRequest:
    """Category to create or replace."""

    name: str
    color: str
    image_url: str
    description: str | None = None


# ============================================================================
# Summaries
# ============================================================================


@dataclass
class OptionSummary:
    """Option view."""

    id: int
    name: str
    quantity: int

    @classmethod
    def of(cls, option: Option) -> "OptionSummary":
        return cls(id=option.id, name=option.name, quantity=option.quantity)


@dataclass
class ProductSummary:
    """Product view without category."""

    id: int
    name: str
    price: int
    image_url: str

    @classmethod
    def of(cls, product: Product) -> "ProductSummary":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
        )


@dataclass
class ProductWithCategorySummary(ProductSummary):
    """Product view including the assigned category."""

    category_id: int

    @classmethod
    def of(cls, product: Product) -> "ProductWithCategorySummary":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
            category_id=product.category_id,
        )


@dataclass
class CategorySummary:
    """Category view."""

    id: int
    name: str
    color: str
    image_url: str
    description: str | None

    @classmethod
    def of(cls, category: Category) -> "CategorySummary":
        return cls(
            id=category.id,
            name=category.name,
            color=category.color,
            image_url=category.image_url,
            description=category.description,
        )
