"""API schemas for the gift catalog API.

Pydantic models for request/response validation and serialization.
"""

import re
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator

from giftshop.catalog.dto import (
    CategoryRequest,
    OptionAddRequest,
    OptionUpdateRequest,
    ProductAddRequest,
    ProductUpdateRequest,
)

# Letters (any script), digits, the space character and ( ) [ ] + - & / _
NAME_PATTERN = re.compile(r"[\w ()\[\]+\-&/]*")

# Brand names that may not appear in product names.
RESERVED_PRODUCT_WORDS = ("카카오",)

MAX_OPTION_QUANTITY = 99_999_999

# Largest value an Integer column holds.
MAX_DB_INT = 2_147_483_647

# Path identifier that fits the database column.
RowId = Annotated[int, Path(le=MAX_DB_INT)]


def _check_name_characters(value: str) -> str:
    if not NAME_PATTERN.fullmatch(value):
        raise ValueError(
            "only letters, digits, spaces and ( ) [ ] + - & / _ are allowed"
        )
    return value


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Option Schemas
# ============================================================================


class OptionCreateRequest(BaseModel):
    """Request to add an option to a product."""

    name: str = Field(..., min_length=1, max_length=50, description="Option name")
    quantity: int = Field(
        ..., ge=1, le=MAX_OPTION_QUANTITY, description="Units available"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Restrict characters."""
        return _check_name_characters(value)

    def to_request(self) -> OptionAddRequest:
        return OptionAddRequest(name=self.name, quantity=self.quantity)


class OptionEditRequest(OptionCreateRequest):
    """Request to replace an option."""

    def to_request(self) -> OptionUpdateRequest:  # type: ignore[override]
        return OptionUpdateRequest(name=self.name, quantity=self.quantity)


class OptionResponse(BaseModel):
    """An option of a product."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Option identifier")
    name: str = Field(..., description="Option name")
    quantity: int = Field(..., description="Units available")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductFields(BaseModel):
    """Fields shared by product create and update requests."""

    name: str = Field(..., min_length=1, max_length=15, description="Product name")
    price: int = Field(..., ge=0, le=MAX_DB_INT, description="Price in won")
    image_url: str = Field(..., min_length=1, max_length=1000, description="Image URL")
    category_id: int = Field(..., ge=1, le=MAX_DB_INT, description="Owning category")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Restrict characters and reserved brand words."""
        _check_name_characters(value)
        for word in RESERVED_PRODUCT_WORDS:
            if word in value:
                raise ValueError(f"'{word}' may only be used after approval by the brand owner")
        return value


class ProductCreateRequest(ProductFields):
    """Request to create a product with its initial options."""

    options: list[OptionCreateRequest] = Field(
        default_factory=list, description="Initial options (at least one)"
    )

    def to_request(self) -> ProductAddRequest:
        return ProductAddRequest(
            name=self.name,
            price=self.price,
            image_url=self.image_url,
            category_id=self.category_id,
            options=[o.to_request() for o in self.options],
        )


class ProductEditRequest(ProductFields):
    """Request to replace a product's fields."""

    def to_request(self) -> ProductUpdateRequest:
        return ProductUpdateRequest(
            name=self.name,
            price=self.price,
            image_url=self.image_url,
            category_id=self.category_id,
        )


class ProductResponse(BaseModel):
    """A product without its category."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    price: int = Field(..., description="Price in won")
    image_url: str = Field(..., description="Image URL")


class ProductWithCategoryResponse(ProductResponse):
    """A product including its category id."""

    category_id: int = Field(..., description="Owning category")


class ProductDetailResponse(ProductWithCategoryResponse):
    """A product with its category id and options."""

    options: list[OptionResponse] = Field(default_factory=list)


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreateRequest(BaseModel):
    """Request to create or replace a category."""

    name: str = Field(..., min_length=1, max_length=50, description="Category name")
    color: str = Field(
        ..., pattern=r"^#[0-9a-fA-F]{6}$", description="Hex color, e.g. #6c95d1"
    )
    image_url: str = Field(..., min_length=1, max_length=1000, description="Image URL")
    description: str | None = Field(default=None, description="Description")

    def to_request(self) -> CategoryRequest:
        return CategoryRequest(
            name=self.name,
            color=self.color,
            image_url=self.image_url,
            description=self.description,
        )


class CategoryResponse(BaseModel):
    """A category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    image_url: str
    description: str | None = None
