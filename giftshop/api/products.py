"""Product API endpoints.

Provides endpoints for the product catalog:
- GET /api/products - list products of a category, sorted
- GET /api/products/{id} - product details with options
- POST /api/products - create a product with its options
- PUT /api/products/{id} - replace a product's fields
- DELETE /api/products/{id} - delete a product
- GET|POST /api/products/{id}/options - list / add options
- PUT|DELETE /api/products/{id}/options/{option_id} - edit / remove an option
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.api.schemas import (
    MAX_DB_INT,
    ErrorResponse,
    OptionCreateRequest,
    OptionEditRequest,
    OptionResponse,
    ProductCreateRequest,
    ProductDetailResponse,
    ProductEditRequest,
    ProductResponse,
    ProductWithCategoryResponse,
    RowId,
)
from giftshop.catalog.service import ProductService, get_product_service
from giftshop.infrastructure.database import get_session

router = APIRouter(prefix="/api/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(session: Annotated[AsyncSession, Depends(get_session)]) -> ProductService:
    """Get product service bound to the request's session."""
    return get_product_service(session)


ServiceDep = Annotated[ProductService, Depends(get_service)]


# ============================================================================
# Product Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List products",
)
async def list_products(
    service: ServiceDep,
    sort: Annotated[
        str, Query(description="'<field>,<direction>', e.g. 'price,desc'")
    ] = "id,asc",
    category_id: Annotated[
        int | None, Query(le=MAX_DB_INT, description="Category filter; omit for all")
    ] = None,
) -> list[ProductResponse]:
    """List products of a category in the requested order.

    Args:
        service: Product service.
        sort: Sort field and direction.
        category_id: Optional category filter.

    Returns:
        Products in sort order.
    """
    products = await service.get_all_products(sort, category_id)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product details",
)
async def get_product(product_id: RowId, service: ServiceDep) -> ProductDetailResponse:
    """Get a product with its category id and options."""
    product = await service.get_product_by_id(product_id)
    return ProductDetailResponse.model_validate(product)


@router.post(
    "",
    response_model=ProductWithCategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Create product",
)
async def create_product(
    body: ProductCreateRequest,
    service: ServiceDep,
) -> ProductWithCategoryResponse:
    """Create a product with at least one option.

    Raises:
        CatalogError: If the product duplicates an existing one, has no
            options, or names an unknown category.
    """
    created = await service.add_product(body.to_request())
    return ProductWithCategoryResponse.model_validate(created)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Update product",
)
async def update_product(
    product_id: RowId,
    body: ProductEditRequest,
    service: ServiceDep,
) -> ProductResponse:
    """Replace a product's fields."""
    updated = await service.update_product_by_id(product_id, body.to_request())
    return ProductResponse.model_validate(updated)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(product_id: RowId, service: ServiceDep) -> Response:
    """Delete a product and its options."""
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Option Endpoints
# ============================================================================


@router.get(
    "/{product_id}/options",
    response_model=list[OptionResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List product options",
)
async def list_options(product_id: RowId, service: ServiceDep) -> list[OptionResponse]:
    """List a product's options in insertion order."""
    options = await service.get_options_by_product_id(product_id)
    return [OptionResponse.model_validate(o) for o in options]


@router.post(
    "/{product_id}/options",
    response_model=OptionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Add product option",
)
async def add_option(
    product_id: RowId,
    body: OptionCreateRequest,
    service: ServiceDep,
) -> OptionResponse:
    """Add an option to a product."""
    option = await service.add_product_option(product_id, body.to_request())
    return OptionResponse.model_validate(option)


@router.put(
    "/{product_id}/options/{option_id}",
    response_model=OptionResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Update product option",
)
async def update_option(
    product_id: RowId,
    option_id: RowId,
    body: OptionEditRequest,
    service: ServiceDep,
) -> OptionResponse:
    """Replace one option of a product."""
    option = await service.update_product_option_by_id(
        product_id, option_id, body.to_request()
    )
    return OptionResponse.model_validate(option)


@router.delete(
    "/{product_id}/options/{option_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product option",
)
async def delete_option(
    product_id: RowId,
    option_id: RowId,
    service: ServiceDep,
) -> Response:
    """Remove one option of a product."""
    await service.delete_product_option(product_id, option_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
