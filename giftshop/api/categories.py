"""Category API endpoints.

Provides endpoints for listing and maintaining product categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from giftshop.api.schemas import (
    CategoryCreateRequest,
    CategoryResponse,
    ErrorResponse,
    RowId,
)
from giftshop.catalog.category_service import CategoryService
from giftshop.catalog.service import get_category_service
from giftshop.infrastructure.database import get_session

router = APIRouter(prefix="/api/categories", tags=["Categories"])


def get_service(session: Annotated[AsyncSession, Depends(get_session)]) -> CategoryService:
    """Get category service bound to the request's session."""
    return get_category_service(session)


ServiceDep = Annotated[CategoryService, Depends(get_service)]


@router.get("", response_model=list[CategoryResponse], summary="List categories")
async def list_categories(service: ServiceDep) -> list[CategoryResponse]:
    """List every category."""
    categories = await service.get_all_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    body: CategoryCreateRequest,
    service: ServiceDep,
) -> CategoryResponse:
    """Create a category with a unique name."""
    category = await service.add_category(body.to_request())
    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Update category",
)
async def update_category(
    category_id: RowId,
    body: CategoryCreateRequest,
    service: ServiceDep,
) -> CategoryResponse:
    """Replace a category's fields."""
    category = await service.update_category_by_id(category_id, body.to_request())
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Delete category",
)
async def delete_category(category_id: RowId, service: ServiceDep) -> Response:
    """Delete a category that no product uses."""
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
