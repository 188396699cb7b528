"""Category router. Reading is public; changes need an access token."""

from fastapi import APIRouter, status

from pennywise.domain.category import Category
from pennywise.presentation.api.dependencies import (
    CategoryServiceDep,
    CurrentUserId,
    DBSession,
    PathId,
)
from pennywise.presentation.api.errors import unwrap
from pennywise.presentation.api.schemas.categories import CategoryRequest, CategoryResponse
from pennywise.presentation.api.schemas.common import ErrorResponse, MessageResponse

router = APIRouter()


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


@router.get(
    "",
    summary="List categories",
    responses={404: {"model": ErrorResponse, "description": "No categories exist"}},
)
async def list_categories(category_service: CategoryServiceDep) -> list[CategoryResponse]:
    categories = unwrap(await category_service.list_categories())
    return [_to_response(category) for category in categories]


@router.get(
    "/{id}",
    summary="Get a category",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid id"},
        404: {"model": ErrorResponse, "description": "Category not found"},
    },
)
async def get_category(
    category_id: PathId,
    category_service: CategoryServiceDep,
) -> CategoryResponse:
    return _to_response(unwrap(await category_service.get_category(category_id)))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={409: {"model": ErrorResponse, "description": "Name already taken"}},
)
async def create_category(
    request: CategoryRequest,
    _: CurrentUserId,
    category_service: CategoryServiceDep,
    session: DBSession,
) -> CategoryResponse:
    category = unwrap(await category_service.create_category(request.name))
    await session.commit()
    return _to_response(category)


@router.patch(
    "/{id}",
    summary="Rename a category",
    responses={
        404: {"model": ErrorResponse, "description": "Category not found"},
        409: {"model": ErrorResponse, "description": "Name already taken"},
    },
)
async def rename_category(
    category_id: PathId,
    request: CategoryRequest,
    _: CurrentUserId,
    category_service: CategoryServiceDep,
    session: DBSession,
) -> CategoryResponse:
    category = unwrap(await category_service.rename_category(category_id, request.name))
    await session.commit()
    return _to_response(category)


@router.delete(
    "/{id}",
    summary="Delete a category",
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
async def delete_category(
    category_id: PathId,
    _: CurrentUserId,
    category_service: CategoryServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Delete a category along with every budget and expense filed under it."""
    unwrap(await category_service.delete_category(category_id))
    await session.commit()
    return MessageResponse(message="Category deleted successfully.")
