"""
FastAPI router for portfolio categories.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from app.application.showcase.create_category import CreateCategoryUseCase
from app.application.showcase.delete_category import DeleteCategoryUseCase
from app.application.showcase.dtos import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from app.application.showcase.list_categories import ListCategoriesUseCase
from app.application.showcase.update_category import UpdateCategoryUseCase
from app.interfaces.admin.dependencies import require_admin
from app.interfaces.showcase.dependencies import (
    get_create_category_use_case,
    get_delete_category_use_case,
    get_list_categories_use_case,
    get_update_category_use_case,
)
from app.interfaces.showcase.schemas import (
    CategoryItem,
    CategoryListResponse,
    CategoryRequest,
    CategoryResponse,
    CategoryUsageItem,
    CategoryUsageListResponse,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(prefix="/categories", tags=["categories"])

ADMIN_ONLY = [Depends(require_admin)]


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
    description="All categories ordered by name.",
)
async def list_categories(
    use_case: ListCategoriesUseCase = Depends(get_list_categories_use_case),
) -> CategoryListResponse:
    categories = await use_case.execute()
    return CategoryListResponse(categories=[CategoryItem.from_entity(c) for c in categories])


@router.get(
    "/with-totals",
    response_model=CategoryUsageListResponse,
    summary="List categories with project totals",
    description="Categories with the number of portfolios in each, most used first.",
)
async def list_categories_with_totals(
    use_case: ListCategoriesUseCase = Depends(get_list_categories_use_case),
) -> CategoryUsageListResponse:
    usages = await use_case.execute(with_usage=True)
    return CategoryUsageListResponse(
        categories=[CategoryUsageItem.from_usage(u) for u in usages]
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    dependencies=ADMIN_ONLY,
    summary="Create a category",
)
async def create_category(
    body: CategoryRequest,
    use_case: CreateCategoryUseCase = Depends(get_create_category_use_case),
) -> CategoryResponse:
    category = await use_case.execute(CreateCategoryCommand(name=body.name))
    return CategoryResponse(
        message="Category added successfully",
        category=CategoryItem.from_entity(category),
    )


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    dependencies=ADMIN_ONLY,
    summary="Rename a category",
)
async def update_category(
    category_id: int,
    body: CategoryRequest,
    use_case: UpdateCategoryUseCase = Depends(get_update_category_use_case),
) -> CategoryResponse:
    category = await use_case.execute(
        UpdateCategoryCommand(category_id=category_id, name=body.name)
    )
    return CategoryResponse(
        message="Category updated successfully",
        category=CategoryItem.from_entity(category),
    )


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    dependencies=ADMIN_ONLY,
    summary="Delete an unused category",
    description="Refused with 409 while any portfolio still uses the category.",
)
async def delete_category(
    category_id: int,
    use_case: DeleteCategoryUseCase = Depends(get_delete_category_use_case),
) -> MessageResponse:
    await use_case.execute(DeleteCategoryCommand(category_id=category_id))
    return MessageResponse(message="Category deleted successfully")
