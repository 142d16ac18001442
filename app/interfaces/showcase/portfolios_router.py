"""
FastAPI router for portfolios.

All routes delegate to use cases. No business logic here.
Multipart decoding and upload limits live in ``forms``.
Error mapping is handled by centralized error handlers.

The ``/{portfolio_id}`` routes are declared last so the literal
paths (``/carousel``, ``/slug/...``, ``/category/...``) win.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status

from app.application.showcase.create_portfolio import CreatePortfolioUseCase
from app.application.showcase.delete_portfolio import DeletePortfolioUseCase
from app.application.showcase.dtos import (
    CreatePortfolioCommand,
    DeletePortfolioCommand,
    GetCarouselQuery,
    GetPortfolioQuery,
    ListByCategoryQuery,
    PortfolioDetail,
    UpdatePortfolioCommand,
)
from app.application.showcase.get_carousel import GetCarouselUseCase
from app.application.showcase.get_portfolio import GetPortfolioUseCase
from app.application.showcase.list_portfolios import ListPortfoliosUseCase
from app.application.showcase.list_portfolios_by_category import (
    ListPortfoliosByCategoryUseCase,
)
from app.application.showcase.update_portfolio import UpdatePortfolioUseCase
from app.domain.showcase.entities import PortfolioChanges, PortfolioFields
from app.interfaces.admin.dependencies import require_admin
from app.interfaces.showcase.dependencies import (
    get_carousel_use_case,
    get_create_portfolio_use_case,
    get_delete_portfolio_use_case,
    get_list_by_category_use_case,
    get_list_portfolios_use_case,
    get_portfolio_use_case,
    get_update_portfolio_use_case,
    get_upload_policy,
)
from app.interfaces.showcase.forms import (
    UploadPolicy,
    decode_image_plan,
    decode_string_list,
    read_files,
    submitted_text,
)
from app.interfaces.showcase.schemas import (
    CarouselResponse,
    CategoryItem,
    CategoryPortfoliosResponse,
    ErrorResponse,
    MessageResponse,
    PortfolioDetailResponse,
    PortfolioItem,
    PortfolioListResponse,
    PortfolioResponse,
    PortfolioSummaryItem,
)

router = APIRouter(prefix="/portfolios", tags=["portfolios"])

ADMIN_ONLY = [Depends(require_admin)]
WRITE_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _detail_response(detail: PortfolioDetail) -> PortfolioDetailResponse:
    return PortfolioDetailResponse(
        portfolio=PortfolioItem.from_entity(detail.portfolio),
        next_portfolio=(
            PortfolioSummaryItem.from_entity(detail.next_portfolio)
            if detail.next_portfolio
            else None
        ),
    )


@router.get(
    "",
    response_model=PortfolioListResponse,
    summary="List portfolios",
    description="Every portfolio with categories, descriptions and images, newest first.",
)
async def list_portfolios(
    use_case: ListPortfoliosUseCase = Depends(get_list_portfolios_use_case),
) -> PortfolioListResponse:
    portfolios = await use_case.execute()
    return PortfolioListResponse(
        count=len(portfolios),
        portfolios=[PortfolioItem.from_entity(p) for p in portfolios],
    )


@router.get(
    "/carousel",
    response_model=CarouselResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Carousel entries",
    description="Newest portfolios with their header image.",
)
async def get_carousel(
    limit: Optional[int] = Query(None, description="Number of entries (default 10)"),
    use_case: GetCarouselUseCase = Depends(get_carousel_use_case),
) -> CarouselResponse:
    summaries = await use_case.execute(GetCarouselQuery(limit=limit))
    return CarouselResponse(
        count=len(summaries),
        portfolios=[PortfolioSummaryItem.from_entity(s) for s in summaries],
    )


@router.get(
    "/slug/{slug}",
    response_model=PortfolioDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a portfolio by slug",
)
async def get_portfolio_by_slug(
    slug: str,
    use_case: GetPortfolioUseCase = Depends(get_portfolio_use_case),
) -> PortfolioDetailResponse:
    return _detail_response(await use_case.execute(GetPortfolioQuery(slug=slug)))


@router.get(
    "/category/{category_slug}",
    response_model=CategoryPortfoliosResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List portfolios of a category",
)
async def list_portfolios_by_category(
    category_slug: str,
    use_case: ListPortfoliosByCategoryUseCase = Depends(get_list_by_category_use_case),
) -> CategoryPortfoliosResponse:
    result = await use_case.execute(ListByCategoryQuery(category_slug=category_slug))
    return CategoryPortfoliosResponse(
        category=CategoryItem.from_entity(result.category),
        count=len(result.portfolios),
        portfolios=[PortfolioItem.from_entity(p) for p in result.portfolios],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PortfolioResponse,
    responses=WRITE_ERRORS,
    dependencies=ADMIN_ONLY,
    summary="Create a portfolio",
    description="Multipart form. The first image becomes the header image.",
)
async def create_portfolio(
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    project_type: Optional[str] = Form(None),
    publisher_name: Optional[str] = Form(None),
    project_link: Optional[str] = Form(None),
    tech_category: Optional[str] = Form(None, description="JSON array of category slugs"),
    descriptions: Optional[str] = Form(None, description="JSON array of paragraphs"),
    images_meta: Optional[str] = Form(None, description="JSON array of image slots"),
    images: Optional[list[UploadFile]] = File(None),
    policy: UploadPolicy = Depends(get_upload_policy),
    use_case: CreatePortfolioUseCase = Depends(get_create_portfolio_use_case),
) -> PortfolioResponse:
    files = await read_files(images, policy)
    command = CreatePortfolioCommand(
        fields=PortfolioFields(
            title=(title or "").strip(),
            slug=(slug or "").strip(),
            project_type=(project_type or "").strip(),
            publisher_name=(publisher_name or "").strip(),
            project_link=project_link or None,
        ),
        category_slugs=decode_string_list(tech_category, "tech_category") or [],
        descriptions=decode_string_list(descriptions, "descriptions") or [],
        image_plan=decode_image_plan(images_meta, len(files)) or [],
        files=files,
    )
    portfolio = await use_case.execute(command)
    return PortfolioResponse(
        message="Portfolio created successfully",
        portfolio=PortfolioItem.from_entity(portfolio),
    )


@router.get(
    "/{portfolio_id}",
    response_model=PortfolioDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a portfolio by id",
)
async def get_portfolio(
    portfolio_id: int,
    use_case: GetPortfolioUseCase = Depends(get_portfolio_use_case),
) -> PortfolioDetailResponse:
    return _detail_response(await use_case.execute(GetPortfolioQuery(portfolio_id=portfolio_id)))


@router.put(
    "/{portfolio_id}",
    response_model=PortfolioResponse,
    responses={**WRITE_ERRORS, 404: {"model": ErrorResponse}},
    dependencies=ADMIN_ONLY,
    summary="Update a portfolio",
    description=(
        "Partial multipart update. Omitted fields are unchanged; an empty "
        "project_link clears it. images_meta describes the full desired image "
        "sequence: kept images are matched by id or URL, new slots reference "
        "uploaded files by index."
    ),
)
async def update_portfolio(
    portfolio_id: int,
    request: Request,
    title: Optional[str] = Form(None),
    slug: Optional[str] = Form(None),
    project_type: Optional[str] = Form(None),
    publisher_name: Optional[str] = Form(None),
    tech_category: Optional[str] = Form(None),
    descriptions: Optional[str] = Form(None),
    images_meta: Optional[str] = Form(None),
    images: Optional[list[UploadFile]] = File(None),
    policy: UploadPolicy = Depends(get_upload_policy),
    use_case: UpdatePortfolioUseCase = Depends(get_update_portfolio_use_case),
) -> PortfolioResponse:
    files = await read_files(images, policy)
    command = UpdatePortfolioCommand(
        portfolio_id=portfolio_id,
        changes=PortfolioChanges(
            title=title.strip() if title else None,
            slug=slug.strip() if slug else None,
            project_type=project_type.strip() if project_type else None,
            publisher_name=publisher_name.strip() if publisher_name else None,
            project_link=await submitted_text(request, "project_link"),
        ),
        category_slugs=decode_string_list(tech_category, "tech_category"),
        descriptions=decode_string_list(descriptions, "descriptions"),
        image_plan=decode_image_plan(images_meta, len(files)),
        files=files,
    )
    portfolio = await use_case.execute(command)
    return PortfolioResponse(
        message="Portfolio updated successfully",
        portfolio=PortfolioItem.from_entity(portfolio),
    )


@router.delete(
    "/{portfolio_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    dependencies=ADMIN_ONLY,
    summary="Delete a portfolio",
    description="Removes the portfolio and its rows, then its remote image files.",
)
async def delete_portfolio(
    portfolio_id: int,
    use_case: DeletePortfolioUseCase = Depends(get_delete_portfolio_use_case),
) -> MessageResponse:
    await use_case.execute(DeletePortfolioCommand(portfolio_id=portfolio_id))
    return MessageResponse(message="Portfolio deleted successfully")
