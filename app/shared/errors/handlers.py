"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error body is ``{"success": false, "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.admin.errors import (
    AdminDomainError,
    AdminNotFoundError,
    AdminValidationError,
    AuthenticationError,
    InvalidCredentialsError,
)
from app.domain.showcase.errors import (
    AssetStorageError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    InvalidImagePlanError,
    PortfolioNotFoundError,
    ShowcaseDomainError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = {"success": False, "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed requests (missing fields, bad types)."""
        message = _describe_validation(exc)
        logger.warning("Request validation failed: %s", message)
        return _error_response(HTTP_400, message)

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Validation error: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(DuplicateSlugError)
    async def handle_duplicate_slug(
        _request: Request, exc: DuplicateSlugError
    ) -> JSONResponse:
        logger.warning("Duplicate slug: %s", exc.slug)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(InvalidImagePlanError)
    async def handle_invalid_image_plan(
        _request: Request, exc: InvalidImagePlanError
    ) -> JSONResponse:
        logger.warning("Invalid image plan: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(CategoryInUseError)
    async def handle_category_in_use(
        _request: Request, exc: CategoryInUseError
    ) -> JSONResponse:
        """Deleting a category still linked to portfolios."""
        logger.warning("Category %s still used by %d portfolio(s)", exc.category_id, exc.count)
        return _error_response(HTTP_409, exc.message, count=exc.count)

    @app.exception_handler(PortfolioNotFoundError)
    async def handle_portfolio_not_found(
        _request: Request, exc: PortfolioNotFoundError
    ) -> JSONResponse:
        logger.warning("Portfolio not found: %s", exc.reference)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(CategoryNotFoundError)
    async def handle_category_not_found(
        _request: Request, exc: CategoryNotFoundError
    ) -> JSONResponse:
        logger.warning("Category not found: %s", exc.reference)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(AssetStorageError)
    async def handle_asset_storage(
        _request: Request, exc: AssetStorageError
    ) -> JSONResponse:
        """Remote storage failed before commit; the transaction was rolled back."""
        logger.error("Asset storage failure during %s: %s", exc.operation, exc.reason)
        return _error_response(HTTP_500, "Failed to store images")

    @app.exception_handler(ShowcaseDomainError)
    async def handle_showcase_domain(
        _request: Request, exc: ShowcaseDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled showcase domain errors."""
        logger.error("Unhandled showcase domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(
        _request: Request, exc: InvalidCredentialsError
    ) -> JSONResponse:
        logger.warning("Rejected admin login")
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        _request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        logger.warning("Authentication failed: %s", exc.message)
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(AdminNotFoundError)
    async def handle_admin_not_found(
        _request: Request, exc: AdminNotFoundError
    ) -> JSONResponse:
        logger.warning("Admin not found: %s", exc.admin_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(AdminValidationError)
    async def handle_admin_validation(
        _request: Request, exc: AdminValidationError
    ) -> JSONResponse:
        logger.warning("Admin validation error: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(AdminDomainError)
    async def handle_admin_domain(
        _request: Request, exc: AdminDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled admin domain errors."""
        logger.error("Unhandled admin domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(SQLAlchemyError)
    async def handle_database(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error: %s", type(exc).__name__, exc_info=exc)
        return _error_response(HTTP_500, "Database error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
