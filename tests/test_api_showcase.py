"""
Tests for the category and portfolio API endpoints.

Tests FastAPI routes with mocked use cases (dependency overrides).
Validates multipart decoding, auth guarding, response envelopes
and error mapping. No database is touched.
"""

import json
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.application.showcase.dtos import (
    CategoryPortfolios,
    GetCarouselQuery,
    PortfolioDetail,
)
from app.domain.admin.entities import AdminIdentity
from app.domain.showcase.entities import (
    Category,
    CategoryUsage,
    Portfolio,
    PortfolioImage,
    PortfolioSummary,
)
from app.domain.showcase.errors import (
    AssetStorageError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    PortfolioNotFoundError,
)
from app.domain.showcase.image_plan import ImageSlot
from app.core.config import settings
from app.interfaces import health
from app.interfaces.admin.dependencies import require_admin
from app.interfaces.resources import get_engine
from app.interfaces.showcase import dependencies as deps
from app.main import app
from app.shared.security.rate_limiting import limiter

client = TestClient(app)

AI = Category(id=1, name="AI", slug="ai", created_at=datetime(2024, 1, 1))
PORTFOLIO = Portfolio(
    id=1,
    title="Alpha",
    slug="alpha",
    project_type="Web App",
    publisher_name="Acme",
    project_link="https://alpha.test",
    categories=(AI,),
    descriptions=("First", "Second"),
    images=(
        PortfolioImage(id=10, image_url="https://cdn.test/a.png", display_order=0, is_header=True),
        PortfolioImage(id=11, image_url="https://cdn.test/b.png", display_order=1),
    ),
)
NEXT = PortfolioSummary(id=2, title="Beta", slug="beta", header_image_url="https://cdn.test/c.png")
PNG = ("a.png", b"\x89PNG....", "image/png")


@pytest.fixture(autouse=True)
def _clean_app():
    limiter.reset()
    yield
    app.dependency_overrides.clear()


def override(dependency, result=None, side_effect=None) -> AsyncMock:
    """Replace a use case dependency with a mock whose execute is awaited."""
    use_case = AsyncMock()
    use_case.execute.return_value = result
    use_case.execute.side_effect = side_effect
    app.dependency_overrides[dependency] = lambda: use_case
    return use_case


def as_admin() -> None:
    app.dependency_overrides[require_admin] = lambda: AdminIdentity(admin_id=1)


class TestHealthAndHeaders:
    def test_health(self) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready_when_database_answers(self, monkeypatch) -> None:
        monkeypatch.setattr(health, "ping", AsyncMock())
        app.dependency_overrides[get_engine] = lambda: object()
        response = client.get("/api/health/ready")
        assert response.status_code == 200
        assert response.json()["database"] == "up"

    def test_not_ready_when_database_is_down(self, monkeypatch) -> None:
        monkeypatch.setattr(health, "ping", AsyncMock(side_effect=OSError("refused")))
        app.dependency_overrides[get_engine] = lambda: object()
        response = client.get("/api/health/ready")
        assert response.status_code == 503
        assert response.json() == {
            "status": "unavailable",
            "version": settings.version,
            "database": "down",
        }

    def test_security_headers_present(self) -> None:
        """All security headers must be present on every response."""
        response = client.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers


class TestCategoryEndpoints:
    """Tests for /api/categories."""

    def test_list(self) -> None:
        override(deps.get_list_categories_use_case, [AI])
        response = client.get("/api/categories")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["categories"][0]["slug"] == "ai"

    def test_with_totals(self) -> None:
        use_case = override(
            deps.get_list_categories_use_case, [CategoryUsage(category=AI, total_projects=3)]
        )
        response = client.get("/api/categories/with-totals")
        assert response.json()["categories"][0]["total_projects"] == 3
        use_case.execute.assert_awaited_once_with(with_usage=True)

    def test_create_requires_token(self) -> None:
        use_case = override(deps.get_create_category_use_case, AI)
        response = client.post("/api/categories", json={"name": "AI"})
        assert response.status_code == 401
        assert response.json()["success"] is False
        use_case.execute.assert_not_awaited()

    def test_create_rejects_bad_token(self) -> None:
        override(deps.get_create_category_use_case, AI)
        response = client.post(
            "/api/categories",
            json={"name": "AI"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401

    def test_create(self) -> None:
        as_admin()
        use_case = override(deps.get_create_category_use_case, AI)
        response = client.post("/api/categories", json={"name": "AI"})
        assert response.status_code == 201
        assert response.json()["message"] == "Category added successfully"
        assert use_case.execute.await_args.args[0].name == "AI"

    def test_create_duplicate(self) -> None:
        as_admin()
        override(
            deps.get_create_category_use_case,
            side_effect=DuplicateSlugError("ai", "Category already exists"),
        )
        response = client.post("/api/categories", json={"name": "AI"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Category already exists"}

    def test_create_missing_name(self) -> None:
        as_admin()
        override(deps.get_create_category_use_case, AI)
        response = client.post("/api/categories", json={})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_delete_in_use(self) -> None:
        as_admin()
        override(deps.get_delete_category_use_case, side_effect=CategoryInUseError(1, 4))
        response = client.delete("/api/categories/1")
        assert response.status_code == 409
        assert response.json()["count"] == 4

    def test_update_unknown(self) -> None:
        as_admin()
        override(deps.get_update_category_use_case, side_effect=CategoryNotFoundError("9"))
        response = client.put("/api/categories/9", json={"name": "X"})
        assert response.status_code == 404


class TestPortfolioReadEndpoints:
    """Tests for the public portfolio routes."""

    def test_list(self) -> None:
        override(deps.get_list_portfolios_use_case, [PORTFOLIO])
        body = client.get("/api/portfolios").json()
        assert body["count"] == 1
        portfolio = body["portfolios"][0]
        assert portfolio["header_image_url"] == "https://cdn.test/a.png"
        assert portfolio["descriptions"] == ["First", "Second"]
        assert [i["is_header"] for i in portfolio["images"]] == [True, False]

    def test_by_id_includes_next(self) -> None:
        use_case = override(deps.get_portfolio_use_case, PortfolioDetail(PORTFOLIO, NEXT))
        body = client.get("/api/portfolios/1").json()
        assert body["portfolio"]["slug"] == "alpha"
        assert body["nextPortfolio"]["slug"] == "beta"
        assert use_case.execute.await_args.args[0].portfolio_id == 1

    def test_by_slug_without_next(self) -> None:
        override(deps.get_portfolio_use_case, PortfolioDetail(PORTFOLIO, None))
        body = client.get("/api/portfolios/slug/alpha").json()
        assert body["nextPortfolio"] is None

    def test_unknown_slug(self) -> None:
        override(deps.get_portfolio_use_case, side_effect=PortfolioNotFoundError("nope"))
        response = client.get("/api/portfolios/slug/nope")
        assert response.status_code == 404
        assert response.json()["message"] == "Portfolio not found"

    def test_non_numeric_id(self) -> None:
        override(deps.get_portfolio_use_case, PortfolioDetail(PORTFOLIO, None))
        assert client.get("/api/portfolios/abc").status_code == 400

    def test_carousel_not_shadowed_by_id_route(self) -> None:
        use_case = override(deps.get_carousel_use_case, [NEXT])
        body = client.get("/api/portfolios/carousel?limit=3").json()
        assert body["count"] == 1
        use_case.execute.assert_awaited_once_with(GetCarouselQuery(limit=3))

    def test_by_category(self) -> None:
        override(deps.get_list_by_category_use_case, CategoryPortfolios(AI, [PORTFOLIO]))
        body = client.get("/api/portfolios/category/ai").json()
        assert body["category"]["slug"] == "ai"
        assert body["count"] == 1

    def test_by_unknown_category(self) -> None:
        override(deps.get_list_by_category_use_case, side_effect=CategoryNotFoundError("x"))
        assert client.get("/api/portfolios/category/x").status_code == 404


class TestPortfolioWriteEndpoints:
    """Tests for the multipart create/update routes and delete."""

    def test_create_decodes_form(self) -> None:
        as_admin()
        use_case = override(deps.get_create_portfolio_use_case, PORTFOLIO)
        meta = [{"isNew": True, "fileIndex": 1, "altText": "Cover"}, {"isNew": True, "fileIndex": 0}]

        response = client.post(
            "/api/portfolios",
            data={
                "title": " Alpha ",
                "slug": "alpha",
                "project_type": "Web App",
                "publisher_name": "Acme",
                "tech_category": json.dumps(["ai", "web"]),
                "descriptions": json.dumps(["First", " ", "Second"]),
                "images_meta": json.dumps(meta),
            },
            files=[("images", PNG), ("images", ("b.jpg", b"JPEG", "image/jpeg"))],
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Portfolio created successfully"
        command = use_case.execute.await_args.args[0]
        assert command.fields.title == "Alpha"
        assert command.category_slugs == ["ai", "web"]
        assert command.descriptions == ["First", "Second"]
        assert command.image_plan == [
            ImageSlot(is_new=True, file_index=1, alt_text="Cover"),
            ImageSlot(is_new=True, file_index=0),
        ]
        assert [f.file_name for f in command.files] == ["a.png", "b.jpg"]

    def test_files_without_meta_are_all_new(self) -> None:
        as_admin()
        use_case = override(deps.get_create_portfolio_use_case, PORTFOLIO)
        client.post(
            "/api/portfolios",
            data={"title": "Alpha", "slug": "alpha", "project_type": "Web", "publisher_name": "Acme"},
            files=[("images", PNG), ("images", PNG)],
        )
        command = use_case.execute.await_args.args[0]
        assert command.image_plan == [
            ImageSlot(is_new=True, file_index=0),
            ImageSlot(is_new=True, file_index=1),
        ]

    def test_malformed_json_rejected(self) -> None:
        as_admin()
        use_case = override(deps.get_create_portfolio_use_case, PORTFOLIO)
        response = client.post(
            "/api/portfolios",
            data={"title": "Alpha", "slug": "alpha", "tech_category": "[ai,"},
        )
        assert response.status_code == 400
        assert "tech_category" in response.json()["message"]
        use_case.execute.assert_not_awaited()

    def test_unsupported_file_type_rejected(self) -> None:
        as_admin()
        use_case = override(deps.get_create_portfolio_use_case, PORTFOLIO)
        response = client.post(
            "/api/portfolios",
            data={"title": "Alpha"},
            files=[("images", ("x.exe", b"MZ", "application/octet-stream"))],
        )
        assert response.status_code == 400
        use_case.execute.assert_not_awaited()

    def test_too_many_files_rejected(self) -> None:
        as_admin()
        override(deps.get_create_portfolio_use_case, PORTFOLIO)
        files = [("images", PNG)] * 12
        response = client.post("/api/portfolios", data={"title": "Alpha"}, files=files)
        assert response.status_code == 400

    def test_upload_failure_is_500(self) -> None:
        as_admin()
        override(
            deps.get_create_portfolio_use_case,
            side_effect=AssetStorageError("upload", "HTTP 503"),
        )
        response = client.post(
            "/api/portfolios",
            data={"title": "Alpha", "slug": "alpha", "project_type": "Web", "publisher_name": "Acme"},
            files=[("images", PNG)],
        )
        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_create_requires_token(self) -> None:
        use_case = override(deps.get_create_portfolio_use_case, PORTFOLIO)
        response = client.post("/api/portfolios", data={"title": "Alpha"})
        assert response.status_code == 401
        use_case.execute.assert_not_awaited()

    def test_partial_update(self) -> None:
        """Omitted parts stay None; an empty project_link is passed through."""
        as_admin()
        use_case = override(deps.get_update_portfolio_use_case, PORTFOLIO)

        response = client.put("/api/portfolios/1", data={"title": "New", "project_link": ""})

        assert response.status_code == 200
        command = use_case.execute.await_args.args[0]
        assert command.portfolio_id == 1
        assert command.changes.title == "New"
        assert command.changes.slug is None
        assert command.changes.project_link == ""
        assert command.category_slugs is None
        assert command.descriptions is None
        assert command.image_plan is None

    def test_update_with_kept_and_new_images(self) -> None:
        as_admin()
        use_case = override(deps.get_update_portfolio_use_case, PORTFOLIO)
        meta = [
            {"isNew": False, "id": 11, "url": "https://cdn.test/b.png"},
            {"isNew": True, "fileIndex": 0},
        ]
        client.put(
            "/api/portfolios/1",
            data={"images_meta": json.dumps(meta)},
            files=[("images", PNG)],
        )
        command = use_case.execute.await_args.args[0]
        assert command.image_plan == [
            ImageSlot(is_new=False, image_id=11, url="https://cdn.test/b.png"),
            ImageSlot(is_new=True, file_index=0),
        ]
        assert len(command.files) == 1

    def test_delete(self) -> None:
        as_admin()
        use_case = override(deps.get_delete_portfolio_use_case)
        response = client.delete("/api/portfolios/5")
        assert response.json() == {"success": True, "message": "Portfolio deleted successfully"}
        assert use_case.execute.await_args.args[0].portfolio_id == 5
