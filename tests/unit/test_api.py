"""
Unit Tests for the HTTP API

Routes are exercised with FastAPI's TestClient against a stubbed comics
client, so only status mapping and serialization are under test.
"""

import pytest
import requests
from unittest.mock import AsyncMock, Mock
from fastapi.testclient import TestClient

from api.middleware import limiter
from main import create_app
from readcomics.client import ReadComicsClient
from readcomics.core.config import settings
from readcomics.core.exceptions import MissingFieldError
from readcomics.models import ComicCategory, ComicDetails, ComicStatus, ComicSummary, ExtractionResult


BATMAN = ComicSummary(
    name="Batman (2016-)",
    url="https://readcomicsonline.ru/comic/batman-2016",
    thumbnail_url="https://readcomicsonline.ru/uploads/manga/batman-2016/cover/cover_250x350.jpg",
)


@pytest.fixture
def comics_client():
    client = Mock(spec=ReadComicsClient)
    for method in (
        "search_for_comic",
        "get_latest_comics",
        "get_popular_comics",
        "get_hot_comic_updates",
        "get_comics_by_category",
        "get_weekly_comic_packs",
        "get_comic_details",
        "get_chapter_pages",
    ):
        setattr(client, method, AsyncMock(return_value=ExtractionResult.ok([])))
    return client


@pytest.fixture
def api(comics_client):
    app = create_app(client=comics_client, enable_rate_limiting=False)
    with TestClient(app) as test_client:
        yield test_client


class TestStatusRoutes:
    """Tests for root and health."""

    def test_root(self, api):
        response = api.get("/")
        assert response.status_code == 200
        assert "running" in response.json()["status"]

    def test_health(self, api):
        response = api.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_process_time_header(self, api):
        assert "X-Process-Time" in api.get("/health").headers


class TestMiddleware:
    """Tests for CORS and the rate limit protecting the comic site."""

    def test_cors_allows_get(self, api):
        response = api.options("/popular", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        })
        assert response.status_code == 200

    def test_cors_rejects_post(self, api):
        response = api.options("/popular", headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        })
        assert response.status_code == 400

    def test_rate_limit_stops_requests_before_the_client(self, comics_client):
        app = create_app(client=comics_client)
        assert app.state.limiter is limiter
        allowed = int(settings.api_rate_limit.split("/")[0])

        limiter.reset()
        try:
            with TestClient(app) as test_client:
                statuses = [test_client.get("/popular").status_code for _ in range(allowed + 1)]
        finally:
            limiter.reset()

        assert statuses[:allowed] == [200] * allowed
        assert statuses[-1] == 429
        assert comics_client.get_popular_comics.await_count == allowed


class TestComicRoutes:
    """Tests for routes returning records."""

    def test_popular(self, api, comics_client):
        comics_client.get_popular_comics.return_value = ExtractionResult.ok([BATMAN])

        response = api.get("/popular")

        assert response.status_code == 200
        assert response.json() == [BATMAN.model_dump()]

    def test_search_passes_term(self, api, comics_client):
        api.get("/search", params={"q": "batman beyond"})
        comics_client.search_for_comic.assert_awaited_once_with("batman beyond")

    def test_latest_default_page(self, api, comics_client):
        api.get("/latest")
        comics_client.get_latest_comics.assert_awaited_once_with(1)

    def test_latest_rejects_page_zero(self, api, comics_client):
        response = api.get("/latest", params={"page": 0})
        assert response.status_code == 422
        comics_client.get_latest_comics.assert_not_awaited()

    def test_details_serializes_status(self, api, comics_client):
        comics_client.get_comic_details.return_value = ExtractionResult.ok(ComicDetails(
            title="X-Men (2021-)",
            summary="...",
            status=ComicStatus.ONGOING,
            release_year=2021,
            type="Marvel",
        ))

        response = api.get("/details", params={"url": "https://readcomicsonline.ru/comic/xmen-2021"})

        assert response.status_code == 200
        assert response.json()["status"] == "ongoing"

    def test_details_requires_url(self, api):
        assert api.get("/details").status_code == 422

    def test_clear_hot_updates(self, api, comics_client):
        response = api.delete("/hot")
        assert response.status_code == 204
        comics_client.clear_hot_updates.assert_called_once()


class TestCategoryRoutes:
    """Tests for category routes."""

    def test_list_categories(self, api):
        categories = api.get("/categories").json()
        assert len(categories) == 24
        assert categories[0] == {
            "name": "MARVEL",
            "display_name": "Marvel",
            "url": "https://readcomicsonline.ru/comic-list/category/marvel-comics",
        }

    def test_category_by_slug(self, api, comics_client):
        api.get("/categories/dark-horse", params={"page": 2})
        comics_client.get_comics_by_category.assert_awaited_once_with(2, ComicCategory.DARK_HORSE)

    def test_unknown_category(self, api, comics_client):
        response = api.get("/categories/nope")
        assert response.status_code == 404
        comics_client.get_comics_by_category.assert_not_awaited()


class TestFailureMapping:
    """Tests for failure kind -> HTTP status."""

    @pytest.mark.parametrize("error,kind,status_code", [
        (requests.ConnectionError("refused"), "transport", 502),
        (MissingFieldError("title"), "schema", 422),
        (ValueError("Not an absolute url"), "input", 400),
    ])
    def test_kind_to_status(self, api, comics_client, error, kind, status_code):
        comics_client.get_chapter_pages.return_value = ExtractionResult.fail(error, kind=kind, source="chapter_pages")

        response = api.get("/pages", params={"url": "https://readcomicsonline.ru/comic/xmen-2021/1"})

        assert response.status_code == status_code
        detail = response.json()["detail"]
        assert detail["kind"] == kind
        assert detail["source"] == "chapter_pages"
