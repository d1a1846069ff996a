"""
Unit Tests for Data Models

Tests for Pydantic models: ComicSummary, ComicUpdate, ComicDetails,
ComicStatus, ComicCategory, ExtractionResult
"""

import pytest
from pydantic import ValidationError
from readcomics.core.exceptions import MissingFieldError
from readcomics.models import (
    ComicCategory,
    ComicDetails,
    ComicStatus,
    ComicSummary,
    ComicUpdate,
    ExtractionResult,
    SearchResults,
)


class TestComicStatus:
    """Tests for status derivation from the details table text."""

    def test_ongoing_text(self):
        assert ComicStatus.from_text("Ongoing") == ComicStatus.ONGOING

    def test_ongoing_substring(self):
        assert ComicStatus.from_text("Status: Ongoing series") == ComicStatus.ONGOING

    def test_match_is_case_sensitive(self):
        """Lowercase 'ongoing' does not count."""
        assert ComicStatus.from_text("ongoing") == ComicStatus.COMPLETED

    def test_anything_else_is_completed(self):
        assert ComicStatus.from_text("Completed") == ComicStatus.COMPLETED
        assert ComicStatus.from_text("") == ComicStatus.COMPLETED


class TestComicSummary:
    """Tests for ComicSummary and ComicUpdate."""

    def test_valid_summary(self):
        comic = ComicSummary(
            name="Batman (2016-)",
            url="https://readcomicsonline.ru/comic/batman-2016",
            thumbnail_url="https://readcomicsonline.ru/uploads/manga/batman-2016/cover/cover_250x350.jpg"
        )
        assert comic.name == "Batman (2016-)"

    def test_summary_is_frozen(self):
        comic = ComicSummary(name="a", url="https://x/comic/a", thumbnail_url="https://x/a.jpg")
        with pytest.raises(ValidationError):
            comic.name = "b"

    def test_summary_missing_url(self):
        with pytest.raises(ValidationError) as exc_info:
            ComicSummary(name="a", thumbnail_url="https://x/a.jpg")

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("url",) for error in errors)

    def test_update_extends_summary(self):
        update = ComicUpdate(
            name="X-Men (2021-)",
            url="https://readcomicsonline.ru/comic/xmen-2021",
            thumbnail_url="https://readcomicsonline.ru/uploads/manga/xmen-2021/cover/cover_250x350.jpg",
            added_issue_link="https://readcomicsonline.ru/comic/xmen-2021/14",
            added_issue_title_number="#14",
        )
        assert isinstance(update, ComicSummary)
        assert update.added_issue_title_number == "#14"


class TestComicDetails:
    """Tests for ComicDetails."""

    def test_optional_fields_default_to_none(self):
        details = ComicDetails(
            title="X-Men (2021-)",
            summary="...",
            status=ComicStatus.ONGOING,
            release_year=2021,
            type="Marvel",
        )
        assert details.category is None
        assert details.cover_url is None
        assert details.chapters == []

    def test_status_serializes_as_value(self):
        details = ComicDetails(
            title="t", summary="s", status=ComicStatus.COMPLETED, release_year=2020, type="DC"
        )
        assert details.model_dump(mode="json")["status"] == "completed"


class TestSearchResults:
    """Tests for the search JSON payload model."""

    def test_parse_payload(self):
        results = SearchResults.model_validate_json(
            '{"suggestions": [{"value": "Batman (2016-)", "data": "batman-2016"}]}'
        )
        assert results.suggestions[0].data == "batman-2016"

    def test_missing_suggestions_is_empty(self):
        assert SearchResults.model_validate_json("{}").suggestions == []


class TestComicCategory:
    """Tests for the static category table."""

    def test_all_categories_present(self):
        assert len(ComicCategory) == 24

    def test_urls_live_under_category_listing(self):
        for category in ComicCategory:
            assert category.url.startswith("https://readcomicsonline.ru/comic-list/category/")

    def test_display_name_and_url(self):
        assert ComicCategory.MARVEL.display_name == "Marvel"
        assert ComicCategory.MARVEL.url.endswith("/marvel-comics")

    @pytest.mark.parametrize("name", ["DARK_HORSE", "dark-horse", "Dark Horse", " dark_horse "])
    def test_from_name_variants(self, name):
        assert ComicCategory.from_name(name) == ComicCategory.DARK_HORSE

    def test_from_name_by_display_name(self):
        assert ComicCategory.from_name("dc comics") == ComicCategory.DC

    def test_from_name_unknown(self):
        assert ComicCategory.from_name("not-a-publisher") is None


class TestExtractionResult:
    """Tests for the success/failure container."""

    def test_ok_with_list_records_count(self):
        result = ExtractionResult.ok([1, 2, 3], source="popular_comics")
        assert result.success is True
        assert result.data == [1, 2, 3]
        assert result.error is None
        assert result.error_kind is None
        assert result.metadata["count"] == 3
        assert result.source == "popular_comics"

    def test_fail_keeps_kind_and_exception(self):
        error = MissingFieldError("title", "h2.listmanga-header")
        result = ExtractionResult.fail(error, kind="schema", source="comic_details")
        assert result.success is False
        assert result.error_kind == "schema"
        assert "title" in result.error
        assert result.exception is error

    def test_exception_not_serialized(self):
        result = ExtractionResult.fail(OSError("boom"), kind="transport")
        assert "exception" not in result.model_dump()

    def test_unwrap_success(self):
        assert ExtractionResult.ok(["a"]).unwrap() == ["a"]

    def test_unwrap_failure_reraises(self):
        result = ExtractionResult.fail(ConnectionError("refused"), kind="transport")
        with pytest.raises(ConnectionError):
            result.unwrap()

    def test_empty_message_falls_back_to_class_name(self):
        result = ExtractionResult.fail(TimeoutError(), kind="transport")
        assert result.error == "TimeoutError"

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            ExtractionResult(success=False, error="x", error_kind="network")

    def test_str(self):
        assert "success=True" in str(ExtractionResult.ok([]))
        assert "kind=schema" in str(ExtractionResult.fail(ValueError("x"), kind="schema"))
