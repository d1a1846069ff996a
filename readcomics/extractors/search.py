"""
Search Extractor

The search endpoint answers with JSON rather than HTML:

    {"suggestions": [{"value": "Batman (2016-)", "data": "batman-2016"}, ...]}

Each suggestion's slug becomes a comic summary with urls built from it.
"""

from typing import List

from pydantic import ValidationError

from readcomics.core.exceptions import ExtractionError
from readcomics.extractors.base import BaseExtractor
from readcomics.extractors.urls import comic_url_from_slug, thumbnail_from_slug
from readcomics.models.comic import ComicSummary, SearchResults


class SearchExtractor(BaseExtractor):

    @property
    def name(self) -> str:
        return "search"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Search-Comic-Error]"

    def _extract_impl(self, html: str) -> List[ComicSummary]:
        try:
            results = SearchResults.model_validate_json(html)
        except ValidationError as e:
            raise ExtractionError(f"Unexpected search payload: {e.error_count()} validation error(s)") from e

        return [
            ComicSummary(
                name=suggestion.data,
                url=comic_url_from_slug(suggestion.data),
                thumbnail_url=thumbnail_from_slug(suggestion.data),
            )
            for suggestion in results.suggestions
        ]
