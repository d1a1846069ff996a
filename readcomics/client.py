"""
Read Comics Client

Main entry point: fetches pages from the site and hands them to the
extractors. Every call returns an ExtractionResult and never raises for
network or layout problems.

Fetching and parsing both run on worker threads, so the calling event
loop stays free while several requests are in flight.

Usage:
    import asyncio
    from readcomics.client import ReadComicsClient
    from readcomics.services.logging_service import LoggingService

    async def main():
        with ReadComicsClient(logger=LoggingService()) as client:
            result = await client.get_hot_comic_updates()
            if result.success:
                for update in result.data:
                    print(update.name, update.added_issue_title_number)
            else:
                print(result.error_kind, result.error)

    asyncio.run(main())
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from urllib.parse import quote_plus, urljoin

import validators

from readcomics.core.config import Settings, settings as default_settings
from readcomics.extractors.base import BaseExtractor
from readcomics.extractors.cache import HotUpdatesCache
from readcomics.extractors.details import ChapterPagesExtractor, DetailsExtractor
from readcomics.extractors.listings import (
    CategoryExtractor,
    HotUpdatesExtractor,
    LatestUpdatesExtractor,
    PopularExtractor,
)
from readcomics.extractors.search import SearchExtractor
from readcomics.extractors.urls import weekly_pack_label
from readcomics.extractors.weekly import WeeklyLinksExtractor, WeeklyPackExtractor
from readcomics.models.categories import ComicCategory
from readcomics.models.comic import WeeklyPack
from readcomics.models.extraction_result import ExtractionResult
from readcomics.services.http_client import HttpClient
from readcomics.services.logging_service import LoggingService, NoOpLoggingService


class ReadComics(ABC):
    """
    Public interface of the comics client.

    Implement it to provide a completely different backend.
    """

    @abstractmethod
    async def search_for_comic(self, search_term: str) -> ExtractionResult:
        """Search results as a list of ComicSummary."""
        pass

    @abstractmethod
    async def get_latest_comics(self, page_number: int) -> ExtractionResult:
        """Latest released issues as a list of ComicUpdate."""
        pass

    @abstractmethod
    async def get_popular_comics(self) -> ExtractionResult:
        """Popular comics as a list of ComicSummary."""
        pass

    @abstractmethod
    async def get_hot_comic_updates(self) -> ExtractionResult:
        """Recently updated comics with their added issue, as a list of ComicUpdate."""
        pass

    @abstractmethod
    async def get_comics_by_category(self, page_number: int, category: ComicCategory) -> ExtractionResult:
        """One page of a category listing as a list of ComicSummary."""
        pass

    @abstractmethod
    async def get_weekly_comic_packs(self) -> ExtractionResult:
        """Weekly upload packs as a list of WeeklyPack."""
        pass

    @abstractmethod
    async def get_comic_details(self, comic_url: str) -> ExtractionResult:
        """ComicDetails for an absolute comic url."""
        pass

    @abstractmethod
    async def get_chapter_pages(self, chapter_url: str) -> ExtractionResult:
        """Page images of a chapter as a list of ComicPage."""
        pass


class ReadComicsClient(ReadComics):
    """Default implementation of ReadComics backed by requests and BeautifulSoup."""

    def __init__(
        self,
        logger: Optional[LoggingService] = None,
        http_client: Optional[HttpClient] = None,
        settings: Optional[Settings] = None,
        hot_updates_cache: Optional[HotUpdatesCache] = None
    ):
        """
        Initialize the client.

        Args:
            logger: Logging sink shared with the extractors
            http_client: Fetcher exposing fetch(url) -> str
            settings: Settings object (defaults to global settings)
            hot_updates_cache: Store for accumulated hot updates
        """
        self.settings = settings or default_settings
        self.logger = logger or NoOpLoggingService()
        self.http = http_client or HttpClient(self.settings)
        self.base_url = self.settings.base_url

        self.search_extractor = SearchExtractor(self.logger)
        self.latest_extractor = LatestUpdatesExtractor(self.logger)
        self.popular_extractor = PopularExtractor(self.logger)
        self.hot_extractor = HotUpdatesExtractor(self.logger, cache=hot_updates_cache)
        self.category_extractor = CategoryExtractor(self.logger)
        self.weekly_links_extractor = WeeklyLinksExtractor(self.logger)
        self.weekly_pack_extractor = WeeklyPackExtractor(self.logger)
        self.details_extractor = DetailsExtractor(self.logger)
        self.pages_extractor = ChapterPagesExtractor(self.logger)

    @property
    def hot_updates_cache(self) -> HotUpdatesCache:
        return self.hot_extractor.cache

    def clear_hot_updates(self) -> None:
        """Forget every hot update accumulated so far."""
        self.hot_extractor.cache.clear()

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _fetch(self, url: str) -> str:
        return await asyncio.to_thread(self.http.fetch, url)

    def _transport_failure(self, extractor: BaseExtractor, exc: OSError, url: str) -> ExtractionResult:
        self.logger.error(extractor.log_tag, exc)
        return ExtractionResult.fail(exc, kind="transport", source=extractor.name, url=url)

    async def _fetch_and_extract(self, url: str, extractor: BaseExtractor) -> ExtractionResult:
        try:
            body = await self._fetch(url)
        except OSError as e:
            return self._transport_failure(extractor, e, url)
        result = await extractor.aextract(body)
        result.metadata.setdefault("url", url)
        return result

    def _reject_url(self, url: str, extractor: BaseExtractor) -> Optional[ExtractionResult]:
        """Input failure for anything that is not an absolute http(s) url."""
        if isinstance(url, str) and validators.url(url):
            return None
        error = ValueError(f"Not an absolute url: {url!r}")
        self.logger.error(extractor.log_tag, error)
        return ExtractionResult.fail(error, kind="input", source=extractor.name)

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    async def search_for_comic(self, search_term: str) -> ExtractionResult:
        if not search_term or not search_term.strip():
            return ExtractionResult.ok([], source=self.search_extractor.name)

        # Whitespace runs collapse to a single "+"; reserved characters are percent-encoded
        query = quote_plus(" ".join(search_term.split()))
        search_url = f"{urljoin(self.base_url, 'search')}?query={query}"
        return await self._fetch_and_extract(search_url, self.search_extractor)

    async def get_latest_comics(self, page_number: int) -> ExtractionResult:
        if page_number > self.settings.max_latest_page:
            return ExtractionResult.ok([], source=self.latest_extractor.name)

        latest_url = f"{urljoin(self.base_url, 'latest-release')}?page={page_number}"
        return await self._fetch_and_extract(latest_url, self.latest_extractor)

    async def get_popular_comics(self) -> ExtractionResult:
        return await self._fetch_and_extract(self.base_url, self.popular_extractor)

    async def get_hot_comic_updates(self) -> ExtractionResult:
        return await self._fetch_and_extract(self.base_url, self.hot_extractor)

    async def get_comics_by_category(self, page_number: int, category: ComicCategory) -> ExtractionResult:
        category_url = f"{category.url}?page={page_number}"
        return await self._fetch_and_extract(category_url, self.category_extractor)

    async def get_weekly_comic_packs(self) -> ExtractionResult:
        """
        Fetch the home page for the weekly upload links, then every pack.

        A failure on any page fails the whole call.
        """
        links_result = await self._fetch_and_extract(self.base_url, self.weekly_links_extractor)
        if not links_result.success:
            return links_result

        packs: List[WeeklyPack] = []
        for link in links_result.data:
            pack_result = await self._fetch_and_extract(link, self.weekly_pack_extractor)
            if not pack_result.success:
                return pack_result
            packs.append(WeeklyPack(label=weekly_pack_label(link), comics=pack_result.data))

        return ExtractionResult.ok(packs, source="weekly_packs")

    async def get_comic_details(self, comic_url: str) -> ExtractionResult:
        rejected = self._reject_url(comic_url, self.details_extractor)
        if rejected is not None:
            return rejected
        return await self._fetch_and_extract(comic_url, self.details_extractor)

    async def get_chapter_pages(self, chapter_url: str) -> ExtractionResult:
        rejected = self._reject_url(chapter_url, self.pages_extractor)
        if rejected is not None:
            return rejected
        return await self._fetch_and_extract(chapter_url, self.pages_extractor)

    # =========================================================================
    # RESOURCES
    # =========================================================================

    def close(self) -> None:
        close = getattr(self.http, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "ReadComicsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
