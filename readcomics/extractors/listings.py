"""
Listing Extractors

Extraction routines for the list pages of the site: latest updates,
hot updates, popular comics and category listings.

Each routine selects one raw sequence per field, aligns them by index and
builds records until the first item whose urls cannot be derived.

Usage:
    from readcomics.extractors.listings import PopularExtractor

    extractor = PopularExtractor(logger)
    result = extractor.extract(home_page_html)
    if result.success:
        for comic in result.data:
            print(comic.name, comic.url)
"""

from typing import List, Optional

from readcomics.extractors import selectors as sel
from readcomics.extractors.aligner import align, align_records
from readcomics.extractors.base import BaseExtractor
from readcomics.extractors.cache import HotUpdatesCache
from readcomics.extractors.document import parse_document, select_attrs, select_rows, select_texts
from readcomics.extractors.urls import absolutize, issue_number_label, thumbnail_from_link
from readcomics.models.comic import ComicSummary, ComicUpdate
from readcomics.services.logging_service import LoggingService


class LatestUpdatesExtractor(BaseExtractor):
    """Latest released issues, one entry per comic."""

    @property
    def name(self) -> str:
        return "latest_updates"

    @property
    def log_tag(self) -> str:
        return "[Latest-Comic-Updates-Error]"

    def _extract_impl(self, html: str) -> List[ComicUpdate]:
        doc = parse_document(html)
        issue_links = select_attrs(doc, sel.LATEST_ISSUE_LINKS, sel.HREF)
        comic_titles = select_texts(doc, sel.LATEST_COMIC_DETAILS)
        comic_urls = select_attrs(doc, sel.LATEST_COMIC_DETAILS, sel.HREF)

        def build(issue_link: str, comic_name: str, comic_url: str) -> Optional[ComicUpdate]:
            thumbnail_url = thumbnail_from_link(comic_url)
            added_issue_link = absolutize(issue_link)
            if thumbnail_url is None or added_issue_link is None:
                return None
            return ComicUpdate(
                name=comic_name,
                url=comic_url,
                thumbnail_url=thumbnail_url,
                added_issue_link=added_issue_link,
                added_issue_title_number=issue_number_label(added_issue_link),
            )

        return align_records(
            align(issue_links, comic_titles, comic_urls),
            build,
            on_abort=self._log_abort("comic link")
        )


class HotUpdatesExtractor(BaseExtractor):
    """
    Hot updates from the home page schedule.

    Results accumulate in a HotUpdatesCache: every call appends what it
    parsed and returns everything gathered so far. Call clear() on the
    cache to start over.
    """

    def __init__(self, logger: Optional[LoggingService] = None, cache: Optional[HotUpdatesCache] = None):
        super().__init__(logger)
        self.cache = cache if cache is not None else HotUpdatesCache()

    @property
    def name(self) -> str:
        return "hot_updates"

    @property
    def log_tag(self) -> str:
        return "[HotComic-Updates-Parsing-Error]"

    def parse(self, html: str) -> List[ComicUpdate]:
        """Parse one page without touching the cache."""
        doc = parse_document(html)
        thumbnails = select_attrs(doc, sel.HOT_UPDATES_THUMBNAILS, sel.SRC)
        comic_names = select_texts(doc, sel.HOT_UPDATES_NAMES)
        issue_links = select_attrs(doc, sel.HOT_UPDATES_ISSUES, sel.HREF)
        issue_numbers = select_texts(doc, sel.HOT_UPDATES_ISSUES)
        comic_links = select_attrs(doc, sel.HOT_UPDATES_COMIC_LINKS, sel.HREF)

        def build(
            comic_name: str,
            thumbnail: str,
            issue_link: str,
            issue_number: str,
            comic_link: str
        ) -> Optional[ComicUpdate]:
            thumbnail_url = absolutize(thumbnail)
            added_issue_link = absolutize(issue_link)
            comic_url = absolutize(comic_link)
            if thumbnail_url is None or added_issue_link is None or comic_url is None:
                return None
            return ComicUpdate(
                name=comic_name,
                url=comic_url,
                thumbnail_url=thumbnail_url,
                added_issue_link=added_issue_link,
                added_issue_title_number=issue_number,
            )

        return align_records(
            align(comic_names, thumbnails, issue_links, issue_numbers, comic_links),
            build,
            on_abort=self._log_abort("hot update url")
        )

    def _extract_impl(self, html: str) -> List[ComicUpdate]:
        return self.cache.extend(self.parse(html))


class PopularExtractor(BaseExtractor):
    """Popular comics list on the home page."""

    @property
    def name(self) -> str:
        return "popular_comics"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Popular-Comics-Error]"

    def _extract_impl(self, html: str) -> List[ComicSummary]:
        doc = parse_document(html)
        comic_links = select_attrs(doc, sel.POPULAR_COMICS, sel.HREF)
        comic_names = select_texts(doc, sel.POPULAR_COMICS)
        thumbnail_urls = [thumbnail_from_link(link) for link in comic_links]

        def build(comic_name: str, comic_link: str, thumbnail_url: Optional[str]) -> Optional[ComicSummary]:
            if thumbnail_url is None:
                self.logger.log(f"[PopularComics] thumbnail url for comic {comic_name} was null")
                return None
            return ComicSummary(name=comic_name, url=comic_link, thumbnail_url=thumbnail_url)

        return align_records(align(comic_names, comic_links, thumbnail_urls), build)


class CategoryExtractor(BaseExtractor):
    """
    Comics listed under a publisher category.

    By default names, links and thumbnails are selected across the whole
    page and aligned by index. When row_selector is given, each field is
    instead read inside its own row container, which keeps fields of one
    entry together even if another entry lacks an image.
    """

    def __init__(self, logger: Optional[LoggingService] = None, row_selector: Optional[str] = None):
        super().__init__(logger)
        self.row_selector = row_selector

    @property
    def name(self) -> str:
        return "comics_by_category"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Comics-By-Category-Error]"

    def _build(self, comic_name: Optional[str], comic_link: Optional[str], thumbnail: Optional[str]) -> Optional[ComicSummary]:
        comic_url = absolutize(comic_link)
        thumbnail_url = absolutize(thumbnail)
        if not comic_name or comic_url is None or thumbnail_url is None:
            return None
        return ComicSummary(name=comic_name, url=comic_url, thumbnail_url=thumbnail_url)

    def _extract_impl(self, html: str) -> List[ComicSummary]:
        doc = parse_document(html)
        on_abort = self._log_abort("category entry")

        if self.row_selector:
            rows = (
                (row["name"], row["link"], row["thumbnail"])
                for row in select_rows(doc, self.row_selector, {
                    "name": ("a.chart-title", None),
                    "link": ("div.media-left > a[href]", sel.HREF),
                    "thumbnail": ("div.media-left > a[href] > img[src]", sel.SRC),
                })
            )
            return align_records(rows, self._build, on_abort=on_abort)

        comic_names = select_texts(doc, sel.CATEGORY_COMIC_NAMES)
        comic_links = select_attrs(doc, sel.CATEGORY_COMIC_LINKS, sel.HREF)
        thumbnails = select_attrs(doc, sel.CATEGORY_THUMBNAILS, sel.SRC)
        return align_records(align(comic_names, comic_links, thumbnails), self._build, on_abort=on_abort)
