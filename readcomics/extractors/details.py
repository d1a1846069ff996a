"""
Details Extractors

Series page details and chapter reader pages.
"""

from typing import List, Optional

from readcomics.core.exceptions import MalformedFieldError
from readcomics.extractors import selectors as sel
from readcomics.extractors.aligner import align, align_records
from readcomics.extractors.base import BaseExtractor
from readcomics.extractors.document import (
    node_text,
    parse_document,
    select_attrs,
    select_first_attr,
    select_first_text,
    select_texts,
)
from readcomics.extractors.urls import absolutize
from readcomics.models.comic import ComicChapter, ComicDetails, ComicPage, ComicStatus


class DetailsExtractor(BaseExtractor):
    """
    Comic details from a series page.

    Title, summary, status, release year and type are required: the first
    matching node is used, and a missing one fails the whole call with a
    'schema' error. Category and cover are optional.
    """

    @property
    def name(self) -> str:
        return "comic_details"

    @property
    def log_tag(self) -> str:
        return "[Comic-Details-Parsing-Error]"

    def _extract_impl(self, html: str) -> ComicDetails:
        doc = parse_document(html)

        title = select_first_text(doc, sel.DETAILS_TITLE, "title")
        summary = select_first_text(doc, sel.DETAILS_SUMMARY, "summary")
        status_text = select_first_text(doc, sel.DETAILS_STATUS, "status")
        year_text = select_first_text(doc, sel.DETAILS_YEAR, "release_year")
        comic_type = select_first_text(doc, sel.DETAILS_TYPE, "type")
        cover = select_first_attr(doc, sel.DETAILS_COVER, sel.SRC)
        category_node = doc.select_one(sel.DETAILS_CATEGORY)
        category = node_text(category_node) if category_node is not None else None

        try:
            release_year = int(year_text.strip())
        except ValueError:
            raise MalformedFieldError("release_year", year_text)

        chapter_titles = select_texts(doc, sel.DETAILS_CHAPTERS)
        chapter_links = select_attrs(doc, sel.DETAILS_CHAPTERS, sel.HREF)

        def build(chapter_title: str, chapter_link: str) -> Optional[ComicChapter]:
            link = absolutize(chapter_link)
            if link is None:
                return None
            return ComicChapter(title=chapter_title, link=link)

        chapters = align_records(
            align(chapter_titles, chapter_links),
            build,
            on_abort=self._log_abort("chapter link")
        )

        return ComicDetails(
            title=title,
            summary=summary,
            status=ComicStatus.from_text(status_text),
            release_year=release_year,
            type=comic_type,
            category=category,
            cover_url=absolutize(cover),
            chapters=chapters,
        )


class ChapterPagesExtractor(BaseExtractor):
    """
    Page images of a chapter.

    Image urls come from the lazy-loading data-src attribute and are kept
    verbatim, surrounding whitespace included.
    """

    @property
    def name(self) -> str:
        return "chapter_pages"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Comic-Pages-Error]"

    def _extract_impl(self, html: str) -> List[ComicPage]:
        doc = parse_document(html)
        image_urls = select_attrs(doc, sel.CHAPTER_PAGE_IMAGES, sel.DATA_SRC)
        alt_texts = select_attrs(doc, sel.CHAPTER_PAGE_IMAGES, sel.ALT)
        return [
            ComicPage(alt_text=alt_text, image_url=image_url)
            for image_url, alt_text in align(image_urls, alt_texts)
        ]
