"""
Weekly Pack Extractors

The home page links to weekly upload posts; every post lists the issues
added that week. WeeklyLinksExtractor reads the post links, and
WeeklyPackExtractor reads the comics of a single post.
"""

from typing import List, Optional

from readcomics.extractors import selectors as sel
from readcomics.extractors.aligner import align, align_records
from readcomics.extractors.base import BaseExtractor
from readcomics.extractors.document import parse_document, select_attrs, select_texts
from readcomics.extractors.urls import absolutize, thumbnail_from_issue_link
from readcomics.models.comic import ComicSummary


class WeeklyLinksExtractor(BaseExtractor):
    """Links of the weekly upload posts, newest first."""

    @property
    def name(self) -> str:
        return "weekly_upload_links"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Weekly-Uploaded-Comics-Links-Error]"

    def _extract_impl(self, html: str) -> List[str]:
        doc = parse_document(html)
        links = select_attrs(doc, sel.WEEKLY_UPLOAD_LINKS, sel.HREF)
        return align_records(
            align(links),
            absolutize,
            on_abort=self._log_abort("weekly upload link")
        )


class WeeklyPackExtractor(BaseExtractor):
    """Comics of one weekly upload post."""

    @property
    def name(self) -> str:
        return "weekly_pack"

    @property
    def log_tag(self) -> str:
        return "[Parsing-Weekly-Comic-Packs-Error]"

    def _extract_impl(self, html: str) -> List[ComicSummary]:
        doc = parse_document(html)
        comic_links = select_attrs(doc, sel.WEEKLY_PACK_COMICS, sel.HREF)
        comic_names = select_texts(doc, sel.WEEKLY_PACK_COMICS)
        # Pack entries link to an issue; the cover belongs to the parent comic
        thumbnail_urls = [thumbnail_from_issue_link(link) for link in comic_links]

        def build(comic_name: str, thumbnail_url: Optional[str], comic_link: str) -> Optional[ComicSummary]:
            if thumbnail_url is None:
                self.logger.log(f"thumbnail url for comic {comic_name} was null")
                return None
            return ComicSummary(name=comic_name, url=comic_link, thumbnail_url=thumbnail_url)

        return align_records(align(comic_names, thumbnail_urls, comic_links), build)
