"""
URL Normalizer

Derives thumbnail and absolute urls from links and slugs found in the markup.

Rules, in priority order:
1. A link that does not start with the https prefix yields no thumbnail.
2. Otherwise the thumbnail is built from the segment after '/comic/'.
3. Protocol-relative urls ('//host/...') get 'https:' prepended literally.
4. Weekly-pack thumbnails come from the issue link with its trailing
   segment stripped, then rule 2.
"""

from typing import Optional
from urllib.parse import urljoin

from readcomics.extractors.selectors import (
    BASE_URL,
    COMIC_PREFIX,
    COMIC_URL_TEMPLATE,
    HTTPS_PREFIX,
    THUMBNAIL_TEMPLATE,
    WEEKLY_UPLOAD_PREFIX,
)


def _substring_after(value: str, delimiter: str) -> str:
    """Part after the first delimiter, or the whole value when it is absent."""
    _, found, rest = value.partition(delimiter)
    return rest if found else value


def _substring_before_last(value: str, delimiter: str) -> str:
    """Part before the last delimiter, or the whole value when it is absent."""
    head, found, _ = value.rpartition(delimiter)
    return head if found else value


def thumbnail_from_slug(slug: str) -> str:
    return THUMBNAIL_TEMPLATE.format(slug=slug)


def comic_url_from_slug(slug: str) -> str:
    return COMIC_URL_TEMPLATE.format(slug=slug)


def thumbnail_from_link(link: str) -> Optional[str]:
    """Cover thumbnail for a comic link, None when the link is not https."""
    if not link.startswith(HTTPS_PREFIX):
        return None
    return thumbnail_from_slug(_substring_after(link, COMIC_PREFIX))


def thumbnail_from_issue_link(link: str) -> Optional[str]:
    """Cover thumbnail for an issue link such as .../comic/<slug>/4."""
    return thumbnail_from_link(_substring_before_last(link, "/"))


def absolutize(url: Optional[str], base_url: str = BASE_URL) -> Optional[str]:
    """
    Turn a scraped url into an absolute https url.

    'https://...' is returned unchanged, '//...' gets 'https:' prepended and
    a root-relative '/path' is joined to base_url. Anything else (empty,
    'http://', bare relative paths) yields None.
    """
    if not url:
        return None
    if url.startswith("https://"):
        return url
    if url.startswith("//"):
        return f"https:{url}"
    if url.startswith("/"):
        return urljoin(base_url, url)
    return None


def issue_number_label(issue_link: str) -> str:
    """'#' plus the trailing path segment, e.g. '.../xmen-2021/14' -> '#14'."""
    return f"#{issue_link.rsplit('/', 1)[-1]}"


def weekly_pack_label(pack_link: str) -> str:
    """Date label of a weekly pack, e.g. '.../weekly-comic-upload-aug-31st-2022' -> 'aug-31st-2022'."""
    return _substring_after(pack_link, WEEKLY_UPLOAD_PREFIX)
