"""
Pytest Configuration and Fixtures

Provides common fixtures for all tests including mocked services,
configurations, and sample pages shaped like the site's markup.
"""

import pytest
from unittest.mock import Mock
from typing import List, Tuple
import os

# Set test environment variables before importing app modules
os.environ["READCOMICS_LOG_LEVEL"] = "WARNING"
os.environ.pop("READCOMICS_LOGGING_URL", None)

from readcomics.core.config import Settings
from readcomics.services.logging_service import LoggingService


BASE = "https://readcomicsonline.ru"


def _cover(slug: str) -> str:
    return f"{BASE}/uploads/manga/{slug}/cover/cover_250x350.jpg"


@pytest.fixture
def mock_settings():
    """Provide test configuration settings."""
    return Settings(
        base_url=f"{BASE}/",
        max_latest_page=10,
        request_timeout=5.0,
        logging_url=None,
        api_host="127.0.0.1",
        api_port=8000,
    )


@pytest.fixture
def mock_logger():
    """Provide mock logging service."""
    logger = Mock(spec=LoggingService)
    logger.log = Mock()
    logger.status = Mock()
    logger.error = Mock()
    return logger


@pytest.fixture
def cover():
    """Expected cover thumbnail url for a slug."""
    return _cover


# =============================================================================
# PAGE BUILDERS
# =============================================================================

@pytest.fixture
def hot_updates_page():
    """
    Build a home page schedule.

    Each entry is (name, slug, issue); thumbnails are protocol-relative
    like on the live site.
    """
    def build(entries: List[Tuple[str, str, str]]) -> str:
        items = "".join(
            f"""
            <div class="schedule-item">
              <div class="schedule-avatar">
                <a href="{BASE}/comic/{slug}"><img src="//readcomicsonline.ru/uploads/manga/{slug}/cover/cover_250x350.jpg"></a>
              </div>
              <div class="schedule-name"><a href="{BASE}/comic/{slug}">{name}</a></div>
              <a class="schedule-add" href="{BASE}/comic/{slug}/{issue}">#{issue}</a>
            </div>
            """
            for name, slug, issue in entries
        )
        return f"<html><body><div class='schedule'>{items}</div></body></html>"
    return build


@pytest.fixture
def latest_page():
    """
    Build a latest-release page.

    Each entry is (name, comic_url, issue); comic_url is used verbatim so
    tests can plant non-https links.
    """
    def build(entries: List[Tuple[str, str, str]]) -> str:
        items = "".join(
            f"""
            <div class="manga-item">
              <h3 class="manga-heading"><a href="{comic_url}">{name}</a></h3>
              <h6 class="events-subtitle"><a href="{comic_url}/{issue}">#{issue}</a></h6>
            </div>
            """
            for name, comic_url, issue in entries
        )
        return f"<html><body><div class='mangalist'>{items}</div></body></html>"
    return build


@pytest.fixture
def popular_page():
    """Build a popular list. Each entry is (name, comic_url)."""
    def build(entries: List[Tuple[str, str]]) -> str:
        items = "".join(
            f"""
            <li class="list-group-item">
              <div class="media-body">
                <h5 class="media-heading"><a href="{url}">{name}</a></h5>
              </div>
            </li>
            """
            for name, url in entries
        )
        return f"<html><body><ul class='list-group'>{items}</ul></body></html>"
    return build


@pytest.fixture
def category_page():
    """Build a category listing. Each entry is (name, comic_url, thumbnail_src)."""
    def build(entries: List[Tuple[str, str, str]]) -> str:
        items = "".join(
            f"""
            <div class="media">
              <div class="media-left">
                <a href="{url}"><img src="{thumbnail}"></a>
              </div>
              <div class="media-body">
                <h5 class="media-heading"><a class="chart-title" href="{url}">{name}</a></h5>
              </div>
            </div>
            """
            for name, url, thumbnail in entries
        )
        return f"<html><body><div class='content'>{items}</div></body></html>"
    return build


@pytest.fixture
def weekly_home_page():
    """Build a home page linking to weekly upload posts."""
    def build(labels: List[str]) -> str:
        items = "".join(
            f"""
            <div class="manganews">
              <h3 class="manga-heading"><a href="{BASE}/news/weekly-comic-upload-{label}">Weekly Comic Upload {label}</a></h3>
            </div>
            """
            for label in labels
        )
        return f"<html><body>{items}</body></html>"
    return build


@pytest.fixture
def weekly_pack_page():
    """Build a weekly upload post. Each entry is (name, issue_link)."""
    def build(entries: List[Tuple[str, str]]) -> str:
        items = "".join(f'<li><a href="{link}">{name}</a></li>' for name, link in entries)
        return f"""
        <html><body>
          <div class="news-content">
            <p>This week's uploads:</p>
            <ul>{items}</ul>
          </div>
        </body></html>
        """
    return build


@pytest.fixture
def details_page():
    """Build a series page. Chapters are (title, href) pairs."""
    def build(
        title: str = "X-Men (2021-)",
        comic_type: str = "Marvel",
        status: str = "Ongoing",
        year: str = "2022",
        category: str = "Marvel",
        summary: str = "Mutants on the front line.",
        chapters: List[Tuple[str, str]] = (),
        include_table: bool = True,
    ) -> str:
        # Without the dl.dl-horizontal wrapper none of the table fields match
        table_open = '<dl class="dl-horizontal">' if include_table else '<div class="info">'
        table_close = "</dl>" if include_table else "</div>"
        chapter_items = "".join(
            f'<li><h5 class="chapter-title-rtl"><a href="{href}">{chapter_title}</a></h5></li>'
            for chapter_title, href in chapters
        )
        return f"""
        <html><body>
          <h2 class="listmanga-header">{title}</h2>
          <div class="boxed"><img class="img-responsive" src="//readcomicsonline.ru/uploads/manga/xmen-2021/cover/cover_250x350.jpg"></div>
          {table_open}
            <dt>Type</dt><dd>{comic_type}</dd>
            <dt>Status</dt><dd><span class="label">{status}</span></dd>
            <dt>Release</dt><dd>{year}</dd>
            <dt>Category</dt><dd><a href="{BASE}/comic-list/category/marvel-comics">{category}</a></dd>
          {table_close}
          <div class="manga"><h5>Summary</h5><p>{summary}</p></div>
          <ul class="chapters">{chapter_items}</ul>
        </body></html>
        """
    return build


@pytest.fixture
def chapter_pages_page():
    """Build a chapter reader page. Each entry is (data_src, alt) kept verbatim."""
    def build(images: List[Tuple[str, str]]) -> str:
        items = "".join(
            f'<img class="img-responsive" data-src="{src}" alt="{alt}" />'
            for src, alt in images
        )
        return f"<html><body><div id='all'>{items}</div></body></html>"
    return build


@pytest.fixture
def xmen_chapters():
    """Four chapters in document order, newest first."""
    return [
        (f"X-Men (2021-) #{number}", f"{BASE}/comic/xmen-2021/{number}")
        for number in (4, 3, 2, 1)
    ]
