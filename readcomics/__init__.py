"""
readcomics - Scraping client for the readcomicsonline.ru comic aggregator

Fetches the site's pages and turns them into typed records wrapped in an
ExtractionResult.
"""

from .client import ReadComics, ReadComicsClient
from .models import (
    ComicCategory,
    ComicChapter,
    ComicDetails,
    ComicPage,
    ComicStatus,
    ComicSummary,
    ComicUpdate,
    ExtractionResult,
    WeeklyPack,
)

__version__ = "1.0.0"

__all__ = [
    'ReadComics',
    'ReadComicsClient',
    'ComicCategory',
    'ComicChapter',
    'ComicDetails',
    'ComicPage',
    'ComicStatus',
    'ComicSummary',
    'ComicUpdate',
    'ExtractionResult',
    'WeeklyPack',
]
