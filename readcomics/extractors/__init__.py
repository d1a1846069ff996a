"""
Extractors Package - HTML-to-record extraction routines

This package contains the document loader, selector schema, positional
aligner, URL normalizer and one extractor per page type.
"""

from .base import BaseExtractor
from .cache import HotUpdatesCache
from .details import DetailsExtractor, ChapterPagesExtractor
from .listings import (
    LatestUpdatesExtractor,
    HotUpdatesExtractor,
    PopularExtractor,
    CategoryExtractor,
)
from .search import SearchExtractor
from .weekly import WeeklyLinksExtractor, WeeklyPackExtractor

__all__ = [
    'BaseExtractor',
    'HotUpdatesCache',
    'DetailsExtractor',
    'ChapterPagesExtractor',
    'LatestUpdatesExtractor',
    'HotUpdatesExtractor',
    'PopularExtractor',
    'CategoryExtractor',
    'SearchExtractor',
    'WeeklyLinksExtractor',
    'WeeklyPackExtractor',
]
