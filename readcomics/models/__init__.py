"""
Models Package - Data models and schemas

This package contains the Pydantic models produced by the extractors and
the success/failure container wrapping them.
"""

from .comic import (
    ComicStatus,
    ComicSummary,
    ComicUpdate,
    WeeklyPack,
    ComicChapter,
    ComicDetails,
    ComicPage,
    SearchSuggestion,
    SearchResults,
)
from .categories import ComicCategory
from .extraction_result import ExtractionResult

__all__ = [
    'ComicStatus',
    'ComicSummary',
    'ComicUpdate',
    'WeeklyPack',
    'ComicChapter',
    'ComicDetails',
    'ComicPage',
    'SearchSuggestion',
    'SearchResults',
    'ComicCategory',
    'ExtractionResult',
]
