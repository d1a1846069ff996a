"""
Comic Data Models

Immutable Pydantic models for everything the extractors produce.
A model is created fresh for every extraction call and never mutated.

Usage:
    from readcomics.models.comic import ComicSummary, ComicStatus

    comic = ComicSummary(
        name="Batman (2016-)",
        url="https://readcomicsonline.ru/comic/batman-2016",
        thumbnail_url="https://readcomicsonline.ru/uploads/manga/batman-2016/cover/cover_250x350.jpg"
    )
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ComicStatus(str, Enum):
    """Publication status shown in the details table."""
    ONGOING = "ongoing"
    COMPLETED = "completed"

    @classmethod
    def from_text(cls, text: str) -> "ComicStatus":
        """
        Map the raw status text to a status.

        Only the case-sensitive substring "Ongoing" marks a comic as ongoing;
        any other text (including a misdetected one) is COMPLETED.
        """
        return cls.ONGOING if "Ongoing" in text else cls.COMPLETED


class ComicSummary(BaseModel):
    """
    Basic comic listing entry.

    Note: url may point at a specific issue rather than the series page.
    An issue url trails off with a number, e.g.
    https://readcomicsonline.ru/comic/xmen-2021/14 -> issue
    https://readcomicsonline.ru/comic/xmen-2021 -> series
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Comic display name")
    url: str = Field(..., description="Absolute comic page url")
    thumbnail_url: str = Field(..., description="Absolute cover thumbnail url")


class ComicUpdate(ComicSummary):
    """A comic together with its most recently added issue."""
    added_issue_link: str = Field(..., description="Absolute url of the newest issue")
    added_issue_title_number: str = Field(..., description="Issue label, e.g. '#14'")


class WeeklyPack(BaseModel):
    """A weekly upload pack and the comics it contains."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Date label taken from the pack url, e.g. 'aug-31st-2022'")
    comics: List[ComicSummary] = Field(default_factory=list)


class ComicChapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    link: str


class ComicDetails(BaseModel):
    """Everything shown on a comic's series page."""
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    status: ComicStatus
    release_year: int
    type: str
    category: Optional[str] = None
    cover_url: Optional[str] = None
    chapters: List[ComicChapter] = Field(
        default_factory=list,
        description="Chapters in document order (usually newest first)"
    )


class ComicPage(BaseModel):
    """
    A single page image of a chapter.

    image_url is kept exactly as it appears in the markup, including any
    surrounding whitespace.
    """
    model_config = ConfigDict(frozen=True)

    alt_text: str
    image_url: str


class SearchSuggestion(BaseModel):
    """One entry of the search endpoint's JSON payload."""
    value: str
    data: str


class SearchResults(BaseModel):
    """Search endpoint payload: {"suggestions": [{"value": ..., "data": ...}]}."""
    suggestions: List[SearchSuggestion] = Field(default_factory=list)
