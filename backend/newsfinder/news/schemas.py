"""
News search: Pydantic schemas for search parameters, articles and search outcomes.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# ----- Search parameters -----


class SearchScope(str, Enum):
    """Which article fields the keywords are matched against. ALL sends no `searchIn`."""

    TITLE = "title"
    DESCRIPTION = "description"
    CONTENT = "content"
    ALL = "all"


class Language(str, Enum):
    """Languages the endpoint can filter on."""

    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    HEBREW = "he"
    ITALIAN = "it"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SWEDISH = "sv"
    URDU = "ud"
    CHINESE = "zh"


class SortOrder(str, Enum):
    PUBLISHED_AT = "publishedAt"
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"


class SearchParameters(BaseModel):
    """User-editable filter set sent with each query. Blank values mean "not set"."""

    model_config = ConfigDict(frozen=True)

    keywords: Optional[str] = Field(default=None, description="Keywords or phrases to search for")
    search_scope: Optional[SearchScope] = Field(default=None, description="Restrict matching to one field")
    from_date: Optional[str] = Field(default=None, description="Oldest publish date, passed through as typed")
    to_date: Optional[str] = Field(default=None, description="Newest publish date, passed through as typed")
    language: Optional[Language] = None
    sort_order: SortOrder = SortOrder.PUBLISHED_AT

    @field_validator("keywords", "search_scope", "from_date", "to_date", "language", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("sort_order", mode="before")
    @classmethod
    def blank_sort_to_default(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return SortOrder.PUBLISHED_AT
        return v


# ----- Articles -----


class Article(BaseModel):
    """One news item returned by the endpoint. Missing display fields render blank, not as errors."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: Optional[str] = None
    published_at: Optional[datetime] = None
    source_name: str = ""
    author: Optional[str] = None
    url: str = ""

    @field_validator("title", "source_name", "url", mode="before")
    @classmethod
    def none_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("published_at", mode="wrap")
    @classmethod
    def unparseable_date_to_none(cls, v: Any, handler) -> Optional[datetime]:
        try:
            return handler(v)
        except ValidationError:
            return None

    @property
    def display_author(self) -> str:
        return self.author or "Unknown"

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Article":
        """Build from one entry of the endpoint's `articles` array."""
        source = item.get("source") or {}
        return cls(
            title=item.get("title"),
            description=item.get("description"),
            published_at=item.get("publishedAt"),
            source_name=source.get("name") if isinstance(source, dict) else None,
            author=item.get("author"),
            url=item.get("url"),
        )


# ----- Outcomes -----


class OutcomeKind(str, Enum):
    EMPTY = "empty"
    SUCCESS = "success"
    ERROR = "error"


EMPTY_MESSAGE = "No articles found. Change parameters and try again."
ERROR_MESSAGE = "Error fetching news. Please try again later."


class SearchOutcome(BaseModel):
    """Classification of one search attempt."""

    kind: OutcomeKind
    message: Optional[str] = Field(default=None, description="Modal text for empty and error outcomes")
    articles: list[Article] = Field(default_factory=list, description="Articles in the order received")

    @classmethod
    def empty(cls) -> "SearchOutcome":
        return cls(kind=OutcomeKind.EMPTY, message=EMPTY_MESSAGE)

    @classmethod
    def error(cls) -> "SearchOutcome":
        return cls(kind=OutcomeKind.ERROR, message=ERROR_MESSAGE)

    @classmethod
    def success(cls, articles: list[Article]) -> "SearchOutcome":
        return cls(kind=OutcomeKind.SUCCESS, articles=articles)
