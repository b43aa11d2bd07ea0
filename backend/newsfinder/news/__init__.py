"""News search: query building, fetching and response classification."""

from .classifier import classify_response
from .client import NewsClient, search_news
from .errors import NetworkFailure, NewsFetchError, ParseFailure
from .query_builder import build_search_url
from .schemas import (
    EMPTY_MESSAGE,
    ERROR_MESSAGE,
    Article,
    Language,
    OutcomeKind,
    SearchOutcome,
    SearchParameters,
    SearchScope,
    SortOrder,
)

__all__ = [
    "build_search_url",
    "classify_response",
    "search_news",
    "NewsClient",
    "NewsFetchError",
    "NetworkFailure",
    "ParseFailure",
    "Article",
    "Language",
    "OutcomeKind",
    "SearchOutcome",
    "SearchParameters",
    "SearchScope",
    "SortOrder",
    "EMPTY_MESSAGE",
    "ERROR_MESSAGE",
]
