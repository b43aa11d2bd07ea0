"""
View state: one immutable value per session, replaced wholesale by each transition.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from newsfinder.news.schemas import Article, SearchParameters


class Screen(str, Enum):
    SEARCH = "search"
    LOADING = "loading"
    RESULTS = "results"


class Modal(BaseModel):
    """Blocking overlay for empty-result and error messages."""

    model_config = ConfigDict(frozen=True)

    message: str


class ViewState(BaseModel):
    """
    Everything the page renders from.

    Invariants: the screen only becomes RESULTS on a non-empty successful search, and
    `articles` is empty after a clear. The modal is independent of the screen.
    """

    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.SEARCH
    modal: Optional[Modal] = None
    parameters: SearchParameters = Field(default_factory=SearchParameters)
    articles: tuple[Article, ...] = ()


def initial_state() -> ViewState:
    return ViewState()
