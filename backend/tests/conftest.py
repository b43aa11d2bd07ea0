"""Pytest fixtures for news search and view tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from newsfinder.config import Settings
from newsfinder.news.schemas import Article, SearchParameters


@pytest.fixture
def settings():
    return Settings(
        news_api_key="test-key",
        news_api_url="https://newsapi.example/v2/everything",
        request_timeout=5.0,
        max_sessions=10,
        _env_file=None,
    )


@pytest.fixture
def raw_article_a():
    return {
        "source": {"id": None, "name": "Example News"},
        "author": "Jane Doe",
        "title": "Markets rally on rate news",
        "description": "Stocks rose sharply.",
        "url": "https://example.com/a",
        "publishedAt": "2026-02-01T10:00:00Z",
    }


@pytest.fixture
def raw_article_b():
    return {
        "source": {"id": "other", "name": "Other News"},
        "author": None,
        "title": "Rates hold steady",
        "description": None,
        "url": "https://example.com/b",
        "publishedAt": "2026-01-15T23:30:00Z",
    }


@pytest.fixture
def success_body(raw_article_a, raw_article_b):
    return {"status": "ok", "totalResults": 2, "articles": [raw_article_a, raw_article_b]}


@pytest.fixture
def empty_body():
    return {"status": "ok", "totalResults": 0, "articles": []}


@pytest.fixture
def article_a(raw_article_a):
    return Article.from_api(raw_article_a)


@pytest.fixture
def keyword_params():
    return SearchParameters(keywords="AI & ethics", language="en", sort_order="relevancy")


class FakeBackend:
    """SearchBackend returning canned bodies (or raising) in order."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.calls: list[SearchParameters] = []

    def get_json(self, params: SearchParameters) -> Any:
        self.calls.append(params)
        result = self.responses.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def fake_backend_cls():
    return FakeBackend


@pytest.fixture
def mock_session():
    """requests.Session stand-in; set .get.return_value or .get.side_effect per test."""
    return MagicMock()
