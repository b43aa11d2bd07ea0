"""
News endpoint client. Reuses a single requests.Session for connection pooling.
"""

import logging
from typing import Any, Optional

import requests

from newsfinder.config import Settings, get_settings
from newsfinder.news.classifier import classify_response
from newsfinder.news.errors import NetworkFailure, NewsFetchError, ParseFailure
from newsfinder.news.query_builder import build_search_url
from newsfinder.news.schemas import SearchOutcome, SearchParameters

logger = logging.getLogger(__name__)

_session: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class NewsClient:
    """Fetches raw search responses from the news endpoint."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        settings = settings or get_settings()
        self.api_key = settings.news_api_key
        self.base_url = settings.news_api_url
        self.timeout = settings.request_timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        return self._session or _get_session()

    def search_url(self, params: SearchParameters) -> str:
        return build_search_url(params, api_key=self.api_key, base_url=self.base_url)

    def get_json(self, params: SearchParameters) -> Any:
        """
        Run one search and return the parsed body.

        HTTP error statuses are not raised: the endpoint describes them in a JSON body,
        which the classifier turns into an Error outcome.

        Raises:
            NetworkFailure: the request could not be completed.
            ParseFailure: the body is not valid JSON.
        """
        url = self.search_url(params)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("News search request failed: %s", e)
            raise NetworkFailure(str(e)) from e

        if response.status_code >= 400:
            logger.warning("News endpoint answered HTTP %s", response.status_code)
        try:
            return response.json()
        except ValueError as e:
            logger.error("News endpoint returned non-JSON body (HTTP %s)", response.status_code)
            raise ParseFailure(str(e)) from e


def search_news(params: SearchParameters, client: Optional[NewsClient] = None) -> SearchOutcome:
    """Fetch and classify in one step; fetch failures become the Error outcome."""
    client = client or NewsClient()
    try:
        body = client.get_json(params)
    except NewsFetchError:
        return SearchOutcome.error()
    return classify_response(body)
