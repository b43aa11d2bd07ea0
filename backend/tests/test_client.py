"""Tests for NewsClient and search_news."""

from unittest.mock import MagicMock

import pytest
import requests

from newsfinder.news.client import NewsClient, search_news
from newsfinder.news.errors import NetworkFailure, ParseFailure
from newsfinder.news.schemas import ERROR_MESSAGE, OutcomeKind, SearchParameters


def _response(status_code: int = 200, body=None, json_error: bool = False):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = body
    return resp


class TestNewsClient:
    @pytest.fixture
    def client(self, settings, mock_session):
        return NewsClient(settings, session=mock_session)

    def test_uses_settings(self, client, settings):
        assert client.api_key == "test-key"
        assert client.base_url == settings.news_api_url
        assert client.timeout == 5.0

    def test_get_json_calls_built_url_with_timeout(self, client, mock_session, keyword_params, success_body):
        mock_session.get.return_value = _response(body=success_body)

        body = client.get_json(keyword_params)

        assert body == success_body
        url = mock_session.get.call_args[0][0]
        assert url == (
            "https://newsapi.example/v2/everything?apiKey=test-key"
            "&q=AI%20%26%20ethics&language=en&sortBy=relevancy"
        )
        assert mock_session.get.call_args[1]["timeout"] == 5.0

    def test_connection_error_is_network_failure(self, client, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(NetworkFailure):
            client.get_json(SearchParameters())

    def test_timeout_is_network_failure(self, client, mock_session):
        mock_session.get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(NetworkFailure):
            client.get_json(SearchParameters())

    def test_non_json_is_parse_failure(self, client, mock_session):
        mock_session.get.return_value = _response(status_code=502, json_error=True)
        with pytest.raises(ParseFailure):
            client.get_json(SearchParameters())

    def test_http_error_status_returns_body(self, client, mock_session):
        error_body = {"status": "error", "code": "apiKeyInvalid", "message": "Bad key"}
        mock_session.get.return_value = _response(status_code=401, body=error_body)
        assert client.get_json(SearchParameters()) == error_body


class TestSearchNews:
    def test_success(self, settings, mock_session, success_body):
        mock_session.get.return_value = _response(body=success_body)
        outcome = search_news(SearchParameters(keywords="rates"), NewsClient(settings, session=mock_session))
        assert outcome.kind is OutcomeKind.SUCCESS
        assert len(outcome.articles) == 2

    def test_network_failure_maps_to_error(self, settings, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("down")
        outcome = search_news(SearchParameters(), NewsClient(settings, session=mock_session))
        assert outcome.kind is OutcomeKind.ERROR
        assert outcome.message == ERROR_MESSAGE

    def test_parse_failure_maps_to_error(self, settings, mock_session):
        mock_session.get.return_value = _response(json_error=True)
        outcome = search_news(SearchParameters(), NewsClient(settings, session=mock_session))
        assert outcome.kind is OutcomeKind.ERROR

    def test_remote_error_maps_to_error(self, settings, mock_session):
        mock_session.get.return_value = _response(status_code=401, body={"status": "error", "code": "apiKeyMissing"})
        outcome = search_news(SearchParameters(), NewsClient(settings, session=mock_session))
        assert outcome.kind is OutcomeKind.ERROR
