"""Tests for the result classifier."""

from datetime import datetime, timezone

import pytest

from newsfinder.news.classifier import classify_response
from newsfinder.news.schemas import EMPTY_MESSAGE, ERROR_MESSAGE, Article, OutcomeKind


class TestEmpty:
    def test_zero_results_without_articles(self):
        outcome = classify_response({"totalResults": 0})
        assert outcome.kind is OutcomeKind.EMPTY
        assert outcome.message == EMPTY_MESSAGE
        assert outcome.articles == []

    def test_zero_results_with_articles_field(self, raw_article_a):
        outcome = classify_response({"totalResults": 0, "articles": [raw_article_a]})
        assert outcome.kind is OutcomeKind.EMPTY

    def test_positive_count_but_empty_list(self):
        outcome = classify_response({"status": "ok", "totalResults": 12, "articles": []})
        assert outcome.kind is OutcomeKind.EMPTY


class TestSuccess:
    def test_articles_in_received_order(self, success_body):
        outcome = classify_response(success_body)
        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.message is None
        assert [a.url for a in outcome.articles] == ["https://example.com/a", "https://example.com/b"]

    def test_article_fields_mapped(self, success_body):
        first = classify_response(success_body).articles[0]
        assert first.title == "Markets rally on rate news"
        assert first.description == "Stocks rose sharply."
        assert first.source_name == "Example News"
        assert first.author == "Jane Doe"
        assert first.published_at == datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc)

    def test_missing_author_displays_unknown(self, raw_article_b):
        del raw_article_b["author"]
        article = classify_response({"totalResults": 1, "articles": [raw_article_b]}).articles[0]
        assert article.author is None
        assert article.display_author == "Unknown"
        assert article.title == "Rates hold steady"
        assert article.source_name == "Other News"

    def test_articles_without_total_count(self, raw_article_a):
        outcome = classify_response({"articles": [raw_article_a]})
        assert outcome.kind is OutcomeKind.SUCCESS

    def test_incomplete_items_still_succeed_in_order(self, raw_article_a, raw_article_b):
        untitled = dict(raw_article_b, title=None)
        undated = dict(raw_article_a, publishedAt="yesterday-ish", url="https://example.com/c")
        outcome = classify_response({"totalResults": 3, "articles": [raw_article_a, untitled, undated]})

        assert outcome.kind is OutcomeKind.SUCCESS
        assert [a.url for a in outcome.articles] == [
            "https://example.com/a",
            "https://example.com/b",
            "https://example.com/c",
        ]
        assert outcome.articles[1].title == ""
        assert outcome.articles[1].source_name == "Other News"
        assert outcome.articles[2].published_at is None
        assert outcome.articles[2].title == "Markets rally on rate news"

    def test_missing_source_renders_blank(self, raw_article_a):
        item = dict(raw_article_a, source=None, url=None)
        article = classify_response({"totalResults": 1, "articles": [item]}).articles[0]
        assert article.source_name == ""
        assert article.url == ""


class TestError:
    @pytest.mark.parametrize("body", [None, [], "oops", 42])
    def test_non_object_body(self, body):
        outcome = classify_response(body)
        assert outcome.kind is OutcomeKind.ERROR
        assert outcome.message == ERROR_MESSAGE

    def test_remote_error_body(self):
        body = {"status": "error", "code": "apiKeyMissing", "message": "Your API key is missing."}
        assert classify_response(body).kind is OutcomeKind.ERROR

    def test_no_count_no_articles(self):
        assert classify_response({"status": "ok"}).kind is OutcomeKind.ERROR

    def test_false_total_is_not_zero(self):
        assert classify_response({"totalResults": False}).kind is OutcomeKind.ERROR

    def test_non_dict_article_item(self):
        outcome = classify_response({"totalResults": 1, "articles": ["not an article"]})
        assert outcome.kind is OutcomeKind.ERROR


def test_article_is_immutable(article_a: Article):
    with pytest.raises(Exception):
        article_a.title = "changed"
